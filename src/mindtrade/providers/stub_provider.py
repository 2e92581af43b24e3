"""Stub market data provider for offline/testing use."""

import random
from decimal import Decimal
from typing import Optional

from mindtrade.core.timezone import utc_now
from mindtrade.domain.views import Quote


# (price, change) for common tickers and the dashboard indices
_STUB_PRICES: dict[str, tuple[Decimal, Decimal]] = {
    "AAPL": (Decimal("185.50"), Decimal("1.25")),
    "GOOGL": (Decimal("142.75"), Decimal("1.25")),
    "MSFT": (Decimal("378.25"), Decimal("1.45")),
    "AMZN": (Decimal("178.50"), Decimal("1.25")),
    "TSLA": (Decimal("248.75"), Decimal("-1.35")),
    "NVDA": (Decimal("485.25"), Decimal("2.75")),
    "^GSPC": (Decimal("5431.60"), Decimal("12.40")),
    "^IXIC": (Decimal("17688.88"), Decimal("-35.12")),
    "^DJI": (Decimal("38589.16"), Decimal("57.94")),
    "^RUT": (Decimal("2006.16"), Decimal("-8.33")),
}


class StubMarketDataProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Uses predefined prices for known symbols; generates seeded random prices otherwise.
    """

    def __init__(self, seed: int = 42):
        self._rng = random.Random(seed)

    def get_quote(self, symbol: str) -> Optional[Quote]:
        return self.get_quotes([symbol]).get(symbol.upper())

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        as_of = utc_now()
        result: dict[str, Quote] = {}

        for symbol in symbols:
            upper_symbol = symbol.upper()
            if upper_symbol in _STUB_PRICES:
                price, change = _STUB_PRICES[upper_symbol]
            else:
                price = Decimal(str(50 + self._rng.random() * 200)).quantize(Decimal("0.01"))
                change = Decimal(str((self._rng.random() - 0.5) * 4)).quantize(Decimal("0.01"))

            prev_close = price - change
            change_pct = (change / prev_close * 100).quantize(Decimal("0.01")) if prev_close else Decimal("0")
            result[upper_symbol] = Quote(
                symbol=upper_symbol,
                price=price,
                change=change,
                change_percentage=change_pct,
                as_of=as_of,
            )

        return result
