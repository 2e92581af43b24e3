"""Financial Modeling Prep market data provider."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Optional
from urllib.parse import quote as url_quote

import requests

from mindtrade.core.exceptions import ConfigurationError, RemoteCallError
from mindtrade.core.timezone import utc_now
from mindtrade.domain.views import Quote

logger = logging.getLogger(__name__)


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")


class FmpMarketDataProvider:
    """Fetches quotes from FMP's ``/quote/{symbols}`` endpoint."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://financialmodelingprep.com/api/v3",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def get_quote(self, symbol: str) -> Optional[Quote]:
        return self.get_quotes([symbol]).get(symbol.upper())

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        if not symbols:
            return {}
        if not self._api_key:
            raise ConfigurationError("FMP API key not configured")

        joined = ",".join(s.upper() for s in symbols)
        url = f"{self._base_url}/quote/{url_quote(joined, safe=',')}"
        try:
            response = self._session.get(url, params={"apikey": self._api_key}, timeout=self._timeout)
            response.raise_for_status()
            rows = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("FMP quote request for %s failed: %s", joined, exc)
            raise RemoteCallError("FMP", str(exc)) from exc

        if not isinstance(rows, list):
            return {}

        as_of = utc_now()
        quotes: dict[str, Quote] = {}
        for row in rows:
            if not isinstance(row, dict) or not row.get("symbol"):
                continue
            symbol = str(row["symbol"]).upper()
            quotes[symbol] = Quote(
                symbol=symbol,
                price=_to_decimal(row.get("price")),
                change=_to_decimal(row.get("change")),
                change_percentage=_to_decimal(row.get("changesPercentage")),
                name=row.get("name"),
                as_of=as_of,
            )
        return quotes
