"""Market data service for live quotes used in holdings valuation."""

import logging
from datetime import datetime
from typing import Optional

from mindtrade.core.exceptions import AppError
from mindtrade.core.timezone import utc_now
from mindtrade.domain.views import Quote
from mindtrade.providers.market_data_provider import MarketDataProvider

logger = logging.getLogger(__name__)


class MarketDataService:
    """
    Service for fetching quotes.

    Wraps a provider with a short per-symbol TTL and graceful degradation:
    on provider failure the last known quotes are returned.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        cache_ttl_seconds: int = 60,
    ):
        self._provider = provider
        self._cache_ttl = cache_ttl_seconds
        self._quote_cache: dict[str, tuple[Quote, datetime]] = {}

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Fetch quotes for symbols with caching.

        Returns dict mapping symbol -> Quote; symbols the provider cannot
        price are omitted.
        """
        if not symbols:
            return {}

        symbols = list(dict.fromkeys(s.upper() for s in symbols))
        now = utc_now()

        fresh = {s: self._quote_cache[s][0] for s in symbols if self._is_fresh(s, now)}
        missing = [s for s in symbols if s not in fresh]
        if not missing:
            return fresh

        try:
            new_quotes = self._provider.get_quotes(missing)
        except AppError as exc:
            logger.warning("Quote refresh failed, serving cached prices: %s", exc.message)
            new_quotes = {}

        for symbol, quote in new_quotes.items():
            self._quote_cache[symbol] = (quote, now)

        result: dict[str, Quote] = {}
        for symbol in symbols:
            if symbol in fresh:
                result[symbol] = fresh[symbol]
            elif symbol in new_quotes:
                result[symbol] = new_quotes[symbol]
            elif symbol in self._quote_cache:
                result[symbol] = self._quote_cache[symbol][0]
        return result

    def get_quote(self, symbol: str) -> Optional[Quote]:
        return self.get_quotes([symbol]).get(symbol.upper())

    def _is_fresh(self, symbol: str, now: datetime) -> bool:
        cached = self._quote_cache.get(symbol)
        if cached is None:
            return False
        return (now - cached[1]).total_seconds() < self._cache_ttl
