"""Market data provider protocol."""

from typing import Optional, Protocol

from mindtrade.domain.views import Quote


class MarketDataProvider(Protocol):
    """
    Protocol for market data providers.

    Implementations raise RemoteCallError when the upstream call fails and
    return None / omit symbols the upstream does not know.
    """

    def get_quote(self, symbol: str) -> Optional[Quote]:
        """Fetch the latest quote for one ticker or index symbol."""
        ...

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Fetch quotes for multiple symbols.

        Returns dict mapping symbol -> Quote. Missing symbols are omitted.
        """
        ...
