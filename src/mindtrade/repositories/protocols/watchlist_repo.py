"""Watchlist repository protocol."""

from typing import Protocol, Optional

from mindtrade.domain.models import WatchlistItem


class WatchlistRepository(Protocol):
    """Interface for watchlist data access."""

    def create(self, item: WatchlistItem) -> WatchlistItem:
        """Persist a new watchlist entry."""
        ...

    def find(self, user_id: str, ticker_symbol: str) -> Optional[WatchlistItem]:
        """Return the user's entry for a ticker, if any."""
        ...

    def list_by_user(self, user_id: str) -> list[WatchlistItem]:
        """List a user's watchlist, most recently added first."""
        ...

    def delete_by_ticker(self, user_id: str, ticker_symbol: str) -> bool:
        """Remove the user's entry for a ticker. Returns False if there was none."""
        ...
