"""Watchlist feature store."""

import logging
import uuid

from mindtrade.backend.client import BackendClient
from mindtrade.core.exceptions import NotFoundError, ValidationError
from mindtrade.core.timezone import utc_now
from mindtrade.domain.models import WatchlistItem
from mindtrade.stores.base import FeatureStore

logger = logging.getLogger(__name__)


class WatchlistStore(FeatureStore):
    """The signed-in user's watched tickers, most recently added first."""

    def __init__(self, backend: BackendClient):
        super().__init__()
        self._backend = backend
        self.watchlist: list[WatchlistItem] = []

    def refetch(self) -> None:
        try:
            user = self._backend.auth.get_user()
            if user is None:
                self.watchlist = []
                return
            self.watchlist = self._backend.watchlists.list_by_user(user.id)
            self.error = None
        except Exception:
            logger.exception("Error fetching watchlist")
            self.error = "Failed to fetch watchlist"
        finally:
            self.loading = False

    def add_to_watchlist(self, ticker_symbol: str) -> WatchlistItem:
        user = self._backend.auth.require_user()
        ticker = self._normalize(ticker_symbol)
        if self._backend.watchlists.find(user.id, ticker) is not None:
            raise ValidationError(f"{ticker} is already in the watchlist")

        item = WatchlistItem(
            id=str(uuid.uuid4()),
            user_id=user.id,
            ticker_symbol=ticker,
            added_at=utc_now(),
        )
        created = self._backend.watchlists.create(item)
        self.watchlist = [created] + self.watchlist
        logger.info("Added %s to watchlist", ticker)
        return created

    def remove_from_watchlist(self, ticker_symbol: str) -> None:
        user = self._backend.auth.require_user()
        ticker = self._normalize(ticker_symbol)
        if not self._backend.watchlists.delete_by_ticker(user.id, ticker):
            raise NotFoundError("Watchlist entry", ticker)
        self.watchlist = [i for i in self.watchlist if i.ticker_symbol != ticker]

    def is_in_watchlist(self, ticker_symbol: str) -> bool:
        ticker = (ticker_symbol or "").strip().upper()
        return any(i.ticker_symbol == ticker for i in self.watchlist)

    @staticmethod
    def _normalize(ticker_symbol: str) -> str:
        if not ticker_symbol or not ticker_symbol.strip():
            raise ValidationError("Ticker symbol is required")
        return ticker_symbol.strip().upper()
