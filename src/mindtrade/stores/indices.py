"""Market indices feature store with periodic refresh."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from mindtrade.domain.views import IndexData
from mindtrade.providers.market_data_provider import MarketDataProvider
from mindtrade.stores.base import FeatureStore
from mindtrade.stores.periodic import PeriodicTask

logger = logging.getLogger(__name__)

DEFAULT_INDICES: tuple[tuple[str, str], ...] = (
    ("^GSPC", "S&P 500"),
    ("^IXIC", "NASDAQ"),
    ("^DJI", "Dow Jones"),
    ("^RUT", "Russell 2000"),
)

DEFAULT_REFRESH_SECONDS = 5 * 60


class IndicesStore(FeatureStore):
    """
    Fetches all index quotes in parallel and replaces ``indices`` wholesale.

    A symbol that fails to load is left out; the rest are still shown.
    ``start()`` loads immediately and then refreshes on a timer until
    ``stop()`` (or leaving the ``with`` block).
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        symbols: Sequence[tuple[str, str]] = DEFAULT_INDICES,
        refresh_interval: float = DEFAULT_REFRESH_SECONDS,
    ):
        super().__init__()
        self._provider = provider
        self._symbols = tuple(symbols)
        self._refresh_interval = refresh_interval
        self._lock = threading.Lock()
        self._task: Optional[PeriodicTask] = None
        self.indices: list[IndexData] = []

    @property
    def refreshing(self) -> bool:
        return self._task is not None and self._task.running

    def refetch(self) -> None:
        with self._lock:
            self.loading = True
            self.error = None
        try:
            with ThreadPoolExecutor(max_workers=max(len(self._symbols), 1)) as pool:
                results = list(pool.map(self._fetch_one, self._symbols))
            fetched = [index for index in results if index is not None]
            with self._lock:
                self.indices = fetched
        except Exception:
            logger.exception("Error fetching indices")
            with self._lock:
                self.error = "Failed to fetch market indices"
        finally:
            with self._lock:
                self.loading = False

    def _fetch_one(self, item: tuple[str, str]) -> Optional[IndexData]:
        symbol, name = item
        try:
            quote = self._provider.get_quote(symbol)
        except Exception as exc:
            logger.error("Error fetching %s: %s", symbol, exc)
            return None
        if quote is None:
            return None
        return IndexData(
            symbol=symbol,
            name=name,
            price=quote.price,
            change=quote.change,
            change_percentage=quote.change_percentage,
        )

    def start(self) -> None:
        """Fetch now and schedule refreshes every ``refresh_interval`` seconds."""
        if self.refreshing:
            return
        self._activated = True
        self.refetch()
        self._task = PeriodicTask(self._refresh_interval, self.refetch, name="index-refresh")
        self._task.start()

    def stop(self) -> None:
        if self._task is not None:
            self._task.stop()
            self._task = None

    def __enter__(self) -> "IndicesStore":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
