"""Feature stores: per-feature fetch + local state."""

from mindtrade.stores.base import FeatureStore
from mindtrade.stores.periodic import PeriodicTask
from mindtrade.stores.decisions import DecisionsStore, DecisionCreate
from mindtrade.stores.indices import IndicesStore, DEFAULT_INDICES
from mindtrade.stores.portfolios import PortfoliosStore, TradesStore, TradeCreate
from mindtrade.stores.watchlist import WatchlistStore
from mindtrade.stores.earnings import EarningsStore

__all__ = [
    "FeatureStore",
    "PeriodicTask",
    "DecisionsStore",
    "DecisionCreate",
    "IndicesStore",
    "DEFAULT_INDICES",
    "PortfoliosStore",
    "TradesStore",
    "TradeCreate",
    "WatchlistStore",
    "EarningsStore",
]
