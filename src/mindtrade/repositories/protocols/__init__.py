"""Repository protocol definitions (interfaces)."""

from mindtrade.repositories.protocols.decision_repo import DecisionRepository
from mindtrade.repositories.protocols.portfolio_repo import PortfolioRepository, TradeRepository
from mindtrade.repositories.protocols.watchlist_repo import WatchlistRepository
from mindtrade.repositories.protocols.kv_store import KeyValueStore, EnumerableKeyValueStore

__all__ = [
    "DecisionRepository",
    "PortfolioRepository",
    "TradeRepository",
    "WatchlistRepository",
    "KeyValueStore",
    "EnumerableKeyValueStore",
]
