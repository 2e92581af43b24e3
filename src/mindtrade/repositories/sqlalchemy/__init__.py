"""SQLAlchemy repository implementations."""

from mindtrade.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from mindtrade.repositories.sqlalchemy.decision_repo import SqlAlchemyDecisionRepository
from mindtrade.repositories.sqlalchemy.portfolio_repo import (
    SqlAlchemyPortfolioRepository,
    SqlAlchemyTradeRepository,
)
from mindtrade.repositories.sqlalchemy.watchlist_repo import SqlAlchemyWatchlistRepository
from mindtrade.repositories.sqlalchemy.kv_store import SqlAlchemyKeyValueStore

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyDecisionRepository",
    "SqlAlchemyPortfolioRepository",
    "SqlAlchemyTradeRepository",
    "SqlAlchemyWatchlistRepository",
    "SqlAlchemyKeyValueStore",
]
