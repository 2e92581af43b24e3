"""Repository layer - data access abstractions and implementations."""

from mindtrade.repositories.protocols import (
    DecisionRepository,
    PortfolioRepository,
    TradeRepository,
    KeyValueStore,
    EnumerableKeyValueStore,
)

__all__ = [
    "DecisionRepository",
    "PortfolioRepository",
    "TradeRepository",
    "KeyValueStore",
    "EnumerableKeyValueStore",
]
