"""Domain layer - pure business models with no external dependencies."""

from mindtrade.domain.models import (
    TradeAction,
    EmotionalLabel,
    User,
    Decision,
    Portfolio,
    Trade,
    WatchlistItem,
)

__all__ = [
    "TradeAction",
    "EmotionalLabel",
    "User",
    "Decision",
    "Portfolio",
    "Trade",
    "WatchlistItem",
]
