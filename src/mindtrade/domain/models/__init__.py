"""Domain models package."""

from mindtrade.domain.models.enums import TradeAction, EmotionalLabel
from mindtrade.domain.models.user import User
from mindtrade.domain.models.decision import Decision
from mindtrade.domain.models.portfolio import Portfolio, Trade
from mindtrade.domain.models.watchlist import WatchlistItem

__all__ = [
    "TradeAction",
    "EmotionalLabel",
    "User",
    "Decision",
    "Portfolio",
    "Trade",
    "WatchlistItem",
]
