"""Watchlist domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class WatchlistItem:
    """A ticker a user follows without holding it."""

    id: str
    user_id: str
    ticker_symbol: str
    added_at: Optional[datetime] = field(default=None)
