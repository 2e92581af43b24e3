"""View models for market data."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Quote:
    """Latest quote for a ticker."""

    symbol: str
    price: Decimal
    change: Decimal
    change_percentage: Decimal
    name: Optional[str] = None
    as_of: Optional[datetime] = None


@dataclass
class IndexData:
    """Snapshot of a market index as shown on the dashboard."""

    symbol: str
    name: str
    price: Decimal
    change: Decimal
    change_percentage: Decimal
