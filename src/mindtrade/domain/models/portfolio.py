"""Portfolio and Trade domain models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from mindtrade.domain.models.enums import TradeAction


@dataclass
class Portfolio:
    """Named container of trades owned by a single user."""

    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)


@dataclass
class Trade:
    """Executed trade inside a portfolio. Holdings are derived from these."""

    id: str
    portfolio_id: str
    ticker_symbol: str
    action: TradeAction
    shares: Decimal
    price_per_share: Decimal
    trade_date: date
    company_name: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.action, str):
            self.action = TradeAction(self.action)
