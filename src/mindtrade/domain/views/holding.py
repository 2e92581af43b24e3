"""Holding view: a computed position, never persisted."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Holding:
    """Position in one ticker derived from a portfolio's trades."""

    ticker_symbol: str
    shares: Decimal
    avg_price: Decimal
    current_price: Decimal
    company_name: Optional[str] = None

    @property
    def total_value(self) -> Decimal:
        return self.shares * self.current_price

    @property
    def cost_basis(self) -> Decimal:
        return self.shares * self.avg_price

    @property
    def return_percentage(self) -> Decimal:
        """Percent return of current price over average price (0 if no cost)."""
        if self.avg_price == 0:
            return Decimal("0")
        return (self.current_price - self.avg_price) / self.avg_price * Decimal("100")
