"""Pydantic schemas for portfolio, trade and holding endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from mindtrade.domain.models.enums import TradeAction


class PortfolioCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class PortfolioResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None


class TradeCreateRequest(BaseModel):
    ticker_symbol: str = Field(..., min_length=1, max_length=20)
    action: TradeAction
    shares: Decimal = Field(..., gt=0)
    price_per_share: Decimal = Field(..., gt=0)
    trade_date: Optional[date] = None
    company_name: Optional[str] = None
    notes: Optional[str] = None


class TradeResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    portfolio_id: str
    ticker_symbol: str
    company_name: Optional[str] = None
    action: TradeAction
    shares: Decimal
    price_per_share: Decimal
    trade_date: date
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class HoldingResponse(BaseModel):
    """Computed position; values reflect the latest available quotes."""

    model_config = {"from_attributes": True}

    ticker_symbol: str
    company_name: Optional[str] = None
    shares: Decimal
    avg_price: Decimal
    current_price: Decimal
    total_value: Decimal
    return_percentage: Decimal


class HoldingsResponse(BaseModel):
    holdings: list[HoldingResponse]
    total_value: Decimal
