"""Pydantic schemas for decision endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from mindtrade.domain.models.enums import TradeAction, EmotionalLabel


class DecisionCreateRequest(BaseModel):
    """Request schema for recording a decision."""

    ticker_symbol: str = Field(..., min_length=1, max_length=20)
    action: TradeAction
    shares: Decimal = Field(..., gt=0)
    price_per_share: Decimal = Field(..., gt=0)
    based_on_fundamentals: bool = False
    fits_strategy: bool = False
    not_reacting_to_news: bool = False
    emotional_state: int = Field(default=50, ge=0, le=100)
    decision_date: Optional[date] = None


class DecisionResponse(BaseModel):
    """Response schema for a single decision."""

    model_config = {"from_attributes": True}

    id: str
    user_id: str
    ticker_symbol: str
    action: TradeAction
    shares: Decimal
    price_per_share: Decimal
    based_on_fundamentals: bool
    fits_strategy: bool
    not_reacting_to_news: bool
    emotional_state: int
    emotional_label: EmotionalLabel
    is_rational: bool
    decision_date: Optional[date] = None
    created_at: Optional[datetime] = None


class DecisionListResponse(BaseModel):
    decisions: list[DecisionResponse]
    count: int


class WeeklyStatsResponse(BaseModel):
    model_config = {"from_attributes": True}

    total_decisions: int
    rational_decisions: int
    rational_percentage: int


class BadgeResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    description: str
    earned: bool
