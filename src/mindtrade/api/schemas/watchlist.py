"""Pydantic schemas for watchlist endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WatchlistAddRequest(BaseModel):
    ticker_symbol: str = Field(..., min_length=1, max_length=20)


class WatchlistItemResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    ticker_symbol: str
    added_at: Optional[datetime] = None
