"""Pydantic schemas for market endpoints."""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field


class IndexResponse(BaseModel):
    model_config = {"from_attributes": True}

    symbol: str
    name: str
    price: Decimal
    change: Decimal
    change_percentage: Decimal


class IndicesResponse(BaseModel):
    indices: list[IndexResponse]
    loading: bool
    error: Optional[str] = None


class CommentaryRequest(BaseModel):
    action: str = Field(..., min_length=1)
    symbol: str = Field(..., min_length=1, max_length=20)
    financial_data: Optional[list[Any]] = None
    news_data: Optional[list[Any]] = None
    transcript: Optional[str] = None


class CommentaryResponse(BaseModel):
    action: str
    symbol: str
    content: str


class ArticleRequest(BaseModel):
    id: str
    title: str
    content: str = ""
    ticker: Optional[str] = None
    source: Optional[str] = None


class SentimentRequest(BaseModel):
    articles: list[ArticleRequest]


class ArticleAnalysisResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    sentiment: str
    relevance: str


class SentimentResponse(BaseModel):
    results: list[ArticleAnalysisResponse]


class EarningsEventResponse(BaseModel):
    model_config = {"from_attributes": True}

    symbol: str
    date: str
    hour: Optional[str] = None
    quarter: Optional[int] = None
    year: Optional[int] = None
    eps_actual: Optional[float] = None
    eps_estimate: Optional[float] = None
    revenue_actual: Optional[float] = None
    revenue_estimate: Optional[float] = None


class EarningsResponse(BaseModel):
    earnings: list[EarningsEventResponse]
    error: Optional[str] = None
