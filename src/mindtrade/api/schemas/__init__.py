"""Pydantic schemas for API request/response."""

from mindtrade.api.schemas.decision import (
    DecisionCreateRequest,
    DecisionResponse,
    DecisionListResponse,
    WeeklyStatsResponse,
    BadgeResponse,
)
from mindtrade.api.schemas.portfolio import (
    PortfolioCreateRequest,
    PortfolioResponse,
    TradeCreateRequest,
    TradeResponse,
    HoldingResponse,
    HoldingsResponse,
)
from mindtrade.api.schemas.market import (
    IndexResponse,
    IndicesResponse,
    CommentaryRequest,
    CommentaryResponse,
    ArticleRequest,
    SentimentRequest,
    ArticleAnalysisResponse,
    SentimentResponse,
    EarningsEventResponse,
    EarningsResponse,
)
from mindtrade.api.schemas.watchlist import WatchlistAddRequest, WatchlistItemResponse

__all__ = [
    "DecisionCreateRequest",
    "DecisionResponse",
    "DecisionListResponse",
    "WeeklyStatsResponse",
    "BadgeResponse",
    "PortfolioCreateRequest",
    "PortfolioResponse",
    "TradeCreateRequest",
    "TradeResponse",
    "HoldingResponse",
    "HoldingsResponse",
    "IndexResponse",
    "IndicesResponse",
    "CommentaryRequest",
    "CommentaryResponse",
    "ArticleRequest",
    "SentimentRequest",
    "ArticleAnalysisResponse",
    "SentimentResponse",
    "EarningsEventResponse",
    "EarningsResponse",
    "WatchlistAddRequest",
    "WatchlistItemResponse",
]
