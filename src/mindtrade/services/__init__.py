"""Service layer - business logic orchestration."""

from mindtrade.services.holdings import compute_holdings
from mindtrade.services.market_data_service import MarketDataService
from mindtrade.services.commentary_service import (
    CommentaryService,
    CommentaryGenerator,
    CommentaryPrompt,
    OpenAICommentaryGenerator,
    COMMENTARY_ACTIONS,
    build_prompt,
)
from mindtrade.services.news_analysis import analyze_article, analyze_articles_fallback

__all__ = [
    "compute_holdings",
    "MarketDataService",
    "CommentaryService",
    "CommentaryGenerator",
    "CommentaryPrompt",
    "OpenAICommentaryGenerator",
    "COMMENTARY_ACTIONS",
    "build_prompt",
    "analyze_article",
    "analyze_articles_fallback",
]
