"""View models for computed and remote data."""

from mindtrade.domain.views.market import Quote, IndexData
from mindtrade.domain.views.holding import Holding
from mindtrade.domain.views.stats import WeeklyStats, Badge
from mindtrade.domain.views.news import NewsArticle, ArticleAnalysis, Sentiment, Relevance
from mindtrade.domain.views.earnings import EarningsEvent

__all__ = [
    "Quote",
    "IndexData",
    "Holding",
    "WeeklyStats",
    "Badge",
    "NewsArticle",
    "ArticleAnalysis",
    "Sentiment",
    "Relevance",
    "EarningsEvent",
]
