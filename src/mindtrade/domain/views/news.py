"""View models for news articles and their sentiment analysis."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Relevance(str, Enum):
    HIGH = "high"
    LOW = "low"


@dataclass
class NewsArticle:
    id: str
    title: str
    content: str
    ticker: Optional[str] = None
    source: Optional[str] = None


@dataclass
class ArticleAnalysis:
    id: str
    sentiment: Sentiment
    relevance: Relevance
