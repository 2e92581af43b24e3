"""Keyword-based sentiment and relevance, used when AI analysis is unavailable."""

from typing import Iterable

from mindtrade.domain.views import ArticleAnalysis, NewsArticle, Relevance, Sentiment

POSITIVE_WORDS = (
    "growth", "profit", "gain", "success", "increase", "rise", "up",
    "good", "strong", "beat", "exceed", "outperform",
)
NEGATIVE_WORDS = (
    "loss", "decline", "fall", "drop", "down", "weak",
    "bad", "concern", "worry", "miss", "disappoint", "struggle",
)
HIGH_RELEVANCE_KEYWORDS = (
    "earnings", "revenue", "guidance", "acquisition", "merger", "partnership",
    "sec filing", "fda approval", "ceo", "dividend", "buyback", "contract",
    "patent", "regulatory", "investigation", "leadership", "investment",
)
LOW_RELEVANCE_KEYWORDS = (
    "could", "might", "potentially", "expected", "rumored", "analyst believes",
    "experts predict", "sources suggest", "trending", "viral", "shocking",
    "crashes", "skyrockets", "meme",
)


def _count(text: str, words: Iterable[str]) -> int:
    return sum(1 for word in words if word in text)


def analyze_article(article: NewsArticle) -> ArticleAnalysis:
    # Substring match, so "up" also hits "update"
    text = f"{article.title} {article.content}".lower()

    positive = _count(text, POSITIVE_WORDS)
    negative = _count(text, NEGATIVE_WORDS)
    if positive > negative:
        sentiment = Sentiment.POSITIVE
    elif negative > positive:
        sentiment = Sentiment.NEGATIVE
    else:
        sentiment = Sentiment.NEUTRAL

    high = _count(text, HIGH_RELEVANCE_KEYWORDS)
    low = _count(text, LOW_RELEVANCE_KEYWORDS)
    relevance = Relevance.HIGH if high >= 2 and low <= 1 else Relevance.LOW

    return ArticleAnalysis(id=article.id, sentiment=sentiment, relevance=relevance)


def analyze_articles_fallback(articles: Iterable[NewsArticle]) -> list[ArticleAnalysis]:
    """Analyze each article in order."""
    return [analyze_article(article) for article in articles]
