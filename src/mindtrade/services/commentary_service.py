"""AI commentary for a ticker, memoized through the TTL cache."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import requests

from mindtrade.cache.ttl_cache import TTLCache
from mindtrade.core.exceptions import ConfigurationError, RemoteCallError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommentaryPrompt:
    system: str
    user: str


def _head(items: Optional[list], count: int) -> str:
    return json.dumps((items or [])[:count], default=str)


def build_prompt(
    action: str,
    symbol: str,
    financial_data: Optional[list] = None,
    news_data: Optional[list] = None,
    transcript: Optional[str] = None,
) -> CommentaryPrompt:
    """Return the chat prompt for a commentary action."""
    analyst = "You are a professional investment analyst."
    financials = _head(financial_data, 3)
    news = _head(news_data, 5)

    if action == "company-moat":
        return CommentaryPrompt(
            f"{analyst} Provide clear, concise analysis of company competitive advantages (moats).",
            f"Analyze the competitive moat for {symbol} using this financial data: {financials}. "
            "Cover: 1) primary competitive advantages, 2) moat strength (Wide/Narrow/None), "
            "3) sustainability factors. Under 200 words, bullet points.",
        )
    if action == "investment-risks":
        return CommentaryPrompt(
            f"{analyst} Identify and explain key investment risks objectively.",
            f"Identify the top investment risks for {symbol}. Financial data: {financials}. "
            f"Recent news: {news}. Structure as: 1) financial risks, 2) industry/market risks, "
            "3) company-specific risks. Under 200 words, bullet points.",
        )
    if action == "near-term-tailwinds":
        return CommentaryPrompt(
            f"{analyst} Analyze factors that could drive or hinder performance over the next 6-12 months.",
            f"Analyze near-term tailwinds and headwinds for {symbol}. Financial data: {financials}. "
            f"News: {news}. Structure as Tailwinds / Headwinds bullet lists, under 150 words.",
        )
    if action == "long-term-tailwinds":
        return CommentaryPrompt(
            f"{analyst} Analyze factors that could drive or hinder performance over the next 2-5 years.",
            f"Analyze long-term tailwinds and headwinds for {symbol}. Financial data: {financials}. "
            "Structure as Tailwinds / Headwinds bullet lists, under 150 words.",
        )
    if action == "brief-insight":
        return CommentaryPrompt(
            "You are a financial market analyst. Provide brief, actionable insights about what is driving a stock today.",
            f"In 2-3 sentences, explain what is driving {symbol}'s price today. "
            f"Recent financial performance: {_head(financial_data, 1)}.",
        )
    if action == "earnings-highlights":
        if not transcript:
            raise ValidationError("transcript is required for earnings-highlights")
        return CommentaryPrompt(
            f"{analyst} Extract key insights from earnings call transcripts.",
            f"Extract the top 5 highlights from this earnings call transcript for {symbol}: {transcript}. "
            "Focus on financial performance, guidance, strategic initiatives and management commentary. "
            "Numbered list.",
        )
    raise ValidationError(f"Unknown commentary action: {action}")


COMMENTARY_ACTIONS = (
    "company-moat",
    "investment-risks",
    "near-term-tailwinds",
    "long-term-tailwinds",
    "brief-insight",
    "earnings-highlights",
)


class CommentaryGenerator(Protocol):
    """Turns a prompt into generated text."""

    def generate(self, prompt: CommentaryPrompt) -> str:
        ...


class OpenAICommentaryGenerator:
    """Chat-completions client."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gpt-4o-mini",
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def generate(self, prompt: CommentaryPrompt) -> str:
        if not self._api_key:
            raise ConfigurationError("OpenAI API key not configured")

        payload: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": prompt.system},
                {"role": "user", "content": prompt.user},
            ],
            "temperature": 0.7,
            "max_tokens": 2000,
        }
        try:
            response = self._session.post(
                f"{self._base_url}/chat/completions",
                headers={"Authorization": f"Bearer {self._api_key}"},
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
            return response.json()["choices"][0]["message"]["content"]
        except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as exc:
            raise RemoteCallError("OpenAI", str(exc)) from exc


class CommentaryService:
    """
    Generates ticker commentary, serving repeats from the cache.

    Cache key is ``<action>_<SYMBOL>``; the freshness window is the cache's
    default TTL unless ``ttl`` is given.
    """

    def __init__(
        self,
        generator: CommentaryGenerator,
        cache: TTLCache,
        ttl: Optional[float] = None,
    ):
        self._generator = generator
        self._cache = cache
        self._ttl = ttl

    @staticmethod
    def cache_key(action: str, symbol: str) -> str:
        return f"{action}_{symbol.upper()}"

    def get_commentary(
        self,
        action: str,
        symbol: str,
        financial_data: Optional[list] = None,
        news_data: Optional[list] = None,
        transcript: Optional[str] = None,
    ) -> str:
        if not symbol or not symbol.strip():
            raise ValidationError("symbol is required")
        symbol = symbol.strip().upper()
        key = self.cache_key(action, symbol)

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Commentary cache hit for %s", key)
            return cached

        prompt = build_prompt(action, symbol, financial_data, news_data, transcript)
        logger.info("Generating %s commentary for %s", action, symbol)
        text = self._generator.generate(prompt)
        self._cache.set(key, text, self._ttl)
        return text

    def invalidate(self, action: Optional[str] = None, symbol: Optional[str] = None) -> None:
        """Drop one cached commentary, or all of them when no action/symbol is given."""
        if action and symbol:
            self._cache.clear(self.cache_key(action, symbol))
        else:
            self._cache.clear()
