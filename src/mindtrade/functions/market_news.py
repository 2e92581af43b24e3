"""Market news proxy (Financial Modeling Prep)."""

import logging
from typing import Any, Optional

import requests

from mindtrade.core.exceptions import ConfigurationError, RemoteCallError, ValidationError
from mindtrade.core.timezone import parse_date
from mindtrade.functions.base import ProxyFunction

logger = logging.getLogger(__name__)

ACTIONS = ("general-news", "stock-news", "search-stock-news")


class MarketNewsFunction(ProxyFunction):
    """
    Actions:
        general-news        FMP articles feed (page, limit, from, to)
        stock-news          news for ``symbols`` (comma-separated tickers)
        search-stock-news   same endpoint as stock-news
    """

    name = "market-news"
    default_field = "data"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://financialmodelingprep.com/api/v3",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def run(self, body: dict) -> Any:
        if not self._api_key:
            raise ConfigurationError("FMP API key not configured")

        action = body.get("action")
        try:
            page = int(body.get("page", 0))
            limit = int(body.get("limit", 20))
        except (TypeError, ValueError):
            raise ValidationError("page and limit must be integers")

        if action == "general-news":
            url = f"{self._base_url}/fmp/articles"
            params: dict[str, Any] = {"page": page, "size": limit}
        elif action in ("stock-news", "search-stock-news"):
            tickers = self._tickers(self.require(body, "symbols"))
            url = f"{self._base_url}/stock_news"
            params = {"tickers": tickers, "page": page, "limit": limit}
        else:
            raise ValidationError(f"Invalid action. Use: {', '.join(ACTIONS)}")

        for bound in ("from", "to"):
            if body.get(bound):
                params[bound] = self._date_param(body[bound], bound)
        params["apikey"] = self._api_key

        logger.info("Fetching FMP news: action=%s page=%s limit=%s", action, page, limit)
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            raise RemoteCallError("FMP news", str(exc)) from exc

    @staticmethod
    def _date_param(value: Any, name: str) -> str:
        try:
            return parse_date(value).isoformat()
        except (TypeError, ValueError, OverflowError):
            raise ValidationError(f"{name} must be a date (YYYY-MM-DD)")

    @staticmethod
    def _tickers(symbols: Any) -> str:
        items = symbols if isinstance(symbols, (list, tuple)) else [symbols]
        if not items or not all(isinstance(item, str) and item.strip() for item in items):
            raise ValidationError("symbols must be ticker strings")
        return ",".join(item.strip().upper() for item in items)
