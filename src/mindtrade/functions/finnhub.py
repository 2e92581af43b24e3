"""Finnhub proxy: company news, market news, press releases and the earnings calendar."""

import logging
from typing import Any, Optional

import requests

from mindtrade.core.exceptions import ConfigurationError, RemoteCallError, ValidationError
from mindtrade.core.timezone import parse_date
from mindtrade.functions.base import ProxyFunction

logger = logging.getLogger(__name__)

ACTIONS = ("company-news", "market-news", "earnings", "press-releases")

NEWS_CATEGORIES = ("general", "forex", "crypto", "merger")


class FinnhubFunction(ProxyFunction):
    """
    Actions:
        company-news     news for ``symbol`` between ``from`` and ``to``
        market-news      market-wide headlines for ``category`` (default general)
        earnings         earnings calendar between ``from`` and ``to``
        press-releases   press releases for ``symbol`` between ``from`` and ``to``
    """

    name = "finnhub-api"
    default_field = "data"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://finnhub.io/api/v1",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def run(self, body: dict) -> Any:
        if not self._api_key:
            raise ConfigurationError("Finnhub API key not configured")

        action = body.get("action")
        if action == "company-news":
            path = "/company-news"
            params = {"symbol": self.require_ticker(body, "symbol"), **self._date_range(body)}
        elif action == "market-news":
            category = body.get("category") or "general"
            if category not in NEWS_CATEGORIES:
                raise ValidationError(f"category must be one of: {', '.join(NEWS_CATEGORIES)}")
            path = "/news"
            params = {"category": category}
        elif action == "earnings":
            path = "/calendar/earnings"
            params = self._date_range(body)
        elif action == "press-releases":
            path = "/press-releases"
            params = {"symbol": self.require_ticker(body, "symbol"), **self._date_range(body)}
        else:
            raise ValidationError(f"Invalid action. Use: {', '.join(ACTIONS)}")
        params["token"] = self._api_key

        logger.info("Fetching Finnhub %s", action)
        try:
            response = self._session.get(f"{self._base_url}{path}", params=params, timeout=self._timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            raise RemoteCallError("Finnhub", str(exc)) from exc

    def _date_range(self, body: dict) -> dict[str, str]:
        bounds = {}
        for bound in ("from", "to"):
            value = self.require(body, bound)
            try:
                bounds[bound] = parse_date(value).isoformat()
            except (TypeError, ValueError, OverflowError):
                raise ValidationError(f"{bound} must be a date (YYYY-MM-DD)")
        if bounds["from"] > bounds["to"]:
            raise ValidationError("from must not be after to")
        return bounds
