"""Company logo proxy (LogoKit)."""

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from mindtrade.core.exceptions import ConfigurationError, RemoteCallError
from mindtrade.functions.base import ProxyFunction

logger = logging.getLogger(__name__)


class CompanyLogoFunction(ProxyFunction):
    """Resolves a ticker to a LogoKit image URL after checking it exists."""

    name = "company-logo"
    default_field = "logoUrl"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://img.logokit.com",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def run(self, body: dict) -> Any:
        if not self._api_key:
            raise ConfigurationError("LogoKit API key not configured")

        symbol = self.require_ticker(body, "symbol")
        token = quote(self._api_key, safe="")
        logo_url = f"{self._base_url}/ticker/{quote(symbol, safe='')}?token={token}"

        logger.info("Fetching logo for %s", symbol)
        try:
            response = self._session.get(logo_url, timeout=self._timeout)
        except requests.RequestException as exc:
            raise RemoteCallError("LogoKit", str(exc)) from exc

        if not response.ok:
            logger.warning("LogoKit returned %s for %s", response.status_code, symbol)
            return {
                "logoUrl": None,
                "symbol": symbol,
                "error": f"Logo not available ({response.status_code})",
            }

        return {"logoUrl": logo_url, "symbol": symbol}
