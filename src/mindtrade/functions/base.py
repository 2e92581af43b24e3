"""
Shared request handling for the proxy functions.

A proxy function receives ``{action, ...params}`` as JSON, performs one
outbound call and answers with either the upstream payload or a normalized
``{"error": ..., <default_field>: None}`` body. CORS preflight is answered
with an empty body.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Optional

from mindtrade.core.exceptions import ConfigurationError, RemoteCallError, ValidationError

logger = logging.getLogger(__name__)

TICKER_PATTERN = re.compile(r"^[A-Z0-9^][A-Z0-9.^-]{0,19}$")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


@dataclass
class FunctionResponse:
    """Status, JSON body and headers produced by a proxy function."""

    status_code: int
    body: Optional[Any] = None
    headers: dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))


class ProxyFunction:
    """Base class: subclasses set ``name``/``default_field`` and implement ``run``."""

    name: str = ""
    default_field: str = "data"

    def handle(self, method: str, body: Any) -> FunctionResponse:
        """Dispatch one request. Never raises."""
        if method.upper() == "OPTIONS":
            return FunctionResponse(status_code=200, body=None)

        try:
            if not isinstance(body, dict):
                raise ValidationError("Request body must be a JSON object")
            return FunctionResponse(status_code=200, body=self.run(body))
        except ConfigurationError as exc:
            logger.error("%s: %s", self.name, exc.message)
            return self.error_response(500, exc.message)
        except ValidationError as exc:
            return self.error_response(400, exc.message)
        except RemoteCallError as exc:
            logger.error("%s: %s", self.name, exc.message)
            return self.error_response(500, exc.message)

    def run(self, body: dict) -> Any:
        raise NotImplementedError

    def error_response(self, status_code: int, message: str) -> FunctionResponse:
        return FunctionResponse(
            status_code=status_code,
            body={"error": message, self.default_field: None},
        )

    @staticmethod
    def require(body: dict, param: str) -> Any:
        value = body.get(param)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{param} is required")
        return value

    @classmethod
    def require_ticker(cls, body: dict, param: str) -> str:
        """Return ``body[param]`` upper-cased, or raise unless it looks like a ticker."""
        value = cls.require(body, param)
        if not isinstance(value, str) or not TICKER_PATTERN.match(value.strip().upper()):
            raise ValidationError(f"{param} must be a ticker")
        return value.strip().upper()

