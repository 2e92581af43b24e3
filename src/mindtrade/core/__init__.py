"""Core utilities and shared functionality."""

from mindtrade.core.timezone import (
    EASTERN_TZ,
    utc_now,
    market_today,
    ensure_aware,
    to_utc,
    parse_date,
    days_ago,
)
from mindtrade.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    ConfigurationError,
    RemoteCallError,
)
from mindtrade.core.result import FunctionResult

__all__ = [
    "EASTERN_TZ",
    "utc_now",
    "market_today",
    "ensure_aware",
    "to_utc",
    "parse_date",
    "days_ago",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    "ConfigurationError",
    "RemoteCallError",
    "FunctionResult",
]
