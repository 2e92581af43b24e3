"""Timezone helpers. Decision dates follow the US/Eastern market calendar day."""

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def market_today() -> date:
    """Return today's date on the US/Eastern calendar."""
    return datetime.now(EASTERN_TZ).date()


def ensure_aware(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def parse_date(value: Union[str, date, datetime]) -> date:
    """Parse a calendar date (YYYY-MM-DD or any dateutil-readable form)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.parse(value).date()


def days_ago(days: int, now: Optional[datetime] = None) -> datetime:
    """Return the instant ``days`` days before ``now`` (default: current UTC time)."""
    return ensure_aware(now or utc_now()) - timedelta(days=days)


def to_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Normalize to UTC for storage (naive input is taken as UTC)."""
    if dt is None:
        return None
    return ensure_aware(dt).astimezone(timezone.utc)
