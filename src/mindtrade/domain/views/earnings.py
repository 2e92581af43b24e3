"""View model for earnings calendar entries."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class EarningsEvent:
    """One scheduled or reported earnings release."""

    symbol: str
    date: str
    hour: Optional[str] = None
    quarter: Optional[int] = None
    year: Optional[int] = None
    eps_actual: Optional[float] = None
    eps_estimate: Optional[float] = None
    revenue_actual: Optional[float] = None
    revenue_estimate: Optional[float] = None

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> "EarningsEvent":
        """Build from a calendar row as the upstream spells it (camelCase)."""
        return cls(
            symbol=str(raw.get("symbol") or ""),
            date=str(raw.get("date") or ""),
            hour=raw.get("hour") or None,
            quarter=raw.get("quarter"),
            year=raw.get("year"),
            eps_actual=raw.get("epsActual"),
            eps_estimate=raw.get("epsEstimate"),
            revenue_actual=raw.get("revenueActual"),
            revenue_estimate=raw.get("revenueEstimate"),
        )
