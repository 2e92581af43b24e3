"""Explicit ok/error result returned by function invocations."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class FunctionResult:
    """
    Outcome of invoking a proxy function.

    Exactly one of ``data`` / ``error`` is meaningful: ``error`` is set when
    the function answered with a non-2xx status or an ``error`` field.
    """

    status_code: int
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_payload(cls, status_code: int, payload: Any) -> "FunctionResult":
        """Split a raw function payload into the ok/error variant."""
        if isinstance(payload, dict) and payload.get("error"):
            return cls(status_code=status_code, data=payload, error=str(payload["error"]))
        if status_code >= 400:
            return cls(status_code=status_code, data=payload, error=f"HTTP {status_code}")
        return cls(status_code=status_code, data=payload)
