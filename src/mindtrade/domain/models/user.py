"""User identity carried by the auth session."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """Signed-in user. Only the id is used to scope table access."""

    id: str
    email: Optional[str] = None
