"""Decision repository protocol."""

from typing import Protocol

from mindtrade.domain.models import Decision


class DecisionRepository(Protocol):
    """Interface for decision data access. Decisions are insert-only."""

    def create(self, decision: Decision) -> Decision:
        """Persist a new decision and return the stored record."""
        ...

    def list_by_user(self, user_id: str) -> list[Decision]:
        """List a user's decisions, newest first."""
        ...
