"""View models for decision statistics and achievements."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeeklyStats:
    """Rolling 7-day decision summary."""

    total_decisions: int = 0
    rational_decisions: int = 0
    rational_percentage: int = 0


@dataclass(frozen=True)
class Badge:
    """Achievement badge unlocked by disciplined decision making."""

    id: str
    name: str
    description: str
    earned: bool
