"""Decision domain model."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from mindtrade.domain.models.enums import TradeAction, EmotionalLabel


@dataclass
class Decision:
    """
    A recorded trade intent annotated with self-assessed rationality signals.

    Decisions are append-only: once stored they are never edited.
    A decision is *rational* when all three discipline flags are set.
    """

    id: str
    user_id: str
    ticker_symbol: str
    action: TradeAction
    shares: Decimal
    price_per_share: Decimal
    based_on_fundamentals: bool = False
    fits_strategy: bool = False
    not_reacting_to_news: bool = False
    emotional_state: int = 50
    decision_date: Optional[date] = None
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.action, str):
            self.action = TradeAction(self.action)

    @property
    def is_rational(self) -> bool:
        """Return True if all three discipline flags are set."""
        return self.based_on_fundamentals and self.fits_strategy and self.not_reacting_to_news

    @property
    def emotional_label(self) -> EmotionalLabel:
        if self.emotional_state <= 30:
            return EmotionalLabel.FEARFUL
        if self.emotional_state <= 70:
            return EmotionalLabel.NEUTRAL
        return EmotionalLabel.CONFIDENT

    @property
    def total_amount(self) -> Decimal:
        return self.shares * self.price_per_share
