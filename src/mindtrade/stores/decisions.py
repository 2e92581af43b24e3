"""Decisions feature store: the user's decision journal plus weekly stats."""

import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from mindtrade.backend.client import BackendClient
from mindtrade.core.exceptions import ValidationError
from mindtrade.core.timezone import days_ago, market_today, utc_now
from mindtrade.domain.models import Decision, TradeAction
from mindtrade.domain.views import Badge, WeeklyStats
from mindtrade.stores.base import FeatureStore

logger = logging.getLogger(__name__)


@dataclass
class DecisionCreate:
    """Input data for recording a decision."""

    ticker_symbol: str
    action: TradeAction
    shares: Decimal
    price_per_share: Decimal
    based_on_fundamentals: bool = False
    fits_strategy: bool = False
    not_reacting_to_news: bool = False
    emotional_state: int = 50
    decision_date: Optional[date] = None


def _percentage(part: int, whole: int) -> int:
    """Whole-number percentage, halves rounded up."""
    if whole == 0:
        return 0
    value = Decimal(part) * Decimal(100) / Decimal(whole)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _has_streak(days: set[date], length: int) -> bool:
    for day in days:
        if all(day + timedelta(days=offset) in days for offset in range(1, length)):
            return True
    return False


class DecisionsStore(FeatureStore):
    """
    Loads the signed-in user's decisions (newest first) and records new ones.

    With no signed-in user the list is simply empty; that is not an error.
    """

    def __init__(self, backend: BackendClient):
        super().__init__()
        self._backend = backend
        self.decisions: list[Decision] = []

    def refetch(self) -> None:
        try:
            user = self._backend.auth.get_user()
            if user is None:
                self.decisions = []
                return
            self.decisions = self._backend.decisions.list_by_user(user.id)
            self.error = None
        except Exception:
            logger.exception("Error fetching decisions")
            self.error = "Failed to fetch decisions"
        finally:
            self.loading = False

    def create_decision(self, data: DecisionCreate) -> Decision:
        """Validate, insert and prepend a new decision. Raises on failure."""
        user = self._backend.auth.require_user()
        self._validate(data)

        decision = Decision(
            id=str(uuid.uuid4()),
            user_id=user.id,
            ticker_symbol=data.ticker_symbol.strip().upper(),
            action=TradeAction(data.action),
            shares=Decimal(str(data.shares)),
            price_per_share=Decimal(str(data.price_per_share)),
            based_on_fundamentals=bool(data.based_on_fundamentals),
            fits_strategy=bool(data.fits_strategy),
            not_reacting_to_news=bool(data.not_reacting_to_news),
            emotional_state=int(data.emotional_state),
            decision_date=data.decision_date or market_today(),
            created_at=utc_now(),
        )
        created = self._backend.decisions.create(decision)
        logger.info("Recorded %s decision for %s", created.action.value, created.ticker_symbol)

        self.decisions = [created] + self.decisions
        return created

    def get_weekly_stats(self, now: Optional[datetime] = None) -> WeeklyStats:
        """Summarize decisions created in the last 7 days."""
        week_ago = days_ago(7, now)
        weekly = [d for d in self.decisions if d.created_at and d.created_at >= week_ago]
        rational = sum(1 for d in weekly if d.is_rational)
        return WeeklyStats(
            total_decisions=len(weekly),
            rational_decisions=rational,
            rational_percentage=_percentage(rational, len(weekly)),
        )

    def achievement_badges(self, now: Optional[datetime] = None) -> list[Badge]:
        stats = self.get_weekly_stats(now)
        decision_days = {d.decision_date for d in self.decisions if d.decision_date}
        return [
            Badge(
                id="rational-investor",
                name="Rational Investor",
                description="Made 5 rational decisions this week",
                earned=stats.rational_decisions >= 5,
            ),
            Badge(
                id="consistent-trader",
                name="Consistent Trader",
                description="Made decisions 3 days in a row",
                earned=_has_streak(decision_days, 3),
            ),
            Badge(
                id="disciplined-mind",
                name="Disciplined Mind",
                description="80%+ rational decisions this week",
                earned=stats.rational_percentage >= 80,
            ),
            Badge(
                id="bias-buster",
                name="Bias Buster",
                description="Avoided emotional trading for a week",
                earned=stats.total_decisions > 0 and stats.rational_percentage == 100,
            ),
        ]

    @staticmethod
    def _validate(data: DecisionCreate) -> None:
        if not data.ticker_symbol or not data.ticker_symbol.strip():
            raise ValidationError("Ticker symbol is required")
        try:
            TradeAction(data.action)
        except ValueError:
            raise ValidationError(f"Invalid action: {data.action}")
        if Decimal(str(data.shares)) <= 0:
            raise ValidationError("Shares must be positive")
        if Decimal(str(data.price_per_share)) <= 0:
            raise ValidationError("Price per share must be positive")
        if not 0 <= int(data.emotional_state) <= 100:
            raise ValidationError("Emotional state must be between 0 and 100")
