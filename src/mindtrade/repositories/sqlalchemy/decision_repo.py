"""SQLAlchemy implementation of DecisionRepository."""

from decimal import Decimal

from sqlalchemy.orm import Session

from mindtrade.core.timezone import ensure_aware, to_utc
from mindtrade.domain.models import Decision
from mindtrade.repositories.sqlalchemy.orm_models import DecisionORM


class SqlAlchemyDecisionRepository:
    """SQLAlchemy-backed decision repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, decision: Decision) -> Decision:
        """Persist a new decision."""
        orm_decision = DecisionORM(
            id=decision.id,
            user_id=decision.user_id,
            ticker_symbol=decision.ticker_symbol,
            action=decision.action,
            shares=decision.shares,
            price_per_share=decision.price_per_share,
            based_on_fundamentals=decision.based_on_fundamentals,
            fits_strategy=decision.fits_strategy,
            not_reacting_to_news=decision.not_reacting_to_news,
            emotional_state=decision.emotional_state,
            decision_date=decision.decision_date,
            created_at=to_utc(decision.created_at),
        )
        self._db.add(orm_decision)
        self._db.commit()
        self._db.refresh(orm_decision)
        return self._to_domain(orm_decision)

    def list_by_user(self, user_id: str) -> list[Decision]:
        """List a user's decisions, newest first."""
        orm_decisions = (
            self._db.query(DecisionORM)
            .filter(DecisionORM.user_id == user_id)
            .order_by(DecisionORM.created_at.desc())
            .all()
        )
        return [self._to_domain(d) for d in orm_decisions]

    @staticmethod
    def _to_domain(orm: DecisionORM) -> Decision:
        """Convert ORM model to domain model."""
        return Decision(
            id=orm.id,
            user_id=orm.user_id,
            ticker_symbol=orm.ticker_symbol,
            action=orm.action,
            shares=Decimal(str(orm.shares)),
            price_per_share=Decimal(str(orm.price_per_share)),
            based_on_fundamentals=bool(orm.based_on_fundamentals),
            fits_strategy=bool(orm.fits_strategy),
            not_reacting_to_news=bool(orm.not_reacting_to_news),
            emotional_state=orm.emotional_state,
            decision_date=orm.decision_date,
            created_at=ensure_aware(orm.created_at) if orm.created_at else None,
        )
