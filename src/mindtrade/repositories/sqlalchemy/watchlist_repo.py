"""SQLAlchemy implementation of WatchlistRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from mindtrade.core.timezone import ensure_aware, to_utc
from mindtrade.domain.models import WatchlistItem
from mindtrade.repositories.sqlalchemy.orm_models import WatchlistORM


class SqlAlchemyWatchlistRepository:
    """SQLAlchemy-backed watchlist repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, item: WatchlistItem) -> WatchlistItem:
        orm_item = WatchlistORM(
            id=item.id,
            user_id=item.user_id,
            ticker_symbol=item.ticker_symbol,
            added_at=to_utc(item.added_at),
        )
        self._db.add(orm_item)
        self._db.commit()
        self._db.refresh(orm_item)
        return self._to_domain(orm_item)

    def find(self, user_id: str, ticker_symbol: str) -> Optional[WatchlistItem]:
        orm_item = self._query(user_id, ticker_symbol).first()
        return self._to_domain(orm_item) if orm_item else None

    def list_by_user(self, user_id: str) -> list[WatchlistItem]:
        """List a user's watchlist, most recently added first."""
        orm_items = (
            self._db.query(WatchlistORM)
            .filter(WatchlistORM.user_id == user_id)
            .order_by(WatchlistORM.added_at.desc())
            .all()
        )
        return [self._to_domain(i) for i in orm_items]

    def delete_by_ticker(self, user_id: str, ticker_symbol: str) -> bool:
        deleted = self._query(user_id, ticker_symbol).delete()
        self._db.commit()
        return deleted > 0

    def _query(self, user_id: str, ticker_symbol: str):
        return self._db.query(WatchlistORM).filter(
            WatchlistORM.user_id == user_id,
            WatchlistORM.ticker_symbol == ticker_symbol,
        )

    @staticmethod
    def _to_domain(orm: WatchlistORM) -> WatchlistItem:
        return WatchlistItem(
            id=orm.id,
            user_id=orm.user_id,
            ticker_symbol=orm.ticker_symbol,
            added_at=ensure_aware(orm.added_at) if orm.added_at else None,
        )
