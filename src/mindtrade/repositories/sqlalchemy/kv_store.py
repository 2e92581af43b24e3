"""SQLAlchemy implementation of the durable key-value store."""

from typing import Callable, Optional

from sqlalchemy.orm import Session

from mindtrade.repositories.sqlalchemy.orm_models import KeyValueORM


class SqlAlchemyKeyValueStore:
    """
    Key-value store persisted in the ``kv_store`` table.

    Opens a short-lived session per call so a single instance can be shared
    across requests and threads.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def get_item(self, key: str) -> Optional[str]:
        with self._session_factory() as db:
            row = db.get(KeyValueORM, key)
            return row.value if row else None

    def set_item(self, key: str, value: str) -> None:
        with self._session_factory() as db:
            row = db.get(KeyValueORM, key)
            if row:
                row.value = value
            else:
                db.add(KeyValueORM(key=key, value=value))
            db.commit()

    def remove_item(self, key: str) -> None:
        with self._session_factory() as db:
            db.query(KeyValueORM).filter(KeyValueORM.key == key).delete()
            db.commit()

    def keys(self) -> list[str]:
        with self._session_factory() as db:
            return [row.key for row in db.query(KeyValueORM.key).order_by(KeyValueORM.key).all()]
