"""Earnings calendar feature store."""

import logging
from datetime import date
from typing import Optional, Union

from mindtrade.backend.client import BackendClient
from mindtrade.domain.views import EarningsEvent
from mindtrade.stores.base import FeatureStore

logger = logging.getLogger(__name__)

EARNINGS_FUNCTION = "finnhub-api"

DateLike = Union[str, date]


class EarningsStore(FeatureStore):
    """
    Earnings releases between ``from_date`` and ``to_date``, as returned upstream.

    Nothing is fetched until both bounds are set. The calendar comes from the
    finnhub-api function invoked through the backend client.
    """

    def __init__(
        self,
        backend: BackendClient,
        from_date: Optional[DateLike] = None,
        to_date: Optional[DateLike] = None,
    ):
        super().__init__()
        self._backend = backend
        self._from = self._as_param(from_date)
        self._to = self._as_param(to_date)
        self.earnings: list[EarningsEvent] = []

    @property
    def date_range(self) -> tuple[Optional[str], Optional[str]]:
        return self._from, self._to

    def refetch(self) -> None:
        if not self._from or not self._to:
            self.loading = False
            return
        try:
            result = self._backend.functions.invoke(
                EARNINGS_FUNCTION,
                {"action": "earnings", "from": self._from, "to": self._to},
            )
            if not result.ok:
                logger.error("Earnings calendar request failed: %s", result.error)
                self.error = "Failed to fetch earnings data"
                return
            payload = result.data if isinstance(result.data, dict) else {}
            rows = payload.get("earningsCalendar") or []
            self.earnings = [EarningsEvent.from_payload(r) for r in rows if isinstance(r, dict)]
            self.error = None
        except Exception:
            logger.exception("Error fetching earnings")
            self.error = "Failed to fetch earnings data"
        finally:
            self.loading = False

    @staticmethod
    def _as_param(value: Optional[DateLike]) -> Optional[str]:
        if isinstance(value, date):
            return value.isoformat()
        return value or None
