"""Portfolio and trade feature stores."""

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Mapping, Optional

from mindtrade.backend.client import BackendClient
from mindtrade.core.exceptions import NotFoundError, ValidationError
from mindtrade.core.timezone import market_today, utc_now
from mindtrade.domain.models import Portfolio, Trade, TradeAction
from mindtrade.domain.views import Holding, Quote
from mindtrade.services.holdings import compute_holdings
from mindtrade.stores.base import FeatureStore

logger = logging.getLogger(__name__)


@dataclass
class TradeCreate:
    """Input data for recording a trade."""

    ticker_symbol: str
    action: TradeAction
    shares: Decimal
    price_per_share: Decimal
    trade_date: Optional[date] = None
    company_name: Optional[str] = None
    notes: Optional[str] = None


class PortfoliosStore(FeatureStore):
    """The signed-in user's portfolios, oldest first."""

    def __init__(self, backend: BackendClient):
        super().__init__()
        self._backend = backend
        self.portfolios: list[Portfolio] = []

    def refetch(self) -> None:
        try:
            user = self._backend.auth.get_user()
            if user is None:
                self.portfolios = []
                return
            self.portfolios = self._backend.portfolios.list_by_user(user.id)
            self.error = None
        except Exception:
            logger.exception("Error fetching portfolios")
            self.error = "Failed to fetch portfolios"
        finally:
            self.loading = False

    def create_portfolio(self, name: str, description: Optional[str] = None) -> Portfolio:
        user = self._backend.auth.require_user()
        if not name or not name.strip():
            raise ValidationError("Portfolio name is required")

        portfolio = Portfolio(
            id=str(uuid.uuid4()),
            user_id=user.id,
            name=name.strip(),
            description=description,
            created_at=utc_now(),
        )
        created = self._backend.portfolios.create(portfolio)
        self.portfolios = self.portfolios + [created]
        return created

    def get_portfolio(self, portfolio_id: str) -> Portfolio:
        """Return one of the user's portfolios or raise NotFoundError."""
        user = self._backend.auth.require_user()
        portfolio = self._backend.portfolios.get_by_id(portfolio_id)
        if portfolio is None or portfolio.user_id != user.id:
            raise NotFoundError("Portfolio", portfolio_id)
        return portfolio

    def delete_portfolio(self, portfolio_id: str) -> None:
        self.get_portfolio(portfolio_id)
        self._backend.portfolios.delete(portfolio_id)
        self.portfolios = [p for p in self.portfolios if p.id != portfolio_id]


class TradesStore(FeatureStore):
    """Trades of one portfolio, most recent first, plus derived holdings."""

    def __init__(self, backend: BackendClient, portfolio_id: Optional[str]):
        super().__init__()
        self._backend = backend
        self._portfolio_id = portfolio_id
        self.trades: list[Trade] = []

    @property
    def portfolio_id(self) -> Optional[str]:
        return self._portfolio_id

    def refetch(self) -> None:
        if not self._portfolio_id:
            self.trades = []
            self.loading = False
            return
        try:
            self.trades = self._backend.trades.list_by_portfolio(self._portfolio_id)
            self.error = None
        except Exception:
            logger.exception("Error fetching trades")
            self.error = "Failed to fetch trades"
        finally:
            self.loading = False

    def create_trade(self, data: TradeCreate) -> Trade:
        if not self._portfolio_id:
            raise ValidationError("No portfolio selected")
        if not data.ticker_symbol or not data.ticker_symbol.strip():
            raise ValidationError("Ticker symbol is required")
        if Decimal(str(data.shares)) <= 0:
            raise ValidationError("Shares must be positive")
        if Decimal(str(data.price_per_share)) <= 0:
            raise ValidationError("Price per share must be positive")

        trade = Trade(
            id=str(uuid.uuid4()),
            portfolio_id=self._portfolio_id,
            ticker_symbol=data.ticker_symbol.strip().upper(),
            action=TradeAction(data.action),
            shares=Decimal(str(data.shares)),
            price_per_share=Decimal(str(data.price_per_share)),
            trade_date=data.trade_date or market_today(),
            company_name=data.company_name,
            notes=data.notes,
            created_at=utc_now(),
        )
        created = self._backend.trades.create(trade)
        self.trades = [created] + self.trades
        return created

    def delete_trade(self, trade_id: str) -> None:
        if not any(t.id == trade_id for t in self.trades):
            raise NotFoundError("Trade", trade_id)
        self._backend.trades.delete(trade_id)
        self.trades = [t for t in self.trades if t.id != trade_id]

    def symbols(self) -> list[str]:
        return sorted({t.ticker_symbol for t in self.trades})

    def holdings(self, quotes: Optional[Mapping[str, Quote]] = None) -> list[Holding]:
        return compute_holdings(self.trades, quotes)
