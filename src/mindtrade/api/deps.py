"""Dependency injection for FastAPI."""

from datetime import date
from typing import Optional

from fastapi import Depends, Header, Query, Request
from sqlalchemy.orm import Session

from mindtrade.app_context import AppContext
from mindtrade.backend import AuthSession, BackendClient
from mindtrade.domain.models import User
from mindtrade.repositories.sqlalchemy import (
    SqlAlchemyDecisionRepository,
    SqlAlchemyPortfolioRepository,
    SqlAlchemyTradeRepository,
    SqlAlchemyWatchlistRepository,
    get_db,
)
from mindtrade.services import CommentaryService, MarketDataService
from mindtrade.stores import (
    DecisionsStore,
    EarningsStore,
    IndicesStore,
    PortfoliosStore,
    TradesStore,
    WatchlistStore,
)


def get_context(request: Request) -> AppContext:
    """Provide the application context created at startup."""
    return request.app.state.context


def get_auth_session(x_user_id: Optional[str] = Header(default=None)) -> AuthSession:
    """Build the session from the ``X-User-Id`` header (absent = signed out)."""
    if x_user_id and x_user_id.strip():
        return AuthSession(User(id=x_user_id.strip()))
    return AuthSession()


def get_backend(
    db: Session = Depends(get_db),
    auth: AuthSession = Depends(get_auth_session),
    context: AppContext = Depends(get_context),
) -> BackendClient:
    """Provide a BackendClient bound to this request's session."""
    return BackendClient(
        auth=auth,
        decisions=SqlAlchemyDecisionRepository(db),
        portfolios=SqlAlchemyPortfolioRepository(db),
        trades=SqlAlchemyTradeRepository(db),
        watchlists=SqlAlchemyWatchlistRepository(db),
        functions=context.functions,
    )


def get_decisions_store(backend: BackendClient = Depends(get_backend)) -> DecisionsStore:
    store = DecisionsStore(backend)
    store.activate()
    return store


def get_portfolios_store(backend: BackendClient = Depends(get_backend)) -> PortfoliosStore:
    store = PortfoliosStore(backend)
    store.activate()
    return store


def get_trades_store(
    portfolio_id: str,
    backend: BackendClient = Depends(get_backend),
    portfolios: PortfoliosStore = Depends(get_portfolios_store),
) -> TradesStore:
    """Provide the trades of a portfolio the session user owns."""
    portfolios.get_portfolio(portfolio_id)
    store = TradesStore(backend, portfolio_id)
    store.activate()
    return store


def get_watchlist_store(backend: BackendClient = Depends(get_backend)) -> WatchlistStore:
    store = WatchlistStore(backend)
    store.activate()
    return store


def get_earnings_store(
    from_date: Optional[date] = Query(default=None, alias="from"),
    to_date: Optional[date] = Query(default=None, alias="to"),
    backend: BackendClient = Depends(get_backend),
) -> EarningsStore:
    """Provide the earnings calendar for the requested date range."""
    store = EarningsStore(backend, from_date, to_date)
    store.activate()
    return store


def get_indices_store(context: AppContext = Depends(get_context)) -> IndicesStore:
    return context.indices


def get_market_data_service(context: AppContext = Depends(get_context)) -> MarketDataService:
    return context.market_data


def get_commentary_service(context: AppContext = Depends(get_context)) -> CommentaryService:
    return context.commentary
