"""
Pytest configuration and fixtures for MindTrade tests.

This module provides:
- In-memory SQLite database fixtures
- Repository, backend and feature store factories
- Deterministic and failing market data providers
- Fake HTTP sessions for the proxy functions
- A controllable clock for cache expiry
- FastAPI test client wired with fakes
"""

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Optional

import pytest
import requests
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from mindtrade.app_context import AppContext
from mindtrade.backend import AuthSession, BackendClient
from mindtrade.cache.ttl_cache import TTLCache
from mindtrade.config.settings import Settings, set_settings, reset_settings
from mindtrade.core.exceptions import RemoteCallError
from mindtrade.core.timezone import EASTERN_TZ
from mindtrade.domain.models import Decision, TradeAction, User
from mindtrade.domain.views import Quote
from mindtrade.functions import (
    CompanyLogoFunction,
    FinnhubFunction,
    FunctionRegistry,
    MarketNewsFunction,
)
from mindtrade.main import create_app
from mindtrade.repositories.memory_kv_store import InMemoryKeyValueStore
from mindtrade.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from mindtrade.repositories.sqlalchemy import orm_models  # noqa: F401
from mindtrade.repositories.sqlalchemy import (
    SqlAlchemyDecisionRepository,
    SqlAlchemyKeyValueStore,
    SqlAlchemyPortfolioRepository,
    SqlAlchemyTradeRepository,
    SqlAlchemyWatchlistRepository,
)
from mindtrade.services.commentary_service import CommentaryPrompt


# =============================================================================
# TIME HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return eastern_datetime(2024, 6, 15, 14, 30, 0)


class FakeClock:
    """Manually advanced clock returning epoch seconds."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session_factory(test_engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def test_session(test_session_factory) -> Session:
    """Create test database session."""
    session = test_session_factory()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def decision_repo(test_session) -> SqlAlchemyDecisionRepository:
    return SqlAlchemyDecisionRepository(test_session)


@pytest.fixture
def portfolio_repo(test_session) -> SqlAlchemyPortfolioRepository:
    return SqlAlchemyPortfolioRepository(test_session)


@pytest.fixture
def trade_repo(test_session) -> SqlAlchemyTradeRepository:
    return SqlAlchemyTradeRepository(test_session)


@pytest.fixture
def watchlist_repo(test_session) -> SqlAlchemyWatchlistRepository:
    return SqlAlchemyWatchlistRepository(test_session)


@pytest.fixture
def sql_kv_store(test_session_factory) -> SqlAlchemyKeyValueStore:
    return SqlAlchemyKeyValueStore(test_session_factory)


@pytest.fixture
def memory_kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


class NonEnumerableKeyValueStore:
    """Key-value store that cannot list its keys."""

    def __init__(self):
        self.items: dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class BrokenKeyValueStore:
    """Key-value store whose every call fails (quota exceeded, disk gone...)."""

    def get_item(self, key: str) -> Optional[str]:
        raise OSError("storage unavailable")

    def set_item(self, key: str, value: str) -> None:
        raise OSError("storage unavailable")

    def remove_item(self, key: str) -> None:
        raise OSError("storage unavailable")

    def keys(self) -> list[str]:
        raise OSError("storage unavailable")


@pytest.fixture
def ttl_cache(memory_kv_store, clock) -> TTLCache:
    return TTLCache(store=memory_kv_store, clock=clock)


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


class DeterministicMarketProvider:
    """
    Deterministic market data provider for testing.

    Provides fixed quotes with no randomness.
    """

    FIXED_QUOTES = {
        "AAPL": (Decimal("185.50"), Decimal("1.25"), Decimal("0.68")),
        "MSFT": (Decimal("378.25"), Decimal("1.45"), Decimal("0.38")),
        "TSLA": (Decimal("248.75"), Decimal("-1.35"), Decimal("-0.54")),
        "^GSPC": (Decimal("5431.60"), Decimal("12.40"), Decimal("0.23")),
        "^IXIC": (Decimal("17688.88"), Decimal("-35.12"), Decimal("-0.20")),
        "^DJI": (Decimal("38589.16"), Decimal("57.94"), Decimal("0.15")),
        "^RUT": (Decimal("2006.16"), Decimal("-8.33"), Decimal("-0.41")),
    }

    def __init__(self, as_of: Optional[datetime] = None):
        self._as_of = as_of or eastern_datetime(2024, 6, 15, 16, 0, 0)
        self.calls: list[list[str]] = []

    def get_quote(self, symbol: str) -> Optional[Quote]:
        return self.get_quotes([symbol]).get(symbol.upper())

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Return deterministic quotes for requested symbols."""
        self.calls.append(list(symbols))
        result = {}
        for symbol in symbols:
            upper_symbol = symbol.upper()
            if upper_symbol in self.FIXED_QUOTES:
                price, change, change_pct = self.FIXED_QUOTES[upper_symbol]
                result[upper_symbol] = Quote(
                    symbol=upper_symbol,
                    price=price,
                    change=change,
                    change_percentage=change_pct,
                    as_of=self._as_of,
                )
        return result


class FailingMarketProvider:
    """Market provider that always fails."""

    def get_quote(self, symbol: str) -> Optional[Quote]:
        raise RemoteCallError("FMP", "Network unavailable")

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        raise RemoteCallError("FMP", "Network unavailable")


class PartiallyFailingProvider(DeterministicMarketProvider):
    """Deterministic provider that raises for a chosen set of symbols."""

    def __init__(self, failing: set[str]):
        super().__init__()
        self._failing = {s.upper() for s in failing}

    def get_quote(self, symbol: str) -> Optional[Quote]:
        if symbol.upper() in self._failing:
            raise RemoteCallError("FMP", f"no data for {symbol}")
        return super().get_quote(symbol)


@pytest.fixture
def deterministic_provider(fixed_now) -> DeterministicMarketProvider:
    """Provide deterministic market data provider."""
    return DeterministicMarketProvider(as_of=fixed_now)


@pytest.fixture
def failing_provider() -> FailingMarketProvider:
    """Provide a market provider that always fails."""
    return FailingMarketProvider()


# =============================================================================
# HTTP FAKES
# =============================================================================


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload: Any = None, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def raise_for_status(self) -> None:
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """
    Records outbound calls and answers with ``response``.

    Set ``error`` to make every call raise instead.
    """

    def __init__(self, response: Optional[FakeResponse] = None):
        self.response = response or FakeResponse([])
        self.error: Optional[Exception] = None
        self.calls: list[dict[str, Any]] = []

    def _answer(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._answer("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._answer("POST", url, **kwargs)


@pytest.fixture
def http_session() -> FakeSession:
    return FakeSession()


# =============================================================================
# COMMENTARY FIXTURES
# =============================================================================


class FakeCommentaryGenerator:
    """Returns canned text and counts calls."""

    def __init__(self, text: str = "Strong brand and ecosystem lock-in."):
        self.text = text
        self.prompts: list[CommentaryPrompt] = []

    def generate(self, prompt: CommentaryPrompt) -> str:
        self.prompts.append(prompt)
        return self.text


@pytest.fixture
def fake_generator() -> FakeCommentaryGenerator:
    return FakeCommentaryGenerator()


# =============================================================================
# BACKEND FIXTURES
# =============================================================================


@pytest.fixture
def user() -> User:
    return User(id="user-1", email="investor@example.com")


@pytest.fixture
def function_registry(http_session) -> FunctionRegistry:
    return FunctionRegistry(
        [
            MarketNewsFunction(api_key="test-fmp-key", session=http_session),
            CompanyLogoFunction(api_key="test-logo-key", session=http_session),
            FinnhubFunction(api_key="test-finnhub-key", session=http_session),
        ]
    )


@pytest.fixture
def backend_factory(
    decision_repo,
    portfolio_repo,
    trade_repo,
    watchlist_repo,
    function_registry,
) -> Callable[..., BackendClient]:
    """Factory for backend clients sharing the test database."""

    def _create_backend(user: Optional[User] = None) -> BackendClient:
        return BackendClient(
            auth=AuthSession(user),
            decisions=decision_repo,
            portfolios=portfolio_repo,
            trades=trade_repo,
            watchlists=watchlist_repo,
            functions=function_registry,
        )

    return _create_backend


@pytest.fixture
def backend(backend_factory, user) -> BackendClient:
    """Backend client with a signed-in user."""
    return backend_factory(user)


# =============================================================================
# FACTORY HELPERS
# =============================================================================


def make_decision(
    user_id: str = "user-1",
    ticker_symbol: str = "AAPL",
    rational: bool = True,
    created_at: Optional[datetime] = None,
    decision_date: Optional[date] = None,
    action: TradeAction = TradeAction.BUY,
) -> Decision:
    """Build a Decision directly (bypassing the store)."""
    created_at = created_at or eastern_datetime(2024, 6, 15, 10, 0, 0)
    return Decision(
        id=str(uuid.uuid4()),
        user_id=user_id,
        ticker_symbol=ticker_symbol,
        action=action,
        shares=Decimal("10"),
        price_per_share=Decimal("185.50"),
        based_on_fundamentals=rational,
        fits_strategy=rational,
        not_reacting_to_news=rational,
        emotional_state=50,
        decision_date=decision_date or created_at.date(),
        created_at=created_at,
    )


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def app_context(memory_kv_store, deterministic_provider, function_registry, fake_generator) -> AppContext:
    """Application context wired with fakes only."""
    settings = Settings(database_url="sqlite://", index_refresh_interval_seconds=3600)
    return AppContext(
        settings=settings,
        kv_store=memory_kv_store,
        provider=deterministic_provider,
        functions=function_registry,
        generator=fake_generator,
    )


@pytest.fixture
def client(test_session_factory, app_context) -> TestClient:
    """Provide FastAPI test client with test database."""
    set_settings(app_context.settings)
    reset_database()

    def override_get_db():
        session = test_session_factory()
        try:
            yield session
        finally:
            session.close()

    app = create_app(context=app_context, start_background=False)
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


def auth_headers(user_id: str = "user-1") -> dict[str, str]:
    """Headers identifying the signed-in user."""
    return {"X-User-Id": user_id}


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"
