"""
Unit tests for the portfolio and trade stores.

Tests cover:
- Portfolio create/list/delete scoped to the session user
- Trade create/delete and ordering
- Holdings derived from a portfolio's trades
"""

from datetime import date
from decimal import Decimal

import pytest

from mindtrade.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from mindtrade.domain.models import TradeAction, User
from mindtrade.stores import PortfoliosStore, TradeCreate, TradesStore

from tests.conftest import DeterministicMarketProvider


def trade_input(**overrides) -> TradeCreate:
    data = dict(
        ticker_symbol="aapl",
        action=TradeAction.BUY,
        shares=Decimal("10"),
        price_per_share=Decimal("150.00"),
        trade_date=date(2024, 6, 10),
        company_name="Apple Inc.",
    )
    data.update(overrides)
    return TradeCreate(**data)


# =============================================================================
# PORTFOLIO TESTS
# =============================================================================


class TestPortfoliosStore:
    """Tests for PortfoliosStore."""

    def test_create_and_list(self, backend):
        store = PortfoliosStore(backend)
        store.activate()
        assert store.portfolios == []

        first = store.create_portfolio("Long term", "Index funds")
        second = store.create_portfolio("Speculative")

        assert [p.id for p in store.portfolios] == [first.id, second.id]

        reloaded = PortfoliosStore(backend)
        reloaded.activate()
        assert [p.name for p in reloaded.portfolios] == ["Long term", "Speculative"]

    def test_portfolios_scoped_to_user(self, backend, backend_factory):
        PortfoliosStore(backend).create_portfolio("Mine")

        other = PortfoliosStore(backend_factory(User(id="user-2")))
        other.activate()

        assert other.portfolios == []

    def test_signed_out_is_empty(self, backend_factory):
        store = PortfoliosStore(backend_factory(None))
        store.activate()
        assert store.portfolios == []
        assert store.error is None

    def test_create_requires_user(self, backend_factory):
        with pytest.raises(AuthenticationError):
            PortfoliosStore(backend_factory(None)).create_portfolio("X")

    def test_create_requires_name(self, backend):
        with pytest.raises(ValidationError):
            PortfoliosStore(backend).create_portfolio("   ")

    def test_get_other_users_portfolio_not_found(self, backend, backend_factory):
        portfolio = PortfoliosStore(backend).create_portfolio("Mine")
        other = PortfoliosStore(backend_factory(User(id="user-2")))

        with pytest.raises(NotFoundError):
            other.get_portfolio(portfolio.id)

    def test_delete_removes_portfolio_and_trades(self, backend, trade_repo):
        store = PortfoliosStore(backend)
        portfolio = store.create_portfolio("Temp")
        TradesStore(backend, portfolio.id).create_trade(trade_input())

        store.delete_portfolio(portfolio.id)

        assert store.portfolios == []
        assert trade_repo.list_by_portfolio(portfolio.id) == []


# =============================================================================
# TRADE TESTS
# =============================================================================


class TestTradesStore:
    """Tests for TradesStore."""

    @pytest.fixture
    def portfolio(self, backend):
        return PortfoliosStore(backend).create_portfolio("Main")

    def test_no_portfolio_selected(self, backend):
        store = TradesStore(backend, None)
        store.activate()
        assert store.trades == []
        assert store.loading is False
        with pytest.raises(ValidationError):
            store.create_trade(trade_input())

    def test_create_prepends(self, backend, portfolio):
        store = TradesStore(backend, portfolio.id)
        store.activate()
        first = store.create_trade(trade_input())
        second = store.create_trade(trade_input(ticker_symbol="msft"))

        assert [t.id for t in store.trades] == [second.id, first.id]
        assert second.ticker_symbol == "MSFT"

    def test_list_ordered_by_trade_date_desc(self, backend, portfolio):
        store = TradesStore(backend, portfolio.id)
        store.create_trade(trade_input(trade_date=date(2024, 1, 1)))
        store.create_trade(trade_input(trade_date=date(2024, 3, 1)))
        store.create_trade(trade_input(trade_date=date(2024, 2, 1)))

        reloaded = TradesStore(backend, portfolio.id)
        reloaded.activate()

        assert [t.trade_date for t in reloaded.trades] == [
            date(2024, 3, 1),
            date(2024, 2, 1),
            date(2024, 1, 1),
        ]

    def test_create_rejects_non_positive_shares(self, backend, portfolio):
        with pytest.raises(ValidationError):
            TradesStore(backend, portfolio.id).create_trade(trade_input(shares=Decimal("0")))

    def test_delete_trade(self, backend, portfolio):
        store = TradesStore(backend, portfolio.id)
        trade = store.create_trade(trade_input())

        store.delete_trade(trade.id)

        assert store.trades == []

    def test_delete_unknown_trade(self, backend, portfolio):
        store = TradesStore(backend, portfolio.id)
        store.activate()
        with pytest.raises(NotFoundError):
            store.delete_trade("missing")

    def test_symbols_and_holdings(self, backend, portfolio):
        """
        GIVEN buys of AAPL and MSFT and a partial AAPL sell
        WHEN holdings are computed with live quotes
        THEN positions reflect net shares and average cost
        """
        store = TradesStore(backend, portfolio.id)
        store.create_trade(trade_input(shares=Decimal("10"), price_per_share=Decimal("150")))
        store.create_trade(trade_input(
            ticker_symbol="MSFT", shares=Decimal("2"), price_per_share=Decimal("300"),
            company_name="Microsoft",
        ))
        store.create_trade(trade_input(
            action=TradeAction.SELL, shares=Decimal("4"), price_per_share=Decimal("180"),
            trade_date=date(2024, 6, 11),
        ))

        assert store.symbols() == ["AAPL", "MSFT"]

        quotes = DeterministicMarketProvider().get_quotes(store.symbols())
        holdings = {h.ticker_symbol: h for h in store.holdings(quotes)}

        assert holdings["AAPL"].shares == Decimal("6")
        assert holdings["AAPL"].avg_price == Decimal("150")
        assert holdings["AAPL"].current_price == Decimal("185.50")
        assert holdings["MSFT"].shares == Decimal("2")
