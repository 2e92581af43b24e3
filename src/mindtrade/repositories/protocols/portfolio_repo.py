"""Portfolio and trade repository protocols."""

from typing import Protocol, Optional

from mindtrade.domain.models import Portfolio, Trade


class PortfolioRepository(Protocol):
    """Interface for portfolio data access."""

    def create(self, portfolio: Portfolio) -> Portfolio:
        """Persist a new portfolio."""
        ...

    def get_by_id(self, portfolio_id: str) -> Optional[Portfolio]:
        """Retrieve portfolio by ID."""
        ...

    def list_by_user(self, user_id: str) -> list[Portfolio]:
        """List a user's portfolios, oldest first."""
        ...

    def delete(self, portfolio_id: str) -> None:
        """Delete a portfolio and its trades."""
        ...


class TradeRepository(Protocol):
    """Interface for trade data access."""

    def create(self, trade: Trade) -> Trade:
        """Persist a new trade."""
        ...

    def list_by_portfolio(self, portfolio_id: str) -> list[Trade]:
        """List trades of a portfolio, most recent trade date first."""
        ...

    def delete(self, trade_id: str) -> None:
        """Delete a trade."""
        ...
