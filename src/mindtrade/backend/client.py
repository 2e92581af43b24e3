"""Backend client: auth session, tables and function invoker behind one object."""

from mindtrade.backend.auth import AuthSession
from mindtrade.functions.registry import FunctionRegistry
from mindtrade.repositories.protocols import (
    DecisionRepository,
    PortfolioRepository,
    TradeRepository,
    WatchlistRepository,
)


class BackendClient:
    """
    Everything a feature store needs to talk to the backend.

    Table access goes through repositories; every read/write the stores make
    is scoped by the session user's id.
    """

    def __init__(
        self,
        auth: AuthSession,
        decisions: DecisionRepository,
        portfolios: PortfolioRepository,
        trades: TradeRepository,
        watchlists: WatchlistRepository,
        functions: FunctionRegistry,
    ):
        self.auth = auth
        self.decisions = decisions
        self.portfolios = portfolios
        self.trades = trades
        self.watchlists = watchlists
        self.functions = functions
