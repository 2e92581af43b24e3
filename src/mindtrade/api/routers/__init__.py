"""API routers package."""

from mindtrade.api.routers.decisions import router as decisions_router
from mindtrade.api.routers.portfolios import router as portfolios_router
from mindtrade.api.routers.market import router as market_router
from mindtrade.api.routers.functions import router as functions_router
from mindtrade.api.routers.watchlist import router as watchlist_router

__all__ = [
    "decisions_router",
    "portfolios_router",
    "market_router",
    "functions_router",
    "watchlist_router",
]
