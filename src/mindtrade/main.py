"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mindtrade.api.routers import (
    decisions_router,
    functions_router,
    market_router,
    portfolios_router,
    watchlist_router,
)
from mindtrade.app_context import AppContext
from mindtrade.config.logging_config import setup_logging
from mindtrade.config.settings import get_settings
from mindtrade.core.exceptions import AppError
from mindtrade.repositories.sqlalchemy.database import init_db


def create_app(context: Optional[AppContext] = None, start_background: bool = True) -> FastAPI:
    """
    Build the API.

    ``context`` replaces the default AppContext (tests pass one wired with
    fakes); ``start_background`` controls the periodic index refresh.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        init_db()
        app.state.context = context or AppContext()
        if start_background:
            app.state.context.start()
        yield
        app.state.context.close()

    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Investing dashboard with a behavioral decision journal",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(decisions_router)
    app.include_router(portfolios_router)
    app.include_router(market_router)
    app.include_router(watchlist_router)
    app.include_router(functions_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.code, "message": exc.message},
        )

    @app.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, str]:
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()
