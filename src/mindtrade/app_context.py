"""Application context: long-lived, explicitly constructed collaborators.

Per-request objects (sessions, repositories, feature stores) are built in
``api/deps.py``; everything that must outlive a request lives here and is
attached to ``app.state.context`` by the FastAPI lifespan.
"""

import logging
from typing import Optional

from mindtrade.cache.ttl_cache import TTLCache
from mindtrade.config.settings import Settings, get_settings
from mindtrade.functions import (
    CompanyLogoFunction,
    FinnhubFunction,
    FunctionRegistry,
    MarketNewsFunction,
)
from mindtrade.providers import FmpMarketDataProvider, MarketDataProvider, StubMarketDataProvider
from mindtrade.repositories.protocols import KeyValueStore
from mindtrade.repositories.sqlalchemy import SqlAlchemyKeyValueStore, get_session_factory
from mindtrade.services import (
    CommentaryGenerator,
    CommentaryService,
    MarketDataService,
    OpenAICommentaryGenerator,
)
from mindtrade.stores import IndicesStore

logger = logging.getLogger(__name__)


class AppContext:
    """
    Owns the response cache, market data provider, proxy functions,
    commentary service and the index store.

    Any collaborator can be passed in to replace the default (tests do this).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        kv_store: Optional[KeyValueStore] = None,
        provider: Optional[MarketDataProvider] = None,
        functions: Optional[FunctionRegistry] = None,
        generator: Optional[CommentaryGenerator] = None,
    ):
        self.settings = settings or get_settings()
        s = self.settings

        self.kv_store = kv_store or SqlAlchemyKeyValueStore(get_session_factory())
        self.cache = TTLCache(
            store=self.kv_store,
            namespace=s.commentary_cache_namespace,
            default_ttl=s.commentary_cache_ttl_seconds,
        )

        if provider is None:
            if s.fmp_api_key:
                provider = FmpMarketDataProvider(
                    api_key=s.fmp_api_key,
                    base_url=s.fmp_base_url,
                    timeout=s.http_timeout_seconds,
                )
            else:
                logger.info("FMP_API_KEY not set; using stub market data")
                provider = StubMarketDataProvider()
        self.provider = provider
        self.market_data = MarketDataService(provider)

        self.functions = functions or FunctionRegistry(
            [
                MarketNewsFunction(
                    api_key=s.fmp_api_key,
                    base_url=s.fmp_base_url,
                    timeout=s.http_timeout_seconds,
                ),
                CompanyLogoFunction(
                    api_key=s.logokit_api_key,
                    base_url=s.logokit_base_url,
                    timeout=s.http_timeout_seconds,
                ),
                FinnhubFunction(
                    api_key=s.finnhub_api_key,
                    base_url=s.finnhub_base_url,
                    timeout=s.http_timeout_seconds,
                ),
            ]
        )

        self.commentary = CommentaryService(
            generator=generator
            or OpenAICommentaryGenerator(
                api_key=s.openai_api_key,
                model=s.openai_model,
                base_url=s.openai_base_url,
                timeout=s.http_timeout_seconds,
            ),
            cache=self.cache,
        )

        self.indices = IndicesStore(
            provider=self.provider,
            refresh_interval=s.index_refresh_interval_seconds,
        )

    def start(self) -> None:
        """Begin background work (index refresh)."""
        self.indices.start()

    def close(self) -> None:
        self.indices.stop()
