"""Market data providers module."""

from mindtrade.providers.market_data_provider import MarketDataProvider
from mindtrade.providers.fmp_provider import FmpMarketDataProvider
from mindtrade.providers.stub_provider import StubMarketDataProvider

__all__ = [
    "MarketDataProvider",
    "FmpMarketDataProvider",
    "StubMarketDataProvider",
]
