"""Proxy functions in front of third-party market-data APIs."""

from mindtrade.functions.base import ProxyFunction, FunctionResponse, CORS_HEADERS
from mindtrade.functions.market_news import MarketNewsFunction
from mindtrade.functions.company_logo import CompanyLogoFunction
from mindtrade.functions.finnhub import FinnhubFunction
from mindtrade.functions.registry import FunctionRegistry

__all__ = [
    "ProxyFunction",
    "FunctionResponse",
    "CORS_HEADERS",
    "MarketNewsFunction",
    "CompanyLogoFunction",
    "FinnhubFunction",
    "FunctionRegistry",
]
