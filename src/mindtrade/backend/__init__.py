"""Backend access for feature stores."""

from mindtrade.backend.auth import AuthSession
from mindtrade.backend.client import BackendClient

__all__ = ["AuthSession", "BackendClient"]
