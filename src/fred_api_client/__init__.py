"""Public package exports for FRED API client."""

from .client import FredClient
from .config import FredClientConfig
from .core.wire import ResponseFormat

__all__ = ["FredClient", "FredClientConfig", "ResponseFormat"]
