"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import validate_client_config
from .config import FredClientConfig
from .core.errors import FredClientClosedError
from .core.transport import SyncTransport
from .endpoints.service import CategoryService, SeriesService


class FredClient:
    """Public FRED API client.

    The API key and response format are fixed at construction and copied
    into every request.
    """

    def __init__(
        self,
        *,
        config: FredClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = config or FredClientConfig.from_env()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._closed = False
        self.categories = CategoryService(
            self._transport,
            self._config,
            ensure_open=self._ensure_open,
        )
        self.series = SeriesService(
            self._transport,
            self._config,
            ensure_open=self._ensure_open,
        )

    @property
    def config(self) -> FredClientConfig:
        return self._config

    def _ensure_open(self) -> None:
        if self._closed:
            raise FredClientClosedError("FredClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "FredClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "FredClient",
]
