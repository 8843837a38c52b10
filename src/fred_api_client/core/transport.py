"""Sync HTTP transport: a single GET per call, no retries."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx

from ..config import FredClientConfig
from .errors import FredTransportError

logger = logging.getLogger("fred_api_client")

_API_KEY_QUERY_RE = re.compile(r"(api_key=)[^&\s\"'>]+")


class ApiKeyRedactingFilter(logging.Filter):
    """Rewrite ``api_key=<value>`` in log records to ``api_key=REDACTED``.

    httpx logs each request URL, query string included, at INFO.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _API_KEY_QUERY_RE.sub(r"\1REDACTED", message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def install_api_key_redaction(logger_name: str = "httpx") -> None:
    target = logging.getLogger(logger_name)
    if not any(isinstance(existing, ApiKeyRedactingFilter) for existing in target.filters):
        target.addFilter(ApiKeyRedactingFilter())


install_api_key_redaction()


class TransportResponse(Protocol):
    status_code: int

    @property
    def content(self) -> bytes: ...


class TransportClient(Protocol):
    def get(self, url: str, *, params: Mapping[str, str]) -> TransportResponse: ...
    def close(self) -> None: ...


@dataclass(slots=True, frozen=True)
class RawResponse:
    body: bytes
    status_code: int


def build_default_headers(config: FredClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: FredClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


class SyncTransport:
    """Synchronous transport for the FRED API."""

    def __init__(
        self,
        config: FredClientConfig,
        *,
        client: TransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        normalized_base_url = config.base_url.rstrip("/") + "/"
        self._client = client or httpx.Client(
            base_url=normalized_base_url,
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def get(
        self,
        description: str,
        endpoint: str,
        *,
        params: Mapping[str, str],
    ) -> RawResponse:
        if self._closed:
            raise FredTransportError("transport is already closed")

        normalized_endpoint = self._normalize_endpoint(endpoint)
        logger.debug("request start endpoint=%s description=%s", normalized_endpoint, description)
        try:
            response = self._client.get(normalized_endpoint, params=params)
            body = response.content
        except Exception as exc:
            logger.error(
                "request network error endpoint=%s error=%s",
                normalized_endpoint,
                exc.__class__.__name__,
            )
            raise FredTransportError(
                f"could not get {description}: {exc.__class__.__name__}",
                cause="network",
            ) from exc

        status_code = response.status_code
        logger.debug(
            "response received endpoint=%s http_status=%s bytes=%s",
            normalized_endpoint,
            status_code,
            len(body),
        )
        return RawResponse(body=body, status_code=status_code)

    @staticmethod
    def _normalize_endpoint(endpoint: str) -> str:
        return endpoint.lstrip("/")


__all__ = [
    "TransportResponse",
    "TransportClient",
    "RawResponse",
    "SyncTransport",
    "ApiKeyRedactingFilter",
    "install_api_key_redaction",
    "build_default_headers",
    "build_default_timeout",
]
