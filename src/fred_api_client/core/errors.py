"""Error types and status mapping."""

from __future__ import annotations

from enum import Enum


class DecodeErrorKind(str, Enum):
    BAD_FORMAT = "bad_format"
    BAD_VALUE = "bad_value"


class FredApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        code: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.code = code
        self.cause = cause

    def __str__(self) -> str:
        return self.message

    def prefix(self, context: str) -> "FredApiError":
        """Prepend operation context to the message and return ``self``."""

        self.message = f"{context}: {self.message}"
        self.args = (self.message,)
        return self


class FredTransportError(FredApiError):
    """Network/transport-level failure before any status is known."""


class FredClientClosedError(FredApiError):
    """Raised when client is used after close."""


class FredValidationError(FredApiError):
    """Invalid local input or configuration."""


class FredParseError(FredApiError):
    """Response body could not be decoded."""


class FredDecodeError(FredParseError):
    """A single wire value could not be decoded into its domain type."""

    def __init__(
        self,
        message: str,
        *,
        kind: DecodeErrorKind,
        fallback: object = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.fallback = fallback


class FredInvalidRequestError(FredApiError):
    """Request rejected by the server (HTTP 400)."""

    def __init__(
        self,
        message: str,
        *,
        server_message: str,
        http_status: int | None = 400,
        code: int | None = None,
    ) -> None:
        super().__init__(message, http_status=http_status, code=code)
        self.server_message = server_message


class FredNotFoundError(FredApiError):
    """Endpoint or resource not found (HTTP 404)."""


class FredUnknownServerError(FredApiError):
    """Any other non-success HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        server_message: str | None = None,
        http_status: int | None = None,
        code: int | None = None,
    ) -> None:
        super().__init__(message, http_status=http_status, code=code)
        self.server_message = server_message


class FredUnexpectedCountError(FredApiError):
    """A singular-result endpoint returned zero or several entities."""

    def __init__(self, message: str, *, count: int) -> None:
        super().__init__(message)
        self.count = count


class FredUnknownResponseFormatError(FredApiError):
    """Requested response format is neither JSON nor XML."""


def classify_http_status(
    http_status: int,
    *,
    description: str,
    server_message: str | None = None,
    code: int | None = None,
) -> FredApiError | None:
    """Map an HTTP status and decoded error envelope to a domain exception."""

    if http_status == 200:
        return None
    if http_status == 404:
        return FredNotFoundError(
            f"could not find {description}: {http_status}",
            http_status=http_status,
        )
    if http_status == 400:
        return FredInvalidRequestError(
            f"invalid {description} request: {server_message}",
            server_message=server_message or "",
            http_status=http_status,
            code=code,
        )
    return FredUnknownServerError(
        f"could not get {description} ({code}): {server_message}",
        server_message=server_message,
        http_status=http_status,
        code=code,
    )


__all__ = [
    "DecodeErrorKind",
    "FredApiError",
    "FredTransportError",
    "FredClientClosedError",
    "FredValidationError",
    "FredParseError",
    "FredDecodeError",
    "FredInvalidRequestError",
    "FredNotFoundError",
    "FredUnknownServerError",
    "FredUnexpectedCountError",
    "FredUnknownResponseFormatError",
    "classify_http_status",
]
