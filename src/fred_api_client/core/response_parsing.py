"""Response evaluation: HTTP status decision table and body decoding."""

from __future__ import annotations

import logging

from .errors import FredApiError, FredParseError, classify_http_status
from .models import ErrorEnvelope
from .transport import RawResponse
from .wire import ResponseFormat, WireDocument, load_document

logger = logging.getLogger("fred_api_client")


def decode_error_envelope(
    body: bytes,
    response_format: ResponseFormat,
    *,
    description: str,
) -> ErrorEnvelope:
    try:
        return ErrorEnvelope.from_body(body, response_format)
    except FredParseError as exc:
        raise FredParseError(
            f"failed to parse {description} error response: {exc}",
        ) from exc


def evaluate_response(
    raw: RawResponse,
    *,
    description: str,
    response_format: ResponseFormat,
) -> WireDocument:
    """Return the decoded success document or raise the classified error.

    200 decodes the body; 404 is raised without reading the body; 400 and
    every other status decode the ``{error_message, error_code}`` envelope.
    """

    status = raw.status_code
    if status != 200:
        error = _classify_failure(raw, description=description, response_format=response_format)
        if error is not None:
            logger.error("request failed description=%s http_status=%s", description, status)
            raise error

    document = load_document(raw.body, response_format)
    logger.info("request success description=%s", description)
    return document


def _classify_failure(
    raw: RawResponse,
    *,
    description: str,
    response_format: ResponseFormat,
) -> FredApiError | None:
    if raw.status_code == 404:
        return classify_http_status(raw.status_code, description=description)
    envelope = decode_error_envelope(raw.body, response_format, description=description)
    return classify_http_status(
        raw.status_code,
        description=description,
        server_message=envelope.message,
        code=envelope.code,
    )


__all__ = [
    "decode_error_envelope",
    "evaluate_response",
]
