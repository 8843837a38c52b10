"""Core response models."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import FredParseError
from .scalars import decode_int, decode_text
from .wire import ResponseFormat, WireDocument, load_document

_MESSAGE_KEYS = ("error_message", "message")
_CODE_KEYS = ("error_code", "code")


def _first_present(document: WireDocument, keys: tuple[str, ...]) -> object:
    for key in keys:
        value = document.meta.get(key)
        if value is not None:
            return value
    return None


@dataclass(slots=True, frozen=True)
class ErrorEnvelope:
    message: str
    code: int | None

    @classmethod
    def from_document(cls, document: WireDocument) -> "ErrorEnvelope":
        raw_message = _first_present(document, _MESSAGE_KEYS)
        if raw_message is None:
            raise FredParseError("error response carries no message")
        raw_code = _first_present(document, _CODE_KEYS)
        return cls(
            message=decode_text(raw_message, name="error_message"),
            code=decode_int(raw_code, name="error_code") if raw_code is not None else None,
        )

    @classmethod
    def from_body(cls, body: bytes, response_format: ResponseFormat) -> "ErrorEnvelope":
        return cls.from_document(load_document(body, response_format))


__all__ = [
    "ErrorEnvelope",
]
