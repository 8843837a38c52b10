"""Shared helpers for client bootstrap."""

from __future__ import annotations

from .config import FredClientConfig
from .core.errors import FredValidationError


def validate_client_config(config: FredClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise FredValidationError(str(exc)) from exc


__all__ = [
    "validate_client_config",
]
