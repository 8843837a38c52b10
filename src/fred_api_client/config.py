"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

from .core.wire import ResponseFormat

API_URL = "https://api.stlouisfed.org/fred"
API_KEY_LENGTH = 32


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class DecodingConfig:
    """Response decoding policy."""

    lenient_frequency: bool = False

    def validate(self) -> None:
        if not isinstance(self.lenient_frequency, bool):
            raise ValueError("decoding.lenient_frequency must be bool")


@dataclass(slots=True, frozen=True)
class FredClientConfig:
    """Runtime configuration for the FRED client."""

    api_key: str = field(default="", repr=False)
    response_format: ResponseFormat = ResponseFormat.JSON
    base_url: str = API_URL
    user_agent: str = "fred-api-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    decoding: DecodingConfig = field(default_factory=DecodingConfig)

    @classmethod
    def from_env(
        cls,
        *,
        dotenv_path: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "FredClientConfig":
        """Build a config from ``FRED_API_KEY`` and ``FRED_FILE_TYPE``.

        Process environment wins over values read from ``dotenv_path``.
        """

        values: dict[str, str] = {}
        if dotenv_path is not None:
            values.update(
                {k: v for k, v in dotenv_values(dotenv_path).items() if v is not None}
            )
        values.update(os.environ if environ is None else environ)

        file_type = values.get("FRED_FILE_TYPE", ResponseFormat.JSON.file_type).lower()
        try:
            response_format = ResponseFormat(file_type)
        except ValueError as exc:
            raise ValueError(f"FRED_FILE_TYPE must be json or xml, got {file_type!r}") from exc
        return cls(
            api_key=values.get("FRED_API_KEY", ""),
            response_format=response_format,
        )

    def validate(self) -> None:
        if len(self.api_key) != API_KEY_LENGTH:
            raise ValueError("api key is invalid length")
        if not isinstance(self.response_format, ResponseFormat):
            raise ValueError("response_format must be ResponseFormat.JSON or ResponseFormat.XML")
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        self.transport.validate()
        self.decoding.validate()


__all__ = [
    "API_URL",
    "API_KEY_LENGTH",
    "TransportConfig",
    "DecodingConfig",
    "FredClientConfig",
]
