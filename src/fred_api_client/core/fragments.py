"""Composable query-parameter fragments and the request assembler."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from .errors import FredValidationError
from .scalars import FilterType, OrderType, SortType, encode_date
from .wire import ResponseFormat

MAX_LIMIT = 1000
MAX_OFFSET = 999


class ParamFragment(Protocol):
    def merge_into(self, params: dict[str, str]) -> None: ...


@dataclass(slots=True, frozen=True)
class ApiKey:
    """Access token that never renders itself."""

    value: str = field(repr=False)

    def __str__(self) -> str:
        return "REDACTED"

    def __repr__(self) -> str:
        return "ApiKey(REDACTED)"


@dataclass(slots=True, frozen=True)
class BaseParams:
    api_key: ApiKey
    response_format: ResponseFormat

    def merge_into(self, params: dict[str, str]) -> None:
        params["api_key"] = self.api_key.value
        params["file_type"] = self.response_format.file_type


def _merge_dates(
    params: dict[str, str],
    *,
    start_key: str,
    end_key: str,
    start: date | None,
    end: date | None,
) -> None:
    if start is not None:
        params[start_key] = encode_date(start)
    if end is not None:
        params[end_key] = encode_date(end)


@dataclass(slots=True, frozen=True)
class DateRange:
    """Real-time period; ``None`` leaves a bound to the server default."""

    start: date | None = None
    end: date | None = None

    def merge_into(self, params: dict[str, str]) -> None:
        _merge_dates(
            params,
            start_key="realtime_start",
            end_key="realtime_end",
            start=self.start,
            end=self.end,
        )


@dataclass(slots=True, frozen=True)
class ObservationRange:
    start: date | None = None
    end: date | None = None

    def merge_into(self, params: dict[str, str]) -> None:
        _merge_dates(
            params,
            start_key="observation_start",
            end_key="observation_end",
            start=self.start,
            end=self.end,
        )


@dataclass(slots=True, frozen=True)
class Paging:
    """Limit/offset knobs. Zero means "absent".

    Out-of-range values are reduced by modulo rather than rejected, so a
    limit of exactly 1000 is sent as 1.
    """

    limit: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise FredValidationError("limit must be >= 0")
        if self.offset < 0:
            raise FredValidationError("offset must be >= 0")

    @property
    def effective_limit(self) -> int | None:
        if self.limit == 0:
            return None
        return (self.limit % MAX_LIMIT) or 1

    @property
    def effective_offset(self) -> int | None:
        if self.offset == 0:
            return None
        return self.offset % MAX_OFFSET

    def merge_into(self, params: dict[str, str]) -> None:
        limit = self.effective_limit
        if limit is not None:
            params["limit"] = str(limit)
        offset = self.effective_offset
        if offset is not None:
            params["offset"] = str(offset)


@dataclass(slots=True, frozen=True)
class Ordering:
    order_by: OrderType | None = None
    sort_order: SortType | None = None

    def merge_into(self, params: dict[str, str]) -> None:
        if self.order_by:
            params["order_by"] = OrderType(self.order_by).value
        if self.sort_order:
            params["sort_order"] = SortType(self.sort_order).value


@dataclass(slots=True, frozen=True)
class TextFilter:
    variable: FilterType | None = None
    value: str = ""

    def merge_into(self, params: dict[str, str]) -> None:
        if self.variable:
            params["filter_variable"] = FilterType(self.variable).value
        if self.value:
            params["filter_value"] = self.value


def _as_tag_tuple(values: Sequence[str], *, name: str) -> tuple[str, ...]:
    if isinstance(values, str):
        raise TypeError(f"{name} must be a sequence of str, not str")
    normalized: list[str] = []
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"{name} entries must be str")
        normalized.append(value)
    return tuple(normalized)


@dataclass(slots=True, frozen=True)
class Tagging:
    include: Sequence[str] = ()
    exclude: Sequence[str] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "include", _as_tag_tuple(self.include, name="include"))
        object.__setattr__(self, "exclude", _as_tag_tuple(self.exclude, name="exclude"))

    def merge_into(self, params: dict[str, str]) -> None:
        if self.include:
            params["tag_names"] = ";".join(self.include)
        if self.exclude:
            params["exclude_tag_name"] = ";".join(self.exclude)


def assemble_params(
    base: BaseParams,
    *fragments: ParamFragment | None,
    required: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Merge base, optional fragments, then endpoint-required parameters."""

    params: dict[str, str] = {}
    base.merge_into(params)
    for fragment in fragments:
        if fragment is not None:
            fragment.merge_into(params)
    if required:
        params.update(required)
    return params


__all__ = [
    "MAX_LIMIT",
    "MAX_OFFSET",
    "ParamFragment",
    "ApiKey",
    "BaseParams",
    "DateRange",
    "ObservationRange",
    "Paging",
    "Ordering",
    "TextFilter",
    "Tagging",
    "assemble_params",
]
