"""Parsers from FRED wire documents into typed response objects."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TypeVar

from ..core.errors import DecodeErrorKind, FredDecodeError, FredUnexpectedCountError
from ..core.scalars import (
    FilterType,
    Frequency,
    OrderType,
    SeasonalAdjustment,
    SortType,
    TagGroup,
    UnitType,
    decode_date,
    decode_int,
    decode_observation,
    decode_text,
    decode_timestamp,
    parse_enum_value,
)
from ..core.wire import Record, WireDocument
from .models import (
    Category,
    ObservationsResponse,
    ResponseMeta,
    Series,
    SeriesListResponse,
    SeriesUpdatesResponse,
    Tag,
    TagListResponse,
)

logger = logging.getLogger("fred_api_client")

_T = TypeVar("_T")


def _require(record: Record, key: str, *, noun: str) -> object:
    value = record.get(key)
    if value is None:
        raise FredDecodeError(f"no {key} in {noun}", kind=DecodeErrorKind.BAD_FORMAT)
    return value


def _optional(record: Mapping[str, object], key: str) -> object | None:
    value = record.get(key)
    if value is None or value == "":
        return None
    return value


def _optional_text(record: Record, key: str) -> str | None:
    value = _optional(record, key)
    return decode_text(value, name=key) if value is not None else None


def _decode_frequency(value: object, *, lenient: bool) -> Frequency:
    try:
        return Frequency.parse(value)
    except FredDecodeError as exc:
        if not lenient:
            raise
        logger.warning("substituting unknown frequency: %s", exc)
        return Frequency.UNKNOWN


def _decode_all(
    records: Sequence[Record],
    decode: Callable[[Record], _T],
    *,
    noun: str,
) -> tuple[_T, ...]:
    items: list[_T] = []
    for index, record in enumerate(records):
        try:
            items.append(decode(record))
        except FredDecodeError as exc:
            raise exc.prefix(f"{noun} {index}")
    return tuple(items)


def parse_category(record: Record) -> Category:
    return Category(
        id=decode_int(_require(record, "id", noun="category"), name="id"),
        name=decode_text(_require(record, "name", noun="category"), name="name"),
        parent_id=decode_int(_require(record, "parent_id", noun="category"), name="parent_id"),
        notes=_optional_text(record, "notes"),
    )


def parse_series_record(record: Record, *, lenient_frequency: bool = False) -> Series:
    def field(key: str) -> object:
        return _require(record, key, noun="series")

    return Series(
        id=decode_text(field("id"), name="id"),
        realtime_start=decode_date(field("realtime_start"), name="realtime_start"),
        realtime_end=decode_date(field("realtime_end"), name="realtime_end"),
        title=decode_text(field("title"), name="title"),
        observation_start=decode_date(field("observation_start"), name="observation_start"),
        observation_end=decode_date(field("observation_end"), name="observation_end"),
        frequency=_decode_frequency(field("frequency"), lenient=lenient_frequency),
        units=decode_text(field("units"), name="units"),
        units_short=_optional_text(record, "units_short"),
        seasonal_adjustment=SeasonalAdjustment.parse(field("seasonal_adjustment")),
        last_updated=decode_timestamp(field("last_updated"), name="last_updated"),
        popularity=decode_int(field("popularity"), name="popularity"),
        notes=_optional_text(record, "notes"),
    )


def parse_tag(record: Record) -> Tag:
    def field(key: str) -> object:
        return _require(record, key, noun="tag")

    return Tag(
        name=decode_text(field("name"), name="name"),
        group=TagGroup.parse(field("group_id")),
        notes=_optional_text(record, "notes"),
        created=decode_timestamp(field("created"), name="created"),
        popularity=decode_int(field("popularity"), name="popularity"),
        series_count=decode_int(field("series_count"), name="series_count"),
    )


def parse_meta(meta: Mapping[str, object]) -> ResponseMeta:
    def optional(key: str, decode: Callable[[object], _T]) -> _T | None:
        value = _optional(meta, key)
        return decode(value) if value is not None else None

    return ResponseMeta(
        realtime_start=optional("realtime_start", lambda v: decode_date(v, name="realtime_start")),
        realtime_end=optional("realtime_end", lambda v: decode_date(v, name="realtime_end")),
        order_by=optional("order_by", lambda v: parse_enum_value(OrderType, v, name="order_by")),
        sort_order=optional(
            "sort_order", lambda v: parse_enum_value(SortType, v, name="sort_order")
        ),
        count=optional("count", lambda v: decode_int(v, name="count")),
        offset=optional("offset", lambda v: decode_int(v, name="offset")),
        limit=optional("limit", lambda v: decode_int(v, name="limit")),
    )


def parse_categories(document: WireDocument) -> tuple[Category, ...]:
    return _decode_all(document.collection("categories"), parse_category, noun="category")


def _parse_series_collection(
    document: WireDocument,
    *,
    lenient_frequency: bool,
) -> tuple[Series, ...]:
    return _decode_all(
        document.collection("seriess"),
        lambda record: parse_series_record(record, lenient_frequency=lenient_frequency),
        noun="series",
    )


def parse_series_list(
    document: WireDocument,
    *,
    lenient_frequency: bool = False,
) -> SeriesListResponse:
    return SeriesListResponse(
        meta=parse_meta(document.meta),
        series=_parse_series_collection(document, lenient_frequency=lenient_frequency),
    )


def parse_tag_list(document: WireDocument) -> TagListResponse:
    return TagListResponse(
        meta=parse_meta(document.meta),
        tags=_decode_all(document.collection("tags"), parse_tag, noun="tag"),
    )


def parse_observations(document: WireDocument) -> ObservationsResponse:
    meta = document.meta
    observation_start = _optional(meta, "observation_start")
    observation_end = _optional(meta, "observation_end")
    units = _optional(meta, "units")
    return ObservationsResponse(
        meta=parse_meta(meta),
        observation_start=(
            decode_date(observation_start, name="observation_start")
            if observation_start is not None
            else None
        ),
        observation_end=(
            decode_date(observation_end, name="observation_end")
            if observation_end is not None
            else None
        ),
        units=UnitType.parse(units) if units is not None else None,
        observations=_decode_all(
            document.collection("observations"),
            decode_observation,
            noun="observation",
        ),
    )


def parse_series_updates(
    document: WireDocument,
    *,
    lenient_frequency: bool = False,
) -> SeriesUpdatesResponse:
    filter_value = _optional(document.meta, "filter_value")
    return SeriesUpdatesResponse(
        meta=parse_meta(document.meta),
        filter_variable=_optional_text(document.meta, "filter_variable"),
        filter_value=(
            parse_enum_value(FilterType, filter_value, name="filter_value")
            if filter_value is not None
            else None
        ),
        series=_parse_series_collection(document, lenient_frequency=lenient_frequency),
    )


def expect_single(items: Sequence[_T], *, noun: str) -> _T:
    """Unwrap the only entity of a singular-result endpoint."""

    if len(items) == 0:
        raise FredUnexpectedCountError(f"received an empty {noun} list", count=0)
    if len(items) > 1:
        raise FredUnexpectedCountError(
            f"expected only a single {noun}, received {len(items)}",
            count=len(items),
        )
    return items[0]


__all__ = [
    "parse_category",
    "parse_series_record",
    "parse_tag",
    "parse_meta",
    "parse_categories",
    "parse_series_list",
    "parse_tag_list",
    "parse_observations",
    "parse_series_updates",
    "expect_single",
]
