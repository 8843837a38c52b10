"""FRED domain and response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.scalars import (
    FilterType,
    Frequency,
    Observation,
    OrderType,
    SeasonalAdjustment,
    SortType,
    TagGroup,
    UnitType,
    encode_date,
    encode_timestamp,
)


def _without_none(record: dict[str, object]) -> dict[str, object]:
    return {key: value for key, value in record.items() if value is not None}


@dataclass(slots=True, frozen=True)
class Category:
    id: int
    name: str
    parent_id: int
    notes: str | None = None

    def to_record(self) -> dict[str, object]:
        return _without_none(
            {"id": self.id, "name": self.name, "parent_id": self.parent_id, "notes": self.notes}
        )


@dataclass(slots=True, frozen=True)
class Series:
    id: str
    realtime_start: date
    realtime_end: date
    title: str
    observation_start: date
    observation_end: date
    frequency: Frequency
    units: str
    units_short: str | None
    seasonal_adjustment: SeasonalAdjustment
    last_updated: datetime
    popularity: int
    notes: str | None = None

    def to_record(self) -> dict[str, object]:
        return _without_none(
            {
                "id": self.id,
                "realtime_start": encode_date(self.realtime_start),
                "realtime_end": encode_date(self.realtime_end),
                "title": self.title,
                "observation_start": encode_date(self.observation_start),
                "observation_end": encode_date(self.observation_end),
                "frequency": self.frequency.label,
                "units": self.units,
                "units_short": self.units_short,
                "seasonal_adjustment": self.seasonal_adjustment.label,
                "last_updated": encode_timestamp(self.last_updated),
                "popularity": self.popularity,
                "notes": self.notes,
            }
        )


@dataclass(slots=True, frozen=True)
class Tag:
    name: str
    group: TagGroup
    notes: str | None
    created: datetime
    popularity: int
    series_count: int

    def to_record(self) -> dict[str, object]:
        return _without_none(
            {
                "name": self.name,
                "group_id": self.group.code,
                "notes": self.notes,
                "created": encode_timestamp(self.created),
                "popularity": self.popularity,
                "series_count": self.series_count,
            }
        )


@dataclass(slots=True, frozen=True)
class ResponseMeta:
    """Request metadata echoed back by the server."""

    realtime_start: date | None = None
    realtime_end: date | None = None
    order_by: OrderType | None = None
    sort_order: SortType | None = None
    count: int | None = None
    offset: int | None = None
    limit: int | None = None

    def to_record(self) -> dict[str, object]:
        return _without_none(
            {
                "realtime_start": encode_date(self.realtime_start) if self.realtime_start else None,
                "realtime_end": encode_date(self.realtime_end) if self.realtime_end else None,
                "order_by": self.order_by.value if self.order_by else None,
                "sort_order": self.sort_order.value if self.sort_order else None,
                "count": self.count,
                "offset": self.offset,
                "limit": self.limit,
            }
        )


@dataclass(slots=True, frozen=True)
class SeriesListResponse:
    meta: ResponseMeta
    series: tuple[Series, ...] | list[Series]

    def __post_init__(self) -> None:
        if isinstance(self.series, tuple):
            return
        object.__setattr__(self, "series", tuple(self.series))


@dataclass(slots=True, frozen=True)
class TagListResponse:
    meta: ResponseMeta
    tags: tuple[Tag, ...] | list[Tag]

    def __post_init__(self) -> None:
        if isinstance(self.tags, tuple):
            return
        object.__setattr__(self, "tags", tuple(self.tags))


@dataclass(slots=True, frozen=True)
class ObservationsResponse:
    meta: ResponseMeta
    observation_start: date | None
    observation_end: date | None
    units: UnitType | None
    observations: tuple[Observation, ...] | list[Observation]

    def __post_init__(self) -> None:
        if isinstance(self.observations, tuple):
            return
        object.__setattr__(self, "observations", tuple(self.observations))

    def valid_observations(self) -> tuple[Observation, ...]:
        return tuple(point for point in self.observations if point.valid)


@dataclass(slots=True, frozen=True)
class SeriesUpdatesResponse:
    meta: ResponseMeta
    filter_variable: str | None
    filter_value: FilterType | None
    series: tuple[Series, ...] | list[Series]

    def __post_init__(self) -> None:
        if isinstance(self.series, tuple):
            return
        object.__setattr__(self, "series", tuple(self.series))


__all__ = [
    "Category",
    "Series",
    "Tag",
    "Observation",
    "ResponseMeta",
    "SeriesListResponse",
    "TagListResponse",
    "ObservationsResponse",
    "SeriesUpdatesResponse",
]
