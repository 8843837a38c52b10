"""Query models."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.fragments import DateRange, ObservationRange, Ordering, Paging, Tagging, TextFilter
from ..core.scalars import FilterType, SearchType, TagGroup


@dataclass(slots=True, frozen=True)
class CategoryQuery:
    category_id: int
    dates: DateRange = field(default_factory=DateRange)


@dataclass(slots=True, frozen=True)
class CategorySeriesQuery:
    category_id: int
    dates: DateRange = field(default_factory=DateRange)
    paging: Paging = field(default_factory=Paging)
    ordering: Ordering = field(default_factory=Ordering)
    text_filter: TextFilter = field(default_factory=TextFilter)
    tagging: Tagging = field(default_factory=Tagging)


@dataclass(slots=True, frozen=True)
class CategoryTagsQuery:
    category_id: int
    tag_group: TagGroup = TagGroup.NONE
    search_text: str = ""
    dates: DateRange = field(default_factory=DateRange)
    paging: Paging = field(default_factory=Paging)
    ordering: Ordering = field(default_factory=Ordering)


@dataclass(slots=True, frozen=True)
class CategoryRelatedTagsQuery:
    category_id: int
    tagging: Tagging = field(default_factory=Tagging)
    tag_group: TagGroup = TagGroup.NONE
    search_text: str = ""
    dates: DateRange = field(default_factory=DateRange)
    paging: Paging = field(default_factory=Paging)
    ordering: Ordering = field(default_factory=Ordering)


@dataclass(slots=True, frozen=True)
class SeriesQuery:
    series_id: str
    dates: DateRange = field(default_factory=DateRange)


@dataclass(slots=True, frozen=True)
class SeriesObservationsQuery:
    series_id: str
    observation_range: ObservationRange = field(default_factory=ObservationRange)
    dates: DateRange = field(default_factory=DateRange)
    paging: Paging = field(default_factory=Paging)


@dataclass(slots=True, frozen=True)
class SeriesSearchQuery:
    search_text: str
    search_type: SearchType | None = None
    dates: DateRange = field(default_factory=DateRange)
    paging: Paging = field(default_factory=Paging)
    ordering: Ordering = field(default_factory=Ordering)
    text_filter: TextFilter = field(default_factory=TextFilter)
    tagging: Tagging = field(default_factory=Tagging)


@dataclass(slots=True, frozen=True)
class SeriesSearchTagsQuery:
    series_search_text: str
    tagging: Tagging = field(default_factory=Tagging)
    tag_group: TagGroup = TagGroup.NONE
    tag_search_text: str = ""
    dates: DateRange = field(default_factory=DateRange)
    paging: Paging = field(default_factory=Paging)
    ordering: Ordering = field(default_factory=Ordering)


@dataclass(slots=True, frozen=True)
class SeriesTagsQuery:
    series_id: str
    dates: DateRange = field(default_factory=DateRange)
    ordering: Ordering = field(default_factory=Ordering)


@dataclass(slots=True, frozen=True)
class SeriesUpdatesQuery:
    filter_value: FilterType | None = None
    dates: DateRange = field(default_factory=DateRange)
    paging: Paging = field(default_factory=Paging)


__all__ = [
    "CategoryQuery",
    "CategorySeriesQuery",
    "CategoryTagsQuery",
    "CategoryRelatedTagsQuery",
    "SeriesQuery",
    "SeriesObservationsQuery",
    "SeriesSearchQuery",
    "SeriesSearchTagsQuery",
    "SeriesTagsQuery",
    "SeriesUpdatesQuery",
]
