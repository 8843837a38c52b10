"""FRED endpoint package."""

from .models import (
    Category,
    Observation,
    ObservationsResponse,
    ResponseMeta,
    Series,
    SeriesListResponse,
    SeriesUpdatesResponse,
    Tag,
    TagListResponse,
)
from .queries import (
    CategoryQuery,
    CategoryRelatedTagsQuery,
    CategorySeriesQuery,
    CategoryTagsQuery,
    SeriesObservationsQuery,
    SeriesQuery,
    SeriesSearchQuery,
    SeriesSearchTagsQuery,
    SeriesTagsQuery,
    SeriesUpdatesQuery,
)

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
