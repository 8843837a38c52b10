"""Request parameter builders for FRED endpoints."""

from __future__ import annotations

from ..core.fragments import BaseParams, TextFilter, assemble_params
from ..core.scalars import TagGroup
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


def _tag_group_param(group: TagGroup) -> dict[str, str]:
    if group is TagGroup.NONE:
        return {}
    return {"tag_group_id": group.code}


def _text_param(name: str, value: str) -> dict[str, str]:
    if not value:
        return {}
    return {name: value}


def build_category_params(base: BaseParams, category_id: int) -> dict[str, str]:
    return assemble_params(base, required={"category_id": str(category_id)})


def build_category_listing_params(base: BaseParams, query: CategoryQuery) -> dict[str, str]:
    return assemble_params(base, query.dates, required={"category_id": str(query.category_id)})


def build_category_series_params(base: BaseParams, query: CategorySeriesQuery) -> dict[str, str]:
    return assemble_params(
        base,
        query.dates,
        query.paging,
        query.ordering,
        query.text_filter,
        query.tagging,
        required={"category_id": str(query.category_id)},
    )


def build_category_tags_params(base: BaseParams, query: CategoryTagsQuery) -> dict[str, str]:
    return assemble_params(
        base,
        query.dates,
        query.paging,
        query.ordering,
        required={
            "category_id": str(query.category_id),
            **_tag_group_param(query.tag_group),
            **_text_param("search_text", query.search_text),
        },
    )


def build_category_related_tags_params(
    base: BaseParams,
    query: CategoryRelatedTagsQuery,
) -> dict[str, str]:
    return assemble_params(
        base,
        query.dates,
        query.tagging,
        query.paging,
        query.ordering,
        required={
            "category_id": str(query.category_id),
            **_tag_group_param(query.tag_group),
            **_text_param("search_text", query.search_text),
        },
    )


def build_series_params(base: BaseParams, query: SeriesQuery) -> dict[str, str]:
    return assemble_params(base, query.dates, required={"series_id": query.series_id})


def build_series_observations_params(
    base: BaseParams,
    query: SeriesObservationsQuery,
) -> dict[str, str]:
    return assemble_params(
        base,
        query.dates,
        query.paging,
        query.observation_range,
        required={"series_id": query.series_id},
    )


def build_series_search_params(base: BaseParams, query: SeriesSearchQuery) -> dict[str, str]:
    required = {"search_text": query.search_text}
    if query.search_type is not None:
        required["search_type"] = query.search_type.value
    return assemble_params(
        base,
        query.dates,
        query.paging,
        query.ordering,
        query.text_filter,
        query.tagging,
        required=required,
    )


def build_series_search_tags_params(
    base: BaseParams,
    query: SeriesSearchTagsQuery,
) -> dict[str, str]:
    return assemble_params(
        base,
        query.dates,
        query.tagging,
        query.paging,
        query.ordering,
        required={
            "series_search_text": query.series_search_text,
            **_text_param("tag_search_text", query.tag_search_text),
            **_tag_group_param(query.tag_group),
        },
    )


def build_series_tags_params(base: BaseParams, query: SeriesTagsQuery) -> dict[str, str]:
    return assemble_params(
        base,
        query.dates,
        query.ordering,
        required={"series_id": query.series_id},
    )


def build_series_updates_params(base: BaseParams, query: SeriesUpdatesQuery) -> dict[str, str]:
    value = query.filter_value.value if query.filter_value is not None else ""
    return assemble_params(base, query.dates, query.paging, TextFilter(value=value))


__all__ = [
    "build_category_params",
    "build_category_listing_params",
    "build_category_series_params",
    "build_category_tags_params",
    "build_category_related_tags_params",
    "build_series_params",
    "build_series_observations_params",
    "build_series_search_params",
    "build_series_search_tags_params",
    "build_series_tags_params",
    "build_series_updates_params",
]
