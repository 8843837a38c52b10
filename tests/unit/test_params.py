from __future__ import annotations

from datetime import date

import pytest

from fred_api_client.core.fragments import (
    ApiKey,
    BaseParams,
    DateRange,
    ObservationRange,
    Paging,
    Tagging,
    TextFilter,
)
from fred_api_client.core.scalars import FilterType, SearchType, TagGroup
from fred_api_client.core.wire import ResponseFormat
from fred_api_client.endpoints.params import (
    build_category_params,
    build_category_related_tags_params,
    build_category_series_params,
    build_category_tags_params,
    build_series_observations_params,
    build_series_search_params,
    build_series_search_tags_params,
    build_series_updates_params,
)
from fred_api_client.endpoints.queries import (
    CategoryRelatedTagsQuery,
    CategorySeriesQuery,
    CategoryTagsQuery,
    SeriesObservationsQuery,
    SeriesSearchQuery,
    SeriesSearchTagsQuery,
    SeriesUpdatesQuery,
)
from tests.shared.transport import API_KEY


@pytest.fixture
def base() -> BaseParams:
    return BaseParams(api_key=ApiKey(API_KEY), response_format=ResponseFormat.XML)


def test_build_category_params(base):
    assert build_category_params(base, 125) == {
        "api_key": API_KEY,
        "file_type": "xml",
        "category_id": "125",
    }


def test_build_category_series_params_limit_wraps(base):
    query = CategorySeriesQuery(category_id=125, paging=Paging(limit=1500))
    params = build_category_series_params(base, query)
    assert params["limit"] == "500"
    assert params["category_id"] == "125"

    query = CategorySeriesQuery(category_id=125, paging=Paging(limit=1000))
    assert build_category_series_params(base, query)["limit"] == "1"


def test_build_category_tags_params_omits_none_tag_group(base):
    params = build_category_tags_params(base, CategoryTagsQuery(category_id=125))
    assert "tag_group_id" not in params
    assert "search_text" not in params

    params = build_category_tags_params(
        base,
        CategoryTagsQuery(category_id=125, tag_group=TagGroup.GEOGRAPHY, search_text="usa"),
    )
    assert params["tag_group_id"] == "geo"
    assert params["search_text"] == "usa"


def test_build_category_related_tags_params(base):
    query = CategoryRelatedTagsQuery(category_id=125, tagging=Tagging(include=["services", "quarterly"]))
    params = build_category_related_tags_params(base, query)
    assert params["tag_names"] == "services;quarterly"


def test_build_series_observations_params(base):
    query = SeriesObservationsQuery(
        series_id="GNPCA",
        observation_range=ObservationRange(start=date(1930, 1, 1)),
        dates=DateRange(end=date(2013, 8, 14)),
    )
    assert build_series_observations_params(base, query) == {
        "api_key": API_KEY,
        "file_type": "xml",
        "realtime_end": "2013-08-14",
        "observation_start": "1930-01-01",
        "series_id": "GNPCA",
    }


def test_build_series_search_params_search_type_optional(base):
    params = build_series_search_params(base, SeriesSearchQuery(search_text="monetary service index"))
    assert params["search_text"] == "monetary service index"
    assert "search_type" not in params

    params = build_series_search_params(
        base,
        SeriesSearchQuery(search_text="GNP", search_type=SearchType.SERIES_ID),
    )
    assert params["search_type"] == "series_id"


def test_build_series_search_tags_params_sends_group_short_code(base):
    query = SeriesSearchTagsQuery(
        series_search_text="monetary service index",
        tag_group=TagGroup.SOURCE,
        tag_search_text="bea",
    )
    params = build_series_search_tags_params(base, query)
    assert params["series_search_text"] == "monetary service index"
    assert params["tag_group_id"] == "src"
    assert params["tag_search_text"] == "bea"


def test_build_series_updates_params(base):
    assert "filter_value" not in build_series_updates_params(base, SeriesUpdatesQuery())
    params = build_series_updates_params(base, SeriesUpdatesQuery(filter_value=FilterType.MACRO))
    assert params["filter_value"] == "macro"


def test_build_series_search_params_text_filter(base):
    query = SeriesSearchQuery(
        search_text="gnp",
        text_filter=TextFilter(variable=FilterType.FREQUENCY, value="Annual"),
    )
    params = build_series_search_params(base, query)
    assert params["filter_variable"] == "frequency"
    assert params["filter_value"] == "Annual"
