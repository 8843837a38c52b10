from __future__ import annotations

from datetime import date

import pytest

from fred_api_client.core.errors import FredValidationError
from fred_api_client.core.fragments import (
    ApiKey,
    BaseParams,
    DateRange,
    ObservationRange,
    Ordering,
    Paging,
    Tagging,
    TextFilter,
    assemble_params,
)
from fred_api_client.core.scalars import FilterType, OrderType, SortType
from fred_api_client.core.wire import ResponseFormat
from tests.shared.transport import API_KEY


def _merged(fragment) -> dict[str, str]:
    params: dict[str, str] = {}
    fragment.merge_into(params)
    return params


@pytest.mark.parametrize(
    ("limit", "expected"),
    [(1, "1"), (999, "999"), (1000, "1"), (1500, "500"), (2000, "1"), (2001, "1")],
)
def test_paging_limit_is_reduced_into_range(limit, expected):
    assert _merged(Paging(limit=limit))["limit"] == expected


@pytest.mark.parametrize(("offset", "expected"), [(1, "1"), (998, "998"), (999, "0"), (1000, "1")])
def test_paging_offset_is_reduced_modulo_999(offset, expected):
    assert _merged(Paging(offset=offset))["offset"] == expected


def test_paging_bounds_hold_for_many_values():
    for value in range(1, 5000, 7):
        params = _merged(Paging(limit=value, offset=value))
        assert 1 <= int(params["limit"]) <= 1000
        assert 0 <= int(params["offset"]) <= 998


def test_paging_zero_omits_keys():
    assert _merged(Paging()) == {}
    assert _merged(Paging(limit=0, offset=5)) == {"offset": "5"}


def test_paging_rejects_negative_values():
    with pytest.raises(FredValidationError):
        Paging(limit=-1)
    with pytest.raises(FredValidationError):
        Paging(offset=-1)


def test_date_range_emits_only_set_bounds():
    assert _merged(DateRange()) == {}
    assert _merged(DateRange(start=date(1970, 1, 1))) == {"realtime_start": "1970-01-01"}
    assert _merged(DateRange(end=date(2013, 8, 14))) == {"realtime_end": "2013-08-14"}


def test_observation_range_uses_its_own_keys():
    params = _merged(ObservationRange(start=date(2000, 1, 1), end=date(2001, 1, 1)))
    assert params == {"observation_start": "2000-01-01", "observation_end": "2001-01-01"}


def test_ordering_and_filter_omit_empty_values():
    assert _merged(Ordering()) == {}
    assert _merged(TextFilter()) == {}
    assert _merged(Ordering(order_by=OrderType.POPULARITY, sort_order=SortType.DESCENDING)) == {
        "order_by": "popularity",
        "sort_order": "desc",
    }
    assert _merged(TextFilter(variable=FilterType.FREQUENCY, value="Monthly")) == {
        "filter_variable": "frequency",
        "filter_value": "Monthly",
    }


def test_tagging_joins_with_semicolons():
    params = _merged(Tagging(include=["usa", "gdp"], exclude=("discontinued",)))
    assert params == {"tag_names": "usa;gdp", "exclude_tag_name": "discontinued"}
    assert _merged(Tagging()) == {}


def test_tagging_rejects_bare_string():
    with pytest.raises(TypeError):
        Tagging(include="usa")


def test_merge_is_additive_and_idempotent():
    params = {"category_id": "125"}
    paging = Paging(limit=10)
    paging.merge_into(params)
    paging.merge_into(params)
    assert params == {"category_id": "125", "limit": "10"}


def test_api_key_is_redacted():
    key = ApiKey(API_KEY)
    assert str(key) == "REDACTED"
    assert API_KEY not in repr(key)
    base = BaseParams(api_key=key, response_format=ResponseFormat.XML)
    assert API_KEY not in repr(base)


def test_assemble_params_merges_base_fragments_and_required():
    base = BaseParams(api_key=ApiKey(API_KEY), response_format=ResponseFormat.JSON)
    params = assemble_params(
        base,
        DateRange(start=date(2013, 1, 1)),
        None,
        Paging(limit=1500),
        required={"category_id": "125"},
    )
    assert params == {
        "api_key": API_KEY,
        "file_type": "json",
        "realtime_start": "2013-01-01",
        "limit": "500",
        "category_id": "125",
    }


def test_assemble_params_is_order_independent_for_disjoint_fragments():
    base = BaseParams(api_key=ApiKey(API_KEY), response_format=ResponseFormat.XML)
    fragments = [DateRange(end=date(2013, 1, 1)), Paging(offset=3), Tagging(include=["usa"])]
    assert assemble_params(base, *fragments) == assemble_params(base, *reversed(fragments))
