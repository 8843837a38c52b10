"""Endpoint services: one request/response cycle per call."""

from __future__ import annotations

from collections.abc import Callable

from ..config import FredClientConfig
from ..core.errors import FredApiError
from ..core.fragments import ApiKey, BaseParams
from ..core.response_parsing import evaluate_response
from ..core.transport import SyncTransport
from ..core.wire import WireDocument
from .models import (
    Category,
    ObservationsResponse,
    Series,
    SeriesListResponse,
    SeriesUpdatesResponse,
    TagListResponse,
)
from .params import (
    build_category_listing_params,
    build_category_params,
    build_category_related_tags_params,
    build_category_series_params,
    build_category_tags_params,
    build_series_observations_params,
    build_series_params,
    build_series_search_params,
    build_series_search_tags_params,
    build_series_tags_params,
    build_series_updates_params,
)
from .parser import (
    expect_single,
    parse_categories,
    parse_observations,
    parse_series_list,
    parse_series_updates,
    parse_tag_list,
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


def _no_guard() -> None:
    return None


class _EndpointService:
    def __init__(
        self,
        transport: SyncTransport,
        config: FredClientConfig,
        *,
        ensure_open: Callable[[], None] = _no_guard,
    ) -> None:
        self._transport = transport
        self._format = config.response_format
        self._base = BaseParams(api_key=ApiKey(config.api_key), response_format=config.response_format)
        self._lenient_frequency = config.decoding.lenient_frequency
        self._ensure_open = ensure_open

    def _fetch(self, description: str, endpoint: str, params: dict[str, str]) -> WireDocument:
        self._ensure_open()
        raw = self._transport.get(description, endpoint, params=params)
        return evaluate_response(raw, description=description, response_format=self._format)


class CategoryService(_EndpointService):
    """``/fred/category*`` endpoints."""

    def get(self, category_id: int) -> Category:
        """Return the single category with this id."""

        try:
            document = self._fetch(
                "category",
                "/category",
                build_category_params(self._base, category_id),
            )
            return expect_single(parse_categories(document), noun="category")
        except FredApiError as exc:
            raise exc.prefix(f"error getting category {category_id}")

    def children(self, query: CategoryQuery) -> tuple[Category, ...]:
        try:
            document = self._fetch(
                "category children",
                "/category/children",
                build_category_listing_params(self._base, query),
            )
            return parse_categories(document)
        except FredApiError as exc:
            raise exc.prefix(f"error getting children of category {query.category_id}")

    def related(self, query: CategoryQuery) -> tuple[Category, ...]:
        try:
            document = self._fetch(
                "related categories",
                "/category/related",
                build_category_listing_params(self._base, query),
            )
            return parse_categories(document)
        except FredApiError as exc:
            raise exc.prefix(f"error getting categories related to {query.category_id}")

    def series(self, query: CategorySeriesQuery) -> SeriesListResponse:
        try:
            document = self._fetch(
                "series in category",
                "/category/series",
                build_category_series_params(self._base, query),
            )
            return parse_series_list(document, lenient_frequency=self._lenient_frequency)
        except FredApiError as exc:
            raise exc.prefix(f"error getting series in category {query.category_id}")

    def tags(self, query: CategoryTagsQuery) -> TagListResponse:
        try:
            document = self._fetch(
                "category tags",
                "/category/tags",
                build_category_tags_params(self._base, query),
            )
            return parse_tag_list(document)
        except FredApiError as exc:
            raise exc.prefix(f"error getting tags for category {query.category_id}")

    def related_tags(self, query: CategoryRelatedTagsQuery) -> TagListResponse:
        try:
            document = self._fetch(
                "category related tags",
                "/category/related_tags",
                build_category_related_tags_params(self._base, query),
            )
            return parse_tag_list(document)
        except FredApiError as exc:
            raise exc.prefix(f"error getting related tags for category {query.category_id}")


class SeriesService(_EndpointService):
    """``/fred/series*`` endpoints."""

    def get(self, query: SeriesQuery) -> Series:
        """Return the single series with this id."""

        try:
            document = self._fetch("series", "/series", build_series_params(self._base, query))
            listing = parse_series_list(document, lenient_frequency=self._lenient_frequency)
            return expect_single(listing.series, noun="series")
        except FredApiError as exc:
            raise exc.prefix(f"error getting series {query.series_id}")

    def categories(self, query: SeriesQuery) -> tuple[Category, ...]:
        try:
            document = self._fetch(
                "series categories",
                "/series/categories",
                build_series_params(self._base, query),
            )
            return parse_categories(document)
        except FredApiError as exc:
            raise exc.prefix(f"error getting categories of series {query.series_id}")

    def observations(self, query: SeriesObservationsQuery) -> ObservationsResponse:
        try:
            document = self._fetch(
                "series observations",
                "/series/observations",
                build_series_observations_params(self._base, query),
            )
            return parse_observations(document)
        except FredApiError as exc:
            raise exc.prefix(f"error getting observations of series {query.series_id}")

    def search(self, query: SeriesSearchQuery) -> SeriesListResponse:
        try:
            document = self._fetch(
                "series search",
                "/series/search",
                build_series_search_params(self._base, query),
            )
            return parse_series_list(document, lenient_frequency=self._lenient_frequency)
        except FredApiError as exc:
            raise exc.prefix(f"error searching series '{query.search_text}'")

    def search_tags(self, query: SeriesSearchTagsQuery) -> TagListResponse:
        try:
            document = self._fetch(
                "series tag search",
                "/series/search/tags",
                build_series_search_tags_params(self._base, query),
            )
            return parse_tag_list(document)
        except FredApiError as exc:
            raise exc.prefix(f"error searching series tags '{query.series_search_text}'")

    def search_related_tags(self, query: SeriesSearchTagsQuery) -> TagListResponse:
        try:
            document = self._fetch(
                "series related tags",
                "/series/search/related_tags",
                build_series_search_tags_params(self._base, query),
            )
            return parse_tag_list(document)
        except FredApiError as exc:
            raise exc.prefix(f"error searching series related tags '{query.series_search_text}'")

    def tags(self, query: SeriesTagsQuery) -> TagListResponse:
        try:
            document = self._fetch(
                "series tags",
                "/series/tags",
                build_series_tags_params(self._base, query),
            )
            return parse_tag_list(document)
        except FredApiError as exc:
            raise exc.prefix(f"error getting tags of series {query.series_id}")

    def updates(self, query: SeriesUpdatesQuery | None = None) -> SeriesUpdatesResponse:
        try:
            document = self._fetch(
                "series updates",
                "/series/updates",
                build_series_updates_params(self._base, query or SeriesUpdatesQuery()),
            )
            return parse_series_updates(document, lenient_frequency=self._lenient_frequency)
        except FredApiError as exc:
            raise exc.prefix("error getting series updates")


__all__ = [
    "CategoryService",
    "SeriesService",
]
