"""Scalar wire codecs and closed enumerations."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import TypeVar

from .errors import DecodeErrorKind, FredDecodeError

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
MISSING_OBSERVATION = "."

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_TIMESTAMP_RE = re.compile(r"(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})([+-])(\d{2})")

_E = TypeVar("_E", bound=Enum)


def decode_text(value: object, *, name: str) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        return value
    raise FredDecodeError(
        f"{name} must be a string, got {type(value).__name__}",
        kind=DecodeErrorKind.BAD_FORMAT,
    )


def decode_int(value: object, *, name: str) -> int:
    if isinstance(value, bool):
        raise FredDecodeError(f"{name} must be an integer", kind=DecodeErrorKind.BAD_FORMAT)
    if isinstance(value, int):
        return value
    if isinstance(value, (str, bytes)):
        text = decode_text(value, name=name).strip()
        if text.isascii() and text.isdigit():
            return int(text)
        raise FredDecodeError(
            f"{name} is not a valid integer: {text!r}",
            kind=DecodeErrorKind.BAD_VALUE,
        )
    raise FredDecodeError(f"{name} must be an integer", kind=DecodeErrorKind.BAD_FORMAT)


def decode_date(value: object, *, name: str = "date") -> date:
    text = decode_text(value, name=name)
    if not _DATE_RE.fullmatch(text):
        raise FredDecodeError(
            f"{name} does not match YYYY-MM-DD: {text!r}",
            kind=DecodeErrorKind.BAD_FORMAT,
        )
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise FredDecodeError(
            f"{name} is not a calendar date: {text!r}",
            kind=DecodeErrorKind.BAD_VALUE,
        ) from exc


def encode_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def decode_timestamp(value: object, *, name: str = "timestamp") -> datetime:
    text = decode_text(value, name=name)
    match = _TIMESTAMP_RE.fullmatch(text)
    if match is None:
        raise FredDecodeError(
            f"{name} does not match YYYY-MM-DD HH:MM:SS+HH: {text!r}",
            kind=DecodeErrorKind.BAD_FORMAT,
        )
    stamp, sign, hours = match.groups()
    try:
        naive = datetime.strptime(stamp, TIME_FORMAT)
        offset = timedelta(hours=int(hours))
        tz = timezone(-offset if sign == "-" else offset)
    except ValueError as exc:
        raise FredDecodeError(
            f"{name} is not a valid timestamp: {text!r}",
            kind=DecodeErrorKind.BAD_VALUE,
        ) from exc
    return naive.replace(tzinfo=tz)


def encode_timestamp(value: datetime) -> str:
    offset = value.utcoffset()
    if offset is None:
        raise ValueError("timestamp must be timezone-aware")
    seconds = int(offset.total_seconds())
    if seconds % 3600:
        raise ValueError("timestamp offset must be a whole number of hours")
    sign = "-" if seconds < 0 else "+"
    return f"{value.strftime(TIME_FORMAT)}{sign}{abs(seconds) // 3600:02d}"


def parse_enum_value(enum_cls: type[_E], value: object, *, name: str) -> _E:
    """Decode a plain string-valued enumeration."""

    text = decode_text(value, name=name)
    try:
        return enum_cls(text)
    except ValueError as exc:
        raise FredDecodeError(
            f"unknown {name}: {text!r}",
            kind=DecodeErrorKind.BAD_VALUE,
        ) from exc


class SeasonalAdjustment(Enum):
    ADJUSTED = "Seasonally Adjusted"
    NOT_ADJUSTED = "Not Seasonally Adjusted"

    @property
    def label(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return self is SeasonalAdjustment.ADJUSTED

    @classmethod
    def parse(cls, value: object) -> "SeasonalAdjustment":
        text = decode_text(value, name="seasonal adjustment")
        if text == "Not Seasonally Adjusted":
            return cls.NOT_ADJUSTED
        if text in ("Seasonally Adjusted", "Seasonally Adjusted Annual Rate"):
            return cls.ADJUSTED
        raise FredDecodeError(
            f"unknown seasonal adjustment string: {text}",
            kind=DecodeErrorKind.BAD_VALUE,
        )


class Frequency(Enum):
    """Reporting cadence; value is the short wire code."""

    DAILY = "d"
    WEEKLY = "w"
    BIWEEKLY = "bw"
    MONTHLY = "m"
    QUARTERLY = "q"
    SEMIANNUAL = "sa"
    ANNUAL = "a"
    WEEKLY_ENDING_FRIDAY = "wef"
    WEEKLY_ENDING_THURSDAY = "weth"
    WEEKLY_ENDING_WEDNESDAY = "wew"
    WEEKLY_ENDING_TUESDAY = "wetu"
    WEEKLY_ENDING_MONDAY = "wem"
    WEEKLY_ENDING_SUNDAY = "wesu"
    WEEKLY_ENDING_SATURDAY = "wesa"
    BIWEEKLY_ENDING_WEDNESDAY = "bwew"
    BIWEEKLY_ENDING_MONDAY = "bwem"
    UNKNOWN = "unknown"

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _FREQUENCY_LABELS[self]

    @classmethod
    def parse(cls, value: object) -> "Frequency":
        """Decode a short code or long-form synonym.

        Unknown input raises ``FredDecodeError`` with ``fallback`` set to
        ``Frequency.UNKNOWN``; "Not Applicable" maps to ``UNKNOWN`` silently.
        """

        text = decode_text(value, name="frequency")
        found = _FREQUENCY_LOOKUP.get(text)
        if found is not None:
            return found
        raise FredDecodeError(
            f"unknown frequency format: {text}",
            kind=DecodeErrorKind.BAD_VALUE,
            fallback=cls.UNKNOWN,
        )


_FREQUENCY_LABELS: dict[Frequency, str] = {
    Frequency.DAILY: "Daily",
    Frequency.WEEKLY: "Weekly",
    Frequency.BIWEEKLY: "Biweekly",
    Frequency.MONTHLY: "Monthly",
    Frequency.QUARTERLY: "Quarterly",
    Frequency.SEMIANNUAL: "Semiannual",
    Frequency.ANNUAL: "Annual",
    Frequency.WEEKLY_ENDING_FRIDAY: "Weekly, Ending Friday",
    Frequency.WEEKLY_ENDING_THURSDAY: "Weekly, Ending Thursday",
    Frequency.WEEKLY_ENDING_WEDNESDAY: "Weekly, Ending Wednesday",
    Frequency.WEEKLY_ENDING_TUESDAY: "Weekly, Ending Tuesday",
    Frequency.WEEKLY_ENDING_MONDAY: "Weekly, Ending Monday",
    Frequency.WEEKLY_ENDING_SUNDAY: "Weekly, Ending Sunday",
    Frequency.WEEKLY_ENDING_SATURDAY: "Weekly, Ending Saturday",
    Frequency.BIWEEKLY_ENDING_WEDNESDAY: "Biweekly, Ending Wednesday",
    Frequency.BIWEEKLY_ENDING_MONDAY: "Biweekly, Ending Monday",
    Frequency.UNKNOWN: "unknown frequency",
}

_FREQUENCY_SYNONYMS: dict[Frequency, tuple[str, ...]] = {
    Frequency.DAILY: ("Daily, 7-Day", "Daily, Close"),
    Frequency.MONTHLY: ("Monthly, End of Month",),
    Frequency.QUARTERLY: ("Quarterly, End of Quarter", "Quarterly, End of Period"),
    Frequency.ANNUAL: ("Annual, Fiscal Year", "Annual, As of February", "Annual, End of Year"),
    Frequency.UNKNOWN: ("Not Applicable",),
}


def _build_frequency_lookup() -> dict[str, Frequency]:
    lookup: dict[str, Frequency] = {}
    for frequency in Frequency:
        if frequency is not Frequency.UNKNOWN:
            lookup[frequency.code] = frequency
            lookup[frequency.label] = frequency
        for synonym in _FREQUENCY_SYNONYMS.get(frequency, ()):
            lookup[synonym] = frequency
    return lookup


_FREQUENCY_LOOKUP = _build_frequency_lookup()


class TagGroup(Enum):
    """Tag group; value is the short wire code.

    ``NONE`` only means "no filter" on outbound requests.
    """

    NONE = ""
    FREQUENCY = "freq"
    GENERAL = "gen"
    GEOGRAPHY = "geo"
    GEOGRAPHY_TYPE = "geot"
    RELEASE = "rls"
    SEASONAL_ADJUSTMENT = "seas"
    SOURCE = "src"

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _TAG_GROUP_LABELS[self]

    @classmethod
    def parse(cls, value: object) -> "TagGroup":
        text = decode_text(value, name="tag group id")
        try:
            group = cls(text)
        except ValueError:
            group = cls.NONE
        if group is cls.NONE:
            raise FredDecodeError(
                f"unknown tag id '{text}'",
                kind=DecodeErrorKind.BAD_VALUE,
                fallback=cls.NONE,
            )
        return group


_TAG_GROUP_LABELS: dict[TagGroup, str] = {
    TagGroup.NONE: "",
    TagGroup.FREQUENCY: "Frequency",
    TagGroup.GENERAL: "General or Concept",
    TagGroup.GEOGRAPHY: "Geography",
    TagGroup.GEOGRAPHY_TYPE: "Geography Type",
    TagGroup.RELEASE: "Release",
    TagGroup.SEASONAL_ADJUSTMENT: "Seasonal Adjustment",
    TagGroup.SOURCE: "Source",
}


class UnitType(Enum):
    """Data value transformation; value is the short wire code."""

    LINEAR = "lin"
    CHANGE = "chg"
    CHANGE_FROM_YEAR_AGO = "ch1"
    PERCENT_CHANGE = "pch"
    PERCENT_CHANGE_FROM_YEAR_AGO = "pc1"
    COMPOUNDED_ANNUAL_RATE_OF_CHANGE = "pca"
    CONTINUOUSLY_COMPOUNDED_RATE_OF_CHANGE = "cch"
    CONTINUOUSLY_COMPOUNDED_ANNUAL_RATE_OF_CHANGE = "cca"
    NATURAL_LOG = "log"

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _UNIT_LABELS[self]

    @classmethod
    def parse(cls, value: object) -> "UnitType":
        return parse_enum_value(cls, value, name="unit")


_UNIT_LABELS: dict[UnitType, str] = {
    UnitType.LINEAR: "Linear",
    UnitType.CHANGE: "Change",
    UnitType.CHANGE_FROM_YEAR_AGO: "Change from Year Ago",
    UnitType.PERCENT_CHANGE: "Percent Change",
    UnitType.PERCENT_CHANGE_FROM_YEAR_AGO: "Percent Change from Year Ago",
    UnitType.COMPOUNDED_ANNUAL_RATE_OF_CHANGE: "Compounded Annual Rate of Change",
    UnitType.CONTINUOUSLY_COMPOUNDED_RATE_OF_CHANGE: "Continuously Compounded Rate of Change",
    UnitType.CONTINUOUSLY_COMPOUNDED_ANNUAL_RATE_OF_CHANGE: (
        "Continuously Compounded Annual Rate of Change"
    ),
    UnitType.NATURAL_LOG: "Natural Log",
}


class OrderType(str, Enum):
    SERIES_ID = "series_id"
    GROUP_ID = "group_id"
    TITLE = "title"
    NAME = "name"
    CREATED = "created"
    SERIES_COUNT = "series_count"
    UNITS = "units"
    FREQUENCY = "frequency"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"
    LAST_UPDATED = "last_updated"
    OBSERVATION_START = "observation_start"
    OBSERVATION_END = "observation_end"
    OBSERVATION_DATE = "observation_date"
    POPULARITY = "popularity"
    SEARCH_RANK = "search_rank"


class SortType(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class FilterType(str, Enum):
    FREQUENCY = "frequency"
    UNITS = "units"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"
    ALL = "all"
    REGIONAL = "regional"
    MACRO = "macro"


class SearchType(str, Enum):
    FULL_TEXT = "full_text"
    SERIES_ID = "series_id"


@dataclass(slots=True, frozen=True)
class Observation:
    date: date | None
    value: float
    valid: bool


def decode_observation(record: Mapping[str, object]) -> Observation:
    """Decode one ``{date, value}`` record.

    A value of ``"."`` is a missing data point, not an error.
    """

    if "date" not in record:
        raise FredDecodeError("no date in observation", kind=DecodeErrorKind.BAD_FORMAT)
    if "value" not in record:
        raise FredDecodeError("no value in observation", kind=DecodeErrorKind.BAD_FORMAT)

    raw_value = record["value"]
    if raw_value == MISSING_OBSERVATION:
        return Observation(date=None, value=0.0, valid=False)

    observed = decode_date(record["date"], name="observation date")
    if isinstance(raw_value, (int, float)) and not isinstance(raw_value, bool):
        return Observation(date=observed, value=float(raw_value), valid=True)
    text = decode_text(raw_value, name="observation value")
    try:
        value = float(text)
    except ValueError as exc:
        raise FredDecodeError(
            f"could not parse observation value '{text}'",
            kind=DecodeErrorKind.BAD_VALUE,
        ) from exc
    return Observation(date=observed, value=value, valid=True)


def encode_observation(observation: Observation) -> dict[str, str]:
    if not observation.valid or observation.date is None:
        return {"date": "", "value": MISSING_OBSERVATION}
    return {"date": encode_date(observation.date), "value": repr(observation.value)}


__all__ = [
    "DATE_FORMAT",
    "TIME_FORMAT",
    "MISSING_OBSERVATION",
    "decode_text",
    "decode_int",
    "decode_date",
    "encode_date",
    "decode_timestamp",
    "encode_timestamp",
    "parse_enum_value",
    "SeasonalAdjustment",
    "Frequency",
    "TagGroup",
    "UnitType",
    "OrderType",
    "SortType",
    "FilterType",
    "SearchType",
    "Observation",
    "decode_observation",
    "encode_observation",
]
