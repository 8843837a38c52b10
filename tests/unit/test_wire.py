from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from fred_api_client.core.errors import FredParseError, FredUnknownResponseFormatError
from fred_api_client.core.scalars import decode_date, decode_timestamp, encode_date, encode_timestamp
from fred_api_client.core.wire import ResponseFormat, WireDocument, dump_document, load_document


def test_load_json_splits_meta_and_collections():
    document = load_document(
        b'{"realtime_start": "2013-08-14", "count": 1, "seriess": [{"id": "GNPCA"}]}',
        ResponseFormat.JSON,
    )
    assert document.meta == {"realtime_start": "2013-08-14", "count": 1}
    assert document.collection("seriess") == ({"id": "GNPCA"},)
    assert document.collection("categories") == ()


def test_load_xml_uses_root_attributes_and_child_records():
    body = (
        b'<?xml version="1.0" encoding="utf-8" ?>'
        b'<categories><category id="125" name="Trade Balance" parent_id="13"/></categories>'
    )
    document = load_document(body, ResponseFormat.XML)
    assert document.meta == {}
    assert document.collection("categories") == (
        {"id": "125", "name": "Trade Balance", "parent_id": "13"},
    )


@pytest.mark.parametrize(
    ("body", "response_format"),
    [
        (b"{not json", ResponseFormat.JSON),
        (b"[1, 2, 3]", ResponseFormat.JSON),
        (b'{"categories": [1]}', ResponseFormat.JSON),
        (b"<categories>", ResponseFormat.XML),
    ],
)
def test_load_document_rejects_malformed_bodies(body, response_format):
    with pytest.raises(FredParseError):
        load_document(body, response_format)


def test_load_document_rejects_unknown_format():
    with pytest.raises(FredUnknownResponseFormatError):
        load_document(b"{}", "csv")  # type: ignore[arg-type]
    with pytest.raises(FredUnknownResponseFormatError):
        dump_document(WireDocument(), "csv")  # type: ignore[arg-type]


@pytest.mark.parametrize("response_format", list(ResponseFormat))
def test_dates_and_timestamps_round_trip_through_both_formats(response_format):
    observed = date(1929, 1, 1)
    updated = datetime(2013, 7, 31, 9, 26, 16, tzinfo=timezone(timedelta(hours=-5)))
    document = WireDocument(
        meta={"realtime_start": encode_date(observed)},
        collections={"seriess": ({"last_updated": encode_timestamp(updated)},)},
    )

    loaded = load_document(dump_document(document, response_format), response_format)

    assert decode_date(loaded.meta["realtime_start"]) == observed
    assert decode_timestamp(loaded.collection("seriess")[0]["last_updated"]) == updated


def test_dump_xml_names_items_after_collection():
    document = WireDocument(collections={"tags": ({"name": "nation", "popularity": 100},)})
    body = dump_document(document, ResponseFormat.XML)
    assert b"<tags>" in body
    assert b'<tag name="nation" popularity="100"/>' in body


def test_response_format_file_type():
    assert ResponseFormat.JSON.file_type == "json"
    assert ResponseFormat.XML.file_type == "xml"
