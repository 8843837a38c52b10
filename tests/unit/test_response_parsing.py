from __future__ import annotations

import pytest

from fred_api_client.core.errors import (
    FredInvalidRequestError,
    FredNotFoundError,
    FredParseError,
    FredUnknownServerError,
)
from fred_api_client.core.models import ErrorEnvelope
from fred_api_client.core.response_parsing import evaluate_response
from fred_api_client.core.transport import RawResponse
from fred_api_client.core.wire import ResponseFormat
from tests.shared.payloads import make_body, make_category_record, make_error_body

MESSAGE = "Bad Request. The series does not exist."


@pytest.mark.parametrize("response_format", list(ResponseFormat))
def test_evaluate_200_returns_document(response_format):
    body = make_body("categories", [make_category_record()], response_format=response_format)
    document = evaluate_response(
        RawResponse(body=body, status_code=200),
        description="category",
        response_format=response_format,
    )
    assert len(document.collection("categories")) == 1


def test_evaluate_200_with_garbage_is_parse_error():
    with pytest.raises(FredParseError):
        evaluate_response(
            RawResponse(body=b"<html>oops", status_code=200),
            description="category",
            response_format=ResponseFormat.JSON,
        )


@pytest.mark.parametrize("response_format", list(ResponseFormat))
def test_evaluate_400_passes_server_message_through(response_format):
    body = make_error_body(MESSAGE, 400, response_format=response_format)
    with pytest.raises(FredInvalidRequestError) as info:
        evaluate_response(
            RawResponse(body=body, status_code=400),
            description="series",
            response_format=response_format,
        )
    assert info.value.server_message == MESSAGE
    assert info.value.code == 400


def test_evaluate_400_with_undecodable_body_is_parse_error():
    with pytest.raises(FredParseError, match="failed to parse series error response"):
        evaluate_response(
            RawResponse(body=b"not an envelope", status_code=400),
            description="series",
            response_format=ResponseFormat.JSON,
        )


def test_evaluate_404_does_not_read_body():
    with pytest.raises(FredNotFoundError):
        evaluate_response(
            RawResponse(body=b"\x00 not decodable", status_code=404),
            description="series",
            response_format=ResponseFormat.XML,
        )


@pytest.mark.parametrize("response_format", list(ResponseFormat))
def test_evaluate_other_status_is_unknown_server_error(response_format):
    body = make_error_body("Internal Server Error", 500, response_format=response_format)
    with pytest.raises(FredUnknownServerError) as info:
        evaluate_response(
            RawResponse(body=body, status_code=500),
            description="series",
            response_format=response_format,
        )
    assert info.value.code == 500
    assert info.value.server_message == "Internal Server Error"


def test_evaluate_other_status_with_undecodable_body_is_parse_error():
    with pytest.raises(FredParseError):
        evaluate_response(
            RawResponse(body=b"<html>Bad Gateway</html>", status_code=502),
            description="series",
            response_format=ResponseFormat.JSON,
        )


def test_error_envelope_fixtures_agree_across_formats(fixture_loader):
    from_json = ErrorEnvelope.from_body(fixture_loader("error_bad_series.json"), ResponseFormat.JSON)
    from_xml = ErrorEnvelope.from_body(fixture_loader("error_bad_series.xml"), ResponseFormat.XML)
    assert from_json == from_xml == ErrorEnvelope(message=MESSAGE, code=400)


def test_error_envelope_without_message_is_parse_error():
    with pytest.raises(FredParseError):
        ErrorEnvelope.from_body(b'{"error_code": 400}', ResponseFormat.JSON)
