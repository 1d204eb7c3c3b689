"""Unit tests for failure parsing on non-success statuses."""

import gzip
import json

from ledgerlink.core.errors import BodyParseError, FaultError, TransportDecodeError
from ledgerlink.services.faults import parse_failure

from tests.conftest import NOT_FOUND_FAULT


FAULT_BODY = (
    b'{"Fault":{"Error":[{"Message":"Object Not Found","Detail":"Id=99","code":"610"}],'
    b'"type":"ValidationFault"},"time":"2024-01-01T00:00:00Z"}'
)


class TestFaultEnvelope:
    """Tests for well-formed fault envelopes."""

    def test_fault_round_trip(self):
        error = parse_failure(400, FAULT_BODY, None)

        assert isinstance(error, FaultError)
        rendered = str(error)
        assert "Object Not Found" in rendered
        assert "610" in rendered
        assert "ValidationFault" in rendered

    def test_rendering_is_canonical_json(self):
        error = parse_failure(400, FAULT_BODY, None)

        assert str(error) == FAULT_BODY.decode("utf-8")
        assert json.loads(str(error)) == NOT_FOUND_FAULT

    def test_structured_access(self):
        error = parse_failure(400, FAULT_BODY, None)

        assert error.status_code == 400
        assert error.fault_type == "ValidationFault"
        assert len(error.errors) == 1
        assert error.errors[0].message == "Object Not Found"
        assert error.errors[0].detail == "Id=99"
        assert error.errors[0].code == "610"
        assert error.errors[0].element is None
        assert error.failure.time == "2024-01-01T00:00:00Z"

    def test_multiple_errors(self):
        body = {
            "Fault": {
                "Error": [
                    {"Message": "Stale Object Error", "Detail": "SyncToken mismatch", "code": "5010"},
                    {"Message": "Required param missing", "code": "2020", "element": "Line"},
                ],
                "type": "ValidationFault",
            },
            "time": "2024-05-05T12:00:00Z",
        }

        error = parse_failure(400, json.dumps(body).encode(), None)

        assert isinstance(error, FaultError)
        assert [item.code for item in error.errors] == ["5010", "2020"]
        assert json.loads(str(error)) == body

    def test_numeric_code_is_kept_as_text(self):
        body = b'{"Fault":{"Error":[{"Message":"Throttled","code":3001}],"type":"ThrottleFault"}}'

        error = parse_failure(429, body, None)

        assert isinstance(error, FaultError)
        assert error.errors[0].code == "3001"

    def test_lowercase_authentication_fault(self):
        body = (
            b'{"fault":{"error":[{"message":"message=AuthenticationFailed",'
            b'"detail":"Token expired","code":"3200"}],"type":"AUTHENTICATION"}}'
        )

        error = parse_failure(401, body, None)

        assert isinstance(error, FaultError)
        assert error.fault_type == "AUTHENTICATION"
        assert error.errors[0].detail == "Token expired"
        assert '"Fault"' in str(error)

    def test_gzip_fault(self):
        error = parse_failure(400, gzip.compress(FAULT_BODY), "gzip")

        assert isinstance(error, FaultError)
        assert "Object Not Found" in str(error)


class TestFallback:
    """Tests for bodies that are not fault envelopes."""

    def test_plain_text_body(self):
        error = parse_failure(500, b"Internal Server Error", None)

        assert isinstance(error, BodyParseError)
        assert str(error) == "500 Internal Server Error"

    def test_html_proxy_page(self):
        body = b"<html><body><h1>502 Bad Gateway</h1></body></html>"

        error = parse_failure(502, body, None)

        assert isinstance(error, BodyParseError)
        assert str(error) == "502 " + body.decode()

    def test_empty_body(self):
        error = parse_failure(503, b"", None)

        assert str(error) == "503 "

    def test_json_without_fault(self):
        error = parse_failure(404, b'{"message": "no route"}', None)

        assert isinstance(error, BodyParseError)
        assert str(error) == '404 {"message": "no route"}'

    def test_fault_with_no_errors_is_not_well_formed(self):
        body = b'{"Fault":{"Error":[],"type":"SystemFault"}}'

        error = parse_failure(500, body, None)

        assert isinstance(error, BodyParseError)
        assert str(error) == "500 " + body.decode()

    def test_corrupted_gzip_is_returned_not_raised(self):
        error = parse_failure(500, b"not gzip at all", "gzip")

        assert isinstance(error, TransportDecodeError)
