"""
Tests for the normalized response model.
"""

import pytest

from postwoman.exceptions import TransportError
from postwoman.schemas.response import HTTPResponse, reason_phrase


class TestDerivedFields:

    @pytest.mark.parametrize("status_code", [200, 201, 204, 299])
    def test_success_range(self, status_code):
        assert HTTPResponse(status_code=status_code).is_success

    @pytest.mark.parametrize("status_code", [0, 199, 301, 404, 500])
    def test_outside_success_range(self, status_code):
        assert not HTTPResponse(status_code=status_code).is_success

    def test_no_content_response(self):
        response = HTTPResponse(status_code=204, body=None)
        assert response.is_success
        assert response.body is None
        assert response.size_bytes == 0

    def test_size_counts_utf8_bytes(self):
        assert HTTPResponse(status_code=200, body="héllo").size_bytes == 6

    def test_status_text_uses_reason_phrases(self):
        assert HTTPResponse(status_code=404).status_text == "Not Found"
        assert reason_phrase(200) == "OK"
        assert reason_phrase(418) == "I'm a Teapot"

    def test_status_text_for_unregistered_codes(self):
        assert reason_phrase(299) == "Success"
        assert reason_phrase(599) == "Server Error"
        assert reason_phrase(0) == "Error"

    def test_computed_fields_are_serialized(self):
        data = HTTPResponse(status_code=201, body="{}").model_dump()
        assert data["is_success"] is True
        assert data["status_text"] == "Created"
        assert data["size_bytes"] == 2


class TestErrorResponse:

    def test_from_transport_error(self):
        response = HTTPResponse.from_error(TransportError("connection refused"))
        assert response.status_code == 0
        assert response.body == "Error: connection refused"
        assert response.headers == []
        assert response.response_time_ms == 0
        assert response.content_type is None
        assert response.is_error
        assert not response.is_success

    def test_from_plain_exception(self):
        response = HTTPResponse.from_error(OSError("network is unreachable"))
        assert response.body == "Error: network is unreachable"
