"""
Tests for global error handling and response format consistency.
"""

import pytest
from hypothesis import given, strategies as st, settings, HealthCheck

from postwoman.exceptions import (
    APIException,
    ExportEncodeError,
    ImportDecodeError,
    InvalidResponseError,
    InvalidURLError,
    ResourceNotFoundError,
    TransportError,
)


resource_id_strategy = st.integers(min_value=90000, max_value=99999)

resource_path_strategy = st.sampled_from([
    "/api/requests/{id}",
    "/api/folders/{id}",
    "/api/history/{id}",
    "/api/requests/{id}/code",
    "/api/folders/{id}/export",
])

invalid_http_method_strategy = st.text(
    alphabet=st.sampled_from("ABCDEFGHIJKLMNOPQRSTUVWXYZ"),
    min_size=1,
    max_size=10
).filter(lambda m: m not in ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"])


class TestExceptionTaxonomy:

    @pytest.mark.parametrize("exc,status_code,error_code", [
        (ResourceNotFoundError("Request", 1), 404, "RESOURCE_NOT_FOUND"),
        (InvalidURLError("::"), 400, "INVALID_URL"),
        (InvalidResponseError(), 502, "INVALID_RESPONSE"),
        (TransportError("Connection refused"), 502, "TRANSPORT_ERROR"),
        (TransportError("Request timed out", timed_out=True), 504, "TRANSPORT_ERROR"),
        (ImportDecodeError("bad"), 400, "IMPORT_DECODE_ERROR"),
        (ExportEncodeError("bad"), 500, "EXPORT_ENCODE_ERROR"),
    ])
    def test_status_and_code(self, exc, status_code, error_code):
        assert isinstance(exc, APIException)
        assert exc.status_code == status_code
        assert exc.error_code == error_code
        assert str(exc) == exc.detail

    def test_invalid_url_keeps_url(self):
        exc = InvalidURLError("htp:/broken", "expected an absolute http or https URL")
        assert exc.url == "htp:/broken"
        assert "htp:/broken" in exc.detail
        assert "absolute" in exc.detail


class TestErrorResponseFormat:

    def test_404_format(self, client):
        response = client.get("/api/requests/99999")
        assert response.status_code == 404
        assert response.json() == {
            "detail": "Request with id 99999 not found",
            "error_code": "RESOURCE_NOT_FOUND",
        }

    def test_422_invalid_method(self, client):
        response = client.post("/api/requests", json={
            "name": "Test",
            "method": "INVALID",
            "url": "http://example.com"
        })
        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert "method" in data["detail"]

    def test_422_invalid_body_type(self, client):
        response = client.post("/api/requests", json={"body_type": "YAML"})
        assert response.status_code == 422
        assert "body_type" in response.json()["detail"]

    def test_422_path_parameter(self, client):
        response = client.get("/api/requests/not-a-number")
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"


class TestErrorResponseSchema:

    def test_error_model_is_published(self, client):
        schema = client.get("/openapi.json").json()
        error_model = schema["components"]["schemas"]["ErrorResponse"]
        assert set(error_model["properties"]) == {"detail", "error_code"}
        assert error_model["required"] == ["detail"]

    @pytest.mark.parametrize("path,method,status_code", [
        ("/api/requests/{request_id}", "get", "404"),
        ("/api/folders/{folder_id}", "delete", "404"),
        ("/api/folders/import", "post", "400"),
        ("/api/history/{history_id}", "get", "404"),
        ("/api/execute", "post", "502"),
        ("/api/codegen", "post", "422"),
    ])
    def test_error_statuses_reference_error_model(self, client, path, method, status_code):
        schema = client.get("/openapi.json").json()
        responses = schema["paths"][path][method]["responses"]
        content = responses[status_code]["content"]["application/json"]
        assert content["schema"]["$ref"] == "#/components/schemas/ErrorResponse"


@given(resource_id=resource_id_strategy, path=resource_path_strategy)
@settings(max_examples=30, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_missing_resources_share_error_format(client, resource_id, path):
    """
    *For any* missing resource, the error response carries a detail that
    names the ID and the RESOURCE_NOT_FOUND code.
    """
    response = client.get(path.format(id=resource_id))
    assert response.status_code == 404
    data = response.json()
    assert set(data) == {"detail", "error_code"}
    assert str(resource_id) in data["detail"]
    assert data["error_code"] == "RESOURCE_NOT_FOUND"


@given(method=invalid_http_method_strategy)
@settings(max_examples=20, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_unknown_methods_rejected(client, method):
    """
    *For any* method outside the supported set, saving a request fails
    validation.
    """
    response = client.post("/api/requests", json={"url": "https://example.com", "method": method})
    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"
