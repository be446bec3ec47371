"""Unit tests for the request logging middleware."""
import pytest
from starlette.requests import Request

from app.middleware.logging import REQUEST_ID_HEADER, _loggable_path


def _request(path: str) -> Request:
    return Request({"type": "http", "method": "GET", "path": path, "headers": [], "query_string": b""})


@pytest.mark.unit
class TestLoggingMiddleware:

    def test_response_carries_request_id(self, client):
        response = client.get("/health")
        assert response.headers.get(REQUEST_ID_HEADER)

    def test_incoming_request_id_is_reused(self, client):
        response = client.get("/health", headers={REQUEST_ID_HEADER: "req-123"})
        assert response.headers[REQUEST_ID_HEADER] == "req-123"

    def test_api_version_header(self, client):
        response = client.get("/health")
        assert response.headers["X-API-Version"] == "1.0.0"

    def test_scan_tokens_are_masked(self):
        token = "9f86d081884c7d659a2feaa0c55ad015"
        assert _loggable_path(_request(f"/api/v1/scan/{token}")) == "/api/v1/scan/9f86d0..."
        assert _loggable_path(_request(f"/api/v1/scan/{token}/checkin")) == "/api/v1/scan/9f86d0.../checkin"

    def test_other_paths_untouched(self):
        assert _loggable_path(_request("/api/v1/roster")) == "/api/v1/roster"
