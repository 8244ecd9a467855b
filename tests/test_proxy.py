"""
Integration tests for the read-only ranking proxy (GET /api/sekairankingtw/...).

Upstream is replaced with httpx.MockTransport.
"""

from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def _upstream(handler):
    factory = lambda: httpx.Client(transport=httpx.MockTransport(handler))
    return patch("app.services.proxy_service._http_client", factory)


def test_proxy_forwards_path_and_query(client: TestClient) -> None:
    """Path segments and repeated query params reach upstream unchanged."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"rankings": []})

    with _upstream(handler):
        response = client.get("/api/sekairankingtw/event/live/top100?region=tw&tag=a&tag=b")
    assert response.status_code == 200
    assert response.json() == {"rankings": []}
    assert seen[0].url.host == "api.hisekai.org"
    assert seen[0].url.path == "/event/live/top100"
    assert seen[0].url.params.get_list("tag") == ["a", "b"]
    assert seen[0].url.params["region"] == "tw"
    assert seen[0].headers["user-agent"].startswith("SekaiRankingTW/")


def test_proxy_sets_cors_and_cache_headers(client: TestClient) -> None:
    """Responses always carry CORS and a short shared-cache policy."""
    with _upstream(lambda r: httpx.Response(200, json={})):
        response = client.get("/api/sekairankingtw/event/list")
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["cache-control"] == "s-maxage=10, stale-while-revalidate=59"
    assert response.headers["content-type"].startswith("application/json")


def test_proxy_passes_through_upstream_status(client: TestClient) -> None:
    """Upstream errors are forwarded with their own status and body."""
    with _upstream(lambda r: httpx.Response(404, text="no such event", headers={"Content-Type": "text/plain"})):
        response = client.get("/api/sekairankingtw/event/999")
    assert response.status_code == 404
    assert response.text == "no such event"
    assert response.headers["content-type"].startswith("text/plain")


def test_proxy_transport_error_returns_500(client: TestClient) -> None:
    """Connection failures become a fixed 500 error body."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _upstream(handler):
        response = client.get("/api/sekairankingtw/event/live/top100")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch data from upstream API"}


def test_proxy_empty_path_returns_400(client: TestClient) -> None:
    """The catch-all needs at least one path segment."""
    response = client.get("/api/sekairankingtw/")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid path parameters. Expected catch-all route."}
