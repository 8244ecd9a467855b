"""
Read-only proxy to the public ranking API used by the front-end.

Responsibility: Rebuild the upstream URL from the catch-all path and query
parameters, forward a GET, and hand back status, body and content type as-is.
"""

import logging
from dataclasses import dataclass

import httpx

from app.core.config import PROXY_TIMEOUT, PROXY_USER_AGENT, RANKING_API_BASE

logger = logging.getLogger(__name__)


@dataclass
class ProxyResult:
    """Upstream response, passed through without inspection."""

    status_code: int
    content: bytes
    content_type: str | None


def build_upstream_url(path: str) -> str:
    return f"{RANKING_API_BASE}/{path.strip('/')}"


def _http_client() -> httpx.Client:
    return httpx.Client(timeout=PROXY_TIMEOUT)


def forward_get(path: str, query: list[tuple[str, str]]) -> ProxyResult:
    """GET the upstream path with the given (possibly repeated) query parameters."""
    url = build_upstream_url(path)
    logger.info("[proxy:forward_get] IN  url=%s params=%d", url, len(query))
    headers = {
        "User-Agent": PROXY_USER_AGENT,
        "Content-Type": "application/json",
    }
    with _http_client() as client:
        response = client.get(url, params=query or None, headers=headers)
    logger.info("[proxy:forward_get] OUT status=%d bytes=%d", response.status_code, len(response.content))
    return ProxyResult(
        status_code=response.status_code,
        content=response.content,
        content_type=response.headers.get("content-type"),
    )
