"""
Edge Config client: read-only item lookups against Vercel Edge Config over HTTP.

Responsibility: Parse the EDGE_CONFIG connection string and fetch single items by key.
Absent keys come back as None; the caller decides what "missing" means.
"""

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qs, quote, urlparse

import httpx

from app.core.config import EDGE_CONFIG_TIMEOUT
from app.core.errors import EdgeConfigError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://edge-config.vercel.com"
SHORT_FORM_PREFIX = "edge-config:"


@dataclass(frozen=True)
class EdgeConfigConnection:
    """Parsed connection string."""

    id: str
    token: str
    base_url: str = DEFAULT_BASE_URL


def parse_connection_string(value: str) -> EdgeConfigConnection:
    """
    Parse either connection string form:

      https://edge-config.vercel.com/<id>?token=<token>
      edge-config:id=<id>&token=<token>
    """
    value = (value or "").strip()
    if value.startswith(SHORT_FORM_PREFIX):
        params = parse_qs(value[len(SHORT_FORM_PREFIX):])
        config_id = (params.get("id") or [""])[0]
        token = (params.get("token") or [""])[0]
        if config_id and token:
            return EdgeConfigConnection(id=config_id, token=token)
    else:
        parsed = urlparse(value)
        if parsed.scheme in ("http", "https") and parsed.netloc:
            config_id = parsed.path.strip("/").split("/")[0] if parsed.path else ""
            token = (parse_qs(parsed.query).get("token") or [""])[0]
            if config_id and token:
                return EdgeConfigConnection(
                    id=config_id,
                    token=token,
                    base_url=f"{parsed.scheme}://{parsed.netloc}",
                )
    raise EdgeConfigError("Invalid Edge Config connection string.")


class EdgeConfigClient:
    """Read-only Edge Config client. One HTTP request per get()."""

    def __init__(
        self,
        connection: EdgeConfigConnection,
        timeout: float | None = EDGE_CONFIG_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.connection = connection
        self.timeout = timeout
        self._transport = transport

    def item_url(self, key: str) -> str:
        c = self.connection
        return f"{c.base_url}/{c.id}/item/{quote(key, safe='')}"

    def get(self, key: str) -> Any | None:
        """Return the stored JSON value for key, or None when the key does not exist."""
        logger.info("[edge_config:get] IN  key=%s", key)
        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            response = client.get(self.item_url(key), params={"token": self.connection.token})
        if response.status_code == 404:
            logger.info("[edge_config:get] OUT key=%s absent", key)
            return None
        if response.status_code != 200:
            logger.warning("Edge Config read error %s: %s", response.status_code, response.text[:200])
            raise EdgeConfigError(f"Edge Config read failed: {response.status_code}")
        value = response.json()
        logger.info("[edge_config:get] OUT key=%s type=%s", key, type(value).__name__)
        return value


def get_edge_config_client(connection_string: str) -> EdgeConfigClient:
    """Build a client from a connection string. Raises EdgeConfigError if it cannot be parsed."""
    return EdgeConfigClient(parse_connection_string(connection_string))
