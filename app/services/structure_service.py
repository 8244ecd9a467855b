"""
Structure data retrieval: key derivation and the two-tier lookup.

Responsibility: Turn (type, id) into data. Unit and global data are read straight
from Edge Config; character data is read through a pointer key whose value is the
URL of a JSON blob holding every character keyed by id. No HTTP types here.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any

import httpx

from app.core.config import (
    BLOB_FETCH_TIMEOUT,
    CHAR_URL_KEY,
    EDGE_CONFIG,
    GLOBAL_KEY,
    STRUCTURE_CACHE_CONTROL,
    UNIT_KEY_PREFIX,
    UNIT_SLUGS,
)
from app.core.errors import ConfigMissingError, StructureNotFoundError, UpstreamError
from app.services.edge_config import get_edge_config_client

logger = logging.getLogger(__name__)


@dataclass
class StructureResult:
    """Data to return with 200, plus the Cache-Control value to send (None = no header)."""

    data: Any
    cache_control: str | None = None


def is_missing(value: Any) -> bool:
    """
    True for values a JavaScript client would treat as falsy: None, False, 0, NaN, "".
    Empty dicts and lists count as present.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value == ""
    return False


def resolve_unit_key(unit_name: str) -> str | None:
    """Map a unit display name to its store key, or None if the unit is not supported."""
    slug = UNIT_SLUGS.get(unit_name)
    if slug is None:
        return None
    return f"{UNIT_KEY_PREFIX}{slug}"


def _http_client() -> httpx.Client:
    return httpx.Client(timeout=BLOB_FETCH_TIMEOUT, follow_redirects=True)


def fetch_char_blob(url: str) -> Any:
    """
    GET the character blob and parse it. Raises UpstreamError on a non-success
    status or an empty body. Malformed JSON propagates as the parser's own error.
    """
    logger.info("[structure:fetch_char_blob] IN  url=%s", url)
    with _http_client() as client:
        response = client.get(url)
    if not response.is_success:
        logger.warning("Blob fetch error %s for %s", response.status_code, url)
        raise UpstreamError("Blob fetch failed.")
    if not response.text:
        raise UpstreamError("Blob empty.")
    blob = response.json()
    logger.info("[structure:fetch_char_blob] OUT type=%s", type(blob).__name__)
    return blob


def lookup_char(blob: Any, char_id: str) -> Any:
    """
    Index the blob by character id the way a JavaScript client would: objects by
    key, arrays by numeric index, other scalars yield nothing. A null blob raises.
    """
    if blob is None:
        raise TypeError(f"Cannot read char {char_id!r} from a null blob.")
    if isinstance(blob, dict):
        return blob.get(char_id)
    if isinstance(blob, list) and char_id.isascii() and char_id.isdigit() and str(int(char_id)) == char_id:
        index = int(char_id)
        return blob[index] if index < len(blob) else None
    return None


def get_char_data(store: Any, char_id: str) -> StructureResult:
    """Resolve the pointer, fetch the blob, and pick out one character. Never cached."""
    pointer = store.get(CHAR_URL_KEY)
    if is_missing(pointer):
        raise StructureNotFoundError("Char URL pointer not found.")
    blob = fetch_char_blob(pointer)
    data = lookup_char(blob, char_id)
    if is_missing(data):
        raise StructureNotFoundError("Char data missing.")
    return StructureResult(data=data)


def get_structure(type_: str | None, id_: str | None) -> StructureResult:
    """
    Dispatch on type/id:
      char + id  -> pointer key, then blob lookup (no Cache-Control)
      unit + id  -> structure_unit_<slug> (unknown unit is 404 without a store read)
      otherwise  -> structure_global
    """
    logger.info("[structure:get_structure] IN  type=%r id=%r", type_, id_)
    if not EDGE_CONFIG:
        raise ConfigMissingError()

    store = get_edge_config_client(EDGE_CONFIG)

    if type_ == "char" and id_:
        result = get_char_data(store, id_)
        logger.info("[structure:get_structure] OUT char id=%s", id_)
        return result

    key = GLOBAL_KEY
    if type_ == "unit" and id_:
        unit_key = resolve_unit_key(id_)
        if unit_key is None:
            raise StructureNotFoundError("Unit unsupported.")
        key = unit_key

    data = store.get(key)
    if is_missing(data):
        raise StructureNotFoundError("Data not found.")
    logger.info("[structure:get_structure] OUT key=%s", key)
    return StructureResult(data=data, cache_control=STRUCTURE_CACHE_CONTROL)
