"""
API handlers: call services, map results/errors to HTTP.

Responsibility: Bridge HTTP types and services. Marshalling and exception-to-HTTP mapping.
Lives in the API layer so services stay free of FastAPI/HTTP types.
Error bodies are always {"error": message}.
"""

import logging

from fastapi import Response
from fastapi.responses import JSONResponse

from app.core.config import PROXY_CACHE_CONTROL
from app.core.errors import ConfigMissingError, StructureNotFoundError
from app.services.proxy_service import forward_get
from app.services.structure_service import get_structure

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def handle_structure_data(type_: str | None, id_: str | None) -> JSONResponse:
    """
    Run the structure lookup. 404 for expected not-found cases, 500 for missing
    config and for any other failure (message is the exception text).
    """
    try:
        result = get_structure(type_, id_)
    except ConfigMissingError as e:
        logger.error("Edge Config connection string not configured")
        return error_response(500, e.message)
    except StructureNotFoundError as e:
        logger.warning("[api:structure_data] not found type=%r id=%r: %s", type_, id_, e.message)
        return error_response(404, e.message)
    except Exception as e:
        logger.exception("Structure data read failed")
        return error_response(500, str(e))

    headers = {"Cache-Control": result.cache_control} if result.cache_control else None
    return JSONResponse(status_code=200, content=result.data, headers=headers)


def handle_proxy(path: str, query: list[tuple[str, str]]) -> Response:
    """Forward a GET upstream. Transport failures become 500 with a fixed message."""
    if not path or not path.strip("/"):
        return error_response(400, "Invalid path parameters. Expected catch-all route.")
    try:
        result = forward_get(path, query)
    except Exception:
        logger.exception("Proxy request failed for path=%s", path)
        return error_response(500, "Failed to fetch data from upstream API")

    response = Response(content=result.content, status_code=result.status_code)
    if result.content_type:
        response.headers["Content-Type"] = result.content_type
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Cache-Control"] = PROXY_CACHE_CONTROL
    return response
