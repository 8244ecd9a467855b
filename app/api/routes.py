"""
API route aggregator: register endpoints; no logic, only delegate to handlers.
"""

import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from app.api.handlers import handle_proxy, handle_structure_data
from app.schemas.structure import ErrorResponse

logger = logging.getLogger(__name__)
router = APIRouter()


# --- System ---

@router.get("/", tags=["system"])
def root():
    return {"status": "Structure data API running"}


@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


# --- Structure data ---

@router.get(
    "/api/structure-data",
    tags=["structure"],
    summary="Read structure curve data (global, unit, or character)",
    description=(
        "type=char&id=<char id> reads the character blob via the structure_char_url pointer (not cached). "
        "type=unit&id=<unit name> reads structure_unit_<slug>. Anything else reads structure_global. "
        "Unit/global responses carry Cache-Control: s-maxage=3600, stale-while-revalidate=86400."
    ),
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_structure_data(type: str | None = None, id: str | None = None) -> JSONResponse:
    logger.info("[api:get_structure_data] IN  type=%r id=%r", type, id)
    return handle_structure_data(type, id)


# --- Ranking proxy ---

@router.get(
    "/api/sekairankingtw/{path:path}",
    tags=["proxy"],
    summary="Read-only proxy to the public ranking API",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def proxy_ranking(path: str, request: Request) -> Response:
    query = [(k, v) for k, v in request.query_params.multi_items() if k != "path"]
    logger.info("[api:proxy_ranking] IN  path=%s", path)
    return handle_proxy(path, query)
