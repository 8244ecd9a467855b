"""Schemas for the structure data and proxy endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned with every non-200 status."""

    error: str = Field(..., description="Human-readable message (exception text for 500s).")

    model_config = {
        "json_schema_extra": {
            "examples": [{"error": "Unit unsupported."}, {"error": "Config missing."}]
        }
    }
