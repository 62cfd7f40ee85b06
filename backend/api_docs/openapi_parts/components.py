"""Components shared by every generation of the document.

Domain modules contribute their own schemas on top of these; the parameters,
reusable error responses and the security scheme live only here.
"""
from typing import Any, Dict

from ..config.pagination import MAX_LIMIT, limit_schema, offset_schema
from .constants import BEARER_DESCRIPTIONS, BEARER_SCHEME, LIST_STATUS_FILTERS, PIN_HEADER, PIN_PATTERN
from .helpers import json_content, object_schema, schema_ref


def security_schemes(generation: str) -> Dict[str, Any]:
    return {
        BEARER_SCHEME: {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": BEARER_DESCRIPTIONS[generation],
        }
    }


def parameters() -> Dict[str, Any]:
    return {
        "LimitParam": {
            "name": "limit",
            "in": "query",
            "schema": limit_schema(),
            "description": f"Number of items to return (max {MAX_LIMIT})",
        },
        "OffsetParam": {
            "name": "offset",
            "in": "query",
            "schema": offset_schema(),
            "description": "Number of items to skip",
        },
        "StatusParam": {
            "name": "status",
            "in": "query",
            "schema": {"type": "string", "enum": list(LIST_STATUS_FILTERS)},
            "description": "Filter by status",
        },
        "PinCodeHeader": {
            "name": PIN_HEADER,
            "in": "header",
            "schema": {"type": "string", "pattern": PIN_PATTERN},
            "description": "6-digit PIN code (required if PIN is enabled)",
        },
    }


def _error(description: str) -> Dict[str, Any]:
    return {"description": description, "content": json_content(schema_ref("ErrorResponse"))}


def responses() -> Dict[str, Any]:
    return {
        "BadRequest": _error("Bad Request - Invalid input"),
        "Unauthorized": _error("Unauthorized - Invalid or missing authentication"),
        "Forbidden": _error("Forbidden - Account blocked or insufficient permissions"),
        "NotFound": _error("Not Found - Resource does not exist"),
        "InternalError": _error("Internal Server Error - Unexpected failure in the service"),
    }


def base_schemas() -> Dict[str, Any]:
    return {
        "SuccessResponse": object_schema({
            "success": {"type": "boolean", "example": True},
            "message": {"type": "string"},
        }),
        "ErrorResponse": object_schema(
            {
                "success": {"type": "boolean", "example": False},
                "error": {"type": "string"},
                "code": {"type": "string", "example": "VALIDATION_ERROR"},
            },
            required=["success", "error"],
        ),
        "Pagination": object_schema(
            {
                "total": {"type": "integer"},
                "limit": {"type": "integer"},
                "offset": {"type": "integer"},
                "totalPages": {"type": "integer"},
            },
            required=["total", "limit", "offset"],
        ),
    }


__all__ = ["security_schemes", "parameters", "responses", "base_schemas"]
