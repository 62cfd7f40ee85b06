"""Deposit endpoints. Paths are the same in both generations; v2 lists carry a pagination block."""
from typing import Any, Dict

from ..helpers import (
    envelope,
    error_responses,
    json_response,
    list_of,
    object_schema,
    operation,
    path_param,
    request_body,
    schema_ref,
)
from ._common import list_operation

TAG = "Deposits"


def build_paths() -> Dict[str, Any]:
    return {
        "/deposits": {
            "get": list_operation(TAG, "deposits", "Get paginated list of merchant deposits", "DepositListResponse"),
            "post": operation(
                TAG,
                "Create deposit",
                "Create a new deposit request",
                {
                    "201": json_response("Deposit created successfully", "CreateDepositResponse"),
                    **error_responses("400", "401"),
                },
                body=request_body("CreateDepositRequest"),
            ),
        },
        "/deposits/{depositId}": {
            "get": operation(
                TAG,
                "Get deposit by ID",
                "Retrieve a specific deposit by its ID",
                {
                    "200": json_response("Deposit retrieved successfully", "DepositResponse"),
                    **error_responses("401", "404"),
                },
                parameters=[path_param("depositId", "Deposit UUID", fmt="uuid")],
            ),
        },
    }


def build_schemas(generation: str) -> Dict[str, Any]:
    if generation == "v1":
        listing = object_schema({
            "success": {"type": "boolean"},
            "data": list_of("Deposit"),
            "count": {"type": "integer"},
        })
    else:
        listing = envelope(object_schema({
            "deposits": list_of("Deposit"),
            "pagination": schema_ref("Pagination"),
        }))
    return {
        "Deposit": object_schema({
            "deposit_id": {"type": "string", "format": "uuid"},
            "number": {"type": "string"},
            "merchant_id": {"type": "string", "format": "uuid"},
            "status": {"type": "string"},
            "display_amount": {"type": "number"},
            "display_currency": {"type": "string"},
            "payment_url": {"type": "string", "format": "uri"},
            "created_at": {"type": "string", "format": "date-time"},
        }),
        "DepositListResponse": listing,
        "DepositResponse": envelope(schema_ref("Deposit")),
        "CreateDepositRequest": object_schema(
            {
                "display_amount": {"type": "number", "minimum": 0.1},
                "display_currency": {"type": "string"},
                "preferred_token_id": {"type": "string"},
            },
            required=["display_amount", "display_currency"],
        ),
        "CreateDepositResponse": envelope(
            schema_ref("Deposit"),
            payment_url={"type": "string", "format": "uri"},
        ),
    }


__all__ = ["build_paths", "build_schemas"]
