"""Withdrawal endpoints. v1 returns the full history; v2 pages it."""
from typing import Any, Dict

from ..helpers import (
    envelope,
    error_responses,
    json_response,
    list_of,
    object_schema,
    operation,
    request_body,
    schema_ref,
)
from ._common import list_operation, pin_header

TAG = "Withdrawals"


def build_paths(generation: str) -> Dict[str, Any]:
    if generation == "v1":
        listing = operation(
            TAG,
            "List withdrawals",
            "Get withdrawal history for the merchant",
            {
                "200": json_response("Withdrawals retrieved successfully", "WithdrawalListResponse"),
                **error_responses("401"),
            },
        )
    else:
        listing = list_operation(
            TAG, "withdrawals", "Get paginated withdrawal history for the merchant", "WithdrawalListResponse",
            with_status=False,
        )
    return {
        "/withdrawals": {
            "get": listing,
            "post": operation(
                TAG,
                "Create withdrawal",
                "Create a new withdrawal request (requires PIN if enabled)",
                {
                    "201": json_response("Withdrawal created successfully", "WithdrawalResponse"),
                    **error_responses("400", "401", "403"),
                },
                parameters=[pin_header()],
                body=request_body("CreateWithdrawalRequest"),
            ),
        },
    }


def build_schemas(generation: str) -> Dict[str, Any]:
    if generation == "v1":
        listing = object_schema({
            "success": {"type": "boolean"},
            "data": list_of("Withdrawal"),
            "count": {"type": "integer"},
        })
    else:
        listing = envelope(object_schema({
            "withdrawals": list_of("Withdrawal"),
            "pagination": schema_ref("Pagination"),
        }))
    return {
        "Withdrawal": object_schema({
            "withdrawal_id": {"type": "string", "format": "uuid"},
            "merchant_id": {"type": "string", "format": "uuid"},
            "recipient": {"type": "string"},
            "amount": {"type": "number"},
            "currency": {"type": "string"},
            "tx_hash": {"type": "string"},
            "created_at": {"type": "string", "format": "date-time"},
        }),
        "WithdrawalListResponse": listing,
        "WithdrawalResponse": envelope(schema_ref("Withdrawal")),
        "CreateWithdrawalRequest": object_schema(
            {
                "recipient": {"type": "string", "description": "Wallet address"},
                "amount": {"type": "number", "minimum": 0},
                "currency": {"type": "string", "example": "USDC"},
            },
            required=["recipient", "amount", "currency"],
        ),
    }


__all__ = ["build_paths", "build_schemas"]
