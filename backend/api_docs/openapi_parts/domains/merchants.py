"""Merchant profile endpoints (v1 document)."""
from typing import Any, Dict

from ..constants import MERCHANT_STATUSES
from ..helpers import error_responses, json_response, object_schema, operation, request_body, schema_ref
from ._common import build_pin_paths, pin_schemas

TAG = "Merchants"


def build_paths() -> Dict[str, Any]:
    paths: Dict[str, Any] = {
        "/merchants": {
            "get": operation(
                TAG,
                "Get merchant profile",
                "Retrieve the authenticated merchant's profile information",
                {
                    "200": json_response("Merchant profile retrieved successfully", "MerchantProfileResponse"),
                    **error_responses("401", "404"),
                },
            ),
            "post": operation(
                TAG,
                "Create or update merchant",
                "Create a new merchant or update existing merchant profile (upsert)",
                {
                    "200": json_response("Merchant created/updated successfully", "MerchantProfileResponse"),
                    **error_responses("400", "401"),
                },
                body=request_body("CreateMerchantRequest"),
            ),
            "put": operation(
                TAG,
                "Update merchant profile",
                "Update merchant profile fields including logo upload",
                {
                    "200": json_response("Merchant updated successfully", "MerchantProfileResponse"),
                    **error_responses("400", "401", "404"),
                },
                body=request_body("UpdateMerchantRequest"),
            ),
        },
        "/merchants/status": {
            "get": operation(
                TAG,
                "Get merchant status",
                "Check merchant account status and PIN configuration",
                {
                    "200": json_response("Merchant status retrieved", "MerchantStatusResponse"),
                    **error_responses("401", "404"),
                },
            ),
        },
    }
    paths.update(build_pin_paths("/merchants", TAG, "merchant"))
    return paths


def build_schemas() -> Dict[str, Any]:
    schemas: Dict[str, Any] = {
        "MerchantProfile": object_schema({
            "merchant_id": {"type": "string", "format": "uuid"},
            "email": {"type": "string", "format": "email"},
            "display_name": {"type": "string"},
            "description": {"type": "string"},
            "logo_url": {"type": "string", "format": "uri"},
            "wallet_address": {"type": "string"},
            "stellar_address": {"type": "string"},
            "default_token_id": {"type": "string"},
            "default_currency": {"type": "string"},
            "default_language": {"type": "string"},
            "status": {"type": "string", "enum": list(MERCHANT_STATUSES)},
            "has_pin": {"type": "boolean"},
            "created_at": {"type": "string", "format": "date-time"},
            "updated_at": {"type": "string", "format": "date-time"},
        }),
        "MerchantProfileResponse": object_schema({
            "success": {"type": "boolean"},
            "profile": schema_ref("MerchantProfile"),
            "message": {"type": "string"},
        }),
        "MerchantStatusResponse": object_schema({
            "success": {"type": "boolean"},
            "status": {"type": "string", "enum": list(MERCHANT_STATUSES)},
            "has_pin": {"type": "boolean"},
            "pin_attempts": {"type": "integer"},
            "pin_blocked_at": {"type": "string", "format": "date-time", "nullable": True},
        }),
        "CreateMerchantRequest": object_schema(
            {
                "email": {"type": "string", "format": "email"},
                "display_name": {"type": "string"},
                "description": {"type": "string"},
                "logo_url": {"type": "string", "format": "uri"},
                "default_currency": {"type": "string", "example": "USD"},
                "default_language": {"type": "string", "example": "en"},
            },
            required=["email"],
        ),
        "UpdateMerchantRequest": object_schema({
            "email": {"type": "string", "format": "email"},
            "display_name": {"type": "string"},
            "logo": {"type": "string", "description": "Base64 encoded image"},
            "default_token_id": {"type": "string"},
            "stellar_address": {"type": "string"},
        }),
    }
    schemas.update(pin_schemas())
    return schemas


__all__ = ["build_paths", "build_schemas"]
