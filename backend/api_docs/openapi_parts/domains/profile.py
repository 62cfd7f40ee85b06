"""Merchant profile endpoints (v2 document).

Replaces `/merchants`: the profile embeds the merchant's primary wallet
instead of carrying raw wallet addresses.
"""
from typing import Any, Dict

from ..constants import MERCHANT_STATUSES
from ..helpers import envelope, error_responses, json_response, object_schema, operation, request_body, schema_ref
from ._common import build_pin_paths, pin_schemas

TAG = "Profile"


def build_paths() -> Dict[str, Any]:
    paths: Dict[str, Any] = {
        "/profile": {
            "get": operation(
                TAG,
                "Get profile",
                "Retrieve the authenticated merchant's profile, including its primary wallet",
                {
                    "200": json_response("Profile retrieved successfully", "ProfileResponse"),
                    **error_responses("401", "403", "404"),
                },
            ),
            "post": operation(
                TAG,
                "Create or update profile",
                "Create the merchant profile for the authenticated Privy user, or update it if it exists (upsert). "
                "The user's embedded wallet is registered as the primary wallet of its chain.",
                {
                    "200": json_response("Profile created/updated successfully", "ProfileResponse"),
                    **error_responses("400", "401"),
                },
                body=request_body("CreateProfileRequest"),
            ),
            "put": operation(
                TAG,
                "Update profile",
                "Update profile fields including logo upload (base64)",
                {
                    "200": json_response("Profile updated successfully", "ProfileResponse"),
                    **error_responses("400", "401", "403", "404"),
                },
                body=request_body("UpdateProfileRequest"),
            ),
        },
        "/profile/status": {
            "get": operation(
                TAG,
                "Get profile status",
                "Check account status and PIN configuration",
                {
                    "200": json_response("Profile status retrieved", "ProfileStatusResponse"),
                    **error_responses("401", "404"),
                },
            ),
        },
    }
    paths.update(build_pin_paths("/profile", TAG, "merchant"))
    return paths


def build_schemas() -> Dict[str, Any]:
    schemas: Dict[str, Any] = {
        "PrimaryWallet": object_schema({
            "wallet_id": {"type": "string", "format": "uuid"},
            "address": {"type": "string"},
            "chain_id": {"type": "string"},
            "label": {"type": "string", "nullable": True},
            "source": {"type": "string", "example": "privy"},
        }),
        "Profile": object_schema({
            "merchant_id": {"type": "string", "format": "uuid"},
            "privy_id": {"type": "string"},
            "email": {"type": "string", "format": "email"},
            "display_name": {"type": "string", "nullable": True},
            "logo_url": {"type": "string", "format": "uri", "nullable": True},
            "description": {"type": "string", "nullable": True},
            "default_token_id": {"type": "string"},
            "default_currency": {"type": "string"},
            "default_language": {"type": "string"},
            "status": {"type": "string", "enum": list(MERCHANT_STATUSES), "nullable": True},
            "has_pin": {"type": "boolean"},
            "created_at": {"type": "string", "format": "date-time"},
            "updated_at": {"type": "string", "format": "date-time"},
            "primary_wallet": {
                "allOf": [schema_ref("PrimaryWallet")],
                "nullable": True,
                "description": "Primary wallet of the merchant's default chain, if any",
            },
        }),
        "ProfileResponse": envelope(schema_ref("Profile"), message={"type": "string"}),
        "ProfileStatusResponse": envelope(object_schema({
            "status": {"type": "string", "enum": list(MERCHANT_STATUSES)},
            "has_pin": {"type": "boolean"},
            "pin_attempts": {"type": "integer"},
            "pin_blocked_at": {"type": "string", "format": "date-time", "nullable": True},
        })),
        "CreateProfileRequest": object_schema(
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
        "UpdateProfileRequest": object_schema({
            "email": {"type": "string", "format": "email"},
            "display_name": {"type": "string"},
            "default_token_id": {"type": "string"},
            "logo": {"type": "string", "description": "Base64 encoded image"},
        }),
    }
    schemas.update(pin_schemas())
    return schemas


__all__ = ["build_paths", "build_schemas"]
