"""Common helpers for building domain paths with deterministic structure."""
from typing import Any, Dict, List

from ..constants import PIN_PATTERN
from ..helpers import error_responses, json_response, object_schema, operation, param_ref, request_body


def pagination_params(with_status: bool = True) -> List[Dict[str, Any]]:
    params = [param_ref("LimitParam"), param_ref("OffsetParam")]
    if with_status:
        params.append(param_ref("StatusParam"))
    return params


def pin_header() -> Dict[str, Any]:
    return param_ref("PinCodeHeader")


def list_operation(tag: str, noun: str, description: str, schema_name: str, with_status: bool = True) -> Dict[str, Any]:
    return operation(
        tag,
        f"List {noun}",
        description,
        {
            "200": json_response(f"{noun.capitalize()} retrieved successfully", schema_name),
            **error_responses("400", "401"),
        },
        parameters=pagination_params(with_status),
    )


def build_pin_paths(prefix: str, tag: str, owner: str) -> Dict[str, Any]:
    """PIN management sub-resource shared by `/merchants` and `/profile`."""
    pin_path = f"{prefix}/pin"
    return {
        pin_path: {
            "post": operation(
                tag,
                "Set PIN code",
                f"Set a new PIN code for the {owner} account",
                {
                    "200": json_response("PIN set successfully", "PinResponse"),
                    **error_responses("400", "401", "403"),
                },
                body=request_body("SetPinRequest"),
            ),
            "put": operation(
                tag,
                "Update PIN code",
                "Update existing PIN code (requires current PIN)",
                {
                    "200": json_response("PIN updated successfully", "PinResponse"),
                    **error_responses("400", "401", "403"),
                },
                body=request_body("UpdatePinRequest"),
            ),
            "delete": operation(
                tag,
                "Revoke PIN code",
                "Remove PIN code from account (requires current PIN)",
                {
                    "200": json_response("PIN revoked successfully", "PinResponse"),
                    **error_responses("400", "401", "403"),
                },
                body=request_body("SetPinRequest"),
            ),
        },
        f"{pin_path}/validate": {
            "post": operation(
                tag,
                "Validate PIN code",
                "Validate PIN code without performing any action. Repeated failures block the account "
                "(status PIN_BLOCKED).",
                {
                    "200": json_response("PIN validation result", "PinValidationResponse"),
                    **error_responses("401", "403"),
                },
                body=request_body("SetPinRequest"),
            ),
        },
    }


def pin_schemas() -> Dict[str, Any]:
    return {
        "SetPinRequest": object_schema(
            {"pin_code": {"type": "string", "pattern": PIN_PATTERN, "example": "123456"}},
            required=["pin_code"],
        ),
        "UpdatePinRequest": object_schema(
            {
                "current_pin": {"type": "string", "pattern": PIN_PATTERN},
                "new_pin": {"type": "string", "pattern": PIN_PATTERN},
            },
            required=["current_pin", "new_pin"],
        ),
        "PinResponse": object_schema({
            "success": {"type": "boolean"},
            "message": {"type": "string"},
            "error": {"type": "string"},
        }),
        "PinValidationResponse": object_schema({
            "success": {"type": "boolean"},
            "attempts_remaining": {"type": "integer"},
            "is_blocked": {"type": "boolean"},
            "message": {"type": "string"},
        }),
    }


__all__ = ["pagination_params", "pin_header", "list_operation", "build_pin_paths", "pin_schemas"]
