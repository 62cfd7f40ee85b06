"""FCM device registration endpoints."""
from typing import Any, Dict

from ..constants import DEVICE_PLATFORMS
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

TAG = "Devices"


def build_v1_paths() -> Dict[str, Any]:
    return {
        "/devices": {
            "get": operation(
                TAG,
                "List registered devices",
                "Get all FCM devices registered for the merchant",
                {
                    "200": json_response("Devices retrieved successfully", "DeviceListResponse"),
                    **error_responses("401"),
                },
            ),
            "post": operation(
                TAG,
                "Register device",
                "Register a new FCM device for push notifications",
                {
                    "201": json_response("Device registered successfully", "DeviceResponse"),
                    **error_responses("400", "401"),
                },
                body=request_body("RegisterDeviceRequest"),
            ),
        },
        "/devices/{deviceId}": {
            "delete": operation(
                TAG,
                "Unregister device",
                "Remove a registered FCM device",
                {
                    "200": json_response("Device unregistered successfully", "SuccessResponse"),
                    **error_responses("401", "404"),
                },
                parameters=[path_param("deviceId", fmt="uuid")],
            ),
        },
    }


def build_v1_schemas() -> Dict[str, Any]:
    return {
        "Device": object_schema({
            "device_id": {"type": "string", "format": "uuid"},
            "merchant_id": {"type": "string", "format": "uuid"},
            "fcm_token": {"type": "string"},
            "device_name": {"type": "string"},
            "platform": {"type": "string", "enum": list(DEVICE_PLATFORMS)},
            "created_at": {"type": "string", "format": "date-time"},
        }),
        "DeviceListResponse": object_schema({
            "success": {"type": "boolean"},
            "data": list_of("Device"),
            "count": {"type": "integer"},
        }),
        "DeviceResponse": envelope(schema_ref("Device")),
        "RegisterDeviceRequest": object_schema(
            {
                "fcm_token": {"type": "string"},
                "device_name": {"type": "string"},
                "platform": {"type": "string", "enum": list(DEVICE_PLATFORMS)},
            },
            required=["fcm_token"],
        ),
    }


def build_v2_paths() -> Dict[str, Any]:
    return {
        "/devices/register": {
            "post": operation(
                TAG,
                "Register device",
                "Register or refresh an FCM token for a client device. Re-registering a known device_id "
                "replaces its token.",
                {
                    "200": json_response("Device registered successfully", "DeviceResponse"),
                    **error_responses("400", "401", "403", "404"),
                },
                body=request_body("RegisterDeviceRequest"),
            ),
        },
        "/devices/unregister": {
            "delete": operation(
                TAG,
                "Unregister device",
                "Remove the FCM registration of a client device",
                {
                    "200": json_response("Device unregistered successfully", "SuccessResponse"),
                    **error_responses("400", "401", "403", "404"),
                },
                body=request_body("UnregisterDeviceRequest"),
            ),
        },
    }


def build_v2_schemas() -> Dict[str, Any]:
    return {
        "Device": object_schema({
            "id": {"type": "string", "format": "uuid"},
            "merchant_id": {"type": "string", "format": "uuid"},
            "device_id": {"type": "string"},
            "fcm_token": {"type": "string"},
            "platform": {"type": "string", "enum": list(DEVICE_PLATFORMS)},
            "created_at": {"type": "string", "format": "date-time", "nullable": True},
            "updated_at": {"type": "string", "format": "date-time", "nullable": True},
        }),
        "DeviceResponse": envelope(schema_ref("Device"), message={"type": "string"}),
        "RegisterDeviceRequest": object_schema(
            {
                "device_id": {"type": "string", "description": "Client-generated stable device identifier"},
                "fcm_token": {"type": "string"},
                "platform": {"type": "string", "enum": list(DEVICE_PLATFORMS)},
            },
            required=["device_id", "fcm_token", "platform"],
        ),
        "UnregisterDeviceRequest": object_schema(
            {"device_id": {"type": "string"}},
            required=["device_id"],
        ),
    }


__all__ = ["build_v1_paths", "build_v1_schemas", "build_v2_paths", "build_v2_schemas"]
