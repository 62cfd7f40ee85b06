"""Internal scheduler hooks (v2 only). These operations carry no security requirement."""
from typing import Any, Dict

from ..helpers import error_responses, json_content, json_response, object_schema, operation, schema_ref

TAG = "Cron"


def _expired_orders_run(summary: str, description: str) -> Dict[str, Any]:
    return operation(
        TAG,
        summary,
        description,
        {
            "200": json_response("Expired orders processed", "ExpiredOrdersResponse"),
            **error_responses("500"),
        },
        auth=False,
    )


def build_paths() -> Dict[str, Any]:
    return {
        "/cron/expired-orders": {
            "post": _expired_orders_run(
                "Expire stale orders",
                "Scheduled job: mark every pending order past its expiry as EXPIRED",
            ),
        },
        "/cron/expired-orders/trigger": {
            "post": _expired_orders_run(
                "Trigger expired orders job",
                "Run the expired orders job on demand (manual testing)",
            ),
        },
        "/cron/expired-orders/health": {
            "get": operation(
                TAG,
                "Expired orders job health",
                "Liveness probe of the expired orders job",
                {"200": json_response("Job is running", "CronHealthResponse")},
                auth=False,
            ),
        },
        "/cron/update-currencies": {
            "post": operation(
                TAG,
                "Update currency rates",
                "Scheduled job: fetch the latest exchange rates and store them. Returns 207 when some "
                "currencies failed to update.",
                {
                    "200": json_response("Currency rates updated", "CurrencyUpdateResponse"),
                    "207": {
                        "description": "Currency rates partially updated",
                        "content": json_content(schema_ref("CurrencyUpdateResponse")),
                    },
                    "500": json_response("Currency update failed", "CurrencyUpdateResponse"),
                },
                auth=False,
            ),
        },
    }


def build_schemas() -> Dict[str, Any]:
    return {
        "ExpiredOrderStats": object_schema({
            "totalExpired": {"type": "integer"},
            "updatedOrders": {"type": "integer"},
            "errors": {"type": "integer"},
            "processingTimeMs": {"type": "integer"},
        }),
        "ExpiredOrdersResponse": object_schema({
            "success": {"type": "boolean"},
            "message": {"type": "string"},
            "stats": schema_ref("ExpiredOrderStats"),
        }),
        "CronHealthResponse": object_schema({
            "success": {"type": "boolean"},
            "message": {"type": "string"},
            "timestamp": {"type": "string", "format": "date-time"},
        }),
        "CurrencyUpdateResponse": object_schema({
            "success": {"type": "boolean"},
            "message": {"type": "string"},
            "updated": {"type": "integer"},
            "errors": {"type": "array", "items": {"type": "string"}},
            "error": {"type": "string"},
            "timestamp": {"type": "string", "format": "date-time"},
        }),
    }


__all__ = ["build_paths", "build_schemas"]
