"""Dashboard reporting endpoints. v2 adds `/reports/quick-stats`."""
from typing import Any, Dict

from ..constants import REPORT_GROUPING
from ..helpers import envelope, error_responses, json_response, object_schema, operation

TAG = "Reports"


def _date_param(name: str, description: str, example: str) -> Dict[str, Any]:
    return {
        "name": name,
        "in": "query",
        "required": True,
        "schema": {"type": "string", "format": "date"},
        "description": description,
        "example": example,
    }


def build_paths(generation: str) -> Dict[str, Any]:
    paths: Dict[str, Any] = {
        "/reports": {
            "get": operation(
                TAG,
                "Get dashboard report",
                "Generate dashboard report with charts data for the specified date range",
                {
                    "200": json_response("Report generated successfully", "ReportResponse"),
                    **error_responses("400", "401"),
                },
                parameters=[
                    _date_param("from", "Start date (YYYY-MM-DD)", "2025-01-01"),
                    _date_param("to", "End date (YYYY-MM-DD)", "2025-01-31"),
                    {
                        "name": "group_by",
                        "in": "query",
                        "required": False,
                        "schema": {"type": "string", "enum": list(REPORT_GROUPING), "default": "day"},
                        "description": "Group results by time period",
                    },
                ],
            ),
        },
    }
    if generation == "v2":
        paths["/reports/quick-stats"] = {
            "get": operation(
                TAG,
                "Get quick stats",
                "Today's and this week's completed orders and revenue, plus pending orders",
                {
                    "200": json_response("Quick stats retrieved successfully", "QuickStatsResponse"),
                    **error_responses("400", "401"),
                },
            ),
        }
    return paths


def _series(properties: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "array", "items": object_schema(properties)}


def build_schemas(generation: str) -> Dict[str, Any]:
    schemas: Dict[str, Any] = {
        "ReportResponse": envelope(object_schema({
            "merchant_id": {"type": "string"},
            "date_range": object_schema({
                "from": {"type": "string"},
                "to": {"type": "string"},
            }),
            "summary": object_schema({
                "total_completed_orders": {"type": "integer"},
                "total_required_amount_usd": {"type": "number"},
                "total_display_amounts": {"type": "object", "additionalProperties": {"type": "number"}},
            }),
            "charts": object_schema({
                "daily_trends": _series({
                    "date": {"type": "string"},
                    "orders_count": {"type": "integer"},
                    "usd_amount": {"type": "number"},
                }),
                "currency_breakdown": _series({
                    "currency": {"type": "string"},
                    "amount": {"type": "number"},
                    "percentage": {"type": "number"},
                }),
                "order_volume": _series({
                    "date": {"type": "string"},
                    "count": {"type": "integer"},
                }),
            }),
        })),
    }
    if generation == "v2":
        schemas["QuickStatsResponse"] = envelope(object_schema({
            "today_orders": {"type": "integer"},
            "today_revenue_usd": {"type": "number"},
            "pending_orders": {"type": "integer"},
            "week_orders": {"type": "integer"},
            "week_revenue_usd": {"type": "number"},
        }))
    return schemas


__all__ = ["build_paths", "build_schemas"]
