"""Order endpoints for both document generations."""
from typing import Any, Dict

from ..constants import ORDER_STATUSES
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

TAG = "Orders"


def _order_id() -> Dict[str, Any]:
    return path_param("orderId", "Order UUID", fmt="uuid")


def _get_order() -> Dict[str, Any]:
    return operation(
        TAG,
        "Get order by ID",
        "Retrieve a specific order by its ID",
        {
            "200": json_response("Order retrieved successfully", "OrderResponse"),
            **error_responses("401", "404"),
        },
        parameters=[_order_id()],
    )


def _create_order(description: str) -> Dict[str, Any]:
    return operation(
        TAG,
        "Create order",
        description,
        {
            "201": json_response("Order created successfully", "CreateOrderResponse"),
            **error_responses("400", "401", "403"),
        },
        body=request_body("CreateOrderRequest"),
    )


def build_v1_paths() -> Dict[str, Any]:
    return {
        "/orders": {
            "get": list_operation(
                TAG, "orders", "Get paginated list of merchant orders with optional status filter", "OrderListResponse"
            ),
            "post": _create_order("Create a new payment order with Daimo Pay integration"),
        },
        "/orders/{orderId}": {"get": _get_order()},
        "/orders/number/{orderNumber}": {
            "get": operation(
                TAG,
                "Get order by number",
                "Retrieve an order by its human-readable number",
                {
                    "200": json_response("Order retrieved successfully", "OrderResponse"),
                    **error_responses("401", "404"),
                },
                parameters=[path_param("orderNumber", "Order number (e.g., 2025062301234567)")],
            ),
        },
    }


def build_v1_schemas() -> Dict[str, Any]:
    return {
        "Order": object_schema({
            "order_id": {"type": "string", "format": "uuid"},
            "number": {"type": "string", "example": "2025062301234567"},
            "merchant_id": {"type": "string", "format": "uuid"},
            "status": {"type": "string", "enum": list(ORDER_STATUSES)},
            "display_amount": {"type": "number", "example": 100.50},
            "display_currency": {"type": "string", "example": "USD"},
            "required_amount_usd": {"type": "number"},
            "payment_url": {"type": "string", "format": "uri"},
            "payment_id": {"type": "string"},
            "expired_at": {"type": "string", "format": "date-time"},
            "created_at": {"type": "string", "format": "date-time"},
            "updated_at": {"type": "string", "format": "date-time"},
        }),
        "OrderListResponse": object_schema({
            "success": {"type": "boolean"},
            "data": list_of("Order"),
            "count": {"type": "integer"},
            "limit": {"type": "integer"},
            "offset": {"type": "integer"},
        }),
        "OrderResponse": envelope(schema_ref("Order")),
        "CreateOrderRequest": object_schema(
            {
                "display_amount": {"type": "number", "minimum": 0.1, "example": 100.50},
                "display_currency": {"type": "string", "example": "USD"},
                "preferred_token_id": {"type": "string", "example": "USDC_BASE"},
                "items": {
                    "type": "array",
                    "items": object_schema({
                        "name": {"type": "string"},
                        "description": {"type": "string"},
                    }),
                },
            },
            required=["display_amount", "display_currency"],
        ),
        "CreateOrderResponse": envelope(
            schema_ref("Order"),
            payment_url={"type": "string", "format": "uri"},
        ),
    }


def build_v2_paths() -> Dict[str, Any]:
    return {
        "/orders": {
            "get": list_operation(
                TAG, "orders", "Get paginated list of merchant orders with optional status filter", "OrderListResponse"
            ),
            "post": _create_order(
                "Create a new payment order. Funds settle to the merchant's primary wallet for the "
                "chain of the preferred token."
            ),
        },
        "/orders/{orderId}": {"get": _get_order()},
        "/orders/{orderId}/regenerate-payment": {
            "post": operation(
                TAG,
                "Regenerate payment link",
                "Issue a fresh payment link for a pending order, optionally switching the preferred token. "
                "The order expiry is extended.",
                {
                    "200": json_response("Payment link regenerated successfully", "RegeneratePaymentResponse"),
                    **error_responses("400", "401", "403", "404"),
                },
                parameters=[_order_id()],
                body=request_body("RegeneratePaymentRequest", required=False),
            ),
        },
    }


def build_v2_schemas() -> Dict[str, Any]:
    return {
        "PaymentDetail": object_schema(
            {
                "id": {"type": "string"},
                "status": {"type": "string"},
                "destination": object_schema({
                    "destinationAddress": {"type": "string"},
                    "chainId": {"type": "string"},
                    "tokenSymbol": {"type": "string", "example": "USDC"},
                    "amountUnits": {"type": "string"},
                }),
            },
            description="Payment intent issued by the payment provider",
        ),
        "Order": object_schema({
            "order_id": {"type": "string", "format": "uuid"},
            "number": {"type": "string", "nullable": True, "example": "2025062301234567"},
            "merchant_id": {"type": "string", "format": "uuid"},
            "status": {"type": "string", "enum": list(ORDER_STATUSES)},
            "display_amount": {"type": "number", "example": 100.50},
            "display_currency": {"type": "string", "example": "USD"},
            "required_amount_usd": {"type": "number"},
            "required_token": {"type": "string"},
            "description": {"type": "string", "nullable": True},
            "payment_id": {"type": "string"},
            "qrcode": {"type": "string", "format": "uri"},
            "expired_at": {"type": "string", "format": "date-time"},
            "created_at": {"type": "string", "format": "date-time"},
            "updated_at": {"type": "string", "format": "date-time"},
        }),
        "OrderListResponse": envelope(object_schema({
            "orders": list_of("Order"),
            "pagination": schema_ref("Pagination"),
        })),
        "OrderResponse": envelope(schema_ref("Order")),
        "CreateOrderRequest": object_schema(
            {
                "amount": {"type": "number", "minimum": 0.1, "example": 100.50},
                "currency": {"type": "string", "example": "USD"},
                "description": {"type": "string"},
                "number": {"type": "string", "description": "Merchant-side order number"},
                "preferred_token_id": {"type": "string", "example": "USDC_BASE"},
            },
            required=["amount", "currency"],
        ),
        "CreateOrderResponse": envelope(object_schema({
            "order_id": {"type": "string", "format": "uuid"},
            "order_number": {"type": "string", "nullable": True},
            "expired_at": {"type": "string", "format": "date-time"},
            "qrcode": {"type": "string", "format": "uri"},
            "payment_detail": schema_ref("PaymentDetail"),
        })),
        "RegeneratePaymentRequest": object_schema({
            "preferred_token_id": {"type": "string", "example": "USDC_BASE"},
        }),
        "RegeneratePaymentResponse": envelope(
            object_schema({
                "order_id": {"type": "string", "format": "uuid"},
                "expired_at": {"type": "string", "format": "date-time"},
                "qrcode": {"type": "string", "format": "uri"},
                "payment_detail": schema_ref("PaymentDetail"),
            }),
            message={"type": "string"},
        ),
    }


__all__ = ["build_v1_paths", "build_v1_schemas", "build_v2_paths", "build_v2_schemas"]
