"""Outgoing transfer actions.

The same three actions are published under `/wallets/{walletId}` in v1 and
under `/transfers/{walletId}` in v2; only the prefix, tag and action suffixes
differ.
"""
from typing import Any, Dict

from ..helpers import error_responses, json_response, object_schema, operation, path_param, request_body
from ._common import pin_header

TAG = "Transfers"


def _wallet_id(description: str) -> Dict[str, Any]:
    return path_param("walletId", description)


def build_transfer_paths(
    prefix: str,
    tag: str,
    send_suffix: str,
    stellar_send_suffix: str,
    wallet_description: str,
) -> Dict[str, Any]:
    common_errors = error_responses("400", "401", "403")
    return {
        f"{prefix}{send_suffix}": {
            "post": operation(
                tag,
                "Send USDC transaction",
                "Send USDC from merchant wallet to recipient address (requires PIN if enabled)",
                {
                    "200": json_response("Transaction submitted successfully", "WalletTransactionResponse"),
                    **common_errors,
                },
                parameters=[_wallet_id(wallet_description), pin_header()],
                body=request_body("WalletTransactionRequest"),
            ),
        },
        f"{prefix}/stellar/trustline": {
            "post": operation(
                tag,
                "Create USDC trustline",
                "Create a USDC trustline on Stellar network for the wallet",
                {
                    "200": json_response("Trustline created successfully", "StellarTrustlineResponse"),
                    **common_errors,
                },
                parameters=[_wallet_id(wallet_description), pin_header()],
                body=request_body("StellarTrustlineRequest"),
            ),
        },
        f"{prefix}{stellar_send_suffix}": {
            "post": operation(
                tag,
                "Send Stellar USDC",
                "Send USDC on Stellar network. The source account must already hold a USDC trustline.",
                {
                    "200": json_response("Transfer submitted successfully", "StellarTransferResponse"),
                    **common_errors,
                },
                parameters=[_wallet_id(wallet_description), pin_header()],
                body=request_body("StellarTransferRequest"),
            ),
        },
    }


def build_paths() -> Dict[str, Any]:
    return build_transfer_paths(
        "/transfers/{walletId}",
        TAG,
        "/send",
        "/stellar/send",
        "Wallet UUID of a wallet owned by the merchant",
    )


def build_schemas() -> Dict[str, Any]:
    return {
        "WalletTransactionRequest": object_schema(
            {
                "recipientAddress": {"type": "string", "description": "EVM address (0x...)"},
                "amount": {"type": "number", "minimum": 0},
                "signature": {"type": "string", "description": "Authorization signature"},
                "requestId": {"type": "string", "description": "Idempotency key"},
            },
            required=["recipientAddress", "amount", "signature"],
        ),
        "WalletTransactionResponse": object_schema({
            "success": {"type": "boolean"},
            "hash": {"type": "string"},
            "caip2": {"type": "string"},
            "walletId": {"type": "string"},
        }),
        "StellarTrustlineRequest": object_schema(
            {"signerPublicKey": {"type": "string", "description": "Stellar public key (G...)"}},
            required=["signerPublicKey"],
        ),
        "StellarTrustlineResponse": object_schema({
            "success": {"type": "boolean"},
            "hash": {"type": "string"},
            "ledger": {"type": "integer"},
            "message": {"type": "string"},
        }),
        "StellarTransferRequest": object_schema(
            {
                "signerPublicKey": {"type": "string"},
                "destinationAddress": {
                    "type": "string",
                    "pattern": "^G[A-Z0-9]{55}$",
                    "description": "Stellar address (G...)",
                },
                "amount": {"type": "string", "example": "10.5"},
            },
            required=["signerPublicKey", "destinationAddress", "amount"],
        ),
        "StellarTransferResponse": object_schema({
            "success": {"type": "boolean"},
            "hash": {"type": "string"},
            "ledger": {"type": "integer"},
        }),
    }


__all__ = ["build_transfer_paths", "build_paths", "build_schemas"]
