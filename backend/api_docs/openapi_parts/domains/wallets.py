"""Wallet endpoints.

v1 treats `/wallets/{walletId}` as the target of transfer actions. v2 turns
wallets into a merchant-owned resource with one primary wallet per chain. The
primary-wallet rules are enforced by the wallet service; here they are only
described so clients know what to expect.
"""
from typing import Any, Dict

from ..helpers import (
    envelope,
    error_responses,
    json_content,
    json_response,
    list_of,
    object_schema,
    operation,
    path_param,
    request_body,
    schema_ref,
)
from . import transfers

TAG = "Wallets"

PRIMARY_RULES = (
    "A merchant has at most one primary wallet per chain. The first wallet added for a chain becomes "
    "primary automatically. Marking a wallet primary demotes the previous primary wallet of the same chain. "
    "The only primary wallet of a chain cannot be deleted."
)


def build_v1_paths() -> Dict[str, Any]:
    return transfers.build_transfer_paths(
        "/wallets/{walletId}",
        TAG,
        "",
        "/stellar/transfer",
        "Privy wallet ID",
    )


def build_v1_schemas() -> Dict[str, Any]:
    return transfers.build_schemas()


def _wallet_id() -> Dict[str, Any]:
    return path_param("walletId", "Wallet UUID", fmt="uuid")


def _primary_required_error() -> Dict[str, Any]:
    content = json_content(schema_ref("ErrorResponse"))
    content["application/json"]["example"] = {
        "success": False,
        "error": "Cannot delete the only wallet for this chain. Add another wallet first or set a different primary.",
        "code": "DATABASE_ERROR",
    }
    return {"description": "Wallet is the sole primary wallet of its chain", "content": content}


def build_v2_paths() -> Dict[str, Any]:
    return {
        "/wallets": {
            "get": operation(
                TAG,
                "List wallets",
                "Get all wallets of the authenticated merchant, primary wallets first",
                {
                    "200": json_response("Wallets retrieved successfully", "WalletListResponse"),
                    **error_responses("401", "500"),
                },
            ),
            "post": operation(
                TAG,
                "Add wallet",
                "Register a wallet address on a chain. " + PRIMARY_RULES
                + " Passing `is_primary: true` makes the new wallet primary for its chain.",
                {
                    "201": json_response("Wallet added successfully", "WalletResponse"),
                    **error_responses("400", "401", "500"),
                },
                body=request_body("AddWalletRequest"),
            ),
        },
        "/wallets/chains": {
            "get": operation(
                TAG,
                "List chains",
                "Get the chains wallets can be registered on",
                {
                    "200": json_response("Chains retrieved successfully", "ChainListResponse"),
                    **error_responses("401", "500"),
                },
            ),
        },
        "/wallets/sync": {
            "post": operation(
                TAG,
                "Sync embedded wallet",
                "Copy the merchant's Privy embedded wallet into the wallets table and mark it primary for its chain",
                {
                    "200": json_response("Wallet synced successfully", "WalletResponse"),
                    **error_responses("400", "401", "500"),
                },
                body=request_body("SyncWalletRequest", required=False),
            ),
        },
        "/wallets/{walletId}": {
            "get": operation(
                TAG,
                "Get wallet",
                "Retrieve a single wallet owned by the merchant",
                {
                    "200": json_response("Wallet retrieved successfully", "WalletResponse"),
                    **error_responses("400", "401", "404"),
                },
                parameters=[_wallet_id()],
            ),
            "put": operation(
                TAG,
                "Update wallet",
                "Update the wallet label or primary flag. " + PRIMARY_RULES,
                {
                    "200": json_response("Wallet updated successfully", "WalletResponse"),
                    **error_responses("400", "401", "404", "500"),
                },
                parameters=[_wallet_id()],
                body=request_body("UpdateWalletRequest"),
            ),
            "delete": operation(
                TAG,
                "Delete wallet",
                "Remove a wallet. " + PRIMARY_RULES,
                {
                    "200": json_response("Wallet deleted successfully", "SuccessResponse"),
                    "400": _primary_required_error(),
                    **error_responses("401", "404", "500"),
                },
                parameters=[_wallet_id()],
            ),
        },
        "/wallets/{walletId}/primary": {
            "put": operation(
                TAG,
                "Set primary wallet",
                "Mark the wallet as primary for its chain. Exactly one previous primary wallet of the same "
                "chain, if any, is demoted.",
                {
                    "200": json_response("Primary wallet updated", "WalletResponse"),
                    **error_responses("401", "404", "500"),
                },
                parameters=[_wallet_id()],
            ),
        },
        "/wallets/{walletId}/balance": {
            "get": operation(
                TAG,
                "Get wallet balance",
                "Fetch on-chain balances for the wallet. Select the asset either by `token_id` or by `asset`.",
                {
                    "200": json_response("Balance retrieved successfully", "WalletBalanceResponse"),
                    **error_responses("400", "401", "404", "500"),
                },
                parameters=[
                    _wallet_id(),
                    {
                        "name": "token_id",
                        "in": "query",
                        "required": False,
                        "schema": {"type": "string"},
                        "description": "Token ID from the tokens table; must be on the wallet's chain",
                    },
                    {
                        "name": "asset",
                        "in": "query",
                        "required": False,
                        "schema": {"type": "string", "example": "usdc"},
                        "description": "Asset name (usdc, eth, ...)",
                    },
                ],
            ),
        },
    }


def build_v2_schemas() -> Dict[str, Any]:
    return {
        "Wallet": object_schema({
            "wallet_id": {"type": "string", "format": "uuid"},
            "merchant_id": {"type": "string", "format": "uuid"},
            "chain_id": {"type": "string"},
            "address": {"type": "string"},
            "label": {"type": "string", "nullable": True},
            "source": {"type": "string", "example": "manual"},
            "is_primary": {
                "type": "boolean",
                "description": "True for the single primary wallet of this chain",
            },
            "is_verified": {"type": "boolean"},
            "created_at": {"type": "string", "format": "date-time"},
            "updated_at": {"type": "string", "format": "date-time"},
        }),
        "WalletListResponse": envelope(list_of("Wallet")),
        "WalletResponse": envelope(schema_ref("Wallet"), message={"type": "string"}),
        "AddWalletRequest": object_schema(
            {
                "chain_id": {"type": "string", "example": "8453"},
                "address": {"type": "string"},
                "label": {"type": "string"},
                "source": {"type": "string", "example": "manual"},
                "is_primary": {
                    "type": "boolean",
                    "description": "Defaults to true when this is the first wallet for the chain",
                },
            },
            required=["chain_id", "address"],
        ),
        "UpdateWalletRequest": object_schema({
            "label": {"type": "string"},
            "is_primary": {"type": "boolean"},
        }),
        "SyncWalletRequest": object_schema({
            "chain_id": {"type": "string", "description": "Chain to sync; defaults to the embedded wallet's chain"},
        }),
        "Chain": object_schema({
            "chain_id": {"type": "string"},
            "name": {"type": "string"},
            "chain_type": {"type": "string", "example": "evm"},
            "icon_url": {"type": "string", "format": "uri", "nullable": True},
            "explorer_url": {"type": "string", "format": "uri", "nullable": True},
            "is_active": {"type": "boolean"},
        }),
        "ChainListResponse": envelope(list_of("Chain")),
        "TokenInfo": object_schema({
            "token_name": {"type": "string"},
            "token_address": {"type": "string"},
        }),
        "BalanceEntry": object_schema({
            "chain": {"type": "string"},
            "asset": {"type": "string"},
            "raw_value": {"type": "string"},
            "raw_value_decimals": {"type": "integer"},
            "display_values": {"type": "object", "additionalProperties": {"type": "string"}},
        }),
        "WalletBalance": object_schema({
            "wallet_id": {"type": "string", "format": "uuid"},
            "address": {"type": "string"},
            "chain_id": {"type": "string"},
            "token": {"allOf": [schema_ref("TokenInfo")], "nullable": True},
            "asset": {"type": "string"},
            "balances": list_of("BalanceEntry"),
        }),
        "WalletBalanceResponse": envelope(schema_ref("WalletBalance")),
    }


__all__ = ["build_v1_paths", "build_v1_schemas", "build_v2_paths", "build_v2_schemas", "PRIMARY_RULES"]
