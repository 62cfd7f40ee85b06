"""Per-service OpenAPI path and schema builders.

Each module exports path and schema builders for the generation(s) it takes
part in; `openapi_parts.generations` decides which ones make up a document.
"""

__all__ = [
    "merchants",
    "profile",
    "orders",
    "deposits",
    "withdrawals",
    "wallets",
    "transfers",
    "devices",
    "reports",
    "cron",
]
