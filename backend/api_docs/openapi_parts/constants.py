"""Centralized constants for the OpenAPI spec builder.

Keeps the generation modules free of repeated literals. Ordering of the lists
below is the ordering of the served document.
"""
from typing import Any, Dict, List

OPENAPI_VERSION = "3.0.3"

PIN_PATTERN = "^[0-9]{6}$"
PIN_HEADER = "X-Pin-Code"

BEARER_SCHEME = "BearerAuth"

CONTACT = {"name": "Rozo Support", "url": "https://rozo.ai"}

SERVERS: List[Dict[str, str]] = [
    {"url": "https://intentapiv2.rozo.ai/functions/v1", "description": "Production server"},
    {"url": "http://localhost:54321/functions/v1", "description": "Local development"},
]

# Status filter values accepted by list endpoints (lower-case query form)
LIST_STATUS_FILTERS = ["pending", "completed", "failed", "expired", "discrepancy"]
ORDER_STATUSES = ["PENDING", "PROCESSING", "COMPLETED", "FAILED", "EXPIRED", "DISCREPANCY"]
MERCHANT_STATUSES = ["ACTIVE", "INACTIVE", "PIN_BLOCKED"]
DEVICE_PLATFORMS = ["ios", "android", "web"]
REPORT_GROUPING = ["day", "week", "month"]

_PIN_SECTION = """
## PIN Security
Some sensitive operations (withdrawals, wallet transfers) require PIN validation.
Include the PIN code in the header:
```
X-Pin-Code: <6-digit-pin>
```
"""

V1_DESCRIPTION = """
## Overview
Rozo Backend API provides payment processing, merchant management, and wallet operations for the Rozo payment platform.

## Authentication
Most endpoints require authentication using JWT tokens from either:
- **Dynamic** - Web3 authentication provider
- **Privy** - Embedded wallet authentication

Include the JWT token in the Authorization header:
```
Authorization: Bearer <your-jwt-token>
```
""" + _PIN_SECTION

V2_DESCRIPTION = """
## Overview
Rozo Backend API provides payment processing, merchant profile management, multi-chain wallets and transfers for the Rozo payment platform.

## Authentication
All public endpoints require a JWT issued by **Privy** (embedded wallet authentication).

Include the JWT token in the Authorization header:
```
Authorization: Bearer <your-jwt-token>
```

Endpoints under `/cron` are internal scheduler hooks and are not authenticated.
""" + _PIN_SECTION + """
## Wallets
Each merchant keeps at most one primary wallet per chain. Settlement uses the primary wallet of the order's chain.
"""

V1_TAGS: List[Dict[str, str]] = [
    {"name": "Merchants", "description": "Merchant profile and PIN management"},
    {"name": "Orders", "description": "Order creation and management"},
    {"name": "Deposits", "description": "Deposit operations"},
    {"name": "Withdrawals", "description": "Withdrawal history and requests"},
    {"name": "Wallets", "description": "Wallet transactions and Stellar operations"},
    {"name": "Devices", "description": "FCM device registration for push notifications"},
    {"name": "Reports", "description": "Dashboard reporting and analytics"},
]

V2_TAGS: List[Dict[str, str]] = [
    {"name": "Profile", "description": "Merchant profile and PIN management"},
    {"name": "Orders", "description": "Order creation and management"},
    {"name": "Deposits", "description": "Deposit operations"},
    {"name": "Withdrawals", "description": "Withdrawal history and requests"},
    {"name": "Wallets", "description": "Merchant wallets per chain, primary wallet selection and balances"},
    {"name": "Transfers", "description": "Outgoing USDC transfers and Stellar trustlines"},
    {"name": "Devices", "description": "FCM device registration for push notifications"},
    {"name": "Reports", "description": "Dashboard reporting and analytics"},
    {"name": "Cron", "description": "Internal scheduled jobs (unauthenticated)"},
]

INFO: Dict[str, Dict[str, Any]] = {
    "v1": {
        "title": "Rozo Backend API",
        "description": V1_DESCRIPTION,
        "version": "1.0.0",
        "contact": CONTACT,
    },
    "v2": {
        "title": "Rozo Backend API",
        "description": V2_DESCRIPTION,
        "version": "2.0.0",
        "contact": CONTACT,
    },
}

BEARER_DESCRIPTIONS = {
    "v1": "JWT token from Dynamic or Privy authentication",
    "v2": "JWT token from Privy authentication",
}

__all__ = [
    "OPENAPI_VERSION",
    "PIN_PATTERN",
    "PIN_HEADER",
    "BEARER_SCHEME",
    "SERVERS",
    "LIST_STATUS_FILTERS",
    "ORDER_STATUSES",
    "MERCHANT_STATUSES",
    "DEVICE_PLATFORMS",
    "REPORT_GROUPING",
    "V1_TAGS",
    "V2_TAGS",
    "INFO",
    "BEARER_DESCRIPTIONS",
]
