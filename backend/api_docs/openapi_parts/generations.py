"""Registry of document generations.

A deployment serves exactly one generation. The two are never merged: their
path namespaces conflict (`/wallets/{walletId}` is a transfer action in v1 and
a wallet resource in v2).
"""
from functools import partial
from typing import Any, Callable, Dict, List, NamedTuple, Tuple

from .constants import V1_TAGS, V2_TAGS
from .domains import cron, deposits, devices, merchants, orders, profile, reports, transfers, wallets, withdrawals

Builder = Callable[[], Dict[str, Any]]


class Generation(NamedTuple):
    name: str
    tags: List[Dict[str, str]]
    # (paths builder, schemas builder) per domain, in document order
    domains: List[Tuple[Builder, Builder]]


GENERATIONS: Dict[str, Generation] = {
    "v1": Generation(
        "v1",
        V1_TAGS,
        [
            (merchants.build_paths, merchants.build_schemas),
            (orders.build_v1_paths, orders.build_v1_schemas),
            (deposits.build_paths, partial(deposits.build_schemas, "v1")),
            (partial(withdrawals.build_paths, "v1"), partial(withdrawals.build_schemas, "v1")),
            (wallets.build_v1_paths, wallets.build_v1_schemas),
            (devices.build_v1_paths, devices.build_v1_schemas),
            (partial(reports.build_paths, "v1"), partial(reports.build_schemas, "v1")),
        ],
    ),
    "v2": Generation(
        "v2",
        V2_TAGS,
        [
            (profile.build_paths, profile.build_schemas),
            (orders.build_v2_paths, orders.build_v2_schemas),
            (deposits.build_paths, partial(deposits.build_schemas, "v2")),
            (partial(withdrawals.build_paths, "v2"), partial(withdrawals.build_schemas, "v2")),
            (wallets.build_v2_paths, wallets.build_v2_schemas),
            (transfers.build_paths, transfers.build_schemas),
            (devices.build_v2_paths, devices.build_v2_schemas),
            (partial(reports.build_paths, "v2"), partial(reports.build_schemas, "v2")),
            (cron.build_paths, cron.build_schemas),
        ],
    ),
}

# Path prefixes whose operations are internal and unauthenticated
UNAUTHENTICATED_PREFIXES: Dict[str, Tuple[str, ...]] = {
    "v1": (),
    "v2": ("/cron/",),
}


def get_generation(name: str) -> Generation:
    try:
        return GENERATIONS[name]
    except KeyError:
        known = ", ".join(sorted(GENERATIONS))
        raise ValueError(f"Unknown spec generation {name!r} (expected one of: {known})") from None


__all__ = ["Generation", "GENERATIONS", "UNAUTHENTICATED_PREFIXES", "get_generation"]
