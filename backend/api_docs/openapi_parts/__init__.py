"""Modular pieces for the programmatic OpenAPI builder.

This package holds constants, helpers, the shared components registry, the
per-service domain modules and the consistency checks the builder runs before
a document is handed out.
"""

__all__ = [
    "constants",
    "helpers",
    "components",
    "generations",
    "validation",
]
