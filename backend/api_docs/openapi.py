"""Public import for the OpenAPI builder.

Keeps a stable import path while the implementation lives in
`openapi_builder.py`.
"""
from .errors import SpecBuildError  # noqa: F401
from .openapi_builder import SpecDocument, build_openapi_spec, get_spec_document  # noqa: F401

__all__ = ["build_openapi_spec", "get_spec_document", "SpecDocument", "SpecBuildError"]
