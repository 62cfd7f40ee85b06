"""Deterministic OpenAPI document builder.

Assembles one generation of the payment platform's API description from the
domain modules in `openapi_parts.domains`, runs the consistency checks, and
freezes the result as serialized JSON bytes. The frozen `SpecDocument` is
built once per process and shared by every request.

This is the canonical builder module; `api_docs/openapi.py` re-exports from here.
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List
import json
import logging

from .errors import SpecBuildError
from .openapi_parts import components as shared
from .openapi_parts.constants import BEARER_SCHEME, INFO, OPENAPI_VERSION, SERVERS
from .openapi_parts.generations import UNAUTHENTICATED_PREFIXES, get_generation
from .openapi_parts.validation import find_problems, iter_operations

logger = logging.getLogger(__name__)

__all__ = ["build_openapi_spec", "SpecDocument", "get_spec_document"]


def _merge_paths(paths: Dict[str, Any], fragment: Dict[str, Any], problems: List[str]) -> None:
    for path, item in fragment.items():
        target = paths.setdefault(path, {})
        for method, op in item.items():
            if method in target:
                problems.append(f"{method.upper()} {path} is declared twice")
                continue
            target[method] = op


def _merge_schemas(schemas: Dict[str, Any], fragment: Dict[str, Any], problems: List[str]) -> None:
    for name, body in fragment.items():
        if name in schemas and schemas[name] != body:
            problems.append(f"schema {name} is declared twice with different definitions")
            continue
        schemas[name] = body


def build_openapi_spec(generation: str = "v2") -> Dict[str, Any]:
    """Build and check the document for ``generation``.

    Raises ``ValueError`` for an unknown generation and ``SpecBuildError`` when
    the declarations do not form a consistent document.
    """
    gen = get_generation(generation)
    problems: List[str] = []

    schemas: Dict[str, Any] = shared.base_schemas()
    paths: Dict[str, Any] = {}
    for build_paths, build_schemas in gen.domains:
        # deterministic merge: domain order is document order
        _merge_paths(paths, build_paths(), problems)
        _merge_schemas(schemas, build_schemas(), problems)

    spec: Dict[str, Any] = {
        "openapi": OPENAPI_VERSION,
        "info": dict(INFO[gen.name]),
        "servers": [dict(s) for s in SERVERS],
        "tags": [dict(t) for t in gen.tags],
        "security": [{BEARER_SCHEME: []}],
        "paths": paths,
        "components": {
            "securitySchemes": shared.security_schemes(gen.name),
            "parameters": shared.parameters(),
            "responses": shared.responses(),
            "schemas": schemas,
        },
    }

    problems.extend(find_problems(spec, UNAUTHENTICATED_PREFIXES[gen.name]))
    if problems:
        for problem in problems:
            logger.error("OpenAPI %s: %s", gen.name, problem)
        raise SpecBuildError(problems)

    logger.debug(
        "Built OpenAPI %s document: %d paths, %d schemas",
        gen.name,
        len(paths),
        len(schemas),
    )
    return spec


@dataclass(frozen=True)
class SpecDocument:
    """Immutable, pre-serialized document shared by all requests."""

    generation: str
    title: str
    version: str
    body: bytes
    path_count: int
    operation_count: int

    @classmethod
    def from_spec(cls, generation: str, spec: Dict[str, Any]) -> "SpecDocument":
        body = json.dumps(spec, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        return cls(
            generation=generation,
            title=spec["info"]["title"],
            version=spec["info"]["version"],
            body=body,
            path_count=len(spec["paths"]),
            operation_count=sum(1 for _ in iter_operations(spec)),
        )

    def as_dict(self) -> Dict[str, Any]:
        """Return a private copy of the document."""
        return json.loads(self.body)


@lru_cache(maxsize=None)
def get_spec_document(generation: str = "v2") -> SpecDocument:
    return SpecDocument.from_spec(generation, build_openapi_spec(generation))
