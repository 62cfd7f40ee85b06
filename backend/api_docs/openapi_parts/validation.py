"""Build-time consistency checks for the assembled document.

`find_problems` never raises; it returns human-readable problem strings so a
single failed build reports everything wrong with the declarations at once.
"""
import re
from typing import Any, Dict, Iterator, List, Optional, Sequence, Set, Tuple

from .constants import BEARER_SCHEME, PIN_HEADER, PIN_PATTERN
from .helpers import REF_PREFIX

HTTP_METHODS = ("get", "put", "post", "delete", "patch", "head", "options", "trace")

_PATH_PARAM_RE = re.compile(r"{([^}/]+)}")


def iter_operations(spec: Dict[str, Any]) -> Iterator[Tuple[str, str, Dict[str, Any]]]:
    for path, item in spec.get("paths", {}).items():
        for method in HTTP_METHODS:
            if method in item:
                yield path, method, item[method]


def iter_refs(node: Any, where: str = "#") -> Iterator[Tuple[str, str]]:
    """Yield ``(location, target)`` for every ``$ref`` below ``node``."""
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "$ref" and isinstance(value, str):
                yield where, value
            else:
                yield from iter_refs(value, f"{where}/{key}")
    elif isinstance(node, list):
        for idx, value in enumerate(node):
            yield from iter_refs(value, f"{where}/{idx}")


def resolve_ref(spec: Dict[str, Any], target: str) -> Optional[Any]:
    if not target.startswith(REF_PREFIX):
        return None
    node: Any = spec.get("components", {})
    for part in target[len(REF_PREFIX):].split("/"):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def _deref(spec: Dict[str, Any], node: Dict[str, Any]) -> Dict[str, Any]:
    if "$ref" in node:
        return resolve_ref(spec, node["$ref"]) or {}
    return node


def _check_refs(spec: Dict[str, Any], problems: List[str]) -> None:
    for where, target in iter_refs(spec):
        if resolve_ref(spec, target) is None:
            problems.append(f"dangling reference {target} at {where}")


def _check_tags(spec: Dict[str, Any], problems: List[str]) -> None:
    declared = {t["name"] for t in spec.get("tags", [])}
    for path, method, op in iter_operations(spec):
        tags = op.get("tags") or []
        if not tags:
            problems.append(f"{method.upper()} {path} has no tag")
        for tag in tags:
            if tag not in declared:
                problems.append(f"{method.upper()} {path} uses undeclared tag {tag!r}")


def _check_responses(spec: Dict[str, Any], problems: List[str]) -> None:
    for path, method, op in iter_operations(spec):
        responses = op.get("responses") or {}
        if not responses:
            problems.append(f"{method.upper()} {path} declares no responses")
        for code, resp in responses.items():
            label = f"{method.upper()} {path} response {code}"
            if "$ref" in resp:
                if not resp["$ref"].startswith(f"{REF_PREFIX}responses/"):
                    problems.append(f"{label} must reference components.responses")
                continue
            if not resp.get("description"):
                problems.append(f"{label} has no description")
            for media, body in (resp.get("content") or {}).items():
                if "schema" not in body:
                    problems.append(f"{label} ({media}) has no schema")


def _resolved_params(spec: Dict[str, Any], op: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [_deref(spec, p) for p in op.get("parameters", [])]


def _check_pin_header(spec: Dict[str, Any], problems: List[str]) -> None:
    candidates: List[Tuple[str, Dict[str, Any]]] = [
        (f"components.parameters.{name}", p) for name, p in spec.get("components", {}).get("parameters", {}).items()
    ]
    for path, method, op in iter_operations(spec):
        candidates.extend((f"{method.upper()} {path}", p) for p in _resolved_params(spec, op))
    for label, param in candidates:
        if str(param.get("name", "")).lower() != PIN_HEADER.lower():
            continue
        if (param.get("schema") or {}).get("pattern") != PIN_PATTERN:
            problems.append(f"{label}: {PIN_HEADER} must carry pattern {PIN_PATTERN}")


def _check_pagination(spec: Dict[str, Any], problems: List[str]) -> None:
    for path, method, op in iter_operations(spec):
        query = {p.get("name"): p for p in _resolved_params(spec, op) if p.get("in") == "query"}
        label = f"{method.upper()} {path}"
        if ("limit" in query) != ("offset" in query):
            problems.append(f"{label} must declare both limit and offset")
            continue
        if "limit" not in query:
            continue
        limit = query["limit"].get("schema") or {}
        offset = query["offset"].get("schema") or {}
        if not {"minimum", "maximum", "default"} <= set(limit):
            problems.append(f"{label}: limit must be bounded and have a default")
        if offset.get("minimum") != 0 or offset.get("default") != 0:
            problems.append(f"{label}: offset must have minimum 0 and default 0")


def _check_path_params(spec: Dict[str, Any], problems: List[str]) -> None:
    for path, method, op in iter_operations(spec):
        declared = {p.get("name") for p in _resolved_params(spec, op) if p.get("in") == "path"}
        for name in _PATH_PARAM_RE.findall(path):
            if name not in declared:
                problems.append(f"{method.upper()} {path} does not declare path parameter {name!r}")


def _check_security(spec: Dict[str, Any], unauthenticated: Sequence[str], problems: List[str]) -> None:
    schemes = spec.get("components", {}).get("securitySchemes", {})
    if BEARER_SCHEME not in schemes:
        problems.append(f"security scheme {BEARER_SCHEME} is not declared")
    for path, method, op in iter_operations(spec):
        label = f"{method.upper()} {path}"
        public = any(path.startswith(prefix) for prefix in unauthenticated)
        security = op.get("security")
        if public and security != []:
            problems.append(f"{label} is internal and must declare an empty security requirement")
        if not public and security != [{BEARER_SCHEME: []}]:
            problems.append(f"{label} must require {BEARER_SCHEME}")


def _check_schema_cycles(spec: Dict[str, Any], problems: List[str]) -> None:
    schemas = spec.get("components", {}).get("schemas", {})
    prefix = f"{REF_PREFIX}schemas/"
    edges: Dict[str, Set[str]] = {
        name: {t[len(prefix):] for _, t in iter_refs(body) if t.startswith(prefix)} for name, body in schemas.items()
    }
    done: Set[str] = set()
    active: List[str] = []

    def visit(name: str) -> None:
        if name in done or name not in edges:
            return
        if name in active:
            cycle = active[active.index(name):] + [name]
            problems.append("schema reference cycle: " + " -> ".join(cycle))
            return
        active.append(name)
        for child in sorted(edges[name]):
            visit(child)
        active.pop()
        done.add(name)

    for name in edges:
        visit(name)


def find_problems(spec: Dict[str, Any], unauthenticated: Sequence[str] = ()) -> List[str]:
    problems: List[str] = []
    _check_refs(spec, problems)
    _check_tags(spec, problems)
    _check_responses(spec, problems)
    _check_pin_header(spec, problems)
    _check_pagination(spec, problems)
    _check_path_params(spec, problems)
    _check_security(spec, unauthenticated, problems)
    _check_schema_cycles(spec, problems)
    return problems


__all__ = ["HTTP_METHODS", "iter_operations", "iter_refs", "resolve_ref", "find_problems"]
