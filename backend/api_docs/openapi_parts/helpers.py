"""Helper functions for the OpenAPI builder.

Small constructors for the fragments that repeat across every domain module.
They return fresh dicts on every call so no two operations share a mutable
fragment.
"""
from typing import Any, Dict, Iterable, List, Optional

from .constants import BEARER_SCHEME

REF_PREFIX = "#/components/"


def ref(kind: str, name: str) -> Dict[str, str]:
    return {"$ref": f"{REF_PREFIX}{kind}/{name}"}


def schema_ref(name: str) -> Dict[str, str]:
    return ref("schemas", name)


def param_ref(name: str) -> Dict[str, str]:
    return ref("parameters", name)


def response_ref(name: str) -> Dict[str, str]:
    return ref("responses", name)


def json_content(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"application/json": {"schema": schema}}


def json_response(description: str, schema_name: str) -> Dict[str, Any]:
    return {"description": description, "content": json_content(schema_ref(schema_name))}


def request_body(schema_name: str, required: bool = True) -> Dict[str, Any]:
    return {"required": required, "content": json_content(schema_ref(schema_name))}


def path_param(name: str, description: Optional[str] = None, fmt: Optional[str] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "string"}
    if fmt:
        schema["format"] = fmt
    param: Dict[str, Any] = {"name": name, "in": "path", "required": True, "schema": schema}
    if description:
        param["description"] = description
    return param


def error_responses(*codes: str) -> Dict[str, Dict[str, str]]:
    """Map status codes to the shared error responses, e.g. ``error_responses("400", "401")``."""
    names = {
        "400": "BadRequest",
        "401": "Unauthorized",
        "403": "Forbidden",
        "404": "NotFound",
        "500": "InternalError",
    }
    return {code: response_ref(names[code]) for code in codes}


def operation(
    tag: str,
    summary: str,
    description: str,
    responses: Dict[str, Any],
    parameters: Optional[Iterable[Dict[str, Any]]] = None,
    body: Optional[Dict[str, Any]] = None,
    auth: bool = True,
) -> Dict[str, Any]:
    op: Dict[str, Any] = {
        "tags": [tag],
        "summary": summary,
        "description": description,
        "security": [{BEARER_SCHEME: []}] if auth else [],
    }
    params: List[Dict[str, Any]] = list(parameters or [])
    if params:
        op["parameters"] = params
    if body is not None:
        op["requestBody"] = body
    op["responses"] = responses
    return op


def object_schema(properties: Dict[str, Any], required: Optional[List[str]] = None, **extra: Any) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "object"}
    if required:
        schema["required"] = list(required)
    schema["properties"] = properties
    schema.update(extra)
    return schema


def envelope(data: Dict[str, Any], **extra: Any) -> Dict[str, Any]:
    """`{success, data}` wrapper used by every service response."""
    props: Dict[str, Any] = {"success": {"type": "boolean", "example": True}, "data": data}
    props.update(extra)
    return object_schema(props)


def list_of(schema_name: str) -> Dict[str, Any]:
    return {"type": "array", "items": schema_ref(schema_name)}


__all__ = [
    "REF_PREFIX",
    "ref",
    "schema_ref",
    "param_ref",
    "response_ref",
    "json_content",
    "json_response",
    "request_body",
    "path_param",
    "error_responses",
    "operation",
    "object_schema",
    "envelope",
    "list_of",
]
