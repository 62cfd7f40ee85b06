"""Runtime configuration for the docs service.

Values come from the environment (a `.env` file is loaded first by
`create_app`) and may be overridden by the mapping passed to `create_app`.
"""
from typing import Any, Dict
import os
import re

DEFAULT_GENERATION = 'v2'
DEFAULT_MOUNT_PATH = '/api-docs'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def load_settings() -> Dict[str, Any]:
    return {
        'SPEC_GENERATION': os.getenv('SPEC_GENERATION', DEFAULT_GENERATION),
        'DOCS_MOUNT_PATH': os.getenv('DOCS_MOUNT_PATH', DEFAULT_MOUNT_PATH),
        'TRUST_PROXY_HEADERS': _env_flag('TRUST_PROXY_HEADERS'),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO'),
    }


def normalize_mount_path(raw: str) -> str:
    """Return the mount path as `/segment[/segment...]` without a trailing slash."""
    path = re.sub(r'/{2,}', '/', '/' + (raw or '').strip()).rstrip('/')
    if not path:
        raise ValueError('DOCS_MOUNT_PATH must name a sub-path such as /api-docs')
    if any(ch in path for ch in '<>?#{} '):
        raise ValueError(f'DOCS_MOUNT_PATH contains invalid characters: {raw!r}')
    return path


__all__ = ['load_settings', 'normalize_mount_path', 'DEFAULT_GENERATION', 'DEFAULT_MOUNT_PATH']
