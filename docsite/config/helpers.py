"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from docsite._constants import FIELD_ALIASES
from docsite.errors import ConfigurationError, ErrorKind

_MISSING = object()
_SLASH_RUN = re.compile(r"/{2,}")


def _read_yaml(path: Path) -> typ.Any:
    """Return the YAML 1.2 document at ``path``; an empty file reads as ``{}``."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        return loader.load(handle) or {}


def _lookup(payload: typ.Mapping[str, typ.Any], key: str, default: typ.Any = None) -> typ.Any:
    """Return ``payload[key]`` falling back to its Docusaurus aliases."""
    value = payload.get(key, _MISSING)
    if value is not _MISSING:
        return value
    for alias in FIELD_ALIASES.get(key, ()):
        value = payload.get(alias, _MISSING)
        if value is not _MISSING:
            return value
    return default


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_route(value: object, *, field: str) -> str:
    """Return ``value`` as a route segment without surrounding or doubled slashes."""
    if not isinstance(value, str):
        msg = f"Field '{field}' must be a string route, got {value!r}."
        raise ConfigurationError(ErrorKind.INVALID_PATH, msg, field=field, value=value)
    return _SLASH_RUN.sub("/", value.strip()).strip("/")


def _resolve_path(value: object, *, base_dir: Path, field: str) -> Path:
    """Resolve a raw filesystem path relative to ``base_dir``."""
    if isinstance(value, Path):
        raw = value
    elif isinstance(value, str) and value.strip():
        raw = Path(value.strip())
    else:
        msg = f"Field '{field}' must be a non-empty path, got {value!r}."
        raise ConfigurationError(ErrorKind.INVALID_PATH, msg, field=field, value=value)
    raw = raw.expanduser()
    if not raw.is_absolute():
        raw = base_dir / raw
    return raw.resolve()


def _require_existing(path: Path, *, field: str) -> Path:
    """Return ``path`` if it exists, raising ``PathNotFound`` otherwise."""
    if not path.exists():
        msg = f"Field '{field}' points at '{path}', which does not exist."
        raise ConfigurationError(ErrorKind.PATH_NOT_FOUND, msg, field=field, value=str(path))
    return path


def _parse_badge(value: object, *, field: str) -> bool:
    """Return a version badge flag, accepting only real booleans or None."""
    match value:
        case None:
            return False
        case bool():
            return value
        case _:
            msg = f"Field '{field}' must be a boolean, got {value!r}."
            raise ConfigurationError(ErrorKind.INVALID_VERSIONS, msg, field=field, value=value)


__all__ = [
    "_lookup",
    "_normalize_route",
    "_optional_str",
    "_parse_badge",
    "_require_existing",
    "_resolve_path",
]
