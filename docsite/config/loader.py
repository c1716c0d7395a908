"""Load the site configuration descriptor into validated dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from docsite._constants import DEFAULT_PLUGIN
from docsite.errors import ConfigurationError, ErrorKind

from .helpers import (
    _lookup,
    _normalize_route,
    _optional_str,
    _parse_badge,
    _read_yaml,
    _require_existing,
    _resolve_path,
)
from .models import PluginRegistration, SiteConfiguration, VersionMetadata

DEFAULT_REGISTRATION_ID = "default"
DEFAULT_ROUTE_BASE_PATH = "docs"


def load_site_config(path: Path, *, check_paths: bool = True) -> SiteConfiguration:
    """Load the YAML site descriptor stored at ``path``.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML descriptor (for example,
        ``documentation/site.yaml``). Relative paths inside the file resolve
        against its parent directory.
    check_paths : bool, optional
        Verify that every content root exists. Defaults to ``True``.

    Returns
    -------
    SiteConfiguration
        The validated configuration.

    Raises
    ------
    FileNotFoundError
        If the descriptor file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigurationError
        If the descriptor breaks one of the loader's rules.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docsite.config import load_site_config
    >>> config = load_site_config(Path("documentation/site.yaml"))  # doctest: +SKIP
    >>> [reg.id for reg in config.registrations]  # doctest: +SKIP
    ['inx-indexer']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loaded = _read_yaml(path)
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return load(loaded, base_dir=path.resolve().parent, check_paths=check_paths)


def load(
    source: typ.Mapping[str, typ.Any],
    *,
    base_dir: Path | None = None,
    check_paths: bool = True,
) -> SiteConfiguration:
    """Validate a raw site descriptor and return a :class:`SiteConfiguration`.

    Registration ids are checked for duplicates before any other field is
    inspected, so a duplicate id is reported whatever else is wrong with the
    entries.

    Raises
    ------
    TypeError
        If ``source`` is not a mapping or ``plugins`` is not a list.
    ConfigurationError
        If the descriptor breaks one of the loader's rules.
    """
    if not isinstance(source, cabc.Mapping):
        msg = "Site descriptor must be a mapping."
        raise TypeError(msg)

    root = base_dir or Path.cwd()
    entries = [_unwrap_entry(entry, index) for index, entry in enumerate(_plugins(source))]

    ids = [_registration_id(payload) for _, payload in entries]
    _check_unique_ids(ids)

    registrations = tuple(
        _build_registration(
            registration_id=registration_id,
            plugin=plugin,
            payload=payload,
            base_dir=root,
            check_paths=check_paths,
        )
        for registration_id, (plugin, payload) in zip(ids, entries, strict=True)
    )
    _check_routes(registrations)

    return SiteConfiguration(
        registrations=registrations,
        static_directories=_static_directories(source, base_dir=root),
    )


def _plugins(source: typ.Mapping[str, typ.Any]) -> list[typ.Any]:
    plugins = source.get("plugins") or []
    if not isinstance(plugins, list):
        msg = "Field 'plugins' must be a list of registrations."
        raise TypeError(msg)
    return plugins


def _unwrap_entry(entry: typ.Any, index: int) -> tuple[str, typ.Mapping[str, typ.Any]]:
    """Return ``(plugin, options)`` for a mapping or ``[plugin, options]`` entry."""
    match entry:
        case cabc.Mapping():
            return str(entry.get("plugin") or DEFAULT_PLUGIN), entry
        case [str() as plugin, cabc.Mapping() as options]:
            return plugin, options
        case _:
            msg = f"Plugin entry #{index} must be a mapping or a [plugin, options] pair."
            raise TypeError(msg)


def _registration_id(payload: typ.Mapping[str, typ.Any]) -> str:
    return _optional_str(payload.get("id")) or DEFAULT_REGISTRATION_ID


def _check_unique_ids(ids: list[str]) -> None:
    seen: set[str] = set()
    for registration_id in ids:
        if registration_id in seen:
            msg = f"Duplicate registration id '{registration_id}'."
            raise ConfigurationError(
                ErrorKind.DUPLICATE_ID, msg, field="id", value=registration_id
            )
        seen.add(registration_id)


def _build_registration(
    *,
    registration_id: str,
    plugin: str,
    payload: typ.Mapping[str, typ.Any],
    base_dir: Path,
    check_paths: bool,
) -> PluginRegistration:
    """Build one registration, raising on the first invalid field."""
    sidebar_ref = _optional_str(_lookup(payload, "sidebarRef"))
    if sidebar_ref is None:
        msg = f"Registration '{registration_id}' does not name a sidebar."
        raise ConfigurationError(
            ErrorKind.MISSING_SIDEBAR_REF, msg, field="sidebarRef", value=registration_id
        )

    raw_content = _lookup(payload, "contentPath")
    content_path = _resolve_path(raw_content, base_dir=base_dir, field="contentPath")
    if check_paths:
        _require_existing(content_path, field="contentPath")

    route = _normalize_route(
        payload.get("routeBasePath", DEFAULT_ROUTE_BASE_PATH), field="routeBasePath"
    )

    raw_sidebar_path = payload.get("sidebarPath")
    sidebar_path = (
        _resolve_path(raw_sidebar_path, base_dir=base_dir, field="sidebarPath")
        if raw_sidebar_path is not None
        else None
    )

    edit_url = _lookup(payload, "editUrlTemplate")
    if edit_url is not None and not isinstance(edit_url, str):
        msg = f"Registration '{registration_id}' has a non-string edit URL."
        raise ConfigurationError(
            ErrorKind.INVALID_PATH, msg, field="editUrlTemplate", value=edit_url
        )

    return PluginRegistration(
        id=registration_id,
        content_path=content_path,
        route_base_path=route,
        sidebar_ref=sidebar_ref,
        edit_url_template=edit_url,
        versions=_build_versions(registration_id, payload),
        plugin=plugin,
        sidebar_path=sidebar_path,
    )


def _build_versions(
    registration_id: str, payload: typ.Mapping[str, typ.Any]
) -> dict[str, VersionMetadata] | None:
    if "versions" not in payload or payload["versions"] is None:
        return None
    raw = payload["versions"]
    if not isinstance(raw, cabc.Mapping) or not raw:
        msg = f"Registration '{registration_id}' declares versions but none are listed."
        raise ConfigurationError(ErrorKind.INVALID_VERSIONS, msg, field="versions", value=raw)

    versions: dict[str, VersionMetadata] = {}
    seen_paths: dict[str, str] = {}
    for key, meta in raw.items():
        field = f"versions.{key}"
        if meta is None:
            meta = {}
        if not isinstance(meta, cabc.Mapping):
            msg = f"Version '{key}' of '{registration_id}' must be a mapping."
            raise ConfigurationError(ErrorKind.INVALID_VERSIONS, msg, field=field, value=meta)
        label = meta.get("label", key)
        if not isinstance(label, str):
            msg = f"Version '{key}' of '{registration_id}' has a non-string label."
            raise ConfigurationError(
                ErrorKind.INVALID_VERSIONS, msg, field=f"{field}.label", value=label
            )
        path = _normalize_route(meta.get("path", key), field=f"{field}.path")
        if path in seen_paths:
            msg = (
                f"Versions '{seen_paths[path]}' and '{key}' of '{registration_id}' "
                f"share the path '{path}'."
            )
            raise ConfigurationError(
                ErrorKind.ROUTE_COLLISION, msg, field=f"{field}.path", value=path
            )
        seen_paths[path] = str(key)
        versions[str(key)] = VersionMetadata(
            label=label,
            path=path,
            badge=_parse_badge(meta.get("badge"), field=f"{field}.badge"),
        )
    return versions


def _check_routes(registrations: tuple[PluginRegistration, ...]) -> None:
    owners: dict[str, str] = {}
    for registration in registrations:
        route = registration.route_base_path
        if route in owners:
            msg = (
                f"Registrations '{owners[route]}' and '{registration.id}' both "
                f"serve pages under '/{route}'."
            )
            raise ConfigurationError(
                ErrorKind.ROUTE_COLLISION, msg, field="routeBasePath", value=route
            )
        owners[route] = registration.id


def _static_directories(
    source: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> tuple[Path, ...]:
    raw = source.get("staticDirectories") or []
    if not isinstance(raw, list):
        msg = "Field 'staticDirectories' must be a list of paths."
        raise ConfigurationError(
            ErrorKind.INVALID_PATH, msg, field="staticDirectories", value=raw
        )
    return tuple(
        _resolve_path(entry, base_dir=base_dir, field="staticDirectories") for entry in raw
    )


__all__ = ["load", "load_site_config"]
