"""Read raw sidebar descriptors from YAML files."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from docsite.config.helpers import _read_yaml
from docsite.errors import ConfigurationError, ErrorKind

if typ.TYPE_CHECKING:
    from pathlib import Path

    from docsite.config import SiteConfiguration


def load_sidebars(path: Path) -> dict[str, typ.Any]:
    """Return the raw sidebar mapping stored in the YAML file at ``path``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    """
    if not path.exists():
        msg = f"Sidebar file '{path}' not found."
        raise FileNotFoundError(msg)

    loaded = _read_yaml(path)
    if not isinstance(loaded, cabc.Mapping):
        msg = f"Sidebar file '{path}' must contain a mapping of sidebar names."
        raise TypeError(msg)
    return dict(loaded)


def load_sidebar_sources(configuration: SiteConfiguration) -> dict[str, typ.Any]:
    """Merge the sidebar files declared through ``sidebarPath`` registrations.

    Each distinct file is read once, in registration order. A sidebar name
    defined by two different files is rejected as a duplicate.
    """
    merged: dict[str, typ.Any] = {}
    origins: dict[str, Path] = {}
    for registration in configuration.registrations:
        path = registration.sidebar_path
        if path is None or path in origins.values():
            continue
        if not path.exists():
            msg = f"Registration '{registration.id}' points at missing sidebar file '{path}'."
            raise ConfigurationError(
                ErrorKind.PATH_NOT_FOUND, msg, field="sidebarPath", value=str(path)
            )
        for name, items in load_sidebars(path).items():
            if name in origins:
                msg = f"Sidebar '{name}' is defined in both '{origins[name]}' and '{path}'."
                raise ConfigurationError(
                    ErrorKind.DUPLICATE_ID, msg, field="sidebars", value=name
                )
            origins[name] = path
            merged[name] = items
    return merged


__all__ = ["load_sidebar_sources", "load_sidebars"]
