"""Typed dataclasses describing the documentation site configuration."""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from docsite._constants import DEFAULT_PLUGIN

if typ.TYPE_CHECKING:
    from pathlib import Path


@dc.dataclass(frozen=True, slots=True)
class VersionMetadata:
    """Label and URL segment for one documentation version."""

    label: str
    path: str
    badge: bool = False


@dc.dataclass(frozen=True, slots=True)
class PluginRegistration:
    """Bind one content root to a URL namespace and a sidebar tree.

    Attributes
    ----------
    id : str
        Identifier unique among all registrations.
    content_path : Path
        Resolved content root; verified to exist when the loader checks paths.
    route_base_path : str
        Normalized URL segment the generated pages are served under.
    sidebar_ref : str
        Symbolic name of a tree in the sidebar descriptor.
    edit_url_template : str | None
        "Edit this page" template, kept verbatim.
    versions : Mapping[str, VersionMetadata] | None
        Read-only version metadata keyed by version name; ``None`` when
        unversioned.
    plugin : str
        Content plugin this registration is handed to.
    sidebar_path : Path | None
        Sidebar descriptor file holding ``sidebar_ref``, when declared.
    """

    id: str
    content_path: Path
    route_base_path: str
    sidebar_ref: str
    edit_url_template: str | None = None
    versions: typ.Mapping[str, VersionMetadata] | None = dc.field(
        default=None, hash=False
    )
    plugin: str = DEFAULT_PLUGIN
    sidebar_path: Path | None = None

    def __post_init__(self) -> None:
        if self.versions is not None and not isinstance(self.versions, types.MappingProxyType):
            object.__setattr__(self, "versions", types.MappingProxyType(dict(self.versions)))

    @property
    def versioned(self) -> bool:
        """Return True when the registration declares version metadata."""
        return self.versions is not None


@dc.dataclass(frozen=True, slots=True)
class SiteConfiguration:
    """Validated registrations alongside the static asset directories."""

    registrations: tuple[PluginRegistration, ...]
    static_directories: tuple[Path, ...] = ()

    def get_registration(self, registration_id: str) -> PluginRegistration:
        """Return the registration with ``registration_id``."""
        for registration in self.registrations:
            if registration.id == registration_id:
                return registration
        available = ", ".join(reg.id for reg in self.registrations)
        msg = f"Unknown registration '{registration_id}'. Known: {available}"
        raise KeyError(msg)

    def sidebar_refs(self) -> list[str]:
        """Return the distinct sidebar refs in registration order."""
        return list(dict.fromkeys(reg.sidebar_ref for reg in self.registrations))


__all__ = ["PluginRegistration", "SiteConfiguration", "VersionMetadata"]
