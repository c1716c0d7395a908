"""Load both documentation descriptors in the order the site build needs them."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .config import SiteConfiguration, load_site_config
from .sidebar import SidebarTreeSet, load_sidebar_sources, load_sidebars, resolve

if typ.TYPE_CHECKING:
    from pathlib import Path


@dc.dataclass(frozen=True, slots=True)
class Descriptors:
    """The validated configuration paired with its resolved sidebar trees."""

    configuration: SiteConfiguration
    sidebars: SidebarTreeSet


def load_descriptors(
    config_path: Path,
    sidebars_path: Path | None = None,
    *,
    check_paths: bool = True,
) -> Descriptors:
    """Load the site configuration, then resolve its sidebars.

    The configuration is validated completely before any sidebar file is read,
    so configuration errors always surface first. When ``sidebars_path`` is
    ``None`` the sidebar files named by the registrations' ``sidebarPath``
    fields are used instead.
    """
    configuration = load_site_config(config_path, check_paths=check_paths)
    if sidebars_path is not None:
        raw_trees = load_sidebars(sidebars_path)
    else:
        raw_trees = load_sidebar_sources(configuration)
    return Descriptors(configuration=configuration, sidebars=resolve(raw_trees, configuration))


__all__ = ["Descriptors", "load_descriptors"]
