"""Load and validate the documentation site configuration descriptor.

This subpackage turns the raw site descriptor (a ``site.yaml`` file or an
already parsed mapping) into frozen dataclasses (:class:`SiteConfiguration`,
:class:`PluginRegistration`, :class:`VersionMetadata`). Registration ids must be
unique, route base paths must not collide, every registration must name a
sidebar and every content root must exist. The entry points are :func:`load`
for mappings and :func:`load_site_config` for YAML files.

Examples
--------
>>> from docsite.config import load
>>> config = load(
...     {"plugins": [{"id": "docs", "contentPath": ".", "sidebarRef": "main"}]}
... )
>>> config.registrations[0].route_base_path
'docs'
"""

from .loader import load, load_site_config
from .models import PluginRegistration, SiteConfiguration, VersionMetadata

__all__ = [
    "PluginRegistration",
    "SiteConfiguration",
    "VersionMetadata",
    "load",
    "load_site_config",
]
