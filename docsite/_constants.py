"""Common literal values used across docsite.

These constants keep default filenames, raw descriptor keys and node kinds
centralized so the loaders, the CLI and tests import the same values.

Examples
--------
>>> from docsite import _constants
>>> _constants.DOC_KIND
'doc'
>>> _constants.DEFAULT_PLUGIN
'@docusaurus/plugin-content-docs'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("documentation/site.yaml")
DEFAULT_PLUGIN = "@docusaurus/plugin-content-docs"

DOC_KIND = "doc"
CATEGORY_KIND = "category"

# Docusaurus spellings accepted next to the canonical raw keys.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "contentPath": ("path",),
    "sidebarRef": ("sidebar",),
    "editUrlTemplate": ("editUrl",),
    "kind": ("type",),
    "docId": ("id",),
}
