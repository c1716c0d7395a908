"""Build, check and traverse the documentation sidebar trees.

Raw sidebar definitions map a sidebar name to an ordered list of items. An
item is either a document (``{kind: doc, docId: ...}`` or a bare id string) or
a category (``{kind: category, label: ..., items: [...]}``) nesting further
items. :func:`resolve` turns them into a :class:`SidebarTreeSet` after checking
that every registration's sidebar ref exists and that no parent lists the same
document twice. :func:`walk` visits nodes in pre-order, which is the rendered
navigation order.

Examples
--------
>>> from docsite.config import load
>>> from docsite.sidebar import resolve
>>> config = load(
...     {"plugins": [{"id": "docs", "contentPath": ".", "sidebarRef": "main"}]}
... )
>>> trees = resolve(
...     {"main": ["welcome", {"kind": "category", "label": "How To",
...                           "items": ["how_to/query_outputs"]}]},
...     config,
... )
>>> trees["main"].doc_ids()
['welcome', 'how_to/query_outputs']
"""

from .export import dump_json, to_builtins
from .models import (
    CategoryNode,
    DocumentNode,
    SidebarNode,
    SidebarTree,
    SidebarTreeSet,
    WalkEntry,
    walk,
)
from .resolver import resolve
from .sources import load_sidebar_sources, load_sidebars

__all__ = [
    "CategoryNode",
    "DocumentNode",
    "SidebarNode",
    "SidebarTree",
    "SidebarTreeSet",
    "WalkEntry",
    "dump_json",
    "load_sidebar_sources",
    "load_sidebars",
    "resolve",
    "to_builtins",
    "walk",
]
