"""Serialize resolved sidebar trees back to their raw descriptor shape."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json

from docsite._constants import CATEGORY_KIND, DOC_KIND

from .models import CategoryNode, DocumentNode

if typ.TYPE_CHECKING:
    from .models import SidebarNode, SidebarTreeSet


def to_builtins(tree_set: SidebarTreeSet) -> dict[str, list[dict[str, typ.Any]]]:
    """Return ``tree_set`` as plain mappings that :func:`resolve` accepts again.

    Examples
    --------
    >>> from docsite.sidebar.models import SidebarTree, SidebarTreeSet
    >>> trees = SidebarTreeSet({"main": SidebarTree("main", (DocumentNode("a"),))})
    >>> to_builtins(trees)
    {'main': [{'kind': 'doc', 'docId': 'a'}]}
    """
    return {tree.name: [_node_to_builtins(node) for node in tree.items] for tree in tree_set}


def _node_to_builtins(node: SidebarNode) -> dict[str, typ.Any]:
    match node:
        case DocumentNode(doc_id=doc_id, label=label):
            payload: dict[str, typ.Any] = {"kind": DOC_KIND, "docId": doc_id}
            if label is not None:
                payload["label"] = label
            return payload
        case CategoryNode(label=label, items=items, collapsed=collapsed):
            payload = {"kind": CATEGORY_KIND, "label": label}
            if collapsed is not None:
                payload["collapsed"] = collapsed
            payload["items"] = [_node_to_builtins(child) for child in items]
            return payload
        case _:  # pragma: no cover - closed variant
            msg = f"Unsupported sidebar node {node!r}"
            raise TypeError(msg)


def dump_json(tree_set: SidebarTreeSet, *, indent: int = 2) -> bytes:
    """Encode ``tree_set`` as JSON, preserving tree and node order."""
    encoded = msgspec_json.encode(to_builtins(tree_set))
    if indent:
        return msgspec_json.format(encoded, indent=indent)
    return encoded


__all__ = ["dump_json", "to_builtins"]
