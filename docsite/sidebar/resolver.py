"""Resolve raw sidebar definitions against a validated site configuration."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from docsite._constants import CATEGORY_KIND, DOC_KIND
from docsite.config.helpers import _lookup
from docsite.errors import ConfigurationError, ErrorKind

from .models import (
    CategoryNode,
    DocumentNode,
    SidebarNode,
    SidebarTree,
    SidebarTreeSet,
)

if typ.TYPE_CHECKING:
    from docsite.config import SiteConfiguration


def resolve(
    raw_trees: typ.Mapping[str, typ.Any], configuration: SiteConfiguration
) -> SidebarTreeSet:
    """Build the sidebar tree set and check it against ``configuration``.

    Parameters
    ----------
    raw_trees : Mapping[str, Any]
        Sidebar names mapped to their raw item lists, as read from a sidebar
        descriptor.
    configuration : SiteConfiguration
        The already validated site configuration whose sidebar refs must
        resolve.

    Returns
    -------
    SidebarTreeSet
        Every declared tree, in declaration order, with node order preserved.

    Raises
    ------
    TypeError
        If ``raw_trees`` is not a mapping.
    ConfigurationError
        ``UnresolvedSidebarRef`` when a registration names a tree that is not
        declared, ``InvalidNode`` for malformed items and
        ``DuplicateSiblingNode`` when one parent lists the same document twice.

    Examples
    --------
    >>> from docsite.config import load
    >>> config = load(
    ...     {"plugins": [{"id": "docs", "contentPath": ".", "sidebarRef": "main"}]}
    ... )
    >>> trees = resolve({"main": ["welcome"]}, config)
    >>> trees["main"].doc_ids()
    ['welcome']
    """
    if not isinstance(raw_trees, cabc.Mapping):
        msg = "Sidebar descriptor must be a mapping of sidebar names to items."
        raise TypeError(msg)

    for registration in configuration.registrations:
        if registration.sidebar_ref not in raw_trees:
            msg = (
                f"Registration '{registration.id}' references sidebar "
                f"'{registration.sidebar_ref}', which is not defined."
            )
            raise ConfigurationError(
                ErrorKind.UNRESOLVED_SIDEBAR_REF,
                msg,
                field=f"{registration.id}.sidebarRef",
                value=registration.sidebar_ref,
            )

    trees: dict[str, SidebarTree] = {}
    for name, raw_items in raw_trees.items():
        tree = SidebarTree(name=str(name), items=_build_items(raw_items, trail=(str(name),)))
        _check_siblings(tree)
        trees[tree.name] = tree
    return SidebarTreeSet(trees=trees)


def _build_items(raw: typ.Any, *, trail: tuple[str, ...]) -> tuple[SidebarNode, ...]:
    if not isinstance(raw, list):
        msg = f"Items of '{_where(trail)}' must be a list, got {type(raw).__name__}."
        raise _invalid_node(msg, trail=trail, value=raw)
    return tuple(
        _build_node(item, trail=(*trail, f"#{index}")) for index, item in enumerate(raw)
    )


def _build_node(raw: typ.Any, *, trail: tuple[str, ...]) -> SidebarNode:
    """Build a node from a raw mapping or a bare document id string."""
    if isinstance(raw, str):
        return DocumentNode(doc_id=_doc_id(raw, trail=trail))
    if not isinstance(raw, cabc.Mapping):
        msg = f"Sidebar item '{_where(trail)}' must be a mapping or a document id."
        raise _invalid_node(msg, trail=trail, value=raw)

    label = raw.get("label")
    if label is not None and not isinstance(label, str):
        msg = f"Sidebar item '{_where(trail)}' has a non-string label."
        raise _invalid_node(msg, trail=trail, value=label)

    kind = _lookup(raw, "kind", DOC_KIND)
    match kind:
        case str() if kind == DOC_KIND:
            return DocumentNode(doc_id=_doc_id(_lookup(raw, "docId"), trail=trail), label=label)
        case str() if kind == CATEGORY_KIND:
            if not label:
                msg = f"Category '{_where(trail)}' needs a label."
                raise _invalid_node(msg, trail=trail, value=raw)
            collapsed = raw.get("collapsed")
            if collapsed is not None and not isinstance(collapsed, bool):
                msg = f"Category '{label}' has a non-boolean 'collapsed' flag."
                raise _invalid_node(msg, trail=trail, value=collapsed)
            if "items" not in raw:
                msg = f"Category '{label}' does not list any items."
                raise _invalid_node(msg, trail=trail, value=raw)
            return CategoryNode(
                label=label,
                items=_build_items(raw["items"], trail=(*trail[:-1], label)),
                collapsed=collapsed,
            )
        case _:
            msg = f"Sidebar item '{_where(trail)}' has unknown kind {kind!r}."
            raise _invalid_node(msg, trail=trail, value=kind)


def _doc_id(value: typ.Any, *, trail: tuple[str, ...]) -> str:
    # Kept byte-for-byte; ids are resolved by the site builder.
    if not isinstance(value, str) or not value:
        msg = f"Document item '{_where(trail)}' needs a non-empty document id."
        raise _invalid_node(msg, trail=trail, value=value)
    return value


def _check_siblings(tree: SidebarTree) -> None:
    """Reject any parent, the tree root included, listing one document twice."""
    _check_unique_docs(tree.items, trail=(tree.name,))
    for entry in tree.walk():
        if isinstance(entry.node, CategoryNode):
            _check_unique_docs(
                entry.node.items, trail=(tree.name, *entry.trail, entry.node.label)
            )


def _check_unique_docs(items: tuple[SidebarNode, ...], *, trail: tuple[str, ...]) -> None:
    seen: set[str] = set()
    for node in items:
        if not isinstance(node, DocumentNode):
            continue
        if node.doc_id in seen:
            msg = f"Document '{node.doc_id}' appears twice under '{_where(trail)}'."
            raise ConfigurationError(
                ErrorKind.DUPLICATE_SIBLING_NODE, msg, field=_where(trail), value=node.doc_id
            )
        seen.add(node.doc_id)


def _where(trail: tuple[str, ...]) -> str:
    return " > ".join(trail)


def _invalid_node(msg: str, *, trail: tuple[str, ...], value: typ.Any) -> ConfigurationError:
    return ConfigurationError(ErrorKind.INVALID_NODE, msg, field=_where(trail), value=value)


__all__ = ["resolve"]
