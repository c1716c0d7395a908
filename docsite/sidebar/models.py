"""Typed dataclasses describing sidebar trees and their pre-order traversal."""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from docsite._constants import CATEGORY_KIND, DOC_KIND

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docsite.config import PluginRegistration


@dc.dataclass(frozen=True, slots=True)
class DocumentNode:
    """Sidebar leaf pointing at one document by its opaque id."""

    doc_id: str
    label: str | None = None
    kind: typ.ClassVar[str] = DOC_KIND


@dc.dataclass(frozen=True, slots=True)
class CategoryNode:
    """Sidebar branch grouping an ordered list of child nodes under a label."""

    label: str
    items: tuple[SidebarNode, ...] = ()
    collapsed: bool | None = None
    kind: typ.ClassVar[str] = CATEGORY_KIND


SidebarNode = DocumentNode | CategoryNode


@dc.dataclass(frozen=True, slots=True)
class WalkEntry:
    """One node visited by :func:`walk`.

    Attributes
    ----------
    depth : int
        Nesting level, ``0`` for the tree's top-level items.
    node : SidebarNode
        The visited node.
    trail : tuple[str, ...]
        Labels of the categories enclosing ``node``, outermost first.
    """

    depth: int
    node: SidebarNode
    trail: tuple[str, ...] = ()


def walk(items: cabc.Iterable[SidebarNode]) -> cabc.Iterator[WalkEntry]:
    """Yield nodes in pre-order: each parent before its children, children in order.

    The traversal keeps an explicit stack so arbitrarily deep trees do not hit
    the interpreter's recursion limit.

    Examples
    --------
    >>> tree = [DocumentNode("a"), CategoryNode("B", (DocumentNode("b1"),))]
    >>> [entry.depth for entry in walk(tree)]
    [0, 0, 1]
    """
    stack: list[tuple[int, tuple[str, ...], cabc.Iterator[SidebarNode]]] = [
        (0, (), iter(items))
    ]
    while stack:
        depth, trail, children = stack[-1]
        node = next(children, None)
        if node is None:
            stack.pop()
            continue
        yield WalkEntry(depth=depth, node=node, trail=trail)
        match node:
            case CategoryNode(label=label, items=child_items):
                stack.append((depth + 1, (*trail, label), iter(child_items)))


@dc.dataclass(frozen=True, slots=True)
class SidebarTree:
    """A named, ordered navigation hierarchy."""

    name: str
    items: tuple[SidebarNode, ...]

    def walk(self) -> cabc.Iterator[WalkEntry]:
        """Iterate the tree in pre-order."""
        return walk(self.items)

    def doc_ids(self) -> list[str]:
        """Return document ids in rendered navigation order."""
        return [
            entry.node.doc_id
            for entry in self.walk()
            if isinstance(entry.node, DocumentNode)
        ]


@dc.dataclass(frozen=True, slots=True)
class SidebarTreeSet:
    """Resolved sidebar trees keyed by name, in declaration order.

    The mapping is stored read-only so a resolved set cannot be altered after
    the resolver hands it out.
    """

    trees: typ.Mapping[str, SidebarTree]

    def __post_init__(self) -> None:
        if not isinstance(self.trees, types.MappingProxyType):
            object.__setattr__(self, "trees", types.MappingProxyType(dict(self.trees)))

    def __hash__(self) -> int:
        return hash(tuple(self.trees.items()))

    def __getitem__(self, name: str) -> SidebarTree:
        return self.trees[name]

    def __contains__(self, name: object) -> bool:
        return name in self.trees

    def __iter__(self) -> cabc.Iterator[SidebarTree]:
        return iter(self.trees.values())

    def __len__(self) -> int:
        return len(self.trees)

    def names(self) -> list[str]:
        return list(self.trees)

    def for_registration(self, registration: PluginRegistration) -> SidebarTree:
        """Return the tree named by ``registration.sidebar_ref``."""
        return self.trees[registration.sidebar_ref]


__all__ = [
    "CategoryNode",
    "DocumentNode",
    "SidebarNode",
    "SidebarTree",
    "SidebarTreeSet",
    "WalkEntry",
    "walk",
]
