"""Error taxonomy shared by the configuration loader and sidebar resolver.

Every failure raised while loading or resolving the documentation descriptors
is a :class:`ConfigurationError`. The ``kind`` attribute names the rule that
was broken, while ``field`` and ``value`` identify the offending input so the
invoking build tool can surface it verbatim.

Examples
--------
>>> err = ConfigurationError(
...     ErrorKind.DUPLICATE_ID, "Duplicate registration id 'docs'.",
...     field="id", value="docs",
... )
>>> err.kind
<ErrorKind.DUPLICATE_ID: 'DuplicateId'>
>>> str(err)
"Duplicate registration id 'docs'."
"""

from __future__ import annotations

import enum
import typing as typ


class ErrorKind(enum.StrEnum):
    """Rules enforced while loading and resolving the descriptors."""

    DUPLICATE_ID = "DuplicateId"
    ROUTE_COLLISION = "RouteCollision"
    MISSING_SIDEBAR_REF = "MissingSidebarRef"
    INVALID_PATH = "InvalidPath"
    PATH_NOT_FOUND = "PathNotFound"
    INVALID_VERSIONS = "InvalidVersions"
    UNRESOLVED_SIDEBAR_REF = "UnresolvedSidebarRef"
    DUPLICATE_SIBLING_NODE = "DuplicateSiblingNode"
    INVALID_NODE = "InvalidNode"


class ConfigurationError(ValueError):
    """Raised when a descriptor is invalid; always terminal for the build."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        field: str | None = None,
        value: typ.Any = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.field = field
        self.value = value

    def __repr__(self) -> str:
        return f"ConfigurationError({self.kind.value}, {self.args[0]!r})"


__all__ = ["ConfigurationError", "ErrorKind"]
