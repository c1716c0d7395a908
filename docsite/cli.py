"""Cyclopts CLI entrypoint for checking documentation site descriptors.

The ``docsite`` console script loads the site configuration and sidebar
descriptors the same way the site build does, so configuration mistakes are
reported before any page generation starts. ``docsite check`` validates both
files, ``docsite outline`` prints the rendered navigation order of each
sidebar, and ``docsite export`` writes the resolved sidebars as JSON for the
site generator.

Examples
--------
Validate the default descriptors:

>>> from docsite.cli import main
>>> main()  # doctest: +SKIP

Print the outline of a single sidebar:

>>> from docsite.cli import app
>>> app(["outline", "--sidebar", "mySidebar"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_CONFIG
from .descriptors import Descriptors, load_descriptors
from .errors import ConfigurationError
from .sidebar import CategoryNode, DocumentNode, SidebarTree, dump_json

app = App(name="docsite", config=cyclopts.config.Env("DOCSITE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load(config: Path, sidebars: Path | None) -> Descriptors:
    """Load both descriptors, exiting with status 1 when either cannot be used."""
    try:
        return load_descriptors(config, sidebars)
    except ConfigurationError as exc:
        print(f"error [{exc.kind.value}]: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except (FileNotFoundError, TypeError, YAMLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def _outline_lines(tree: SidebarTree) -> list[str]:
    lines = [f"{tree.name}:"]
    for entry in tree.walk():
        indent = "  " * (entry.depth + 1)
        match entry.node:
            case CategoryNode(label=label):
                lines.append(f"{indent}+ {label}")
            case DocumentNode(doc_id=doc_id, label=None):
                lines.append(f"{indent}- {doc_id}")
            case DocumentNode(doc_id=doc_id, label=label):
                lines.append(f"{indent}- {label} [{doc_id}]")
    return lines


@app.command(help="Validate the site configuration and resolve its sidebars.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the site configuration", env_var="DOCSITE_CONFIG")
    ] = DEFAULT_CONFIG,
    sidebars: typ.Annotated[
        Path | None,
        Parameter(
            help="Sidebar file (defaults to each registration's sidebarPath)",
            env_var="DOCSITE_SIDEBARS",
        ),
    ] = None,
) -> None:
    """Load both descriptors and report one line per plugin registration.

    Parameters
    ----------
    config : Path, optional
        Path to the site configuration YAML (overridable via
        ``DOCSITE_CONFIG``).
    sidebars : Path or None, optional
        Sidebar descriptor to resolve against. When ``None`` the files named by
        the registrations' ``sidebarPath`` fields are merged.

    Raises
    ------
    SystemExit
        With status 1 when either descriptor is missing, unparsable or
        invalid; the error is written to stderr.
    """
    loaded = _load(config, sidebars)
    for registration in loaded.configuration.registrations:
        tree = loaded.sidebars.for_registration(registration)
        line = (
            f"{registration.id}: /{registration.route_base_path} -> "
            f"{registration.sidebar_ref} ({len(tree.doc_ids())} docs)"
        )
        if registration.versions:
            line = f"{line} versions: {', '.join(registration.versions)}"
        print(line)


@app.command(help="Print sidebars in rendered navigation order.")
def outline(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the site configuration", env_var="DOCSITE_CONFIG")
    ] = DEFAULT_CONFIG,
    sidebars: typ.Annotated[
        Path | None, Parameter(help="Sidebar file", env_var="DOCSITE_SIDEBARS")
    ] = None,
    sidebar: typ.Annotated[
        str | None, Parameter(help="Only print this sidebar")
    ] = None,
) -> None:
    """Print each sidebar (or only ``sidebar``) as an indented pre-order outline."""
    loaded = _load(config, sidebars)
    if sidebar is not None and sidebar not in loaded.sidebars:
        known = ", ".join(loaded.sidebars.names())
        print(f"error: unknown sidebar '{sidebar}'. Known sidebars: {known}", file=sys.stderr)
        raise SystemExit(1)
    trees = [loaded.sidebars[sidebar]] if sidebar else list(loaded.sidebars)
    for tree in trees:
        print("\n".join(_outline_lines(tree)))


@app.command(help="Write the resolved sidebars as JSON.")
def export(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the site configuration", env_var="DOCSITE_CONFIG")
    ] = DEFAULT_CONFIG,
    sidebars: typ.Annotated[
        Path | None, Parameter(help="Sidebar file", env_var="DOCSITE_SIDEBARS")
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Where to write the JSON (stdout when omitted)"),
    ] = None,
) -> None:
    """Serialize the resolved sidebar trees for the site generator."""
    loaded = _load(config, sidebars)
    payload = dump_json(loaded.sidebars)
    if output is None:
        print(payload.decode("utf-8"))
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(payload + b"\n")
    print(f"wrote {_format_path(output)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docsite`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
