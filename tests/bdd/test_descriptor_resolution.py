"""Behaviour tests for loading and resolving the documentation descriptors.

These scenarios write a site configuration and a sidebar file to a temporary
documentation root, load them through :func:`docsite.load_descriptors`, and
assert on the resolved navigation order or on the reported configuration
error. The duplicate id scenario points at a sidebar file that does not exist
to show that configuration validation finishes before any sidebar is read.

Usage
-----
Run ``pytest tests/bdd/test_descriptor_resolution.py -v``. The scenarios live
in ``features/descriptor_resolution.feature``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from docsite import load_descriptors
from docsite.errors import ConfigurationError
from docsite.sidebar import DocumentNode

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "descriptor_resolution.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]

REGISTRATION = """
  - id: {id}
    contentPath: docs
    routeBasePath: {route}
    sidebarRef: {sidebar}
"""


@pytest.fixture
def scenario_state(tmp_path: Path) -> ScenarioState:
    """Share the documentation root and load results across steps."""
    (tmp_path / "docs").mkdir()
    return {"root": tmp_path}


def _write_config(state: ScenarioState, *registrations: str) -> None:
    config_path = state["root"] / "site.yaml"
    config_path.write_text("plugins:" + "".join(registrations), encoding="utf-8")
    state["config_path"] = config_path


@given(parsers.parse('a site configuration whose registration uses "{sidebar}"'))
def given_single_registration(scenario_state: ScenarioState, sidebar: str) -> None:
    _write_config(
        scenario_state,
        REGISTRATION.format(id="docs", route="inx-indexer", sidebar=sidebar),
    )


@given(parsers.parse('a site configuration registering the id "{registration_id}" twice'))
def given_duplicate_registrations(
    scenario_state: ScenarioState, registration_id: str
) -> None:
    _write_config(
        scenario_state,
        REGISTRATION.format(id=registration_id, route="inx-indexer", sidebar="mySidebar"),
        REGISTRATION.format(id=registration_id, route="api", sidebar="apiSidebar"),
    )


@given("a sidebar file defining the indexer sidebar")
def given_sidebar_file(scenario_state: ScenarioState) -> None:
    sidebars_path = scenario_state["root"] / "sidebars.yaml"
    sidebars_path.write_text(
        dedent(
            """
            mySidebar:
              - kind: doc
                docId: welcome
              - kind: category
                label: How To
                items:
                  - kind: doc
                    docId: how_to/query_outputs
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    scenario_state["sidebars_path"] = sidebars_path


@given("no sidebar file exists")
def given_no_sidebar_file(scenario_state: ScenarioState) -> None:
    scenario_state["sidebars_path"] = scenario_state["root"] / "missing.yaml"


@when("I load the descriptors")
def when_load(scenario_state: ScenarioState) -> None:
    try:
        scenario_state["loaded"] = load_descriptors(
            scenario_state["config_path"], scenario_state["sidebars_path"]
        )
    except ConfigurationError as exc:
        scenario_state["error"] = exc


@then(parsers.parse('the "{name}" navigation order is "{order}"'))
def then_navigation_order(scenario_state: ScenarioState, name: str, order: str) -> None:
    assert "error" not in scenario_state, scenario_state.get("error")
    tree = scenario_state["loaded"].sidebars[name]
    visited = [
        entry.node.doc_id if isinstance(entry.node, DocumentNode) else entry.node.label
        for entry in tree.walk()
    ]
    assert visited == [part.strip() for part in order.split(",")]


@then(parsers.parse('loading fails with "{kind}" for "{value}"'))
def then_loading_fails(scenario_state: ScenarioState, kind: str, value: str) -> None:
    assert "loaded" not in scenario_state, "Expected no descriptors to be returned"
    error: ConfigurationError = scenario_state["error"]
    assert error.kind.value == kind
    assert error.value == value
    assert value in str(error)
