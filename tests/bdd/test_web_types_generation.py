"""Behaviour tests for end-to-end web-types generation using pytest-bdd.

These scenarios run the ``web-types generate`` command body against a
temporary project holding a Custom Elements Manifest, a TypeScript source
carrying ``@reference`` tags, and ``package.json``. They verify the written
document and the ``web-types`` field recorded in ``package.json``.

Usage
-----
Run ``pytest tests/bdd/test_web_types_generation.py -v``.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from cem_web_types import cli

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "web_types_generation.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]

MANIFEST = {
    "schemaVersion": "1.0.0",
    "modules": [
        {
            "kind": "javascript-module",
            "path": "src/components.ts",
            "declarations": [
                {
                    "kind": "class",
                    "name": "XFoo",
                    "tagName": "x-foo",
                    "customElement": True,
                    "summary": "A foo.",
                    "cssProperties": [{"name": "--foo-color"}],
                },
                {
                    "kind": "class",
                    "name": "XBar",
                    "tagName": "x-bar",
                    "customElement": True,
                    "cssParts": [{"name": "label"}],
                },
            ],
        }
    ],
}

SOURCE = dedent(
    """
    /**
     * A foo.
     * @reference Storybook - https://example.com/foo
     */
    export class XFoo extends HTMLElement {}

    /** A bar. */
    export class XBar extends HTMLElement {}
    """
)


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps.

    Returns
    -------
    ScenarioState
        Mutable dictionary used to exchange state between ``given``, ``when``,
        and ``then`` steps.
    """
    return {}


@given("a project with a manifest, component sources, and package.json")
def given_project(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write the manifest, one source module, and package.json."""
    (tmp_path / "custom-elements.json").write_text(
        json.dumps(MANIFEST), encoding="utf-8"
    )
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "components.ts").write_text(SOURCE, encoding="utf-8")
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "widgets", "version": "1.0.0"}), encoding="utf-8"
    )
    scenario_state["root"] = tmp_path


@when(parsers.parse('I generate web-types into "{outdir}"'))
def when_generate(outdir: str, scenario_state: ScenarioState) -> None:
    """Run the generate command with a custom output directory."""
    root = typ.cast("Path", scenario_state["root"])
    cli.generate(root=root, outdir=outdir)
    scenario_state["output"] = root / outdir / "web-types.json"


@when(
    parsers.parse(
        'I generate web-types excluding "{name}" without CSS contributions'
    )
)
def when_generate_excluding(name: str, scenario_state: ScenarioState) -> None:
    """Run the generate command with an exclusion and without CSS."""
    root = typ.cast("Path", scenario_state["root"])
    cli.generate(root=root, exclude=[name], exclude_css=True)
    scenario_state["output"] = root / "web-types.json"


def _document(scenario_state: ScenarioState) -> dict[str, typ.Any]:
    output = typ.cast("Path", scenario_state["output"])
    return json.loads(output.read_text(encoding="utf-8"))


@then(
    parsers.parse(
        'the web-types file lists the element "{tag}" with doc url "{url}"'
    )
)
def then_element_with_doc_url(
    tag: str, url: str, scenario_state: ScenarioState
) -> None:
    """Verify the element exists and carries its documentation URL."""
    elements = _document(scenario_state)["contributions"]["html"]["elements"]
    by_name = {element["name"]: element for element in elements}
    assert tag in by_name, f"expected {tag} in {sorted(by_name)!r}"
    assert by_name[tag]["doc-url"] == url


@then(parsers.parse('the web-types file lists only the element "{tag}"'))
def then_only_element(tag: str, scenario_state: ScenarioState) -> None:
    """Verify exclusions removed every other element."""
    elements = _document(scenario_state)["contributions"]["html"]["elements"]
    assert [element["name"] for element in elements] == [tag]


@then("the web-types file has no CSS contributions")
def then_no_css(scenario_state: ScenarioState) -> None:
    """Verify the CSS category was dropped entirely."""
    contributions = _document(scenario_state)["contributions"]
    assert "css" not in contributions, f"unexpected css in {contributions!r}"


@then(parsers.parse('package.json points at "{path}"'))
def then_package_points_at(path: str, scenario_state: ScenarioState) -> None:
    """Verify the web-types field recorded in package.json."""
    root = typ.cast("Path", scenario_state["root"])
    package = json.loads((root / "package.json").read_text(encoding="utf-8"))
    assert package["web-types"] == path
    assert package["name"] == "widgets", "expected other fields to survive"
