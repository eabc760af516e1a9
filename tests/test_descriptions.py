"""Unit tests for element description composition."""

from __future__ import annotations

import pytest

from cem_web_types.config import build_options
from cem_web_types.generator.descriptions import (
    base_description,
    compose_description,
    css_property_docs,
    slot_docs,
)
from cem_web_types.manifest import CssPart, CssProperty, Declaration, Event, Slot


def _full_declaration() -> Declaration:
    """Return a declaration with data for every description section."""
    return Declaration(
        name="XFoo",
        tag_name="x-foo",
        summary="Summary line",
        description="Long description",
        slots=[Slot(name="", description="d"), Slot(name="icon", description="Icon")],
        events=[Event(name="change", description="Changed")],
        css_properties=[
            CssProperty(name="--foo-color", description="Colour", default="red"),
            CssProperty(name="--foo-gap", description="Gap"),
        ],
        css_parts=[CssPart(name="base", description="Wrapper")],
    )


def test_compose_description_renders_sections_in_order() -> None:
    """All four sections render in the fixed order with default labels."""
    description = compose_description(_full_declaration(), build_options())
    expected = (
        "Summary line"
        "\n\n**Slots:**\n- _default_ - d\n- **icon** - Icon"
        "\n\n**Events:**\n- **change** - Changed"
        "\n\n**CSS Properties:**\n- **--foo-color** - Colour _(default: red)_"
        "\n- **--foo-gap** - Gap"
        "\n\n**CSS Parts:**\n- **base** - Wrapper"
    )
    assert description == expected, f"unexpected description: {description!r}"


@pytest.mark.parametrize(
    ("toggle", "heading"),
    [
        ("slot_docs", "**Slots:**"),
        ("event_docs", "**Events:**"),
        ("css_properties_docs", "**CSS Properties:**"),
        ("css_parts_docs", "**CSS Parts:**"),
    ],
)
def test_disabled_toggle_hides_section(toggle: str, heading: str) -> None:
    """A disabled toggle removes its section even when data exists."""
    description = compose_description(
        _full_declaration(), build_options({toggle: False})
    )
    assert heading not in description, f"expected {heading} to be hidden"


def test_empty_data_hides_section_even_when_enabled() -> None:
    """Enabled sections without entries are not rendered."""
    declaration = Declaration(name="XFoo", tag_name="x-foo", summary="Only text")
    assert compose_description(declaration, build_options()) == "Only text"


def test_custom_labels_are_used() -> None:
    """Label overrides replace the section headings."""
    declaration = Declaration(
        name="XFoo", events=[Event(name="close", description="Closed")]
    )
    description = compose_description(
        declaration, build_options({"labels": {"events": "Emits"}})
    )
    assert description == "\n\n**Emits:**\n- **close** - Closed"


@pytest.mark.parametrize(
    ("source", "summary", "text", "expected"),
    [
        (None, "Summary", "Description", "Summary"),
        (None, None, "Description", "Description"),
        (None, None, None, ""),
        ("description", "Summary", "Description", "Description"),
        ("summary", None, "Description", ""),
    ],
)
def test_base_description_sources(
    source: str | None, summary: str | None, text: str | None, expected: str
) -> None:
    """The configured source is used alone; otherwise summary beats description."""
    declaration = Declaration(name="XFoo", summary=summary, description=text)
    assert base_description(declaration, source) == expected


def test_base_description_unescapes_newlines() -> None:
    """Literal backslash-n sequences become real newlines."""
    declaration = Declaration(name="XFoo", summary="one\\ntwo")
    assert base_description(declaration, None) == "one\ntwo"


def test_slot_and_css_bullets() -> None:
    """Unnamed slots use the default token; defaults are annotated in italics."""
    assert slot_docs([Slot(description="d")]) == "- _default_ - d"
    assert css_property_docs([CssProperty(name="--x", description="X")]) == (
        "- **--x** - X"
    )
