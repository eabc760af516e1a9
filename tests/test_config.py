"""Unit tests for generator option loading and merging."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from cem_web_types.config import (
    DescriptionLabels,
    GeneratorOptions,
    OptionsError,
    build_options,
    load_options,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_build_options_defaults() -> None:
    """Without overrides the built-in defaults apply."""
    options = build_options()
    assert options == GeneratorOptions(), "expected defaults without overrides"
    assert options.outdir == "./", f"expected './' outdir, got {options.outdir!r}"
    assert options.web_types_file_name == "web-types.json", (
        "expected default web-types file name"
    )
    assert options.labels == DescriptionLabels(), "expected default labels"


def test_build_options_returns_fresh_objects() -> None:
    """Each call should produce independent option objects."""
    first = build_options({"exclude": ["XFoo"]})
    second = build_options()
    assert second.exclude == [], (
        f"expected exclusions not to leak between runs, got {second.exclude!r}"
    )
    assert first.labels is not second.labels, "expected separate label objects"


def test_build_options_accepts_camel_case_keys() -> None:
    """CamelCase option names should map onto snake_case fields."""
    options = build_options(
        {
            "webTypesFileName": "types.json",
            "descriptionSrc": "description",
            "slotDocs": False,
            "cssPropertiesDocs": False,
            "excludeCss": True,
        }
    )
    assert options.web_types_file_name == "types.json"
    assert options.description_src == "description"
    assert options.slot_docs is False, "expected slotDocs to disable slot docs"
    assert options.css_properties_docs is False
    assert options.exclude_css is True
    assert options.event_docs is True, "expected untouched toggles to keep defaults"


def test_build_options_merges_labels_onto_defaults() -> None:
    """Label overrides replace only the labels they name."""
    options = build_options({"labels": {"slots": "Slot list", "cssParts": "Parts"}})
    assert options.labels.slots == "Slot list"
    assert options.labels.css_parts == "Parts"
    assert options.labels.events == "Events", "expected default events label"
    assert options.labels.css_properties == "CSS Properties"


def test_load_options_null_label_keeps_default(tmp_path: Path) -> None:
    """A null label in YAML keeps the default heading instead of 'None'."""
    config_path = tmp_path / "web-types.yaml"
    config_path.write_text(
        "labels:\n  slots: null\n  events: Emits\n", encoding="utf-8"
    )
    options = load_options(config_path)
    assert options.labels.slots == "Slots", (
        f"expected default slots label, got {options.labels.slots!r}"
    )
    assert options.labels.events == "Emits"


def test_build_options_null_file_name_disables_output() -> None:
    """An explicit null file name should disable the output file."""
    options = build_options({"web_types_file_name": None})
    assert options.web_types_file_name is None


@pytest.mark.parametrize(
    ("overrides", "fragment"),
    [
        ({"description_src": "title"}, "description_src"),
        ({"slot_docs": "yes"}, "slot_docs"),
        ({"exclude": 3}, "exclude"),
        ({"labels": ["Slots"]}, "labels"),
    ],
)
def test_build_options_rejects_invalid_values(
    overrides: dict[str, typ.Any], fragment: str
) -> None:
    """Invalid option values should raise OptionsError naming the option."""
    with pytest.raises(OptionsError, match=fragment):
        build_options(overrides)


def test_load_options_reads_yaml(tmp_path: Path) -> None:
    """Options should be read from YAML and merged with overrides."""
    config_path = tmp_path / "web-types.yaml"
    config_path.write_text(
        dedent(
            """
            outdir: dist
            exclude:
              - XInternal
            description_src: summary
            event_docs: false
            labels:
              events: Fired events
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )

    options = load_options(config_path, {"event_docs": True, "exclude_html": True})

    assert options.outdir == "dist", f"expected outdir 'dist', got {options.outdir!r}"
    assert options.exclude == ["XInternal"]
    assert options.description_src == "summary"
    assert options.event_docs is True, "expected overrides to win over the file"
    assert options.exclude_html is True
    assert options.labels.events == "Fired events"


def test_load_options_missing_file(tmp_path: Path) -> None:
    """A missing options file should raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_options(tmp_path / "missing.yaml")


def test_load_options_rejects_non_mapping(tmp_path: Path) -> None:
    """The top-level YAML value must be a mapping."""
    config_path = tmp_path / "web-types.yaml"
    config_path.write_text("- outdir\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_options(config_path)
