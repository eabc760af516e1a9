"""Typed dataclasses describing web-types generator options."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from cem_web_types._constants import (
    DEFAULT_LABELS,
    DEFAULT_OUTDIR,
    DEFAULT_WEB_TYPES_FILE_NAME,
)

DescriptionSource = typ.Literal["summary", "description"]
DESCRIPTION_SOURCES: tuple[str, ...] = typ.get_args(DescriptionSource)


class OptionsError(ValueError):
    """Raised when generator options are invalid or incomplete."""


@dc.dataclass(slots=True)
class DescriptionLabels:
    """Headings used for the optional sections of an element description."""

    slots: str = DEFAULT_LABELS["slots"]
    events: str = DEFAULT_LABELS["events"]
    css_properties: str = DEFAULT_LABELS["css_properties"]
    css_parts: str = DEFAULT_LABELS["css_parts"]


@dc.dataclass(slots=True)
class GeneratorOptions:
    """A fully resolved set of options for one generation run.

    Attributes
    ----------
    outdir : str
        Output directory, relative to the project root. ``"./"`` means the
        root itself and is never created.
    web_types_file_name : str or None
        Name of the generated file; ``None`` disables output entirely.
    exclude : list[str]
        Class names of declarations left out of the generated document.
    description_src : {"summary", "description"} or None
        Declaration field used as the base description. When ``None`` the
        summary is preferred and the description used as a fallback.
    slot_docs, event_docs, css_properties_docs, css_parts_docs : bool
        Toggle the matching section of each element description.
    exclude_html : bool
        Omit ``contributions.html`` from the document.
    exclude_css : bool
        Omit ``contributions.css`` from the document.
    labels : DescriptionLabels
        Headings for the description sections.
    """

    outdir: str = DEFAULT_OUTDIR
    web_types_file_name: str | None = DEFAULT_WEB_TYPES_FILE_NAME
    exclude: list[str] = dc.field(default_factory=list)
    description_src: DescriptionSource | None = None
    slot_docs: bool = True
    event_docs: bool = True
    css_properties_docs: bool = True
    css_parts_docs: bool = True
    exclude_html: bool = False
    exclude_css: bool = False
    labels: DescriptionLabels = dc.field(default_factory=DescriptionLabels)


__all__ = [
    "DESCRIPTION_SOURCES",
    "DescriptionLabels",
    "DescriptionSource",
    "GeneratorOptions",
    "OptionsError",
]
