"""Wire types of the generated web-types document.

The structs mirror the subset of the web-types JSON schema the generator
emits. Field names that are not valid identifiers are renamed on the wire
(``doc-url``, ``pseudo-elements``, ``$schema``, ``description-markup``), and
optional values left at their default are omitted from the encoded JSON.
"""

from __future__ import annotations

import msgspec


class WebTypeValue(msgspec.Struct, omit_defaults=True):
    """Value descriptor of an attribute or property."""

    type: str | None = None


class WebTypeAttribute(msgspec.Struct, kw_only=True, omit_defaults=True):
    """HTML attribute or JS property of an element."""

    name: str | None = None
    description: str | None = None
    value: WebTypeValue


class WebTypeEvent(msgspec.Struct, omit_defaults=True):
    """Event dispatched by an element."""

    name: str | None = None
    description: str | None = None


class JsProperties(msgspec.Struct):
    """JavaScript-side contributions of an element."""

    properties: list[WebTypeAttribute]
    events: list[WebTypeEvent]


class WebTypeElement(msgspec.Struct, kw_only=True, omit_defaults=True):
    """A custom element entry under ``contributions.html.elements``."""

    name: str | None = None
    description: str
    doc_url: str | None = msgspec.field(default=None, name="doc-url")
    attributes: list[WebTypeAttribute]
    js: JsProperties


class WebTypeCssProperty(msgspec.Struct, omit_defaults=True):
    """CSS custom property entry under ``contributions.css.properties``."""

    name: str | None = None
    description: str | None = None


class WebTypePseudoElement(msgspec.Struct, omit_defaults=True):
    """CSS part entry under ``contributions.css.pseudo-elements``."""

    name: str | None = None
    description: str | None = None


class HtmlContributions(msgspec.Struct):
    """HTML contributions of the document."""

    elements: list[WebTypeElement]


class CssContributions(msgspec.Struct):
    """CSS contributions of the document."""

    properties: list[WebTypeCssProperty]
    pseudo_elements: list[WebTypePseudoElement] = msgspec.field(
        name="pseudo-elements"
    )


class Contributions(msgspec.Struct, omit_defaults=True):
    """Top-level ``contributions`` object; excluded categories are omitted."""

    html: HtmlContributions | None = None
    css: CssContributions | None = None


class WebTypesDocument(msgspec.Struct, kw_only=True, omit_defaults=True):
    """Root of a web-types document."""

    schema: str = msgspec.field(name="$schema")
    name: str | None = None
    version: str | None = None
    description_markup: str = msgspec.field(name="description-markup")
    contributions: Contributions


__all__ = [
    "Contributions",
    "CssContributions",
    "HtmlContributions",
    "JsProperties",
    "WebTypeAttribute",
    "WebTypeCssProperty",
    "WebTypeElement",
    "WebTypeEvent",
    "WebTypePseudoElement",
    "WebTypeValue",
    "WebTypesDocument",
]
