"""Project manifest declarations into web-types element fields."""

from __future__ import annotations

import typing as typ

from .models import (
    WebTypeAttribute,
    WebTypeCssProperty,
    WebTypeEvent,
    WebTypePseudoElement,
    WebTypeValue,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from cem_web_types.manifest import Attribute, Declaration, Member, TypeRef


def _type_text(type_ref: TypeRef | None) -> str | None:
    return type_ref.text if type_ref else None


def _to_web_type_attribute(
    name: str | None, entry: Attribute | Member
) -> WebTypeAttribute:
    return WebTypeAttribute(
        name=name,
        description=entry.description,
        value=WebTypeValue(type=_type_text(entry.type)),
    )


def project_attributes(declaration: Declaration) -> list[WebTypeAttribute]:
    """Return the element attributes, keyed by field name when one is set.

    An attribute whose emitted name was already produced by an earlier
    attribute is skipped, so the first occurrence wins. Attributes without any
    name share the ``None`` key, so only the first of them is kept.
    """
    attributes: list[WebTypeAttribute] = []
    seen: set[str | None] = set()
    for attr in declaration.attributes:
        name = attr.field_name or attr.name
        if name in seen:
            continue
        seen.add(name)
        attributes.append(_to_web_type_attribute(name, attr))
    return attributes


def project_properties(declaration: Declaration) -> list[WebTypeAttribute]:
    """Return JS properties from the attributes, or the members if none."""
    entries: cabc.Sequence[Attribute | Member] = (
        declaration.attributes or declaration.members
    )
    return [_to_web_type_attribute(entry.name, entry) for entry in entries]


def project_events(declaration: Declaration) -> list[WebTypeEvent]:
    """Return the events dispatched by ``declaration``."""
    return [
        WebTypeEvent(name=event.name, description=event.description)
        for event in declaration.events
    ]


def project_css_properties(
    components: cabc.Iterable[Declaration],
) -> list[WebTypeCssProperty]:
    """Flatten the CSS custom properties of every component."""
    return [
        WebTypeCssProperty(name=prop.name, description=prop.description)
        for component in components
        for prop in component.css_properties
    ]


def project_css_parts(
    components: cabc.Iterable[Declaration],
) -> list[WebTypePseudoElement]:
    """Flatten the CSS parts of every component."""
    return [
        WebTypePseudoElement(name=part.name, description=part.description)
        for component in components
        for part in component.css_parts
    ]


__all__ = [
    "project_attributes",
    "project_css_parts",
    "project_css_properties",
    "project_events",
    "project_properties",
]
