r"""Compose the Markdown description of a web-types element.

The description starts from the declaration's summary or description and is
followed by optional sections listing slots, events, CSS custom properties,
and CSS parts. A section is rendered only when the declaration has entries
for it and the matching ``*_docs`` option is enabled.

Example
-------
>>> from cem_web_types.config import GeneratorOptions
>>> from cem_web_types.manifest import Declaration, Slot
>>> declaration = Declaration(
...     name="XFoo", summary="A foo.", slots=[Slot(name="", description="d")]
... )
>>> print(compose_description(declaration, GeneratorOptions()))
A foo.
<BLANKLINE>
**Slots:**
- _default_ - d
"""

from __future__ import annotations

import typing as typ

from cem_web_types._constants import DEFAULT_SLOT_TOKEN

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from cem_web_types.config import GeneratorOptions
    from cem_web_types.manifest import (
        CssPart,
        CssProperty,
        Declaration,
        Event,
        Slot,
    )

ESCAPED_NEWLINE = "\\n"


def base_description(declaration: Declaration, description_src: str | None) -> str:
    """Return the base text of a description with escaped newlines expanded.

    When ``description_src`` names a field only that field is used; otherwise
    the summary is preferred over the description.
    """
    match description_src:
        case "summary":
            text = declaration.summary
        case "description":
            text = declaration.description
        case _:
            text = declaration.summary or declaration.description
    return (text or "").replace(ESCAPED_NEWLINE, "\n")


def _bullet(label: str, description: str | None, suffix: str = "") -> str:
    return f"- {label} - {description or ''}{suffix}"


def slot_docs(slots: cabc.Iterable[Slot]) -> str:
    """Render slots as a bullet list, naming the unnamed slot ``_default_``."""
    return "\n".join(
        _bullet(
            f"**{slot.name}**" if slot.name else DEFAULT_SLOT_TOKEN,
            slot.description,
        )
        for slot in slots
    )


def event_docs(events: cabc.Iterable[Event]) -> str:
    """Render events as a bullet list."""
    return "\n".join(
        _bullet(f"**{event.name or ''}**", event.description) for event in events
    )


def css_property_docs(properties: cabc.Iterable[CssProperty]) -> str:
    """Render CSS custom properties, noting default values when present."""
    return "\n".join(
        _bullet(
            f"**{prop.name or ''}**",
            prop.description,
            f" _(default: {prop.default})_" if prop.default else "",
        )
        for prop in properties
    )


def css_part_docs(parts: cabc.Iterable[CssPart]) -> str:
    """Render CSS parts as a bullet list."""
    return "\n".join(
        _bullet(f"**{part.name or ''}**", part.description) for part in parts
    )


def _section(label: str, body: str) -> str:
    return f"\n\n**{label}:**\n{body}"


def compose_description(declaration: Declaration, options: GeneratorOptions) -> str:
    """Build the full Markdown description for ``declaration``.

    Sections always appear in the order slots, events, CSS properties, CSS
    parts, each headed by its configured label.
    """
    labels = options.labels
    parts = [base_description(declaration, options.description_src)]
    if declaration.slots and options.slot_docs:
        parts.append(_section(labels.slots, slot_docs(declaration.slots)))
    if declaration.events and options.event_docs:
        parts.append(_section(labels.events, event_docs(declaration.events)))
    if declaration.css_properties and options.css_properties_docs:
        parts.append(
            _section(
                labels.css_properties, css_property_docs(declaration.css_properties)
            )
        )
    if declaration.css_parts and options.css_parts_docs:
        parts.append(_section(labels.css_parts, css_part_docs(declaration.css_parts)))
    return "".join(parts)


__all__ = [
    "base_description",
    "compose_description",
    "css_part_docs",
    "css_property_docs",
    "event_docs",
    "slot_docs",
]
