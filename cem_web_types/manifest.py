r"""Typed model of a Custom Elements Manifest and component selection.

The manifest (``custom-elements.json``) is produced by an external analyzer;
this module only decodes it into ``msgspec`` structs and never mutates it.
Every optional sequence decodes to an empty list, so downstream code never
has to distinguish "absent" from "empty". Scalar fields, names included, are
optional as well: a missing or null value decodes as ``None`` and is never a
decode error.

Example
-------
>>> from cem_web_types.manifest import decode_manifest, select_components
>>> manifest = decode_manifest(
...     b'{"modules": [{"path": "src/x-foo.ts", "declarations": '
...     b'[{"name": "XFoo", "tagName": "x-foo"}, {"name": "helper"}]}]}'
... )
>>> [dec.tag_name for dec in select_components(manifest)]
['x-foo']
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    from pathlib import Path


class ManifestError(ValueError):
    """Raised when a manifest cannot be decoded into the expected shape."""


class TypeRef(msgspec.Struct, rename="camel"):
    """Type annotation text attached to a manifest entry."""

    text: str | None = None


class Attribute(msgspec.Struct, rename="camel"):
    """HTML attribute observed by a component."""

    name: str | None = None
    description: str | None = None
    type: TypeRef | None = None
    default: str | None = None
    field_name: str | None = None


class Member(msgspec.Struct, rename="camel"):
    """Class member (field or method) of a component."""

    name: str | None = None
    kind: str | None = None
    description: str | None = None
    type: TypeRef | None = None
    default: str | None = None
    attribute: str | None = None
    privacy: str | None = None
    static: bool | None = None


class Event(msgspec.Struct, rename="camel"):
    """Event dispatched by a component."""

    name: str | None = None
    description: str | None = None
    type: TypeRef | None = None


class Slot(msgspec.Struct, rename="camel"):
    """Content insertion point; an empty name denotes the default slot."""

    name: str | None = None
    description: str | None = None


class CssProperty(msgspec.Struct, rename="camel"):
    """Themeable CSS custom property."""

    name: str | None = None
    description: str | None = None
    default: str | None = None
    syntax: str | None = None


class CssPart(msgspec.Struct, rename="camel"):
    """Styleable shadow part exposed by a component."""

    name: str | None = None
    description: str | None = None


class Declaration(msgspec.Struct, rename="camel"):
    """One declaration in a module; components carry a tag name."""

    name: str | None = None
    kind: str | None = None
    description: str | None = None
    summary: str | None = None
    tag_name: str | None = None
    custom_element: bool | None = None
    attributes: list[Attribute] = msgspec.field(default_factory=list)
    members: list[Member] = msgspec.field(default_factory=list)
    events: list[Event] = msgspec.field(default_factory=list)
    slots: list[Slot] = msgspec.field(default_factory=list)
    css_properties: list[CssProperty] = msgspec.field(default_factory=list)
    css_parts: list[CssPart] = msgspec.field(default_factory=list)

    @property
    def is_component(self) -> bool:
        """Return True when the declaration describes a UI component."""
        return bool(self.custom_element or self.tag_name)


class Module(msgspec.Struct, rename="camel"):
    """A source module and the declarations discovered in it."""

    path: str | None = None
    kind: str | None = None
    declarations: list[Declaration] = msgspec.field(default_factory=list)

    def find_declaration(self, name: str) -> Declaration | None:
        """Return the first declaration named ``name`` or None."""
        return next((dec for dec in self.declarations if dec.name == name), None)


class Manifest(msgspec.Struct, rename="camel"):
    """Root of a Custom Elements Manifest document."""

    schema_version: str | None = None
    readme: str | None = None
    modules: list[Module] = msgspec.field(default_factory=list)


def decode_manifest(data: bytes | str) -> Manifest:
    """Decode manifest JSON into a :class:`Manifest`.

    Raises
    ------
    ManifestError
        If ``data`` is not valid JSON or does not match the manifest shape.
    """
    try:
        return msgspec.json.decode(data, type=Manifest)
    except msgspec.DecodeError as exc:
        msg = f"Invalid custom elements manifest: {exc}"
        raise ManifestError(msg) from exc


def load_manifest(path: Path) -> Manifest:
    """Read and decode the manifest stored at ``path``."""
    if not path.exists():
        msg = f"Manifest file '{path}' not found."
        raise FileNotFoundError(msg)
    return decode_manifest(path.read_bytes())


def select_components(
    manifest: Manifest, exclude: cabc.Collection[str] = ()
) -> list[Declaration]:
    """Return the component declarations of ``manifest`` in document order.

    Parameters
    ----------
    manifest : Manifest
        Decoded manifest.
    exclude : Collection[str], optional
        Declaration (class) names to leave out.

    Returns
    -------
    list[Declaration]
        Declarations flagged as custom elements or carrying a tag name, in
        module order and then declaration order. Nothing is reordered or
        deduplicated across modules.
    """
    return [
        declaration
        for module in manifest.modules
        for declaration in module.declarations
        if declaration.name not in exclude and declaration.is_component
    ]


__all__ = [
    "Attribute",
    "CssPart",
    "CssProperty",
    "Declaration",
    "Event",
    "Manifest",
    "ManifestError",
    "Member",
    "Module",
    "Slot",
    "TypeRef",
    "decode_manifest",
    "load_manifest",
    "select_components",
]
