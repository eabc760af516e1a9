"""Collect ``@reference`` documentation links for components.

Component classes may carry one or more ``@reference <name> - <url>`` tags in
their documentation comments. During analysis these are gathered per class,
matched against the manifest declaration of the same name, and stored under
that declaration's tag name in a :class:`ReferenceTable`. The first reference
of a component later becomes the ``doc-url`` of its web-types element.

Source parsing is not done here: a :class:`DocTagSource` adapter is injected
so the extractor only sees ``(class name, tag comments)`` pairs.

Example
-------
>>> from cem_web_types.references import parse_reference
>>> parse_reference("Storybook - https://example.com")
Reference(name='Storybook', url='https://example.com')
>>> parse_reference("no separator here") is None
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from ._constants import REFERENCE_TAG

if typ.TYPE_CHECKING:
    from .manifest import Module

logger = logging.getLogger(__name__)

REFERENCE_SEPARATOR = " - "


@dc.dataclass(slots=True)
class Reference:
    """A named documentation link attached to a component."""

    name: str
    url: str


class DocTagSource(typ.Protocol):
    """Adapter exposing documentation tags of class declarations."""

    def class_tags(self, tag_name: str) -> cabc.Iterator[tuple[str, list[str]]]:
        """Yield ``(class_name, comments)`` for documented class declarations.

        ``comments`` holds the body of each ``@<tag_name>`` tag attached to the
        class, in source order, and may be empty.
        """
        ...


class ReferenceTable:
    """Mapping of component tag names to their documentation references.

    A table lives for one generation run. Entries are added or replaced as
    classes are analyzed and are never removed.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[Reference]] = {}

    def __contains__(self, tag_name: object) -> bool:
        return tag_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, tag_name: str, references: cabc.Iterable[Reference]) -> None:
        """Store ``references`` for ``tag_name``, replacing earlier entries."""
        self._entries[tag_name] = list(references)

    def get(self, tag_name: str | None) -> list[Reference]:
        """Return the references recorded for ``tag_name`` (possibly empty)."""
        if tag_name is None:
            return []
        return list(self._entries.get(tag_name, ()))

    def doc_url(self, tag_name: str | None) -> str | None:
        """Return the URL of the first reference for ``tag_name``, if any."""
        references = self.get(tag_name)
        return references[0].url if references else None


def parse_reference(comment: str | None) -> Reference | None:
    """Split a tag comment into a :class:`Reference` on the first ``" - "``.

    Returns None for comments without a separator.
    """
    if not comment:
        return None
    name, separator, url = comment.partition(REFERENCE_SEPARATOR)
    if not separator:
        return None
    return Reference(name=name.strip(), url=url.strip())


def parse_references(comments: cabc.Iterable[str | None]) -> list[Reference]:
    """Parse every well-formed reference comment, dropping malformed ones."""
    references: list[Reference] = []
    for comment in comments:
        reference = parse_reference(comment)
        if reference is not None:
            references.append(reference)
    return references


def collect_references(
    source: DocTagSource, module: Module, table: ReferenceTable
) -> list[str]:
    """Record references for the classes of ``source`` declared in ``module``.

    Parameters
    ----------
    source : DocTagSource
        Adapter over the syntax of one source file.
    module : Module
        Manifest module produced from the same file; class names are matched
        against its declarations.
    table : ReferenceTable
        Table updated in place.

    Returns
    -------
    list[str]
        Tag names recorded, in source order.

    Notes
    -----
    A class whose name matches no declaration, or whose declaration has no
    tag name, is skipped with a warning.
    """
    recorded: list[str] = []
    for class_name, comments in source.class_tags(REFERENCE_TAG):
        references = parse_references(comments)
        if not references:
            continue
        declaration = module.find_declaration(class_name)
        if declaration is None or not declaration.tag_name:
            logger.warning(
                "Skipping references for %s in %s: no component declaration "
                "with a tag name",
                class_name,
                module.path or "<unknown module>",
            )
            continue
        table.record(declaration.tag_name, references)
        recorded.append(declaration.tag_name)
    return recorded


__all__ = [
    "DocTagSource",
    "Reference",
    "ReferenceTable",
    "collect_references",
    "parse_reference",
    "parse_references",
]
