r"""Read JSDoc tags attached to class declarations in JS/TS source text.

:class:`JsDocTagSource` is the :class:`~cem_web_types.references.DocTagSource`
adapter used when the generator scans component sources itself. It recognizes
``/** ... */`` blocks placed directly before a ``class`` declaration, with
optional ``export``/``        | (?:export|default|abstract)\b
    )*+
``/``abstract`` modifiers and decorators in
between, and splits each block into ``@tag`` entries. Line comments and
plain block comments between the documentation and the class are skipped.

Example
-------
>>> from cem_web_types.jsdoc import JsDocTagSource
>>> source = JsDocTagSource(
...     "/**\n * A button.\n * @reference Docs - https://example.com\n */\n"
...     "export class MyButton extends HTMLElement {}\n"
... )
>>> list(source.class_tags("reference"))
[('MyButton', ['Docs - https://example.com'])]
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

CLASS_DOCS_PATTERN = re.compile(
    r"""
    /\*\*(?:(?!\*/).)*\*/
    (?:
        \s
        | //[^\n]*+
        | /\*(?:(?!\*/).)*\*/
        | @[\w$.]+(?:\((?:[^()]|\([^()]*\))*\))?
        | (?:export|default|abstract)\b
    )*+
    class\s+(?P<name>[A-Za-z_$][\w$]*)
    """,
    re.DOTALL | re.VERBOSE,
)
DOC_BLOCK_PATTERN = re.compile(r"/\*\*((?:(?!\*/).)*)\*/", re.DOTALL)
GUTTER_PATTERN = re.compile(r"^\s*\*? ?")
TAG_PATTERN = re.compile(r"^@(?P<tag>[\w-]+)\s*(?P<comment>.*)$")


@dc.dataclass(slots=True)
class DocTag:
    """A single ``@tag`` entry of a documentation comment."""

    name: str
    comment: str


@dc.dataclass(slots=True)
class ClassDocs:
    """Documentation tags attached to one class declaration."""

    class_name: str
    tags: list[DocTag]


def _split_tags(block: str) -> list[DocTag]:
    """Return the tags of a doc comment body, joining continuation lines."""
    tags: list[DocTag] = []
    current: tuple[str, list[str]] | None = None
    for raw_line in block.splitlines():
        line = GUTTER_PATTERN.sub("", raw_line, count=1).rstrip()
        match = TAG_PATTERN.match(line)
        if match:
            if current:
                tags.append(DocTag(current[0], "\n".join(current[1]).strip()))
            current = (match.group("tag"), [match.group("comment")])
        elif current:
            current[1].append(line.strip())
    if current:
        tags.append(DocTag(current[0], "\n".join(current[1]).strip()))
    return tags


def parse_class_docs(text: str) -> list[ClassDocs]:
    """Return the documented class declarations found in ``text``."""
    results: list[ClassDocs] = []
    for match in CLASS_DOCS_PATTERN.finditer(text):
        tags: list[DocTag] = []
        for block in DOC_BLOCK_PATTERN.finditer(match.group(0)):
            tags.extend(_split_tags(block.group(1)))
        results.append(ClassDocs(class_name=match.group("name"), tags=tags))
    return results


class JsDocTagSource:
    """Expose JSDoc class tags of one JavaScript or TypeScript source."""

    def __init__(self, text: str) -> None:
        self._classes = parse_class_docs(text)

    @classmethod
    def from_path(cls, path: Path) -> JsDocTagSource:
        """Build a source from the UTF-8 file at ``path``."""
        return cls(path.read_text(encoding="utf-8"))

    @property
    def classes(self) -> list[ClassDocs]:
        """Documented classes in source order."""
        return list(self._classes)

    def class_tags(self, tag_name: str) -> cabc.Iterator[tuple[str, list[str]]]:
        """Yield ``(class_name, comments)`` for each ``@tag_name`` tag set."""
        for docs in self._classes:
            comments = [tag.comment for tag in docs.tags if tag.name == tag_name]
            yield docs.class_name, comments


__all__ = ["ClassDocs", "DocTag", "JsDocTagSource", "parse_class_docs"]
