"""Assemble web-types elements and the final document."""

from __future__ import annotations

import typing as typ

from cem_web_types._constants import DESCRIPTION_MARKUP, WEB_TYPES_SCHEMA

from .descriptions import compose_description
from .models import (
    Contributions,
    CssContributions,
    HtmlContributions,
    JsProperties,
    WebTypeElement,
    WebTypesDocument,
)
from .projectors import (
    project_attributes,
    project_css_parts,
    project_css_properties,
    project_events,
    project_properties,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from cem_web_types.config import GeneratorOptions
    from cem_web_types.manifest import Declaration
    from cem_web_types.references import ReferenceTable


def build_element(
    declaration: Declaration,
    options: GeneratorOptions,
    references: ReferenceTable,
) -> WebTypeElement:
    """Project one component declaration into a web-types element."""
    return WebTypeElement(
        name=declaration.tag_name,
        description=compose_description(declaration, options),
        doc_url=references.doc_url(declaration.tag_name),
        attributes=project_attributes(declaration),
        js=JsProperties(
            properties=project_properties(declaration),
            events=project_events(declaration),
        ),
    )


def build_document(
    components: cabc.Sequence[Declaration],
    *,
    options: GeneratorOptions,
    references: ReferenceTable,
    package: cabc.Mapping[str, typ.Any],
) -> WebTypesDocument:
    """Combine selected components into a web-types document.

    Parameters
    ----------
    components : Sequence[Declaration]
        Component declarations in output order.
    options : GeneratorOptions
        Resolved options; ``exclude_html`` and ``exclude_css`` drop the whole
        ``html`` or ``css`` contribution.
    references : ReferenceTable
        Documentation references gathered during analysis.
    package : Mapping[str, Any]
        Decoded ``package.json``; ``name`` and ``version`` are copied as-is.

    Returns
    -------
    WebTypesDocument
        Document ready for encoding.
    """
    html = None
    if not options.exclude_html:
        html = HtmlContributions(
            elements=[
                build_element(component, options, references)
                for component in components
            ]
        )
    css = None
    if not options.exclude_css:
        css = CssContributions(
            properties=project_css_properties(components),
            pseudo_elements=project_css_parts(components),
        )
    return WebTypesDocument(
        schema=WEB_TYPES_SCHEMA,
        name=package.get("name"),
        version=package.get("version"),
        description_markup=DESCRIPTION_MARKUP,
        contributions=Contributions(html=html, css=css),
    )


__all__ = ["build_document", "build_element"]
