"""Cyclopts CLI entrypoint for generating web-types from a components manifest.

The ``web-types`` console script defined here reads a Custom Elements
Manifest, optionally scans the component sources for ``@reference`` tags,
writes ``web-types.json`` (or the configured file), and records its location
in ``package.json``. Options come from an optional YAML file and may be
overridden by flags or ``WEB_TYPES_*`` environment variables.

Examples
--------
Generate web-types next to ``package.json``:

>>> from cem_web_types.cli import main
>>> main()  # doctest: +SKIP

Write into a custom directory without slot documentation:

>>> from cem_web_types.cli import app
>>> app(["generate", "--outdir", "dist", "--no-slot-docs"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_MANIFEST_FILE
from .config import GeneratorOptions, build_options, load_options
from .generator import WebTypesGenerator
from .manifest import load_manifest

app = App(name="web-types", config=cyclopts.config.Env("WEB_TYPES_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_options(
    config: Path | None, overrides: dict[str, typ.Any]
) -> GeneratorOptions:
    """Load options from ``config`` when given and apply non-null overrides."""
    supplied = {key: value for key, value in overrides.items() if value is not None}
    if config is not None:
        return load_options(config, supplied)
    return build_options(supplied)


@app.command(help="Generate a web-types file from a custom elements manifest.")
def generate(
    *,
    manifest: typ.Annotated[
        Path, Parameter(help="Path to the custom elements manifest")
    ] = Path(DEFAULT_MANIFEST_FILE),
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a YAML options file")
    ] = None,
    root: typ.Annotated[
        Path | None,
        Parameter(help="Project root holding package.json and component sources"),
    ] = None,
    outdir: typ.Annotated[
        str | None, Parameter(help="Output directory relative to the root")
    ] = None,
    file_name: typ.Annotated[
        str | None, Parameter(help="Name of the generated web-types file")
    ] = None,
    exclude: typ.Annotated[
        list[str] | None, Parameter(help="Class names to leave out")
    ] = None,
    description_src: typ.Annotated[
        typ.Literal["summary", "description"] | None,
        Parameter(help="Declaration field used as the element description"),
    ] = None,
    slot_docs: typ.Annotated[
        bool | None, Parameter(help="Document slots in descriptions")
    ] = None,
    event_docs: typ.Annotated[
        bool | None, Parameter(help="Document events in descriptions")
    ] = None,
    css_properties_docs: typ.Annotated[
        bool | None, Parameter(help="Document CSS custom properties in descriptions")
    ] = None,
    css_parts_docs: typ.Annotated[
        bool | None, Parameter(help="Document CSS parts in descriptions")
    ] = None,
    exclude_html: typ.Annotated[
        bool | None, Parameter(help="Leave out HTML element contributions")
    ] = None,
    exclude_css: typ.Annotated[
        bool | None, Parameter(help="Leave out CSS contributions")
    ] = None,
    analyze: typ.Annotated[
        bool, Parameter(help="Scan module sources for @reference tags")
    ] = True,
) -> None:
    """Generate web-types for the components described by ``manifest``.

    Parameters
    ----------
    manifest : Path, optional
        Custom elements manifest to read; defaults to
        ``custom-elements.json``.
    config : Path or None, optional
        YAML options file. Flags given on the command line take precedence
        over its values.
    root : Path or None, optional
        Project root; defaults to the current working directory.
    outdir, file_name, exclude, description_src : optional
        Overrides of the matching generator options.
    slot_docs, event_docs, css_properties_docs, css_parts_docs : bool, optional
        Toggle description sections.
    exclude_html, exclude_css : bool, optional
        Drop a whole contribution category.
    analyze : bool, optional
        When ``True`` (default) each manifest module's source file is scanned
        for ``@reference`` tags before the document is built.

    Returns
    -------
    None
        Writes the web-types file and ``package.json``, printing the paths.

    Raises
    ------
    FileNotFoundError
        If the manifest, options file, or ``package.json`` is missing.
    """
    options = _resolve_options(
        config,
        {
            "outdir": outdir,
            "web_types_file_name": file_name,
            "exclude": exclude,
            "description_src": description_src,
            "slot_docs": slot_docs,
            "event_docs": event_docs,
            "css_properties_docs": css_properties_docs,
            "css_parts_docs": css_parts_docs,
            "exclude_html": exclude_html,
            "exclude_css": exclude_css,
        },
    )
    project_root = root or Path.cwd()
    manifest_path = manifest if manifest.is_absolute() else project_root / manifest
    components_manifest = load_manifest(manifest_path)

    generator = WebTypesGenerator(options, root=project_root)
    if analyze:
        generator.analyze_sources(components_manifest)
    written = generator.run(components_manifest)
    if written is None:
        print("web-types output disabled; nothing written")
        return
    print(f"wrote {_format_path(written)}")
    print(f"updated {_format_path(generator.package_json)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `web-types` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
