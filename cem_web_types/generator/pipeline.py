"""High-level orchestration for web-types generation.

:class:`WebTypesGenerator` runs the two stages of a generation: an analysis
stage that gathers ``@reference`` links from component sources, and a
package-link stage that selects components from the manifest, builds the
web-types document, writes it, and records its path in ``package.json``.

All per-run state (options, reference table, package metadata) lives on a
:class:`GenerationContext` owned by the generator instance, so two runs never
share anything.

Example
-------
>>> from pathlib import Path
>>> from cem_web_types.config import build_options
>>> from cem_web_types.generator import WebTypesGenerator
>>> from cem_web_types.manifest import load_manifest
>>> manifest = load_manifest(Path("custom-elements.json"))  # doctest: +SKIP
>>> generator = WebTypesGenerator(build_options({"outdir": "dist"}))
>>> generator.analyze_sources(manifest)  # doctest: +SKIP
>>> generator.run(manifest)  # doctest: +SKIP
PosixPath('dist/web-types.json')
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from cem_web_types._constants import PACKAGE_METADATA_FILE
from cem_web_types.jsdoc import JsDocTagSource
from cem_web_types.manifest import select_components
from cem_web_types.references import ReferenceTable, collect_references

from .assembler import build_document
from .writer import (
    load_package_metadata,
    update_package_metadata,
    web_types_path,
    write_web_types,
)

if typ.TYPE_CHECKING:
    from cem_web_types.config import GeneratorOptions
    from cem_web_types.manifest import Manifest, Module
    from cem_web_types.references import DocTagSource

    from .models import WebTypesDocument

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class GenerationContext:
    """State threaded through one generation run."""

    options: GeneratorOptions
    references: ReferenceTable = dc.field(default_factory=ReferenceTable)
    package: dict[str, typ.Any] = dc.field(default_factory=dict)


class WebTypesGenerator:
    """Turn a custom elements manifest into a web-types file."""

    def __init__(
        self,
        options: GeneratorOptions,
        *,
        root: Path | None = None,
        package_json: Path | None = None,
    ) -> None:
        """Initialize the generator for one run.

        Parameters
        ----------
        options : GeneratorOptions
            Resolved generator options.
        root : Path, optional
            Project root that ``options.outdir`` and manifest module paths are
            relative to. Defaults to the current working directory.
        package_json : Path, optional
            Project metadata file; defaults to ``root / "package.json"``.
        """
        self.root = root or Path.cwd()
        self.package_json = package_json or self.root / PACKAGE_METADATA_FILE
        self.context = GenerationContext(options=options)

    @property
    def options(self) -> GeneratorOptions:
        return self.context.options

    @property
    def references(self) -> ReferenceTable:
        return self.context.references

    def analyze(self, source: DocTagSource, module: Module) -> list[str]:
        """Record the references of one analyzed source file."""
        return collect_references(source, module, self.context.references)

    def analyze_sources(self, manifest: Manifest) -> list[str]:
        """Scan the source file of every manifest module for references.

        Modules whose ``path`` does not exist under :attr:`root` are skipped.
        Returns the tag names that received references.
        """
        recorded: list[str] = []
        for module in manifest.modules:
            if not module.path:
                continue
            source_path = self.root / module.path
            if not source_path.is_file():
                logger.debug("Skipping reference scan of missing %s", source_path)
                continue
            recorded.extend(self.analyze(JsDocTagSource.from_path(source_path), module))
        return recorded

    def build(self, manifest: Manifest) -> WebTypesDocument:
        """Build the web-types document for ``manifest`` without writing it."""
        if not self.context.package:
            self.context.package = load_package_metadata(self.package_json)
        components = select_components(manifest, self.options.exclude)
        return build_document(
            components,
            options=self.options,
            references=self.context.references,
            package=self.context.package,
        )

    def run(self, manifest: Manifest) -> Path | None:
        """Write the web-types file and update ``package.json``.

        Returns
        -------
        Path or None
            Path of the written file, or ``None`` when
            ``options.web_types_file_name`` is unset and nothing is written.
        """
        file_name = self.options.web_types_file_name
        if not file_name:
            return None
        document = self.build(manifest)
        output_path = write_web_types(
            document, outdir=self.options.outdir, file_name=file_name, root=self.root
        )
        update_package_metadata(
            self.package_json, web_types_path(self.options.outdir, file_name)
        )
        return output_path


__all__ = ["GenerationContext", "WebTypesGenerator"]
