"""Generate JetBrains web-types from a Custom Elements Manifest.

This package exposes the CLI entry point used by the ``web-types`` console
script together with the generator used by build tooling that already holds
a decoded manifest.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``WebTypesGenerator``: Analysis and generation pipeline for one run.
- ``build_options``: Merge option overrides onto the defaults.

Examples
--------
>>> from cem_web_types import main
>>> main()  # doctest: +SKIP
>>> from cem_web_types import build_options
>>> build_options({"outdir": "dist"}).outdir
'dist'
"""

from __future__ import annotations

from .cli import app, main
from .config import build_options
from .generator import WebTypesGenerator

__all__ = ["WebTypesGenerator", "app", "build_options", "main"]
