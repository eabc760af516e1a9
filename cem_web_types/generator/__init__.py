"""Utilities for projecting, assembling, and writing web-types documents."""

from .assembler import build_document, build_element
from .descriptions import compose_description
from .pipeline import GenerationContext, WebTypesGenerator
from .writer import PackageMetadataError, encode_document

__all__ = [
    "GenerationContext",
    "PackageMetadataError",
    "WebTypesGenerator",
    "build_document",
    "build_element",
    "compose_description",
    "encode_document",
]
