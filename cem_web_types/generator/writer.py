"""Write web-types documents and record them in ``package.json``.

Both writes are plain read-modify-write operations: no locking, no temporary
files. File-system errors propagate to the caller and end the run.
"""

from __future__ import annotations

import posixpath
import typing as typ

import msgspec

from cem_web_types._constants import DEFAULT_OUTDIR, PACKAGE_WEB_TYPES_FIELD

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import WebTypesDocument

JSON_INDENT = 2


class PackageMetadataError(ValueError):
    """Raised when ``package.json`` is not a JSON object."""


def _format_json(payload: object) -> bytes:
    """Encode ``payload`` as indented JSON terminated by a newline."""
    encoded = msgspec.json.encode(payload)
    return msgspec.json.format(encoded, indent=JSON_INDENT) + b"\n"


def encode_document(document: WebTypesDocument) -> bytes:
    """Serialize ``document``; equal documents give byte-identical output."""
    return _format_json(document)


def ensure_outdir(outdir: str, root: Path) -> Path:
    """Return the output directory under ``root``, creating it when needed.

    The ``"./"`` sentinel designates ``root`` itself and is never created.
    """
    target = root / outdir
    if outdir != DEFAULT_OUTDIR and not target.exists():
        target.mkdir(parents=True)
    return target


def web_types_path(outdir: str, file_name: str) -> str:
    """Return the normalized POSIX path recorded in ``package.json``."""
    return posixpath.normpath(posixpath.join(outdir, file_name))


def write_web_types(
    document: WebTypesDocument, *, outdir: str, file_name: str, root: Path
) -> Path:
    """Write ``document`` to ``root/outdir/file_name`` and return the path."""
    output_path = ensure_outdir(outdir, root) / file_name
    output_path.write_bytes(encode_document(document))
    return output_path


def load_package_metadata(path: Path) -> dict[str, typ.Any]:
    """Return the decoded ``package.json`` at ``path``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    PackageMetadataError
        If the file is not valid JSON or its top level is not an object.
    """
    if not path.exists():
        msg = f"Package metadata file '{path}' not found."
        raise FileNotFoundError(msg)
    try:
        payload = msgspec.json.decode(path.read_bytes())
    except msgspec.DecodeError as exc:
        msg = f"Package metadata file '{path}' is not valid JSON: {exc}"
        raise PackageMetadataError(msg) from exc
    if not isinstance(payload, dict):
        msg = f"Package metadata file '{path}' must contain a JSON object."
        raise PackageMetadataError(msg)
    return payload


def update_package_metadata(path: Path, web_types: str) -> dict[str, typ.Any]:
    """Point the ``web-types`` field of ``package.json`` at ``web_types``.

    Every other field keeps its value and position; a new field is appended.
    Returns the payload that was written.
    """
    payload = load_package_metadata(path)
    payload[PACKAGE_WEB_TYPES_FIELD] = web_types
    path.write_bytes(_format_json(payload))
    return payload


__all__ = [
    "PackageMetadataError",
    "encode_document",
    "ensure_outdir",
    "load_package_metadata",
    "update_package_metadata",
    "web_types_path",
    "write_web_types",
]
