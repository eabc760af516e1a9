"""Load generator options from YAML or override mappings into dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _coerce_bool,
    _coerce_description_src,
    _coerce_exclude,
    _merge_labels,
    _normalize_keys,
    _optional_str,
)
from .models import DescriptionLabels, GeneratorOptions

if typ.TYPE_CHECKING:
    from pathlib import Path

_TOGGLES = (
    "slot_docs",
    "event_docs",
    "css_properties_docs",
    "css_parts_docs",
    "exclude_html",
    "exclude_css",
)


def build_options(
    overrides: typ.Mapping[str, typ.Any] | None = None,
) -> GeneratorOptions:
    """Merge caller-supplied overrides onto the built-in defaults.

    Parameters
    ----------
    overrides : Mapping[str, Any], optional
        Option values keyed by snake_case or camelCase names. Keys that do not
        name an option are ignored. ``labels`` is merged key by key onto the
        default section labels.

    Returns
    -------
    GeneratorOptions
        A new options object; nothing is shared between calls.

    Raises
    ------
    OptionsError
        If a value has the wrong shape (for example a ``description_src``
        other than ``"summary"`` or ``"description"``).
    """
    base = GeneratorOptions()
    payload = _normalize_keys(overrides or {})

    options = GeneratorOptions(
        outdir=_optional_str(payload.get("outdir")) or base.outdir,
        web_types_file_name=(
            _optional_str(payload["web_types_file_name"])
            if "web_types_file_name" in payload
            else base.web_types_file_name
        ),
        exclude=_coerce_exclude(payload.get("exclude")),
        description_src=_coerce_description_src(payload.get("description_src")),
        labels=_merge_labels(DescriptionLabels(), payload.get("labels")),
    )
    for key in _TOGGLES:
        if payload.get(key) is not None:
            setattr(options, key, _coerce_bool(key, payload[key]))
    return options


def load_options(
    path: Path, overrides: typ.Mapping[str, typ.Any] | None = None
) -> GeneratorOptions:
    """Load generator options from a YAML file.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML options file (for example,
        ``web-types.yaml``).
    overrides : Mapping[str, Any], optional
        Values applied on top of the file contents, such as CLI flags.

    Returns
    -------
    GeneratorOptions
        Options merged from defaults, the file, and ``overrides``.

    Raises
    ------
    FileNotFoundError
        If the options file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    OptionsError
        If an option value is invalid.

    Examples
    --------
    >>> from pathlib import Path
    >>> from cem_web_types.config import load_options
    >>> options = load_options(Path("web-types.yaml"))  # doctest: +SKIP
    >>> options.web_types_file_name  # doctest: +SKIP
    'web-types.json'
    """
    if not path.exists():
        msg = f"Options file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)

    raw: dict[str, typ.Any] = _normalize_keys(loaded)
    if overrides:
        raw.update(_normalize_keys(overrides))
    return build_options(raw)


__all__ = ["build_options", "load_options"]
