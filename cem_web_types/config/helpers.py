"""Utility helpers shared by the options loader."""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ

from .models import DESCRIPTION_SOURCES, DescriptionLabels, OptionsError

CAMEL_BOUNDARY_PATTERN = re.compile(r"(?<=[a-z0-9])([A-Z])")

OPTION_ALIASES: dict[str, str] = {"file_name": "web_types_file_name"}


def _snake_case(key: str) -> str:
    """Return ``key`` converted from camelCase or kebab-case to snake_case."""
    return CAMEL_BOUNDARY_PATTERN.sub(r"_\1", key).replace("-", "_").lower()


def _normalize_keys(payload: typ.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
    """Return a copy of ``payload`` keyed by snake_case option names."""
    normalized: dict[str, typ.Any] = {}
    for key, value in payload.items():
        name = _snake_case(str(key))
        normalized[OPTION_ALIASES.get(name, name)] = value
    return normalized


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_bool(key: str, value: object) -> bool:
    """Return ``value`` as a bool, rejecting anything but real booleans."""
    if isinstance(value, bool):
        return value
    msg = f"Option '{key}' must be true or false, got {value!r}."
    raise OptionsError(msg)


def _coerce_exclude(value: object | None) -> list[str]:
    """Normalize the exclusion list into a list of class names."""
    match value:
        case None:
            return []
        case str() as name:
            return [name]
        case list() | tuple():
            return [str(item) for item in value]
        case _:
            msg = f"Option 'exclude' must be a list of class names, got {value!r}."
            raise OptionsError(msg)


def _coerce_description_src(value: object | None) -> str | None:
    """Validate the description source selector."""
    source = _optional_str(value)
    if source is None:
        return None
    if source not in DESCRIPTION_SOURCES:
        choices = ", ".join(DESCRIPTION_SOURCES)
        msg = f"Option 'description_src' must be one of {choices}, got {source!r}."
        raise OptionsError(msg)
    return source


def _merge_labels(
    base: DescriptionLabels, override: typ.Mapping[str, typ.Any] | None
) -> DescriptionLabels:
    """Merge an override label mapping into the base DescriptionLabels.

    Labels that are missing or null keep their base value.
    """
    if override is None:
        return base
    if not isinstance(override, cabc.Mapping):
        msg = f"Option 'labels' must be a mapping, got {override!r}."
        raise OptionsError(msg)
    labels = _normalize_keys(override)

    def _label(key: str, default: str) -> str:
        value = labels.get(key)
        return default if value is None else str(value)

    return DescriptionLabels(
        slots=_label("slots", base.slots),
        events=_label("events", base.events),
        css_properties=_label("css_properties", base.css_properties),
        css_parts=_label("css_parts", base.css_parts),
    )


__all__ = [
    "_coerce_bool",
    "_coerce_description_src",
    "_coerce_exclude",
    "_merge_labels",
    "_normalize_keys",
    "_optional_str",
    "_snake_case",
]
