"""Load and validate options for web-types generation.

This subpackage merges caller overrides (from a YAML file, CLI flags, or a
plain mapping) onto built-in defaults and produces a
:class:`GeneratorOptions` dataclass that the generator consumes. Option keys
may use snake_case or the camelCase names used in JavaScript build configs.

Examples
--------
>>> from cem_web_types.config import build_options
>>> options = build_options({"slotDocs": False, "labels": {"slots": "Slots!"}})
>>> options.slot_docs
False
>>> options.labels.slots
'Slots!'
>>> options.labels.events
'Events'
"""

from .loader import build_options, load_options
from .models import (
    DESCRIPTION_SOURCES,
    DescriptionLabels,
    DescriptionSource,
    GeneratorOptions,
    OptionsError,
)

__all__ = [
    "DESCRIPTION_SOURCES",
    "DescriptionLabels",
    "DescriptionSource",
    "GeneratorOptions",
    "OptionsError",
    "build_options",
    "load_options",
]
