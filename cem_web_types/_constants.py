"""Common literal values used across cem_web_types.

These constants keep file names, schema identifiers, and metadata keys
centralized so the generator, the CLI, and tests import the same values without
drifting. Intended for internal use within the cem_web_types package.

Examples
--------
>>> from cem_web_types import _constants
>>> _constants.DEFAULT_WEB_TYPES_FILE_NAME
'web-types.json'
>>> _constants.DEFAULT_LABELS["css_parts"]
'CSS Parts'
"""

WEB_TYPES_SCHEMA = "https://json.schemastore.org/web-types"
DESCRIPTION_MARKUP = "markdown"

DEFAULT_OUTDIR = "./"
DEFAULT_WEB_TYPES_FILE_NAME = "web-types.json"
DEFAULT_MANIFEST_FILE = "custom-elements.json"

PACKAGE_METADATA_FILE = "package.json"
PACKAGE_WEB_TYPES_FIELD = "web-types"

REFERENCE_TAG = "reference"
DEFAULT_SLOT_TOKEN = "_default_"

DEFAULT_LABELS = {
    "slots": "Slots",
    "events": "Events",
    "css_properties": "CSS Properties",
    "css_parts": "CSS Parts",
}
