"""
Constants and enums for the token query system.

No magic strings - use enums and Literal types for constrained values.
"""

import math
from enum import Enum
from typing import Literal


class QueryKind(str, Enum):
    """Lookup modes supported by the token query tool."""

    HUE = "hue"  # Tokens whose light color sits near a hue angle
    NAME = "name"  # Tokens whose name contains a substring
    COLOR = "color"  # Tokens closest to a hex color


class ThemeSet(str, Enum):
    """Theme sets found in Spectrum token data, in display order."""

    LIGHT = "light"
    DARK = "dark"
    DARKEST = "darkest"
    WIREFRAME = "wireframe"


# Named hues in degrees on the HSL color wheel
HUE_NAMES: dict[str, int] = {
    "red": 0,
    "orange": 30,
    "yellow": 60,
    "green": 120,
    "cyan": 180,
    "blue": 240,
    "purple": 270,
    "magenta": 300,
}

# Unknown hue names fall back to red
DEFAULT_HUE = HUE_NAMES["red"]

# Query defaults
DEFAULT_LIMIT = 10
DEFAULT_HUE_TOLERANCE = 30
MIN_SATURATION = 10  # Exclusive; grays never match a hue

# Largest Euclidean distance between two 8-bit RGB colors
MAX_RGB_DISTANCE = math.sqrt(3 * 255**2)

# Prefix for CSS custom property names
TOKEN_PREFIX = "--spectrum-"

# Shown for name matches that have no light value
UNKNOWN_VALUE = "unknown"

# Token file formats the loader understands
TokenFileFormat = Literal["json", "yaml"]
TOKEN_FILE_SUFFIXES: dict[str, TokenFileFormat] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class ErrorMessages:
    """Standardized error messages."""

    INVALID_COLOR = "Invalid color format. Please use #RGB or #RRGGBB format."
    QUERY_FAILED = "Error processing {kind} query: {message}"
    TOKEN_NOT_FOUND = "Token not found: {name}"
    TOKENS_PATH_MISSING = "Tokens path does not exist: {path}"
    TOKENS_FILE_INVALID = "Could not read token file {path}: {reason}"
    TOKENS_NOT_MAPPING = "Token file {path} must contain a mapping of token names"
    TOKENS_EMPTY = "No tokens found in {path}"


class SuccessMessages:
    """Standardized result messages."""

    FOUND = "Found {count} matching tokens:"
    NO_MATCHES = "No tokens found matching {kind} = {value}"
