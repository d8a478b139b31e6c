"""
Hue classification - map color names to hue angles and test tokens
against a target hue.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from chuk_mcp_spectrum.constants import (
    DEFAULT_HUE,
    DEFAULT_HUE_TOLERANCE,
    HUE_NAMES,
    MIN_SATURATION,
)
from chuk_mcp_spectrum.core.color import decode_color

if TYPE_CHECKING:
    from chuk_mcp_spectrum.models.token import Token

logger = logging.getLogger(__name__)

# Leading integer, the way parseInt reads "240", " 30" or "120deg"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def classify_hue(value: str) -> int:
    """
    Resolve a hue name or number to degrees.

    Numbers are used as-is with no range check, so "-30" and "720"
    pass through unchanged. Names are looked up case-insensitively.
    Unknown names resolve to red (0); a query for "teal" therefore
    behaves exactly like a query for "red".

    Args:
        value: Hue number ("240") or color name ("blue")

    Returns:
        Target hue in degrees
    """
    match = _LEADING_INT.match(value)
    if match:
        return int(match.group(1))

    hue = HUE_NAMES.get(value.strip().lower())
    if hue is None:
        logger.debug(f"Unknown hue name '{value}', using {DEFAULT_HUE}")
        return DEFAULT_HUE
    return hue


def hue_distance(a: float, b: float) -> float:
    """Circular distance between two hues in degrees."""
    diff = abs(a - b)
    return min(diff, 360 - diff)


def matches_hue(
    token: Token,
    target_hue: float,
    tolerance: float = DEFAULT_HUE_TOLERANCE,
) -> bool:
    """
    Check whether a token's light color is near a target hue.

    Only the light theme set is inspected. Tokens with no light value
    or a value that is not a #RRGGBB / rgb() color never match.
    Near-gray colors (saturation <= 10) never match any hue.

    Args:
        token: Token to test
        target_hue: Target hue in degrees
        tolerance: Maximum circular distance in degrees

    Returns:
        True if the token matches
    """
    rgb = decode_color(token.light_value)
    if rgb is None:
        return False

    hsl = rgb.to_hsl()
    return hue_distance(hsl.hue, target_hue) <= tolerance and hsl.saturation > MIN_SATURATION
