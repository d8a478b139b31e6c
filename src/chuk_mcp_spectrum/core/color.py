"""
Color primitives - RGB, HSL and the token value codec.

Token values arrive as raw strings in several encodings. The codec
recognizes hex (#RRGGBB, optionally #RGB) and rgb()/rgba() functional
notation; anything else is "not a color" and decodes to None.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from dataclasses import dataclass

from chuk_mcp_spectrum.constants import ErrorMessages
from chuk_mcp_spectrum.exceptions import InvalidColorError

_HEX_LONG = re.compile(r"#([0-9a-fA-F]{6})")
_HEX_SHORT = re.compile(r"#([0-9a-fA-F]{3})")
_RGB_FUNCTION = re.compile(r"rgba?\(\s*(\d+),\s*(\d+),\s*(\d+)", re.IGNORECASE | re.ASCII)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class HSL:
    """
    A color in HSL space.

    Hue is in degrees [0, 360). Saturation and lightness are
    percentages [0, 100].
    """

    hue: int
    saturation: int
    lightness: int

    def __str__(self) -> str:
        return f"hsl({self.hue}, {self.saturation}%, {self.lightness}%)"


@dataclass(frozen=True)
class RGB:
    """
    A color as three 8-bit channels.

    Immutable and hashable. Derived from token values, never stored
    back onto a token.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"RGB channel must be 0-255, got {channel}")

    def __iter__(self) -> Iterator[int]:
        return iter((self.red, self.green, self.blue))

    def __str__(self) -> str:
        return f"rgb({self.red}, {self.green}, {self.blue})"

    def to_hex(self) -> str:
        """Render as a lowercase #rrggbb string."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_hsl(self) -> HSL:
        """
        Convert to HSL.

        Uses the conventional max/min/chroma formulas with the piecewise
        hue sector rule. Components are rounded half-up to integers, so
        hue comparisons see the same values as common color converters.
        """
        r, g, b = self.red / 255, self.green / 255, self.blue / 255
        high = max(r, g, b)
        low = min(r, g, b)
        delta = high - low

        if delta == 0:
            hue = 0.0
        elif high == r:
            hue = (g - b) / delta
        elif high == g:
            hue = 2 + (b - r) / delta
        else:
            hue = 4 + (r - g) / delta

        hue = min(hue * 60, 360)
        if hue < 0:
            hue += 360

        lightness = (low + high) / 2

        if delta == 0:
            saturation = 0.0
        elif lightness <= 0.5:
            saturation = delta / (high + low)
        else:
            saturation = delta / (2 - high - low)

        return HSL(
            hue=round_half_up(hue) % 360,
            saturation=round_half_up(saturation * 100),
            lightness=round_half_up(lightness * 100),
        )

    @classmethod
    def from_hex(cls, digits: str) -> RGB:
        """Build from six hex digits (no leading #)."""
        return cls(
            int(digits[0:2], 16),
            int(digits[2:4], 16),
            int(digits[4:6], 16),
        )


def expand_short_hex(value: str) -> str:
    """Expand #RGB to #RRGGBB by doubling each digit."""
    return "#" + "".join(c * 2 for c in value[1:])


def decode_color(value: str | None, allow_short: bool = False) -> RGB | None:
    """
    Decode a raw token value to RGB.

    Args:
        value: Raw value string from a token
        allow_short: Also accept the 3-digit #RGB form

    Returns:
        RGB if the value is a recognized color, None otherwise
    """
    if not value:
        return None

    if value.startswith("#"):
        if allow_short and _HEX_SHORT.fullmatch(value):
            value = expand_short_hex(value)
        match = _HEX_LONG.fullmatch(value)
        if match is None:
            return None
        return RGB.from_hex(match.group(1))

    if value[:3].lower() == "rgb":
        match = _RGB_FUNCTION.match(value)
        if match is None:
            return None
        channels = [int(group) for group in match.groups()]
        if any(channel > 255 for channel in channels):
            return None
        return RGB(*channels)

    return None


def parse_hex_color(value: str) -> RGB:
    """
    Parse a user-supplied #RGB or #RRGGBB color.

    Raises:
        InvalidColorError: If the value is in any other form
    """
    if not (_HEX_LONG.fullmatch(value) or _HEX_SHORT.fullmatch(value)):
        raise InvalidColorError(ErrorMessages.INVALID_COLOR)

    rgb = decode_color(value, allow_short=True)
    if rgb is None:
        raise InvalidColorError(ErrorMessages.INVALID_COLOR)
    return rgb
