"""
Core color primitives - the matching engine.

- RGB / HSL: Color triples and conversion
- decode_color: Token value codec (hex and rgb() notation)
- classify_hue / matches_hue: Hue lookup and tolerance test
- rank_by_distance: Nearest-color ranking with similarity scores
"""

from chuk_mcp_spectrum.core.color import (
    HSL,
    RGB,
    decode_color,
    expand_short_hex,
    parse_hex_color,
    round_half_up,
)
from chuk_mcp_spectrum.core.distance import (
    RankedToken,
    color_distance,
    rank_by_distance,
    similarity_percent,
)
from chuk_mcp_spectrum.core.hue import classify_hue, hue_distance, matches_hue

__all__ = [
    # Color
    "HSL",
    "RGB",
    "decode_color",
    "expand_short_hex",
    "parse_hex_color",
    "round_half_up",
    # Hue
    "classify_hue",
    "hue_distance",
    "matches_hue",
    # Distance
    "RankedToken",
    "color_distance",
    "rank_by_distance",
    "similarity_percent",
]
