"""
Distance ranking - order tokens by how close their color is to a target.

Distance is Euclidean in RGB space. Similarity is that distance scaled
against the largest possible RGB distance, as a 0-100 percentage.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chuk_mcp_spectrum.constants import MAX_RGB_DISTANCE
from chuk_mcp_spectrum.core.color import RGB, decode_color, round_half_up

if TYPE_CHECKING:
    from chuk_mcp_spectrum.models.token import Token


@dataclass(frozen=True)
class RankedToken:
    """A token with its distance from the target color."""

    name: str
    value: str
    distance: float

    @property
    def similarity(self) -> int:
        """Similarity percentage (100 = identical)."""
        return similarity_percent(self.distance)


def color_distance(a: RGB, b: RGB) -> float:
    """Euclidean distance between two colors in RGB space."""
    return math.sqrt(
        (a.red - b.red) ** 2 + (a.green - b.green) ** 2 + (a.blue - b.blue) ** 2
    )


def similarity_percent(distance: float) -> int:
    """
    Convert an RGB distance to a similarity percentage.

    Clamped to [0, 100]; larger distances never score higher.
    """
    percent = round_half_up((1 - distance / MAX_RGB_DISTANCE) * 100)
    return max(0, min(100, percent))


def rank_by_distance(
    target: RGB,
    tokens: Mapping[str, Token],
    limit: int,
) -> list[RankedToken]:
    """
    Rank tokens by distance from a target color.

    Every token whose light value decodes to a color is a candidate;
    the rest are skipped. Ties keep token order.

    Args:
        target: Color to compare against
        tokens: Token name -> Token
        limit: Maximum number of results

    Returns:
        Closest tokens first, at most `limit` of them
    """
    if limit < 1:
        return []

    ranked: list[RankedToken] = []
    for name, token in tokens.items():
        light_value = token.light_value
        rgb = decode_color(light_value, allow_short=True)
        if rgb is None or light_value is None:
            continue
        ranked.append(RankedToken(name=name, value=light_value, distance=color_distance(target, rgb)))

    # list.sort is stable
    ranked.sort(key=lambda r: r.distance)
    return ranked[:limit]
