"""
Query dispatcher - routes a token query to the matching strategy and
renders the result.

Each QueryKind has one handler. Unknown kinds are not an error; they
simply match nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from chuk_mcp_spectrum.constants import (
    DEFAULT_HUE_TOLERANCE,
    DEFAULT_LIMIT,
    TOKEN_PREFIX,
    UNKNOWN_VALUE,
    QueryKind,
    SuccessMessages,
)
from chuk_mcp_spectrum.core import classify_hue, matches_hue, parse_hex_color, rank_by_distance
from chuk_mcp_spectrum.models.token import Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenMatch:
    """A single query match, ready for display."""

    name: str
    value: str
    similarity: int | None = None  # Only set for color queries

    def render(self, index: int) -> str:
        """Render as a numbered result line."""
        line = f"{index}. {self.name}: {self.value}"
        if self.similarity is not None:
            line += f" (Match: {self.similarity}%)"
        return line


@dataclass(frozen=True)
class QueryResult:
    """The ordered matches for one query."""

    kind: str
    value: str
    matches: tuple[TokenMatch, ...] = ()

    def __len__(self) -> int:
        return len(self.matches)

    def render(self) -> str:
        """Render as the text returned to the caller."""
        if not self.matches:
            return SuccessMessages.NO_MATCHES.format(kind=self.kind, value=self.value)

        lines = [SuccessMessages.FOUND.format(count=len(self.matches)), ""]
        lines.extend(match.render(i) for i, match in enumerate(self.matches, start=1))
        return "\n".join(lines) + "\n"


def css_variable(name: str) -> str:
    """CSS custom property name for a token."""
    return f"{TOKEN_PREFIX}{name}"


class QueryDispatcher:
    """
    Answers hue, name and color queries over a token catalog.

    The dispatcher only reads the catalog. Hue and name queries scan
    tokens in catalog order and stop once `limit` matches are found;
    color queries rank every color token and keep the closest.
    """

    def __init__(self, tokens: Mapping[str, Token]):
        """
        Initialize the dispatcher.

        Args:
            tokens: Token name -> Token, shared read-only
        """
        self.tokens = tokens
        self._handlers: dict[QueryKind, Callable[[str, int, float], list[TokenMatch]]] = {
            QueryKind.HUE: self._query_hue,
            QueryKind.NAME: self._query_name,
            QueryKind.COLOR: self._query_color,
        }

    def query(
        self,
        kind: str | QueryKind,
        value: str,
        limit: int = DEFAULT_LIMIT,
        tolerance: float = DEFAULT_HUE_TOLERANCE,
    ) -> QueryResult:
        """
        Run a query.

        Args:
            kind: 'hue', 'name' or 'color'
            value: Hue name/number, name substring, or #RGB/#RRGGBB color
            limit: Maximum number of matches
            tolerance: Hue tolerance in degrees (hue queries only)

        Returns:
            Ordered matches, never more than `limit`

        Raises:
            InvalidColorError: If a color query value is not a hex color
        """
        kind_str = kind.value if isinstance(kind, QueryKind) else kind

        try:
            query_kind = QueryKind(kind_str)
        except ValueError:
            logger.debug(f"Unknown query kind '{kind_str}', no matches")
            return QueryResult(kind=kind_str, value=value)

        matches = self._handlers[query_kind](value, limit, tolerance) if limit > 0 else []
        logger.debug(f"{query_kind.value} query '{value}' matched {len(matches)} token(s)")
        return QueryResult(kind=kind_str, value=value, matches=tuple(matches))

    def _query_hue(self, value: str, limit: int, tolerance: float) -> list[TokenMatch]:
        """Tokens whose light color is within `tolerance` of a hue."""
        target_hue = classify_hue(value)
        matches: list[TokenMatch] = []

        for name, token in self.tokens.items():
            if matches_hue(token, target_hue, tolerance):
                matches.append(
                    TokenMatch(name=css_variable(name), value=token.light_value or UNKNOWN_VALUE)
                )
                if len(matches) >= limit:
                    break

        return matches

    def _query_name(self, value: str, limit: int, tolerance: float) -> list[TokenMatch]:
        """Tokens whose name contains `value`, ignoring case."""
        pattern = value.lower()
        matches: list[TokenMatch] = []

        for name, token in self.tokens.items():
            if pattern in name.lower():
                matches.append(TokenMatch(name=name, value=token.light_value or UNKNOWN_VALUE))
                if len(matches) >= limit:
                    break

        return matches

    def _query_color(self, value: str, limit: int, tolerance: float) -> list[TokenMatch]:
        """Tokens closest to a hex color, most similar first."""
        target = parse_hex_color(value)
        return [
            TokenMatch(name=css_variable(r.name), value=r.value, similarity=r.similarity)
            for r in rank_by_distance(target, self.tokens, limit)
        ]
