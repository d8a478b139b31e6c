"""
Token catalog - the read-only dataset shared by every query.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from chuk_mcp_spectrum.constants import ThemeSet
from chuk_mcp_spectrum.models.token import Token


class TokenCatalog(Mapping[str, Token]):
    """
    Immutable mapping of token name to Token.

    Iterates in load order. Built once at startup and passed by
    reference to the query dispatcher and tools.
    """

    def __init__(self, tokens: Mapping[str, Token] | None = None):
        self._tokens: Mapping[str, Token] = MappingProxyType(dict(tokens or {}))

    def __getitem__(self, name: str) -> Token:
        return self._tokens[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenCatalog({len(self)} tokens)"

    def themes(self) -> list[str]:
        """
        Theme set names used by any token.

        Known Spectrum themes come first in ThemeSet order; any others
        follow in first-seen order.
        """
        seen: dict[str, None] = {}
        for token in self._tokens.values():
            for theme in token.sets:
                seen.setdefault(theme, None)

        known = [theme.value for theme in ThemeSet if theme.value in seen]
        return known + [theme for theme in seen if theme not in known]

    @classmethod
    def from_values(cls, values: Mapping[str, str], theme: str = ThemeSet.LIGHT.value) -> TokenCatalog:
        """
        Build a catalog from plain name -> value pairs in one theme.

        Convenient for small fixed datasets.
        """
        return cls(
            {
                name: Token.model_validate({"name": name, "sets": {theme: {"value": value}}})
                for name, value in values.items()
            }
        )
