"""
Token loader - reads the design-token dataset at startup.

Tokens can come from:
1. Built-in library (a Spectrum sample shipped with the package)
2. A user-supplied file or directory of JSON/YAML token files

Each file maps token names to entries in the Spectrum tokens layout:

    blue-800:
      sets:
        light: {value: "rgb(2, 101, 220)"}
        dark: {value: "rgb(64, 144, 255)"}

Any failure here is fatal to startup.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_spectrum.constants import TOKEN_FILE_SUFFIXES, ErrorMessages
from chuk_mcp_spectrum.exceptions import TokenLoadError
from chuk_mcp_spectrum.models.token import Token
from chuk_mcp_spectrum.tokens.catalog import TokenCatalog

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"


class TokenLoader:
    """
    Loads design tokens from JSON and YAML files.

    Files in a directory are read in sorted filename order; a token
    name seen in a later file replaces the earlier definition.
    """

    def __init__(self, path: Path | None = None):
        """
        Initialize the token loader.

        Args:
            path: Token file or directory (defaults to the built-in library)
        """
        self.path = path or LIBRARY_PATH

    def list_files(self) -> list[Path]:
        """List the token files that will be loaded."""
        if not self.path.exists():
            raise TokenLoadError(ErrorMessages.TOKENS_PATH_MISSING.format(path=self.path))

        if self.path.is_file():
            return [self.path]

        return sorted(
            p for p in self.path.iterdir() if p.is_file() and p.suffix.lower() in TOKEN_FILE_SUFFIXES
        )

    def load(self) -> TokenCatalog:
        """
        Load every token file into a catalog.

        Returns:
            Read-only token catalog

        Raises:
            TokenLoadError: If the path is missing, a file cannot be parsed,
                or no tokens were found
        """
        files = self.list_files()
        tokens: dict[str, Token] = {}

        for path in files:
            data = self._read_file(path)
            parsed = self._parse_tokens(data)
            logger.debug(f"Loaded {len(parsed)} tokens from {path.name}")
            tokens.update(parsed)

        if not tokens:
            raise TokenLoadError(ErrorMessages.TOKENS_EMPTY.format(path=self.path))

        logger.info(f"Loaded {len(tokens)} tokens from {len(files)} file(s) in {self.path}")
        return TokenCatalog(tokens)

    def _read_file(self, path: Path) -> dict[str, Any]:
        """Read one JSON or YAML token file."""
        file_format = TOKEN_FILE_SUFFIXES.get(path.suffix.lower(), "json")
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f) if file_format == "json" else yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise TokenLoadError(
                ErrorMessages.TOKENS_FILE_INVALID.format(path=path, reason=e)
            ) from e

        if not isinstance(data, dict):
            raise TokenLoadError(ErrorMessages.TOKENS_NOT_MAPPING.format(path=path))
        return data

    def _parse_tokens(self, data: dict[str, Any]) -> dict[str, Token]:
        """Parse token entries, skipping any that are malformed."""
        tokens: dict[str, Token] = {}
        for name, entry in data.items():
            token = self._parse_token(str(name), entry)
            if token is not None:
                tokens[token.name] = token
        return tokens

    def _parse_token(self, name: str, entry: Any) -> Token | None:
        """Parse a single token entry."""
        if not isinstance(entry, dict):
            # Bare scalar values: "gray-50": "#ffffff"
            entry = {"value": entry}

        sets = entry.get("sets") or {}
        if not isinstance(sets, dict):
            sets = {}

        try:
            return Token(
                name=name,
                sets={
                    theme: record for theme, record in sets.items() if isinstance(record, dict)
                },
                value=entry.get("value"),
                component=entry.get("component"),
                deprecated=entry.get("deprecated") or False,
            )
        except ValidationError as e:
            logger.warning(f"Skipping malformed token '{name}': {e.error_count()} error(s)")
            return None
