"""
Token tools - MCP tools for querying the design-token dataset.

Tools for searching tokens by hue, name or nearest color, and for
inspecting individual tokens and the themes in the dataset.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_spectrum.constants import DEFAULT_LIMIT, TOKEN_PREFIX, ErrorMessages
from chuk_mcp_spectrum.exceptions import QueryError
from chuk_mcp_spectrum.query import QueryDispatcher
from chuk_mcp_spectrum.tokens import TokenCatalog

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_token_tools(
    mcp: ChukMCPServer,
    catalog: TokenCatalog,
) -> dict[str, Any]:
    """
    Register token query tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The loaded token catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    dispatcher = QueryDispatcher(catalog)

    @mcp.tool  # type: ignore[arg-type]
    async def spectrum_tokens(
        query: str,
        value: str,
        limit: int = DEFAULT_LIMIT,
    ) -> str:
        """
        Search Spectrum design tokens.

        Query types:
        - hue: tokens whose light-theme color is near a hue, given as a
          color name ('red', 'orange', 'yellow', 'green', 'cyan', 'blue',
          'purple', 'magenta') or degrees ('240')
        - name: tokens whose name contains the value (case-insensitive)
        - color: tokens closest to a hex color ('#FF5500' or '#F50'),
          with a similarity percentage

        Args:
            query: Query type ('hue', 'name', 'color')
            value: Search value (e.g., 'blue', '240', '#0265dc')
            limit: Maximum number of results to return

        Returns:
            Numbered list of matching tokens, or a message if none match

        Example:
            spectrum_tokens(query="color", value="#0265dc", limit=5)
        """
        try:
            result = dispatcher.query(query, value, limit=limit)
            return result.render()
        except QueryError as e:
            return ErrorMessages.QUERY_FAILED.format(kind=query, message=e)
        except Exception as e:
            logger.exception(f"Failed to process {query} query")
            return ErrorMessages.QUERY_FAILED.format(kind=query, message=e)

    tools["spectrum_tokens"] = spectrum_tokens

    @mcp.tool  # type: ignore[arg-type]
    async def spectrum_get_token(name: str) -> str:
        """
        Get every theme value of a single token.

        Args:
            name: Token name, with or without the '--spectrum-' prefix

        Returns:
            JSON string with the token's theme sets

        Example:
            spectrum_get_token(name="blue-800")
        """
        try:
            token = catalog.get(name.removeprefix(TOKEN_PREFIX))
            if token is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TOKEN_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "token": token.to_dict()})
        except Exception as e:
            logger.exception("Failed to get token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["spectrum_get_token"] = spectrum_get_token

    @mcp.tool  # type: ignore[arg-type]
    async def spectrum_list_themes() -> str:
        """
        List the theme sets present in the dataset.

        Returns:
            JSON string with theme names and the token count

        Example:
            spectrum_list_themes()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "themes": catalog.themes(),
                    "token_count": len(catalog),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["spectrum_list_themes"] = spectrum_list_themes

    return tools
