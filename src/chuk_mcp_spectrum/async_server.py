#!/usr/bin/env python3
"""
Async Spectrum Tokens MCP Server using chuk-mcp-server

This server exposes the Spectrum design-token dataset to MCP clients.
Tokens are loaded once at startup and shared read-only by every tool
call for the life of the server.

The server provides tools for:
- Finding tokens by hue (color name or degrees)
- Finding tokens by name substring
- Finding the tokens closest to a hex color
- Inspecting a single token's theme values
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_spectrum.tokens import LIBRARY_PATH, TokenLoader
from chuk_mcp_spectrum.tools import register_token_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVER_NAME = "chuk-mcp-spectrum"


def create_server(tokens_path: Path | None = None) -> ChukMCPServer:
    """
    Load the token dataset and build the MCP server.

    Args:
        tokens_path: Token file or directory (defaults to the built-in library)

    Returns:
        Server with all token tools registered

    Raises:
        TokenLoadError: If the dataset cannot be loaded
    """
    loader = TokenLoader(tokens_path or LIBRARY_PATH)
    catalog = loader.load()

    # Create the MCP server instance
    mcp = ChukMCPServer(SERVER_NAME)
    register_token_tools(mcp, catalog)

    logger.info("Spectrum Tokens MCP Server initialized")
    logger.info(f"  Tokens path: {loader.path}")
    logger.info(f"  Tokens loaded: {len(catalog)}")
    logger.info(f"  Themes: {', '.join(catalog.themes())}")
    return mcp
