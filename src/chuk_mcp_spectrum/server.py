#!/usr/bin/env python3
"""
Entry point for the Spectrum Tokens MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="Spectrum Tokens MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--tokens",
        type=Path,
        default=None,
        help="Token file or directory of JSON/YAML token files (default: built-in library)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing to avoid issues
    from chuk_mcp_spectrum.async_server import create_server
    from chuk_mcp_spectrum.exceptions import TokenLoadError

    try:
        mcp = create_server(args.tokens)
    except TokenLoadError as e:
        logger.error(f"Failed to initialize MCP server: {e}")
        sys.exit(1)

    if args.transport == "stdio":
        logger.info("Starting Spectrum Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting Spectrum Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
