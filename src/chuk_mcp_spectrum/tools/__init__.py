"""
MCP tool implementations.

- tokens - Token search and inspection
"""

from chuk_mcp_spectrum.tools.tokens import register_token_tools

__all__ = [
    "register_token_tools",
]
