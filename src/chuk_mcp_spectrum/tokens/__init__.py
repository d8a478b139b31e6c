"""
Design-token dataset - loading and the read-only catalog.

The catalog is loaded once at startup and shared, unchanged, by every
query for the life of the server.
"""

from chuk_mcp_spectrum.tokens.catalog import TokenCatalog
from chuk_mcp_spectrum.tokens.loader import LIBRARY_PATH, TokenLoader

__all__ = [
    "LIBRARY_PATH",
    "TokenCatalog",
    "TokenLoader",
]
