"""
Token queries - dispatch by query kind and render matches.
"""

from chuk_mcp_spectrum.query.dispatcher import (
    QueryDispatcher,
    QueryResult,
    TokenMatch,
    css_variable,
)

__all__ = [
    "QueryDispatcher",
    "QueryResult",
    "TokenMatch",
    "css_variable",
]
