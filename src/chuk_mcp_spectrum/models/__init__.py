"""
Pydantic models for the token system.

This module provides:
- Token: A named design value with per-theme values
- ThemeValue: The raw value of a token for one theme set
"""

from chuk_mcp_spectrum.models.token import ThemeValue, Token

__all__ = [
    "ThemeValue",
    "Token",
]
