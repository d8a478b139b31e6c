"""
Exception hierarchy for the token query system.

Query errors are caught at the tool boundary and returned as text.
Load errors abort server startup.
"""


class SpectrumError(Exception):
    """Base class for all token server errors."""


class TokenLoadError(SpectrumError):
    """The token dataset could not be loaded."""


class QueryError(SpectrumError, ValueError):
    """A query value could not be interpreted."""


class InvalidColorError(QueryError):
    """A color query value is not a #RGB or #RRGGBB string."""
