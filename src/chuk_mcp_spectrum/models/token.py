"""
Token model - named design values with per-theme representations.

A Token maps theme-set names ("light", "dark", ...) to value records.
Tokens that carry a single value and no sets keep it in `value`.
Only color-bearing values take part in matching; everything else is
carried along untouched.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_spectrum.constants import ThemeSet


def _coerce_value(v: Any) -> str | None:
    """Keep raw values as strings; numbers and booleans are stringified."""
    if v is None or isinstance(v, str):
        return v
    if isinstance(v, (int, float, bool)):
        return str(v)
    raise ValueError(f"Unsupported token value: {v!r}")


class ThemeValue(BaseModel):
    """A token's raw value for one theme set."""

    value: str | None = Field(None, description="Raw value (e.g., '#0265dc', 'rgb(2, 101, 220)')")
    uuid: str | None = Field(None, description="Stable token identifier, if provided")

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> str | None:
        return _coerce_value(v)


class Token(BaseModel):
    """
    A design token.

    Read-only once loaded; queries derive colors from it but never
    write anything back.
    """

    name: str = Field(..., description="Token identifier (e.g., 'blue-500')")
    sets: dict[str, ThemeValue] = Field(
        default_factory=dict,
        description="Theme set name -> value record",
    )
    value: str | None = Field(None, description="Value for tokens without theme sets")
    component: str | None = Field(None, description="Owning component, if any")
    deprecated: bool = Field(False, description="Whether the token is deprecated")

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> str | None:
        return _coerce_value(v)

    def theme_value(self, theme: str | ThemeSet) -> str | None:
        """Get the raw value for a theme set, or None if absent."""
        theme_str = theme.value if isinstance(theme, ThemeSet) else theme
        record = self.sets.get(theme_str)
        if record is None:
            return None
        return record.value

    @property
    def light_value(self) -> str | None:
        """Raw value of the light theme set."""
        return self.theme_value(ThemeSet.LIGHT)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for tool responses."""
        data: dict[str, Any] = {
            "name": self.name,
            "sets": {theme: record.value for theme, record in self.sets.items()},
        }
        if self.value is not None:
            data["value"] = self.value
        if self.component is not None:
            data["component"] = self.component
        if self.deprecated:
            data["deprecated"] = True
        return data
