#!/usr/bin/env python3
"""
Example: Querying Spectrum tokens.

This runs the three query kinds the MCP tool supports against the
built-in token library, without starting a server.

Usage:
    python examples/query_tokens.py
"""

from chuk_mcp_spectrum.core import decode_color
from chuk_mcp_spectrum.exceptions import QueryError
from chuk_mcp_spectrum.query import QueryDispatcher
from chuk_mcp_spectrum.tokens import TokenLoader


def main() -> None:
    """Demonstrate hue, name and color queries."""
    print("CHUK Spectrum Tokens Demo")
    print("=" * 40)
    print()

    catalog = TokenLoader().load()
    print(f"Loaded {len(catalog)} tokens, themes: {', '.join(catalog.themes())}")
    print()

    # Decode a few light values
    print("Light values as HSL:")
    for name in ("blue-800", "red-800", "gray-500", "accent-color-800"):
        value = catalog[name].light_value
        rgb = decode_color(value)
        hsl = rgb.to_hsl() if rgb else "not a color"
        print(f"  {name}: {value} -> {hsl}")
    print()

    dispatcher = QueryDispatcher(catalog)

    queries = [
        ("hue", "blue", 5),
        ("hue", "30", 5),
        ("name", "gray", 3),
        ("color", "#0265dc", 3),
        ("color", "#f50", 3),
        ("color", "blue", 3),
    ]
    for kind, value, limit in queries:
        print(f"spectrum_tokens(query={kind!r}, value={value!r}, limit={limit})")
        try:
            print(dispatcher.query(kind, value, limit=limit).render())
        except QueryError as e:
            print(f"  Error: {e}")
        print()

    print("Done! Run `chuk-mcp-spectrum` to serve these tools over MCP.")


if __name__ == "__main__":
    main()
