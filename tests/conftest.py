"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_spectrum.tokens import TokenCatalog


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for token files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in token library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_spectrum" / "tokens" / "library"


@pytest.fixture
def palette() -> TokenCatalog:
    """Small mixed catalog: hex, rgb(), grays, aliases and dimensions."""
    return TokenCatalog.from_values(
        {
            "red-500": "#ff0000",
            "orange-500": "rgb(255, 128, 0)",
            "green-500": "#00ff00",
            "blue-500": "#0000ff",
            "blue-800": "rgb(2, 101, 220)",
            "gray-500": "#909090",
            "accent-color": "{blue-800}",
            "spacing-100": "8px",
        }
    )
