"""
Tests for color primitives.

Tests cover:
- RGB and HSL types
- Token value codec (hex and rgb() notation)
- RGB to HSL conversion
- Hex input parsing for color queries
"""

import pytest

from chuk_mcp_spectrum.core import (
    HSL,
    RGB,
    decode_color,
    expand_short_hex,
    parse_hex_color,
    round_half_up,
)
from chuk_mcp_spectrum.exceptions import InvalidColorError, QueryError


class TestRGB:
    """Tests for the RGB type."""

    def test_channels(self) -> None:
        """Channels are stored as given."""
        rgb = RGB(2, 101, 220)
        assert rgb.red == 2
        assert rgb.green == 101
        assert rgb.blue == 220
        assert tuple(rgb) == (2, 101, 220)

    def test_rejects_out_of_range(self) -> None:
        """Channels must be 8-bit."""
        with pytest.raises(ValueError):
            RGB(256, 0, 0)
        with pytest.raises(ValueError):
            RGB(0, -1, 0)

    def test_to_hex(self) -> None:
        """Renders as lowercase #rrggbb."""
        assert RGB(255, 85, 0).to_hex() == "#ff5500"
        assert RGB(0, 0, 0).to_hex() == "#000000"

    def test_str(self) -> None:
        """String form is rgb() notation."""
        assert str(RGB(1, 2, 3)) == "rgb(1, 2, 3)"

    def test_hashable(self) -> None:
        """Equal colors hash equally."""
        assert len({RGB(1, 2, 3), RGB(1, 2, 3)}) == 1


class TestDecodeHex:
    """Tests for hex token values."""

    def test_six_digit(self) -> None:
        """Six hex digits give three channels."""
        assert decode_color("#ff5500") == RGB(255, 85, 0)

    def test_uppercase(self) -> None:
        """Hex digits are case-insensitive."""
        assert decode_color("#FF5500") == RGB(255, 85, 0)

    def test_short_form_rejected_by_default(self) -> None:
        """Three-digit hex is not a color on the strict path."""
        assert decode_color("#f50") is None

    def test_short_form_expanded(self) -> None:
        """#f50 and #ff5500 decode identically when short form is allowed."""
        assert decode_color("#f50", allow_short=True) == decode_color("#ff5500")
        assert expand_short_hex("#f50") == "#ff5500"

    def test_other_lengths(self) -> None:
        """Only 6 digits (or 3 when allowed) are accepted."""
        assert decode_color("#12345") is None
        assert decode_color("#ff550080") is None
        assert decode_color("#ff55", allow_short=True) is None

    def test_invalid_digits(self) -> None:
        """Non-hex characters are not a color."""
        assert decode_color("#gg0000") is None


class TestDecodeRgbFunction:
    """Tests for rgb()/rgba() token values."""

    def test_rgb(self) -> None:
        """rgb() with spaces after commas."""
        assert decode_color("rgb(2, 101, 220)") == RGB(2, 101, 220)

    def test_rgb_without_spaces(self) -> None:
        """rgb() with no spaces."""
        assert decode_color("rgb(2,101,220)") == RGB(2, 101, 220)

    def test_rgba_ignores_alpha(self) -> None:
        """Alpha channel is dropped."""
        assert decode_color("rgba(0, 0, 0, 0.25)") == RGB(0, 0, 0)

    def test_case_insensitive(self) -> None:
        """Function name is case-insensitive."""
        assert decode_color("RGB(10, 20, 30)") == RGB(10, 20, 30)
        assert decode_color("Rgba(10, 20, 30, 1)") == RGB(10, 20, 30)

    def test_space_after_paren(self) -> None:
        """Whitespace is allowed after the opening paren."""
        assert decode_color("rgb( 10, 20, 30)") == RGB(10, 20, 30)

    def test_channel_out_of_range(self) -> None:
        """Channels above 255 are not a color."""
        assert decode_color("rgb(300, 0, 0)") is None

    def test_malformed(self) -> None:
        """Missing channels are not a color."""
        assert decode_color("rgb(10, 20)") is None
        assert decode_color("rgb(a, b, c)") is None

    def test_non_ascii_digits(self) -> None:
        """Only ASCII digits count as channel values."""
        assert decode_color("rgb(\u0661\u0660, 20, 30)") is None


class TestDecodeNotAColor:
    """Values that are not colors decode to None."""

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "red",
            "{blue-800}",
            "8px",
            "linear-gradient(#fff, #000)",
            "hsl(240, 100%, 50%)",
            " #ff0000",
            "#ff0000 ",
            "#ff0000\n",
        ],
    )
    def test_not_a_color(self, value) -> None:
        """Unrecognized encodings never raise."""
        assert decode_color(value) is None


class TestToHSL:
    """Tests for RGB to HSL conversion."""

    def test_primaries(self) -> None:
        """Pure primaries sit at 0, 120 and 240 degrees."""
        assert RGB(255, 0, 0).to_hsl() == HSL(0, 100, 50)
        assert RGB(0, 255, 0).to_hsl() == HSL(120, 100, 50)
        assert RGB(0, 0, 255).to_hsl() == HSL(240, 100, 50)

    def test_achromatic(self) -> None:
        """Grays have zero hue and saturation."""
        assert RGB(255, 255, 255).to_hsl() == HSL(0, 0, 100)
        assert RGB(0, 0, 0).to_hsl() == HSL(0, 0, 0)
        assert RGB(144, 144, 144).to_hsl() == HSL(0, 0, 56)

    def test_mixed_color(self) -> None:
        """A Spectrum blue converts with rounded components."""
        assert RGB(2, 101, 220).to_hsl() == HSL(213, 98, 44)

    def test_light_color_saturation(self) -> None:
        """Lightness above 50% uses the upper saturation formula."""
        hsl = RGB(255, 128, 128).to_hsl()
        assert hsl.hue == 0
        assert hsl.saturation == 100
        assert hsl.lightness == 75

    def test_hue_wraps_below_360(self) -> None:
        """A hue that rounds to 360 wraps to 0."""
        hsl = RGB(255, 0, 1).to_hsl()
        assert hsl.hue == 0

    def test_hue_range(self) -> None:
        """Hue is always in [0, 360)."""
        for rgb in (RGB(255, 0, 128), RGB(128, 0, 255), RGB(1, 2, 3), RGB(250, 5, 10)):
            assert 0 <= rgb.to_hsl().hue < 360

    @pytest.mark.parametrize("value", ["#0265dc", "#d73220", "#007a4d", "#8640e4", "#ca2996"])
    def test_hue_stable_through_hex(self, value) -> None:
        """Decoding, re-encoding and decoding again keeps the hue."""
        rgb = decode_color(value)
        again = decode_color(rgb.to_hex())
        assert again == rgb
        assert again.to_hsl().hue == rgb.to_hsl().hue

    def test_str(self) -> None:
        """String form is hsl() notation."""
        assert str(HSL(213, 98, 44)) == "hsl(213, 98%, 44%)"


class TestRoundHalfUp:
    """Tests for rounding."""

    def test_halves_round_up(self) -> None:
        """Halves go up, not to even."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0

    def test_nearest(self) -> None:
        """Other values round to nearest."""
        assert round_half_up(43.4) == 43
        assert round_half_up(43.6) == 44


class TestParseHexColor:
    """Tests for color query input."""

    def test_long_form(self) -> None:
        """#RRGGBB parses."""
        assert parse_hex_color("#FF5500") == RGB(255, 85, 0)

    def test_short_form(self) -> None:
        """#RGB expands."""
        assert parse_hex_color("#f50") == RGB(255, 85, 0)

    @pytest.mark.parametrize(
        "value",
        ["blue", "ff5500", "#ff55", "#ff550080", "rgb(1, 2, 3)", "", " #fff", "#fff ", "#ff5500\n"],
    )
    def test_invalid(self, value) -> None:
        """Anything else raises with a descriptive message."""
        with pytest.raises(InvalidColorError, match="#RGB or #RRGGBB"):
            parse_hex_color(value)

    def test_error_hierarchy(self) -> None:
        """Invalid color errors are query errors and value errors."""
        with pytest.raises(QueryError):
            parse_hex_color("blue")
        with pytest.raises(ValueError):
            parse_hex_color("blue")
