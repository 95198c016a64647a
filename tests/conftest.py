"""Test configuration and fixtures for a11ykit tests."""

import pytest

from a11ykit.color import Color


@pytest.fixture
def primary_hexes() -> list[str]:
    """Provide the corners of the RGB cube, lightest first."""
    return [
        "#ffffff",
        "#ffff00",
        "#ff00ff",
        "#ff0000",
        "#00ffff",
        "#00ff00",
        "#0000ff",
        "#000000",
    ]


@pytest.fixture
def primary_colors(primary_hexes: list[str]) -> list[Color]:
    """Provide the RGB cube corners as Color instances."""
    return [Color(hex_value) for hex_value in primary_hexes]


@pytest.fixture
def primary_matrix() -> dict[str, dict[str, str]]:
    """Provide the expected contrast matrix for the RGB cube corners."""
    return {
        "000000": {
            "000000": "1.00",
            "0000ff": "2.44",
            "00ff00": "15.30",
            "00ffff": "16.75",
            "ff0000": "5.25",
            "ff00ff": "6.70",
            "ffff00": "19.56",
            "ffffff": "21.00",
        },
        "0000ff": {
            "000000": "2.44",
            "0000ff": "1.00",
            "00ff00": "6.26",
            "00ffff": "6.85",
            "ff0000": "2.15",
            "ff00ff": "2.74",
            "ffff00": "8.00",
            "ffffff": "8.59",
        },
        "00ff00": {
            "000000": "15.30",
            "0000ff": "6.26",
            "00ff00": "1.00",
            "00ffff": "1.09",
            "ff0000": "2.91",
            "ff00ff": "2.29",
            "ffff00": "1.28",
            "ffffff": "1.37",
        },
        "00ffff": {
            "000000": "16.75",
            "0000ff": "6.85",
            "00ff00": "1.09",
            "00ffff": "1.00",
            "ff0000": "3.19",
            "ff00ff": "2.50",
            "ffff00": "1.17",
            "ffffff": "1.25",
        },
        "ff0000": {
            "000000": "5.25",
            "0000ff": "2.15",
            "00ff00": "2.91",
            "00ffff": "3.19",
            "ff0000": "1.00",
            "ff00ff": "1.27",
            "ffff00": "3.72",
            "ffffff": "4.00",
        },
        "ff00ff": {
            "000000": "6.70",
            "0000ff": "2.74",
            "00ff00": "2.29",
            "00ffff": "2.50",
            "ff0000": "1.27",
            "ff00ff": "1.00",
            "ffff00": "2.92",
            "ffffff": "3.14",
        },
        "ffff00": {
            "000000": "19.56",
            "0000ff": "8.00",
            "00ff00": "1.28",
            "00ffff": "1.17",
            "ff0000": "3.72",
            "ff00ff": "2.92",
            "ffff00": "1.00",
            "ffffff": "1.07",
        },
        "ffffff": {
            "000000": "21.00",
            "0000ff": "8.59",
            "00ff00": "1.37",
            "00ffff": "1.25",
            "ff0000": "4.00",
            "ff00ff": "3.14",
            "ffff00": "1.07",
            "ffffff": "1.00",
        },
    }


@pytest.fixture
def invalid_color_formats() -> list[str]:
    """Provide examples of invalid color format strings."""
    return [
        "invalid",
        "#GG0000",             # Invalid hex characters
        "#FF00F",              # Five hex digits
        "#FF0000000",          # Too long hex
        "FF0000",              # Missing # in hex
        "rgb(256, 0, 0)",      # RGB value out of range
        "rgb(-1, 0, 0)",       # Negative RGB value
        "rgb(255, 0)",         # Missing RGB component
        "rgba(0, 0, 0, 2)",    # Alpha out of range
        "hsl(361, 50%, 50%)",  # HSL hue out of range
        "hsl(180, 101%, 50%)", # HSL saturation out of range
        "hsl(180, 50%, 101%)", # HSL lightness out of range
        "",                    # Empty string
        "   ",                 # Whitespace only
    ]


@pytest.fixture
def drink_text() -> str:
    """Provide a two sentence phrase with a LIX of 36."""
    return "Drink this medicine, please. Thank you."
