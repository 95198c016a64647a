"""Color parsing and formatting utilities for a11ykit."""

import re

from .color import Color, hsl_to_rgb, parse_hex

_NUMBER = r"(\d+(?:\.\d+)?)"
_ALPHA = r"(?:\s*,\s*(\d*\.?\d+)\s*(%?))?"

_RGB_PATTERN = re.compile(
    rf"^rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+){_ALPHA}\s*\)$", re.IGNORECASE
)
_HSL_PATTERN = re.compile(
    rf"^hsla?\s*\(\s*{_NUMBER}(?:deg)?\s*,\s*{_NUMBER}\s*%\s*,\s*{_NUMBER}\s*%{_ALPHA}\s*\)$",
    re.IGNORECASE,
)


def _alpha(value: str | None, percent: str | None) -> float | None:
    if value is None:
        return 1.0
    alpha = float(value) / 100 if percent else float(value)
    if not 0 <= alpha <= 1:
        return None
    return alpha


def parse_hex_color(color_str: str) -> Color | None:
    """Parse hexadecimal color format #RGB, #RGBA, #RRGGBB or #RRGGBBAA."""
    color_str = color_str.strip()
    if not color_str.startswith("#"):
        return None

    if parse_hex(color_str) is None:
        return None

    return Color(color_str)


def parse_rgb_color(color_str: str) -> Color | None:
    """Parse RGB color format rgb(R, G, B) or rgba(R, G, B, A)."""
    match = _RGB_PATTERN.match(color_str.strip())

    if not match:
        return None

    r = int(match.group(1))
    g = int(match.group(2))
    b = int(match.group(3))

    if not all(0 <= val <= 255 for val in [r, g, b]):
        return None

    alpha = _alpha(match.group(4), match.group(5))
    if alpha is None:
        return None

    color = Color({"red": r, "green": g, "blue": b})
    color.opacity = alpha
    return color


def parse_hsl_color(color_str: str) -> Color | None:
    """Parse HSL color format hsl(H, S%, L%) or hsla(H, S%, L%, A)."""
    match = _HSL_PATTERN.match(color_str.strip())

    if not match:
        return None

    h = float(match.group(1))
    s = float(match.group(2))
    lightness = float(match.group(3))

    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= lightness <= 100):
        return None

    alpha = _alpha(match.group(4), match.group(5))
    if alpha is None:
        return None

    red, green, blue = hsl_to_rgb(h, s / 100, lightness / 100)
    color = Color({"red": red, "green": green, "blue": blue})
    color.opacity = alpha
    return color


def parse_color(color_str: str) -> Color:
    """Parse color string in various formats."""
    color_str = color_str.strip()

    # Try each format
    parsers = [parse_hex_color, parse_rgb_color, parse_hsl_color]

    for parser in parsers:
        result = parser(color_str)
        if result is not None:
            return result

    raise ValueError(
        f"Invalid color format: '{color_str}'. "
        "Supported formats: #RGB, #RRGGBB, #RRGGBBAA, rgb(R,G,B), rgba(R,G,B,A), "
        "hsl(H,S%,L%), hsla(H,S%,L%,A)"
    )


def format_color_output(colors: list[Color], format_type: str = "hex") -> list[str]:
    """Format colors for output."""
    formatted: list[str] = []

    for color in colors:
        if format_type == "rgb":
            formatted.append(color.to_rgb_string() or "")
        elif format_type == "hsl":
            formatted.append(color.to_hsl_string() or "")
        else:  # hex
            formatted.append(color.hcolor or "")

    return formatted
