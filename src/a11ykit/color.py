"""Color value type and sRGB formulas for a11ykit.

This module provides the :class:`Color` value object used by every evaluation
in the package. A color is stored canonically as 8-bit red, green and blue
channels plus an opacity in [0, 1]. Hue, saturation and lightness are views of
the same color and the hexadecimal string (``hcolor``) is a pure function of
the channels and the opacity.

A component that was never assigned is *unset* and reads as ``None``. Every
derived value (``hcolor``, ``luminance``, ``brightness``, the HSL view) reads as
``None`` while one of its inputs is unset; nothing is silently defaulted to 0.
Malformed input never raises, the assignment is ignored instead.

Key Features:
    - Construction from hex strings (3, 4, 6 or 8 digits, optional ``#``),
      RGB-like and HSL-like mappings or objects
    - Bidirectional RGB/HSL synchronisation on every mutation
    - WCAG 2.x relative luminance and APCA screen brightness
    - ``darken``/``lighten`` stepping used by the contrast search

Dependencies:
    - colour-science: RGB <-> HSL cylindrical model conversion
    - numpy: array arguments for colour-science

Example:
    >>> from a11ykit.color import Color
    >>> color = Color({"hue": 193, "saturation": "67%", "lightness": "28%"})
    >>> color.hcolor
    '#186377'
    >>> Color("#f0d").rgb
    (255, 0, 221)
"""

import logging
import math
import re
import warnings
from collections.abc import Mapping
from typing import Any, NamedTuple

import colour
import numpy as np

__all__ = [
    "APCA_COEFFICIENTS",
    "WCAG_COEFFICIENTS",
    "Coefficients",
    "Color",
    "apca_brightness",
    "composite",
    "hsl_to_rgb",
    "is_color_type",
    "parse_hex",
    "relative_luminance",
    "rgb_to_hsl",
]

logger = logging.getLogger(__name__)

RGBTuple = tuple[int, int, int]


class Coefficients(NamedTuple):
    """Per-channel weights applied to linearised sRGB values."""

    red: float
    green: float
    blue: float


WCAG_COEFFICIENTS = Coefficients(0.2126, 0.7152, 0.0722)
APCA_COEFFICIENTS = Coefficients(0.2126729, 0.7151522, 0.0721750)

_HEX_PATTERN = re.compile(r"^#?(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_HEX_DIGITS = re.compile(r"^[0-9a-f]+$", re.IGNORECASE)
_HEX_LETTERS = re.compile(r"[a-f]", re.IGNORECASE)
_HEX_BYTE = re.compile(r"^[0-9a-f]{1,2}$", re.IGNORECASE)

_RGB_KEYS = ("red", "green", "blue")
_HSL_KEYS = ("hue", "saturation", "lightness")


def _field(value: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute of an object."""
    if isinstance(value, Mapping):
        return value.get(key)
    return getattr(value, key, None)


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return True


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _to_channel(value: Any) -> int | None:
    """Coerce a number, a decimal string or a hex string to a 0-255 channel."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if _HEX_DIGITS.match(text) and _HEX_LETTERS.search(text):
            number = float(int(text, 16))
        else:
            try:
                number = float(text)
            except ValueError:
                return None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
    if not math.isfinite(number):
        return None
    return min(255, max(0, int(round(number))))


def _to_fraction(value: Any) -> float | None:
    """Coerce a fraction, a percentage string or a hex byte to [0, 1].

    Numbers whose integer part is zero are already fractional. Larger numbers
    are read as percentages, except exactly ``1`` which means fully opaque.
    Strings that start with ``0`` (and have no decimal point) or contain
    ``a-f`` are hex bytes relative to 255.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip().lower()
        if text.endswith("%"):
            try:
                number = float(text[:-1]) / 100
            except ValueError:
                return None
            if not math.isfinite(number):
                return None
            return min(1.0, max(0.0, number))
        if _HEX_BYTE.match(text) and (
            _HEX_LETTERS.search(text) or (len(text) == 2 and text.startswith("0"))
        ):
            return int(text, 16) / 255
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
    if not math.isfinite(number):
        return None
    if number > 1:
        number /= 100
    return min(1.0, max(0.0, number))


def _to_hue(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value.strip().lower().removesuffix("deg") if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number % 360


def parse_hex(value: Any) -> tuple[int, int, int, float] | None:
    """Parse a 3, 4, 6 or 8 digit hex string into ``(red, green, blue, opacity)``.

    Short forms are expanded by digit repetition (``"abc"`` -> ``"aabbcc"``).
    The optional fourth (or seventh and eighth) digits encode the opacity,
    which defaults to fully opaque. Returns ``None`` for anything else.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _HEX_PATTERN.match(text):
        return None
    digits = text.lstrip("#").lower()
    if len(digits) in (3, 4):
        digits = "".join(digit * 2 for digit in digits)
    red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    opacity = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return red, green, blue, opacity


def rgb_to_hsl(red: float, green: float, blue: float) -> tuple[float, float, float]:
    """Convert 8-bit channels to ``(hue degrees, saturation, lightness)``.

    Achromatic colors report a hue and saturation of 0.
    """
    rgb = np.array([red, green, blue], dtype=float) / 255.0
    if np.max(rgb) == np.min(rgb):
        return 0.0, 0.0, float(rgb[0])
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        hue, saturation, lightness = colour.RGB_to_HSL(rgb)
    return (float(hue) * 360) % 360, float(saturation), float(lightness)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGBTuple:
    """Convert ``(hue degrees, saturation, lightness)`` to 8-bit channels.

    Channels round half up. A saturation of 0 is true gray on every channel
    and does not go through the cylindrical model.
    """
    if saturation == 0:
        gray = min(255, max(0, _round_half_up(lightness * 255)))
        return gray, gray, gray
    hsl = np.array([(hue % 360) / 360, saturation, lightness], dtype=float)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        rgb = np.clip(colour.HSL_to_RGB(hsl), 0.0, 1.0)
    red, green, blue = (_round_half_up(float(c) * 255) for c in rgb)
    return red, green, blue


def relative_luminance(
    red: float,
    green: float,
    blue: float,
    coefficients: Coefficients = WCAG_COEFFICIENTS,
) -> float:
    """WCAG 2.x relative luminance of 0-255 channels on a 0-100 scale.

    Each channel is divided by 255 and linearised (``c / 12.92`` below
    0.03928, ``((c + 0.055) / 1.055) ** 2.4`` above) before weighting.
    Channels may be fractional, e.g. after opacity compositing.
    """

    def linearize(channel: float) -> float:
        c = channel / 255
        if c < 0.03928:
            return c / 12.92
        return ((c + 0.055) / 1.055) ** 2.4

    return (
        coefficients.red * linearize(red)
        + coefficients.green * linearize(green)
        + coefficients.blue * linearize(blue)
    ) * 100


def apca_brightness(
    red: float,
    green: float,
    blue: float,
    coefficients: Coefficients = APCA_COEFFICIENTS,
) -> float:
    """Screen luminance used by APCA: a pure 2.4 power with no linear segment."""
    return (
        coefficients.red * (red / 255) ** 2.4
        + coefficients.green * (green / 255) ** 2.4
        + coefficients.blue * (blue / 255) ** 2.4
    )


def composite(foreground: "Color", background: "Color") -> tuple[float, float, float] | None:
    """Alpha-composite ``foreground`` over an opaque ``background``.

    Returns fractional channels, ``(1 - a) * bg + a * fg`` per channel, or
    ``None`` if either color is unset.
    """
    fg, bg = foreground.rgb, background.rgb
    if fg is None or bg is None:
        return None
    alpha = foreground.opacity
    red, green, blue = ((1 - alpha) * b + alpha * f for f, b in zip(fg, bg))
    return red, green, blue


def is_color_type(value: Any) -> bool:
    """Return True if ``value`` is a hex string, an RGB-like or an HSL-like value."""
    if isinstance(value, str):
        return bool(_HEX_PATTERN.match(value.strip()))
    if value is None:
        return False
    if all(_is_present(_field(value, key)) for key in _RGB_KEYS):
        return True
    return all(_is_present(_field(value, key)) for key in _HSL_KEYS)


class Color:
    """One sRGB color with opacity.

    Args:
        value: A hex string, an RGB-like or HSL-like mapping or object (an
            optional ``opacity`` is honoured), another :class:`Color` (copied)
            or ``None``. Values matching none of these leave the color unset.
        name: Optional label, defaults to the hex value without ``#``.

    Examples:
        >>> Color({"red": 24, "green": 98, "blue": 118}).hue
        193
        >>> Color("#fff6").opacity
        0.4
        >>> Color({"hue": 10, "lightness": 0.28}).red is None
        True
    """

    def __init__(self, value: Any = None, name: str | None = None) -> None:
        self._red: int | None = None
        self._green: int | None = None
        self._blue: int | None = None
        self._opacity: float | None = None
        self._name: str | None = None
        # HSL as last assigned, and the RGB it produced. Only trusted while the
        # stored channels still equal _hsl_source.
        self._hsl: list[float | None] = [None, None, None]
        self._hsl_source: RGBTuple | None = None

        self._init(value)
        if name:
            self._name = name

    def _init(self, value: Any) -> None:
        if value is None:
            return
        if isinstance(value, Color):
            self._red, self._green, self._blue = value._red, value._green, value._blue
            self._opacity = value._opacity
            self._name = value._name
            self._hsl = list(value._hsl)
            self._hsl_source = value._hsl_source
            return
        if isinstance(value, str):
            self.hcolor = value
            return

        channels = [_to_channel(_field(value, key)) for key in _RGB_KEYS]
        if None not in channels:
            self._set_rgb(channels[0], channels[1], channels[2])
        else:
            hue = _to_hue(_field(value, "hue"))
            saturation = _to_fraction(_field(value, "saturation"))
            lightness = _to_fraction(_field(value, "lightness"))
            if hue is None and saturation is None and lightness is None:
                logger.debug("Not a color: %r", value)
                return
            self._assign_hsl(hue, saturation, lightness)

        opacity = _field(value, "opacity")
        if opacity is not None:
            self.opacity = opacity
        label = _field(value, "name") or _field(value, "label")
        if isinstance(label, str) and label:
            self._name = label

    # canonical state

    def _set_rgb(self, red: int | None, green: int | None, blue: int | None) -> None:
        self._red, self._green, self._blue = red, green, blue
        self._hsl = [None, None, None]
        self._hsl_source = None

    def _set_channel(self, index: int, value: Any) -> None:
        channel = _to_channel(value)
        if channel is None:
            logger.debug("Ignoring invalid %s value %r", _RGB_KEYS[index], value)
            return
        channels = [self._red, self._green, self._blue]
        channels[index] = channel
        self._set_rgb(*channels)

    def _hsl_components(self) -> tuple[float | None, float | None, float | None]:
        rgb = self.rgb
        if rgb is None:
            return self._hsl[0], self._hsl[1], self._hsl[2]
        if rgb == self._hsl_source and None not in self._hsl:
            return self._hsl[0], self._hsl[1], self._hsl[2]
        return rgb_to_hsl(*rgb)

    def _assign_hsl(
        self,
        hue: float | None = None,
        saturation: float | None = None,
        lightness: float | None = None,
    ) -> None:
        current = self._hsl_components()
        components = [
            current[0] if hue is None else hue,
            current[1] if saturation is None else saturation,
            current[2] if lightness is None else lightness,
        ]
        self._hsl = components
        if None in components:
            return
        rgb = hsl_to_rgb(components[0], components[1], components[2])
        self._red, self._green, self._blue = rgb
        self._hsl_source = rgb

    # RGB view

    @property
    def red(self) -> int | None:
        return self._red

    @red.setter
    def red(self, value: Any) -> None:
        self._set_channel(0, value)

    @property
    def green(self) -> int | None:
        return self._green

    @green.setter
    def green(self, value: Any) -> None:
        self._set_channel(1, value)

    @property
    def blue(self) -> int | None:
        return self._blue

    @blue.setter
    def blue(self, value: Any) -> None:
        self._set_channel(2, value)

    @property
    def rgb(self) -> RGBTuple | None:
        """The ``(red, green, blue)`` triple, or ``None`` unless all are set."""
        if self._red is None or self._green is None or self._blue is None:
            return None
        return self._red, self._green, self._blue

    @property
    def is_set(self) -> bool:
        return self.rgb is not None

    # HSL view

    @property
    def hue(self) -> int | None:
        """Hue in whole degrees, 0-359."""
        hue = self._hsl_components()[0]
        if hue is None:
            return None
        return int(round(hue)) % 360

    @hue.setter
    def hue(self, value: Any) -> None:
        hue = _to_hue(value)
        if hue is None:
            logger.debug("Ignoring invalid hue value %r", value)
            return
        self._assign_hsl(hue=hue)

    @property
    def saturation(self) -> float | None:
        """Saturation as a fraction rounded to two places (a whole percent)."""
        saturation = self._hsl_components()[1]
        return None if saturation is None else round(saturation, 2)

    @saturation.setter
    def saturation(self, value: Any) -> None:
        saturation = _to_fraction(value)
        if saturation is None:
            logger.debug("Ignoring invalid saturation value %r", value)
            return
        self._assign_hsl(saturation=saturation)

    @property
    def lightness(self) -> float | None:
        """Lightness as a fraction rounded to two places (a whole percent)."""
        lightness = self._hsl_components()[2]
        return None if lightness is None else round(lightness, 2)

    @lightness.setter
    def lightness(self, value: Any) -> None:
        lightness = _to_fraction(value)
        if lightness is None:
            logger.debug("Ignoring invalid lightness value %r", value)
            return
        self._assign_hsl(lightness=lightness)

    @property
    def hsl(self) -> tuple[int, float, float] | None:
        hue, saturation, lightness = self.hue, self.saturation, self.lightness
        if hue is None or saturation is None or lightness is None:
            return None
        return hue, saturation, lightness

    # opacity and hex

    @property
    def opacity(self) -> float:
        """Fraction of the background blocked by this color, 1.0 unless assigned."""
        return 1.0 if self._opacity is None else self._opacity

    @opacity.setter
    def opacity(self, value: Any) -> None:
        opacity = _to_fraction(value)
        if opacity is None:
            logger.debug("Ignoring invalid opacity value %r", value)
            return
        self._opacity = opacity

    @property
    def hcolor(self) -> str | None:
        """``#rrggbb``, or ``#rrggbbaa`` when the color is translucent."""
        rgb = self.rgb
        if rgb is None:
            return None
        text = "#" + "".join(f"{channel:02x}" for channel in rgb)
        alpha = _round_half_up(self.opacity * 255)
        if alpha < 255:
            text += f"{alpha:02x}"
        return text

    @hcolor.setter
    def hcolor(self, value: Any) -> None:
        parsed = parse_hex(value)
        if parsed is None:
            logger.debug("Ignoring invalid hex color %r", value)
            return
        red, green, blue, opacity = parsed
        self._set_rgb(red, green, blue)
        self._opacity = opacity

    @property
    def name(self) -> str | None:
        if self._name:
            return self._name
        hcolor = self.hcolor
        return None if hcolor is None else hcolor.lstrip("#")

    @name.setter
    def name(self, value: str | None) -> None:
        if value:
            self._name = value

    # luminance

    @property
    def luminance(self) -> float | None:
        """WCAG relative luminance, 0-100.

        See https://www.w3.org/TR/WCAG20/#relativeluminancedef
        """
        rgb = self.rgb
        if rgb is None:
            return None
        return relative_luminance(*rgb)

    @property
    def brightness(self) -> float | None:
        """APCA screen luminance, 0-1. Not used by WCAG 2.x."""
        rgb = self.rgb
        if rgb is None:
            return None
        return apca_brightness(*rgb)

    @property
    def can_darken(self) -> bool:
        """True while the luminance is above 0, i.e. some channel is above 0."""
        rgb = self.rgb
        return rgb is not None and any(channel > 0 for channel in rgb)

    @property
    def can_lighten(self) -> bool:
        """True while the luminance is below 100, i.e. some channel is below 255."""
        rgb = self.rgb
        return rgb is not None and any(channel < 255 for channel in rgb)

    # mutation

    def darken(self, degree: int = 1) -> "Color":
        """Subtract ``degree`` from every channel, stopping at 0.

        An unset color starts from black.
        """
        step = degree or 1
        red, green, blue = self.rgb or (0, 0, 0)
        self._set_rgb(max(0, red - step), max(0, green - step), max(0, blue - step))
        return self

    def lighten(self, degree: int = 1) -> "Color":
        """Add ``degree`` to every channel, stopping at 255.

        An unset color starts from white.
        """
        step = degree or 1
        red, green, blue = self.rgb or (255, 255, 255)
        self._set_rgb(min(255, red + step), min(255, green + step), min(255, blue + step))
        return self

    def copy(self) -> "Color":
        return Color(self)

    @staticmethod
    def is_color_type(value: Any) -> bool:
        return is_color_type(value)

    def to_rgb_string(self) -> str | None:
        rgb = self.rgb
        if rgb is None:
            return None
        if self.opacity < 1:
            return f"rgba({rgb[0]}, {rgb[1]}, {rgb[2]}, {self.opacity:.2f})"
        return f"rgb({rgb[0]}, {rgb[1]}, {rgb[2]})"

    def to_hsl_string(self) -> str | None:
        hsl = self.hsl
        if hsl is None:
            return None
        hue, saturation, lightness = hsl
        if self.opacity < 1:
            return (
                f"hsla({hue}, {round(saturation * 100)}%, {round(lightness * 100)}%, "
                f"{self.opacity:.2f})"
            )
        return f"hsl({hue}, {round(saturation * 100)}%, {round(lightness * 100)}%)"

    def toString(self) -> str | None:  # noqa: N802
        return self.hcolor

    # camelCase aliases
    canDarken = can_darken
    canLighten = can_lighten
    isColorType = is_color_type

    def __str__(self) -> str:
        return self.hcolor or ""

    def __repr__(self) -> str:
        hcolor = self.hcolor
        return f"Color({hcolor!r})" if hcolor else "Color()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgb == other.rgb and self.opacity == other.opacity

    __hash__ = None  # type: ignore[assignment]
