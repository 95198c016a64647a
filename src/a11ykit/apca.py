"""APCA perceptual contrast for a11ykit.

The Accessible Perceptual Contrast Algorithm scores a text/background pair as a
lightness contrast ``Lc`` rather than a luminance ratio. Unlike the WCAG 2.x
ratio it is polarity aware: dark text on a light background scores positive,
light text on a dark background scores negative, and the two polarities use
different power curves.

Scoring steps:
    1. Composite a translucent foreground over the background.
    2. Take the APCA screen brightness of both colors (pure 2.4 power,
       finer-grained channel weights).
    3. Soft-clamp near-black brightness on the side that needs it.
    4. Apply the polarity's power curves, scale by 1.14.
    5. Clamp tiny results to 0, scale down low-contrast results, offset the
       rest, then scale to 0-100ish and round to three places.

The minimum usable ``Lc`` for a font depends on its size and weight; the lookup
table here is the May 28 2022 APCA font table.

See https://git.apcacontrast.com/documentation/WhyAPCA
"""

import logging
from typing import Any, NamedTuple

from .color import Color, _field, apca_brightness, composite, is_color_type

__all__ = ["APCA", "DARKNESS", "FONT_MINIMUMS", "FONT_WEIGHTS", "POWER_CURVES", "PowerCurve"]

logger = logging.getLogger(__name__)


class Darkness(NamedTuple):
    threshold: float
    exponent: float


class PowerCurve(NamedTuple):
    """Exponents and low-contrast correction for one polarity."""

    background: float
    foreground: float
    low_threshold: float
    low_factor: float
    low_offset: float


DARKNESS = Darkness(threshold=0.022, exponent=1.414)

POWER_CURVES: dict[str, PowerCurve] = {
    "normal": PowerCurve(
        background=0.56,
        foreground=0.57,
        low_threshold=0.035991,
        low_factor=27.7847239587675,
        low_offset=0.027,
    ),
    "reverse": PowerCurve(
        background=0.65,
        foreground=0.62,
        low_threshold=0.035991,
        low_factor=27.7847239587675,
        low_offset=0.027,
    ),
}

SCALE = 1.14
CLAMP = 0.001
PRECISION = 3

FONT_WEIGHTS = (100, 200, 300, 400, 500, 600, 700, 800, 900)

# Minimum Lc per font weight 100..900; None means the weight is not usable at
# that size.
FONT_MINIMUMS: dict[str, tuple[int | None, ...]] = {
    "12px": (None, None, None, None, None, None, None, None, None),
    "14px": (None, None, None, 100, 100, 90, 75, None, None),
    "15px": (None, None, None, 100, 90, 75, 70, None, None),
    "16px": (None, None, None, 90, 75, 70, 60, 60, None),
    "18px": (None, None, 100, 75, 70, 60, 55, 55, 55),
    "21px": (None, None, 90, 70, 60, 55, 50, 50, 50),
    "24px": (None, None, 75, 60, 55, 50, 45, 45, 45),
    "28px": (None, 100, 70, 55, 50, 45, 43, 43, 43),
    "32px": (None, 90, 65, 50, 45, 43, 40, 40, 40),
    "36px": (None, 75, 60, 45, 43, 40, 38, 38, 38),
    "42px": (100, 70, 55, 43, 40, 38, 35, 35, 35),
    "48px": (90, 60, 50, 40, 38, 35, 33, 33, 33),
    "60px": (75, 55, 45, 38, 35, 33, 30, 30, 30),
    "72px": (60, 50, 40, 35, 33, 30, 30, 30, 30),
    "96px": (50, 45, 35, 33, 30, 30, 30, 30, 30),
}


def _soft_clamp(brightness: float) -> float:
    """Boost near-black brightness: ``y + (threshold - y) ** exponent`` below the threshold."""
    if brightness > DARKNESS.threshold:
        return brightness
    return brightness + (DARKNESS.threshold - brightness) ** DARKNESS.exponent


def _font_key(size: Any) -> str:
    if isinstance(size, (int, float)) and not isinstance(size, bool):
        return f"{int(size)}px"
    text = str(size).strip().lower()
    return text if text.endswith("px") else f"{text}px"


class APCA:
    """APCA lightness contrast of a foreground on a background.

    Args:
        foreground: A :class:`Color`, anything :func:`is_color_type` accepts, or
            an object or mapping with ``foreground`` and ``background``.
        background: A :class:`Color` or anything :func:`is_color_type` accepts.

    Example:
        >>> round(APCA("#000", "#fff").score())
        106
        >>> round(APCA("#fff", "#000").score())
        -108
    """

    def __init__(self, foreground: Any = None, background: Any = None) -> None:
        self._foreground: Color | None = None
        self._background: Color | None = None

        config = None if isinstance(foreground, (str, Color)) else foreground
        paired_background = _field(config, "background") if config is not None else None
        paired_foreground = _field(config, "foreground") if config is not None else None

        self.background = paired_background if paired_background else background
        self.foreground = paired_foreground if paired_foreground else foreground

    @property
    def foreground(self) -> Color | None:
        return self._foreground

    @foreground.setter
    def foreground(self, value: Any) -> None:
        # invalid input keeps the previous color
        if isinstance(value, Color) or is_color_type(value):
            self._foreground = value if isinstance(value, Color) else Color(value)

    @property
    def background(self) -> Color | None:
        return self._background

    @background.setter
    def background(self, value: Any) -> None:
        if isinstance(value, Color) or is_color_type(value):
            self._background = value if isinstance(value, Color) else Color(value)

    def score(self) -> float | None:
        """The APCA ``Lc`` value, rounded to three places, or ``None`` if a color is unset."""
        if self._foreground is None or self._background is None:
            return None
        mixed = composite(self._foreground, self._background)
        back = self._background.brightness
        if mixed is None or back is None:
            return None
        fore = apca_brightness(*mixed)

        reverse = not back > fore
        if reverse:
            back = _soft_clamp(back)
        else:
            fore = _soft_clamp(fore)
        curve = POWER_CURVES["reverse" if reverse else "normal"]

        apca = (back**curve.background - fore**curve.foreground) * SCALE

        if reverse:
            if apca > -CLAMP:
                lc = 0.0
            elif apca > -curve.low_threshold:
                lc = apca - apca * curve.low_factor * curve.low_offset
            else:
                lc = apca + curve.low_offset
        else:
            if apca < CLAMP:
                lc = 0.0
            elif apca < curve.low_threshold:
                lc = apca - apca * curve.low_factor * curve.low_offset
            else:
                lc = apca - curve.low_offset

        return round(lc * 100, PRECISION)

    @staticmethod
    def font_sizes() -> list[str]:
        return list(FONT_MINIMUMS)

    @staticmethod
    def minimum(size: Any, weight: int) -> int | None:
        """Minimum ``Lc`` for a font size (``16``, ``"16px"``) and weight (100-900).

        Returns ``None`` when the size or weight is not in the table or not
        usable at all.
        """
        row = FONT_MINIMUMS.get(_font_key(size))
        if row is None or weight not in FONT_WEIGHTS:
            return None
        return row[FONT_WEIGHTS.index(weight)]

    def test(self, size: Any, weight: int) -> bool:
        """True if the absolute score reaches the minimum for the given font."""
        minimum = self.minimum(size, weight)
        score = self.score()
        if minimum is None or score is None:
            return False
        return minimum <= abs(score)

    def font_report(self) -> dict[str, dict[int, bool | None]]:
        """Pass/fail for every font size and weight; ``None`` where a weight is unusable."""
        score = self.score()
        report: dict[str, dict[int, bool | None]] = {}
        for size, row in FONT_MINIMUMS.items():
            report[size] = {
                weight: None if minimum is None or score is None else minimum <= abs(score)
                for weight, minimum in zip(FONT_WEIGHTS, row)
            }
        logger.debug("APCA font report for score %s", score)
        return report

    def __repr__(self) -> str:
        return f"APCA(foreground={self._foreground!r}, background={self._background!r})"
