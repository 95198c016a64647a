"""WCAG luminance contrast between a foreground and a background color.

:class:`Luminance` holds a foreground/background pair, reports their contrast
ratio, tests it against a threshold and can search for the nearest passing
pair by darkening or lightening the colors one step at a time.

Example:
    >>> from a11ykit import wcag
    >>> from a11ykit.luminance import Luminance
    >>> pair = Luminance("#777", "#fff")
    >>> pair.contrast
    4.48
    >>> pair.test(wcag.CONTRAST["AA"]["normal"])
    False
    >>> pair.search(4.5, pair.foreground).foreground.hcolor
    '#767676'
"""

import logging
from collections.abc import Callable
from typing import Any

from .color import Color, _field, composite, is_color_type, relative_luminance

__all__ = ["Contrast", "Luminance", "contrast_ratio"]

logger = logging.getLogger(__name__)

# Each step moves every channel of a color by one towards 0 or 255, so a
# search can never need more than 255 steps per color.
_MAX_SEARCH_STEPS = 1024


def _ratio(foreground: Color, background: Color) -> float | None:
    mixed = composite(foreground, background)
    background_luminance = background.luminance
    if mixed is None or background_luminance is None:
        return None
    # luminance is on a 0-100 scale, so the 0.05 flare term becomes 5
    f = relative_luminance(*mixed) + 5
    b = background_luminance + 5
    ratio = f / b
    return 1 / ratio if f < b else ratio


def contrast_ratio(foreground: Color | None, background: Color | None) -> float | None:
    """Contrast ratio n:1 between two colors, rounded to two places.

    The foreground is alpha-composited over the background before its
    luminance is taken. The ratio is oriented so it is always >= 1, and is
    ``None`` if either color is missing or unset.

    See https://www.w3.org/TR/WCAG20/#contrast-ratiodef
    """
    if foreground is None or background is None:
        return None
    ratio = _ratio(foreground, background)
    return None if ratio is None else round(ratio, 2)


def _as_color(value: Any) -> Color | None:
    if value is None or isinstance(value, Color):
        return value
    return Color(value)


class Luminance:
    """A foreground/background color pair evaluated with the WCAG contrast ratio.

    Args:
        foreground: A :class:`Color`, anything :func:`is_color_type` accepts, or
            an object or mapping with ``foreground`` and ``background``.
        background: A :class:`Color` or anything :func:`is_color_type` accepts.

    :class:`Color` arguments are shared, not copied, so a search mutates the
    caller's objects. The first colors assigned are remembered for
    :meth:`reset`.
    """

    def __init__(self, foreground: Any = None, background: Any = None) -> None:
        self._foreground: Color | None = None
        self._background: Color | None = None
        self._initial_foreground: Color | None = None
        self._initial_background: Color | None = None

        config = None if isinstance(foreground, (str, Color)) else foreground
        paired_background = _field(config, "background") if config is not None else None
        paired_foreground = _field(config, "foreground") if config is not None else None

        if paired_background:
            self.background = paired_background
        elif is_color_type(background):
            self.background = background

        if paired_foreground:
            self.foreground = paired_foreground
        elif is_color_type(foreground):
            self.foreground = foreground

    @property
    def foreground(self) -> Color | None:
        return self._foreground

    @foreground.setter
    def foreground(self, value: Any) -> None:
        self._foreground = _as_color(value)
        if self._initial_foreground is None and self._foreground is not None:
            self._initial_foreground = self._foreground.copy()

    @property
    def background(self) -> Color | None:
        return self._background

    @background.setter
    def background(self, value: Any) -> None:
        self._background = _as_color(value)
        if self._initial_background is None and self._background is not None:
            self._initial_background = self._background.copy()

    @property
    def contrast(self) -> float | None:
        """The contrast ratio n:1 with two-digit precision, recomputed on every read."""
        return contrast_ratio(self._foreground, self._background)

    def test(self, level: float) -> bool:
        """True if the contrast meets ``level``, boundary included."""
        contrast = self.contrast
        return contrast is not None and contrast >= float(level)

    def reset(self) -> "Luminance":
        """Restore the colors first assigned to the pair."""
        if self._initial_foreground is not None:
            self._foreground = self._initial_foreground.copy()
        if self._initial_background is not None:
            self._background = self._initial_background.copy()
        return self

    @staticmethod
    def _adjusters(
        foreground: Color, background: Color
    ) -> dict[str, tuple[Callable[[], Any], Callable[[], bool]]]:

        def plan(color: Color, darker: bool):
            if darker:
                return color.darken, lambda: color.can_darken
            return color.lighten, lambda: color.can_lighten

        fg_darker = foreground.luminance < background.luminance  # type: ignore[operator]
        logger.debug(
            "search: %s foreground, %s background",
            "darken" if fg_darker else "lighten",
            "lighten" if fg_darker else "darken",
        )
        return {
            "background": plan(background, not fg_darker),
            "foreground": plan(foreground, fg_darker),
        }

    def search(self, level: float, isolate: Any = None) -> "Luminance":
        """Step the colors apart until the contrast meets ``level``.

        The darker color is darkened and the lighter one lightened, one unit
        per channel per step. With ``isolate`` (the foreground or background
        :class:`Color` itself, or the string ``"foreground"``/``"background"``)
        only that color moves. The search stops when the test passes or when
        the moving colors reach black or white.
        """
        foreground, background = self._foreground, self._background
        if foreground is None or background is None or not (foreground.is_set and background.is_set):
            return self

        adjusters = self._adjusters(foreground, background)
        if isolate is None:
            active = [adjusters["background"], adjusters["foreground"]]
        elif isinstance(isolate, str):
            if isolate not in adjusters:
                return self
            active = [adjusters[isolate]]
        elif isolate is foreground:
            active = [adjusters["foreground"]]
        elif isolate is background:
            active = [adjusters["background"]]
        else:
            return self

        for _ in range(_MAX_SEARCH_STEPS):
            if self.test(level) or not any(guard() for _, guard in active):
                break
            for step, guard in active:
                if guard():
                    step()
        else:
            logger.warning("search stopped after %d steps without converging", _MAX_SEARCH_STEPS)

        return self

    def __repr__(self) -> str:
        return f"Luminance(foreground={self._foreground!r}, background={self._background!r})"


Contrast = Luminance
