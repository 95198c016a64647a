"""Pairwise WCAG contrast over a palette."""

import logging
from collections.abc import Iterable
from typing import Any

from .color import Color
from .luminance import _ratio

__all__ = ["LuminanceMatrix", "luminance_matrix", "to_color_list"]

logger = logging.getLogger(__name__)


def _flatten(values: Iterable[Any]) -> list[Any]:
    items: list[Any] = []
    for value in values:
        if isinstance(value, str):
            items.extend(part.strip() for part in value.split(","))
        elif isinstance(value, (list, tuple, set, frozenset)):
            items.extend(_flatten(value))
        else:
            items.append(value)
    return items


def to_color_list(*args: Any) -> list[tuple[str, Color]]:
    """Normalise a mixed palette into ``(key, Color)`` pairs sorted by hue.

    Accepts comma separated strings, lists, hex strings and :class:`Color`
    instances in any combination. Elements that do not yield a fully set
    color are dropped. Keys are the hex value without ``#``; when two inputs
    share a key the later one wins.

    >>> [key for key, _ in to_color_list("#00f, #0f0", ["#f00"])]
    ['ff0000', '00ff00', '0000ff']
    """
    colors = []
    for item in _flatten(args):
        color = item if isinstance(item, Color) else Color(item)
        if not color.is_set or color.hue is None:
            logger.debug("Dropping %r from palette: not a color", item)
            continue
        colors.append(color)

    colors.sort(key=lambda color: color.hue)

    palette: dict[str, Color] = {}
    for color in colors:
        key = color.hcolor.lstrip("#")
        palette[key] = color
    return list(palette.items())


def luminance_matrix(*args: Any) -> dict[str, dict[str, str]]:
    """Contrast ratio of every palette member against every other.

    ``table[a][b]`` is the contrast of ``a`` as foreground on ``b`` as
    background, formatted with two decimals. The input colors are not
    modified.

    >>> luminance_matrix("#000", "#fff")["000000"]["ffffff"]
    '21.00'
    """
    palette = to_color_list(*args)
    table: dict[str, dict[str, str]] = {}
    for key, foreground in palette:
        table[key] = {
            other: f"{_ratio(foreground, background):.2f}" for other, background in palette
        }
    return table


LuminanceMatrix = luminance_matrix
