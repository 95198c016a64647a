"""WCAG 2.1 contrast thresholds.

Level AA requires 4.5:1 for normal text and 3:1 for large text (18pt, or 14pt
bold). Level AAA normal text is checked against 7.1:1 and large text against 4.5:1.
"""

__all__ = ["CONTRAST", "LEVELS", "SIZES", "threshold"]

CONTRAST: dict[str, dict[str, float]] = {
    "AA": {
        "normal": 4.5,
        "large": 3.0,
    },
    "AAA": {
        "normal": 7.1,
        "large": 4.5,
    },
}

LEVELS = tuple(CONTRAST)
SIZES = ("normal", "large")


def threshold(level: str = "AA", size: str = "normal") -> float:
    """Look up the minimum contrast ratio for a compliance level and text size.

    Raises:
        KeyError: If the level or size is unknown.
    """
    return CONTRAST[level.upper()][size.lower()]
