"""a11ykit - Accessibility formulas for color contrast and readability"""

__version__ = "0.1.0"

from .apca import APCA
from .color import Color, is_color_type
from .color_utils import format_color_output, parse_color
from .luminance import Contrast, Luminance, contrast_ratio
from .matrix import LuminanceMatrix, luminance_matrix, to_color_list
from .readability import Readability, SampleSizeError
from .wcag import CONTRAST

__all__ = [
    "APCA",
    "CONTRAST",
    "Color",
    "Contrast",
    "Luminance",
    "LuminanceMatrix",
    "Readability",
    "SampleSizeError",
    "contrast_ratio",
    "format_color_output",
    "is_color_type",
    "luminance_matrix",
    "parse_color",
    "to_color_list",
]
