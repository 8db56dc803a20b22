"""
Channel scaling tables shared by the color classes, the conversion wrapper
and the palette exports.

Every non-hue channel of a format runs from 0 to ``max_non_hue[fmt]``; hue
is always degrees in ``[0, HUE_360)`` regardless of the format.
"""
from enum import Enum

import numpy as np


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"

max_non_hue = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
    FormatType.PERCENTAGE: float,
}

default_format_dtypes = {
    FormatType.INT: np.int64,
    FormatType.FLOAT: np.float64,
    FormatType.PERCENTAGE: np.float64,
}

format_valid_dtypes = {
    FormatType.INT: (int, np.integer),
    FormatType.FLOAT: (float, np.floating),
    FormatType.PERCENTAGE: (float, np.floating),
}

HUE_360 = 360

# Decimal places kept for alpha in every textual / tuple output
ALPHA_PRECISION = 3
