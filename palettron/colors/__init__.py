"""
Palettron Color Classes
=======================

Immutable color classes for the RGB and HSL color spaces, and the ``Color``
value palettes are built from.

Features
--------
- Immutable color instances (frozen after initialization, ``__slots__`` only)
- Scalar colors and ``(..., channels)`` color arrays
- Value clamping to valid ranges, hue wrapped into [0, 360)
- Conversion between spaces and INT / FLOAT / PERCENTAGE formats
- Alpha channel support through the ``WithAlpha`` mixin
- ``Color``: CSS parsing, HSL adjustments and CSS serialization

Usage
-----
>>> from palettron.colors import Color, ColorRGBINT
>>> Color("rgb(255, 0, 0)").rotate(120).to_hex()
'#00ff00'
>>> Color(ColorRGBINT((0, 0, 255))).to_hsl_string()
'hsl(240, 100%, 50%)'

Color Classes
-------------
RGB variants:
    - ColorRGBINT / ColorRGBAINT: Integer RGB(A) (0-255)
    - ColorUnitRGB / ColorUnitRGBA: Float RGB(A) (0.0-1.0)
    - ColorPercentageRGB / ColorPercentageRGBA: Percentage RGB(A) (0-100)

HSL variants:
    - ColorHSLINT / ColorHSLAINT: Integer HSL(A)
    - UnitHSL / UnitHSLA: Float HSL(A)
    - PercentageHSL / PercentageHSLA: Percentage HSL(A)
"""

from .color_base import ColorBase, WithAlpha
from .rgb import (
    ColorRGBINT, ColorRGBAINT,
    ColorUnitRGB, ColorUnitRGBA,
    ColorPercentageRGB, ColorPercentageRGBA,
)
from .hsl import (
    ColorHSLINT, ColorHSLAINT,
    UnitHSL, UnitHSLA,
    PercentageHSL, PercentageHSLA,
)
from .color import color_convert, get_color_class, unified_tuple_to_class
from .color_value import Color, ColorInput


__all__ = [
    'ColorBase', 'WithAlpha',
    'ColorRGBINT', 'ColorRGBAINT',
    'ColorUnitRGB', 'ColorUnitRGBA',
    'ColorPercentageRGB', 'ColorPercentageRGBA',
    'ColorHSLINT', 'ColorHSLAINT',
    'UnitHSL', 'UnitHSLA',
    'PercentageHSL', 'PercentageHSLA',
    'color_convert', 'get_color_class', 'unified_tuple_to_class',
    'Color', 'ColorInput',
]
