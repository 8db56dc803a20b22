"""
Palettron Color Conversions
===========================

Parsing, color space conversion and CSS serialization for the color
primitive.

Conversion Functions
--------------------
RGB -> HSL:
    css_rgb_to_hsl(r, g, b)
        Scalar RGB to HSL conversion
    np_css_rgb_to_hsl(r, g, b)
        Vectorized RGB to HSL conversion

HSL -> RGB:
    css_hsl_to_rgb(h, s, l)
        Scalar HSL to RGB conversion
    np_css_hsl_to_rgb(h, s, l)
        Vectorized HSL to RGB conversion

High-Level API
--------------
    convert(color, from_space, to_space, input_type, output_type)
        Color tuple converter with format handling
    np_convert(color, from_space, to_space, input_type, output_type)
        Vectorized converter over ``(..., channels)`` arrays
    parse_color(text)
        CSS color string to unit RGBA floats
    to_hex_string / to_rgb_string / to_hsl_string
        Unit RGBA floats to CSS strings

Examples
--------
>>> from palettron.conversions import parse_color, to_hsl_string
>>> to_hsl_string(*parse_color("#ff0000"))
'hsl(0, 100%, 50%)'
"""

from .css_to_hsl import css_rgb_to_hsl, np_css_rgb_to_hsl, css_hsl_to_rgb, np_css_hsl_to_rgb, normalize_hue
from .wrapper import convert, np_convert
from .parse import parse_color
from .formatting import to_hex_string, to_rgb_string, to_hsl_string, rgba_tuple, hsla_tuple
from ..types.format_type import FormatType

__all__ = [
    'css_rgb_to_hsl',
    'np_css_rgb_to_hsl',
    'css_hsl_to_rgb',
    'np_css_hsl_to_rgb',
    'normalize_hue',
    'convert',
    'np_convert',
    'parse_color',
    'to_hex_string',
    'to_rgb_string',
    'to_hsl_string',
    'rgba_tuple',
    'hsla_tuple',
    'FormatType',
]
