"""
Palettron - Immutable Color Palettes
====================================

A small, chainable palette type on top of an immutable color primitive.

Key Features
------------
- Immutable palettes: every transformation returns a new instance
- CSS color input (hex, rgb(), hsl(), named colors) and output
- Per-color adjustments: lighten, darken, saturate, desaturate, rotate,
  grayscale, invert, alpha
- Reordering: reverse, shift, swap, sort, seeded shuffle
- Selection and copy-on-write edits: slice, pick, filter, modify, replace, map
- Combinators: concat, merge

Quick Start
-----------
>>> from palettron import palettron, concat, merge
>>>
>>> primary = ["#ff0000", "#00ff00", "#0000ff"]
>>> secondary = ["#ffff00", "#ff00ff", "#00ffff"]
>>>
>>> concat(primary, secondary).size
6
>>> merge(primary, primary, secondary).size
6
>>> palettron(primary).swap(0, 1).to_hex()
['#00ff00', '#ff0000', '#0000ff']
>>> palettron(primary).lighten(0.1).to_hsl()
['hsl(0, 100%, 60%)', 'hsl(120, 100%, 60%)', 'hsl(240, 100%, 60%)']

Modules
-------
- palette: the Palettron type
- combinators: concat, merge, palettron
- colors: color classes and the Color value
- conversions: CSS parsing, RGB <-> HSL, CSS serialization
- errors: ParseError, IndexOutOfRange
"""
import logging

from .palette import Palettron, PaletteInput, DEFAULT_SEED
from .combinators import concat, merge, palettron
from .colors import Color, ColorInput
from .errors import PalettronError, ParseError, IndexOutOfRange
from .types.format_type import FormatType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Palette
    "Palettron", "PaletteInput", "DEFAULT_SEED",

    # Combinators
    "concat", "merge", "palettron",

    # Color primitive
    "Color", "ColorInput", "FormatType",

    # Errors
    "PalettronError", "ParseError", "IndexOutOfRange",

    # Version
    "__version__",
]
