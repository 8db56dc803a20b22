from .format_type import FormatType, max_non_hue, HUE_360, ALPHA_PRECISION
from .color_types import ColorSpace, ColorValue, ColorElement, Scalar, Seed, RGBA, HSLA, is_hue_space

__all__ = [
    'FormatType', 'max_non_hue', 'HUE_360', 'ALPHA_PRECISION',
    'ColorSpace', 'ColorValue', 'ColorElement', 'Scalar', 'Seed',
    'RGBA', 'HSLA', 'is_hue_space',
]
