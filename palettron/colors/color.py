from __future__ import annotations
from numpy import ndarray

from .color_base import ColorBase
from .hsl import hsl_tuple_to_class
from .rgb import rgb_tuple_to_class
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from ..conversions import convert, np_convert

unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]] = {
    **rgb_tuple_to_class,
    **hsl_tuple_to_class,
}


def get_color_class(color_space: str, format_type: FormatType | str) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((color_space.lower(), FormatType(format_type)))  # type: ignore[arg-type]
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | None = None, to_format: FormatType | None = None) -> ColorBase:
    """
    Convert this color to a different color space and/or format.

    Scalars go through ``convert``, arrays through ``np_convert``.

    Args:
        to_space: Target color space ("rgb", "rgba", "hsl", "hsla")
        to_format: Target format type (INT, FLOAT, PERCENTAGE). Defaults to current format.

    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = (to_space or self.mode).lower()  # type: ignore[assignment]
    to_format = FormatType(to_format or self.format_type)
    cls = get_color_class(to_space, to_format)

    if isinstance(self.value, ndarray):
        result = np_convert(self.value, self.mode, to_space, self.format_type, to_format)
    else:
        result = convert(self.value, self.mode, to_space, self.format_type, to_format)
    return cls(result)

ColorBase.convert = color_convert
