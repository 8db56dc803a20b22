from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry

class ColorHSLINT(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "hsl"
    maxima:     ClassVar[Tuple[int, int, int]] = (360, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT

class ColorHSLAINT(ColorBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace] = "hsla"
    maxima:     ClassVar[Tuple[int, int, int, int]] = (360, 255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT
    alpha_max:  ClassVar[int] = 255

class UnitHSL(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "hsl"
    maxima:     ClassVar[Tuple[float, float, float]] = (360.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT

class UnitHSLA(ColorBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace] = "hsla"
    maxima:     ClassVar[Tuple[float, float, float, float]] = (360.0, 1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    alpha_max:  ClassVar[float] = 1.0

class PercentageHSL(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "hsl"
    maxima:     ClassVar[Tuple[float, float, float]] = (360.0, 100.0, 100.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE

class PercentageHSLA(ColorBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace] = "hsla"
    maxima:     ClassVar[Tuple[float, float, float, float]] = (360.0, 100.0, 100.0, 100.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE
    alpha_max:  ClassVar[float] = 100.0


hsl_tuple_to_class = build_registry(
    ColorHSLINT,
    ColorHSLAINT,
    UnitHSL,
    UnitHSLA,
    PercentageHSL,
    PercentageHSLA,
)
