"""
The color value a palette is made of.

``Color`` is an immutable unit-float RGBA color (``ColorUnitRGBA``) that
understands CSS color strings and offers the usual adjustments and CSS
serializations. All adjustments happen in HSL space and return new
instances; channels are stored unrounded so chains of adjustments do not
accumulate rounding error. Rounding happens only on output.

>>> Color("#ff0000").lighten(0.1).to_hex()
'#ff3333'
>>> Color("hsl(120, 100%, 50%)").to_rgb_string()
'rgb(0, 255, 0)'
"""
from __future__ import annotations

from typing import Sequence, Union

from boundednumbers.functions import clamp01

from .color_base import ColorBase
from .rgb import ColorUnitRGBA
from ..conversions import css_hsl_to_rgb, css_rgb_to_hsl, parse_color
from ..conversions.formatting import (
    hsla_tuple,
    rgba_tuple,
    to_hex_string,
    to_hsl_string,
    to_rgb_string,
)
from ..types.color_types import HSLA, RGBA, Scalar
from ..utils.num_utils import round_half_up

ColorInput = Union[str, ColorBase, Sequence[Scalar]]


class Color(ColorUnitRGBA):
    """
    Immutable RGBA color.

    Args:
        value: A CSS color string, any scalar ``ColorBase`` (converted), or a
            tuple of unit floats ``(r, g, b)`` / ``(r, g, b, a)``.

    Raises:
        ParseError: ``value`` is a string no supported syntax matches.
        TypeError: ``value`` is neither a string, a color nor a channel tuple.
    """
    __slots__ = ()

    def __init__(self, value: ColorInput) -> None:
        if isinstance(value, str):
            value = parse_color(value)
        elif isinstance(value, ColorBase):
            if value.is_array:
                raise TypeError("Color holds a single color; got an array of colors")
        elif isinstance(value, (tuple, list)):
            value = tuple(value)
            if len(value) == 3:
                value = value + (1.0,)
        else:
            raise TypeError(f"Cannot build a Color from {type(value).__name__}")
        super().__init__(value)

    # ------------------ CHANNELS ------------------
    @property
    def rgba(self) -> tuple[float, float, float, float]:
        """Raw unit-float channels."""
        return self.value  # type: ignore[return-value]

    @property
    def red(self) -> int:
        return self.to_rgb().r

    @property
    def green(self) -> int:
        return self.to_rgb().g

    @property
    def blue(self) -> int:
        return self.to_rgb().b

    @property
    def alpha(self) -> float:
        return self.to_rgb().a

    @property
    def hue(self) -> int:
        return self.to_hsl().h

    @property
    def saturation(self) -> int:
        return self.to_hsl().s

    @property
    def lightness(self) -> int:
        return self.to_hsl().l

    # ------------------ ADJUSTMENTS ------------------
    def _hsl(self) -> tuple[float, float, float]:
        r, g, b, _ = self.rgba
        return css_rgb_to_hsl(r, g, b)

    def _from_hsl(self, h: float, s: float, l: float) -> Color:
        r, g, b = css_hsl_to_rgb(h, clamp01(s), clamp01(l))
        return Color((float(r), float(g), float(b), self.rgba[3]))

    def lighten(self, amount: float = 0.1) -> Color:
        """Raise HSL lightness by ``amount`` (a 0-1 ratio of the full range)."""
        h, s, l = self._hsl()
        return self._from_hsl(h, s, l + amount)

    def darken(self, amount: float = 0.1) -> Color:
        return self.lighten(-amount)

    def saturate(self, amount: float = 0.1) -> Color:
        """Raise HSL saturation by ``amount`` (a 0-1 ratio of the full range)."""
        h, s, l = self._hsl()
        return self._from_hsl(h, s + amount, l)

    def desaturate(self, amount: float = 0.1) -> Color:
        return self.saturate(-amount)

    def grayscale(self) -> Color:
        return self.desaturate(1)

    def rotate(self, amount: float = 15) -> Color:
        """Rotate the hue by ``amount`` degrees."""
        h, s, l = self._hsl()
        return self._from_hsl(h + amount, s, l)

    def with_hue(self, hue: float) -> Color:
        _, s, l = self._hsl()
        return self._from_hsl(hue, s, l)

    def invert(self) -> Color:
        r, g, b, a = self.rgba
        return Color((1.0 - r, 1.0 - g, 1.0 - b, a))

    # ------------------ INSPECTION ------------------
    def brightness(self) -> float:
        """Perceived brightness in [0, 1] (ITU-R BT.601 weights)."""
        r, g, b, _ = self.to_rgb()
        return round_half_up((r * 299 + g * 587 + b * 114) / 1000 / 255, 2)

    def is_dark(self) -> bool:
        return self.brightness() < 0.5

    def is_light(self) -> bool:
        return self.brightness() >= 0.5

    def is_equal(self, other: ColorInput) -> bool:
        """Compare by hex form; strings and other colors are accepted."""
        if not isinstance(other, Color):
            other = Color(other)
        return self.to_hex() == other.to_hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_hex() == other.to_hex()

    def __hash__(self) -> int:
        return hash(self.to_hex())

    def __repr__(self) -> str:
        return f"Color({self.to_hex()!r})"

    # ------------------ EXPORT ------------------
    def to_hex(self) -> str:
        return to_hex_string(*self.rgba)

    def to_rgb_string(self) -> str:
        return to_rgb_string(*self.rgba)

    def to_hsl_string(self) -> str:
        return to_hsl_string(*self.rgba)

    def to_rgb(self) -> RGBA:
        return rgba_tuple(*self.rgba)

    def to_hsl(self) -> HSLA:
        return hsla_tuple(*self.rgba)
