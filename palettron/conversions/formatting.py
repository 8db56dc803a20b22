"""CSS serialization of unit RGBA values."""
from ..types.color_types import RGBA, HSLA
from ..types.format_type import ALPHA_PRECISION
from ..utils.num_utils import round_half_up
from .css_to_hsl import css_rgb_to_hsl


def _number(value: float) -> str:
    # 1.0 -> "1", 0.5 -> "0.5"
    return f"{value:g}"


def rgba_tuple(r: float, g: float, b: float, a: float) -> RGBA:
    return RGBA(
        int(round_half_up(r * 255)),
        int(round_half_up(g * 255)),
        int(round_half_up(b * 255)),
        round_half_up(a, ALPHA_PRECISION),
    )


def hsla_tuple(r: float, g: float, b: float, a: float) -> HSLA:
    h, s, l = css_rgb_to_hsl(r, g, b)
    return HSLA(
        int(round_half_up(h)) % 360,
        int(round_half_up(s * 100)),
        int(round_half_up(l * 100)),
        round_half_up(a, ALPHA_PRECISION),
    )


def to_hex_string(r: float, g: float, b: float, a: float) -> str:
    red, green, blue, alpha = rgba_tuple(r, g, b, a)
    text = f"#{red:02x}{green:02x}{blue:02x}"
    if alpha < 1:
        text += f"{int(round_half_up(a * 255)):02x}"
    return text


def to_rgb_string(r: float, g: float, b: float, a: float) -> str:
    red, green, blue, alpha = rgba_tuple(r, g, b, a)
    if alpha < 1:
        return f"rgba({red}, {green}, {blue}, {_number(alpha)})"
    return f"rgb({red}, {green}, {blue})"


def to_hsl_string(r: float, g: float, b: float, a: float) -> str:
    h, s, l, alpha = hsla_tuple(r, g, b, a)
    if alpha < 1:
        return f"hsla({h}, {s}%, {l}%, {_number(alpha)})"
    return f"hsl({h}, {s}%, {l}%)"
