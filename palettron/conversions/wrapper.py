import numpy as np
from typing import Callable, cast

from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorElement, ColorSpace, element_to_array, is_hue_space
from .css_to_hsl import np_css_rgb_to_hsl, np_css_hsl_to_rgb

SUPPORTED_SPACES = ("rgb", "rgba", "hsl", "hsla")

# Base-space converters working on unit values (hue stays in degrees)
CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsl"): np_css_rgb_to_hsl,
    ("hsl", "rgb"): np_css_hsl_to_rgb,
}

def _check_space(space: str) -> str:
    space = space.lower()
    if space not in SUPPORTED_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space

def normalize(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    """Scale the three base channels of ``color`` down to unit range."""
    maxval = max_non_hue[fmt]
    if is_hue_space(space):
        return np.stack([color[..., 0], color[..., 1] / maxval, color[..., 2] / maxval], axis=-1)
    return color / maxval

def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    """Inverse of :func:`normalize`; INT output is rounded to integers."""
    maxval = max_non_hue[fmt]
    if is_hue_space(space):
        scaled = np.stack([color[..., 0], color[..., 1] * maxval, color[..., 2] * maxval], axis=-1)
    else:
        scaled = color * maxval
    return np.round(scaled).astype(int) if fmt == FormatType.INT else scaled

def convert_alpha(alpha: np.ndarray | None, input_fmt: FormatType, output_fmt: FormatType) -> np.ndarray | None:
    if alpha is None:
        return None
    result = alpha / max_non_hue[input_fmt] * max_non_hue[output_fmt]
    return np.round(result).astype(int) if output_fmt == FormatType.INT else result

def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    has_alpha_in = from_space.endswith("a")
    has_alpha_out = to_space.endswith("a")

    if has_alpha_in:
        base, alpha = color[..., :3], color[..., 3]
    else:
        base, alpha = color, None

    fs, ts = from_space[:3], to_space[:3]

    # normalize -> convert -> scale
    base_norm = normalize(base, fs, input_fmt)
    if fs == ts:
        converted = base_norm
    else:
        converted = CONVERT_NUMPY[(fs, ts)](base_norm[..., 0], base_norm[..., 1], base_norm[..., 2])
    out = scale(converted, ts, output_fmt)

    if not has_alpha_out:
        return out

    new_alpha = convert_alpha(alpha, input_fmt, output_fmt)
    if new_alpha is None:
        # Opaque when the source carried no alpha
        new_alpha = np.full(out.shape[:-1], max_non_hue[output_fmt])
    return np.concatenate([out, np.asarray(new_alpha)[..., None]], axis=-1)


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> ColorElement:
    """Convert a single color tuple between spaces and formats."""
    from_space, to_space = _check_space(from_space), _check_space(to_space)
    if from_space == to_space and FormatType(input_type) == FormatType(output_type):
        return color  # No conversion needed
    result = _convert_core(
        element_to_array(color).astype(float),
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    )
    return tuple(v.item() for v in result.flat)

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> np.ndarray:
    """Vectorized :func:`convert` over an ``(..., channels)`` array."""
    from_space, to_space = _check_space(from_space), _check_space(to_space)
    if from_space == to_space and FormatType(input_type) == FormatType(output_type):
        return color  # No conversion needed
    return cast(np.ndarray, _convert_core(
        np.asarray(color, dtype=float),
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    ))
