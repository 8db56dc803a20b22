import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat
from boundednumbers.functions import cyclic_wrap_float

from ..types.format_type import HUE_360

def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return cyclic_wrap_float(h, 0, HUE_360)

## HSL to RGB conversions

def css_hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB using the CSS Color 4 chroma/sector algorithm.

    Args:
        h: Hue in degrees, any value (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs((h / 60) % 2 - 1))
    m = l - chroma / 2

    sector = int(h // 60) % 6
    r, g, b = (
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    )[sector]

    return UnitFloat(r + m), UnitFloat(g + m), UnitFloat(b + m)

def np_css_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB using the CSS Color 4 algorithm.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % HUE_360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)
    h, s, l = np.broadcast_arrays(h, s, l)

    chroma = (1 - np.abs(2 * l - 1)) * s
    x = chroma * (1 - np.abs((h / 60) % 2 - 1))
    m = l - chroma / 2
    zero = np.zeros_like(chroma)

    sector = (np.floor(h / 60).astype(int)) % 6
    conditions = [sector == i for i in range(6)]

    r = np.select(conditions, [chroma, x, zero, zero, x, chroma])
    g = np.select(conditions, [x, chroma, chroma, x, zero, zero])
    b = np.select(conditions, [zero, zero, x, chroma, chroma, x])

    return np.clip(np.stack([r + m, g + m, b + m], axis=-1), 0.0, 1.0)

## RGB to HSL conversions

def css_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert RGB to HSL using the CSS Color 4 algorithm.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, UnitFloat, UnitFloat]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        # achromatic: hue and saturation are meaningless, report 0
        return 0.0, UnitFloat(0.0), UnitFloat(lightness)

    saturation = delta / (1 - abs(2 * lightness - 1))

    if max_c == r:
        hue = 60 * ((g - b) / delta)
    elif max_c == g:
        hue = 60 * ((b - r) / delta) + 120
    else:
        hue = 60 * ((r - g) / delta) + 240

    return normalize_hue(hue), UnitFloat(saturation), UnitFloat(lightness)

def np_css_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL using the CSS Color 4 algorithm.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    chromatic = delta > 0

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    saturation[chromatic] = delta[chromatic] / (1 - np.abs(2 * lightness[chromatic] - 1))

    # Divide only where chroma exists; achromatic hue stays 0
    safe_delta = np.where(chromatic, delta, 1.0)
    hue = np.select(
        [chromatic & (max_c == r), chromatic & (max_c == g), chromatic],
        [
            60 * ((g - b) / safe_delta),
            60 * ((b - r) / safe_delta) + 120,
            60 * ((r - g) / safe_delta) + 240,
        ],
        default=0.0,
    ) % HUE_360

    return np.stack([hue, np.clip(saturation, 0.0, 1.0), lightness], axis=-1)
