from __future__ import annotations
from typing import Literal, NamedTuple, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]
IntElement = Union[int, IntVector]
FloatElement = Union[float, Tuple[float, ...]]
ColorElement = Union[IntElement, FloatElement]
ColorValue = Union[ColorElement, ndarray]  # Includes array support
ColorSpace = Literal["rgb", "rgba", "hsl", "hsla"]
HUE_SPACES = {"hsl", "hsla"}
Seed = Union[int, float, str]


class RGBA(NamedTuple):
    """Rounded RGBA channels: r, g, b in 0-255, a in 0-1."""
    r: int
    g: int
    b: int
    a: float


class HSLA(NamedTuple):
    """Rounded HSLA channels: h in degrees, s and l in percent, a in 0-1."""
    h: int
    s: int
    l: int
    a: float


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    if isinstance(element, (int, float)):
        return np.array([element])
    return np.array(element)

def is_hue_space(color_space: ColorSpace) -> bool:
    """
    Check if the given color space is a hue-based space (HSL).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
