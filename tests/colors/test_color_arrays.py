import numpy as np
import pytest

from palettron.colors import ColorRGBINT, ColorUnitRGB, ColorUnitRGBA, UnitHSL, UnitHSLA
from palettron.types import FormatType


def test_array_creation():
    colors = np.array([
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0]
    ])
    rgb = ColorUnitRGB(colors)

    assert rgb.is_array
    assert rgb.shape == (3, 3)
    assert np.allclose(rgb.value, colors)


def test_scalar_has_no_shape():
    assert ColorUnitRGB((0.1, 0.2, 0.3)).shape is None
    assert not ColorUnitRGB((0.1, 0.2, 0.3)).is_array


def test_array_is_read_only():
    rgb = ColorUnitRGB(np.zeros((2, 3)))
    with pytest.raises(ValueError):
        rgb.value[0, 0] = 1.0


def test_array_is_clamped_and_hue_wrapped():
    rgb = ColorUnitRGB(np.array([[1.5, -0.5, 0.5]]))
    assert np.allclose(rgb.value, [[1.0, 0.0, 0.5]])

    hsl = UnitHSL(np.array([[400.0, 2.0, 0.5]]))
    assert np.allclose(hsl.value, [[40.0, 1.0, 0.5]])


def test_array_dtype_is_checked():
    with pytest.raises(TypeError):
        ColorRGBINT(np.zeros((2, 3), dtype=np.float64))
    with pytest.raises(TypeError):
        ColorUnitRGB(np.zeros((2, 3), dtype=np.int64))


def test_array_shape_is_checked():
    with pytest.raises(ValueError):
        ColorUnitRGB(np.zeros((2, 4)))
    with pytest.raises(ValueError):
        ColorUnitRGB(np.array(0.5))


def test_array_conversion():
    colors = np.array([
        [1.0, 0.0, 0.0, 1.0],
        [0.0, 1.0, 0.0, 0.5],
        [0.0, 0.0, 1.0, 0.0],
    ])
    hsla = ColorUnitRGBA(colors).convert("hsla", FormatType.FLOAT)

    assert isinstance(hsla, UnitHSLA)
    assert hsla.shape == (3, 4)
    assert np.allclose(hsla.value[:, 0], [0.0, 120.0, 240.0])
    assert np.allclose(hsla.value[:, 3], [1.0, 0.5, 0.0])

    ints = ColorUnitRGBA(colors).convert("rgba", FormatType.INT)
    assert ints.value.dtype == np.int64
    assert ints.value[1].tolist() == [0, 255, 0, 128]


def test_array_with_alpha():
    colors = ColorUnitRGBA(np.ones((4, 4)))

    faded = colors.with_alpha(0.5)
    assert np.all(faded.alpha == 0.5)
    assert np.all(colors.alpha == 1.0)

    ramp = colors.with_alpha(np.linspace(0, 1, 4))
    assert np.allclose(ramp.alpha, np.linspace(0, 1, 4))

    with pytest.raises(ValueError):
        colors.with_alpha(np.zeros(3))


def test_scalar_rejects_array_alpha():
    with pytest.raises(TypeError):
        ColorUnitRGBA((1.0, 1.0, 1.0, 1.0)).with_alpha(np.zeros(2))
