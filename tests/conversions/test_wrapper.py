import numpy as np
import pytest

from palettron.conversions import convert, np_convert, FormatType
from ..samples import samples_rgb_hsl

def test_convert_returns_tuple():
    result = convert((255, 128, 64), "rgb", "hsl", output_type=FormatType.FLOAT)
    assert isinstance(result, tuple)
    assert len(result) == 3

def test_same_space_and_format_is_identity():
    color = (10, 20, 30)
    assert convert(color, "rgb", "rgb") is color

def test_adds_alpha():
    assert convert((255, 128, 64), "rgb", "rgba") == (255, 128, 64, 255)
    assert convert((120, 255, 128), "hsl", "hsla") == (120, 255, 128, 255)

def test_drops_alpha():
    assert convert((255, 128, 64, 17), "rgba", "rgb") == (255, 128, 64)

def test_adds_proper_format_alpha():
    color = (1.0, 0.5, 0.25)
    result = convert(color, "rgb", "rgba", input_type=FormatType.FLOAT, output_type=FormatType.INT)
    assert result == (255, 128, 64, 255)
    result = convert(color, "rgb", "rgba", input_type=FormatType.FLOAT, output_type=FormatType.PERCENTAGE)
    assert result == (100.0, 50.0, 25.0, 100.0)

def test_conversion_keeps_alpha():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l, a = convert(
            (r, g, b, 0.5), "rgba", "hsla",
            input_type=FormatType.FLOAT, output_type=FormatType.FLOAT,
        )

        assert abs(float(h) - h_exp) < .5
        assert abs(float(s) - s_exp) < 1/510
        assert abs(float(l) - l_exp) < 1/510
        assert a == 0.5

def test_hue_is_never_scaled():
    h, s, l = convert((1.0, 0.0, 0.0), "rgb", "hsl", input_type=FormatType.FLOAT, output_type=FormatType.PERCENTAGE)
    assert h == 0
    assert s == 100.0
    assert l == 50.0

    h, s, l = convert((0, 0, 255), "rgb", "hsl", output_type=FormatType.INT)
    assert (h, s, l) == (240, 255, 128)

def test_space_names_are_case_insensitive():
    assert convert((255, 0, 0), "RGB", "rgbA") == (255, 0, 0, 255)

@pytest.mark.parametrize("space", ["hsv", "lab", "rgbx", ""])
def test_unknown_space(space):
    with pytest.raises(ValueError):
        convert((0, 0, 0), space, "rgb")
    with pytest.raises(ValueError):
        convert((0, 0, 0), "rgb", space)

def test_np_convert_matches_scalar():
    colors = np.array(list(samples_rgb_hsl.keys()))
    out = np_convert(colors, "rgb", "hsla", input_type=FormatType.FLOAT, output_type=FormatType.FLOAT)

    assert out.shape == (len(colors), 4)
    for row, color in zip(out, colors):
        expected = convert(tuple(color), "rgb", "hsla", input_type=FormatType.FLOAT, output_type=FormatType.FLOAT)
        assert np.allclose(row, expected)
    assert np.all(out[..., 3] == 1.0)

def test_np_convert_keeps_leading_dimensions():
    grid = np.zeros((2, 5, 4))
    grid[..., 0] = 1.0
    out = np_convert(grid, "rgba", "hsla", input_type=FormatType.FLOAT, output_type=FormatType.INT)
    assert out.shape == (2, 5, 4)
    assert np.all(out[..., 2] == 128)
