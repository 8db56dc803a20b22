import numpy as np

from palettron.conversions import css_rgb_to_hsl, np_css_rgb_to_hsl, css_hsl_to_rgb, np_css_hsl_to_rgb, normalize_hue
from ..samples import samples_rgb_hsl

def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = css_rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1/2
        assert abs(float(s_out) - s_exp) < 1/255
        assert abs(float(l_out) - l_exp) < 1/255

def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    hsl = np_css_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert hsl.shape == expected.shape
    assert np.allclose(hsl[..., 0], expected[..., 0], atol=1/2)
    assert np.allclose(hsl[..., 1], expected[..., 1], atol=1/255)
    assert np.allclose(hsl[..., 2], expected[..., 2], atol=1/255)

def test_hsl_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, l) in samples_rgb_hsl.items():
        r, g, b = css_hsl_to_rgb(h, s, l)

        assert abs(float(r) - r_exp) < 1/255
        assert abs(float(g) - g_exp) < 1/255
        assert abs(float(b) - b_exp) < 1/255

def test_hsl_to_unit_rgb_numpy():
    expected = np.array(list(samples_rgb_hsl.keys()))
    the_matrix = np.array(list(samples_rgb_hsl.values()))
    rgb = np_css_hsl_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(rgb, expected, atol=1/255)

def test_scalar_and_vector_agree():
    hsl = np.array([[15.0, 0.3, 0.7], [200.0, 0.9, 0.1], [359.0, 1.0, 0.5]])
    vector = np_css_hsl_to_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
    for row, out in zip(hsl, vector):
        assert np.allclose(css_hsl_to_rgb(*row), out)

def test_hue_wraps():
    assert normalize_hue(360) == 0
    assert normalize_hue(-15) == 345
    assert normalize_hue(725) == 5
    red = css_hsl_to_rgb(0, 1.0, 0.5)
    assert np.allclose(css_hsl_to_rgb(360, 1.0, 0.5), red)
    assert np.allclose(css_hsl_to_rgb(-360, 1.0, 0.5), red)

def test_achromatic_has_zero_hue_and_saturation():
    h, s, l = css_rgb_to_hsl(0.3, 0.3, 0.3)
    assert h == 0.0
    assert s == 0.0
    assert abs(l - 0.3) < 1e-9

def test_empty_arrays():
    empty = np.empty((0,))
    assert np_css_rgb_to_hsl(empty, empty, empty).shape == (0, 3)
    assert np_css_hsl_to_rgb(empty, empty, empty).shape == (0, 3)
