from huepath.conversions import rgb_to_hsv, hsv_to_rgb, np_rgb_to_hsv, np_hsv_to_rgb
from huepath.exceptions import InvalidRange
from huepath.samples.colors import samples_rgb_hsv
import numpy as np
import pytest
import warnings


def test_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = rgb_to_hsv(r, g, b)

        assert h == pytest.approx(h_exp, abs=1e-9)
        assert s == pytest.approx(s_exp, abs=1e-9)
        assert v == pytest.approx(v_exp, abs=1e-9)

def test_rgb_to_hsv_achromatic_hue_is_zero():
    h, s, v = rgb_to_hsv(128, 128, 128)
    assert h == 0.0
    assert s == 0.0
    assert v == pytest.approx(128 / 255 * 100)

    assert rgb_to_hsv(0, 0, 0) == (0.0, 0.0, 0.0)

def test_rgb_to_hsv_out_of_range():
    with pytest.raises(InvalidRange, match="red"):
        rgb_to_hsv(256, 0, 0)
    with pytest.raises(InvalidRange, match="blue"):
        rgb_to_hsv(0, 0, -1)

def test_hsv_to_rgb():
    for rgb, (h, s, v) in samples_rgb_hsv.items():
        assert hsv_to_rgb(h, s, v) == rgb

def test_hsv_to_rgb_wraps_hue():
    assert hsv_to_rgb(360, 100, 100) == (255, 0, 0)
    assert hsv_to_rgb(-120, 100, 100) == (0, 0, 255)
    assert hsv_to_rgb(840, 100, 100) == (0, 255, 0)

def test_hsv_to_rgb_gray():
    assert hsv_to_rgb(200, 0, 50) == (128, 128, 128)
    assert hsv_to_rgb(0, 0, 100) == (255, 255, 255)

def test_hsv_to_rgb_clamps_with_warning():
    with pytest.warns(RuntimeWarning, match="saturation"):
        assert hsv_to_rgb(0, 150, 100) == (255, 0, 0)
    with pytest.warns(RuntimeWarning, match="value"):
        assert hsv_to_rgb(0, 100, -10) == (0, 0, 0)

def test_hsv_to_rgb_ignores_float_noise():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert hsv_to_rgb(0, 100.0000000001, 100) == (255, 0, 0)

def test_round_trip_hsv_rgb():
    for h in range(0, 360, 7):
        for s in (40.0, 70.0, 100.0):
            for v in (60.0, 100.0):
                h_out, s_out, v_out = rgb_to_hsv(*hsv_to_rgb(h, s, v))

                hue_error = abs(h_out - h) % 360
                assert min(hue_error, 360 - hue_error) < 1.5
                assert abs(s_out - s) < 1.0
                assert abs(v_out - v) < 0.5

def test_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    hsv = np_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert hsv.shape == expected.shape
    assert np.allclose(hsv, expected, atol=1e-9)

def test_rgb_to_hsv_numpy_out_of_range():
    with pytest.raises(InvalidRange):
        np_rgb_to_hsv(np.array([0, 300]), 0, 0)

def test_hsv_to_rgb_numpy():
    expected = np.array(list(samples_rgb_hsv.keys()))
    the_matrix = np.array(list(samples_rgb_hsv.values()))
    rgb = np_hsv_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert rgb.dtype == np.uint8
    assert np.array_equal(rgb, expected)

def test_hsv_to_rgb_numpy_matches_scalar():
    hues = np.arange(-30.0, 400.0, 13.0)
    rgb = np_hsv_to_rgb(hues, 80.0, 90.0)
    for h, row in zip(hues, rgb):
        assert tuple(int(c) for c in row) == hsv_to_rgb(h, 80.0, 90.0)
