import numpy as np
import pytest

from gruvify import CieLab, LabColor


def test_white_and_black_lightness():
	white = CieLab.toLab((255, 255, 255))
	black = CieLab.toLab((0, 0, 0))
	assert white.L == pytest.approx(100.0, abs=1e-3)
	assert abs(white.a) < 1e-2 and abs(white.b) < 1e-2
	assert tuple(black) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

def test_known_red():
	red = CieLab.toLab((255, 0, 0))
	assert red.L == pytest.approx(53.24, abs=0.05)
	assert red.a == pytest.approx(80.09, abs=0.1)
	assert red.b == pytest.approx(67.20, abs=0.1)

def test_round_trip_grid_within_one_unit():
	levels = np.arange(0, 256, 5)
	rr, gg, bb = np.meshgrid(levels, levels, levels, indexing='ij')
	rgb8 = np.stack([rr.ravel(), gg.ravel(), bb.ravel()], axis=1)

	lab = CieLab.srgbToLab(rgb8 / 255.0)
	back = np.round(CieLab.labToSrgb(lab) * 255.0)
	assert np.max(np.abs(back - rgb8)) <= 1

def test_round_trip_single_pixels():
	for pixel in [(0, 0, 0), (1, 2, 3), (128, 128, 128), (255, 255, 255), (12, 250, 99), (204, 36, 29)]:
		assert CieLab.toRgb(CieLab.toLab(pixel)) == pixel

def test_round_trip_is_stable():
	pixel = (37, 141, 203)
	once = CieLab.toRgb(CieLab.toLab(pixel))
	twice = CieLab.toRgb(CieLab.toLab(once))
	assert once == twice

def test_to_rgb_clamps_out_of_gamut():
	r, g, b = CieLab.toRgb(LabColor(50.0, 150.0, -150.0))
	assert all(0 <= c <= 255 for c in (r, g, b))
	assert CieLab.toRgb(LabColor(120.0, 0.0, 0.0)) == (255, 255, 255)
	assert CieLab.toRgb(LabColor(-10.0, 0.0, 0.0)) == (0, 0, 0)

def test_near_zero_is_finite():
	tiny = np.array([[1e-9, 0.0, 2e-9], [0.0, 0.0, 0.0]])
	lab = CieLab.srgbToLab(tiny)
	assert np.all(np.isfinite(lab))
	assert np.all(np.isfinite(CieLab.labToSrgb(lab)))

def test_vectorized_shape_kept():
	pixels = np.random.default_rng(1).random((4, 5, 3))
	assert CieLab.srgbToLab(pixels).shape == (4, 5, 3)
	assert CieLab.labToSrgb(CieLab.srgbToLab(pixels)) == pytest.approx(pixels, abs=1e-9)
