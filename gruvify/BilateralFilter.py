"""Edge preserving smoothing. Range weights use Lab distance, RGB channels are averaged."""

import math

import numpy as np
from numba import njit, prange

from .CieLab import CieLab
from .ImageBuffer import ImageBuffer


#Smaller sigmas are treated as the identity limit
SIGMA_EPS = 1e-6
#Weight sums at or below this fall back to the center pixel
WEIGHT_EPS = 1e-300


@njit(parallel=True)
def BilateralFilter_njitSmooth(rgb:np.ndarray, lab:np.ndarray, radius:int, spatial_sigma:float, color_sigma:float):
	height = rgb.shape[0]
	width = rgb.shape[1]
	out = np.empty_like(rgb)

	inv_spatial = 1.0 / (2.0 * spatial_sigma * spatial_sigma)
	inv_color = 1.0 / (2.0 * color_sigma * color_sigma)

	#row bands, each output row is written by one worker
	for y in prange(height):
		y0 = max(0, y - radius)
		y1 = min(height, y + radius + 1)
		for x in range(width):
			x0 = max(0, x - radius)
			x1 = min(width, x + radius + 1)

			c_l = lab[y, x, 0]
			c_a = lab[y, x, 1]
			c_b = lab[y, x, 2]

			weight_sum = 0.0
			acc_r = 0.0
			acc_g = 0.0
			acc_b = 0.0
			for ny in range(y0, y1):
				dy = ny - y
				for nx in range(x0, x1):
					dx = nx - x
					diff_l = lab[ny, nx, 0] - c_l
					diff_a = lab[ny, nx, 1] - c_a
					diff_b = lab[ny, nx, 2] - c_b
					grid_sq = dx*dx + dy*dy
					color_sq = diff_l*diff_l + diff_a*diff_a + diff_b*diff_b

					w = math.exp(-grid_sq * inv_spatial - color_sq * inv_color)
					weight_sum += w
					acc_r += w * rgb[ny, nx, 0]
					acc_g += w * rgb[ny, nx, 1]
					acc_b += w * rgb[ny, nx, 2]

			if weight_sum > WEIGHT_EPS and math.isfinite(weight_sum):
				out[y, x, 0] = acc_r / weight_sum
				out[y, x, 1] = acc_g / weight_sum
				out[y, x, 2] = acc_b / weight_sum
			else:
				out[y, x, 0] = rgb[y, x, 0]
				out[y, x, 1] = rgb[y, x, 1]
				out[y, x, 2] = rgb[y, x, 2]
	return out


class BilateralFilter:
	DEFAULT_SPATIAL_SIGMA = 2.0
	DEFAULT_COLOR_SIGMA = 12.0

	@staticmethod
	def windowRadius(spatial_sigma: float, width: int, height: int):
		"""ceil(2*spatial_sigma) clamped to [0, max(width,height)]"""
		if not spatial_sigma > 0.0:
			return 0
		radius = math.ceil(2.0 * min(spatial_sigma, float(max(width, height))))
		return int(min(max(radius, 0), max(width, height)))

	@staticmethod
	def smooth(
		buffer: ImageBuffer,
		spatial_sigma: float = DEFAULT_SPATIAL_SIGMA,
		color_sigma: float = DEFAULT_COLOR_SIGMA
	) -> ImageBuffer:
		spatial_sigma = float(spatial_sigma)
		color_sigma = float(color_sigma)
		radius = BilateralFilter.windowRadius(spatial_sigma, buffer.width, buffer.height)

		if spatial_sigma <= SIGMA_EPS or color_sigma <= SIGMA_EPS or radius == 0:
			return buffer.copy()

		rgb = np.ascontiguousarray(buffer.pixels, dtype=np.float64)
		lab = np.ascontiguousarray(CieLab.srgbToLab(rgb))
		smoothed = BilateralFilter_njitSmooth(rgb, lab, radius, spatial_sigma, color_sigma)

		return buffer.withPixels(smoothed).clamp()
