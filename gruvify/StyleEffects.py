"""Post effects applied after the base palette blend"""

import numpy as np
from scipy import ndimage

from .ArrayRandom import ArrayRandom
from .BilateralFilter import BilateralFilter
from .CieLab import CieLab
from .ImageBuffer import ImageBuffer
from .StyleConfig import (
	StyleConfig,
	GruvboxStyle,
	RetroStyle,
	SynthwaveStyle,
	MosaicStyle,
	WatercolorStyle,
)


class StyleEffects:

	# Private

	@staticmethod
	def _gradient(height: int, stops):
		"""float[height][3] vertical gradient through (position, rgb8) stops"""
		position = np.arange(height, dtype=np.float64) / max(1, height)
		stop_pos = np.array([p for p, _ in stops])
		stop_rgb = np.array([c for _, c in stops], dtype=np.float64) / 255.0
		return np.stack([np.interp(position, stop_pos, stop_rgb[:,c]) for c in range(3)], axis=1)


	# Public

	@staticmethod
	def apply(buffer: ImageBuffer, config: StyleConfig) -> ImageBuffer:
		variant = config.style
		if isinstance(variant, GruvboxStyle):
			return buffer.copy().clamp()
		elif isinstance(variant, RetroStyle):
			return StyleEffects.retro(buffer, config)
		elif isinstance(variant, SynthwaveStyle):
			return StyleEffects.synthwave(buffer, config)
		elif isinstance(variant, MosaicStyle):
			return StyleEffects.mosaic(buffer, config)
		elif isinstance(variant, WatercolorStyle):
			return StyleEffects.watercolor(buffer, config)
		raise TypeError("No effect for style variant "+repr(variant))


	### Retro ###

	@staticmethod
	def retro(buffer: ImageBuffer, config: StyleConfig) -> ImageBuffer:
		"""VHS misregistration, scanlines and film grain"""
		params = config.style
		pixels = buffer.pixels
		height, width = buffer.height, buffer.width
		out = pixels.copy()

		#red pulled from the right, blue from the row below, edges clamped
		x_idxs = np.minimum(np.arange(width) + params.chroma_shift, width - 1)
		y_idxs = np.minimum(np.arange(height) + 1, height - 1)
		out[:,:,0] = pixels[:, x_idxs, 0]
		out[:,:,2] = pixels[y_idxs, :, 2]

		out[0::2] -= params.scanline_darken / 255.0

		if params.grain_intensity > 0:
			rand = ArrayRandom(params.seed)
			out += rand.grain(params.grain_intensity, height, width)

		return buffer.withPixels(out).clamp()


	### Synthwave ###

	@staticmethod
	def synthwave(buffer: ImageBuffer, config: StyleConfig) -> ImageBuffer:
		"""Additive neon gradient, then chroma boost in Lab"""
		params = config.style
		gradient = StyleEffects._gradient(buffer.height, SynthwaveStyle.GRADIENT_STOPS)
		out = buffer.pixels + gradient[:,None,:] * params.overlay_opacity
		out = np.clip(out, 0.0, 1.0)

		if params.saturation != 1.0:
			lab = CieLab.srgbToLab(out)
			lab[...,1:3] *= params.saturation
			out = CieLab.labToSrgb(lab)

		return buffer.withPixels(out).clamp()


	### Mosaic ###

	@staticmethod
	def mosaicTiles(height: int, width: int, tile_size: int):
		"""Tile start rows, start cols, row heights, col widths. Edge tiles keep their smaller extent."""
		tile_size = max(1, int(tile_size))
		y_starts = np.arange(0, height, tile_size)
		x_starts = np.arange(0, width, tile_size)
		row_sizes = np.diff(np.append(y_starts, height))
		col_sizes = np.diff(np.append(x_starts, width))
		return y_starts, x_starts, row_sizes, col_sizes

	@staticmethod
	def mosaic(buffer: ImageBuffer, config: StyleConfig) -> ImageBuffer:
		"""Replace every tile with the mean of its own pixels"""
		y_starts, x_starts, row_sizes, col_sizes = StyleEffects.mosaicTiles(
			buffer.height, buffer.width, config.style.tile_size
		)
		counts = np.outer(row_sizes, col_sizes).astype(np.float64)

		def tileMean(channels):
			sums = np.add.reduceat(np.add.reduceat(channels, y_starts, axis=0), x_starts, axis=1)
			means = sums / counts.reshape(counts.shape + (1,)*(channels.ndim-2))
			return np.repeat(np.repeat(means, row_sizes, axis=0), col_sizes, axis=1)

		out = buffer.withPixels(tileMean(buffer.pixels))
		if buffer.alpha is not None:
			out.alpha = tileMean(buffer.alpha)
		return out.clamp()


	### Watercolor ###

	@staticmethod
	def edgeMask(pixels: np.ndarray):
		"""Sobel magnitude of Lab lightness normalized to [0,1]"""
		lightness = CieLab.srgbToLab(pixels)[...,0]
		gx = ndimage.sobel(lightness, axis=1, mode="nearest")
		gy = ndimage.sobel(lightness, axis=0, mode="nearest")
		mag = np.hypot(gx, gy)
		max_mag = float(mag.max())
		if max_mag <= 1e-8:
			return np.zeros_like(mag)
		return mag / max_mag

	@staticmethod
	def watercolor(buffer: ImageBuffer, config: StyleConfig) -> ImageBuffer:
		"""Soft bilateral wash, darkened ink edges and paper grain"""
		params = config.style
		soft = BilateralFilter.smooth(buffer, params.spatial_sigma, params.color_sigma)

		mask = StyleEffects.edgeMask(soft.pixels)
		out = soft.pixels - params.edge_strength * mask[...,None]

		if params.paper_grain > 0:
			rand = ArrayRandom(params.seed)
			out = out + rand.grain(params.paper_grain, buffer.height, buffer.width)

		return buffer.withPixels(out).clamp()
