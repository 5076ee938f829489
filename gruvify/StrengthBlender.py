import math

import numpy as np

from .CieLab import CieLab
from .ColorTools import ColorTools
from .ImageBuffer import ImageBuffer


class StrengthBlender:
	"""
		Sigmoid shaped interpolation between original and palette colors.
		weight(0) == 0, weight(1) == 1 and strictly increasing in between,
		so low strengths barely move the original and the transition is
		smoother through mid range than a linear lerp.
	"""
	STEEPNESS = 8.0

	@staticmethod
	def _logistic(x: float):
		return 1.0 / (1.0 + math.exp(-x))

	@staticmethod
	def clampStrength(strength: float):
		strength = float(strength)
		if math.isnan(strength):
			return 0.0
		return min(1.0, max(0.0, strength))

	@staticmethod
	def weight(strength: float, steepness: float = STEEPNESS):
		s = StrengthBlender.clampStrength(strength)
		k = steepness
		low = StrengthBlender._logistic(-0.5 * k)
		high = StrengthBlender._logistic(0.5 * k)
		return (StrengthBlender._logistic(k * (s - 0.5)) - low) / (high - low)

	@staticmethod
	def blend(original, target, strength: float):
		"""float[...,3] blend(float[...,3] original, float[...,3] target, float strength)"""
		fac = StrengthBlender.weight(strength)
		original = np.asarray(original, dtype=np.float64)
		target = np.asarray(target, dtype=np.float64)
		return ColorTools.vec3Lerp(original, target, fac)

	@staticmethod
	def blendBuffers(original: ImageBuffer, target: ImageBuffer, strength: float) -> ImageBuffer:
		"""Blend in Lab, distance to target shrinks monotonically with strength"""
		original_lab = CieLab.srgbToLab(original.pixels)
		target_lab = CieLab.srgbToLab(target.pixels)
		return StrengthBlender.blendLab(original, original_lab, target_lab, strength)

	@staticmethod
	def blendLab(original: ImageBuffer, original_lab: np.ndarray, target_lab: np.ndarray, strength: float) -> ImageBuffer:
		blended_lab = StrengthBlender.blend(original_lab, target_lab, strength)
		return original.withPixels(CieLab.labToSrgb(blended_lab)).clamp()
