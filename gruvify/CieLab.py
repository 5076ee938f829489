"""sRGB <-> CIE Lab (D65) conversion"""

from typing import NamedTuple

import numpy as np


class LabColor(NamedTuple):
	L: float
	a: float
	b: float


class CieLab:
	### Constants ###
	WHITE_D65 = np.array([0.95047, 1.0, 1.08883])

	#IEC 61966-2-1 linear sRGB -> XYZ
	SRGB_TO_XYZ = np.array([
		[0.4124564, 0.3575761, 0.1804375],
		[0.2126729, 0.7151522, 0.0721750],
		[0.0193339, 0.1191920, 0.9503041],
	])
	XYZ_TO_SRGB = np.linalg.inv(SRGB_TO_XYZ)

	EPSILON = 216.0 / 24389.0
	KAPPA = 24389.0 / 27.0


	### Gamma ###

	@staticmethod
	def srgbToLinear(srgb: np.ndarray):
		srgb = np.asarray(srgb, dtype=np.float64)
		cutoff = srgb <= 0.04045
		higher = ((np.maximum(srgb, 0.04045) + 0.055) / 1.055) ** 2.4
		lower = srgb / 12.92
		return np.where(cutoff, lower, higher)

	@staticmethod
	def linearToSrgb(lin: np.ndarray):
		lin = np.maximum(lin, 0.0)
		cutoff = lin <= 0.0031308
		higher = 1.055 * np.power(lin, 1/2.4) - 0.055
		lower = lin * 12.92
		return np.where(cutoff, lower, higher)


	### XYZ ###

	@staticmethod
	def linearToXyz(lin: np.ndarray):
		return lin @ CieLab.SRGB_TO_XYZ.T

	@staticmethod
	def xyzToLinear(xyz: np.ndarray):
		return xyz @ CieLab.XYZ_TO_SRGB.T

	@staticmethod
	def xyzToLab(xyz: np.ndarray):
		t = xyz / CieLab.WHITE_D65
		#cube root above epsilon, linear segment below to stay stable near zero
		f = np.where(t > CieLab.EPSILON, np.cbrt(t), (CieLab.KAPPA * t + 16.0) / 116.0)
		fx, fy, fz = f[...,0], f[...,1], f[...,2]

		L = 116.0 * fy - 16.0
		a = 500.0 * (fx - fy)
		b = 200.0 * (fy - fz)
		return np.stack([L, a, b], axis=-1)

	@staticmethod
	def labToXyz(lab: np.ndarray):
		L, a, b = lab[...,0], lab[...,1], lab[...,2]
		fy = (L + 16.0) / 116.0
		fx = fy + a / 500.0
		fz = fy - b / 200.0

		fx3 = fx**3
		fz3 = fz**3
		x = np.where(fx3 > CieLab.EPSILON, fx3, (116.0 * fx - 16.0) / CieLab.KAPPA)
		y = np.where(L > CieLab.KAPPA * CieLab.EPSILON, fy**3, L / CieLab.KAPPA)
		z = np.where(fz3 > CieLab.EPSILON, fz3, (116.0 * fz - 16.0) / CieLab.KAPPA)
		return np.stack([x, y, z], axis=-1) * CieLab.WHITE_D65


	### sRGB <-> Lab ###

	@staticmethod
	def srgbToLab(srgb: np.ndarray):
		"""float[...,3] srgbToLab(float[...,3] srgb) srgb normalized to [0,1]"""
		lin = CieLab.srgbToLinear(srgb)
		return CieLab.xyzToLab(CieLab.linearToXyz(lin))

	@staticmethod
	def labToSrgb(lab: np.ndarray):
		"""float[...,3] labToSrgb(float[...,3] lab) result is clipped to [0,1]"""
		lab = np.asarray(lab, dtype=np.float64)
		lin = CieLab.xyzToLinear(CieLab.labToXyz(lab))
		return np.clip(CieLab.linearToSrgb(lin), 0.0, 1.0)


	### Single pixel ###

	@staticmethod
	def toLab(pixel) -> LabColor:
		"""8-bit (r,g,b) -> LabColor"""
		rgb = np.asarray(pixel[:3], dtype=np.float64) / 255.0
		L, a, b = CieLab.srgbToLab(rgb)
		return LabColor(float(L), float(a), float(b))

	@staticmethod
	def toRgb(lab) -> tuple:
		"""LabColor -> 8-bit (r,g,b). Clipped, then rounded half to even."""
		srgb = CieLab.labToSrgb(np.asarray(lab, dtype=np.float64))
		rgb = np.round(srgb * 255.0).astype(np.uint8)
		return (int(rgb[0]), int(rgb[1]), int(rgb[2]))
