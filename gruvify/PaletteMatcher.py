"""Nearest Gruvbox entry in CIE Lab space"""

import numpy as np
from numba import njit, prange

from .CieLab import CieLab
from .GruvboxPalette import GruvboxPalette, PaletteEntry
from .ImageBuffer import ImageBuffer


@njit(parallel=True)
def PaletteMatcher_njitNearest(lab_list:np.ndarray, pal_colors:np.ndarray):
	count = lab_list.shape[0]
	pal_len = pal_colors.shape[0]
	idxs = np.empty(count, dtype=np.int64)
	for i in prange(count):
		min_dist_sq = np.inf
		best_idx = 0
		for j in range(pal_len):
			diff_l = pal_colors[j, 0] - lab_list[i, 0]
			diff_a = pal_colors[j, 1] - lab_list[i, 1]
			diff_b = pal_colors[j, 2] - lab_list[i, 2]
			dist_sq = diff_l*diff_l + diff_a*diff_a + diff_b*diff_b
			#strict, first minimal entry wins ties
			if dist_sq < min_dist_sq:
				min_dist_sq = dist_sq
				best_idx = j
		idxs[i] = best_idx
	return idxs


class PaletteMatcher:

	@staticmethod
	def matchIndices(lab: np.ndarray):
		"""int[...] matchIndices(float[...,3] lab)"""
		lab = np.asarray(lab, dtype=np.float64)
		lead_shape = lab.shape[:-1]
		lab_list = np.ascontiguousarray(lab.reshape(-1, 3))
		pal_colors = np.array(GruvboxPalette.LAB) #writable copy for numba
		idxs = PaletteMatcher_njitNearest(lab_list, pal_colors)
		return idxs.reshape(lead_shape)

	@staticmethod
	def match(lab) -> PaletteEntry:
		idx = PaletteMatcher.matchIndices(np.asarray(lab, dtype=np.float64).reshape(1, 3))[0]
		return GruvboxPalette.entry(int(idx))

	@staticmethod
	def matchLab(lab: np.ndarray):
		"""float[...,3] matchLab(float[...,3] lab) Lab of the nearest entry"""
		return GruvboxPalette.LAB[PaletteMatcher.matchIndices(lab)]

	@staticmethod
	def matchBuffer(buffer: ImageBuffer) -> ImageBuffer:
		lab = CieLab.srgbToLab(buffer.pixels)
		idxs = PaletteMatcher.matchIndices(lab)
		return buffer.withPixels(GruvboxPalette.RGB[idxs])
