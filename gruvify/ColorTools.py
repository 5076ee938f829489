"""Namespace for misc tools used by gruvify"""

import os
import numpy as np
from scipy.spatial import cKDTree


#Manipulate arrays of colors
class ColorTools:

	### Vec3 Tools ###

	@staticmethod
	def vec3Length(vector_list, axis=-1, keepdims=False):
		"""float[...,1] vec3Length(float[...,3] vector_list, int axis=-1, bool keepdims=false)"""
		vector_list = np.asarray(vector_list, dtype=np.float64)
		sq_sum = np.einsum('...i,...i->...', vector_list, vector_list)
		if keepdims:
			sq_sum = np.expand_dims(sq_sum, axis=axis)
		return np.sqrt(sq_sum)

	# vec_a -> vec_b : fac(0 -> 1)
	@staticmethod
	def vec3Lerp(vec_a, vec_b, fac):
		return vec_a * (1.0-fac) + vec_b * fac

	@staticmethod
	def minPairGap(color_list):
		"""float minPairGap(float[][3] color_list) smallest distance between any two colors"""
		if len(color_list) < 2:
			return np.inf
		color_tree = cKDTree(color_list)
		dists, _ = color_tree.query(color_list, k=2)
		return float(dists[:, 1].min())



	### Hex ###

	@staticmethod
	def srgbToHex(rgb):
		"""char* srgbToHex(float[3] rgb)"""
		rgb = np.clip(rgb,[0.0]*3,[1.0]*3)
		rgb = np.round(rgb * 255.0)
		rgb = rgb.astype(np.uint8)
		return "#{:02x}{:02x}{:02x}".format(rgb[0],rgb[1],rgb[2])

	@staticmethod
	def hexToRgb8(hex_str: str):
		"""(int,int,int) hexToRgb8(char* hex_str) accepts #rrggbb or rrggbb"""
		s = hex_str.strip().lstrip("#")
		if len(s) != 6:
			raise ValueError("Invalid hex color "+hex_str)
		return (int(s[0:2],16), int(s[2:4],16), int(s[4:6],16))



	### Misc tools ###

	@staticmethod
	def validateFileList(file_list: list[tuple[str,int]]):
		files_ok = True
		for file, access_flag in file_list:

			if (file is None) or (file==''):
				print("Undefined file")
				files_ok = False
				continue

			#directory
			base_dir = os.path.dirname(file)
			base_dir = "./" if base_dir=='' else base_dir
			if access_flag == os.R_OK:
				if not os.path.isfile(file):
					print("File doesn't exist "+file)
					files_ok = False
				elif not os.access(file, os.R_OK):
					print("Can't read file "+file)
					files_ok = False
				continue

			#writable output, missing directories are created later
			if os.path.exists(file):
				if not os.access(file, access_flag):
					print("Can't access file "+file)
					files_ok = False
			elif os.path.isdir(base_dir) and not os.access(base_dir, access_flag):
				print("Can't create file "+file)
				files_ok = False
		return files_ok
