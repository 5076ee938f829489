import numpy as np
from PIL import Image

import os.path


class InvalidInput(ValueError):
	"""Malformed pixel buffer, e.g. zero width or height"""


class ImageBuffer:
	"""
		Row-major normalized sRGB image.
		pixels float64[height, width, 3] in [0,1], alpha float64[height, width] or None
	"""
	pixels = None
	alpha = None

	#private
	def __init__(self, pixels, alpha=None):
		pixels = np.asarray(pixels, dtype=np.float64)
		if pixels.ndim != 3 or pixels.shape[2] != 3:
			raise InvalidInput("Expected pixels of shape (height, width, 3), got "+str(pixels.shape))
		if pixels.shape[0] == 0 or pixels.shape[1] == 0:
			raise InvalidInput("Image has zero size "+str(pixels.shape[1])+"x"+str(pixels.shape[0]))

		if alpha is not None:
			alpha = np.asarray(alpha, dtype=np.float64)
			if alpha.shape != pixels.shape[:2]:
				raise InvalidInput("Alpha shape "+str(alpha.shape)+" doesn't match "+str(pixels.shape[:2]))

		self.pixels = pixels
		self.alpha = alpha

	def __len__(self):
		return self.width * self.height

	@property
	def height(self):
		return self.pixels.shape[0]

	@property
	def width(self):
		return self.pixels.shape[1]


	#public
	@staticmethod
	def fromArray(arr: np.ndarray):
		"""uint8[h][w][3|4] -> ImageBuffer"""
		arr = np.asarray(arr)
		if arr.ndim != 3 or arr.shape[2] not in (3, 4):
			raise InvalidInput("Expected array of shape (height, width, 3|4), got "+str(arr.shape))
		col_list = arr.astype(np.float64) / 255.0
		alpha = col_list[...,3] if arr.shape[2] == 4 else None
		return ImageBuffer(col_list[...,:3], alpha)

	@staticmethod
	def open(img_path: str):
		in_img = Image.open(img_path)
		has_alpha = in_img.mode in ("RGBA", "LA", "PA") or "transparency" in in_img.info
		in_img = in_img.convert("RGBA" if has_alpha else "RGB")
		return ImageBuffer.fromArray(np.asarray(in_img))

	def copy(self):
		alpha = None if self.alpha is None else self.alpha.copy()
		return ImageBuffer(self.pixels.copy(), alpha)

	def withPixels(self, pixels: np.ndarray):
		"""New buffer with replaced pixels and a copy of this alpha"""
		alpha = None if self.alpha is None else self.alpha.copy()
		return ImageBuffer(pixels, alpha)

	def clamp(self):
		np.clip(self.pixels, 0.0, 1.0, out=self.pixels)
		if self.alpha is not None:
			np.clip(self.alpha, 0.0, 1.0, out=self.alpha)
		return self

	def toArray(self):
		"""ImageBuffer -> uint8[h][w][3|4], clipped and rounded half to even"""
		col_list = self.pixels
		if self.alpha is not None:
			col_list = np.concatenate([col_list, self.alpha[...,None]], axis=2)
		rgba = np.clip(np.round(col_list * 255), 0, 255)
		return np.ascontiguousarray(rgba, dtype=np.uint8)

	def toImage(self):
		return Image.fromarray(self.toArray(), "RGB" if self.alpha is None else "RGBA")

	def save(self, output_path: str, output_format: str = "PNG"):
		output_format = ImageBuffer.normalizeFormat(output_format)
		img = self.toImage()
		if output_format in ImageBuffer.OPAQUE_FORMATS and img.mode == "RGBA":
			img = img.convert("RGB")
		if output_format == "PNG":
			img.save(output_path, format=output_format, compress_level=1)
		else:
			img.save(output_path, format=output_format)


	## Format helpers ##

	FORMAT_EXT = {
		"PNG": ".png",
		"JPEG": ".jpg",
		"BMP": ".bmp",
		"TIFF": ".tif",
		"WEBP": ".webp",
	}
	OPAQUE_FORMATS = ("JPEG", "BMP")

	@staticmethod
	def normalizeFormat(output_format: str):
		output_format = str(output_format).upper().lstrip(".")
		if output_format == "JPG":
			return "JPEG"
		if output_format == "TIF":
			return "TIFF"
		return output_format

	@staticmethod
	def defaultOutputPath(input_path: str, suffix: str, output_format: str = "PNG"):
		"""dir/stem.ext -> dir/stem_suffix.<format extension>"""
		output_format = ImageBuffer.normalizeFormat(output_format)
		base_dir = os.path.dirname(input_path)
		stem = os.path.splitext(os.path.basename(input_path))[0]
		format_ext = ImageBuffer.FORMAT_EXT.get(output_format, "." + output_format.lower())
		return os.path.join(base_dir, stem + "_" + suffix + format_ext)
