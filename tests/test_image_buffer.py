import os

import numpy as np
import pytest
from PIL import Image

from gruvify import ImageBuffer, InvalidInput


def test_zero_dimensions_rejected():
	with pytest.raises(InvalidInput):
		ImageBuffer(np.zeros((0, 4, 3)))
	with pytest.raises(InvalidInput):
		ImageBuffer(np.zeros((4, 0, 3)))

def test_bad_shapes_rejected():
	with pytest.raises(InvalidInput):
		ImageBuffer(np.zeros((4, 4)))
	with pytest.raises(InvalidInput):
		ImageBuffer(np.zeros((4, 4, 4)))
	with pytest.raises(InvalidInput):
		ImageBuffer(np.zeros((4, 4, 3)), alpha=np.zeros((3, 4)))
	with pytest.raises(InvalidInput):
		ImageBuffer.fromArray(np.zeros((4, 4), dtype=np.uint8))

def test_invalid_input_is_value_error():
	assert issubclass(InvalidInput, ValueError)

def test_from_array_and_back():
	rng = np.random.default_rng(0)
	arr = rng.integers(0, 256, (3, 5, 4), dtype=np.uint8)
	buf = ImageBuffer.fromArray(arr)
	assert (buf.width, buf.height, len(buf)) == (5, 3, 15)
	assert buf.alpha is not None
	assert np.array_equal(buf.toArray(), arr)

def test_clamp_and_rounding():
	buf = ImageBuffer(np.array([[[-0.5, 0.4 / 255.0, 1.5]]]))
	assert buf.toArray().tolist() == [[[0, 0, 255]]]
	buf.clamp()
	assert buf.pixels.min() >= 0.0 and buf.pixels.max() <= 1.0

def test_with_pixels_copies_alpha():
	buf = ImageBuffer(np.zeros((2, 2, 3)), alpha=np.ones((2, 2)))
	other = buf.withPixels(np.ones((2, 2, 3)))
	other.alpha[0, 0] = 0.0
	assert buf.alpha[0, 0] == 1.0

def test_open_and_save(tmp_path):
	rng = np.random.default_rng(1)
	arr = rng.integers(0, 256, (4, 6, 3), dtype=np.uint8)
	path = str(tmp_path / "in.png")
	Image.fromarray(arr, "RGB").save(path)

	buf = ImageBuffer.open(path)
	assert buf.alpha is None
	out_path = str(tmp_path / "out.png")
	buf.save(out_path)
	assert np.array_equal(np.asarray(Image.open(out_path)), arr)

def test_save_rgba_as_jpeg(tmp_path):
	buf = ImageBuffer(np.full((4, 4, 3), 0.5), alpha=np.ones((4, 4)))
	out_path = str(tmp_path / "out.jpg")
	buf.save(out_path, "jpg")
	assert Image.open(out_path).mode == "RGB"

def test_default_output_path():
	assert ImageBuffer.defaultOutputPath("dir/photo.jpeg", "retro") == os.path.join("dir", "photo_retro.png")
	assert ImageBuffer.defaultOutputPath("photo.png", "mosaic", "jpg") == "photo_mosaic.jpg"
	assert ImageBuffer.normalizeFormat("tif") == "TIFF"
