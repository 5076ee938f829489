"""
Render every style of one image side by side
"""

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .Gruvify import Gruvify
from .ImageBuffer import ImageBuffer
from .StyleConfig import StyleConfig


class StylePreview:
	HEADER_LINE_H = 16 #one line = 16px

	@staticmethod
	def addImgHeader(in_img, metadata, header_h):
		w, h = in_img.size

		header_img = Image.new("RGBA", (w, header_h), (40,40,40,255)) #gruvbox bg
		draw = ImageDraw.Draw(header_img)
		font = ImageFont.load_default()
		draw.text((4, 4), metadata, fill=(235,219,178,255), font=font) #gruvbox fg

		out_img = Image.new("RGBA", (w, h + header_h), (0,0,0,0))
		out_img.paste(header_img, (0, 0))
		out_img.paste(in_img, (0, header_h))
		return out_img

	@staticmethod
	def renderPanels(image_buf: ImageBuffer, config: StyleConfig, style_params: dict = None):
		"""
			list[(str, PIL.Image)] original first, then one panel per style.
			Every panel keeps the strength, requantize and logging of config, style_params go to the styles that have them.
		"""
		style_params = style_params or {}
		panels = [("original", image_buf.toImage().convert("RGBA"))]
		for name in StyleConfig.styleNames():
			panel_config = config.withStyle(name, **style_params)
			result = Gruvify.process(image_buf, panel_config)
			panels.append((name, result.toImage().convert("RGBA")))
		return panels

	@staticmethod
	def generatePreview(input_path: str, output_path: str, config: StyleConfig = None, output_format: str = "PNG", style_params: dict = None):
		if config is None:
			config = StyleConfig()
		strength = config.strength
		image_buf = ImageBuffer.open(input_path)
		panels = StylePreview.renderPanels(image_buf, config, style_params)

		header_h = 2 * StylePreview.HEADER_LINE_H
		concat_img = None
		for name, img in panels:
			metadata = (
				name.upper() + "\n" +
				"--strength=" + str(strength)
			)
			img = StylePreview.addImgHeader(img, metadata, header_h)
			if concat_img is None:
				concat_img = np.array(img)
			else:
				concat_img = np.concatenate((concat_img, np.array(img)), axis=1)

		concat_img = Image.fromarray(concat_img, "RGBA")
		output_format = ImageBuffer.normalizeFormat(output_format)
		if output_format in ImageBuffer.OPAQUE_FORMATS:
			concat_img = concat_img.convert("RGB")
		concat_img.save(output_path, format=output_format)
		return concat_img
