"""Run a GruvifyPreset through the Gruvbox pipeline"""
import numpy as np
from dataclasses import dataclass, field

import os
import os.path
import sys
import argparse

from .BilateralFilter import BilateralFilter
from .CieLab import CieLab
from .ColorTools import ColorTools
from .GruvboxPalette import GruvboxPalette
from .ImageBuffer import ImageBuffer, InvalidInput
from .PaletteMatcher import PaletteMatcher
from .StrengthBlender import StrengthBlender
from .StyleConfig import StyleConfig
from .StyleEffects import StyleEffects


@dataclass
class GruvifyPreset:
	image: str 				= None
	output: str				= None
	output_format: str	= "PNG"
	config: StyleConfig	= field(default_factory=StyleConfig)
	preview: bool			= False
	style_params: dict	= field(default_factory=dict) #user set params, reapplied to every preview panel

	valid: bool = False

	def __post_init__(self):
		self.output_format = ImageBuffer.normalizeFormat(self.output_format)
		if self.output is None or self.output == "":
			suffix = "preview" if self.preview else self.config.style.style.value
			self.output = ImageBuffer.defaultOutputPath(str(self.image), suffix, self.output_format)

		preset_files = [
			[self.image, os.R_OK],
			[self.output, os.W_OK],
		]
		self.valid = ColorTools.validateFileList(preset_files)


class Gruvify:

	# Private
	@staticmethod
	def _strToBool(s):
		return True if str(s).lower() in ["true", "1"] else False

	@staticmethod
	def _printQuantError(original: ImageBuffer, result: ImageBuffer):
		delta = CieLab.srgbToLab(result.pixels) - CieLab.srgbToLab(original.pixels)
		delta_e = ColorTools.vec3Length(delta)
		print("Mean delta E: " + str(round(float(np.mean(delta_e)),4)) + ", max: " + str(round(float(np.max(delta_e)),4)))


	# Public

	### Pipeline ###

	@staticmethod
	def harmonize(
		buffer: ImageBuffer,
		strength: float,
		spatial_sigma: float = BilateralFilter.DEFAULT_SPATIAL_SIGMA,
		color_sigma: float = BilateralFilter.DEFAULT_COLOR_SIGMA,
		requantize: bool = True
	) -> ImageBuffer:
		"""Match to palette, smooth, optionally snap back to palette, blend by strength"""
		original_lab = CieLab.srgbToLab(buffer.pixels)
		idxs = PaletteMatcher.matchIndices(original_lab)
		matched = buffer.withPixels(GruvboxPalette.RGB[idxs])

		smoothed = BilateralFilter.smooth(matched, spatial_sigma, color_sigma)
		if requantize:
			target_lab = PaletteMatcher.matchLab(CieLab.srgbToLab(smoothed.pixels))
		else:
			target_lab = CieLab.srgbToLab(smoothed.pixels)

		return StrengthBlender.blendLab(buffer, original_lab, target_lab, strength)

	@staticmethod
	def process(buffer: ImageBuffer, config: StyleConfig = None) -> ImageBuffer:
		if config is None:
			config = StyleConfig()
		if not isinstance(buffer, ImageBuffer):
			raise InvalidInput("Expected ImageBuffer, got "+type(buffer).__name__)
		if buffer.width == 0 or buffer.height == 0:
			raise InvalidInput("Image has zero size")

		if config.logging:
			print("Style "+config.style.style.value+", strength "+str(round(config.base_strength,4)))

		base = Gruvify.harmonize(
			buffer,
			config.base_strength,
			config.spatial_sigma,
			config.color_sigma,
			config.requantize
		)
		result = StyleEffects.apply(base, config)

		if config.logging:
			Gruvify._printQuantError(buffer, result)
		return result


	### Presets ###

	@staticmethod
	def usePreset(preset: GruvifyPreset):
		if not preset or not preset.valid:
			print("Invalid preset")
			return None

		output_path = os.path.dirname(preset.output)
		if output_path == '':
			output_path = "./"
		if not os.path.exists(output_path):
			os.makedirs(output_path)

		if preset.preview:
			from .StylePreview import StylePreview
			StylePreview.generatePreview(preset.image, preset.output, preset.config, preset.output_format, preset.style_params)
			print("Saved preview "+preset.output)
			return preset.output

		image_buf = ImageBuffer.open(preset.image)
		result = Gruvify.process(image_buf, preset.config)
		result.save(preset.output, preset.output_format)
		print("Saved image "+preset.output)
		return preset.output


	## Gruvify Parser ##

	@staticmethod
	def parser(argv):

		parser = argparse.ArgumentParser(prog=argv[0], description="Recolor images toward the Gruvbox palette")

		#all inputs arg_list are strings. Easier to convert str to X
		parser.add_argument(
			'-i', '--input', type=str,
			default="none",
			help="Input image path"
		)
		parser.add_argument(
			'-o', '--output', type=str,
			default="",
			help="Output path. Empty outputs next to input as <name>_<style>.<ext>"
		)
		parser.add_argument(
			'-s', '--strength', type=str,
			default=str(StyleConfig.DEFAULT_STRENGTH),
			help="Palette blend strength 0.0-1.0, clamped"
		)
		parser.add_argument(
			'-t', '--style', type=str,
			default="gruvbox",
			help="Options: " + ", ".join(StyleConfig.styleNames())
		)
		parser.add_argument(
			'-f', '--format', type=str,
			default="PNG",
			dest='output_format',
			help="Output format, e.g. PNG, JPEG, WEBP"
		)
		parser.add_argument(
			'--tile-size', type=str,
			default=None,
			help="Mosaic tile size in px"
		)
		parser.add_argument(
			'--grain', type=str,
			default=None,
			help="Grain intensity in 8-bit units for retro and watercolor"
		)
		parser.add_argument(
			'--seed', type=str,
			default=None,
			help="Grain seed for retro and watercolor"
		)
		parser.add_argument(
			'--spatial-sigma', type=str,
			default=None,
			help="Spatial sigma of the base smoothing"
		)
		parser.add_argument(
			'--color-sigma', type=str,
			default=None,
			help="Lab color sigma of the base smoothing"
		)
		parser.add_argument(
			'-P', '--preview', type=str,
			default="False",
			help="Render every style side by side"
		)
		parser.add_argument(
			'-L', '--logging', type=str,
			default="False",
			help="Print stage info and color error"
		)

		argv = list(argv)
		if len(argv)<=1: #No args
			argv.append("--help")
		arg_list = parser.parse_args(argv[1:])

		if not arg_list.input or str(arg_list.input).lower() == "none":
			print("Missing argument -i, --input <file>")
			return None

		def optional(value, cast):
			return None if value is None else cast(value)

		try:
			style_params = {
				"spatial_sigma":	optional(arg_list.spatial_sigma, float),
				"color_sigma":		optional(arg_list.color_sigma, float),
				"tile_size":		optional(arg_list.tile_size, int),
				"grain_intensity":	optional(arg_list.grain, int),
				"paper_grain":		optional(arg_list.grain, int),
				"seed":				optional(arg_list.seed, int),
			}
			style_params = {k: v for k, v in style_params.items() if v is not None}

			config = StyleConfig.fromName(
				arg_list.style,
				strength	= float(arg_list.strength),
				logging	= Gruvify._strToBool(arg_list.logging),
				**StyleConfig.filterParams(arg_list.style, style_params)
			)
		except ValueError as e:
			print(e)
			return None

		d_preset = GruvifyPreset(
			image				= str(arg_list.input),
			output			= str(arg_list.output),
			output_format	= str(arg_list.output_format),
			config			= config,
			preview			= Gruvify._strToBool(arg_list.preview),
			style_params	= style_params,
		)

		return d_preset if d_preset.valid else None


def main(argv=None):
	argv = sys.argv[:] if argv is None else argv
	d_preset = Gruvify.parser(argv)
	if d_preset is None:
		return 1
	Gruvify.usePreset(d_preset)
	return 0
