from dataclasses import dataclass, field, fields
from enum import Enum

import math


class Style(Enum):
	GRUVBOX = "gruvbox"
	RETRO = "retro"
	SYNTHWAVE = "synthwave"
	MOSAIC = "mosaic"
	WATERCOLOR = "watercolor"


def _clamp(value, lower, upper=None, fallback=None):
	if isinstance(value, float) and math.isnan(value):
		return fallback if fallback is not None else lower
	value = max(lower, value)
	if upper is not None:
		value = min(upper, value)
	return value


def _setClamped(obj, name, value):
	#frozen dataclasses only allow this during __post_init__
	object.__setattr__(obj, name, value)


### Style variants, each carries only its own parameters ###

@dataclass(frozen=True)
class GruvboxStyle:
	style = Style.GRUVBOX
	BASE_SIGMAS = (2.0, 12.0)	#(spatial, color) of the base smoothing


@dataclass(frozen=True)
class RetroStyle:
	style = Style.RETRO
	BASE_SIGMAS = (1.5, 15.0)

	grain_intensity: int = 12	#noise in [-intensity, intensity) 8-bit units
	chroma_shift: int = 2		#red channel offset in px
	scanline_darken: int = 20	#8-bit units subtracted on even rows
	seed: int = 0

	def __post_init__(self):
		_setClamped(self, "grain_intensity", int(_clamp(int(self.grain_intensity), 0, 255)))
		_setClamped(self, "chroma_shift", int(_clamp(int(self.chroma_shift), 0)))
		_setClamped(self, "scanline_darken", int(_clamp(int(self.scanline_darken), 0, 255)))


@dataclass(frozen=True)
class SynthwaveStyle:
	style = Style.SYNTHWAVE
	BASE_SIGMAS = (0.0, 0.0)

	#(position, 8-bit rgb) top to bottom
	GRADIENT_STOPS = (
		(0.0, (40, 0, 255)),
		(0.5, (255, 0, 200)),
		(1.0, (255, 60, 0)),
	)

	overlay_opacity: float = 0.5
	saturation: float = 1.5
	strength_scale: float = 0.8	#base palette blend is softer under the overlay

	def __post_init__(self):
		_setClamped(self, "overlay_opacity", float(_clamp(float(self.overlay_opacity), 0.0, 1.0)))
		_setClamped(self, "saturation", float(_clamp(float(self.saturation), 0.0, fallback=1.0)))
		_setClamped(self, "strength_scale", float(_clamp(float(self.strength_scale), 0.0, 1.0, fallback=1.0)))


@dataclass(frozen=True)
class MosaicStyle:
	style = Style.MOSAIC
	BASE_SIGMAS = (0.0, 0.0)

	tile_size: int = 16

	def __post_init__(self):
		_setClamped(self, "tile_size", int(_clamp(int(self.tile_size), 1)))


@dataclass(frozen=True)
class WatercolorStyle:
	style = Style.WATERCOLOR
	BASE_SIGMAS = (0.0, 0.0)	#smooths in its own effect

	spatial_sigma: float = 4.0
	color_sigma: float = 30.0
	edge_strength: float = 0.35	#max darkening on strongest edges
	paper_grain: int = 10		#noise in [-grain, grain) 8-bit units
	seed: int = 0

	def __post_init__(self):
		_setClamped(self, "spatial_sigma", float(_clamp(float(self.spatial_sigma), 0.0)))
		_setClamped(self, "color_sigma", float(_clamp(float(self.color_sigma), 0.0)))
		_setClamped(self, "edge_strength", float(_clamp(float(self.edge_strength), 0.0, 1.0)))
		_setClamped(self, "paper_grain", int(_clamp(int(self.paper_grain), 0, 255)))


STYLE_VARIANTS = {
	Style.GRUVBOX: GruvboxStyle,
	Style.RETRO: RetroStyle,
	Style.SYNTHWAVE: SynthwaveStyle,
	Style.MOSAIC: MosaicStyle,
	Style.WATERCOLOR: WatercolorStyle,
}


@dataclass(frozen=True)
class StyleConfig:
	"""
		Validated once, then passed unchanged through the pipeline.
		Sigmas left as None take the base smoothing of the style variant.
	"""
	DEFAULT_STRENGTH = 0.7

	style: object = field(default_factory=GruvboxStyle)
	strength: float = DEFAULT_STRENGTH
	spatial_sigma: float = None	#base smoothing of the palette matched image
	color_sigma: float = None
	requantize: bool = True		#snap the smoothed image back to the palette
	logging: bool = False

	def __post_init__(self):
		if type(self.style) not in STYLE_VARIANTS.values():
			raise ValueError("Unknown style variant "+repr(self.style))
		base_spatial, base_color = self.style.BASE_SIGMAS
		if self.spatial_sigma is None:
			_setClamped(self, "spatial_sigma", base_spatial)
		if self.color_sigma is None:
			_setClamped(self, "color_sigma", base_color)
		_setClamped(self, "strength", float(_clamp(float(self.strength), 0.0, 1.0)))
		_setClamped(self, "spatial_sigma", float(_clamp(float(self.spatial_sigma), 0.0)))
		_setClamped(self, "color_sigma", float(_clamp(float(self.color_sigma), 0.0)))

	@property
	def base_strength(self):
		"""Strength used by the palette blend, scaled by the variant if it asks for it"""
		return self.strength * getattr(self.style, "strength_scale", 1.0)

	@staticmethod
	def styleNames():
		return [s.value for s in Style]

	@staticmethod
	def _toStyle(name: str):
		try:
			return Style(str(name).lower())
		except ValueError:
			raise ValueError("Unknown style "+repr(name)+", options: "+", ".join(StyleConfig.styleNames())) from None

	@staticmethod
	def paramNames(name: str):
		"""set of keyword names fromName accepts for this style"""
		variant_cls = STYLE_VARIANTS[StyleConfig._toStyle(name)]
		config_keys = {f.name for f in fields(StyleConfig)} - {"style", "strength"}
		return config_keys | {f.name for f in fields(variant_cls)}

	@staticmethod
	def filterParams(name: str, params: dict):
		"""Keep only the params the named style understands, None values dropped"""
		accepted = StyleConfig.paramNames(name)
		return {k: v for k, v in params.items() if v is not None and k in accepted}

	@staticmethod
	def fromName(name: str, strength: float = DEFAULT_STRENGTH, **params):
		"""
			Build config from a style name. params go to StyleConfig when it has the field, otherwise to the variant.
			None values keep the defaults. Names neither of them has raise TypeError.
		"""
		style = StyleConfig._toStyle(name)
		variant_cls = STYLE_VARIANTS[style]
		variant_keys = {f.name for f in fields(variant_cls)}
		config_keys = {f.name for f in fields(StyleConfig)} - {"style", "strength"}

		variant_params = {}
		config_params = {}
		for key, value in params.items():
			if key in config_keys:
				if value is not None:
					config_params[key] = value
			elif key in variant_keys:
				if value is not None:
					variant_params[key] = value
			else:
				raise TypeError("Style "+style.value+" has no parameter "+repr(key))

		return StyleConfig(
			style=variant_cls(**variant_params),
			strength=strength,
			**config_params
		)

	def withStyle(self, name: str, **params):
		"""
			Same strength, requantize and logging under another style.
			params the named style does not understand are skipped.
		"""
		style_params = {"requantize": self.requantize, "logging": self.logging}
		style_params.update(StyleConfig.filterParams(name, params))
		return StyleConfig.fromName(name, strength=self.strength, **style_params)
