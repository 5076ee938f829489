"""
gruvify api
"""
#shared
from .ArrayRandom import ArrayRandom
from .CieLab import CieLab, LabColor
from .ColorTools import ColorTools
from .GruvboxPalette import GruvboxPalette, PaletteEntry
from .ImageBuffer import ImageBuffer, InvalidInput

#pipeline stages
from .PaletteMatcher import PaletteMatcher
from .BilateralFilter import BilateralFilter
from .StrengthBlender import StrengthBlender
from .StyleConfig import (
	Style,
	StyleConfig,
	GruvboxStyle,
	RetroStyle,
	SynthwaveStyle,
	MosaicStyle,
	WatercolorStyle,
)
from .StyleEffects import StyleEffects

#gruvify_image.py
from .Gruvify import Gruvify, GruvifyPreset, main
from .StylePreview import StylePreview

__all__ = [
	"ArrayRandom",
	"BilateralFilter",
	"CieLab",
	"ColorTools",
	"GruvboxPalette",
	"GruvboxStyle",
	"Gruvify",
	"GruvifyPreset",
	"ImageBuffer",
	"InvalidInput",
	"LabColor",
	"MosaicStyle",
	"PaletteEntry",
	"PaletteMatcher",
	"RetroStyle",
	"StrengthBlender",
	"Style",
	"StyleConfig",
	"StyleEffects",
	"StylePreview",
	"SynthwaveStyle",
	"WatercolorStyle",
	"main",
]
