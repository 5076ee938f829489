"""Fixed 16 color Gruvbox (dark) palette with precomputed Lab values"""

from dataclasses import dataclass

import numpy as np

from .CieLab import CieLab, LabColor
from .ColorTools import ColorTools


@dataclass(frozen=True)
class PaletteEntry:
	name: str
	rgb: tuple	#8-bit (r,g,b)
	lab: LabColor

	@property
	def hex(self):
		return ColorTools.srgbToHex(np.array(self.rgb) / 255.0)


class GruvboxPalette:
	#terminal color order 0-15
	HEX_TABLE = (
		("bg",				"#282828"),
		("red",				"#cc241d"),
		("green",			"#98971a"),
		("yellow",			"#d79921"),
		("blue",				"#458588"),
		("purple",			"#b16286"),
		("aqua",				"#689d6a"),
		("fg4",				"#a89984"),
		("gray",				"#928374"),
		("bright_red",		"#fb4934"),
		("bright_green",	"#b8bb26"),
		("bright_yellow",	"#fabd2f"),
		("bright_blue",	"#83a598"),
		("bright_purple",	"#d3869b"),
		("bright_aqua",	"#8ec07c"),
		("fg",				"#ebdbb2"),
	)
	SIZE = 16

	ENTRIES = None	#tuple[PaletteEntry]
	RGB = None			#float[16][3] normalized srgb, read-only
	LAB = None			#float[16][3], read-only

	@staticmethod
	def _build():
		rgb8 = np.array([ColorTools.hexToRgb8(hex_str) for _, hex_str in GruvboxPalette.HEX_TABLE], dtype=np.float64)
		rgb = rgb8 / 255.0
		lab = CieLab.srgbToLab(rgb)

		if len(rgb) != GruvboxPalette.SIZE:
			raise ValueError("Palette must have "+str(GruvboxPalette.SIZE)+" entries, got "+str(len(rgb)))
		if not ColorTools.minPairGap(lab) > 0.0:
			raise ValueError("Palette entries must be distinct")

		entries = tuple(
			PaletteEntry(
				name=name,
				rgb=tuple(int(c) for c in rgb8[i]),
				lab=LabColor(*(float(c) for c in lab[i]))
			)
			for i, (name, _) in enumerate(GruvboxPalette.HEX_TABLE)
		)

		rgb.setflags(write=False)
		lab.setflags(write=False)
		GruvboxPalette.ENTRIES = entries
		GruvboxPalette.RGB = rgb
		GruvboxPalette.LAB = lab

	@staticmethod
	def entry(idx: int) -> PaletteEntry:
		return GruvboxPalette.ENTRIES[idx]

	@staticmethod
	def byName(name: str) -> PaletteEntry:
		for entry in GruvboxPalette.ENTRIES:
			if entry.name == name:
				return entry
		raise KeyError(name)


GruvboxPalette._build()
