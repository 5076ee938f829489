#CC0 Kaelygon 2025
"""
Recolor an image toward the Gruvbox palette, optionally with a style effect
"""

import sys
from gruvify import Gruvify

if __name__ == '__main__':
	argv = sys.argv[:]

	d_preset = Gruvify.parser(argv)
	if d_preset:
		Gruvify.usePreset(d_preset)
