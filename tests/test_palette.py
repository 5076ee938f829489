import numpy as np
import pytest

from gruvify import CieLab, ColorTools, GruvboxPalette, PaletteMatcher
from gruvify.PaletteMatcher import PaletteMatcher_njitNearest


def test_palette_has_sixteen_distinct_entries():
	assert len(GruvboxPalette.ENTRIES) == 16
	assert len({e.rgb for e in GruvboxPalette.ENTRIES}) == 16
	assert len({e.name for e in GruvboxPalette.ENTRIES}) == 16
	assert ColorTools.minPairGap(GruvboxPalette.LAB) > 0.0

def test_palette_tables_are_read_only():
	with pytest.raises(ValueError):
		GruvboxPalette.LAB[0, 0] = 1.0
	with pytest.raises(ValueError):
		GruvboxPalette.RGB[0, 0] = 1.0

def test_entry_lab_matches_rgb():
	for entry in GruvboxPalette.ENTRIES:
		lab = CieLab.toLab(entry.rgb)
		assert tuple(entry.lab) == pytest.approx(tuple(lab))

def test_entry_hex_and_lookup():
	assert GruvboxPalette.entry(0).hex == "#282828"
	assert GruvboxPalette.byName("fg").rgb == (235, 219, 178)
	with pytest.raises(KeyError):
		GruvboxPalette.byName("magenta")

def test_palette_is_gruvbox_dark_table():
	expected = [
		"#282828", "#cc241d", "#98971a", "#d79921", "#458588", "#b16286", "#689d6a", "#a89984",
		"#928374", "#fb4934", "#b8bb26", "#fabd2f", "#83a598", "#d3869b", "#8ec07c", "#ebdbb2",
	]
	assert [e.hex for e in GruvboxPalette.ENTRIES] == expected

def test_every_entry_matches_itself():
	for idx, entry in enumerate(GruvboxPalette.ENTRIES):
		assert PaletteMatcher.match(entry.lab) is entry
		assert PaletteMatcher.matchIndices(np.array(entry.lab)) == idx

def test_match_is_deterministic():
	lab = CieLab.toLab((100, 150, 200))
	first = PaletteMatcher.match(lab)
	for _ in range(5):
		assert PaletteMatcher.match(lab) == first

def test_match_black_and_white():
	assert PaletteMatcher.match(CieLab.toLab((0, 0, 0))).name == "bg"
	assert PaletteMatcher.match(CieLab.toLab((255, 255, 255))).name == "fg"

def test_ties_resolve_to_first_entry():
	pal = np.array([
		[10.0, 0.0, 0.0],
		[50.0, 0.0, 0.0],
		[90.0, 0.0, 0.0],
		[50.0, 0.0, 0.0],
	])
	lab = np.array([[50.0, 0.0, 0.0], [30.0, 0.0, 0.0], [70.0, 0.0, 0.0]])
	idxs = PaletteMatcher_njitNearest(lab, pal)
	#[30,0,0] is equally far from 10 and 50, [70,0,0] from 50 and 90
	assert list(idxs) == [1, 0, 1]

def test_match_indices_matches_brute_force():
	rng = np.random.default_rng(7)
	lab = CieLab.srgbToLab(rng.random((9, 11, 3)))
	idxs = PaletteMatcher.matchIndices(lab)
	assert idxs.shape == (9, 11)

	dists = np.linalg.norm(lab[..., None, :] - GruvboxPalette.LAB, axis=-1)
	assert np.array_equal(idxs, np.argmin(dists, axis=-1))

def test_match_buffer_only_palette_colors():
	from gruvify import ImageBuffer
	rng = np.random.default_rng(3)
	buf = ImageBuffer(rng.random((6, 7, 3)), alpha=np.full((6, 7), 0.5))
	matched = PaletteMatcher.matchBuffer(buf)
	palette_rgb = {e.rgb for e in GruvboxPalette.ENTRIES}
	for pixel in matched.toArray().reshape(-1, 4):
		assert tuple(int(c) for c in pixel[:3]) in palette_rgb
	assert np.array_equal(matched.alpha, buf.alpha)
