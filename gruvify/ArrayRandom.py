import numpy as np

#https://rosettacode.org/wiki/Pseudo-random_numbers/Splitmix64
class ArrayRandom:
	"""
		Seeded SplitMix64 noise source for the grain effects.
		Same seed and same call order -> same grain, on any platform.
	"""
	MASK = 2**64-1
	GAMMA = np.uint64(0x9e3779b97f4a7c15)
	MIX1 = np.uint64(0xbf58476d1ce4e5b9)
	MIX2 = np.uint64(0x94d049bb133111eb)

	def __init__(self, seed: int = 0):
		if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
			raise ValueError("seed must be an integer")
		self.seed = int(seed)
		self._state = int(seed) & self.MASK

	def _next(self, count: int):
		"""uint64[count] next outputs of the stream"""
		z = np.arange(1, count+1, dtype=np.uint64) * self.GAMMA + np.uint64(self._state)
		z = (z ^ (z >> np.uint64(30))) * self.MIX1
		z = (z ^ (z >> np.uint64(27))) * self.MIX2
		z ^= z >> np.uint64(31)
		self._state = (self._state + int(self.GAMMA) * count) & self.MASK
		return z

	def uniformInt(self, low: int, high: int, shape: tuple):
		"""int64[shape] uniformInt(int low, int high, tuple shape) in [low, high)"""
		if high <= low:
			return np.full(shape, low, dtype=np.int64)
		count = int(np.prod(shape, dtype=np.int64))
		span = high - low
		unit = (self._next(count) >> np.uint64(11)).astype(np.float64) / float(1 << 53) #[0,1)
		vals = np.minimum((unit * span).astype(np.int64), span - 1)
		return (low + vals).reshape(shape)

	def grain(self, intensity: int, height: int, width: int):
		"""float64[height][width][1] luma noise in [-intensity, intensity) 8-bit units, normalized"""
		noise = self.uniformInt(-intensity, intensity, (height, width))
		return noise[...,None] / 255.0
