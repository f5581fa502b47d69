# Base Noise Primitives
# Value, ValueCubic, Perlin, Simplex, OpenSimplex2, OpenSimplex2s
#
# Lattice noises from FastNoiseLite. Output is roughly in [-1, 1].
# Gradient noises (Perlin) evaluate to exactly zero on integer lattice points.

from pyfastnoiselite.pyfastnoiselite import NoiseType

from .base import Point, Sampler
from . import fastnoise


class BaseNoise(Sampler):
    """Parameterless lattice noise; equality is by type."""

    NOISE_TYPE: NoiseType

    def sample(self, point: Point, seed: int) -> float:
        return fastnoise.sample(fastnoise.generator(self.NOISE_TYPE, seed), point)

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class Value(BaseNoise):
    """Bilinear interpolation of hashed lattice values (hermite smoothed)."""
    NOISE_TYPE = NoiseType.NoiseType_Value


class ValueCubic(BaseNoise):
    """Bicubic interpolation over the surrounding 4x4 hashed lattice values."""
    NOISE_TYPE = NoiseType.NoiseType_ValueCubic


class Perlin(BaseNoise):
    """Gradient noise with quintic fade."""
    NOISE_TYPE = NoiseType.NoiseType_Perlin


class Simplex(BaseNoise):
    """
    2D simplex noise over a skewed triangular lattice.

    In two dimensions OpenSimplex2 is ordinary simplex noise (r^2 = 0.5,
    three vertex contributions), so both kinds share one generator.
    """
    NOISE_TYPE = NoiseType.NoiseType_OpenSimplex2


class OpenSimplex2(BaseNoise):
    NOISE_TYPE = NoiseType.NoiseType_OpenSimplex2


class OpenSimplex2s(BaseNoise):
    """Smoother OpenSimplex2 variant with a wider kernel (r^2 = 2/3)."""
    NOISE_TYPE = NoiseType.NoiseType_OpenSimplex2S
