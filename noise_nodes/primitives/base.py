# Sampler Base
# Uniform evaluation contract shared by every noise primitive and combinator.
#
# A sampler is a pure function of (point, seed). Combinators own their child
# samplers outright; nothing is shared or cached between samplers.

from abc import ABC, abstractmethod
from typing import Callable, Tuple

Point = Tuple[float, float]


class Sampler(ABC):
    """
    A 2D scalar field evaluated at a point with an integer seed.

    Subclasses implement ``sample``. The builder methods below wrap ``self``
    in a combinator and return the new sampler, so trees can be written as
    ``Perlin().frequency(Constant(2.0)).abs()``.
    """

    @abstractmethod
    def sample(self, point: Point, seed: int) -> float:
        ...

    def __call__(self, point: Point, seed: int = 0) -> float:
        return self.sample(point, seed)

    # --- Unary ---
    def abs(self): return _comb().Abs(self)
    def neg(self): return _comb().Neg(self)
    def sqrt(self): return _comb().Sqrt(self)
    def floor(self): return _comb().Floor(self)
    def ceil(self): return _comb().Ceil(self)
    def round(self): return _comb().Round(self)

    # --- Binary ---
    def add(self, other: 'Sampler'): return _comb().Add(self, other)
    def sub(self, other: 'Sampler'): return _comb().Sub(self, other)
    def mul(self, other: 'Sampler'): return _comb().Mul(self, other)
    def div(self, other: 'Sampler'): return _comb().Div(self, other)
    def rem(self, other: 'Sampler'): return _comb().Rem(self, other)
    def pow(self, other: 'Sampler'): return _comb().Pow(self, other)
    def min(self, other: 'Sampler'): return _comb().Min(self, other)
    def max(self, other: 'Sampler'): return _comb().Max(self, other)

    # --- Ternary ---
    def lerp(self, b: 'Sampler', t: 'Sampler'):
        return _comb().Lerp(self, b, t)

    def clamp(self, lo: 'Sampler', hi: 'Sampler'):
        return _comb().Clamp(self, lo, hi)

    # --- Domain ---
    def frequency(self, frequency: 'Sampler'):
        return _comb().Frequency(self, frequency)

    def translate_xy(self, x: 'Sampler', y: 'Sampler'):
        return _comb().TranslateXy(self, x, y)

    def triangle_wave(self, frequency: 'Sampler'):
        return _comb().TriangleWave(self, frequency)

    # --- Fractal ---
    def fbm(self, octaves: int, gain: float, lacunarity: float):
        return _comb().Fbm(self, octaves, gain, lacunarity)

    # --- Seed ---
    def add_seed(self, value: int):
        return _comb().AddSeed(self, value)

    def mul_seed(self, value: int):
        return _comb().MulSeed(self, value)


class NoiseFn(Sampler):
    """Adapts a plain callable ``f(point, seed) -> float`` to a Sampler."""

    def __init__(self, fn: Callable[[Point, int], float]):
        self.fn = fn

    def sample(self, point: Point, seed: int) -> float:
        return self.fn(point, seed)

    def __repr__(self):
        return f"NoiseFn({getattr(self.fn, '__name__', self.fn)!r})"


def _comb():
    from . import combinators
    return combinators
