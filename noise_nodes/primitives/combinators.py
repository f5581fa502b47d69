# Sampler Combinators
# Constants, position inputs, arithmetic, blending, domain transforms,
# fractal accumulation and seed arithmetic.
#
# Arithmetic follows IEEE-754: division by zero, sqrt of a negative, pow of a
# negative base to a fractional exponent and friends produce inf/nan instead
# of raising, so a bad branch of the graph only darkens the preview.

import math
from dataclasses import dataclass, replace
from typing import Type

from ..values import wrap_i32
from .base import Point, Sampler
from .cellular import Cellular

INF = float("inf")
NAN = float("nan")


# =============================================================================
# IEEE helpers
# =============================================================================

def ieee_div(a: float, b: float) -> float:
    if b == 0.0:
        if a != a or a == 0.0:
            return NAN
        return math.copysign(INF, a) * math.copysign(1.0, b)
    return a / b


def ieee_rem(a: float, b: float) -> float:
    """Truncated remainder (sign follows the dividend), like C fmod."""
    if b == 0.0 or a != a or b != b or math.isinf(a):
        return NAN
    if math.isinf(b):
        return a
    return math.fmod(a, b)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def ieee_pow(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0.0 and _is_odd_integer(b):
            return -INF
        return INF
    except ValueError:
        # Zero to a negative power, or a negative base to a fractional one.
        if a == 0.0:
            return math.copysign(INF, a) if _is_odd_integer(b) else INF
        return NAN


def ieee_sqrt(a: float) -> float:
    if a < 0.0:
        return NAN
    return math.sqrt(a)


def ieee_floor(a: float) -> float:
    return float(math.floor(a)) if math.isfinite(a) else a


def ieee_ceil(a: float) -> float:
    return float(math.ceil(a)) if math.isfinite(a) else a


def ieee_round(a: float) -> float:
    """Round half away from zero."""
    if not math.isfinite(a):
        return a
    r = math.floor(abs(a))
    if abs(a) - r >= 0.5:
        r += 1
    return math.copysign(float(r), a)


def fmin(a: float, b: float) -> float:
    """Minimum that ignores a single NaN operand."""
    if a != a:
        return b
    if b != b:
        return a
    return a if a < b else b


def fmax(a: float, b: float) -> float:
    """Maximum that ignores a single NaN operand."""
    if a != a:
        return b
    if b != b:
        return a
    return a if a > b else b


# =============================================================================
# Leaves
# =============================================================================

@dataclass(frozen=True)
class Constant(Sampler):
    """Ignores point and seed."""
    value: float

    def sample(self, point: Point, seed: int) -> float:
        return self.value


@dataclass(frozen=True)
class PositionX(Sampler):
    def sample(self, point: Point, seed: int) -> float:
        return point[0]


@dataclass(frozen=True)
class PositionY(Sampler):
    def sample(self, point: Point, seed: int) -> float:
        return point[1]


# =============================================================================
# Unary
# =============================================================================

@dataclass(frozen=True)
class Abs(Sampler):
    noise: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return abs(self.noise.sample(point, seed))


@dataclass(frozen=True)
class Neg(Sampler):
    noise: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return -self.noise.sample(point, seed)


@dataclass(frozen=True)
class Sqrt(Sampler):
    noise: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return ieee_sqrt(self.noise.sample(point, seed))


@dataclass(frozen=True)
class Floor(Sampler):
    noise: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return ieee_floor(self.noise.sample(point, seed))


@dataclass(frozen=True)
class Ceil(Sampler):
    noise: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return ieee_ceil(self.noise.sample(point, seed))


@dataclass(frozen=True)
class Round(Sampler):
    noise: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return ieee_round(self.noise.sample(point, seed))


# =============================================================================
# Binary
# =============================================================================

@dataclass(frozen=True)
class Add(Sampler):
    lhs: Sampler
    rhs: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return self.lhs.sample(point, seed) + self.rhs.sample(point, seed)


@dataclass(frozen=True)
class Sub(Sampler):
    lhs: Sampler
    rhs: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return self.lhs.sample(point, seed) - self.rhs.sample(point, seed)


@dataclass(frozen=True)
class Mul(Sampler):
    lhs: Sampler
    rhs: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return self.lhs.sample(point, seed) * self.rhs.sample(point, seed)


@dataclass(frozen=True)
class Div(Sampler):
    lhs: Sampler
    rhs: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return ieee_div(self.lhs.sample(point, seed), self.rhs.sample(point, seed))


@dataclass(frozen=True)
class Rem(Sampler):
    lhs: Sampler
    rhs: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return ieee_rem(self.lhs.sample(point, seed), self.rhs.sample(point, seed))


@dataclass(frozen=True)
class Pow(Sampler):
    lhs: Sampler
    rhs: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return ieee_pow(self.lhs.sample(point, seed), self.rhs.sample(point, seed))


@dataclass(frozen=True)
class Min(Sampler):
    lhs: Sampler
    rhs: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return fmin(self.lhs.sample(point, seed), self.rhs.sample(point, seed))


@dataclass(frozen=True)
class Max(Sampler):
    lhs: Sampler
    rhs: Sampler

    def sample(self, point: Point, seed: int) -> float:
        return fmax(self.lhs.sample(point, seed), self.rhs.sample(point, seed))


# =============================================================================
# Ternary
# =============================================================================

@dataclass(frozen=True)
class Lerp(Sampler):
    a: Sampler
    b: Sampler
    t: Sampler

    def sample(self, point: Point, seed: int) -> float:
        a = self.a.sample(point, seed)
        b = self.b.sample(point, seed)
        t = self.t.sample(point, seed)
        return a + t * (b - a)


@dataclass(frozen=True)
class Clamp(Sampler):
    value: Sampler
    lo: Sampler
    hi: Sampler

    def sample(self, point: Point, seed: int) -> float:
        value = self.value.sample(point, seed)
        lo = self.lo.sample(point, seed)
        hi = self.hi.sample(point, seed)
        return fmin(fmax(value, lo), hi)


# =============================================================================
# Domain transforms
# =============================================================================

@dataclass(frozen=True)
class Frequency(Sampler):
    """Scales the domain by a sampled factor before sampling ``noise``."""
    noise: Sampler
    scale: Sampler

    def sample(self, point: Point, seed: int) -> float:
        f = self.scale.sample(point, seed)
        return self.noise.sample((point[0] * f, point[1] * f), seed)


@dataclass(frozen=True)
class TranslateXy(Sampler):
    """Shifts the domain by sampled offsets before sampling ``noise``."""
    noise: Sampler
    x: Sampler
    y: Sampler

    def sample(self, point: Point, seed: int) -> float:
        dx = self.x.sample(point, seed)
        dy = self.y.sample(point, seed)
        return self.noise.sample((point[0] + dx, point[1] + dy), seed)


@dataclass(frozen=True)
class TriangleWave(Sampler):
    """Folds the output of ``noise`` into a [-1, 1] triangle wave."""
    noise: Sampler
    scale: Sampler

    def sample(self, point: Point, seed: int) -> float:
        f = self.scale.sample(point, seed)
        v = self.noise.sample(point, seed) * f
        v = v - ieee_floor(v)
        return 1.0 - 4.0 * abs(v - 0.5)


# =============================================================================
# Fractal
# =============================================================================

def fractal_bounding(octaves: int, gain: float) -> float:
    """Normalisation so the summed octave amplitudes add up to one."""
    gain = abs(gain)
    amp = gain
    amp_fractal = 1.0
    for _ in range(1, octaves):
        amp_fractal += amp
        amp *= gain
    return 1.0 / amp_fractal


@dataclass(frozen=True)
class Fbm(Sampler):
    """
    Fractal Brownian motion over ``noise``.

    Each octave samples with the next seed, the domain scaled by
    ``lacunarity`` and the amplitude by ``gain``. A non-zero
    ``weighted_strength`` lowers the contribution of later octaves where
    earlier octaves were low.
    """
    noise: Sampler
    octaves: int
    gain: float
    lacunarity: float
    weighted_strength: float = 0.0

    def weighted(self, strength: float) -> 'Fbm':
        return replace(self, weighted_strength=strength)

    def sample(self, point: Point, seed: int) -> float:
        x, y = point
        total = 0.0
        amp = fractal_bounding(self.octaves, self.gain)

        for _ in range(self.octaves):
            value = self.noise.sample((x, y), seed)
            seed = wrap_i32(seed + 1)
            total += value * amp
            weight = fmin(value + 1.0, 2.0) * 0.5
            amp *= 1.0 + self.weighted_strength * (weight - 1.0)

            x *= self.lacunarity
            y *= self.lacunarity
            amp *= self.gain

        return total


# =============================================================================
# Seed arithmetic
# =============================================================================

@dataclass(frozen=True)
class AddSeed(Sampler):
    noise: Sampler
    offset: int

    def sample(self, point: Point, seed: int) -> float:
        return self.noise.sample(point, wrap_i32(seed + self.offset))


@dataclass(frozen=True)
class MulSeed(Sampler):
    noise: Sampler
    factor: int

    def sample(self, point: Point, seed: int) -> float:
        return self.noise.sample(point, wrap_i32(seed * self.factor))


# =============================================================================
# Cellular with sampled jitter
# =============================================================================

@dataclass(frozen=True)
class CellJitter(Sampler):
    """
    Cellular noise whose jitter is itself a sampler.

    Evaluated in two steps per point: the jitter field is sampled first, then
    a cellular primitive built with that jitter is sampled at the same point.
    """
    jitter: Sampler
    cell_type: Type[Cellular]

    def sample(self, point: Point, seed: int) -> float:
        jitter = self.jitter.sample(point, seed)
        return self.cell_type(jitter).sample(point, seed)
