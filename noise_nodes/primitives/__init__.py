# Numeric Sampling Primitives
# Noise bases, cellular variants and the combinators composed by the compiler.

from .base import Point, Sampler, NoiseFn
from .noise import Value, ValueCubic, Perlin, Simplex, OpenSimplex2, OpenSimplex2s
from .cellular import Cellular, CellValue, CellDistance, CellDistanceSq
from .combinators import (
    Constant, PositionX, PositionY,
    Abs, Neg, Sqrt, Floor, Ceil, Round,
    Add, Sub, Mul, Div, Rem, Pow, Min, Max,
    Lerp, Clamp,
    Frequency, TranslateXy, TriangleWave,
    Fbm, fractal_bounding,
    AddSeed, MulSeed,
    CellJitter,
)

__all__ = [
    'Point', 'Sampler', 'NoiseFn',
    'Value', 'ValueCubic', 'Perlin', 'Simplex', 'OpenSimplex2', 'OpenSimplex2s',
    'Cellular', 'CellValue', 'CellDistance', 'CellDistanceSq',
    'Constant', 'PositionX', 'PositionY',
    'Abs', 'Neg', 'Sqrt', 'Floor', 'Ceil', 'Round',
    'Add', 'Sub', 'Mul', 'Div', 'Rem', 'Pow', 'Min', 'Max',
    'Lerp', 'Clamp',
    'Frequency', 'TranslateXy', 'TriangleWave',
    'Fbm', 'fractal_bounding',
    'AddSeed', 'MulSeed',
    'CellJitter',
]
