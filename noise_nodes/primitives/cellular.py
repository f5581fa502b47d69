# Cellular Noise Primitives
# CellValue, CellDistance, CellDistanceSq
#
# Each integer cell holds one feature point displaced from the cell centre by
# a hashed random vector scaled by ``jitter``. The 3x3 block around the
# nearest cell is searched for the closest feature point.

from dataclasses import dataclass

from pyfastnoiselite.pyfastnoiselite import (
    CellularDistanceFunction, CellularReturnType, NoiseType,
)

from .base import Point, Sampler
from . import fastnoise


@dataclass(frozen=True)
class Cellular(Sampler):
    """Shared state for cellular variants."""
    jitter: float = 1.0

    DISTANCE_FUNCTION = CellularDistanceFunction.CellularDistanceFunction_Euclidean
    RETURN_TYPE = CellularReturnType.CellularReturnType_Distance

    def sample(self, point: Point, seed: int) -> float:
        fnl = fastnoise.generator(
            NoiseType.NoiseType_Cellular, seed,
            self.DISTANCE_FUNCTION, self.RETURN_TYPE, float(self.jitter))
        return fastnoise.sample(fnl, point)


class CellValue(Cellular):
    """Hashed value of the nearest cell, in [-1, 1)."""
    RETURN_TYPE = CellularReturnType.CellularReturnType_CellValue


class CellDistance(Cellular):
    """Euclidean distance to the nearest feature point, minus one."""


class CellDistanceSq(Cellular):
    """Squared distance to the nearest feature point, minus one."""
    DISTANCE_FUNCTION = CellularDistanceFunction.CellularDistanceFunction_EuclideanSq
