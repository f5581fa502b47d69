# FastNoiseLite Backend
# Configured generators for the noise and cellular primitives.
#
# Generators run at frequency 1 with fractals disabled: domain scaling, fBm
# and seed arithmetic are composed by the combinators instead. A generator is
# never reconfigured after creation, so cached instances are shared freely.

from functools import lru_cache
from typing import Optional

import numpy as np
from pyfastnoiselite.pyfastnoiselite import (
    CellularDistanceFunction, CellularReturnType, FastNoiseLite, NoiseType,
)

from .base import Point


@lru_cache(maxsize=1024)
def generator(noise_type: NoiseType, seed: int,
              distance_function: Optional[CellularDistanceFunction] = None,
              return_type: Optional[CellularReturnType] = None,
              jitter: float = 1.0) -> FastNoiseLite:
    """FastNoiseLite instance for one noise type and seed."""
    fnl = FastNoiseLite(seed)
    fnl.noise_type = noise_type
    fnl.frequency = 1.0
    if noise_type == NoiseType.NoiseType_Cellular:
        fnl.cellular_distance_function = distance_function
        fnl.cellular_return_type = return_type
        fnl.cellular_jitter = jitter
    return fnl


def sample(fnl: FastNoiseLite, point: Point) -> float:
    """Evaluate ``fnl`` at a single 2D point."""
    coords = np.array([[point[0]], [point[1]]], dtype=np.float32)
    return float(fnl.gen_from_coords(coords)[0])
