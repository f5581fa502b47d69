# Noise Node Handlers
# Handles: base noise kinds, cellular kinds

from ... import primitives as prim
from ...nodes import NodeKind

BASE_NOISES = {
    NodeKind.VALUE: prim.Value,
    NodeKind.VALUE_CUBIC: prim.ValueCubic,
    NodeKind.PERLIN: prim.Perlin,
    NodeKind.SIMPLEX: prim.Simplex,
    NodeKind.OPEN_SIMPLEX2: prim.OpenSimplex2,
    NodeKind.OPEN_SIMPLEX2S: prim.OpenSimplex2s,
}

CELLULAR_NOISES = {
    NodeKind.CELL_VALUE: prim.CellValue,
    NodeKind.CELL_DISTANCE: prim.CellDistance,
    NodeKind.CELL_DISTANCE_SQ: prim.CellDistanceSq,
}


def handle_base_noise(ctx):
    """Parameterless noise primitive."""
    return BASE_NOISES[ctx.kind]()


def handle_cellular(ctx):
    """Cellular primitive whose jitter is sampled at each point first."""
    jitter = ctx.input_sampler(0)
    return prim.CellJitter(jitter, CELLULAR_NOISES[ctx.kind])
