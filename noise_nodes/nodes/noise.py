# Noise Node Specs
# Base noise kinds (no inputs) and cellular kinds (sampled jitter).

from .base import NodeKind, NodeSpec, float_slot, register_specs

CATEGORY = "Noise"


def _jitter():
    return (float_slot("Jitter", "jitter", 1.0),)


SPECS = [
    NodeSpec(NodeKind.VALUE, "Value", CATEGORY),
    NodeSpec(NodeKind.VALUE_CUBIC, "Value Cubic", CATEGORY),
    NodeSpec(NodeKind.PERLIN, "Perlin", CATEGORY),
    NodeSpec(NodeKind.SIMPLEX, "Simplex", CATEGORY),
    NodeSpec(NodeKind.OPEN_SIMPLEX2, "OpenSimplex2", CATEGORY),
    NodeSpec(NodeKind.OPEN_SIMPLEX2S, "OpenSimplex2s", CATEGORY),
    NodeSpec(NodeKind.CELL_VALUE, "Cell Value", CATEGORY, _jitter()),
    NodeSpec(NodeKind.CELL_DISTANCE, "Cell Distance", CATEGORY, _jitter()),
    NodeSpec(NodeKind.CELL_DISTANCE_SQ, "Cell Distance Squared", CATEGORY, _jitter()),
]

register_specs(SPECS)
