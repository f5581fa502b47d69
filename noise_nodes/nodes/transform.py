# Transform Node Specs
# Fractal accumulation and domain transforms.
#
# Fractal parameters other than the noise input are plain constants: the
# octave loop is unrolled at compile time, so they cannot be sampled.

from ..values import ValueKind
from .base import NodeKind, NodeSpec, SlotSpec, float_slot, noise_slot, register_specs

CATEGORY = "Transform"

SPECS = [
    NodeSpec(NodeKind.FRACTAL, "Fractal", CATEGORY, (
        noise_slot(),
        SlotSpec("Octaves", "octaves", ValueKind.U32, 3, constant_only=True),
        float_slot("Gain", "gain", 0.5, constant_only=True),
        float_slot("Lacunarity", "lacunarity", 2.0, constant_only=True),
        float_slot("Weighted Strength", "weighted_strength", 0.0, constant_only=True),
    )),
    NodeSpec(NodeKind.FREQUENCY, "Frequency", CATEGORY, (
        noise_slot(),
        float_slot("Frequency", "frequency", 1.0),
    )),
    NodeSpec(NodeKind.TRANSLATE_XY, "Translate Xy", CATEGORY, (
        noise_slot(),
        float_slot("X", "x", 0.0),
        float_slot("Y", "y", 0.0),
    )),
]

register_specs(SPECS)
