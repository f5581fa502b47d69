# Seed Node Specs
# Integer arithmetic on the seed handed to the upstream noise.

from ..values import ValueKind
from .base import NodeKind, NodeSpec, SlotSpec, noise_slot, register_specs

CATEGORY = "Seed"

SPECS = [
    NodeSpec(NodeKind.ADD_SEED, "Add Seed", CATEGORY, (
        noise_slot(),
        SlotSpec("Add", "add", ValueKind.I32, 1, constant_only=True),
    )),
    NodeSpec(NodeKind.MUL_SEED, "Multiply Seed", CATEGORY, (
        noise_slot(),
        SlotSpec("Mul", "mul", ValueKind.I32, 1, constant_only=True),
    )),
]

register_specs(SPECS)
