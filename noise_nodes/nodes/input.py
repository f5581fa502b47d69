# Input Node Specs
# Position exposes the queried point as two outputs.

from .base import NodeKind, NodeSpec, register_specs

CATEGORY = "Input"

SPECS = [
    NodeSpec(NodeKind.POSITION, "Position", CATEGORY, outputs=("X", "Y")),
]

register_specs(SPECS)
