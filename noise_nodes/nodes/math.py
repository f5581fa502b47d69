# Math Node Specs
# Unary, binary and ternary arithmetic over sampled inputs.

from .base import NodeKind, NodeSpec, float_slot, noise_slot, register_specs

CATEGORY = "Math"

UNARY_KINDS = (
    (NodeKind.ABS, "Abs"),
    (NodeKind.NEG, "Neg"),
    (NodeKind.SQRT, "Sqrt"),
    (NodeKind.FLOOR, "Floor"),
    (NodeKind.CEIL, "Ceil"),
    (NodeKind.ROUND, "Round"),
)

# kind, title, default A, default B
BINARY_KINDS = (
    (NodeKind.ADD, "Add", 0.0, 0.0),
    (NodeKind.SUB, "Subtract", 0.0, 0.0),
    (NodeKind.MUL, "Multiply", 1.0, 1.0),
    (NodeKind.DIV, "Divide", 1.0, 1.0),
    (NodeKind.REM, "Modulo", 1.0, 1.0),
    (NodeKind.POW, "Power", 1.0, 1.0),
    (NodeKind.MIN, "Min", 0.0, 0.0),
    (NodeKind.MAX, "Max", 0.0, 0.0),
)


def _binary(kind, title, lhs, rhs):
    return NodeSpec(kind, title, CATEGORY, (
        float_slot("A", "lhs", lhs),
        float_slot("B", "rhs", rhs),
    ))


SPECS = [NodeSpec(kind, title, CATEGORY, (noise_slot(),)) for kind, title in UNARY_KINDS]
SPECS += [_binary(*entry) for entry in BINARY_KINDS]
SPECS += [
    NodeSpec(NodeKind.LERP, "Lerp", CATEGORY, (
        float_slot("A", "a", 0.0),
        float_slot("B", "b", 1.0),
        float_slot("T", "t", 0.5),
    )),
    NodeSpec(NodeKind.CLAMP, "Clamp", CATEGORY, (
        float_slot("Value", "value", 0.5),
        float_slot("Min", "min", 0.0),
        float_slot("Max", "max", 1.0),
    )),
    NodeSpec(NodeKind.TRIANGLE_WAVE, "Triangle Wave", CATEGORY, (
        noise_slot(),
        float_slot("Frequency", "frequency", 1.0),
    )),
]

register_specs(SPECS)
