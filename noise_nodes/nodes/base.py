"""
Node kinds, slot layouts and node instances.

The set of node kinds is closed. Each kind has exactly one NodeSpec,
registered by the category modules of this package, describing its input
slots (name, value kind, default, whether it accepts a connection) and its
output names.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ..errors import MissingInputError
from ..values import Number, Value, ValueKind

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    # Noise
    VALUE = "Value"
    VALUE_CUBIC = "ValueCubic"
    PERLIN = "Perlin"
    SIMPLEX = "Simplex"
    OPEN_SIMPLEX2 = "OpenSimplex2"
    OPEN_SIMPLEX2S = "OpenSimplex2s"
    CELL_VALUE = "CellValue"
    CELL_DISTANCE = "CellDistance"
    CELL_DISTANCE_SQ = "CellDistanceSq"

    # Transform
    FRACTAL = "Fractal"
    FREQUENCY = "Frequency"
    TRANSLATE_XY = "TranslateXy"

    # Unary
    ABS = "Abs"
    NEG = "Neg"
    SQRT = "Sqrt"
    FLOOR = "Floor"
    CEIL = "Ceil"
    ROUND = "Round"

    # Binary
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    REM = "Rem"
    POW = "Pow"
    MIN = "Min"
    MAX = "Max"

    # Ternary
    LERP = "Lerp"
    CLAMP = "Clamp"
    TRIANGLE_WAVE = "TriangleWave"

    # Seed
    ADD_SEED = "AddSeed"
    MUL_SEED = "MulSeed"

    # Input
    POSITION = "Position"


@dataclass(frozen=True)
class SlotSpec:
    """
    Static description of one input slot.

    Attributes:
        name: Label shown next to the pin
        field: Attribute name used to read/write the stored constant
        kind: ValueKind the slot requires
        default: Constant used when a node is created
        constant_only: True if the slot never accepts a connection
    """
    name: str
    field: str
    kind: ValueKind = ValueKind.F32
    default: Number = 0.0
    constant_only: bool = False

    def default_value(self) -> Value:
        return Value.of(self.kind, self.default)


@dataclass(frozen=True)
class NodeSpec:
    kind: NodeKind
    title: str
    category: str
    inputs: Tuple[SlotSpec, ...] = ()
    outputs: Tuple[str, ...] = ("Output",)

    def slot_index(self, field: str) -> int:
        for i, slot in enumerate(self.inputs):
            if slot.field == field or slot.name == field:
                return i
        raise KeyError(f"{self.title} has no input '{field}'")


_SPECS: Dict[NodeKind, NodeSpec] = {}


def register_specs(specs: Sequence[NodeSpec]):
    """Register the slot layouts of a category of node kinds."""
    for spec in specs:
        if spec.kind in _SPECS:
            raise ValueError(f"Node kind '{spec.kind.value}' is already registered.")
        _SPECS[spec.kind] = spec


def spec_for(kind: NodeKind) -> NodeSpec:
    return _SPECS[kind]


def all_specs() -> Dict[NodeKind, NodeSpec]:
    return dict(_SPECS)


# Shorthand slot constructors used by the category modules
def noise_slot() -> SlotSpec:
    return SlotSpec("Noise", "noise")


def float_slot(name: str, field: str, default: float, constant_only: bool = False) -> SlotSpec:
    return SlotSpec(name, field, ValueKind.F32, default, constant_only)


class Node:
    """
    A node instance: its kind plus one stored constant per input slot.

    The stored constant of a slot is what the compiler falls back to when the
    slot has no incoming connection.
    """

    def __init__(self, kind: NodeKind, values: Optional[List[Value]] = None):
        self.kind = kind
        spec = spec_for(kind)
        if values is None:
            values = [slot.default_value() for slot in spec.inputs]
        self.values: List[Value] = list(values)

    @classmethod
    def create(cls, kind: NodeKind, **overrides: Number) -> 'Node':
        """
        Create a node with default constants, overriding selected slots.

        Example:
            Node.create(NodeKind.FREQUENCY, frequency=2.0)
        """
        node = cls(kind)
        for field, value in overrides.items():
            node.set(field, value)
        return node

    @property
    def spec(self) -> NodeSpec:
        return spec_for(self.kind)

    @property
    def title(self) -> str:
        return self.spec.title

    @property
    def input_count(self) -> int:
        return len(self.spec.inputs)

    @property
    def output_count(self) -> int:
        return len(self.spec.outputs)

    def slot(self, index: int) -> SlotSpec:
        inputs = self.spec.inputs
        if not 0 <= index < len(inputs):
            raise MissingInputError(f"{self.title} has no input slot {index}", slot=index)
        return inputs[index]

    def value(self, index: int) -> Value:
        """Stored constant of slot ``index``."""
        self.slot(index)
        if index >= len(self.values):
            raise MissingInputError(
                f"{self.title} is missing a stored value for input {index}", slot=index)
        return self.values[index]

    def set_value(self, index: int, value) -> None:
        """
        Store a constant for slot ``index``.

        A Value must already have the slot's kind; a plain number is
        converted to it.
        """
        slot = self.slot(index)
        if isinstance(value, Value):
            value.expect(slot.kind)
        else:
            value = Value.of(slot.kind, value)
        self.values[index] = value

    def get(self, field: str) -> Value:
        return self.value(self.spec.slot_index(field))

    def set(self, field: str, value) -> None:
        self.set_value(self.spec.slot_index(field), value)

    def __getitem__(self, field: str) -> Value:
        return self.get(field)

    def __setitem__(self, field: str, value) -> None:
        self.set(field, value)

    def copy(self) -> 'Node':
        return Node(self.kind, list(self.values))

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.kind == other.kind and self.values == other.values

    def __repr__(self):
        fields = ", ".join(
            f"{slot.field}={value.raw!r}" for slot, value in zip(self.spec.inputs, self.values))
        return f"Node({self.kind.value}{', ' if fields else ''}{fields})"
