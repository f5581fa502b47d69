from typing import TYPE_CHECKING

from ..errors import TypeMismatchError
from ..graph import InPinId, OutPinId
from ..nodes import Node, NodeKind, SlotSpec
from ..primitives import Constant, Sampler
from ..values import Number, ValueKind

if TYPE_CHECKING:
    from .core import GraphCompiler


class NodeContext:
    """
    Context object passed to node handlers during compilation.
    Resolves each input slot to either a compiled upstream sampler or the
    slot's stored constant.
    """

    def __init__(self, compiler: 'GraphCompiler', pin: OutPinId, node: Node):
        self.compiler = compiler
        self.pin = pin
        self.node = node

    @property
    def node_id(self) -> int:
        return self.pin.node

    @property
    def output(self) -> int:
        """Index of the output pin being compiled."""
        return self.pin.output

    @property
    def kind(self) -> NodeKind:
        return self.node.kind

    @property
    def graph(self):
        return self.compiler.graph

    def _remote(self, index: int):
        return self.graph.in_pin_remote(InPinId(self.node_id, index))

    def _mismatch(self, slot_index: int, expected, found, cause=None):
        error = TypeMismatchError(expected, found, node_id=self.node_id, slot=slot_index)
        if cause is not None:
            raise error from cause
        raise error

    def input_sampler(self, index: int) -> Sampler:
        """
        Sampler for a float input slot.

        A connected slot compiles its source output; an unconnected slot
        becomes a Constant holding the stored value widened to float.
        """
        slot: SlotSpec = self.node.slot(index)
        if slot.kind != ValueKind.F32:
            # Integer slots are read as plain constants, never sampled.
            self._mismatch(index, ValueKind.F32, slot.kind)

        remote = self._remote(index)
        if remote is not None:
            return self.compiler.compile(remote)

        value = self.node.value(index)
        return Constant(value.coerce(ValueKind.F32))

    def _constant(self, index: int, kind: ValueKind) -> Number:
        slot: SlotSpec = self.node.slot(index)
        if slot.kind != kind:
            self._mismatch(index, kind, slot.kind)
        if self._remote(index) is not None:
            # A sampled source cannot stand in for a constant-only slot.
            self._mismatch(index, slot.kind, ValueKind.F32)

        value = self.node.value(index)
        try:
            return value.coerce(kind)
        except TypeMismatchError as e:
            self._mismatch(index, e.expected, e.found, cause=e)

    def constant_float(self, index: int) -> float:
        """Plain float read from a constant-only slot."""
        return self._constant(index, ValueKind.F32)

    def constant_int(self, index: int, kind: ValueKind) -> int:
        """Plain integer read from a constant-only slot of ``kind``."""
        return self._constant(index, kind)
