"""
Node graph: node storage and the connection table.

Connections are stored input-side: each input pin maps to at most one output
pin. Output pins may feed any number of inputs. Node ids are integers handed
out in increasing order and never reused, so an id held by the editor after
its node was removed simply stops resolving.
"""

import logging
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from .errors import InvalidConnectionError, NodeNotFoundError
from .nodes import Node
from .values import Value

logger = logging.getLogger(__name__)

Position = Tuple[float, float]


class OutPinId(NamedTuple):
    node: int
    output: int

    def __repr__(self):
        return f"OutPin({self.node}.{self.output})"


class InPinId(NamedTuple):
    node: int
    input: int

    def __repr__(self):
        return f"InPin({self.node}.{self.input})"


class NodeGraph:
    def __init__(self):
        self._nodes: Dict[int, Node] = {}
        self._positions: Dict[int, Position] = {}
        # Arena of connections keyed by destination
        self._connections: Dict[InPinId, OutPinId] = {}
        self._next_id = 0

    # -------------------------------------------------------------------------
    # Nodes
    # -------------------------------------------------------------------------

    def insert_node(self, node: Node, pos: Position = (0.0, 0.0)) -> int:
        """Add ``node`` at the editor position ``pos`` and return its id."""
        node_id = self._next_id
        self._next_id += 1
        self._nodes[node_id] = node
        self._positions[node_id] = (float(pos[0]), float(pos[1]))
        logger.debug(f"Inserted {node.title} as node {node_id}")
        return node_id

    def remove_node(self, node_id: int) -> Node:
        """Remove a node and every connection into or out of it."""
        node = self._nodes.pop(node_id, None)
        if node is None:
            raise NodeNotFoundError(f"Node {node_id} does not exist", node_id=node_id)
        del self._positions[node_id]

        stale = [
            in_pin for in_pin, out_pin in self._connections.items()
            if in_pin.node == node_id or out_pin.node == node_id
        ]
        for in_pin in stale:
            del self._connections[in_pin]

        logger.debug(f"Removed node {node_id} and {len(stale)} connection(s)")
        return node

    def get_node(self, node_id: Optional[int]) -> Optional[Node]:
        """Node for ``node_id``, or None if it was never created or was removed."""
        if node_id is None:
            return None
        return self._nodes.get(node_id)

    def node(self, node_id: int) -> Node:
        node = self._nodes.get(node_id)
        if node is None:
            raise NodeNotFoundError(f"Node {node_id} does not exist", node_id=node_id)
        return node

    def __getitem__(self, node_id: int) -> Node:
        return self.node(node_id)

    def contains(self, node_id: Optional[int]) -> bool:
        return node_id in self._nodes

    def __contains__(self, node_id) -> bool:
        return self.contains(node_id)

    def __len__(self) -> int:
        return len(self._nodes)

    def node_ids(self) -> List[int]:
        return list(self._nodes)

    def nodes(self) -> Iterator[Tuple[int, Node]]:
        return iter(list(self._nodes.items()))

    def position(self, node_id: int) -> Position:
        self.node(node_id)
        return self._positions[node_id]

    def move_node(self, node_id: int, pos: Position):
        self.node(node_id)
        self._positions[node_id] = (float(pos[0]), float(pos[1]))

    # -------------------------------------------------------------------------
    # Connections
    # -------------------------------------------------------------------------

    def _check_out_pin(self, pin: OutPinId):
        node = self.node(pin.node)
        if not 0 <= pin.output < node.output_count:
            raise InvalidConnectionError(
                f"{node.title} (node {pin.node}) has no output {pin.output}", out_pin=pin)

    def _check_in_pin(self, pin: InPinId):
        node = self.node(pin.node)
        if not 0 <= pin.input < node.input_count:
            raise InvalidConnectionError(
                f"{node.title} (node {pin.node}) has no input {pin.input}", in_pin=pin)

    def connect(self, out_pin: OutPinId, in_pin: InPinId):
        """
        Connect ``out_pin`` to ``in_pin``.

        Any connection already feeding ``in_pin`` is dropped first, so the
        input keeps exactly one source.
        """
        self._check_out_pin(out_pin)
        self._check_in_pin(in_pin)

        slot = self._nodes[in_pin.node].slot(in_pin.input)
        if slot.constant_only:
            raise InvalidConnectionError(
                f"Input '{slot.name}' of node {in_pin.node} only accepts a constant",
                out_pin=out_pin, in_pin=in_pin)

        self.drop_inputs(in_pin)
        self._connections[in_pin] = out_pin
        logger.debug(f"Connected {out_pin!r} -> {in_pin!r}")

    def disconnect(self, out_pin: OutPinId, in_pin: InPinId) -> bool:
        """Remove the connection ``out_pin -> in_pin``; False if it did not exist."""
        if self._connections.get(in_pin) != out_pin:
            return False
        del self._connections[in_pin]
        logger.debug(f"Disconnected {out_pin!r} -> {in_pin!r}")
        return True

    def drop_inputs(self, in_pin: InPinId) -> int:
        """Remove the connection feeding ``in_pin``, if any."""
        if self._connections.pop(in_pin, None) is None:
            return 0
        return 1

    def drop_outputs(self, out_pin: OutPinId) -> int:
        """Remove every connection fed by ``out_pin``."""
        targets = self.out_pin_remotes(out_pin)
        for in_pin in targets:
            del self._connections[in_pin]
        return len(targets)

    def in_pin_remote(self, in_pin: InPinId) -> Optional[OutPinId]:
        """Output pin feeding ``in_pin``, or None if it is unconnected."""
        return self._connections.get(in_pin)

    def out_pin_remotes(self, out_pin: OutPinId) -> List[InPinId]:
        return [i for i, o in self._connections.items() if o == out_pin]

    def connections(self) -> List[Tuple[OutPinId, InPinId]]:
        return [(o, i) for i, o in self._connections.items()]

    # -------------------------------------------------------------------------
    # Constants
    # -------------------------------------------------------------------------

    def input_value(self, in_pin: InPinId) -> Value:
        """Stored constant of an input slot."""
        return self.node(in_pin.node).value(in_pin.input)

    def set_input_value(self, in_pin: InPinId, value) -> None:
        """Store a constant for an input slot; the kind must match the slot."""
        self.node(in_pin.node).set_value(in_pin.input, value)

    def __repr__(self):
        return f"NodeGraph(nodes={len(self._nodes)}, connections={len(self._connections)})"
