"""
Editor-side view state: which node is previewed and what changed this frame.

The viewer never owns graph state. The active node is a plain id that may
outlive its node; lookups check existence and treat a stale id as "nothing
to preview".
"""

from typing import Optional, Set

from .graph import InPinId, NodeGraph, OutPinId
from .logger import log_debug


class Viewer:
    def __init__(self):
        self.active_node: Optional[int] = None
        self._prev_active_node: Optional[int] = None
        self._changed_nodes: Set[int] = set()

    def begin_frame(self):
        """Start a new editor frame: forget edits and snapshot the active node."""
        self._changed_nodes.clear()
        self._prev_active_node = self.active_node

    def set_active(self, node_id: Optional[int]):
        self.active_node = node_id

    def toggle_active(self, node_id: int) -> bool:
        """Flip the active checkbox of ``node_id``; True if it is now active."""
        if self.active_node == node_id:
            self.active_node = None
            return False
        self.active_node = node_id
        return True

    def mark_changed(self, node_id: int):
        self._changed_nodes.add(node_id)

    @property
    def changed_nodes(self) -> Set[int]:
        return set(self._changed_nodes)

    def changed(self) -> Optional[int]:
        """
        Node to re-preview, if any.

        Returns the active node when it differs from the start of the frame
        or when any node was edited during the frame, otherwise None.
        """
        if self.active_node != self._prev_active_node or self._changed_nodes:
            return self.active_node
        return None

    # Graph edits routed through the viewer so the preview notices them

    def connect(self, graph: NodeGraph, out_pin: OutPinId, in_pin: InPinId):
        graph.connect(out_pin, in_pin)
        self.mark_changed(in_pin.node)

    def disconnect(self, graph: NodeGraph, out_pin: OutPinId, in_pin: InPinId) -> bool:
        removed = graph.disconnect(out_pin, in_pin)
        self.mark_changed(in_pin.node)
        return removed

    def set_input_value(self, graph: NodeGraph, in_pin: InPinId, value):
        graph.set_input_value(in_pin, value)
        self.mark_changed(in_pin.node)

    def remove_node(self, graph: NodeGraph, node_id: int):
        # Nodes fed by the removed one lose an input and must re-render
        for out_pin, in_pin in graph.connections():
            if out_pin.node == node_id:
                self.mark_changed(in_pin.node)
        node = graph.remove_node(node_id)
        self._changed_nodes.discard(node_id)
        if self.active_node == node_id:
            log_debug(f"Active node {node_id} removed; leaving the id dangling")
        return node

    def active_output(self, graph: NodeGraph) -> Optional[OutPinId]:
        """First output of the active node, or None if unset or stale."""
        if self.active_node is None or not graph.contains(self.active_node):
            return None
        return OutPinId(self.active_node, 0)
