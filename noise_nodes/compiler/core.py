# Core Graph Compilation Logic
# Lowers the node graph, rooted at one output pin, into a single Sampler
# using the per-kind handlers of the registry.

import logging
import sys
from typing import List, Optional

from ..config import CompilerSettings
from ..errors import CompileDepthError, GraphCycleError, MissingInputError, NodeNotFoundError
from ..graph import NodeGraph, OutPinId
from ..primitives import Sampler
from .node_context import NodeContext
from .registry import get_handler

logger = logging.getLogger(__name__)


class GraphCompiler:
    """
    Recursive lowering of a graph snapshot into a sampler tree.

    Each input is compiled independently: an output feeding several inputs is
    compiled once per input and the resulting samplers share nothing. The
    graph is only read.

    The current recursion path is tracked so that a cycle aborts compilation
    with GraphCycleError instead of recursing until the interpreter gives up.
    """

    def __init__(self, graph: NodeGraph, max_depth: Optional[int] = None):
        self.graph = graph
        self.max_depth = max_depth
        self.nodes_compiled = 0
        # Node ids on the current recursion path
        self._path: List[int] = []

    def compile(self, pin: OutPinId) -> Sampler:
        node = self.graph.get_node(pin.node)
        if node is None:
            raise NodeNotFoundError(f"Node {pin.node} does not exist", node_id=pin.node)
        if not 0 <= pin.output < node.output_count:
            raise MissingInputError(
                f"{node.title} (node {pin.node}) has no output {pin.output}",
                node_id=pin.node)

        if pin.node in self._path:
            cycle = tuple(self._path[self._path.index(pin.node):]) + (pin.node,)
            raise GraphCycleError(
                f"Cycle detected at node {pin.node}: {' -> '.join(map(str, cycle))}",
                node_id=pin.node, path=cycle)

        if self.max_depth is not None and len(self._path) >= self.max_depth:
            raise CompileDepthError(
                f"Compilation exceeded the maximum depth of {self.max_depth} at node {pin.node}",
                node_id=pin.node, max_depth=self.max_depth)

        handler = get_handler(node.kind)
        self._path.append(pin.node)
        try:
            logger.debug(f"Compiling {node.title} (node {pin.node}, output {pin.output})")
            sampler = handler(NodeContext(self, pin, node))
        finally:
            self._path.pop()

        self.nodes_compiled += 1
        return sampler


def compile_output(graph: NodeGraph, root: OutPinId,
                   max_depth: Optional[int] = None,
                   settings: Optional[CompilerSettings] = None) -> Sampler:
    """
    Compile the output pin ``root`` into a Sampler.

    Args:
        graph: Graph snapshot to read
        root: Output pin to compile
        max_depth: Optional recursion limit; overrides ``settings``. With no
            limit the chain may be as deep as the interpreter stack allows.
        settings: Compiler settings (default: CompilerSettings())

    Returns:
        Sampler evaluating ``root`` at any (point, seed)

    Raises:
        CompilationError: the graph is inconsistent (type mismatch, missing
            slot, cycle, depth limit) or ``root`` does not exist
    """
    if max_depth is None:
        max_depth = (settings or CompilerSettings()).max_depth

    compiler = GraphCompiler(graph, max_depth=max_depth)
    try:
        sampler = compiler.compile(root)
    except RecursionError as e:
        # Deeper than the interpreter stack allows; report it like the explicit limit
        limit = sys.getrecursionlimit()
        raise CompileDepthError(
            f"Compilation of {root!r} exceeded the interpreter recursion limit of {limit}",
            node_id=root.node, max_depth=limit) from e
    logger.info(f"Compiled {root!r} from {compiler.nodes_compiled} node(s)")
    return sampler
