# Graph Compiler
# Lowers a node graph into a composed Sampler

from .core import GraphCompiler, compile_output
from .node_context import NodeContext
from .registry import HANDLER_REGISTRY, get_handler

__all__ = ['GraphCompiler', 'compile_output', 'NodeContext', 'HANDLER_REGISTRY', 'get_handler']
