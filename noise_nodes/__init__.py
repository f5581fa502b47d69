# Noise Nodes
# Node-graph editor core: graph model, graph-to-sampler compiler and raster preview.

from .errors import (
    NoiseNodesError, CompilationError, TypeMismatchError, MissingInputError,
    GraphCycleError, CompileDepthError, GraphError, NodeNotFoundError,
    InvalidConnectionError, PreviewError,
)
from .values import Value, ValueKind
from .nodes import Node, NodeKind, NodeSpec, SlotSpec
from .graph import NodeGraph, OutPinId, InPinId
from .primitives import Sampler
from .compiler import GraphCompiler, compile_output
from .config import PreviewSettings, CompilerSettings
from .preview import PreviewImage, Previewer, render, compile_and_render
from .viewer import Viewer
from .categories import NODES_BY_CATEGORY, create_from_menu
from .logger import setup_logger, get_logger, log_info, log_warning, log_error, log_debug

__version__ = "0.1.0"

__all__ = [
    'NoiseNodesError', 'CompilationError', 'TypeMismatchError', 'MissingInputError',
    'GraphCycleError', 'CompileDepthError', 'GraphError', 'NodeNotFoundError',
    'InvalidConnectionError', 'PreviewError',
    'Value', 'ValueKind',
    'Node', 'NodeKind', 'NodeSpec', 'SlotSpec',
    'NodeGraph', 'OutPinId', 'InPinId',
    'Sampler',
    'GraphCompiler', 'compile_output',
    'PreviewSettings', 'CompilerSettings',
    'PreviewImage', 'Previewer', 'render', 'compile_and_render',
    'Viewer',
    'NODES_BY_CATEGORY', 'create_from_menu',
    'setup_logger', 'get_logger', 'log_info', 'log_warning', 'log_error', 'log_debug',
]
