"""
Custom exceptions for Noise Nodes.

Compilation errors are fatal: they indicate a graph that was not kept
consistent through the mutation API. Graph errors are raised by the mutation
API itself when a caller asks for something the data model forbids.

Exception Hierarchy:
    NoiseNodesError (base)
    ├── CompilationError
    │   ├── TypeMismatchError
    │   ├── MissingInputError
    │   ├── GraphCycleError
    │   └── CompileDepthError
    ├── GraphError
    │   ├── NodeNotFoundError
    │   └── InvalidConnectionError
    └── PreviewError
"""


class NoiseNodesError(Exception):
    """Base exception for all Noise Nodes errors."""
    pass


# =============================================================================
# Compilation Errors
# =============================================================================

class CompilationError(NoiseNodesError):
    """Base exception for graph-to-sampler compilation errors."""

    def __init__(self, message: str, node_id: int = None):
        super().__init__(message)
        self.node_id = node_id


class TypeMismatchError(CompilationError):
    """
    Raised when a stored constant does not have the kind its slot requires.

    Attributes:
        expected: ValueKind the slot requires
        found: ValueKind actually stored
        slot: Input slot index, if known
    """

    def __init__(self, expected, found, node_id: int = None, slot: int = None):
        message = f"expected kind {expected} but found kind {found}"
        if node_id is not None:
            message = f"node {node_id} input {slot}: {message}"
        super().__init__(message, node_id=node_id)
        self.expected = expected
        self.found = found
        self.slot = slot


class MissingInputError(CompilationError):
    """Raised when a node lacks an input slot or output pin the compiler needs."""

    def __init__(self, message: str, node_id: int = None, slot: int = None):
        super().__init__(message, node_id=node_id)
        self.slot = slot


class GraphCycleError(CompilationError):
    """Raised when an output pin is reached again on the current compile path."""

    def __init__(self, message: str, node_id: int = None, path: tuple = ()):
        super().__init__(message, node_id=node_id)
        self.path = path


class CompileDepthError(CompilationError):
    """Raised when compilation recurses deeper than the configured limit."""

    def __init__(self, message: str, node_id: int = None, max_depth: int = None):
        super().__init__(message, node_id=node_id)
        self.max_depth = max_depth


# =============================================================================
# Graph Errors
# =============================================================================

class GraphError(NoiseNodesError):
    """Base exception for graph mutation errors."""
    pass


class NodeNotFoundError(GraphError):
    """Raised when a node id does not refer to a node in the graph."""

    def __init__(self, message: str, node_id: int = None):
        super().__init__(message)
        self.node_id = node_id


class InvalidConnectionError(GraphError):
    """Raised when a connection would violate the data model."""

    def __init__(self, message: str, out_pin=None, in_pin=None):
        super().__init__(message)
        self.out_pin = out_pin
        self.in_pin = in_pin


# =============================================================================
# Preview Errors
# =============================================================================

class PreviewError(NoiseNodesError):
    """Raised for invalid preview parameters."""
    pass
