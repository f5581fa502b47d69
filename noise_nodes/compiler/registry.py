# Node Handler Registry
# Maps NodeKind -> handler function

from ..nodes import NodeKind
from .handlers.noise import BASE_NOISES, CELLULAR_NOISES, handle_base_noise, handle_cellular
from .handlers.transform import handle_fractal, handle_frequency, handle_translate
from .handlers.math_ops import (
    UNARY_OPS, BINARY_OPS,
    handle_unary, handle_binary, handle_lerp, handle_clamp, handle_triangle_wave,
)
from .handlers.seed import handle_add_seed, handle_mul_seed
from .handlers.input import handle_position

# Registry mapping every node kind to its handler
HANDLER_REGISTRY = {
    # Noise
    **{kind: handle_base_noise for kind in BASE_NOISES},
    **{kind: handle_cellular for kind in CELLULAR_NOISES},

    # Transform
    NodeKind.FRACTAL: handle_fractal,
    NodeKind.FREQUENCY: handle_frequency,
    NodeKind.TRANSLATE_XY: handle_translate,

    # Math
    **{kind: handle_unary for kind in UNARY_OPS},
    **{kind: handle_binary for kind in BINARY_OPS},
    NodeKind.LERP: handle_lerp,
    NodeKind.CLAMP: handle_clamp,
    NodeKind.TRIANGLE_WAVE: handle_triangle_wave,

    # Seed
    NodeKind.ADD_SEED: handle_add_seed,
    NodeKind.MUL_SEED: handle_mul_seed,

    # Input
    NodeKind.POSITION: handle_position,
}

_unhandled = set(NodeKind) - set(HANDLER_REGISTRY)
if _unhandled:
    raise RuntimeError(f"Node kinds without a handler: {sorted(k.value for k in _unhandled)}")


def get_handler(kind):
    """Get handler function for a node kind."""
    return HANDLER_REGISTRY[kind]

__all__ = ['HANDLER_REGISTRY', 'get_handler']
