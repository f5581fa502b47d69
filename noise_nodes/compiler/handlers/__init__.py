# Handlers Package
# Each module contains handlers for one node category

from .noise import handle_base_noise, handle_cellular
from .transform import handle_fractal, handle_frequency, handle_translate
from .math_ops import handle_unary, handle_binary, handle_lerp, handle_clamp, handle_triangle_wave
from .seed import handle_add_seed, handle_mul_seed
from .input import handle_position

__all__ = [
    'handle_base_noise', 'handle_cellular',
    'handle_fractal', 'handle_frequency', 'handle_translate',
    'handle_unary', 'handle_binary', 'handle_lerp', 'handle_clamp', 'handle_triangle_wave',
    'handle_add_seed', 'handle_mul_seed',
    'handle_position',
]
