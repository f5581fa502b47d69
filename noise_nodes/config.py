"""
Settings for compilation and preview.

The editor owns one PreviewSettings instance and mutates it through the
preview controls; CompilerSettings only carries the recursion guard.
Both can be seeded from environment variables for headless use.
"""

import os
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .logger import log_warning

MIN_RESOLUTION = 8
MAX_RESOLUTION = 512

ENV_RESOLUTION = "NOISE_NODES_PREVIEW_RESOLUTION"
ENV_ZOOM = "NOISE_NODES_PREVIEW_ZOOM"
ENV_MAX_DEPTH = "NOISE_NODES_MAX_DEPTH"


def _env_number(name: str, cast, default):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        log_warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


@dataclass
class PreviewSettings:
    """
    Parameters of the raster preview.

    Attributes:
        resolution: Edge length of the square preview in pixels
        zoom: Scale applied to the [-1, 1] domain before sampling
        value_range: (min, max) mapped to intensities 0..255
        seed: Seed passed to the sampler for every pixel
    """
    resolution: int = 256
    zoom: float = 3.0
    value_range: Tuple[float, float] = field(default=(-1.0, 1.0))
    seed: int = 0

    def with_resolution(self, resolution: int) -> 'PreviewSettings':
        """Copy with the resolution clamped to the editor's allowed range."""
        clamped = max(MIN_RESOLUTION, min(MAX_RESOLUTION, int(resolution)))
        return replace(self, resolution=clamped)

    def with_zoom(self, zoom: float) -> 'PreviewSettings':
        return replace(self, zoom=float(zoom))

    @classmethod
    def from_env(cls) -> 'PreviewSettings':
        settings = cls()
        resolution = _env_number(ENV_RESOLUTION, int, settings.resolution)
        zoom = _env_number(ENV_ZOOM, float, settings.zoom)
        return settings.with_resolution(resolution).with_zoom(zoom)


@dataclass
class CompilerSettings:
    """
    Attributes:
        max_depth: Deepest chain of node inputs compiled before aborting.
            None disables the limit. Compilation still stops with
            CompileDepthError if the interpreter runs out of stack.
    """
    max_depth: Optional[int] = None

    @classmethod
    def from_env(cls) -> 'CompilerSettings':
        return cls(max_depth=_env_number(ENV_MAX_DEPTH, int, cls.max_depth))
