"""
Raster preview of a compiled sampler.

Drives a Sampler over a square pixel grid and quantizes the samples to 8-bit
grey intensities. Every call recomputes the full grid; nothing is cached
between renders.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .compiler import compile_output
from .config import CompilerSettings, PreviewSettings
from .errors import CompilationError, PreviewError
from .graph import NodeGraph, OutPinId
from .logger import log_debug, log_error, log_info
from .primitives import Sampler


@dataclass
class PreviewImage:
    """
    Square grey image produced by render().

    Attributes:
        pixels: uint8 array of shape (resolution, resolution), indexed [y, x]
    """
    pixels: np.ndarray

    @property
    def size(self) -> int:
        return self.pixels.shape[0]

    def __getitem__(self, yx):
        return int(self.pixels[yx])

    def to_rgba(self) -> bytes:
        """Opaque RGBA bytes, row-major, for uploading as a texture."""
        rgba = np.empty(self.pixels.shape + (4,), dtype=np.uint8)
        rgba[..., 0] = self.pixels
        rgba[..., 1] = self.pixels
        rgba[..., 2] = self.pixels
        rgba[..., 3] = 255
        return rgba.tobytes()


def domain_coordinates(resolution: int, zoom: float) -> np.ndarray:
    """Sample coordinates of pixels 0..resolution-1 along one axis."""
    steps = np.arange(resolution, dtype=np.float64)
    return ((steps / resolution) * 2.0 - 1.0) * zoom


def quantize(values: np.ndarray, value_range: Tuple[float, float]) -> np.ndarray:
    """
    Map samples in ``value_range`` to intensities 0..255.

    The conversion saturates: NaN becomes 0, values outside the range clip
    to 0 or 255 and the fractional part is truncated.
    """
    lo, hi = value_range
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        scaled = (np.asarray(values, dtype=np.float64) - lo) / (hi - lo) * 255.0
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=255.0, neginf=0.0)
    return np.trunc(np.clip(scaled, 0.0, 255.0)).astype(np.uint8)


def render(sampler: Sampler, resolution: int, zoom: float,
           value_range: Sequence[float], seed: int = 0) -> PreviewImage:
    """
    Evaluate ``sampler`` at every pixel of a resolution x resolution grid.

    Pixel (x, y) samples the point ((x / R * 2 - 1) * zoom, (y / R * 2 - 1) * zoom).
    """
    if resolution < 1:
        raise PreviewError(f"Preview resolution must be at least 1, got {resolution}")
    lo, hi = value_range

    coords = domain_coordinates(resolution, zoom)
    values = np.empty((resolution, resolution), dtype=np.float64)
    for y, v in enumerate(coords):
        for x, u in enumerate(coords):
            values[y, x] = sampler.sample((float(u), float(v)), seed)

    return PreviewImage(quantize(values, (lo, hi)))


def compile_and_render(graph: NodeGraph, root: Optional[OutPinId], resolution: int,
                       zoom: float, value_range: Sequence[float],
                       compiler_settings: Optional[CompilerSettings] = None) -> Optional[PreviewImage]:
    """
    Compile ``root`` and render it; None when there is nothing to render.

    A missing root or a root whose node was deleted is not an error.
    Compilation errors propagate.
    """
    if root is None:
        log_debug("No preview root; skipping render")
        return None
    if not graph.contains(root.node):
        log_debug(f"Preview root {root!r} no longer exists; skipping render")
        return None

    sampler = compile_output(graph, root, settings=compiler_settings)
    return render(sampler, resolution, zoom, value_range)


class Previewer:
    """
    Keeps the preview image in step with the editor.

    Remembers the last node it rendered so that a render request with no
    selection redraws the same node with the current settings.
    """

    def __init__(self, settings: Optional[PreviewSettings] = None,
                 compiler_settings: Optional[CompilerSettings] = None):
        self.settings = settings or PreviewSettings()
        self.compiler_settings = compiler_settings or CompilerSettings()
        self.last_sampled_node: Optional[int] = None
        self.image: Optional[PreviewImage] = None

    def update_for(self, graph: NodeGraph, node_id: Optional[int]) -> Optional[PreviewImage]:
        """Render the first output of ``node_id``; keeps the old image if it is stale."""
        node = graph.get_node(node_id)
        if node is None or node.output_count == 0:
            log_debug(f"Node {node_id} has nothing to preview; keeping the old image")
            return None

        log_info(f"Updating preview for node {node_id}")
        settings = self.settings
        try:
            sampler = compile_output(graph, OutPinId(node_id, 0), settings=self.compiler_settings)
        except CompilationError as e:
            log_error(f"Preview of node {node_id} failed: {e}")
            raise
        self.image = render(sampler, settings.resolution, settings.zoom,
                            settings.value_range, settings.seed)
        self.last_sampled_node = node_id
        return self.image

    def update_for_selected(self, graph: NodeGraph,
                            selected: Sequence[int] = ()) -> Optional[PreviewImage]:
        """Render the first selected node, or the last rendered one if none is selected."""
        node_id = selected[0] if selected else self.last_sampled_node
        if node_id is None:
            return None
        return self.update_for(graph, node_id)

    def set_resolution(self, graph: NodeGraph, resolution: int,
                       selected: Sequence[int] = ()) -> Optional[PreviewImage]:
        self.settings = self.settings.with_resolution(resolution)
        return self.update_for_selected(graph, selected)

    def set_zoom(self, graph: NodeGraph, zoom: float,
                 selected: Sequence[int] = ()) -> Optional[PreviewImage]:
        self.settings = self.settings.with_zoom(zoom)
        return self.update_for_selected(graph, selected)
