# Node catalogue
# Importing this package registers the slot layout of every node kind.

from .base import (
    NodeKind, NodeSpec, SlotSpec, Node,
    register_specs, spec_for, all_specs,
)
from . import noise, transform, math, seed, input

_missing = set(NodeKind) - set(all_specs())
if _missing:
    raise RuntimeError(f"Node kinds without a spec: {sorted(k.value for k in _missing)}")

__all__ = [
    'NodeKind', 'NodeSpec', 'SlotSpec', 'Node',
    'register_specs', 'spec_for', 'all_specs',
]
