"""
Pytest configuration and shared fixtures for Noise Nodes tests.

This file provides:
1. Shared fixtures for graphs and samplers
2. Helper functions for common test patterns

Usage:
    pytest tests/ -v
"""

import pytest

from noise_nodes.graph import InPinId, NodeGraph, OutPinId
from noise_nodes.nodes import Node, NodeKind


# =============================================================================
# PYTEST FIXTURES
# =============================================================================

@pytest.fixture
def empty_graph():
    """Creates an empty NodeGraph for testing."""
    return NodeGraph()


@pytest.fixture
def perlin_chain():
    """
    Creates Perlin -> Frequency{2.0} -> Abs.

    Returns:
        (graph, ids) where ids maps 'perlin', 'frequency', 'abs' to node ids
    """
    graph = NodeGraph()
    perlin = graph.insert_node(Node.create(NodeKind.PERLIN))
    frequency = graph.insert_node(Node.create(NodeKind.FREQUENCY, frequency=2.0), (200.0, 0.0))
    abs_id = graph.insert_node(Node.create(NodeKind.ABS), (400.0, 0.0))

    graph.connect(OutPinId(perlin, 0), InPinId(frequency, 0))
    graph.connect(OutPinId(frequency, 0), InPinId(abs_id, 0))
    return graph, {'perlin': perlin, 'frequency': frequency, 'abs': abs_id}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def add_node(graph, kind, **overrides):
    """Insert a node of ``kind`` with overridden constants and return its id."""
    return graph.insert_node(Node.create(kind, **overrides))


def wire(graph, src, dst, slot=0, output=0):
    """Connect output ``output`` of ``src`` to input ``slot`` of ``dst``."""
    graph.connect(OutPinId(src, output), InPinId(dst, slot))


SAMPLE_POINTS = [
    (0.0, 0.0),
    (0.3, -0.7),
    (1.25, 2.5),
    (-3.1, 4.9),
    (10.5, -12.75),
]
