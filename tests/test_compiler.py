import sys
import unittest

import pytest

from noise_nodes import primitives as prim
from noise_nodes.compiler import HANDLER_REGISTRY, GraphCompiler, compile_output
from noise_nodes.config import CompilerSettings
from noise_nodes.errors import (
    CompilationError, CompileDepthError, GraphCycleError, MissingInputError,
    NodeNotFoundError, TypeMismatchError,
)
from noise_nodes.graph import InPinId, NodeGraph, OutPinId
from noise_nodes.nodes import Node, NodeKind
from noise_nodes.values import Value

from .conftest import SAMPLE_POINTS, add_node, wire


def out(node_id, output=0):
    return OutPinId(node_id, output)


class TestCompileMapping(unittest.TestCase):
    def setUp(self):
        self.graph = NodeGraph()

    def compile(self, node_id, output=0):
        return compile_output(self.graph, out(node_id, output))

    def test_every_kind_has_a_handler(self):
        self.assertEqual(set(HANDLER_REGISTRY), set(NodeKind))

    def test_every_kind_compiles_with_defaults(self):
        for kind in NodeKind:
            node_id = add_node(self.graph, kind)
            sampler = self.compile(node_id)
            self.assertIsInstance(sampler, prim.Sampler, kind)
            sampler.sample((0.25, -0.5), 3)

    def test_base_noise(self):
        node_id = add_node(self.graph, NodeKind.OPEN_SIMPLEX2S)
        self.assertEqual(self.compile(node_id), prim.OpenSimplex2s())

    def test_unconnected_slots_become_constants(self):
        node_id = add_node(self.graph, NodeKind.LERP, a=1.0, b=3.0, t=0.25)
        sampler = self.compile(node_id)
        self.assertEqual(
            sampler, prim.Lerp(prim.Constant(1.0), prim.Constant(3.0), prim.Constant(0.25)))
        self.assertEqual(sampler((0.0, 0.0)), 1.5)

    def test_unconnected_noise_slot_uses_stored_value(self):
        node_id = add_node(self.graph, NodeKind.ABS)
        self.graph.set_input_value(InPinId(node_id, 0), -2.0)
        self.assertEqual(self.compile(node_id)((5.0, 5.0)), 2.0)

    def test_clamp(self):
        node_id = add_node(self.graph, NodeKind.CLAMP, value=4.0, min=-1.0, max=2.0)
        self.assertEqual(self.compile(node_id)((0.0, 0.0)), 2.0)

    def test_binary_operand_order(self):
        lhs = add_node(self.graph, NodeKind.POSITION)
        sub = add_node(self.graph, NodeKind.SUB, rhs=0.5)
        wire(self.graph, lhs, sub, slot=0, output=1)
        self.assertEqual(self.compile(sub)((3.0, 10.0)), 9.5)

    def test_position_outputs(self):
        node_id = add_node(self.graph, NodeKind.POSITION)
        self.assertEqual(self.compile(node_id, 0), prim.PositionX())
        self.assertEqual(self.compile(node_id, 1), prim.PositionY())

    def test_fractal(self):
        perlin = add_node(self.graph, NodeKind.PERLIN)
        fractal = add_node(self.graph, NodeKind.FRACTAL, octaves=5, gain=0.4,
                           lacunarity=3.0, weighted_strength=0.5)
        wire(self.graph, perlin, fractal)

        expected = prim.Perlin().fbm(5, 0.4, 3.0).weighted(0.5)
        sampler = self.compile(fractal)
        self.assertEqual(sampler.octaves, 5)
        for point in SAMPLE_POINTS:
            self.assertAlmostEqual(sampler(point, 4), expected(point, 4))

    def test_cellular_jitter_is_sampled(self):
        position = add_node(self.graph, NodeKind.POSITION)
        cell = add_node(self.graph, NodeKind.CELL_DISTANCE)
        wire(self.graph, position, cell, output=0)

        sampler = self.compile(cell)
        self.assertEqual(sampler, prim.CellJitter(prim.PositionX(), prim.CellDistance))
        for point in SAMPLE_POINTS:
            self.assertEqual(sampler(point, 1), prim.CellDistance(point[0]).sample(point, 1))

    def test_cellular_constant_jitter(self):
        cell = add_node(self.graph, NodeKind.CELL_VALUE, jitter=0.25)
        sampler = self.compile(cell)
        for point in SAMPLE_POINTS:
            self.assertEqual(sampler(point, 6), prim.CellValue(0.25).sample(point, 6))

    def test_seed_nodes(self):
        value = add_node(self.graph, NodeKind.VALUE)
        add_seed = add_node(self.graph, NodeKind.ADD_SEED, add=7)
        mul_seed = add_node(self.graph, NodeKind.MUL_SEED, mul=-3)
        wire(self.graph, value, add_seed)
        wire(self.graph, add_seed, mul_seed)

        self.assertEqual(self.compile(add_seed), prim.AddSeed(prim.Value(), 7))
        self.assertEqual(self.compile(mul_seed), prim.MulSeed(prim.AddSeed(prim.Value(), 7), -3))

    def test_shared_output_compiles_per_input(self):
        perlin = add_node(self.graph, NodeKind.PERLIN)
        add = add_node(self.graph, NodeKind.ADD)
        wire(self.graph, perlin, add, slot=0)
        wire(self.graph, perlin, add, slot=1)

        compiler = GraphCompiler(self.graph)
        sampler = compiler.compile(out(add))
        self.assertEqual(compiler.nodes_compiled, 3)
        self.assertIsNot(sampler.lhs, sampler.rhs)


class TestCompileErrors(unittest.TestCase):
    def setUp(self):
        self.graph = NodeGraph()

    def test_missing_root(self):
        with self.assertRaises(NodeNotFoundError):
            compile_output(self.graph, out(3))

    def test_output_out_of_range(self):
        node_id = add_node(self.graph, NodeKind.PERLIN)
        with self.assertRaises(MissingInputError) as ctx:
            compile_output(self.graph, out(node_id, 1))
        self.assertEqual(ctx.exception.node_id, node_id)
        self.assertIn("has no output 1", str(ctx.exception))

    def test_integer_slot_holding_float(self):
        node_id = add_node(self.graph, NodeKind.FRACTAL)
        self.graph[node_id].values[1] = Value.f32(3.0)
        with self.assertRaises(TypeMismatchError) as ctx:
            compile_output(self.graph, out(node_id))
        self.assertEqual(ctx.exception.node_id, node_id)
        self.assertEqual(ctx.exception.slot, 1)
        self.assertIn("expected kind u32 but found kind f32", str(ctx.exception))

    def test_signed_value_in_unsigned_slot(self):
        node_id = add_node(self.graph, NodeKind.FRACTAL)
        self.graph[node_id].values[1] = Value.i32(3)
        with self.assertRaises(TypeMismatchError):
            compile_output(self.graph, out(node_id))

    def test_truncated_slot_table(self):
        node_id = self.graph.insert_node(Node(NodeKind.LERP, [Value.f32(0.0)]))
        with self.assertRaises(MissingInputError):
            compile_output(self.graph, out(node_id))

    def test_cycle_is_reported(self):
        a = add_node(self.graph, NodeKind.ABS)
        b = add_node(self.graph, NodeKind.NEG)
        wire(self.graph, a, b)
        wire(self.graph, b, a)

        with self.assertRaises(GraphCycleError) as ctx:
            compile_output(self.graph, out(a))
        self.assertEqual(ctx.exception.path, (a, b, a))

    def test_self_loop(self):
        a = add_node(self.graph, NodeKind.ADD)
        wire(self.graph, a, a, slot=1)
        with self.assertRaises(GraphCycleError):
            compile_output(self.graph, out(a))

    def neg_chain(self, length):
        previous = add_node(self.graph, NodeKind.PERLIN)
        for _ in range(length):
            node_id = add_node(self.graph, NodeKind.NEG)
            wire(self.graph, previous, node_id)
            previous = node_id
        return previous

    def test_depth_limit(self):
        top = self.neg_chain(10)
        compile_output(self.graph, out(top), max_depth=11)
        with self.assertRaises(CompileDepthError) as ctx:
            compile_output(self.graph, out(top), settings=CompilerSettings(max_depth=10))
        self.assertEqual(ctx.exception.max_depth, 10)

    def test_deep_chain_compiles_with_default_settings(self):
        top = self.neg_chain(150)
        sampler = compile_output(self.graph, out(top))
        point = (0.3, 0.7)
        self.assertEqual(sampler.sample(point, 0), prim.Perlin().sample(point, 0))

    def test_chain_deeper_than_the_interpreter_stack(self):
        top = self.neg_chain(sys.getrecursionlimit())
        with self.assertRaises(CompileDepthError) as ctx:
            compile_output(self.graph, out(top))
        self.assertEqual(ctx.exception.node_id, top)
        self.assertIsInstance(ctx.exception.__cause__, RecursionError)

    def test_errors_share_base(self):
        for cls in (TypeMismatchError, MissingInputError, GraphCycleError, CompileDepthError):
            self.assertTrue(issubclass(cls, CompilationError))


def test_constant_fallback_matches_constant_node():
    """An unconnected slot samples exactly like a Constant of its stored value."""
    graph = NodeGraph()
    perlin = add_node(graph, NodeKind.PERLIN)
    translated = add_node(graph, NodeKind.TRANSLATE_XY, x=0.75, y=-1.5)
    wire(graph, perlin, translated)

    sampler = compile_output(graph, out(translated))
    expected = prim.Perlin().translate_xy(prim.Constant(0.75), prim.Constant(-1.5))
    for point in SAMPLE_POINTS:
        assert sampler(point, 2) == expected(point, 2)


def test_compilation_is_deterministic(perlin_chain):
    graph, ids = perlin_chain
    first = compile_output(graph, out(ids['abs']))
    second = compile_output(graph, out(ids['abs']))
    assert first == second
    for point in SAMPLE_POINTS:
        assert first(point, 9) == second(point, 9)


def test_compile_does_not_mutate_graph(perlin_chain):
    graph, ids = perlin_chain
    connections = graph.connections()
    values = {node_id: list(node.values) for node_id, node in graph.nodes()}
    compile_output(graph, out(ids['abs']))
    assert graph.connections() == connections
    assert {node_id: list(node.values) for node_id, node in graph.nodes()} == values


@pytest.mark.parametrize("offset", [1, 5, -9])
def test_add_seed_node_shifts_seed(offset):
    graph = NodeGraph()
    simplex = add_node(graph, NodeKind.SIMPLEX)
    add_seed = add_node(graph, NodeKind.ADD_SEED, add=offset)
    wire(graph, simplex, add_seed)

    sampler = compile_output(graph, out(add_seed))
    for point in SAMPLE_POINTS:
        assert sampler(point, 10) == prim.Simplex().sample(point, 10 + offset)


if __name__ == '__main__':
    unittest.main()
