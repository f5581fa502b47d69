# Math Node Handlers
# Handles: unary, binary and ternary math, TriangleWave

from ... import primitives as prim
from ...nodes import NodeKind

UNARY_OPS = {
    NodeKind.ABS: prim.Abs,
    NodeKind.NEG: prim.Neg,
    NodeKind.SQRT: prim.Sqrt,
    NodeKind.FLOOR: prim.Floor,
    NodeKind.CEIL: prim.Ceil,
    NodeKind.ROUND: prim.Round,
}

BINARY_OPS = {
    NodeKind.ADD: prim.Add,
    NodeKind.SUB: prim.Sub,
    NodeKind.MUL: prim.Mul,
    NodeKind.DIV: prim.Div,
    NodeKind.REM: prim.Rem,
    NodeKind.POW: prim.Pow,
    NodeKind.MIN: prim.Min,
    NodeKind.MAX: prim.Max,
}


def handle_unary(ctx):
    return UNARY_OPS[ctx.kind](ctx.input_sampler(0))


def handle_binary(ctx):
    return BINARY_OPS[ctx.kind](ctx.input_sampler(0), ctx.input_sampler(1))


def handle_lerp(ctx):
    a = ctx.input_sampler(0)
    return a.lerp(ctx.input_sampler(1), ctx.input_sampler(2))


def handle_clamp(ctx):
    value = ctx.input_sampler(0)
    return value.clamp(ctx.input_sampler(1), ctx.input_sampler(2))


def handle_triangle_wave(ctx):
    return ctx.input_sampler(0).triangle_wave(ctx.input_sampler(1))
