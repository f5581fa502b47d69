# Seed Node Handlers
# Handles: AddSeed, MulSeed

from ...values import ValueKind


def handle_add_seed(ctx):
    return ctx.input_sampler(0).add_seed(ctx.constant_int(1, ValueKind.I32))


def handle_mul_seed(ctx):
    return ctx.input_sampler(0).mul_seed(ctx.constant_int(1, ValueKind.I32))
