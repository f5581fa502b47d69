# Transform Node Handlers
# Handles: Fractal, Frequency, TranslateXy

from ...values import ValueKind


def handle_fractal(ctx):
    """Fractal over the Noise input with constant octave parameters."""
    noise = ctx.input_sampler(0)
    octaves = ctx.constant_int(1, ValueKind.U32)
    gain = ctx.constant_float(2)
    lacunarity = ctx.constant_float(3)
    weighted_strength = ctx.constant_float(4)
    return noise.fbm(octaves, gain, lacunarity).weighted(weighted_strength)


def handle_frequency(ctx):
    return ctx.input_sampler(0).frequency(ctx.input_sampler(1))


def handle_translate(ctx):
    noise = ctx.input_sampler(0)
    return noise.translate_xy(ctx.input_sampler(1), ctx.input_sampler(2))
