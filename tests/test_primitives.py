import math
import unittest

import pytest

from noise_nodes import primitives as prim
from noise_nodes.primitives.combinators import (
    fmax, fmin, ieee_div, ieee_pow, ieee_rem, ieee_round, ieee_sqrt,
)
from noise_nodes.values import I32_MAX, I32_MIN

from .conftest import SAMPLE_POINTS

BASE_NOISES = [
    prim.Value, prim.ValueCubic, prim.Perlin,
    prim.Simplex, prim.OpenSimplex2, prim.OpenSimplex2s,
]


def seed_echo():
    """Sampler returning the seed it was called with."""
    return prim.NoiseFn(lambda point, seed: float(seed))


class TestIeeeHelpers(unittest.TestCase):
    def test_division(self):
        self.assertEqual(ieee_div(1.0, 0.0), math.inf)
        self.assertEqual(ieee_div(-1.0, 0.0), -math.inf)
        self.assertEqual(ieee_div(1.0, -0.0), -math.inf)
        self.assertTrue(math.isnan(ieee_div(0.0, 0.0)))
        self.assertEqual(ieee_div(3.0, 2.0), 1.5)

    def test_remainder_follows_dividend(self):
        self.assertEqual(ieee_rem(5.5, 2.0), 1.5)
        self.assertEqual(ieee_rem(-5.5, 2.0), -1.5)
        self.assertTrue(math.isnan(ieee_rem(1.0, 0.0)))

    def test_pow_and_sqrt(self):
        self.assertEqual(ieee_pow(2.0, 3.0), 8.0)
        self.assertTrue(math.isnan(ieee_pow(-2.0, 0.5)))
        self.assertEqual(ieee_pow(0.0, -1.0), math.inf)
        self.assertTrue(math.isnan(ieee_sqrt(-1.0)))

    def test_round_half_away_from_zero(self):
        self.assertEqual(ieee_round(2.5), 3.0)
        self.assertEqual(ieee_round(-2.5), -3.0)
        self.assertEqual(ieee_round(2.4), 2.0)

    def test_min_max_ignore_nan(self):
        self.assertEqual(fmin(math.nan, 1.0), 1.0)
        self.assertEqual(fmax(2.0, math.nan), 2.0)


class TestBaseNoise(unittest.TestCase):
    def test_deterministic(self):
        for cls in BASE_NOISES:
            for point in SAMPLE_POINTS:
                self.assertEqual(cls().sample(point, 7), cls().sample(point, 7), cls)

    def test_seed_changes_output(self):
        for cls in BASE_NOISES:
            noise = cls()
            samples = [noise.sample((0.37, 0.61), seed) for seed in range(8)]
            self.assertGreater(len(set(samples)), 1, cls)

    def test_perlin_zero_on_lattice(self):
        noise = prim.Perlin()
        for seed in (0, 1, -42, I32_MAX):
            for point in [(0.0, 0.0), (1.0, -2.0), (-7.0, 3.0)]:
                self.assertEqual(noise.sample(point, seed), 0.0)

    def test_value_noise_is_bounded(self):
        noise = prim.Value()
        for point in SAMPLE_POINTS:
            self.assertTrue(-1.0 <= noise.sample(point, 3) <= 1.0)

    def test_nan_point_does_not_raise(self):
        for cls in BASE_NOISES:
            cls().sample((math.nan, 0.5), 0)

    def test_equality_by_type(self):
        self.assertEqual(prim.Perlin(), prim.Perlin())
        self.assertNotEqual(prim.Perlin(), prim.Simplex())


# FastNoiseLite outputs at seed 0, frequency 1 (the preview's setting).
REFERENCE_POINTS = [(0.3, 0.7), (1.25, -2.6), (5.1, 3.3)]

REFERENCE_VALUES = [
    (prim.Perlin, [0.3733976, 0.2039713, 0.2880287]),
    (prim.Value, [-0.3033781, -0.0920309, -0.1445804]),
    (prim.ValueCubic, [-0.2390833, -0.1655195, -0.1551651]),
    (prim.Simplex, [0.1037466, -0.7335131, 0.8912288]),
    (prim.OpenSimplex2, [0.1037466, -0.7335131, 0.8912288]),
    (prim.OpenSimplex2s, [0.1654845, -0.4783366, 0.5977704]),
]

# With zero jitter every feature point sits on its lattice point, so these
# pin the cell hashing and distance metrics independently of the jitter table.
CELLULAR_REFERENCE_VALUES = [
    (prim.CellValue, [0.1465095, 0.3322551, 0.9499460]),
    (prim.CellDistance, [-0.5757359, -0.5283009, -0.6837722]),
    (prim.CellDistanceSq, [-0.82, -0.7775, -0.9]),
]


class TestReferenceValues(unittest.TestCase):
    def test_lattice_noises(self):
        for cls, expected in REFERENCE_VALUES:
            for point, value in zip(REFERENCE_POINTS, expected):
                self.assertAlmostEqual(cls().sample(point, 0), value, places=4,
                                       msg=f"{cls.__name__} at {point}")

    def test_cellular_noises(self):
        for cls, expected in CELLULAR_REFERENCE_VALUES:
            for point, value in zip(REFERENCE_POINTS, expected):
                self.assertAlmostEqual(cls(0.0).sample(point, 0), value, places=4,
                                       msg=f"{cls.__name__} at {point}")

    def test_value_on_lattice_point(self):
        self.assertAlmostEqual(prim.Value().sample((1.0, 0.0), 0), 0.3397665, places=5)

    def test_other_seed(self):
        expected = [-0.2571243, -0.1375394, 0.1956842]
        for point, value in zip(REFERENCE_POINTS, expected):
            self.assertAlmostEqual(prim.Perlin().sample(point, 7), value, places=4)


class TestCellular(unittest.TestCase):
    def test_zero_jitter_puts_features_on_lattice(self):
        self.assertEqual(prim.CellDistanceSq(0.0).sample((2.0, 3.0), 5), -1.0)
        self.assertEqual(prim.CellDistance(0.0).sample((2.0, 3.0), 5), -1.0)
        self.assertAlmostEqual(prim.CellDistanceSq(0.0).sample((2.25, 3.0), 5), 0.0625 - 1.0)

    def test_cell_value_constant_within_cell(self):
        noise = prim.CellValue(0.0)
        self.assertEqual(noise.sample((4.1, 4.1), 9), noise.sample((3.9, 3.9), 9))

    def test_sampled_jitter_matches_fixed_jitter(self):
        for cell_type in (prim.CellValue, prim.CellDistance, prim.CellDistanceSq):
            jittered = prim.CellJitter(prim.Constant(0.5), cell_type)
            for point in SAMPLE_POINTS:
                self.assertEqual(jittered.sample(point, 2), cell_type(0.5).sample(point, 2))


class TestCombinators(unittest.TestCase):
    def test_leaves(self):
        self.assertEqual(prim.Constant(1.5).sample((3.0, 4.0), 9), 1.5)
        self.assertEqual(prim.PositionX()((3.0, 4.0)), 3.0)
        self.assertEqual(prim.PositionY()((3.0, 4.0)), 4.0)

    def test_arithmetic(self):
        a, b = prim.Constant(6.0), prim.Constant(4.0)
        p = (0.0, 0.0)
        self.assertEqual(a.add(b)(p), 10.0)
        self.assertEqual(a.sub(b)(p), 2.0)
        self.assertEqual(a.mul(b)(p), 24.0)
        self.assertEqual(a.div(b)(p), 1.5)
        self.assertEqual(a.rem(b)(p), 2.0)
        self.assertEqual(a.min(b)(p), 4.0)
        self.assertEqual(a.max(b)(p), 6.0)
        self.assertEqual(prim.Constant(-2.5).abs()(p), 2.5)
        self.assertEqual(prim.Constant(-2.5).round()(p), -3.0)
        self.assertEqual(prim.Constant(-2.5).floor()(p), -3.0)
        self.assertEqual(prim.Constant(-2.5).ceil()(p), -2.0)
        self.assertTrue(math.isnan(prim.Constant(-1.0).sqrt()(p)))

    def test_lerp_and_clamp(self):
        p = (0.0, 0.0)
        lerp = prim.Constant(0.0).lerp(prim.Constant(10.0), prim.Constant(0.25))
        self.assertEqual(lerp(p), 2.5)
        clamp = prim.Constant(3.0).clamp(prim.Constant(0.0), prim.Constant(1.0))
        self.assertEqual(clamp(p), 1.0)
        unbounded = prim.Constant(3.0).clamp(prim.Constant(math.nan), prim.Constant(math.nan))
        self.assertEqual(unbounded(p), 3.0)

    def test_domain_transforms(self):
        self.assertEqual(prim.PositionX().frequency(prim.Constant(2.0))((3.0, 4.0)), 6.0)
        moved = prim.PositionY().translate_xy(prim.Constant(1.0), prim.Constant(-1.0))
        self.assertEqual(moved((3.0, 4.0)), 3.0)

    def test_triangle_wave(self):
        one = prim.Constant(1.0)
        p = (0.0, 0.0)
        self.assertEqual(prim.Constant(0.0).triangle_wave(one)(p), -1.0)
        self.assertEqual(prim.Constant(0.25).triangle_wave(one)(p), 0.0)
        self.assertEqual(prim.Constant(0.5).triangle_wave(one)(p), 1.0)
        self.assertEqual(prim.Constant(1.25).triangle_wave(one)(p), 0.0)


class TestFbm(unittest.TestCase):
    def test_bounding(self):
        self.assertAlmostEqual(prim.fractal_bounding(3, 0.5), 1.0 / 1.75)
        self.assertEqual(prim.fractal_bounding(1, 0.5), 1.0)

    def test_constant_input_is_normalised(self):
        fbm = prim.Constant(0.5).fbm(4, 0.5, 2.0)
        self.assertAlmostEqual(fbm((0.3, 0.2), 0), 0.5)

    def test_single_octave_is_the_input(self):
        fbm = prim.Perlin().fbm(1, 0.5, 2.0)
        for point in SAMPLE_POINTS:
            self.assertEqual(fbm(point, 11), prim.Perlin().sample(point, 11))

    def test_octaves_advance_seed(self):
        seeds = []
        recorder = prim.NoiseFn(lambda point, seed: seeds.append(seed) or 0.0)
        recorder.fbm(3, 0.5, 2.0).sample((0.0, 0.0), I32_MAX)
        self.assertEqual(seeds, [I32_MAX, I32_MIN, I32_MIN + 1])

    def test_weighted_strength_zero_is_plain_fbm(self):
        plain = prim.Simplex().fbm(3, 0.5, 2.0)
        weighted = plain.weighted(0.0)
        self.assertEqual(plain, weighted)
        self.assertNotEqual(plain.weighted(1.0), plain)


@pytest.mark.parametrize("offset", [0, 1, 17, -3])
def test_add_seed_equals_shifted_seed(offset):
    base = prim.OpenSimplex2()
    shifted = base.add_seed(offset)
    for point in SAMPLE_POINTS:
        assert shifted.sample(point, 5) == base.sample(point, 5 + offset)


def test_seed_arithmetic_wraps():
    assert seed_echo().add_seed(1).sample((0.0, 0.0), I32_MAX) == float(I32_MIN)
    assert seed_echo().mul_seed(3).sample((0.0, 0.0), 5) == 15.0
    assert seed_echo().mul_seed(2).sample((0.0, 0.0), I32_MAX) == -2.0
