#!/usr/bin/env python3
"""
Unit interval mapping tests.

Version: 1.0.0
Date: October 18, 2026
"""

import copy
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from drbgs.intervals import unit_double, unit_doubles, unit_float, unit_floats
from drbgs.rotation import MASK64
from drbgs.splitmix64 import SplitMix64
from drbgs.xoshiro256plusplus import Xoshiro256PlusPlus


class ConstantGenerator:
    """Always returns the same word."""

    def __init__(self, word):
        self.word = word

    def next(self):
        return self.word


class TestUnitDouble:
    """53-bit mapping into [0, 1)."""

    def test_all_ones_stays_below_one(self):
        """The largest word maps to 1 - 2^-53."""
        value = unit_double(ConstantGenerator(MASK64))
        assert value == 1.0 - 2.0 ** -53
        assert value < 1.0

    def test_zero_maps_to_zero(self):
        """The smallest word maps to exactly 0."""
        assert unit_double(ConstantGenerator(0)) == 0.0

    def test_low_bits_ignored(self):
        """Only the top 53 bits matter."""
        assert unit_double(ConstantGenerator((1 << 11) - 1)) == 0.0
        assert unit_double(ConstantGenerator(1 << 11)) == 2.0 ** -53

    def test_uses_generator_output(self):
        """One word is drawn per call."""
        sm = SplitMix64(seed=0)
        assert unit_double(sm) == (16294208416658607535 >> 11) * 2.0 ** -53
        assert sm.state == (0x9E3779B97F4A7C15,)

    def test_range_over_many_draws(self):
        """Real generator output lands in [0, 1)."""
        gen = Xoshiro256PlusPlus(seed=(1, 2, 3, 4))
        values = [unit_double(gen) for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)


class TestUnitFloat:
    """24-bit mapping into [0, 1)."""

    def test_all_ones_stays_below_one(self):
        """The largest word maps to 1 - 2^-24 in single precision."""
        value = unit_float(ConstantGenerator(MASK64))
        assert isinstance(value, np.float32)
        assert value == np.float32(1.0 - 2.0 ** -24)
        assert value < 1.0

    def test_zero_maps_to_zero(self):
        """The smallest word maps to exactly 0."""
        assert unit_float(ConstantGenerator(0)) == 0.0

    def test_low_bits_ignored(self):
        """Only the top 24 bits matter."""
        assert unit_float(ConstantGenerator((1 << 40) - 1)) == 0.0
        assert unit_float(ConstantGenerator(1 << 40)) == np.float32(2.0 ** -24)


class TestBatchMapping:
    """Array forms match the scalar functions word for word."""

    def test_unit_doubles_matches_scalar(self):
        """unit_doubles() == repeated unit_double()."""
        gen = Xoshiro256PlusPlus(seed=(1, 2, 3, 4))
        twin = copy.copy(gen)
        values = unit_doubles(gen, 64)
        assert values.dtype == np.float64
        assert values.tolist() == [unit_double(twin) for _ in range(64)]
        assert gen == twin

    def test_unit_floats_matches_scalar(self):
        """unit_floats() == repeated unit_float()."""
        gen = Xoshiro256PlusPlus(seed=(1, 2, 3, 4))
        twin = copy.copy(gen)
        values = unit_floats(gen, 64)
        assert values.dtype == np.float32
        assert np.array_equal(values, np.array([unit_float(twin) for _ in range(64)], dtype=np.float32))

    @pytest.mark.parametrize("mapper", [unit_doubles, unit_floats])
    def test_batch_all_ones(self, mapper):
        """The all-ones word stays below 1 in batch form too."""
        values = mapper(ConstantGenerator(MASK64), 4)
        assert (values < 1.0).all()
        assert (values > 0.99).all()
