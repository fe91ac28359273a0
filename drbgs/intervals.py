"""
Unit interval mapping for any RandomNumberGenerator.

Taken from https://prng.di.unimi.it: keep the top mantissa-width bits of a
word and scale by 2^-width, so the result is in [0, 1) and never reaches 1.
"""

import numpy as np

from drbgs.generator import RandomNumberGenerator, random_raw

DOUBLE_SCALE = 2.0 ** -53
FLOAT_SCALE = np.float32(2.0 ** -24)


def unit_double(generator: RandomNumberGenerator) -> float:
    """
    Generate a floating-point number in the interval [0, 1).

    Returns:
        A float f such that 0 <= f < 1
    """
    return (generator.next() >> 11) * DOUBLE_SCALE


def unit_float(generator: RandomNumberGenerator) -> np.float32:
    """
    Generate a single-precision number in the interval [0, 1).

    Returns:
        A numpy float32 f such that 0 <= f < 1
    """
    return np.float32(generator.next() >> 40) * FLOAT_SCALE


def unit_doubles(generator: RandomNumberGenerator, size: int) -> np.ndarray:
    """Vector form of unit_double(): one word per element, in draw order."""
    return (random_raw(generator, size) >> np.uint64(11)).astype(np.float64) * DOUBLE_SCALE


def unit_floats(generator: RandomNumberGenerator, size: int) -> np.ndarray:
    """Vector form of unit_float()."""
    return (random_raw(generator, size) >> np.uint64(40)).astype(np.float32) * FLOAT_SCALE
