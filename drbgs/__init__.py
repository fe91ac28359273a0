"""
Deterministic Random Bit Generators v1.0.0

Fast, reproducible, non-cryptographic 64-bit generators:
- SplitMix64: single-word state, seed expander
- Xoroshiro128Plus / Xoroshiro128PlusPlus: 128-bit state, jump + long_jump
- Xoroshiro128PlusDRBG: xoroshiro128+ with the 2016 parameters, jump only
- Xoshiro256PlusPlus: 256-bit state, jump + long_jump

Usage:
    from drbgs import SplitMix64, Xoshiro256PlusPlus, unit_double, jumped_streams

    gen = Xoshiro256PlusPlus.from_generator(SplitMix64(12345))
    word = gen.next()
    x = unit_double(gen)                    # 0 <= x < 1

    workers = jumped_streams(gen, 4)        # one independent stream per thread

None of these generators is safe for cryptographic use.
"""

from drbgs.config import StreamConfig, build_streams
from drbgs.entropy import EntropySource, os_entropy
from drbgs.errors import (
    DRBGError,
    EntropyUnavailableError,
    PreconditionError,
    RotationError,
    SeedError,
    UnknownGeneratorError,
    UnsupportedOperationError,
    ZeroStateError,
)
from drbgs.generator import RandomNumberGenerator, WordStateGenerator, random_raw
from drbgs.intervals import unit_double, unit_doubles, unit_float, unit_floats
from drbgs.registry import (
    create_generator,
    get_generator_class,
    get_generator_info,
    list_available_generators,
)
from drbgs.rotation import rotate_left, rotate_right, rotated_left, rotated_right
from drbgs.splitmix64 import SplitMix64
from drbgs.streams import jumped_streams, long_jumped_streams
from drbgs.xoroshiro128plus import Xoroshiro128Plus
from drbgs.xoroshiro128plus_drbg import Xoroshiro128PlusDRBG
from drbgs.xoroshiro128plusplus import Xoroshiro128PlusPlus
from drbgs.xoshiro256plusplus import Xoshiro256PlusPlus

__version__ = "1.0.0"
__all__ = [
    'SplitMix64',
    'Xoroshiro128Plus',
    'Xoroshiro128PlusPlus',
    'Xoroshiro128PlusDRBG',
    'Xoshiro256PlusPlus',
    'RandomNumberGenerator',
    'WordStateGenerator',
    'random_raw',
    'unit_double',
    'unit_float',
    'unit_doubles',
    'unit_floats',
    'rotated_left',
    'rotated_right',
    'rotate_left',
    'rotate_right',
    'jumped_streams',
    'long_jumped_streams',
    'create_generator',
    'get_generator_class',
    'get_generator_info',
    'list_available_generators',
    'StreamConfig',
    'build_streams',
    'EntropySource',
    'os_entropy',
    'DRBGError',
    'PreconditionError',
    'RotationError',
    'SeedError',
    'ZeroStateError',
    'UnsupportedOperationError',
    'EntropyUnavailableError',
    'UnknownGeneratorError',
]
