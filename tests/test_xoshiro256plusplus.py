#!/usr/bin/env python3
"""
Xoshiro256++ tests - reference outputs, jump / long-jump landing states.

Version: 1.0.0
Date: October 18, 2026
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from drbgs.errors import SeedError, ZeroStateError
from drbgs.splitmix64 import SplitMix64
from drbgs.xoshiro256plusplus import Xoshiro256PlusPlus


class TestXoshiro256PlusPlus:
    """xoshiro256++ 1.0 reference vectors."""

    def test_sequence(self):
        """First outputs from (1, 2, 3, 4)."""
        xo = Xoshiro256PlusPlus(seed=(1, 2, 3, 4))
        assert [xo.next() for _ in range(3)] == [41943041, 58720359, 3588806011781223]

    def test_jump(self):
        """jump() (2^128 steps) from (1, 2, 3, 4)."""
        xo = Xoshiro256PlusPlus(seed=(1, 2, 3, 4))
        xo.jump()
        assert xo.state == (
            10122426448480695249,
            8079205330032121950,
            7289065458748526725,
            9477464255293849680,
        )

    def test_long_jump(self):
        """long_jump() (2^192 steps) from (1, 2, 3, 4)."""
        xo = Xoshiro256PlusPlus(seed=(1, 2, 3, 4))
        xo.long_jump()
        assert xo.state == (
            678511610814637056,
            15850499779492529430,
            6002989639035333134,
            3559352929785830385,
        )

    def test_jump_and_long_jump_differ(self):
        """The two jump polynomials lead to different regions."""
        a = Xoshiro256PlusPlus(seed=(1, 2, 3, 4))
        b = Xoshiro256PlusPlus(seed=(1, 2, 3, 4))
        a.jump()
        b.long_jump()
        assert a != b

    def test_seeded_from_splitmix64(self):
        """Four SplitMix64 words fill the state in draw order."""
        xo = Xoshiro256PlusPlus.from_generator(SplitMix64(seed=12345))
        assert xo.state == (
            2454886589211414944,
            3778200017661327597,
            2205171434679333405,
            3248800117070709450,
        )
        assert xo.next() == 10201931350592234856

    def test_zero_seed_rejected(self):
        """The all-zero state is forbidden."""
        with pytest.raises(ZeroStateError):
            Xoshiro256PlusPlus(seed=(0, 0, 0, 0))

    def test_seed_arity(self):
        """Four words, no more, no fewer."""
        with pytest.raises(SeedError):
            Xoshiro256PlusPlus(seed=(1, 2))
