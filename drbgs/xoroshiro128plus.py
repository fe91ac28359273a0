"""
xoroshiro128+ 1.0 (XOR/rotate/shift/rotate), 2018 parameters a=24, b=16, c=37.

The fastest small-state generator here for floating-point output. Its four
lowest bits may fail linearity tests, so prefer the upper bits (unit_double
already does) or use xoroshiro128++ for full 64-bit output. The state must not
be everywhere zero; seed from SplitMix64 when all you have is a 64-bit seed.

Not bit-compatible with the 2016 parameters: see Xoroshiro128PlusDRBG.

See https://prng.di.unimi.it
"""

from drbgs.generator import WordStateGenerator
from drbgs.rotation import MASK64, rotl64

JUMP = (0xDF900294D8F554A5, 0x170865DF4B3201FC)
LONG_JUMP = (0xD2A98B26625EEE7B, 0xDDDF9B1090AA7AC1)


class Xoroshiro128Plus(WordStateGenerator):
    """An implementation of the xoroshiro128+ deterministic random bit generator."""

    STATE_WORDS = 2

    __slots__ = ()

    def next(self) -> int:
        s0, s1 = self._state
        result = (s0 + s1) & MASK64

        s1 ^= s0
        self._state = (
            rotl64(s0, 24) ^ s1 ^ ((s1 << 16) & MASK64),
            rotl64(s1, 37),
        )

        return result

    def jump(self) -> None:
        """
        Equivalent to 2^64 calls to next().

        Generates 2^64 non-overlapping subsequences for parallel computations.
        """
        self._jump(JUMP)

    def long_jump(self) -> None:
        """
        Equivalent to 2^96 calls to next().

        Generates 2^32 starting points, from each of which jump() generates
        2^32 non-overlapping subsequences for distributed computations.
        """
        self._jump(LONG_JUMP)
