"""
xoshiro256++ 1.0 (XOR/shift/rotate), the all-purpose large-state generator.

256 bits of state are enough for any parallel application: jump() spaces
streams 2^128 apart and long_jump() 2^192 apart. The state must not be
everywhere zero.

See https://prng.di.unimi.it
"""

from drbgs.generator import WordStateGenerator
from drbgs.rotation import MASK64, rotl64

JUMP = (0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C, 0xA9582618E03FC9AA, 0x39ABDC4529B1661C)
LONG_JUMP = (0x76E15D3EFEFDCBBF, 0xC5004E441C522FB3, 0x77710069854EE241, 0x39109BB02ACBE635)


class Xoshiro256PlusPlus(WordStateGenerator):
    """An implementation of the xoshiro256++ deterministic random bit generator."""

    STATE_WORDS = 4

    __slots__ = ()

    def next(self) -> int:
        s0, s1, s2, s3 = self._state
        result = (rotl64((s0 + s3) & MASK64, 23) + s0) & MASK64
        t = (s1 << 17) & MASK64

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3

        s2 ^= t

        self._state = (s0, s1, s2, rotl64(s3, 45))

        return result

    def jump(self) -> None:
        """
        Equivalent to 2^128 calls to next().

        Generates 2^128 non-overlapping subsequences for parallel computations.
        """
        self._jump(JUMP)

    def long_jump(self) -> None:
        """
        Equivalent to 2^192 calls to next().

        Generates 2^64 starting points, from each of which jump() generates
        2^64 non-overlapping subsequences for distributed computations.
        """
        self._jump(LONG_JUMP)
