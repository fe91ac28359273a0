"""
xoroshiro128++ 1.0, an all-purpose small-state generator.

Passes all known tests, but its 128-bit state only suits mild parallelism;
use Xoshiro256PlusPlus for heavy parallel work. The rotation/shift constants
(49, 21, 28) differ from xoroshiro128+; the two are not interchangeable.

See https://prng.di.unimi.it
"""

from drbgs.generator import WordStateGenerator
from drbgs.rotation import MASK64, rotl64

JUMP = (0x2BD7A6A6E99C2DDC, 0x0992CCAF6A6FCA05)
LONG_JUMP = (0x360FD5F2CF8D5D99, 0x9C6E6877736C46E3)


class Xoroshiro128PlusPlus(WordStateGenerator):
    """An implementation of the xoroshiro128++ deterministic random bit generator."""

    STATE_WORDS = 2

    __slots__ = ()

    def next(self) -> int:
        s0, s1 = self._state
        result = (rotl64((s0 + s1) & MASK64, 17) + s0) & MASK64

        s1 ^= s0
        self._state = (
            rotl64(s0, 49) ^ s1 ^ ((s1 << 21) & MASK64),
            rotl64(s1, 28),
        )

        return result

    def jump(self) -> None:
        """Equivalent to 2^64 calls to next()."""
        self._jump(JUMP)

    def long_jump(self) -> None:
        """
        Equivalent to 2^96 calls to next().

        Generates 2^32 starting points, from each of which jump() generates
        2^32 non-overlapping subsequences for distributed computations.
        """
        self._jump(LONG_JUMP)
