"""
xoroshiro128+ with the original 2016 parameters (a=55, b=14, c=36).

Same output rule as Xoroshiro128Plus but a different state update, so the two
streams are not bit-compatible. Kept as its own class so that streams seeded
under one revision are never silently replayed under the other. Only the
2016 jump polynomial is published; there is no long jump.
"""

from drbgs.generator import WordStateGenerator
from drbgs.rotation import MASK64, rotl64

JUMP = (0xBEAC0467EBA5FACB, 0xD86B048B86AA9922)


class Xoroshiro128PlusDRBG(WordStateGenerator):
    """xoroshiro128+ (2016 revision) deterministic random bit generator."""

    STATE_WORDS = 2

    __slots__ = ()

    def next(self) -> int:
        s0, s1 = self._state
        result = (s0 + s1) & MASK64

        x = s0 ^ s1
        self._state = (
            rotl64(s0, 55) ^ x ^ ((x << 14) & MASK64),
            rotl64(x, 36),
        )

        return result

    def jump(self) -> None:
        """Equivalent to 2^64 calls to next()."""
        self._jump(JUMP)
