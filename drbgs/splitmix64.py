"""
SplitMix64 - single-word generator and the recommended seed expander.

Its additive update has no absorbing zero state, so any 64-bit value
(including 0) is a valid seed. Use it to fill the wider states of the
xoroshiro/xoshiro generators from a single 64-bit seed:

    gen = Xoshiro256PlusPlus.from_generator(SplitMix64(seed))
"""

from drbgs.generator import WordStateGenerator
from drbgs.rotation import MASK64

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


class SplitMix64(WordStateGenerator):
    """An implementation of the splitmix64 deterministic random bit generator."""

    STATE_WORDS = 1
    ZERO_STATE_ALLOWED = True

    __slots__ = ()

    def next(self) -> int:
        state = (self._state[0] + GOLDEN_GAMMA) & MASK64
        self._state = (state,)

        z = state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        return z ^ (z >> 31)
