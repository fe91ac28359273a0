#!/usr/bin/env python3
"""
Generator capability and the shared machinery of word-state generators.

Includes:
- RandomNumberGenerator: the one-method protocol every helper is written against
- WordStateGenerator: seeding paths, seed validation, equality, shared jump
- random_raw: bulk draw of raw words into a numpy array

Seeding paths (identical for every concrete generator):
    Xoshiro256PlusPlus(seed=(1, 2, 3, 4))           # explicit state
    Xoshiro256PlusPlus()                            # OS entropy
    Xoshiro256PlusPlus(entropy=my_source)           # injected entropy
    Xoshiro256PlusPlus.from_generator(SplitMix64(42))

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Protocol, Tuple, Union, runtime_checkable

import numpy as np

from drbgs.entropy import EntropySource, words_from_entropy
from drbgs.errors import EntropyUnavailableError, SeedError, ZeroStateError
from drbgs.rotation import MASK64

StateType = Tuple[int, ...]
Seed = Union[int, Iterable[int]]


@runtime_checkable
class RandomNumberGenerator(Protocol):
    """Anything that produces the next unsigned 64-bit word from its state."""

    def next(self) -> int:
        ...


class WordStateGenerator(ABC):
    """
    Base for generators whose whole identity is a tuple of 64-bit words.

    Subclasses set STATE_WORDS, implement next(), and expose jump()/long_jump()
    by handing their magic constants to _jump(). The state tuple is immutable
    and replaced on every step, so copy.copy() gives an independent stream.
    """

    STATE_WORDS: int = 0
    ZERO_STATE_ALLOWED: bool = False

    __slots__ = ('_state',)

    def __init__(self, seed: Optional[Seed] = None, entropy: Optional[EntropySource] = None):
        """
        Args:
            seed: Explicit initial state. ``None`` draws the state from entropy.
            entropy: Entropy source used only when ``seed`` is None
                (defaults to the OS randomness source).
        """
        if seed is None:
            state = words_from_entropy(self.STATE_WORDS, entropy)
            if not self.ZERO_STATE_ALLOWED and not any(state):
                raise EntropyUnavailableError(
                    f"Entropy source produced an all-zero state for {type(self).__name__}"
                )
            self._state = state
        else:
            self._state = self._validate_seed(seed)

    @classmethod
    def from_generator(cls, generator: RandomNumberGenerator) -> 'WordStateGenerator':
        """Seed by drawing STATE_WORDS successive words from another generator."""
        return cls(seed=tuple(generator.next() for _ in range(cls.STATE_WORDS)))

    @classmethod
    def _validate_seed(cls, seed: Seed) -> StateType:
        if isinstance(seed, (int, np.integer)) and not isinstance(seed, bool):
            if cls.STATE_WORDS != 1:
                raise SeedError(f"{cls.__name__} needs a {cls.STATE_WORDS}-word seed, got a single int")
            seed = (seed,)

        try:
            state = tuple(seed)
        except TypeError:
            raise SeedError(f"Seed must be an int or a sequence of ints, got {type(seed).__name__}") from None

        if len(state) != cls.STATE_WORDS:
            raise SeedError(f"{cls.__name__} needs a {cls.STATE_WORDS}-word seed, got {len(state)} words")

        for word in state:
            if isinstance(word, bool) or not isinstance(word, (int, np.integer)):
                raise SeedError(f"Seed words must be integers, got {type(word).__name__}")
            if not 0 <= word <= MASK64:
                raise SeedError(f"Seed word {word} is outside [0, 2**64)")

        if not cls.ZERO_STATE_ALLOWED and not any(state):
            raise ZeroStateError(f"Seed may not be zero for {cls.__name__}")

        return tuple(int(word) for word in state)

    @property
    def state(self) -> StateType:
        """The current state tuple."""
        return self._state

    @abstractmethod
    def next(self) -> int:
        """Advance the state and return an unsigned integer in [0, 2**64)."""

    def _jump(self, magic: Tuple[int, ...]) -> None:
        # For each set bit of the jump polynomial, fold the current state in,
        # stepping once per bit either way.
        accumulator = [0] * self.STATE_WORDS
        for word in magic:
            for bit in range(64):
                if word & (1 << bit):
                    for i, value in enumerate(self._state):
                        accumulator[i] ^= value
                self.next()

        self._state = tuple(accumulator)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._state == other._state

    __hash__ = None

    def __repr__(self) -> str:
        words = ', '.join(f"{word:#018x}" for word in self._state)
        return f"{type(self).__name__}(state=({words}{',' if self.STATE_WORDS == 1 else ''}))"


def random_raw(generator: RandomNumberGenerator, size: int) -> np.ndarray:
    """Draw ``size`` successive words as a uint64 array."""
    return np.array([generator.next() for _ in range(size)], dtype=np.uint64)
