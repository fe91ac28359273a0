"""
Entropy capability used by unseeded construction.

An entropy source is any callable ``(count) -> bytes`` returning exactly
``count`` random bytes. The default reads the operating system's randomness
source, which may block until the kernel pool is initialised. Sources are only
consulted at construction time; nothing in the generator core touches them.
"""

import logging
import os
from typing import Callable, Optional, Tuple

import numpy as np

from drbgs.errors import EntropyUnavailableError

logger = logging.getLogger(__name__)

EntropySource = Callable[[int], bytes]

WORD_BYTES = 8


def os_entropy(count: int) -> bytes:
    """Read ``count`` bytes from the OS randomness source."""
    try:
        return os.urandom(count)
    except (NotImplementedError, OSError) as e:
        raise EntropyUnavailableError(f"OS entropy source unavailable: {e}") from e


def words_from_entropy(words: int, entropy: Optional[EntropySource] = None) -> Tuple[int, ...]:
    """
    Draw ``words`` unsigned 64-bit words from an entropy source.

    Bytes are interpreted little-endian, eight per word.
    """
    source = entropy if entropy is not None else os_entropy
    wanted = words * WORD_BYTES
    data = source(wanted)

    if len(data) != wanted:
        raise EntropyUnavailableError(f"Entropy source returned {len(data)} bytes, expected {wanted}")

    logger.debug("Drew %d bytes of entropy from %s", wanted, getattr(source, '__name__', repr(source)))
    return tuple(int(w) for w in np.frombuffer(data, dtype='<u8'))
