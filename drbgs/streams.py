#!/usr/bin/env python3
"""
Parallel substreams via jump() / long_jump().

A generator instance must never be shared between threads. Instead, hand each
worker its own copy advanced to a disjoint region of the period:

    base = Xoshiro256PlusPlus.from_generator(SplitMix64(seed))
    workers = jumped_streams(base, 8)        # 8 streams, 2^128 apart

    # Two-level scheme for distributed runs: one long-jump region per node,
    # jump()-separated streams inside each region.
    nodes = long_jumped_streams(base, groups=4, per_group=16)

The source generator is advanced past every stream handed out, so it can keep
being used without overlapping any of them.

Version: 1.0.0
"""

import copy
import logging
from typing import List

from drbgs.errors import PreconditionError, UnsupportedOperationError
from drbgs.generator import WordStateGenerator

logger = logging.getLogger(__name__)


def _require(generator: WordStateGenerator, operation: str) -> None:
    if not callable(getattr(generator, operation, None)):
        raise UnsupportedOperationError(f"{type(generator).__name__} has no {operation}()")


def _require_positive(name: str, value: int) -> None:
    if value < 1:
        raise PreconditionError(f"{name} must be >= 1, got {value}")


def jumped_streams(generator: WordStateGenerator, count: int) -> List[WordStateGenerator]:
    """
    Split ``generator`` into ``count`` non-overlapping streams.

    Stream i starts i jumps ahead of the source's current state. On return the
    source sits ``count`` jumps ahead.
    """
    _require(generator, 'jump')
    _require_positive('count', count)

    streams = []
    for _ in range(count):
        streams.append(copy.copy(generator))
        generator.jump()

    logger.debug("Created %d jump-separated %s streams", count, type(generator).__name__)
    return streams


def long_jumped_streams(generator: WordStateGenerator, groups: int,
                        per_group: int) -> List[List[WordStateGenerator]]:
    """
    Two-level split: ``groups`` long-jump regions of ``per_group`` jump streams.

    On return the source sits ``groups`` long jumps ahead.
    """
    _require(generator, 'jump')
    _require(generator, 'long_jump')
    _require_positive('groups', groups)
    _require_positive('per_group', per_group)

    result = []
    for _ in range(groups):
        group_start = copy.copy(generator)
        result.append(jumped_streams(group_start, per_group))
        generator.long_jump()

    logger.debug(
        "Created %d x %d long-jump/jump %s streams", groups, per_group, type(generator).__name__
    )
    return result
