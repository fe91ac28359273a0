#!/usr/bin/env python3
"""
Stream Config - validated description of a seeded set of parallel streams.

Usage:
    config = StreamConfig(algorithm='xoshiro256plusplus', seed=42, streams=8)
    workers = build_streams(config)

    # From a JSON document
    config = StreamConfig.model_validate_json('{"seed": 42, "streams": 4}')

Version: 1.0.0
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from drbgs.entropy import EntropySource
from drbgs.generator import WordStateGenerator
from drbgs.registry import GENERATOR_REGISTRY, create_generator, list_available_generators
from drbgs.rotation import MASK64
from drbgs.streams import jumped_streams, long_jumped_streams

logger = logging.getLogger(__name__)


class StreamConfig(BaseModel):
    """
    Which generator to build, how to seed it, and how to split it.

    streams is the number of jump()-separated streams; with use_long_jump it
    is the number per long-jump group.
    """

    model_config = {"frozen": True}

    algorithm: str = Field(
        default="xoshiro256plusplus",
        description="Registered generator name"
    )

    seed: Optional[int] = Field(
        default=None,
        ge=0,
        le=MASK64,
        description="64-bit seed expanded through SplitMix64 (None = OS entropy)"
    )

    streams: int = Field(
        default=1,
        ge=1,
        description="Number of jump()-separated streams (per group)"
    )

    groups: int = Field(
        default=1,
        ge=1,
        description="Number of long_jump()-separated groups"
    )

    use_long_jump: bool = Field(
        default=False,
        description="Use the two-level long_jump()/jump() scheme"
    )

    # ══════════════════════════════════════════════════════════════════════
    # VALIDATORS
    # ══════════════════════════════════════════════════════════════════════

    @field_validator('algorithm')
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """Normalise and check the generator name."""
        v = v.strip().lower().replace('-', '_')
        if v not in GENERATOR_REGISTRY:
            raise ValueError(f"Unknown generator: {v}. Available: {list_available_generators()}")
        return v

    @model_validator(mode='after')
    def validate_jump_support(self):
        """The requested split must be supported by the generator."""
        info = GENERATOR_REGISTRY[self.algorithm]

        if self.groups > 1 and not self.use_long_jump:
            raise ValueError("groups > 1 requires use_long_jump=True")

        if self.use_long_jump and info['long_jump_steps'] is None:
            raise ValueError(f"{self.algorithm} has no long_jump()")

        if (self.streams > 1 or self.use_long_jump) and info['jump_steps'] is None:
            raise ValueError(f"{self.algorithm} has no jump()")

        return self

    @property
    def total_streams(self) -> int:
        return self.streams * self.groups


def build_streams(config: StreamConfig, entropy: Optional[EntropySource] = None) -> List[WordStateGenerator]:
    """
    Build the generators described by ``config``.

    Returns a flat list of config.total_streams generators, group-major.
    """
    base = create_generator(config.algorithm, seed=config.seed, entropy=entropy)

    if config.use_long_jump:
        groups = long_jumped_streams(base, config.groups, config.streams)
        streams = [stream for group in groups for stream in group]
    elif config.streams > 1:
        streams = jumped_streams(base, config.streams)
    else:
        streams = [base]

    logger.debug("Built %d %s stream(s)", len(streams), config.algorithm)
    return streams
