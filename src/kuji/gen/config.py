"""
GenConfig - Seed Selection for Generation Sessions

TigerStyle: Explicit configuration, seed from environment for reproducibility.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TypeVar

from .generator import Generator
from .sampling import generate_n
from .seed import Seed, make_seed
from ..constants import SAMPLES_COUNT_DEFAULT, SEED_VALUE_MAX
from ..core.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class GenConfig:
    """Configuration for a generation session.

    TigerStyle: All configuration is explicit. Seeds are always logged.
    """

    # Starting value for the session's Seed
    seed: int

    # Values drawn by samples()
    samples_count: int = SAMPLES_COUNT_DEFAULT

    @classmethod
    def from_env_or_random(cls) -> GenConfig:
        """Create config from KUJI_SEED / KUJI_SAMPLES_COUNT or a random seed.

        TigerStyle: Always log the seed for reproducibility.
        Replay any session by setting KUJI_SEED=<seed>.
        """
        settings = get_settings()

        if settings.seed is not None:
            seed = settings.seed
            logger.info(f"Using seed from environment: {seed}")
        else:
            seed = random.randint(0, SEED_VALUE_MAX)
            logger.info(f"Generated random seed (replay with KUJI_SEED={seed})")

        return cls(seed=seed, samples_count=settings.samples_count)

    @classmethod
    def with_seed(cls, seed: int, samples_count: int = SAMPLES_COUNT_DEFAULT) -> GenConfig:
        """Create config with explicit seed.

        Args:
            seed: The deterministic seed to use.
            samples_count: Values drawn by samples().
        """
        assert seed >= 0, "seed must be non-negative"
        return cls(seed=seed, samples_count=samples_count)

    def __post_init__(self) -> None:
        """Validate configuration.

        TigerStyle: Assert preconditions.
        """
        assert self.seed >= 0, "seed must be non-negative"
        assert self.samples_count >= 0, "samples_count must be non-negative"

    def initial_seed(self) -> Seed:
        """The Seed every session with this config starts from."""
        return make_seed(self.seed)

    def samples(self, generator: Generator[T]) -> list[T]:
        """Draw samples_count values from the initial seed."""
        return generate_n(self.samples_count, generator, self.initial_seed())
