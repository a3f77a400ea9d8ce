"""
Seed - Immutable Seeded Draw Primitive

TigerStyle: All randomness is seeded and reproducible.
A Seed is a value, never mutated in place. Every draw returns the drawn
value together with a new Seed.

Based on PCG32 (XSH-RR output over a 64-bit LCG state).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import (
    SEED_FLOAT_BITS_COUNT,
    SEED_INCREMENT_DEFAULT,
    SEED_MULTIPLIER,
    SEED_OUTPUT_BITS_COUNT,
    SEED_OUTPUT_MASK,
    SEED_STATE_MASK,
)


@dataclass(frozen=True)
class Seed:
    """Opaque state of the pseudo-random stream.

    TigerStyle:
    - Frozen: two draws from the same Seed are identical
    - The increment selects the PCG stream and is always odd
    """

    state: int
    increment: int = SEED_INCREMENT_DEFAULT

    def __post_init__(self) -> None:
        """Validate the seed.

        TigerStyle: Assert preconditions.
        """
        assert 0 <= self.state <= SEED_STATE_MASK, "state must fit in 64 bits"
        assert self.increment & 1 == 1, "increment must be odd"


def _advance(seed: Seed) -> Seed:
    state = (seed.state * SEED_MULTIPLIER + seed.increment) & SEED_STATE_MASK
    return Seed(state, seed.increment)


def _output(seed: Seed) -> int:
    old = seed.state
    xorshifted = (((old >> 18) ^ old) >> 27) & SEED_OUTPUT_MASK
    rot = (old >> 59) & 31
    return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & SEED_OUTPUT_MASK


def next_word(seed: Seed) -> tuple[int, Seed]:
    """Draw one uniformly distributed 32-bit word."""
    return _output(seed), _advance(seed)


def make_seed(value: int) -> Seed:
    """Create a Seed deterministically from an integer.

    Negative values are reduced modulo 2**64, so every int maps to a seed.
    """
    seed = _advance(Seed(0))
    seed = Seed((seed.state + value) & SEED_STATE_MASK, seed.increment)
    return _advance(seed)


def draw_bool(seed: Seed) -> tuple[bool, Seed]:
    """Draw a boolean with equal probability of True and False."""
    word, seed = next_word(seed)
    return bool(word >> (SEED_OUTPUT_BITS_COUNT - 1)), seed


def draw_int(low: int, high: int, seed: Seed) -> tuple[int, Seed]:
    """Draw an integer N such that ``low <= N <= high``.

    Spans wider than 32 bits are covered by concatenating words. Draws that
    would bias the result toward the low end of the range are rejected and
    redrawn from the advanced seed.

    TigerStyle: Explicit bounds, inclusive range.
    """
    assert low <= high, f"low ({low}) must be <= high ({high})"

    span = high - low + 1
    words_count = max(1, -(-(span - 1).bit_length() // SEED_OUTPUT_BITS_COUNT))
    space = 1 << (SEED_OUTPUT_BITS_COUNT * words_count)
    limit = space - space % span

    while True:
        drawn = 0
        for _ in range(words_count):
            word, seed = next_word(seed)
            drawn = (drawn << SEED_OUTPUT_BITS_COUNT) | word
        if drawn < limit:
            return low + drawn % span, seed


def draw_float(low: float, high: float, seed: Seed) -> tuple[float, Seed]:
    """Draw a float uniformly from ``[low, high)`` (``low`` when they are equal).

    Uses two words for 53 bits of resolution.
    """
    assert low <= high, f"low ({low}) must be <= high ({high})"

    upper, seed = next_word(seed)
    lower, seed = next_word(seed)
    fraction = ((upper >> 5) * (1 << 26) + (lower >> 6)) / (1 << SEED_FLOAT_BITS_COUNT)
    value = low + fraction * (high - low)
    # Rounding can land on high for narrow or wide spans.
    if value >= high and high > low:
        value = math.nextafter(high, low)
    return value, seed
