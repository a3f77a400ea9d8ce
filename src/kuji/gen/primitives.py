"""
Primitives - Base Generators over the Draw Primitive

Every structured generator bottoms out in one of these.
"""

from __future__ import annotations

from typing import TypeVar

from .generator import Generator, flat_map_n, map_n, sequence
from .seed import Seed, draw_bool, draw_float, draw_int
from ..constants import CHAR_ASCII_MAX, CHAR_ASCII_MIN, CHAR_CODE_POINT_MAX

T = TypeVar("T")


def boolean() -> Generator[bool]:
    """True or False with equal probability."""
    return Generator(draw_bool)


def integer(low: int, high: int) -> Generator[int]:
    """Integer in the inclusive range ``[low, high]``."""
    assert low <= high, f"low ({low}) must be <= high ({high})"

    def run(seed: Seed) -> tuple[int, Seed]:
        return draw_int(low, high, seed)

    return Generator(run)


def floating(low: float, high: float) -> Generator[float]:
    """Float in ``[low, high)``."""
    assert low <= high, f"low ({low}) must be <= high ({high})"

    def run(seed: Seed) -> tuple[float, Seed]:
        return draw_float(low, high, seed)

    return Generator(run)


def probability() -> Generator[float]:
    """Float in ``[0.0, 1.0)``."""
    return floating(0.0, 1.0)


# =============================================================================
# Lists
# =============================================================================


def list_of(length: int, generator: Generator[T]) -> Generator[list[T]]:
    """List of exactly ``length`` values; ``length <= 0`` gives ``[]``."""
    return sequence([generator] * max(length, 0))


def list_between(min_length: int, max_length: int, generator: Generator[T]) -> Generator[list[T]]:
    """List whose length is drawn first from ``[min_length, max_length]``."""
    assert 0 <= min_length <= max_length, \
        f"need 0 <= min_length ({min_length}) <= max_length ({max_length})"
    return flat_map_n(lambda length: list_of(length, generator), integer(min_length, max_length))


# =============================================================================
# Characters and Strings
# =============================================================================


def char(low: int, high: int) -> Generator[str]:
    """Character whose code point lies in ``[low, high]``."""
    assert 0 <= low <= high <= CHAR_CODE_POINT_MAX, \
        f"code points must satisfy 0 <= low ({low}) <= high ({high}) <= {CHAR_CODE_POINT_MAX}"
    return map_n(chr, integer(low, high))


def lower_case_char() -> Generator[str]:
    return char(ord("a"), ord("z"))


def upper_case_char() -> Generator[str]:
    return char(ord("A"), ord("Z"))


def ascii_char() -> Generator[str]:
    """Printable ASCII character."""
    return char(CHAR_ASCII_MIN, CHAR_ASCII_MAX)


def string_of(length: int, char_generator: Generator[str]) -> Generator[str]:
    """String of exactly ``length`` characters."""
    return map_n("".join, list_of(length, char_generator))


def string_between(min_length: int, max_length: int, char_generator: Generator[str]) -> Generator[str]:
    """String whose length is drawn from ``[min_length, max_length]``."""
    return map_n("".join, list_between(min_length, max_length, char_generator))
