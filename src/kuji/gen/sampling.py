"""
Sampling - Bounded and Unbounded Sampling Loops

TigerStyle: Every loop states its stop condition. The unbounded loops
(generate_such_that, generate_until) rely on the caller to guarantee the
predicate eventually changes; the capped and iterative loops bound the work.

All loops are iterative, so stack depth never depends on the number of draws.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .generator import Generator, Predicate, keep_if
from .seed import Seed, make_seed
from ..constants import QUICK_GENERATE_SEED_VALUE

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Built once; quick_generate always starts here.
QUICK_GENERATE_SEED: Seed = make_seed(QUICK_GENERATE_SEED_VALUE)


def generate_n(n: int, generator: Generator[T], seed: Seed) -> list[T]:
    """Draw exactly ``max(n, 0)`` values, threading the seed forward."""
    values = []
    for _ in range(max(n, 0)):
        value, seed = generator.run(seed)
        values.append(value)
    return values


def generate_such_that(predicate: Predicate[T], generator: Generator[T], seed: Seed) -> tuple[T, Seed]:
    """Draw until a value satisfies ``predicate``.

    Unbounded: never returns if ``predicate`` is unsatisfiable over the
    generator's range.

    Returns:
        The first accepted value and the seed after its draw.
    """
    return keep_if(predicate, generator).run(seed)


def generate_until(predicate: Predicate[T], generator: Generator[T], seed: Seed) -> list[T]:
    """Collect values while ``predicate`` holds.

    Stops at the first failing draw, which is not included. Unbounded:
    never returns if ``predicate`` always holds.
    """
    assert callable(predicate), "predicate must be callable"

    values = []
    while True:
        value, seed = generator.run(seed)
        if not predicate(value):
            return values
        values.append(value)


def capped_generate_until(
    max_count: int,
    predicate: Predicate[T],
    generator: Generator[T],
    seed: Seed,
) -> list[T]:
    """Collect values while ``predicate`` holds, drawing at most ``max_count`` times.

    Args:
        max_count: Draw budget. ``max_count <= 0`` draws nothing.
        predicate: Collection stops at the first value failing it.
        generator: Source of values.
        seed: Starting seed.

    Returns:
        The accepted values, in draw order; never more than ``max_count``.
    """
    assert callable(predicate), "predicate must be callable"

    values = []
    for _ in range(max(max_count, 0)):
        value, seed = generator.run(seed)
        if not predicate(value):
            return values
        values.append(value)

    if max_count > 0:
        logger.debug(f"capped_generate_until exhausted its budget of {max_count} draws")
    return values


def generate_iteratively_until(
    max_length: int,
    predicate: Predicate[T],
    index_to_generator: Callable[[int], Generator[T]],
    seed: Seed,
) -> list[T]:
    """Run generate_until for each index in ``range(max_length)`` and concatenate.

    Every index starts from the same ``seed``; the seed is not threaded from
    one index to the next. Only the per-index runs are unbounded.
    """
    assert callable(index_to_generator), "index_to_generator must be callable"

    values = []
    for index in range(max(max_length, 0)):
        found = generate_until(predicate, index_to_generator(index), seed)
        logger.debug(f"generate_iteratively_until index {index}: {len(found)} values")
        values.extend(found)
    return values


def generate_iteratively_such_that(
    max_length: int,
    predicate: Predicate[T],
    index_to_generator: Callable[[int], Generator[T]],
    seed: Seed,
) -> list[T]:
    """generate_iteratively_until with ``predicate`` negated.

    Each index collects values while ``predicate`` fails.
    """
    assert callable(predicate), "predicate must be callable"
    return generate_iteratively_until(
        max_length,
        lambda value: not predicate(value),
        index_to_generator,
        seed,
    )


def quick_generate(generator: Generator[T]) -> T:
    """Draw one value from the fixed QUICK_GENERATE_SEED.

    For exploratory use: the result is the same on every call and cannot be
    varied by the caller.
    """
    value, _ = generator.run(QUICK_GENERATE_SEED)
    return value
