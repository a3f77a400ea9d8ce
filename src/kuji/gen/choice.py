"""
Choice - Selection and Frequency-Weighted Choice

TigerStyle: Degenerate inputs have explicit fallbacks. An empty collection
or a zero total weight never fails; it falls back to None or a default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar, Union

from .generator import Generator
from .seed import Seed, draw_float, draw_int

T = TypeVar("T")


@dataclass(frozen=True)
class WeightedAlternative(Generic[T]):
    """A generator paired with its relative weight.

    Only the magnitude of the weight matters.
    """

    weight: float
    generator: Generator[T]

    def __post_init__(self) -> None:
        """Validate the alternative.

        TigerStyle: Assert preconditions.
        """
        assert isinstance(self.generator, Generator), \
            f"expected a Generator, got {type(self.generator).__name__}"

    @property
    def magnitude(self) -> float:
        """Absolute weight used when choosing."""
        return abs(self.weight)


Alternative = Union[WeightedAlternative[T], tuple[float, Generator[T]]]


def _as_weighted(alternative: Alternative[T]) -> WeightedAlternative[T]:
    if isinstance(alternative, WeightedAlternative):
        return alternative
    weight, generator = alternative
    return WeightedAlternative(weight, generator)


def select(items: Sequence[T]) -> Generator[Optional[T]]:
    """Pick an item uniformly at random, or None when ``items`` is empty.

    The empty case consumes no draw.
    """
    items = list(items)

    def run(seed: Seed) -> tuple[Optional[T], Seed]:
        if not items:
            return None, seed
        index, seed = draw_int(0, len(items) - 1, seed)
        return items[index], seed

    return Generator(run)


def select_with_default(default: T, items: Sequence[T]) -> Generator[T]:
    """Like select(), but yield ``default`` for an empty collection."""
    items = list(items)

    def run(seed: Seed) -> tuple[T, Seed]:
        if not items:
            return default, seed
        return select(items).run(seed)

    return Generator(run)


def frequency(alternatives: Sequence[Alternative[T]], default: Generator[T]) -> Generator[T]:
    """Choose among generators in proportion to their weights.

    Draws a float over ``[0, total_weight]`` and walks the alternatives in
    order, subtracting each weight, until one covers the drawn value. A
    draw landing exactly on a boundary goes to the earlier alternative.

    Args:
        alternatives: ``WeightedAlternative`` values or ``(weight, generator)``
            pairs. Negative weights count by magnitude.
        default: Used when the weights sum to zero (or there are none). The
            result is then ``default`` itself and draws exactly like it.
    """
    assert isinstance(default, Generator), "default must be a Generator"

    weighted = [_as_weighted(alternative) for alternative in alternatives]
    total_weight = sum(alternative.magnitude for alternative in weighted)

    if total_weight == 0:
        return default

    def run(seed: Seed) -> tuple[T, Seed]:
        remaining, seed = draw_float(0.0, total_weight, seed)
        for alternative in weighted:
            # Zero weights are never chosen, even on a draw of exactly 0.0.
            if alternative.magnitude and remaining <= alternative.magnitude:
                return alternative.generator.run(seed)
            remaining -= alternative.magnitude
        # Float rounding can leave a sliver past the last weight.
        return default.run(seed)

    return Generator(run)


def merge(first: Generator[T], second: Generator[T]) -> Generator[T]:
    """Choose between two generators with equal probability."""
    return frequency([(1, first), (1, second)], first)
