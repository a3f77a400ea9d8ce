"""
Generator - Composable Deterministic Value Generators

TigerStyle: A Generator is a pure description of how to turn a Seed into a
value and a successor Seed. Composing generators never draws; only run()
does. Seeds are threaded strictly left to right through every combinator.

Usage:
    from kuji.gen import integer, map_n, flat_map_n, list_of, make_seed

    die = integer(1, 6)
    pair_sum = map_n(lambda a, b: a + b, die, die)
    hand = flat_map_n(lambda size: list_of(size, die), integer(1, 5))

    value, next_seed = hand.run(make_seed(1))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from .seed import Seed, draw_bool
from ..constants import GENERATOR_ARITY_MAX, GENERATOR_ARITY_MIN, ZIP_ARITY_MIN

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")

Predicate = Callable[[T], bool]


@dataclass(frozen=True)
class Generator(Generic[T]):
    """A value that knows how to produce ``(value, next_seed)`` from a Seed.

    TigerStyle:
    - Immutable and referentially transparent: same seed, same result
    - Built by combinators, run with an explicit seed
    - Freely shared across sampling calls
    """

    _run: Callable[[Seed], tuple[T, Seed]]

    def run(self, seed: Seed) -> tuple[T, Seed]:
        """Produce a value and the successor seed."""
        assert isinstance(seed, Seed), f"seed must be a Seed, got {type(seed).__name__}"
        return self._run(seed)

    # -- fluent helpers --------------------------------------------------------

    def map(self, f: Callable[[T], U]) -> Generator[U]:
        """Transform each drawn value with ``f``."""
        return map_n(f, self)

    def flat_map(self, f: Callable[[T], Generator[U]]) -> Generator[U]:
        """Choose the next generator from the drawn value."""
        return flat_map_n(f, self)

    def keep_if(self, predicate: Predicate[T]) -> Generator[T]:
        """Redraw until ``predicate`` holds. See keep_if()."""
        return keep_if(predicate, self)

    def drop_if(self, predicate: Predicate[T]) -> Generator[T]:
        """Redraw until ``predicate`` fails. See drop_if()."""
        return drop_if(predicate, self)


def _check_generator(generator: Any) -> None:
    assert isinstance(generator, Generator), \
        f"expected a Generator, got {type(generator).__name__}"


def _check_arity(generators: Sequence[Generator[Any]], minimum: int) -> None:
    assert minimum <= len(generators) <= GENERATOR_ARITY_MAX, \
        f"expected {minimum}..{GENERATOR_ARITY_MAX} generators, got {len(generators)}"
    for generator in generators:
        _check_generator(generator)


def _draw_all(generators: Sequence[Generator[Any]], seed: Seed) -> tuple[list[Any], Seed]:
    # Generator i always runs on the seed left by generator i - 1.
    values = []
    for generator in generators:
        value, seed = generator.run(seed)
        values.append(value)
    return values, seed


# =============================================================================
# Core Combinators
# =============================================================================


def constant(value: T) -> Generator[T]:
    """Always yield ``value``.

    Still consumes exactly one primitive draw so the seed advances the same
    way it would for any single-draw generator.
    """

    def run(seed: Seed) -> tuple[T, Seed]:
        _, seed = draw_bool(seed)
        return value, seed

    return Generator(run)


def map_n(f: Callable[..., U], *generators: Generator[Any]) -> Generator[U]:
    """Draw each generator left to right and apply ``f`` to the values.

    Args:
        f: Function taking one argument per generator.
        generators: Between 1 and 6 generators.
    """
    assert callable(f), "f must be callable"
    _check_arity(generators, GENERATOR_ARITY_MIN)

    def run(seed: Seed) -> tuple[U, Seed]:
        values, seed = _draw_all(generators, seed)
        return f(*values), seed

    return Generator(run)


def flat_map_n(f: Callable[..., Generator[U]], *generators: Generator[Any]) -> Generator[U]:
    """Monadic bind: draw the inputs, then run the generator ``f`` returns.

    The generator built by ``f`` runs on the seed left after the last input
    draw, so the shape of later draws may depend on earlier values.

    Args:
        f: Function taking one argument per generator, returning a Generator.
        generators: Between 1 and 6 generators.
    """
    assert callable(f), "f must be callable"
    _check_arity(generators, GENERATOR_ARITY_MIN)

    def run(seed: Seed) -> tuple[U, Seed]:
        values, seed = _draw_all(generators, seed)
        follow_up = f(*values)
        assert isinstance(follow_up, Generator), \
            f"flat_map function must return a Generator, got {type(follow_up).__name__}"
        return follow_up.run(seed)

    return Generator(run)


def and_map(function_generator: Generator[Callable[[A], U]], generator: Generator[A]) -> Generator[U]:
    """Applicative apply: draw a function, then an argument, then apply."""
    _check_generator(function_generator)
    _check_generator(generator)

    def run(seed: Seed) -> tuple[U, Seed]:
        f, seed = function_generator.run(seed)
        value, seed = generator.run(seed)
        return f(value), seed

    return Generator(run)


def zip_n(*generators: Generator[Any]) -> Generator[tuple[Any, ...]]:
    """Tuple the values of 2 to 6 generators, drawn left to right."""
    _check_arity(generators, ZIP_ARITY_MIN)

    def run(seed: Seed) -> tuple[tuple[Any, ...], Seed]:
        values, seed = _draw_all(generators, seed)
        return tuple(values), seed

    return Generator(run)


def sequence(generators: Sequence[Generator[T]]) -> Generator[list[T]]:
    """Turn a list of generators into a generator of a list.

    Output order follows input order. An empty input yields ``[]`` and
    returns the seed untouched.
    """
    generators = list(generators)
    for generator in generators:
        _check_generator(generator)

    def run(seed: Seed) -> tuple[list[T], Seed]:
        return _draw_all(generators, seed)

    return Generator(run)


def map_constraint(f: Callable[[T], U], generator: Generator[T]) -> Generator[tuple[T, U]]:
    """Pair each drawn value with a derived view of it: ``(a, f(a))``."""
    assert callable(f), "f must be callable"
    _check_generator(generator)

    def run(seed: Seed) -> tuple[tuple[T, U], Seed]:
        value, seed = generator.run(seed)
        return (value, f(value)), seed

    return Generator(run)


def reduce(f: Callable[[T, A], U], initial: A, generator: Generator[T]) -> Generator[U]:
    """Draw a single value ``a`` and yield ``f(a, initial)``.

    This is a one-draw projection, not a fold over many draws.
    """
    assert callable(f), "f must be callable"
    _check_generator(generator)

    def run(seed: Seed) -> tuple[U, Seed]:
        value, seed = generator.run(seed)
        return f(value, initial), seed

    return Generator(run)


fold = reduce


# =============================================================================
# Filtering (Rejection Sampling)
# =============================================================================


def keep_if(predicate: Predicate[T], generator: Generator[T]) -> Generator[T]:
    """Redraw from ``generator`` until ``predicate`` holds.

    Unbounded: if ``predicate`` can never hold over the generator's range
    this never returns. Callers must guarantee satisfiability, or use
    kuji.gen.sampling.capped_generate_until instead.
    """
    assert callable(predicate), "predicate must be callable"
    _check_generator(generator)

    def run(seed: Seed) -> tuple[T, Seed]:
        while True:
            value, seed = generator.run(seed)
            if predicate(value):
                return value, seed

    return Generator(run)


def drop_if(predicate: Predicate[T], generator: Generator[T]) -> Generator[T]:
    """Redraw from ``generator`` until ``predicate`` fails. Unbounded."""
    assert callable(predicate), "predicate must be callable"
    return keep_if(lambda value: not predicate(value), generator)
