"""
Kuji Gen - Deterministic Generator Combinators

Compose small generators into generators of structured data. Every run is
reproducible from its Seed.

Usage:
    from kuji.gen import integer, frequency, constant, generate_n, make_seed

    die = integer(1, 6)
    rolls = generate_n(3, die, make_seed(1))

    coin = frequency([(3, constant("a")), (1, constant("b"))], constant("z"))

Run with seed:
    KUJI_SEED=12345 pytest
"""

from .seed import Seed, make_seed, draw_bool, draw_int, draw_float
from .generator import (
    Generator,
    Predicate,
    constant,
    map_n,
    flat_map_n,
    and_map,
    zip_n,
    sequence,
    map_constraint,
    reduce,
    fold,
    keep_if,
    drop_if,
)
from .choice import (
    WeightedAlternative,
    select,
    select_with_default,
    frequency,
    merge,
)
from .primitives import (
    boolean,
    integer,
    floating,
    probability,
    list_of,
    list_between,
    char,
    lower_case_char,
    upper_case_char,
    ascii_char,
    string_of,
    string_between,
)
from .sampling import (
    QUICK_GENERATE_SEED,
    generate_n,
    generate_such_that,
    generate_until,
    capped_generate_until,
    generate_iteratively_until,
    generate_iteratively_such_that,
    quick_generate,
)
from .config import GenConfig

__all__ = [
    # Draw primitive
    "Seed",
    "make_seed",
    "draw_bool",
    "draw_int",
    "draw_float",
    # Combinators
    "Generator",
    "Predicate",
    "constant",
    "map_n",
    "flat_map_n",
    "and_map",
    "zip_n",
    "sequence",
    "map_constraint",
    "reduce",
    "fold",
    "keep_if",
    "drop_if",
    # Choice
    "WeightedAlternative",
    "select",
    "select_with_default",
    "frequency",
    "merge",
    # Primitives
    "boolean",
    "integer",
    "floating",
    "probability",
    "list_of",
    "list_between",
    "char",
    "lower_case_char",
    "upper_case_char",
    "ascii_char",
    "string_of",
    "string_between",
    # Sampling
    "QUICK_GENERATE_SEED",
    "generate_n",
    "generate_such_that",
    "generate_until",
    "capped_generate_until",
    "generate_iteratively_until",
    "generate_iteratively_such_that",
    "quick_generate",
    # Config
    "GenConfig",
]
