"""
Choice Tests

Selection, frequency-weighted choice and their degenerate fallbacks.
"""

import pytest

from kuji.gen import (
    Seed,
    WeightedAlternative,
    constant,
    draw_float,
    draw_int,
    frequency,
    generate_n,
    make_seed,
    merge,
    select,
    select_with_default,
)


# =============================================================================
# Selection Tests
# =============================================================================


class TestSelect:
    """Tests for select and select_with_default."""

    def test_empty_yields_none(self, seed):
        """Test select([]) yields None without drawing."""
        assert select([]).run(seed) == (None, seed)

    def test_uniform_index(self, seed):
        """Test select picks the item at a drawn index."""
        items = ["a", "b", "c", "d"]
        index, next_seed = draw_int(0, 3, seed)
        assert select(items).run(seed) == (items[index], next_seed)

    def test_all_items_reachable(self, seeds):
        """Test every item is selected across seeds."""
        items = ["a", "b", "c"]
        picked = {select(items).run(s)[0] for s in seeds}
        assert picked == set(items)

    def test_with_default_empty(self, seed):
        """Test select_with_default falls back on an empty collection."""
        assert select_with_default("d", []).run(seed) == ("d", seed)

    def test_with_default_non_empty(self, seed):
        """Test select_with_default matches select when items exist."""
        items = [1, 2, 3]
        assert select_with_default(0, items).run(seed) == select(items).run(seed)


# =============================================================================
# Frequency Tests
# =============================================================================


class TestFrequency:
    """Tests for frequency and merge."""

    def test_empty_falls_back(self, seed):
        """Test no alternatives behaves exactly like the default."""
        default = constant("z")
        assert frequency([], default).run(seed) == default.run(seed)

    def test_zero_weights_fall_back(self, seed):
        """Test zero total weight behaves exactly like the default."""
        default = constant("z")
        chosen = frequency([(0, constant("a")), (0, constant("b"))], default)
        assert chosen.run(seed) == default.run(seed)

    def test_weighted_ratio(self):
        """Test 3:1 weights give roughly a 3:1 ratio and never the default."""
        chooser = frequency([(3, constant("a")), (1, constant("b"))], constant("z"))
        counts = {"a": 0, "b": 0, "z": 0}
        for drawn in generate_n(4000, chooser, make_seed(7)):
            counts[drawn] += 1

        assert counts["z"] == 0
        assert 2.5 <= counts["a"] / counts["b"] <= 3.6

    def test_zero_weight_never_chosen(self, seeds):
        """Test an alternative with zero weight after a positive one is never picked."""
        chooser = frequency([(1, constant("a")), (0, constant("b"))], constant("z"))
        assert {chooser.run(s)[0] for s in seeds} == {"a"}

    def test_leading_zero_weight_on_zero_draw(self):
        """Test a zero-weight head is skipped even when the draw is exactly 0.0."""
        chooser = frequency([(0, constant("a")), (1, constant("b"))], constant("z"))
        zero_draw = Seed(0, 1)

        assert draw_float(0.0, 1.0, zero_draw)[0] == 0.0
        assert chooser.run(zero_draw)[0] == "b"

    def test_negative_weights_use_magnitude(self, seeds):
        """Test negative weights behave like their absolute values."""
        positive = frequency([(2, constant("a")), (1, constant("b"))], constant("z"))
        negative = frequency([(-2, constant("a")), (-1, constant("b"))], constant("z"))
        for s in seeds:
            assert positive.run(s) == negative.run(s)

    def test_weighted_alternative_values(self, seeds):
        """Test WeightedAlternative and tuples are interchangeable."""
        tuples = frequency([(1, constant("a")), (1, constant("b"))], constant("z"))
        weighted = frequency(
            [WeightedAlternative(1, constant("a")), WeightedAlternative(1, constant("b"))],
            constant("z"),
        )
        for s in seeds:
            assert tuples.run(s) == weighted.run(s)

    def test_weighted_alternative_requires_generator(self):
        """Test a non-generator alternative fails assertion."""
        with pytest.raises(AssertionError):
            WeightedAlternative(1, "a")

    def test_merge_matches_even_frequency(self, seeds):
        """Test merge is a 50/50 frequency defaulting to the first generator."""
        a, b = constant("a"), constant("b")
        merged = merge(a, b)
        expected = frequency([(1, a), (1, b)], a)
        for s in seeds:
            assert merged.run(s) == expected.run(s)

    def test_merge_reaches_both(self, seeds):
        """Test merge produces values from both generators."""
        merged = merge(constant("a"), constant("b"))
        assert {merged.run(s)[0] for s in seeds} == {"a", "b"}
