"""
Primitive Generator Tests
"""

import pytest

from kuji.gen import (
    ascii_char,
    boolean,
    char,
    constant,
    draw_float,
    floating,
    generate_n,
    integer,
    list_between,
    list_of,
    lower_case_char,
    probability,
    string_between,
    string_of,
    upper_case_char,
)


class TestNumbers:
    """Tests for boolean, integer, floating and probability."""

    def test_boolean_both_values(self, seed):
        """Test boolean produces True and False."""
        assert set(generate_n(100, boolean(), seed)) == {True, False}

    def test_integer_bounds(self, seed):
        """Test integer stays in its inclusive range."""
        assert all(-3 <= v <= 3 for v in generate_n(200, integer(-3, 3), seed))

    def test_integer_inverted_fails(self):
        """Test low > high fails at construction."""
        with pytest.raises(AssertionError):
            integer(3, -3)

    def test_floating_matches_draw(self, seed):
        """Test floating is the float draw primitive."""
        assert floating(1.0, 2.0).run(seed) == draw_float(1.0, 2.0, seed)

    def test_probability_bounds(self, seed):
        """Test probability stays in [0, 1)."""
        assert all(0.0 <= p < 1.0 for p in generate_n(200, probability(), seed))


class TestLists:
    """Tests for list_of and list_between."""

    def test_list_of_length(self, die, seed):
        """Test list_of yields exactly the requested length."""
        values, _ = list_of(7, die).run(seed)
        assert len(values) == 7

    def test_list_of_non_positive(self, die, seed):
        """Test non-positive lengths yield [] without drawing."""
        assert list_of(0, die).run(seed) == ([], seed)
        assert list_of(-4, die).run(seed) == ([], seed)

    def test_list_between_lengths(self, die, seeds):
        """Test list_between lengths stay in range."""
        for s in seeds:
            values, _ = list_between(2, 5, die).run(s)
            assert 2 <= len(values) <= 5

    def test_list_between_invalid_fails(self, die):
        """Test max_length < min_length fails assertion."""
        with pytest.raises(AssertionError):
            list_between(5, 2, die)


class TestCharacters:
    """Tests for char and string generators."""

    def test_char_range(self, seed):
        """Test char stays within its code point range."""
        assert all("a" <= c <= "e" for c in generate_n(100, char(ord("a"), ord("e")), seed))

    def test_named_ranges(self, seed):
        """Test lower, upper and ascii character generators."""
        assert all(c.islower() for c in generate_n(50, lower_case_char(), seed))
        assert all(c.isupper() for c in generate_n(50, upper_case_char(), seed))
        assert all(32 <= ord(c) <= 126 for c in generate_n(50, ascii_char(), seed))

    def test_char_out_of_range_fails(self):
        """Test code points past the Unicode maximum fail assertion."""
        with pytest.raises(AssertionError):
            char(0, 0x110000)

    def test_string_of(self, seed):
        """Test string_of builds a string of the requested length."""
        value, _ = string_of(4, constant("x")).run(seed)
        assert value == "xxxx"

    def test_string_between(self, seeds):
        """Test string_between lengths stay in range."""
        for s in seeds:
            value, _ = string_between(1, 3, lower_case_char()).run(s)
            assert 1 <= len(value) <= 3
            assert value.isalpha()
