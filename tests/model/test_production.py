"""
Tests for production right-side tokenization and production identity.
"""

import pytest

from grammartree.model import EPSILON, Production, tokenize_right


class TestTokenizeRight:
    """Tests for the whitespace/character tokenization rule."""

    @pytest.mark.parametrize(
        "right,expected",
        [
            ("aSb", ("a", "S", "b")),
            ("a S b", ("a", "S", "b")),
            ("E + T", ("E", "+", "T")),
            ("( E )", ("(", "E", ")")),
            ("id", ("i", "d")),
            ("  id\tnum ", ("id", "num")),
        ],
    )
    def test_symbols(self, right, expected):
        """Whitespace splits into tokens, otherwise every character is a symbol."""
        assert tokenize_right(right) == expected

    @pytest.mark.parametrize("right", ["ε", "epsilon", "", "   "])
    def test_empty_production_markers(self, right):
        """All empty-string spellings yield the single empty marker."""
        assert tokenize_right(right) == (EPSILON,)


class TestProduction:
    """Tests for Production value semantics."""

    def test_symbols_computed_at_construction(self):
        production = Production("S", "aSb")
        assert production.symbols == ("a", "S", "b")
        assert production.length == 3
        assert production.first_symbol == "a"
        assert not production.is_epsilon

    def test_epsilon_production(self):
        production = Production("S", "epsilon")
        assert production.is_epsilon
        assert production.length == 0
        assert production.symbols == (EPSILON,)
        assert production.first_symbol is None

    def test_equality_uses_raw_text(self):
        """Productions with the same symbols but different raw text differ."""
        assert Production("S", "aSb") == Production("S", "aSb")
        assert Production("S", "aSb") != Production("S", "a S b")
        assert Production("S", "aSb").symbols == Production("S", "a S b").symbols

    def test_hashable(self):
        assert len({Production("S", "ab"), Production("S", "ab"), Production("A", "ab")}) == 2

    def test_immutable(self):
        production = Production("S", "ab")
        with pytest.raises(AttributeError):
            production.left = "A"

    def test_str(self):
        assert str(Production("E", "E + T")) == "E → E + T"

    def test_padded_single_symbol(self):
        """Surrounding whitespace keeps a multi-character symbol whole."""
        production = Production("F", "id ")

        assert production.symbols == ("id",)
        assert str(production) == "F → id"
