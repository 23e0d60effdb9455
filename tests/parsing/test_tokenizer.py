"""
Tests for greedy longest-match input tokenization.
"""

import pytest

from grammartree.parsing import tokenize


class TestTokenize:
    """Tests for tokenize."""

    @pytest.mark.parametrize(
        "text,terminals,expected",
        [
            ("aabb", {"a", "b"}, ("a", "a", "b", "b")),
            ("id+id", {"id", "+"}, ("id", "+", "id")),
            ("id+i", {"i", "id", "+"}, ("id", "+", "i")),
            ("a?b", {"a", "b"}, ("a", "?", "b")),
            ("ifx", {"if", "iff", "x"}, ("if", "x")),
            ("iffx", {"if", "iff", "x"}, ("iff", "x")),
        ],
    )
    def test_longest_terminal_wins(self, text, terminals, expected):
        assert tokenize(text, terminals) == expected

    def test_empty_input(self):
        assert tokenize("", {"a"}) == ()

    def test_empty_marker_input_is_empty_string(self):
        assert tokenize("ε", {"a"}) == ()

    def test_no_terminals(self):
        assert tokenize("ab", set()) == ("a", "b")
