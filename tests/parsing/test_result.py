"""
Tests for ParseResult outcomes and their exception conversion.
"""

import pytest

from grammartree.exceptions import ParseLimitExceededError, ParseRejectedError
from grammartree.parsing import ParseOutcome, ParseResult, Type2Parser


class TestParseResult:
    """Tests for ParseResult."""

    def test_accepted_result(self, anbn_grammar):
        result = Type2Parser(anbn_grammar).parse("aabb")

        assert result.accepted
        assert result.outcome is ParseOutcome.ACCEPTED
        assert result.tokens == ("a", "a", "b", "b")
        assert result.raise_for_outcome() is result

    def test_rejected_raises(self):
        result = ParseResult.reject(("a", "b"), "String rejected", steps=7)

        with pytest.raises(ParseRejectedError) as exc_info:
            result.raise_for_outcome()

        assert exc_info.value.text == "ab"
        assert exc_info.value.steps == 7

    def test_limit_exceeded_raises(self):
        result = ParseResult.limit_exceeded(("a",), 1000, "maximum number of steps exceeded", 1001)

        assert not result.accepted
        assert "ambiguous" in result.message
        with pytest.raises(ParseLimitExceededError) as exc_info:
            result.raise_for_outcome()

        assert exc_info.value.bound == 1000

    def test_str_accepted(self, anbn_grammar):
        rendered = str(Type2Parser(anbn_grammar).parse("ab"))

        assert rendered.startswith("Status: ACCEPTED")
        assert "└── S [S → a S b]" in rendered
        assert "Generated string: 'ab'" in rendered

    def test_str_rejected(self):
        rendered = str(ParseResult.reject((), "String rejected"))
        assert rendered == "Status: REJECTED\nMessage: String rejected"
