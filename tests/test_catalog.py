"""
Tests for the example grammar catalogue.
"""

import pytest

from grammartree.catalog import example_grammar, list_examples
from grammartree.model import GrammarType
from grammartree.parsing import Type2Parser, Type3Parser, create_parser


class TestCatalog:
    """Tests for example_grammar and list_examples."""

    def test_list_examples(self):
        assert list_examples() == ["arithmetic", "arithmetic_id", "palindrome", "anbn", "identifier"]

    @pytest.mark.parametrize("name", ["arithmetic", "arithmetic_id", "palindrome", "anbn"])
    def test_context_free_examples(self, name):
        grammar = example_grammar(name)
        assert grammar.grammar_type is GrammarType.CONTEXT_FREE
        assert isinstance(create_parser(grammar), Type2Parser)

    def test_identifier_is_regular(self):
        assert isinstance(create_parser(example_grammar("identifier")), Type3Parser)

    def test_fresh_instances(self):
        assert example_grammar("anbn") == example_grammar("anbn")
        assert example_grammar("anbn") is not example_grammar("anbn")

    def test_unknown_example(self):
        with pytest.raises(KeyError) as exc_info:
            example_grammar("missing")

        assert "Available examples" in str(exc_info.value)

    def test_arithmetic_id_keeps_id_as_one_terminal(self):
        grammar = example_grammar("arithmetic_id")
        assert [p.symbols for p in grammar.productions_for("F")] == [("(", "E", ")"), ("id",)]

        result = create_parser(grammar).parse("id+id*id")
        assert result.accepted
        assert result.tokens == ("id", "+", "id", "*", "id")
