"""
Tests for Grammar construction, validation and lookups.
"""

import pytest

from grammartree.exceptions import GrammarValidationError
from grammartree.model import EPSILON, Grammar, GrammarType, Production


class TestGrammarValidation:
    """Construction-time structural checks."""

    def test_valid_grammar(self, anbn_grammar):
        assert anbn_grammar.start_symbol == "S"
        assert anbn_grammar.grammar_type is GrammarType.CONTEXT_FREE

    def test_start_symbol_must_be_nonterminal(self):
        with pytest.raises(GrammarValidationError) as exc_info:
            Grammar({"S"}, {"a"}, [Production("S", "a")], "X")

        assert "start symbol" in str(exc_info.value)
        assert exc_info.value.context.symbol == "X"

    def test_left_side_must_be_nonterminal(self):
        with pytest.raises(GrammarValidationError) as exc_info:
            Grammar({"S"}, {"a"}, [Production("a", "S")], "S")

        assert "left side" in str(exc_info.value)

    def test_unknown_right_symbol(self):
        with pytest.raises(GrammarValidationError) as exc_info:
            Grammar({"S"}, {"a"}, [Production("S", "aSc")], "S")

        assert exc_info.value.context.symbol == "c"
        assert "S → aSc" in str(exc_info.value)

    def test_multi_character_terminal_without_spaces_is_unknown(self):
        """Without whitespace ``id`` splits into ``i`` and ``d``."""
        with pytest.raises(GrammarValidationError):
            Grammar({"F"}, {"id"}, [Production("F", "id")], "F")

        grammar = Grammar({"F"}, {"id"}, [Production("F", " id ")], "F")
        assert grammar.productions[0].symbols == ("id",)

    def test_terminals_and_nonterminals_disjoint(self):
        with pytest.raises(GrammarValidationError):
            Grammar({"S", "a"}, {"a"}, [], "S")

    def test_epsilon_cannot_be_declared(self):
        with pytest.raises(GrammarValidationError):
            Grammar({"S"}, {EPSILON}, [], "S")

    def test_empty_symbol_rejected(self):
        with pytest.raises(GrammarValidationError):
            Grammar({"S"}, {""}, [], "S")


class TestGrammarLookups:
    """Tests for production lookup and membership."""

    def test_productions_for_preserves_declaration_order(self, palindrome_grammar):
        productions = palindrome_grammar.productions_for("S")
        assert [p.right for p in productions] == ["a S a", "b S b", "ε"]

    def test_productions_for_unknown_symbol(self, palindrome_grammar):
        assert palindrome_grammar.productions_for("Z") == []

    def test_productions_for_returns_copy(self, palindrome_grammar):
        palindrome_grammar.productions_for("S").clear()
        assert len(palindrome_grammar.productions_for("S")) == 3

    def test_membership(self, identifier_grammar):
        assert identifier_grammar.is_terminal("0")
        assert not identifier_grammar.is_terminal("A")
        assert identifier_grammar.is_nonterminal("A")
        assert not identifier_grammar.is_nonterminal(EPSILON)

    def test_nullable(self, identifier_grammar):
        assert identifier_grammar.is_nullable("A")
        assert not identifier_grammar.is_nullable("S")
        assert not identifier_grammar.is_nullable("a")


class TestGrammarImmutability:
    """The grammar and its symbol views cannot be changed."""

    def test_symbol_sets_are_frozen(self, anbn_grammar):
        assert isinstance(anbn_grammar.terminals, frozenset)
        assert isinstance(anbn_grammar.nonterminals, frozenset)

    def test_constructor_copies_inputs(self):
        terminals = {"a"}
        productions = [Production("S", "a")]
        grammar = Grammar({"S"}, terminals, productions, "S")
        terminals.add("b")
        productions.append(Production("S", "b"))

        assert grammar.terminals == frozenset({"a"})
        assert len(grammar.productions) == 1

    def test_attributes_read_only(self, anbn_grammar):
        with pytest.raises(AttributeError):
            anbn_grammar.start_symbol = "A"

    def test_equal_grammars(self):
        assert Grammar({"S"}, {"a"}, [Production("S", "a")], "S") == Grammar(
            {"S"}, {"a"}, [Production("S", "a")], "S"
        )

    def test_str(self, anbn_grammar):
        rendered = str(anbn_grammar)
        assert "TYPE_2" in rendered
        assert "N = {S}" in rendered
        assert "T = {a, b}" in rendered
        assert "S → a S b" in rendered

    def test_str_with_unrecognized_type_tag(self):
        grammar = Grammar({"S"}, {"a"}, [Production("S", "a")], "S", grammar_type="TYPE_0")
        assert str(grammar).splitlines()[0] == "Grammar TYPE_0"
