"""
Shared test fixtures for the grammartree test suite.
"""

import pytest

from grammartree.catalog import anbn, arithmetic, arithmetic_id, identifier, palindrome
from grammartree.model import Grammar, GrammarType, Production


@pytest.fixture
def anbn_grammar() -> Grammar:
    """S → aSb | ε"""
    return anbn()


@pytest.fixture
def palindrome_grammar() -> Grammar:
    """S → aSa | bSb | ε"""
    return palindrome()


@pytest.fixture
def identifier_grammar() -> Grammar:
    """S → aA | bA, A → aA | bA | 0A | 1A | ε (regular)"""
    return identifier()


@pytest.fixture
def arithmetic_grammar() -> Grammar:
    return arithmetic()


@pytest.fixture
def arithmetic_id_grammar() -> Grammar:
    return arithmetic_id()


@pytest.fixture
def make_grammar():
    """Build a grammar from ``(left, right)`` pairs.

    Usage:
        def test_something(make_grammar):
            grammar = make_grammar({"S"}, {"a"}, [("S", "a")])
    """

    def _make(nonterminals, terminals, rules, start="S", grammar_type=GrammarType.CONTEXT_FREE):
        return Grammar(
            nonterminals=nonterminals,
            terminals=terminals,
            productions=[Production(left, right) for left, right in rules],
            start_symbol=start,
            grammar_type=grammar_type,
        )

    return _make
