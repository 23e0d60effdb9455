"""
Ready-made example grammars.

Each entry builds a fresh Grammar. Right sides are written with spaces so
that multi-character terminals such as ``id`` survive tokenization; a lone
``id`` carries a trailing space for the same reason.
"""

from collections.abc import Callable

from grammartree.model.grammar import Grammar, GrammarType
from grammartree.model.production import Production


def arithmetic() -> Grammar:
    """Left-recursive arithmetic expressions over the variable ``x``."""
    return Grammar(
        nonterminals={"E", "T", "F"},
        terminals={"+", "*", "(", ")", "x"},
        productions=[
            Production("E", "E + T"),
            Production("E", "T"),
            Production("T", "T * F"),
            Production("T", "F"),
            Production("F", "( E )"),
            Production("F", "x"),
        ],
        start_symbol="E",
    )


def arithmetic_id() -> Grammar:
    """Arithmetic expressions with the multi-character terminal ``id``."""
    return Grammar(
        nonterminals={"E", "T", "F"},
        terminals={"+", "*", "(", ")", "id"},
        productions=[
            Production("E", "E + T"),
            Production("E", "T"),
            Production("T", "T * F"),
            Production("T", "F"),
            Production("F", "( E )"),
            Production("F", "id "),
        ],
        start_symbol="E",
    )


def palindrome() -> Grammar:
    """Even-length palindromes over ``a`` and ``b``."""
    return Grammar(
        nonterminals={"S"},
        terminals={"a", "b"},
        productions=[
            Production("S", "a S a"),
            Production("S", "b S b"),
            Production("S", "ε"),
        ],
        start_symbol="S",
    )


def anbn() -> Grammar:
    """The language aⁿbⁿ."""
    return Grammar(
        nonterminals={"S"},
        terminals={"a", "b"},
        productions=[Production("S", "a S b"), Production("S", "ε")],
        start_symbol="S",
    )


def identifier() -> Grammar:
    """Identifiers: a letter followed by letters and digits (regular)."""
    return Grammar(
        nonterminals={"S", "A"},
        terminals={"a", "b", "0", "1"},
        productions=[
            Production("S", "a A"),
            Production("S", "b A"),
            Production("A", "a A"),
            Production("A", "b A"),
            Production("A", "0 A"),
            Production("A", "1 A"),
            Production("A", "ε"),
        ],
        start_symbol="S",
        grammar_type=GrammarType.REGULAR,
    )


EXAMPLES: dict[str, Callable[[], Grammar]] = {
    "arithmetic": arithmetic,
    "arithmetic_id": arithmetic_id,
    "palindrome": palindrome,
    "anbn": anbn,
    "identifier": identifier,
}


def list_examples() -> list[str]:
    """List the names of all example grammars."""
    return list(EXAMPLES.keys())


def example_grammar(name: str) -> Grammar:
    """
    Build an example grammar by name.

    Params:
        name: One of ``list_examples()``

    Returns:
        Newly constructed grammar

    Raises:
        KeyError: If no example has that name
    """
    if name not in EXAMPLES:
        raise KeyError(
            f"Example {name} is not defined. Available examples: {list_examples()}"
        )
    return EXAMPLES[name]()
