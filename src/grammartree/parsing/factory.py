"""
Parser selection by grammar type.

The two strategies form a closed set chosen once per grammar; there is no
parser base class to extend.
"""

from grammartree.exceptions import GrammarValidationError
from grammartree.model.grammar import Grammar, GrammarType
from grammartree.parsing.context_free import Type2Parser
from grammartree.parsing.regular import Type3Parser, validate_regular

Parser = Type2Parser | Type3Parser

_PARSERS: dict[GrammarType, type[Type2Parser] | type[Type3Parser]] = {
    GrammarType.CONTEXT_FREE: Type2Parser,
    GrammarType.REGULAR: Type3Parser,
}


def create_parser(grammar: Grammar | None) -> Parser:
    """
    Create the parser matching a grammar's type.

    Params:
        grammar: Grammar to parse against

    Returns:
        Type3Parser for regular grammars, Type2Parser for context-free ones

    Raises:
        GrammarValidationError: If the grammar is missing, its type is not
            recognized, or a regular grammar has a non-right-linear production
    """
    if grammar is None:
        raise GrammarValidationError("grammar must not be None")

    parser_class = _PARSERS.get(grammar.grammar_type)
    if parser_class is None:
        raise GrammarValidationError(f"unsupported grammar type: {grammar.grammar_type!r}")

    return parser_class(grammar)


def can_be_regular(grammar: Grammar) -> bool:
    """Whether every production of ``grammar`` is right-linear."""
    try:
        validate_regular(grammar)
    except GrammarValidationError:
        return False
    return True
