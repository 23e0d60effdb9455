"""
grammartree parsing components.

This package provides input tokenization, the backtracking context-free
parser, the automaton-walk regular parser, parse results and parser
selection.
"""

from grammartree.parsing.context_free import SearchContext, Type2Parser
from grammartree.parsing.factory import Parser, can_be_regular, create_parser
from grammartree.parsing.regular import (
    ACCEPT_STATE,
    AutomatonDescription,
    Type3Parser,
    validate_regular,
)
from grammartree.parsing.result import ParseOutcome, ParseResult
from grammartree.parsing.tokenizer import tokenize

__all__ = [
    "ACCEPT_STATE",
    "AutomatonDescription",
    "ParseOutcome",
    "ParseResult",
    "Parser",
    "SearchContext",
    "Type2Parser",
    "Type3Parser",
    "can_be_regular",
    "create_parser",
    "tokenize",
    "validate_regular",
]
