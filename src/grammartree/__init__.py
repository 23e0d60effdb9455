"""
grammartree - membership checking, derivation trees and string generation
for context-free and regular grammars.

Build a Grammar, ask ``create_parser`` for the matching parser and call
``parse``, or enumerate short strings with ``StringGenerator``.
"""

from importlib.metadata import version

from grammartree.config import GeneratorLimits, SearchLimits
from grammartree.exceptions import (
    GrammarError,
    GrammarFormatError,
    GrammarValidationError,
    InternalConsistencyError,
)
from grammartree.generation import StringGenerator
from grammartree.model import (
    EPSILON,
    DerivationTree,
    Grammar,
    GrammarType,
    Production,
)
from grammartree.parsing import (
    ParseOutcome,
    Parser,
    ParseResult,
    Type2Parser,
    Type3Parser,
    can_be_regular,
    create_parser,
)

__version__ = version("grammartree")

__all__ = [
    "__version__",
    "EPSILON",
    "DerivationTree",
    "GeneratorLimits",
    "Grammar",
    "GrammarError",
    "GrammarFormatError",
    "GrammarType",
    "GrammarValidationError",
    "InternalConsistencyError",
    "ParseOutcome",
    "ParseResult",
    "Parser",
    "Production",
    "SearchLimits",
    "StringGenerator",
    "Type2Parser",
    "Type3Parser",
    "can_be_regular",
    "create_parser",
]
