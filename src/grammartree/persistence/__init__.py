"""
grammartree persistence.

This package provides the JSON grammar document codec and the textual
grammar notation.
"""

from grammartree.persistence.notation import (
    grammar_from_text,
    parse_productions,
    parse_symbols,
)
from grammartree.persistence.records import (
    GrammarRecord,
    ProductionRecord,
    dumps,
    load,
    loads,
    save,
)

__all__ = [
    "GrammarRecord",
    "ProductionRecord",
    "dumps",
    "grammar_from_text",
    "load",
    "loads",
    "parse_productions",
    "parse_symbols",
    "save",
]
