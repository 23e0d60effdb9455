"""
Grammar data model.

This package provides productions, grammars and derivation trees, the
immutable inputs and the per-parse outputs of the parsers and the generator.
"""

from grammartree.model.derivation_tree import DerivationTree, TreeNode
from grammartree.model.grammar import Grammar, GrammarType
from grammartree.model.production import (
    EPSILON,
    EPSILON_ALIASES,
    Production,
    tokenize_right,
)

__all__ = [
    "EPSILON",
    "EPSILON_ALIASES",
    "DerivationTree",
    "Grammar",
    "GrammarType",
    "Production",
    "TreeNode",
    "tokenize_right",
]
