"""
grammartree string generation.

This package provides breadth-first enumeration of language strings.
"""

from grammartree.generation.generator import SententialForm, StringGenerator

__all__ = ["SententialForm", "StringGenerator"]
