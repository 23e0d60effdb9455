"""
grammartree exception classes.

This package provides all exception types used throughout grammartree for
consistent error handling and reporting.
"""

from grammartree.exceptions.core import (
    ErrorContext,
    GrammarError,
    GrammarFormatError,
    GrammarValidationError,
    InternalConsistencyError,
    ParseError,
    ParseLimitExceededError,
    ParseRejectedError,
)

__all__ = [
    "ErrorContext",
    "GrammarError",
    "GrammarFormatError",
    "GrammarValidationError",
    "InternalConsistencyError",
    "ParseError",
    "ParseLimitExceededError",
    "ParseRejectedError",
]
