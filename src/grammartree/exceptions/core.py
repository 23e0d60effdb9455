"""
Exception classes for grammar construction, persistence and parsing.

This module defines specific exception types for the different error
conditions that can occur while building a grammar, reading one from a file
or textual notation, and checking strings against it.
"""

from dataclasses import dataclass


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where an error occurred, either in a textual grammar source
    (line number and line text) or in the grammar itself (production and
    symbol).

    Params:
        line: Line number within the textual source (1-based)
        text: The original source text that caused the error
        production: Rendered production involved in the error
        symbol: Grammar symbol involved in the error
    """

    line: int | None = None
    text: str | None = None
    production: str | None = None
    symbol: str | None = None

    def format_location(self) -> str:
        """
        Format location information as indented lines.

        Returns:
            Formatted location string, empty when no field is set
        """
        lines = []

        if self.line is not None:
            lines.append(f"  at line {self.line}")

        if self.production:
            lines.append(f"  in production {self.production}")

        if self.symbol is not None:
            lines.append(f"  symbol: {self.symbol!r}")

        if self.text:
            lines.append(f"  text: {self.text}")

        return "\n".join(lines)


def _with_context(message: str, context: ErrorContext | None) -> str:
    if context is None:
        return message
    location_info = context.format_location()
    return f"{message}\n{location_info}" if location_info else message


class GrammarError(Exception):
    """Base exception for all grammartree errors."""

    pass


class GrammarValidationError(GrammarError):
    """Raised when a grammar violates a structural rule at construction time."""

    def __init__(self, reason: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            reason: Why the grammar is invalid
            context: Optional production/symbol information
        """
        self.reason = reason
        self.context = context
        super().__init__(_with_context(f"Invalid grammar: {reason}", context))


class GrammarFormatError(GrammarError):
    """Raised when a persisted or textual grammar cannot be read."""

    def __init__(self, reason: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            reason: Why the source could not be read
            context: Optional line information
        """
        self.reason = reason
        self.context = context
        super().__init__(_with_context(f"Malformed grammar source: {reason}", context))


class ParseError(GrammarError):
    """Base exception for parse outcomes surfaced as exceptions."""

    pass


class ParseRejectedError(ParseError):
    """Raised on request when an exhaustive search found no derivation."""

    def __init__(self, text: str, steps: int):
        """
        Initialize the exception.

        Params:
            text: The rejected input string
            steps: Number of search steps explored before rejecting
        """
        self.text = text
        self.steps = steps
        super().__init__(f"String {text!r} is not in the language (steps explored: {steps})")


class ParseLimitExceededError(ParseError):
    """Raised on request when the search ran out of steps or depth."""

    def __init__(self, bound: int, reason: str):
        """
        Initialize the exception.

        Params:
            bound: The limit value that was exceeded
            reason: Which limit was exceeded
        """
        self.bound = bound
        self.reason = reason
        super().__init__(
            f"Parsing interrupted: {reason} ({bound}). "
            "The grammar may be ambiguous or infinitely recursive."
        )


class InternalConsistencyError(ParseError):
    """Raised when an accepted derivation does not generate the parsed input."""

    def __init__(self, expected: str, generated: str):
        """
        Initialize the exception.

        Params:
            expected: The tokenized input joined back into a string
            generated: The string read from the derivation tree leaves
        """
        self.expected = expected
        self.generated = generated
        super().__init__(
            f"Internal error: generated string {generated!r} does not match input {expected!r}"
        )
