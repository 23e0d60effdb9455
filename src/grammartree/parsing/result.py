"""
Parse outcomes.

Parsers report rejection and limit exhaustion as values rather than
exceptions. ``raise_for_outcome`` converts a result into the matching
exception for callers that prefer one.
"""

from enum import Enum

from attrs import frozen

from grammartree.exceptions import ParseLimitExceededError, ParseRejectedError
from grammartree.model.derivation_tree import DerivationTree


class ParseOutcome(Enum):
    """Verdict of a single parse call."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    LIMIT_EXCEEDED = "limit_exceeded"


@frozen
class ParseResult:
    """
    Result of ``parse``.

    Params:
        outcome: Verdict of the parse
        message: Human-readable diagnostic
        tree: Derivation tree, present only when accepted
        tokens: Tokenized input
        steps: Search steps spent (backtracking parser) or tokens consumed
            (automaton walk)
        bound: The exceeded limit value for ``LIMIT_EXCEEDED``
        reason: Which limit was exceeded for ``LIMIT_EXCEEDED``
    """

    outcome: ParseOutcome
    message: str
    tree: DerivationTree | None = None
    tokens: tuple[str, ...] = ()
    steps: int = 0
    bound: int | None = None
    reason: str | None = None

    @classmethod
    def accept(
        cls, tree: DerivationTree, tokens: tuple[str, ...], message: str, steps: int = 0
    ) -> "ParseResult":
        return cls(ParseOutcome.ACCEPTED, message, tree=tree, tokens=tokens, steps=steps)

    @classmethod
    def reject(cls, tokens: tuple[str, ...], message: str, steps: int = 0) -> "ParseResult":
        return cls(ParseOutcome.REJECTED, message, tokens=tokens, steps=steps)

    @classmethod
    def limit_exceeded(
        cls, tokens: tuple[str, ...], bound: int, reason: str, steps: int
    ) -> "ParseResult":
        message = (
            f"Parsing interrupted: {reason} ({bound}). "
            "The grammar may be ambiguous or infinitely recursive."
        )
        return cls(
            ParseOutcome.LIMIT_EXCEEDED,
            message,
            tokens=tokens,
            steps=steps,
            bound=bound,
            reason=reason,
        )

    @property
    def accepted(self) -> bool:
        return self.outcome is ParseOutcome.ACCEPTED

    def raise_for_outcome(self) -> "ParseResult":
        """
        Raise the exception matching a non-accepted outcome.

        Returns:
            This result, unchanged, when accepted

        Raises:
            ParseRejectedError: If the input was rejected
            ParseLimitExceededError: If a search limit was exceeded
        """
        if self.outcome is ParseOutcome.REJECTED:
            raise ParseRejectedError("".join(self.tokens), self.steps)
        if self.outcome is ParseOutcome.LIMIT_EXCEEDED:
            raise ParseLimitExceededError(self.bound, self.reason)
        return self

    def __str__(self) -> str:
        status = {
            ParseOutcome.ACCEPTED: "ACCEPTED",
            ParseOutcome.REJECTED: "REJECTED",
            ParseOutcome.LIMIT_EXCEEDED: "INTERRUPTED",
        }[self.outcome]
        lines = [f"Status: {status}", f"Message: {self.message}"]
        if self.tree is not None:
            lines.append("")
            lines.append(self.tree.render())
            lines.append(f"Generated string: {self.tree.generated_string()!r}")
        return "\n".join(lines)
