"""
Production rules and right-hand side tokenization.

A production's right side is tokenized once, when the production is created.
Text containing whitespace is split on whitespace, which allows
multi-character symbols such as ``id``. Text without whitespace is split into
single characters, so ``"id"`` typed without separators becomes the two
symbols ``i`` and ``d``.
"""

from attrs import Factory, field, frozen

EPSILON = "ε"

# Right-side texts that denote the empty production
EPSILON_ALIASES = frozenset({EPSILON, "epsilon", ""})


def tokenize_right(right: str) -> tuple[str, ...]:
    """
    Split the raw right side of a production into grammar symbols.

    Params:
        right: Right side as typed by the user (e.g. "aSb", "E + T", "ε")

    Returns:
        Tuple of symbols; ``(EPSILON,)`` for the empty production

    Examples:
        "aSb" -> ("a", "S", "b")
        "E + T" -> ("E", "+", "T")
        "epsilon" -> ("ε",)
    """
    if right.strip() in EPSILON_ALIASES:
        return (EPSILON,)

    if any(char.isspace() for char in right):
        return tuple(right.split())

    return tuple(right)


@frozen
class Production:
    """
    A rewrite rule ``left → right``.

    Equality and hashing consider only ``left`` and the raw ``right`` text;
    ``symbols`` is derived from ``right``.
    """

    left: str
    right: str
    symbols: tuple[str, ...] = field(
        init=False,
        eq=False,
        repr=False,
        default=Factory(lambda self: tokenize_right(self.right), takes_self=True),
    )

    @property
    def is_epsilon(self) -> bool:
        """Whether this is the empty production."""
        return self.symbols == (EPSILON,)

    @property
    def length(self) -> int:
        """Number of right-hand symbols, 0 for the empty production."""
        return 0 if self.is_epsilon else len(self.symbols)

    @property
    def first_symbol(self) -> str | None:
        return None if self.is_epsilon else self.symbols[0]

    def __str__(self) -> str:
        return f"{self.left} → {self.right.strip()}"
