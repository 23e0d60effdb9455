"""
Search and generation bounds.

Bounds are immutable values handed to parsers and generators at
construction time. Backtracking bounds scale with grammar size; generation
bounds are fixed.
"""

from typing import TYPE_CHECKING

from attrs import field, frozen
from attrs.validators import ge, instance_of

if TYPE_CHECKING:
    from grammartree.model.grammar import Grammar

MIN_STEPS = 1000
STEPS_PER_PRODUCTION = 100
MIN_DEPTH = 20
DEPTH_PER_PRODUCTION = 2
# Depth window used by the cycle guard key (symbol, position, depth % window)
CYCLE_WINDOW = 10

GENERATOR_MAX_DEPTH = 20
GENERATOR_MAX_FORM_LENGTH = 50
GENERATOR_MAX_ITERATIONS = 10000

_positive = [instance_of(int), ge(1)]


@frozen
class SearchLimits:
    """Step and depth bounds for the backtracking parser."""

    max_steps: int = field(validator=_positive)
    max_depth: int = field(validator=_positive)
    cycle_window: int = field(default=CYCLE_WINDOW, validator=_positive)

    @classmethod
    def for_grammar(cls, grammar: "Grammar") -> "SearchLimits":
        """
        Scale bounds to the number of productions in a grammar.

        Params:
            grammar: Grammar the parser will search

        Returns:
            Limits with ``max(1000, 100·|P|)`` steps and ``max(20, 2·|P|)`` depth
        """
        count = len(grammar.productions)
        return cls(
            max_steps=max(MIN_STEPS, count * STEPS_PER_PRODUCTION),
            max_depth=max(MIN_DEPTH, count * DEPTH_PER_PRODUCTION),
        )


@frozen
class GeneratorLimits:
    """
    Bounds for breadth-first string generation.

    A derived sentential form is only queued while its depth is below
    ``max_depth`` and its length is below ``max_form_length``.
    """

    max_depth: int = field(default=GENERATOR_MAX_DEPTH, validator=_positive)
    max_form_length: int = field(default=GENERATOR_MAX_FORM_LENGTH, validator=_positive)
    max_iterations: int = field(default=GENERATOR_MAX_ITERATIONS, validator=_positive)
