"""
Breadth-first enumeration of short strings of a grammar's language.

Exploration runs over sentential forms, always rewriting the leftmost
nonterminal. Because breadth is measured in derivation steps rather than in
output length, strings come out roughly, not strictly, shortest first.
Derived forms are dropped once they reach the depth or length bound, and
the walk stops after a fixed number of iterations, so fewer strings than
requested can be returned even when the language has more.
"""

import logging
from collections import deque
from collections.abc import Iterator
from itertools import islice

from grammartree.config import GeneratorLimits
from grammartree.model.grammar import Grammar
from grammartree.model.production import EPSILON

logger = logging.getLogger(__name__)

SententialForm = tuple[str, ...]


class StringGenerator:
    """
    Enumerate distinct strings of a grammar's language.

    Params:
        grammar: Grammar to enumerate
        limits: Depth, form length and iteration bounds
    """

    def __init__(self, grammar: Grammar, limits: GeneratorLimits | None = None):
        self.grammar = grammar
        self.limits = limits or GeneratorLimits()

    def generate(self, n: int) -> list[str]:
        """
        Return up to ``n`` distinct strings in breadth-first order.

        Params:
            n: Number of strings wanted

        Returns:
            List of strings; the empty string stands for ε
        """
        if n <= 0:
            return []
        strings = list(islice(self.iter_strings(), n))
        if len(strings) < n:
            logger.debug("Generated %d of %d requested strings", len(strings), n)
        return strings

    def iter_strings(self) -> Iterator[str]:
        """Lazily yield each distinct string the first time it is derived."""
        seen: set[str] = set()
        queue: deque[tuple[SententialForm, int]] = deque([((self.grammar.start_symbol,), 0)])
        iterations = 0

        while queue:
            if iterations >= self.limits.max_iterations:
                logger.warning(
                    "String generation stopped at the iteration cap (%d) with %d strings",
                    self.limits.max_iterations,
                    len(seen),
                )
                return
            iterations += 1
            form, depth = queue.popleft()

            index = self._leftmost_nonterminal(form)
            if index is None:
                string = "".join(s for s in form if s != EPSILON)
                if string not in seen:
                    seen.add(string)
                    yield string
                continue

            for production in self.grammar.productions_for(form[index]):
                replacement = () if production.is_epsilon else production.symbols
                derived = form[:index] + replacement + form[index + 1 :]
                if depth + 1 < self.limits.max_depth and len(derived) < self.limits.max_form_length:
                    queue.append((derived, depth + 1))

        logger.debug("String generation exhausted the language after %d iterations", iterations)

    def _leftmost_nonterminal(self, form: SententialForm) -> int | None:
        for index, symbol in enumerate(form):
            if self.grammar.is_nonterminal(symbol):
                return index
        return None
