"""
Backtracking recursive-descent parser for context-free (Type-2) grammars.

The search derives the start symbol against the tokenized input. Each
nonterminal tries its productions in a fixed priority order, and every
attempt is a generator of alternative matches, so a failure further right
in a production asks earlier siblings for their next derivation before the
production is given up.

Termination on cyclic and left-recursive grammars relies on three guards:

- a visited-state set keyed by ``(symbol, position, depth % window)``
- a step bound counting every call into a symbol
- a depth bound on nested expansions

Exhausting a bound ends the whole parse with ``LIMIT_EXCEEDED``, reported
back through every level as a value rather than an exception.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from grammartree.config import SearchLimits
from grammartree.exceptions import InternalConsistencyError
from grammartree.model.derivation_tree import DerivationTree
from grammartree.model.grammar import Grammar
from grammartree.model.production import EPSILON, Production
from grammartree.parsing.result import ParseResult
from grammartree.parsing.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Match:
    """A derived subtree committed at ``node`` that ends at input position ``end``."""

    node: int
    end: int


@dataclass(frozen=True)
class _LimitBreach:
    bound: int
    reason: str


@dataclass
class SearchContext:
    """
    Transient state of one parse call.

    A fresh context is created by every ``parse`` call, so a parser holds no
    per-call state of its own.
    """

    tokens: tuple[str, ...]
    limits: SearchLimits
    tree: DerivationTree = field(default_factory=DerivationTree)
    visited: set[tuple[str, int, int]] = field(default_factory=set)
    steps: int = 0

    def tick(self, depth: int) -> _LimitBreach | None:
        """Count one step and check both bounds."""
        self.steps += 1
        if self.steps > self.limits.max_steps:
            return _LimitBreach(self.limits.max_steps, "maximum number of steps exceeded")
        if depth > self.limits.max_depth:
            return _LimitBreach(self.limits.max_depth, "maximum depth exceeded")
        return None

    def state_key(self, symbol: str, position: int, depth: int) -> tuple[str, int, int]:
        return symbol, position, depth % self.limits.cycle_window


class Type2Parser:
    """
    Parser for context-free grammars.

    Params:
        grammar: Grammar to parse against
        limits: Search bounds; scaled to the grammar when omitted
    """

    def __init__(self, grammar: Grammar, limits: SearchLimits | None = None):
        self.grammar = grammar
        self.limits = limits or SearchLimits.for_grammar(grammar)
        self._ordered = {
            nonterminal: self._prioritize(grammar.productions_for(nonterminal))
            for nonterminal in grammar.nonterminals
        }
        self._terminal_counts = {
            production: sum(1 for s in production.symbols if grammar.is_terminal(s))
            for production in grammar.productions
        }

    def _prioritize(self, productions: list[Production]) -> tuple[Production, ...]:
        # Empty productions last, terminal-first before nonterminal-first, shorter first.
        # Sorting is stable, so declaration order breaks the remaining ties.
        def priority(production: Production) -> tuple[bool, bool, int]:
            starts_with_terminal = self.grammar.is_terminal(production.first_symbol)
            return production.is_epsilon, not starts_with_terminal, production.length

        return tuple(sorted(productions, key=priority))

    def parse(self, text: str) -> ParseResult:
        """
        Decide whether ``text`` belongs to the grammar's language.

        Params:
            text: Input string

        Returns:
            Accepted result with a derivation tree, rejected result with the
            number of steps explored, or a limit-exceeded result

        Raises:
            InternalConsistencyError: If an accepted tree does not generate
                the tokenized input
        """
        tokens = tokenize(text, self.grammar.terminals)
        context = SearchContext(tokens=tokens, limits=self.limits)
        logger.debug("Parsing %d tokens from %r", len(tokens), text)

        for outcome in self._derive(context, self.grammar.start_symbol, 0, 0, is_root=True):
            if isinstance(outcome, _LimitBreach):
                logger.warning(
                    "Parse of %r stopped after %d steps: %s", text, context.steps, outcome.reason
                )
                return ParseResult.limit_exceeded(
                    tokens, outcome.bound, outcome.reason, context.steps
                )

            context.tree.set_root(outcome.node)
            return self._accept(context)

        logger.debug("Rejected %r after %d steps", text, context.steps)
        return ParseResult.reject(
            tokens,
            f"String rejected - not in the language (steps explored: {context.steps})",
            context.steps,
        )

    def _accept(self, context: SearchContext) -> ParseResult:
        expected = "".join(context.tokens)
        generated = context.tree.generated_string()
        if generated != expected:
            logger.error("Derivation generates %r but input was %r", generated, expected)
            raise InternalConsistencyError(expected, generated)

        logger.debug("Accepted %r after %d steps", expected, context.steps)
        return ParseResult.accept(
            context.tree,
            context.tokens,
            f"String accepted (steps: {context.steps}, string: {generated!r})",
            context.steps,
        )

    def _derive(
        self, context: SearchContext, symbol: str, position: int, depth: int, is_root: bool
    ) -> Iterator[_Match | _LimitBreach]:
        """
        Yield every derivation of ``symbol`` starting at ``position``.

        The visited-state entry is held only while this frame is actively
        searching; it is released while a match is handed to the caller and
        re-taken when the caller asks for the next alternative.
        """
        breach = context.tick(depth)
        if breach is not None:
            yield breach
            return

        tokens = context.tokens
        if self.grammar.is_terminal(symbol):
            if position < len(tokens) and tokens[position] == symbol:
                mark = context.tree.mark()
                yield _Match(context.tree.add_leaf(symbol), position + 1)
                context.tree.rollback(mark)
            return

        key = context.state_key(symbol, position, depth)
        if key in context.visited:
            return

        context.visited.add(key)
        held = True
        try:
            for production in self._ordered.get(symbol, ()):
                for outcome in self._expand(context, symbol, production, position, depth + 1, is_root):
                    if isinstance(outcome, _LimitBreach):
                        yield outcome
                        return
                    context.visited.discard(key)
                    held = False
                    yield outcome
                    context.visited.add(key)
                    held = True
        finally:
            if held:
                context.visited.discard(key)

    def _expand(
        self,
        context: SearchContext,
        symbol: str,
        production: Production,
        position: int,
        depth: int,
        is_root: bool,
    ) -> Iterator[_Match | _LimitBreach]:
        tree = context.tree
        remaining = len(context.tokens) - position

        if production.is_epsilon:
            # At the root the empty production only derives the empty input
            if is_root and remaining > 0:
                return
            mark = tree.mark()
            leaf = tree.add_leaf(EPSILON)
            yield _Match(tree.add_node(symbol, production, (leaf,)), position)
            tree.rollback(mark)
            return

        if self._terminal_counts[production] > remaining:
            return

        for outcome in self._match_sequence(context, production.symbols, 0, position, depth, ()):
            if isinstance(outcome, _LimitBreach):
                yield outcome
                return

            children, end = outcome
            if is_root:
                complete = end == len(context.tokens)
            else:
                complete = end > position or self.grammar.is_nullable(symbol)
            if not complete:
                continue

            mark = tree.mark()
            yield _Match(tree.add_node(symbol, production, children), end)
            tree.rollback(mark)

    def _match_sequence(
        self,
        context: SearchContext,
        symbols: tuple[str, ...],
        index: int,
        position: int,
        depth: int,
        children: tuple[int, ...],
    ) -> Iterator[tuple[tuple[int, ...], int] | _LimitBreach]:
        """Yield ``(children, end)`` for every way ``symbols[index:]`` matches at ``position``."""
        if index == len(symbols):
            yield children, position
            return

        symbol = symbols[index]
        tree = context.tree
        tokens = context.tokens

        if symbol == EPSILON or self.grammar.is_terminal(symbol):
            if symbol == EPSILON:
                end = position
            elif position < len(tokens) and tokens[position] == symbol:
                end = position + 1
            else:
                return
            mark = tree.mark()
            leaf = tree.add_leaf(symbol)
            yield from self._match_sequence(
                context, symbols, index + 1, end, depth, children + (leaf,)
            )
            tree.rollback(mark)
            return

        for outcome in self._derive(context, symbol, position, depth, is_root=False):
            if isinstance(outcome, _LimitBreach):
                yield outcome
                return
            # A nonterminal that derives nothing must be nullable
            if outcome.end == position and not self.grammar.is_nullable(symbol):
                continue
            for rest in self._match_sequence(
                context, symbols, index + 1, outcome.end, depth, children + (outcome.node,)
            ):
                yield rest
                if isinstance(rest, _LimitBreach):
                    return
