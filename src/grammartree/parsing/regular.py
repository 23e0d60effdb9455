"""
Automaton-walk parser for right-linear (Type-3) grammars.

Nonterminals act as automaton states and the start symbol as the initial
state. A production ``A → a B`` is a transition from ``A`` to ``B`` on
``a``, ``A → a`` is a transition into acceptance that must consume the last
token, and ``A → ε`` marks ``A`` as accepting.

When several productions leave the same state on the same terminal, the
first declared one is taken. This is a deterministic walk, not a
simulation of the nondeterministic automaton, so such grammars may reject
strings that a different choice would accept.
"""

import logging

from attrs import frozen

from grammartree.exceptions import ErrorContext, GrammarValidationError
from grammartree.model.derivation_tree import DerivationTree
from grammartree.model.grammar import Grammar
from grammartree.model.production import EPSILON, Production
from grammartree.parsing.result import ParseResult
from grammartree.parsing.tokenizer import tokenize

logger = logging.getLogger(__name__)

# Pseudo state reached through a terminal-only production
ACCEPT_STATE = "<accept>"


@frozen
class AutomatonDescription:
    """
    Read-only finite automaton view of a regular grammar.

    Informational only; the parser walks productions directly.
    """

    states: tuple[str, ...]
    alphabet: tuple[str, ...]
    initial: str
    accepting: tuple[str, ...]
    transitions: tuple[tuple[str, str, str], ...]

    def render(self) -> str:
        lines = [
            "=== Finite automaton ===",
            f"States: {{{', '.join(self.states)}}}",
            f"Alphabet: {{{', '.join(self.alphabet)}}}",
            f"Initial state: {self.initial}",
            f"Accepting states: {{{', '.join(self.accepting)}}}",
            "Transitions:",
        ]
        lines.extend(
            f"  δ({state}, {terminal}) = {target}"
            for state, terminal, target in self.transitions
        )
        return "\n".join(lines)


def validate_regular(grammar: Grammar) -> None:
    """
    Check that every production is right-linear.

    Allowed shapes are ``A → ε``, ``A → a`` and ``A → a B``.

    Raises:
        GrammarValidationError: Naming the first production of another shape
    """
    for production in grammar.productions:
        if production.is_epsilon:
            continue

        symbols = production.symbols
        if len(symbols) > 2:
            reason = "right side has more than 2 symbols"
        elif not grammar.is_terminal(symbols[0]):
            reason = "right side must start with a terminal"
        elif len(symbols) == 2 and not grammar.is_nonterminal(symbols[1]):
            reason = "second symbol must be a nonterminal"
        else:
            continue

        raise GrammarValidationError(
            f"production is not Type 3 ({reason})",
            ErrorContext(production=str(production)),
        )


class Type3Parser:
    """
    Parser for regular grammars.

    Params:
        grammar: Grammar whose productions are all right-linear

    Raises:
        GrammarValidationError: If a production is not right-linear
    """

    def __init__(self, grammar: Grammar):
        validate_regular(grammar)
        self.grammar = grammar
        self._transitions: dict[tuple[str, str], Production] = {}

        for production in grammar.productions:
            if production.is_epsilon:
                continue
            key = (production.left, production.symbols[0])
            if key in self._transitions:
                logger.warning(
                    "Nondeterministic transition on %s from %s: keeping %s, ignoring %s",
                    key[1],
                    key[0],
                    self._transitions[key],
                    production,
                )
                continue
            self._transitions[key] = production

    def parse(self, text: str) -> ParseResult:
        """
        Walk the automaton over the tokenized input.

        Params:
            text: Input string

        Returns:
            Accepted result with a chain-shaped derivation tree, or rejected
        """
        tokens = tokenize(text, self.grammar.terminals)
        state = self.grammar.start_symbol
        path: list[Production] = []

        for index, token in enumerate(tokens):
            production = self._transitions.get((state, token))
            if production is None:
                return ParseResult.reject(
                    tokens,
                    f"String rejected by regular grammar: no transition from {state} on {token!r}",
                    index,
                )

            path.append(production)
            if len(production.symbols) == 1:
                if index != len(tokens) - 1:
                    return ParseResult.reject(
                        tokens,
                        f"String rejected by regular grammar: input continues after {production}",
                        index + 1,
                    )
                return self._accept(tokens, path, None)

            state = production.symbols[1]

        final = next(
            (p for p in self.grammar.productions_for(state) if p.is_epsilon), None
        )
        if final is None:
            return ParseResult.reject(
                tokens,
                f"String rejected by regular grammar: {state} is not an accepting state",
                len(tokens),
            )
        return self._accept(tokens, path, final)

    def _accept(
        self, tokens: tuple[str, ...], path: list[Production], final: Production | None
    ) -> ParseResult:
        tree = DerivationTree()

        # Build bottom-up so each parent is committed over finished children
        child = None
        if final is not None:
            child = tree.add_node(final.left, final, (tree.add_leaf(EPSILON),))
        for production in reversed(path):
            leaf = tree.add_leaf(production.symbols[0])
            children = (leaf,) if child is None else (leaf, child)
            child = tree.add_node(production.left, production, children)
        tree.set_root(child)

        logger.debug("Accepted %d tokens with regular grammar", len(tokens))
        return ParseResult.accept(
            tree,
            tokens,
            f"String accepted (Type 3 parser - {len(tokens)} symbols processed)",
            len(tokens),
        )

    def automaton(self) -> AutomatonDescription:
        """Build the finite automaton view of the grammar."""
        transitions = []
        for production in self.grammar.productions:
            if production.is_epsilon:
                continue
            target = production.symbols[1] if len(production.symbols) == 2 else ACCEPT_STATE
            transitions.append((production.left, production.symbols[0], target))

        states = sorted(self.grammar.nonterminals)
        accepting = [s for s in states if self.grammar.is_nullable(s)]
        if any(target == ACCEPT_STATE for _, _, target in transitions):
            states.append(ACCEPT_STATE)
            accepting.append(ACCEPT_STATE)

        return AutomatonDescription(
            states=tuple(states),
            alphabet=tuple(sorted(self.grammar.terminals)),
            initial=self.grammar.start_symbol,
            accepting=tuple(accepting),
            transitions=tuple(transitions),
        )

    def describe_automaton(self) -> str:
        return self.automaton().render()
