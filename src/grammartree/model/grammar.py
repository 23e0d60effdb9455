"""
Grammar definition and construction-time validation.

A Grammar is validated exactly once, when it is created, and is immutable
afterwards. Parsers and generators read it but never modify it.
"""

from enum import Enum

from attrs import Factory, field, frozen

from grammartree.exceptions import ErrorContext, GrammarValidationError
from grammartree.model.production import EPSILON, Production


class GrammarType(Enum):
    """Chomsky class of a grammar, selecting the parsing strategy."""

    CONTEXT_FREE = "TYPE_2"
    REGULAR = "TYPE_3"


def _index_productions(grammar: "Grammar") -> dict[str, tuple[Production, ...]]:
    index: dict[str, list[Production]] = {}
    for production in grammar.productions:
        index.setdefault(production.left, []).append(production)
    return {left: tuple(productions) for left, productions in index.items()}


@frozen
class Grammar:
    """
    A formal grammar G = (N, T, P, S) tagged with its type.

    Production order is significant: it drives tie-breaking in both parsers
    and the order in which the generator explores alternatives.

    Raises:
        GrammarValidationError: If the start symbol is undeclared, a symbol set
            is malformed, a production's left side is not a nonterminal, or a
            production references an undeclared symbol
    """

    nonterminals: frozenset[str] = field(converter=frozenset)
    terminals: frozenset[str] = field(converter=frozenset)
    productions: tuple[Production, ...] = field(converter=tuple)
    start_symbol: str
    grammar_type: GrammarType = GrammarType.CONTEXT_FREE
    _by_left: dict[str, tuple[Production, ...]] = field(
        init=False,
        eq=False,
        repr=False,
        default=Factory(_index_productions, takes_self=True),
    )

    def __attrs_post_init__(self):
        self._validate_symbols()

        if self.start_symbol not in self.nonterminals:
            raise GrammarValidationError(
                "start symbol must be a declared nonterminal",
                ErrorContext(symbol=self.start_symbol),
            )

        for production in self.productions:
            self._validate_production(production)

    def _validate_symbols(self) -> None:
        for symbol in self.nonterminals | self.terminals:
            if not isinstance(symbol, str) or not symbol:
                raise GrammarValidationError(
                    "symbols must be non-empty strings", ErrorContext(symbol=symbol)
                )
            if symbol == EPSILON:
                raise GrammarValidationError(
                    "the empty-string marker cannot be declared as a symbol",
                    ErrorContext(symbol=symbol),
                )

        overlap = self.nonterminals & self.terminals
        if overlap:
            raise GrammarValidationError(
                "terminals and nonterminals must be disjoint",
                ErrorContext(symbol=", ".join(sorted(overlap))),
            )

    def _validate_production(self, production: Production) -> None:
        if production.left not in self.nonterminals:
            raise GrammarValidationError(
                "left side of a production must be a nonterminal",
                ErrorContext(production=str(production), symbol=production.left),
            )

        for symbol in production.symbols:
            if (
                symbol != EPSILON
                and symbol not in self.nonterminals
                and symbol not in self.terminals
            ):
                raise GrammarValidationError(
                    "unknown symbol in production",
                    ErrorContext(production=str(production), symbol=symbol),
                )

    def productions_for(self, nonterminal: str) -> list[Production]:
        """
        Get all productions for a nonterminal, in declaration order.

        Params:
            nonterminal: Left-side symbol to look up

        Returns:
            New list of matching productions (empty for unknown symbols)
        """
        return list(self._by_left.get(nonterminal, ()))

    def is_terminal(self, symbol: str) -> bool:
        return symbol in self.terminals

    def is_nonterminal(self, symbol: str) -> bool:
        return symbol in self.nonterminals

    def is_nullable(self, symbol: str) -> bool:
        """Whether ``symbol`` has a direct empty production."""
        return any(p.is_epsilon for p in self._by_left.get(symbol, ()))

    def __str__(self) -> str:
        lines = [
            f"Grammar {getattr(self.grammar_type, 'value', self.grammar_type)}",
            f"N = {{{', '.join(sorted(self.nonterminals))}}}",
            f"T = {{{', '.join(sorted(self.terminals))}}}",
            f"S = {self.start_symbol}",
            "P:",
        ]
        lines.extend(f"  {production}" for production in self.productions)
        return "\n".join(lines)
