"""
Textual grammar notation.

Symbol sets are written comma separated (``"a, b, +"``) and productions one
per line, with ``→``, ``->`` or ``:`` between the sides::

    S → aSb
    S -> ε

Arrows take precedence over ``:``, so a line with an arrow may use ``:`` as
a terminal (``S → a : b``).
"""

from grammartree.exceptions import ErrorContext, GrammarFormatError
from grammartree.model.grammar import Grammar, GrammarType
from grammartree.model.production import Production

# Tried in order; the first one present in a line splits it
PRODUCTION_SEPARATORS = ("→", "->", ":")


def parse_symbols(text: str) -> set[str]:
    """
    Parse a comma separated symbol list.

    Examples:
        "E, T, F" -> {"E", "T", "F"}
        "a,, b " -> {"a", "b"}
    """
    return {symbol.strip() for symbol in text.split(",") if symbol.strip()}


def _split_production(line: str) -> list[str]:
    for separator in PRODUCTION_SEPARATORS:
        if separator in line:
            return line.split(separator)
    return [line]


def parse_productions(text: str) -> list[Production]:
    """
    Parse productions written one per line.

    Params:
        text: Production lines; blank lines are skipped

    Returns:
        Productions in line order

    Raises:
        GrammarFormatError: If a line does not have exactly one separator or
            has an empty left side
    """
    productions = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue

        parts = _split_production(line)
        if len(parts) != 2:
            raise GrammarFormatError(
                "expected exactly one of '→', '->' or ':' per production",
                ErrorContext(line=line_number, text=line),
            )

        left, right = parts[0].strip(), parts[1].strip()
        if not left:
            raise GrammarFormatError(
                "production has an empty left side",
                ErrorContext(line=line_number, text=line),
            )
        productions.append(Production(left, right))
    return productions


def grammar_from_text(
    nonterminals: str,
    terminals: str,
    productions: str,
    start_symbol: str,
    grammar_type: GrammarType = GrammarType.CONTEXT_FREE,
) -> Grammar:
    """
    Build a grammar from its textual notation.

    Raises:
        GrammarFormatError: If a production line is malformed
        GrammarValidationError: If the resulting grammar is invalid
    """
    return Grammar(
        nonterminals=parse_symbols(nonterminals),
        terminals=parse_symbols(terminals),
        productions=parse_productions(productions),
        start_symbol=start_symbol.strip(),
        grammar_type=grammar_type,
    )
