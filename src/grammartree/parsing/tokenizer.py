"""
Input tokenization shared by both parsers.

Tokenization is a greedy heuristic, not a lexer: at each position the
longest declared terminal that matches wins, and when none matches a single
character is taken as an implicit token. Terminal sets where a long terminal
is a concatenation of shorter ones can tokenize differently from what a
derivation would need.
"""

from collections.abc import Iterable

from grammartree.model.production import EPSILON


def tokenize(text: str, terminals: Iterable[str]) -> tuple[str, ...]:
    """
    Split an input string into terminal tokens.

    Params:
        text: Input string; the literal empty marker is read as ``""``
        terminals: Declared terminal symbols

    Returns:
        Tuple of tokens covering ``text`` left to right

    Examples:
        tokenize("id+id", {"id", "+"}) -> ("id", "+", "id")
        tokenize("a?b", {"a", "b"}) -> ("a", "?", "b")
    """
    if text == EPSILON:
        return ()

    candidates = sorted((t for t in terminals if t), key=len, reverse=True)
    tokens = []
    position = 0
    while position < len(text):
        for terminal in candidates:
            if text.startswith(terminal, position):
                tokens.append(terminal)
                position += len(terminal)
                break
        else:
            tokens.append(text[position])
            position += 1
    return tuple(tokens)
