"""
JSON persistence for grammars.

The document shape is::

    {
      "type": "TYPE_2",
      "startSymbol": "S",
      "nonTerminals": ["S"],
      "terminals": ["a", "b"],
      "productions": [{"left": "S", "right": "aSb"}, {"left": "S", "right": "ε"}]
    }

Production right sides are stored as the raw text the production was
created from, so reloading tokenizes them exactly as before.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from grammartree.exceptions import ErrorContext, GrammarFormatError
from grammartree.model.grammar import Grammar, GrammarType
from grammartree.model.production import Production

logger = logging.getLogger(__name__)


class ProductionRecord(BaseModel):
    """Persisted production: left symbol and un-tokenized right side."""

    model_config = ConfigDict(frozen=True)

    left: str
    right: str


class GrammarRecord(BaseModel):
    """Persisted grammar document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: GrammarType
    start_symbol: str = Field(alias="startSymbol")
    nonterminals: list[str] = Field(alias="nonTerminals")
    terminals: list[str]
    productions: list[ProductionRecord]

    @classmethod
    def from_grammar(cls, grammar: Grammar) -> "GrammarRecord":
        """
        Build a record from a grammar.

        Symbol lists are sorted so that saving the same grammar twice
        produces the same document.
        """
        return cls(
            type=grammar.grammar_type,
            start_symbol=grammar.start_symbol,
            nonterminals=sorted(grammar.nonterminals),
            terminals=sorted(grammar.terminals),
            productions=[
                ProductionRecord(left=p.left, right=p.right) for p in grammar.productions
            ],
        )

    def to_grammar(self) -> Grammar:
        """
        Build and validate the grammar described by this record.

        Raises:
            GrammarValidationError: If the described grammar is invalid
        """
        return Grammar(
            nonterminals=self.nonterminals,
            terminals=self.terminals,
            productions=[Production(p.left, p.right) for p in self.productions],
            start_symbol=self.start_symbol,
            grammar_type=self.type,
        )


def dumps(grammar: Grammar) -> str:
    """Serialize a grammar to a JSON document."""
    return GrammarRecord.from_grammar(grammar).model_dump_json(by_alias=True, indent=2)


def loads(text: str | bytes) -> Grammar:
    """
    Read a grammar from a JSON document.

    Params:
        text: JSON document

    Returns:
        Validated grammar

    Raises:
        GrammarFormatError: If the document does not have the grammar shape
        GrammarValidationError: If the described grammar is invalid
    """
    try:
        record = GrammarRecord.model_validate_json(text)
    except ValidationError as e:
        raise GrammarFormatError(str(e)) from e
    return record.to_grammar()


def save(grammar: Grammar, path: str | Path) -> None:
    """Write a grammar to ``path`` as JSON."""
    path = Path(path)
    path.write_text(dumps(grammar) + "\n", encoding="utf-8")
    logger.debug("Saved grammar with %d productions to %s", len(grammar.productions), path)


def load(path: str | Path) -> Grammar:
    """
    Read a grammar from a JSON file.

    Raises:
        GrammarFormatError: If the file is not a grammar document
        GrammarValidationError: If the described grammar is invalid
        OSError: If the file cannot be read
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        return loads(text)
    except GrammarFormatError as e:
        raise GrammarFormatError(e.reason, ErrorContext(text=str(path))) from e
