"""
Token Model
===========

Token kinds and the immutable Token record shared by the lexer, the
symbol table and the parser.

Token Categories
----------------
- Keywords: if, else, while, int, float
- Identifiers: letters, digits and underscores, not starting with a digit
- Constants: unsigned decimal digit runs
- Literals: "double" or 'single' quoted text (quotes excluded)
- Operators: + - * / = and the compound forms += -= *= /= ==
- Punctuation symbols: , ; ( ) { } [ ] .
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from toyparse.errors import SourceLocation


class TokenKind(Enum):
    """Closed set of token kinds."""

    KEYWORD = auto()
    SPECIAL_CHARACTER = auto()  # reserved, never produced by the lexer
    IDENTIFIER = auto()
    OPERATOR = auto()
    CONSTANT = auto()
    LITERAL = auto()
    PUNCTUATION_SYMBOL = auto()
    INVALID = auto()
    END = auto()

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. 'Punctuation Symbol'."""
        return self.name.replace("_", " ").title()


# Keywords are plain strings so new ones need no new token kind
KEYWORDS: frozenset[str] = frozenset({"if", "else", "while", "int", "float"})

OPERATOR_CHARS = "+-*/="

PUNCTUATION_CHARS = ",;(){}[]."

ASSIGNMENT_OPERATORS: frozenset[str] = frozenset({"=", "+=", "-=", "*=", "/="})

# Kinds that are entered into the symbol table on emission
RECORDED_KINDS: frozenset[TokenKind] = frozenset({
    TokenKind.KEYWORD,
    TokenKind.IDENTIFIER,
    TokenKind.CONSTANT,
    TokenKind.LITERAL,
    TokenKind.OPERATOR,
    TokenKind.PUNCTUATION_SYMBOL,
})


@dataclass(frozen=True)
class Token:
    """
    A single token.

    Attributes:
        kind: The TokenKind classification
        text: The lexeme (quotes excluded for literals)
        line: Source line at emission time (1-indexed)
    """
    kind: TokenKind
    text: str
    line: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, line {self.line})"

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line)

    def is_recorded(self) -> bool:
        """Return True if tokens of this kind go into the symbol table."""
        return self.kind in RECORDED_KINDS

    def is_assignment_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR and self.text in ASSIGNMENT_OPERATORS

    def matches(self, kind: TokenKind, text: Optional[str] = None) -> bool:
        """Return True if this token has the given kind and, if given, text."""
        return self.kind is kind and (text is None or self.text == text)
