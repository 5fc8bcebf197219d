"""
Symbol Table
============

Records every occurrence of every lexeme seen during one scan.

Each distinct lexeme maps to the ordered list of its occurrences (token
kind and line). Entries keep insertion order, which is the order in which
lexemes first appeared in the source, so reports are reproducible. A
lexeme-sorted view is also available.

A table belongs to one Lexer for one scan and is discarded with it.
"""

from dataclasses import dataclass
from typing import Iterator

from toyparse.frontend.tokens import Token, TokenKind


SYMBOL_ORDERS = ("insertion", "sorted")


@dataclass(frozen=True)
class Occurrence:
    """One appearance of a lexeme in the source."""
    kind: TokenKind
    line: int


class SymbolTable:
    """
    Mapping from lexeme text to its occurrence history.

    Only the lexer writes to the table (through record()); everything
    else gets read-only views.

    Usage:
        table = SymbolTable()
        table.record(Token(TokenKind.IDENTIFIER, "x", 1))
        table.occurrences_of("x")  # (Occurrence(IDENTIFIER, 1),)
    """

    def __init__(self) -> None:
        # dict preserves insertion order
        self._entries: dict[str, list[Occurrence]] = {}

    def record(self, token: Token) -> Occurrence:
        """
        Append one occurrence for the token's lexeme.

        Raises:
            ValueError: If the token kind is never recorded (INVALID, END)
        """
        if not token.is_recorded():
            raise ValueError(f"{token.kind.display_name} tokens are not recorded")

        occurrence = Occurrence(token.kind, token.line)
        self._entries.setdefault(token.text, []).append(occurrence)
        return occurrence

    def occurrences_of(self, lexeme: str) -> tuple[Occurrence, ...]:
        """Return the occurrences of a lexeme in source order (empty if unseen)."""
        return tuple(self._entries.get(lexeme, ()))

    def entries(self, order: str = "insertion") -> Iterator[tuple[str, tuple[Occurrence, ...]]]:
        """
        Traverse the table.

        Args:
            order: "insertion" (first appearance) or "sorted" (by lexeme)

        Yields:
            (lexeme, occurrences) pairs
        """
        if order not in SYMBOL_ORDERS:
            raise ValueError(f"unknown symbol order {order!r}; expected one of {SYMBOL_ORDERS}")

        lexemes = list(self._entries)
        if order == "sorted":
            lexemes.sort()

        for lexeme in lexemes:
            yield lexeme, tuple(self._entries[lexeme])

    def total_occurrences(self) -> int:
        """Total number of occurrences across all lexemes."""
        return sum(len(occurrences) for occurrences in self._entries.values())

    def as_dict(self) -> dict[str, tuple[Occurrence, ...]]:
        return {lexeme: occurrences for lexeme, occurrences in self.entries()}

    def __iter__(self) -> Iterator[tuple[str, tuple[Occurrence, ...]]]:
        return self.entries()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, lexeme: object) -> bool:
        return lexeme in self._entries

    def __repr__(self) -> str:
        return f"SymbolTable({len(self)} lexemes, {self.total_occurrences()} occurrences)"
