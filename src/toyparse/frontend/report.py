"""
Reports
=======

Plain-text renderings of tokens, the matched-token trace, and the symbol
table, in the layout the command-line tool prints.

Symbol table layout:

    Symbol Table:
    Token Name: x
    	Type: Identifier, Value: x, Line Number: 1
    	Type: Identifier, Value: x, Line Number: 2
"""

from typing import Iterable

from toyparse.frontend.symbols import SymbolTable
from toyparse.frontend.tokens import Token, TokenKind


def format_token(token: Token) -> str:
    """Format a token as e.g. "Type: Operator, Value: +=, Line Number: 3"."""
    return (
        f"Type: {token.kind.display_name}, "
        f"Value: {token.text}, Line Number: {token.line}"
    )


def format_match(token: Token) -> str:
    """Format one line of the matched-token trace."""
    return f"Matched: {token.kind.display_name}, Value: {token.text}"


def format_tokens(tokens: Iterable[Token]) -> str:
    """Format a token listing; END is not listed."""
    return "\n".join(
        format_token(token) for token in tokens if token.kind is not TokenKind.END
    )


def format_symbol_table(table: SymbolTable, order: str = "insertion") -> str:
    """
    Render every lexeme with its full occurrence history.

    Args:
        table: The symbol table to render
        order: "insertion" or "sorted"
    """
    lines = ["Symbol Table:"]
    for lexeme, occurrences in table.entries(order):
        lines.append(f"Token Name: {lexeme}")
        for occurrence in occurrences:
            lines.append(
                f"\tType: {occurrence.kind.display_name}, "
                f"Value: {lexeme}, Line Number: {occurrence.line}"
            )
    return "\n".join(lines)
