"""
toyparse Front End
==================

Lexical analysis and recursive descent parsing for the toy assignment
language:

- A lexer that turns a character stream into tokens, recording every
  token occurrence in a symbol table
- An LL(1) recursive descent parser that accepts or rejects a program
- Plain-text reports for tokens and the symbol table

Pipeline
--------
    Source → Lexer (+ SymbolTable) → Parser → accept / raise

The parser pulls tokens from the lexer on demand; there is no separate
tokenization pass.

Usage
-----
>>> from toyparse.frontend import Lexer, Parser
>>> lexer = Lexer("total += price * 2;")
>>> Parser(lexer).parse_program()
1
>>> lexer.occurrences_of("total")
(Occurrence(kind=<TokenKind.IDENTIFIER: 3>, line=1),)

Language Subset
---------------
Supported:
- Assignment statements terminated by ';'
- Assignment operators: =, +=, -=, *=, /=
- Expressions over identifiers, unsigned constants, + - * / and parentheses

Not supported:
- Comments, floating point literals, nested scopes
- Any statement other than assignment
"""

from toyparse.frontend.checker import (
    CheckerOptions,
    CheckResult,
    SyntaxChecker,
    check_file,
    check_source,
    resolve_source_path,
)
from toyparse.frontend.errors import (
    FrontendError,
    LexicalError,
    UnterminatedLiteralError,
    ToySyntaxError,
    UnexpectedTokenError,
)
from toyparse.frontend.lexer import Lexer
from toyparse.frontend.parser import Parser
from toyparse.frontend.report import format_match, format_symbol_table, format_token
from toyparse.frontend.symbols import Occurrence, SymbolTable
from toyparse.frontend.tokens import KEYWORDS, Token, TokenKind

__all__ = [
    # Main API
    "SyntaxChecker",
    "CheckerOptions",
    "CheckResult",
    "check_source",
    "check_file",
    "resolve_source_path",
    # Errors
    "FrontendError",
    "LexicalError",
    "UnterminatedLiteralError",
    "ToySyntaxError",
    "UnexpectedTokenError",
    # Lexer
    "Lexer",
    "Token",
    "TokenKind",
    "KEYWORDS",
    # Symbol table
    "SymbolTable",
    "Occurrence",
    # Parser
    "Parser",
    # Reports
    "format_token",
    "format_match",
    "format_symbol_table",
]
