"""
toyparse - Lexer and Recursive Descent Parser for a Toy Language
================================================================

This package scans and validates programs written in a small assignment
language: semicolon-terminated assignments with arithmetic expressions.

Main Components
---------------
- **frontend**: lexer, symbol table, parser and reports
    Converts source text to tokens and accepts or rejects the program

- **cli**: command-line tool (tpcheck)
    Checks one source file and prints the symbol table

Quick Start
-----------
Check a program held in a string:
    >>> from toyparse import check_source
    >>> result = check_source("x = 1 + 2;")
    >>> result.statement_count
    1

Or use the command-line tool:
    $ tpcheck program.txt
"""

__version__ = "1.0.0"
__author__ = "toyparse contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from toyparse.errors import (
    ToyParseError,
    SourceLocation,
    SourceUnavailableError,
)
from toyparse.frontend import (
    CheckerOptions,
    CheckResult,
    SyntaxChecker,
    check_file,
    check_source,
    FrontendError,
    LexicalError,
    UnterminatedLiteralError,
    ToySyntaxError,
    UnexpectedTokenError,
    Lexer,
    Parser,
    SymbolTable,
    Occurrence,
    Token,
    TokenKind,
)

__all__ = [
    "__version__",
    # Errors
    "ToyParseError",
    "SourceLocation",
    "SourceUnavailableError",
    "FrontendError",
    "LexicalError",
    "UnterminatedLiteralError",
    "ToySyntaxError",
    "UnexpectedTokenError",
    # Front end
    "SyntaxChecker",
    "CheckerOptions",
    "CheckResult",
    "check_source",
    "check_file",
    "Lexer",
    "Parser",
    "SymbolTable",
    "Occurrence",
    "Token",
    "TokenKind",
]
