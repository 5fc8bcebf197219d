"""
toyparse Error Hierarchy
========================

This module defines the root of the exception hierarchy for toyparse.
All exceptions inherit from ToyParseError, allowing callers to catch all
toyparse-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
ToyParseError (base)
├── SourceUnavailableError - the input source cannot be opened
└── FrontendError (see toyparse.frontend.errors)
    ├── LexicalError - the scanner cannot produce a token
    │   └── UnterminatedLiteralError - quoted literal never closed
    └── ToySyntaxError - the token stream does not fit the grammar
        └── UnexpectedTokenError - lookahead does not match a production

Design Philosophy
-----------------
Nothing in the front end exits the process. Every error is raised to the
caller, which decides whether to halt, log, or try another source. Only
the command-line tool turns errors into exit codes.

Error messages follow this format:
    filename:line: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ToyParseError(Exception):
    """
    Base exception for all toyparse errors.

        try:
            check_file("program.txt")
        except ToyParseError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Tokens only carry a line number, so the column is optional. A column
    of 0 means "unknown" and is left out of the formatted location.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, 0 if unknown)
    """
    filename: str
    line: int
    column: int = 0

    def __str__(self) -> str:
        """Format as 'filename:line' or 'filename:line:column'."""
        if self.column > 0:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.filename}:{self.line}"


# =============================================================================
# Source Access Exceptions
# =============================================================================

class SourceUnavailableError(ToyParseError):
    """
    The input source cannot be opened.

    Raised before any tokenization happens, so no symbol table or
    partial result exists when this is seen.

    Attributes:
        path: The path that was requested
        reason: The underlying OS error message, if any
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"cannot open source file '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
