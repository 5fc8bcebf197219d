"""
Front-End Error Hierarchy
=========================

Exceptions raised by the lexer and the parser. All of them inherit from
FrontendError, which itself inherits from the base ToyParseError.

Exception Hierarchy
-------------------
FrontendError (base for all lexer and parser errors)
├── LexicalError - the scanner cannot produce a token
│   └── UnterminatedLiteralError - missing closing quote
└── ToySyntaxError - the token stream does not fit the grammar
    └── UnexpectedTokenError - lookahead does not match the production

There is no error recovery: the first error ends the scan or the parse,
and no partial result is produced.

Error Message Format
--------------------
    program.txt:3: error: unexpected Operator '='
    hint: expected identifier for assignment
"""

from typing import Optional

from toyparse.errors import ToyParseError, SourceLocation
from toyparse.frontend.tokens import Token, TokenKind


# =============================================================================
# Base Front-End Exception
# =============================================================================

class FrontendError(ToyParseError):
    """
    Base exception for lexer and parser errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

            program.txt:1: error: unexpected Operator '='
            hint: expected identifier for assignment
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(FrontendError):
    """
    The scanner cannot turn the input into a token.

    Invalid characters are not lexical errors: they become INVALID tokens
    and the parser rejects them.
    """
    pass


class UnterminatedLiteralError(LexicalError):
    """
    A quoted literal reaches end of input without its closing quote.

    Example:
        greeting = "hello;
    """

    def __init__(
        self,
        quote: str,
        location: Optional[SourceLocation] = None,
    ):
        self.quote = quote
        super().__init__(
            "unterminated literal",
            location=location,
            hint=f"add closing {quote} to complete the literal",
        )


# =============================================================================
# Syntax Errors (Parser)
# =============================================================================

class ToySyntaxError(FrontendError):
    """
    The token stream does not satisfy the grammar.

    Attributes:
        token: The offending lookahead token, if known
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        token: Optional[Token] = None,
    ):
        self.token = token
        super().__init__(message, location=location, hint=hint)


class UnexpectedTokenError(ToySyntaxError):
    """
    The lookahead token does not match what the production expects.

    Carries the offending token so callers can report its kind, text and
    line without parsing the message.
    """

    def __init__(
        self,
        token: Token,
        expected: str,
        location: Optional[SourceLocation] = None,
    ):
        self.expected = expected

        hint = f"expected {expected}"
        if token.kind is TokenKind.INVALID:
            hint = f"invalid character {token.text!r}; {hint}"

        super().__init__(
            f"unexpected {token.kind.display_name} '{token.text}'",
            location=location,
            hint=hint,
            token=token,
        )

    @property
    def line(self) -> int:
        """Line of the offending token."""
        return self.token.line
