"""
Lexer (Tokenizer)
=================

This module implements the lexer for the toy assignment language. It
pulls characters one at a time from a text stream and hands out one token
per call, recording every classified token in its symbol table as it
goes.

Scanning Rules
--------------
| First character      | Scanned as                         | Kind               |
|----------------------|------------------------------------|--------------------|
| letter or _          | longest run of letters/digits/_    | KEYWORD/IDENTIFIER |
| digit                | longest run of digits              | CONSTANT           |
| " or '               | up to the same closing quote       | LITERAL            |
| + - * / =            | optional trailing = (+=, ==, ...)  | OPERATOR           |
| , ; ( ) { } [ ] .    | single character                   | PUNCTUATION_SYMBOL |
| whitespace           | skipped, newline bumps the line    | (none)             |
| anything else        | single character                   | INVALID            |
| end of input         |                                    | END                |

Line Numbers
------------
The line counter is incremented as soon as a newline is consumed, and a
token is stamped with the counter value when its scan completes. A literal
that spans lines therefore carries the line on which it closes.

Example Usage
-------------
>>> from toyparse.frontend.lexer import Lexer
>>> lexer = Lexer("x += 1;")
>>> for token in lexer.tokenize():
...     print(token)
Token(IDENTIFIER, 'x', line 1)
Token(OPERATOR, '+=', line 1)
Token(CONSTANT, '1', line 1)
Token(PUNCTUATION_SYMBOL, ';', line 1)
Token(END, '', line 1)
"""

import io
import logging
import string
from os import PathLike
from typing import Iterator, Optional, TextIO, Union

from toyparse.errors import SourceLocation, SourceUnavailableError
from toyparse.frontend.errors import LexicalError, UnterminatedLiteralError
from toyparse.frontend.symbols import Occurrence, SymbolTable
from toyparse.frontend.tokens import (
    KEYWORDS,
    OPERATOR_CHARS,
    PUNCTUATION_CHARS,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    Pull-based tokenizer with a per-scan symbol table.

    The lexer owns its character source. When built from a string or
    opened from a path it closes the stream itself; use it as a context
    manager so the stream is released on every exit path:

        with Lexer.open("program.txt") as lexer:
            parser = Parser(lexer)
            parser.parse_program()

    Attributes:
        filename: Name of the source (for error messages)
        symbol_table: Every recorded token occurrence seen so far
        token_count: Number of tokens emitted so far, END excluded
        allow_unterminated_literals: Accept a literal closed by end of input
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    QUOTES = "\"'"

    def __init__(
        self,
        source: Union[str, TextIO],
        filename: str = "<input>",
        allow_unterminated_literals: bool = False,
    ):
        """
        Initialize the lexer.

        Args:
            source: Source text, or an open text stream to read from
            filename: Name of the source (for error messages)
            allow_unterminated_literals: If True, a literal missing its
                closing quote runs to end of input instead of raising
        """
        if isinstance(source, str):
            self._stream: TextIO = io.StringIO(source)
            self._owns_stream = True
        else:
            self._stream = source
            self._owns_stream = False

        self.filename = filename
        self.allow_unterminated_literals = allow_unterminated_literals
        self.symbol_table = SymbolTable()
        self.token_count = 0

        self._line = 1
        self._pending: Optional[str] = None
        self._exhausted = False

    @classmethod
    def open(
        cls,
        path: Union[str, PathLike],
        encoding: str = "utf-8",
        allow_unterminated_literals: bool = False,
    ) -> "Lexer":
        """
        Open a source file and return a lexer that owns it.

        Raises:
            SourceUnavailableError: If the file cannot be opened
        """
        try:
            # Undecodable bytes become U+FFFD and lex as INVALID tokens
            stream = open(path, encoding=encoding, errors="replace")
        except OSError as e:
            raise SourceUnavailableError(str(path), e.strerror) from e

        lexer = cls(
            stream,
            filename=str(path),
            allow_unterminated_literals=allow_unterminated_literals,
        )
        lexer._owns_stream = True
        logger.debug(f"Opened {path} for scanning")
        return lexer

    # =========================================================================
    # Resource Management
    # =========================================================================

    def close(self) -> None:
        """Release the character source if this lexer owns it."""
        if self._owns_stream and not self._stream.closed:
            self._stream.close()

    def __enter__(self) -> "Lexer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Public Interface
    # =========================================================================

    @property
    def line(self) -> int:
        """Current value of the line counter."""
        return self._line

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once the source is exhausted every call returns a fresh END token.

        Raises:
            UnterminatedLiteralError: If a literal is never closed and
                unterminated literals are not allowed
            LexicalError: If a borrowed stream cannot decode its input
        """
        if self._exhausted:
            return Token(TokenKind.END, "", self._line)

        while True:
            char = self._advance()

            if char == "":
                self._exhausted = True
                logger.debug(f"{self.filename}: end of input at line {self._line}")
                return Token(TokenKind.END, "", self._line)

            if char in string.whitespace:
                continue

            if char in self.IDENT_START:
                return self._scan_word(char)

            if char in string.digits:
                return self._scan_constant(char)

            if char in self.QUOTES:
                return self._scan_literal(char)

            if char in OPERATOR_CHARS:
                return self._scan_operator(char)

            if char in PUNCTUATION_CHARS:
                return self._emit(TokenKind.PUNCTUATION_SYMBOL, char)

            # Unknown characters are handed to the parser, not recorded
            logger.debug(f"{self.filename}:{self._line}: invalid character {char!r}")
            self.token_count += 1
            return Token(TokenKind.INVALID, char, self._line)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first END token.

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END:
                return

    def occurrences_of(self, lexeme: str) -> tuple[Occurrence, ...]:
        """Occurrences of a lexeme recorded so far."""
        return self.symbol_table.occurrences_of(lexeme)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _peek(self) -> str:
        """Look at the next character without consuming it ('' at end)."""
        if self._pending is None:
            try:
                self._pending = self._stream.read(1)
            except UnicodeDecodeError as e:
                raise LexicalError(
                    f"cannot decode source: {e.reason}",
                    location=SourceLocation(self.filename, self._line),
                    hint=f"the source is not valid {e.encoding}",
                ) from e
        return self._pending

    def _advance(self) -> str:
        """Consume and return the next character, counting newlines."""
        char = self._peek()
        self._pending = None

        if char == "\n":
            self._line += 1

        return char

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _emit(self, kind: TokenKind, text: str) -> Token:
        """Stamp a token with the current line and record it."""
        token = Token(kind, text, self._line)
        self.symbol_table.record(token)
        self.token_count += 1
        return token

    def _scan_word(self, first: str) -> Token:
        """Scan an identifier or keyword."""
        chars = [first]
        while self._peek() and self._peek() in self.IDENT_CHARS:
            chars.append(self._advance())

        word = "".join(chars)
        if word in KEYWORDS:
            return self._emit(TokenKind.KEYWORD, word)
        return self._emit(TokenKind.IDENTIFIER, word)

    def _scan_constant(self, first: str) -> Token:
        """Scan an unsigned decimal constant."""
        chars = [first]
        while self._peek() and self._peek() in string.digits:
            chars.append(self._advance())

        return self._emit(TokenKind.CONSTANT, "".join(chars))

    def _scan_literal(self, quote: str) -> Token:
        """
        Scan a quoted literal; the quotes are not part of the lexeme.

        Raises:
            UnterminatedLiteralError: If input ends before the closing quote
                and unterminated literals are not allowed
        """
        start_line = self._line
        chars = []

        while True:
            char = self._advance()

            if char == quote:
                break

            if char == "":
                if not self.allow_unterminated_literals:
                    raise UnterminatedLiteralError(
                        quote,
                        SourceLocation(self.filename, start_line),
                    )
                logger.warning(
                    f"{self.filename}:{start_line}: literal not closed before end of input"
                )
                break

            chars.append(char)

        return self._emit(TokenKind.LITERAL, "".join(chars))

    def _scan_operator(self, char: str) -> Token:
        """Scan an operator, folding a trailing '=' into the compound form."""
        if self._peek() == "=":
            return self._emit(TokenKind.OPERATOR, char + self._advance())
        return self._emit(TokenKind.OPERATOR, char)
