"""
Syntax Checker
==============

This module provides the main interface for checking toy-language
programs. It wires a Lexer to a Parser for one source and collects what
the run produced:

    Source → Lexer (+ symbol table) → Parser → CheckResult

Usage
-----
Command line:
    $ tpcheck program          # reads program.txt

Programmatic:
    >>> from toyparse.frontend import check_source
    >>> result = check_source("x = x + 1;")
    >>> result.statement_count
    1
    >>> len(result.symbol_table.occurrences_of("x"))
    2

Configuration
-------------
CheckerOptions holds the settings. Defaults can be taken from the
environment with CheckerOptions.from_env():

    TOYPARSE_DEFAULT_EXTENSION    extension for extensionless names (".txt")
    TOYPARSE_ALLOW_UNTERMINATED   "1"/"true"/"yes" to accept open literals
    TOYPARSE_SYMBOL_ORDER         "insertion" or "sorted"

Error Handling
--------------
Nothing is caught here. Lexical and syntax errors propagate to the caller
as FrontendError subclasses, and an unreadable file as
SourceUnavailableError. The source stream is closed on every path.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from toyparse.frontend.lexer import Lexer
from toyparse.frontend.parser import Parser
from toyparse.frontend.report import format_match
from toyparse.frontend.symbols import SYMBOL_ORDERS, SymbolTable
from toyparse.frontend.tokens import Token

logger = logging.getLogger(__name__)


DEFAULT_EXTENSION = ".txt"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class CheckerOptions:
    """
    Checker configuration options.

    Attributes:
        default_extension: Appended to source names that have no extension
        allow_unterminated_literals: Accept a literal closed by end of input
            instead of raising UnterminatedLiteralError
        symbol_order: Symbol table report order, "insertion" or "sorted"
        trace: Collect the matched-token trace in the result
    """
    default_extension: str = DEFAULT_EXTENSION
    allow_unterminated_literals: bool = False
    symbol_order: str = "insertion"
    trace: bool = False

    def __post_init__(self):
        if self.default_extension and not self.default_extension.startswith("."):
            self.default_extension = f".{self.default_extension}"
        if self.symbol_order not in SYMBOL_ORDERS:
            raise ValueError(
                f"unknown symbol order {self.symbol_order!r}; expected one of {SYMBOL_ORDERS}"
            )

    @classmethod
    def from_env(cls) -> "CheckerOptions":
        """
        Create CheckerOptions from environment variables.

        Unset variables keep their defaults; an unknown symbol order is
        ignored.
        """
        options = cls()

        if extension := os.environ.get("TOYPARSE_DEFAULT_EXTENSION"):
            options.default_extension = extension if extension.startswith(".") else f".{extension}"

        if allow := os.environ.get("TOYPARSE_ALLOW_UNTERMINATED"):
            options.allow_unterminated_literals = allow.strip().lower() in _TRUTHY

        if order := os.environ.get("TOYPARSE_SYMBOL_ORDER"):
            if order in SYMBOL_ORDERS:
                options.symbol_order = order
            else:
                logger.warning(f"Ignoring unknown TOYPARSE_SYMBOL_ORDER {order!r}")

        return options


@dataclass
class CheckResult:
    """
    Outcome of an accepted program.

    Attributes:
        filename: Name of the checked source
        statement_count: Number of statements accepted
        token_count: Tokens produced by the lexer, END excluded
        symbol_table: Every recorded token occurrence
        trace: Matched-token trace lines (empty unless tracing)
    """
    filename: str
    statement_count: int = 0
    token_count: int = 0
    symbol_table: SymbolTable = field(default_factory=SymbolTable)
    trace: list[str] = field(default_factory=list)


def resolve_source_path(
    name: Union[str, os.PathLike],
    default_extension: str = DEFAULT_EXTENSION,
) -> Path:
    """
    Append the default extension to a source name that has none.

    Example:
        >>> resolve_source_path("program")
        PosixPath('program.txt')
        >>> resolve_source_path("program.toy")
        PosixPath('program.toy')
    """
    path = Path(name)
    if not path.suffix and default_extension:
        path = path.with_name(path.name + default_extension)
    return path


class SyntaxChecker:
    """
    Checks toy-language programs.

    Example:
        checker = SyntaxChecker()
        result = checker.check_file("program")
        print(result.statement_count)

    Attributes:
        options: Checker configuration options
    """

    def __init__(
        self,
        options: Optional[CheckerOptions] = None,
        on_match: Optional[Callable[[Token], None]] = None,
    ):
        """
        Initialize the checker.

        Args:
            options: Checker configuration (uses defaults if None)
            on_match: Called with each token as the parser matches it,
                so callers can stream the trace before a failure
        """
        self.options = options or CheckerOptions()
        self.on_match = on_match

    def check_source(self, source: str, filename: str = "<input>") -> CheckResult:
        """
        Check source text.

        Raises:
            FrontendError: On the first lexical or syntax error
        """
        lexer = Lexer(
            source,
            filename,
            allow_unterminated_literals=self.options.allow_unterminated_literals,
        )
        with lexer:
            return self._run(lexer)

    def check_file(self, filepath: Union[str, os.PathLike]) -> CheckResult:
        """
        Check a source file, applying the default extension if needed.

        Raises:
            SourceUnavailableError: If the file cannot be opened
            FrontendError: On the first lexical or syntax error
        """
        path = resolve_source_path(filepath, self.options.default_extension)
        logger.info(f"Checking {path}")

        lexer = Lexer.open(
            path,
            allow_unterminated_literals=self.options.allow_unterminated_literals,
        )
        with lexer:
            return self._run(lexer)

    def _run(self, lexer: Lexer) -> CheckResult:
        result = CheckResult(filename=lexer.filename, symbol_table=lexer.symbol_table)

        def on_match(token: Token) -> None:
            if self.options.trace:
                result.trace.append(format_match(token))
            if self.on_match is not None:
                self.on_match(token)

        parser = Parser(lexer, on_match=on_match)
        result.statement_count = parser.parse_program()
        result.token_count = lexer.token_count
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def check_source(
    source: str,
    filename: str = "<input>",
    options: Optional[CheckerOptions] = None,
) -> CheckResult:
    """
    Check toy-language source text.

    Raises:
        FrontendError: If the program is rejected
    """
    return SyntaxChecker(options).check_source(source, filename)


def check_file(
    filepath: Union[str, os.PathLike],
    options: Optional[CheckerOptions] = None,
) -> CheckResult:
    """
    Check a toy-language source file.

    Raises:
        SourceUnavailableError: If the file cannot be opened
        FrontendError: If the program is rejected
    """
    return SyntaxChecker(options).check_file(filepath)
