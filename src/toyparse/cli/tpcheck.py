"""
tpcheck - Toy Language Checker Command-Line Interface
=====================================================

This module implements the command-line interface for checking toy
language programs. It scans and parses one source file, then prints the
symbol table.

Usage Examples
--------------
Basic check (reads program.txt):
    $ tpcheck program

Print the token stream and the matched-token trace:
    $ tpcheck --tokens --trace program.txt

Symbol table sorted by lexeme:
    $ tpcheck --sorted program.txt

Verbose mode:
    $ tpcheck -v program
"""

import logging
from typing import Optional

import click

from toyparse import __version__
from toyparse.cli.errors import handle_cli_exception
from toyparse.frontend.checker import CheckerOptions, SyntaxChecker, resolve_source_path
from toyparse.frontend.lexer import Lexer
from toyparse.frontend.report import format_match, format_symbol_table, format_token
from toyparse.frontend.tokens import TokenKind

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument("input_file", type=click.Path(dir_okay=False))
@click.option(
    "-e", "--extension",
    default=None,
    help="Extension appended to INPUT_FILE when it has none (default: .txt)",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token stream before parsing",
)
@click.option(
    "--trace",
    is_flag=True,
    help="Print each token as the parser matches it",
)
@click.option(
    "--symbols/--no-symbols",
    default=True,
    help="Print the symbol table after a successful parse. Default: on.",
)
@click.option(
    "--sorted", "sort_symbols",
    is_flag=True,
    help="Order the symbol table by lexeme instead of first appearance",
)
@click.option(
    "--lenient-literals",
    is_flag=True,
    help="Accept a quoted literal that runs to end of input",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="tpcheck")
def main(
    input_file: str,
    extension: Optional[str],
    tokens: bool,
    trace: bool,
    symbols: bool,
    sort_symbols: bool,
    lenient_literals: bool,
    verbose: bool,
) -> None:
    """
    Scan and parse a toy language program.

    INPUT_FILE is the source file; ".txt" is appended when it has no
    extension.

    \b
    Grammar:
        program    := (IDENT assign_op expression ';')* END
        assign_op  := '=' | '+=' | '-=' | '*=' | '/='
        expression := term (('+' | '-') term)*
        term       := factor (('*' | '/') factor)*
        factor     := IDENT | CONSTANT | '(' expression ')'

    \b
    Exit codes:
        0  program accepted
        1  lexical or syntax error
        2  source file cannot be opened
        3  internal error
    """
    setup_logging(verbose)

    try:
        options = CheckerOptions.from_env()
        if extension is not None:
            options.default_extension = extension if extension.startswith(".") else f".{extension}"
        if lenient_literals:
            options.allow_unterminated_literals = True
        if sort_symbols:
            options.symbol_order = "sorted"
        logger.debug(f"Options: {options}")

        path = resolve_source_path(input_file, options.default_extension)

        if tokens:
            # A separate scan, so the parse below gets a fresh symbol table
            with Lexer.open(
                path,
                allow_unterminated_literals=options.allow_unterminated_literals,
            ) as lexer:
                for token in lexer.tokenize():
                    if token.kind is not TokenKind.END:
                        click.echo(format_token(token))

        on_match = None
        if trace:
            def on_match(token):
                click.echo(format_match(token))

        checker = SyntaxChecker(options, on_match=on_match)
        result = checker.check_file(path)

        click.echo("Parsing successful!")

        if verbose:
            click.echo(f"Statements: {result.statement_count}")
            click.echo(f"Tokens: {result.token_count}")

        if symbols:
            click.echo()
            click.echo(format_symbol_table(result.symbol_table, options.symbol_order))

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
