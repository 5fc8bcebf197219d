"""
Recursive Descent Parser
========================

This module implements an LL(1) recursive descent parser for the toy
assignment language. It pulls tokens from a Lexer on demand, keeping a
single token of lookahead, and either accepts the whole program or raises
on the first mismatch. No syntax tree is built.

Grammar (EBNF)
--------------
program         ::= statement_list END
statement_list  ::= (statement ';')*
statement       ::= assignment
assignment      ::= IDENTIFIER assign_op expression
assign_op       ::= '=' | '+=' | '-=' | '*=' | '/='
expression      ::= term (('+' | '-') term)*
term            ::= factor (('*' | '/') factor)*
factor          ::= IDENTIFIER | CONSTANT | '(' expression ')'

One token of lookahead is enough: every statement must start with an
IDENTIFIER, and each loop or alternative is chosen by the current token
alone.

Example Usage
-------------
>>> from toyparse.frontend.lexer import Lexer
>>> from toyparse.frontend.parser import Parser
>>> parser = Parser(Lexer("x = (a + 1) * 2;"))
>>> parser.parse_program()
1
"""

import logging
from typing import Callable, NoReturn, Optional

from toyparse.frontend.errors import ToySyntaxError, UnexpectedTokenError
from toyparse.frontend.lexer import Lexer
from toyparse.frontend.report import format_match
from toyparse.frontend.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class Parser:
    """
    Recursive descent parser over a Lexer.

    The parser's whole state is the current lookahead token. The first
    token is pulled at construction time.

    Attributes:
        lexer: The token source
        current: The lookahead token
        on_match: Optional callback invoked with every matched token
    """

    def __init__(
        self,
        lexer: Lexer,
        on_match: Optional[Callable[[Token], None]] = None,
    ):
        """
        Initialize the parser and pull the first lookahead token.

        Args:
            lexer: The lexer to pull tokens from
            on_match: Called with each token as it is matched
        """
        self.lexer = lexer
        self.on_match = on_match
        self.current = lexer.next_token()

    def parse_program(self) -> int:
        """
        Parse the entire token stream.

        Returns:
            Number of statements accepted

        Raises:
            UnexpectedTokenError: On the first token that does not fit
            ToySyntaxError: If parentheses nest deeper than the interpreter's
                recursion limit allows
            UnterminatedLiteralError: If the lexer hits an open literal
        """
        try:
            count = self._parse_statement_list()
        except RecursionError:
            raise ToySyntaxError(
                "expression nested too deeply",
                location=self.current.location(self.lexer.filename),
                hint="split the expression into several assignments",
                token=self.current,
            ) from None
        self.match(TokenKind.END)
        logger.info(f"{self.lexer.filename}: parsing successful ({count} statements)")
        return count

    # =========================================================================
    # Token Matching
    # =========================================================================

    def match(self, kind: TokenKind, text: Optional[str] = None) -> Token:
        """
        Consume the lookahead if it has the expected kind (and text).

        Args:
            kind: The expected token kind
            text: The expected lexeme, or None to accept any

        Returns:
            The matched token

        Raises:
            UnexpectedTokenError: If the lookahead does not match
        """
        token = self.current
        if not token.matches(kind, text):
            if text is None:
                expected = kind.display_name
            else:
                expected = f"{kind.display_name} '{text}'"
            self._error(expected)

        logger.debug(format_match(token))
        if self.on_match is not None:
            self.on_match(token)

        # END is never followed by anything, so don't pull past it
        if token.kind is not TokenKind.END:
            self.current = self.lexer.next_token()
        return token

    def _check_operator(self, *texts: str) -> bool:
        return self.current.kind is TokenKind.OPERATOR and self.current.text in texts

    def _error(self, expected: str) -> NoReturn:
        raise UnexpectedTokenError(
            self.current,
            expected,
            self.current.location(self.lexer.filename),
        )

    # =========================================================================
    # Grammar Productions
    # =========================================================================

    def _parse_statement_list(self) -> int:
        count = 0
        while self.current.kind is not TokenKind.END:
            self._parse_statement()
            self.match(TokenKind.PUNCTUATION_SYMBOL, ";")
            count += 1
        return count

    def _parse_statement(self) -> None:
        if self.current.kind is TokenKind.IDENTIFIER:
            self._parse_assignment()
        else:
            self._error("identifier for assignment")

    def _parse_assignment(self) -> None:
        """assignment ::= IDENTIFIER assign_op expression"""
        self.match(TokenKind.IDENTIFIER)

        if self.current.is_assignment_operator():
            self.match(TokenKind.OPERATOR)
        else:
            self._error("assignment operator ('=', '+=', '-=', '*=' or '/=')")

        self._parse_expression()

    def _parse_expression(self) -> None:
        """expression ::= term (('+' | '-') term)*"""
        self._parse_term()
        while self._check_operator("+", "-"):
            self.match(TokenKind.OPERATOR)
            self._parse_term()

    def _parse_term(self) -> None:
        """term ::= factor (('*' | '/') factor)*"""
        self._parse_factor()
        while self._check_operator("*", "/"):
            self.match(TokenKind.OPERATOR)
            self._parse_factor()

    def _parse_factor(self) -> None:
        """factor ::= IDENTIFIER | CONSTANT | '(' expression ')'"""
        if self.current.kind in (TokenKind.IDENTIFIER, TokenKind.CONSTANT):
            self.match(self.current.kind)
        elif self.current.matches(TokenKind.PUNCTUATION_SYMBOL, "("):
            self.match(TokenKind.PUNCTUATION_SYMBOL, "(")
            self._parse_expression()
            self.match(TokenKind.PUNCTUATION_SYMBOL, ")")
        else:
            self._error("identifier, constant, or '(' for factor")
