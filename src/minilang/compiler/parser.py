# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent recognizer for MiniLang programs.

The recognizer pulls tokens from a :class:`Scanner` one at a time and
validates them against the program grammar.  It builds no tree; a program is
either accepted or rejected with the first :class:`AnalysisError`.

Expression precedence, loosest to tightest::

    =   or   and   == < > != <= >=   + -   * /   unary not, + and -

Every binary level is left-associative; the relational level accepts at most
one operator.
"""

from minilang.compiler.errors import AnalysisError, ErrorKind
from minilang.compiler.scanner import Scanner
from minilang.model.tokens import Delimiter, Keyword, Symbol, Token, TokenKind, symbol_spelling

# ###############
# Public Interface
# ###############


class Recognizer:
    """Syntax recognizer over a lazily scanned token stream.

    Args:
        scanner: Token source for one analysis session.
        legacy_constants: Reject unsigned numbers and string literals in
            constant positions, so that only sign-prefixed numbers are
            accepted there.
    """

    def __init__(self, scanner: Scanner, legacy_constants: bool = False) -> None:
        self._scanner = scanner
        self._legacy_constants = legacy_constants
        self._token = Token(TokenKind.FINAL)

    def analyze(self) -> None:
        """Consume the whole input and validate it as one program.

        Raises:
            AnalysisError: On the first lexical or syntax error, or when the
                program nests deeper than the interpreter stack allows.
        """
        try:
            self._parse_program()
        except RecursionError:
            raise AnalysisError(
                ErrorKind.UNEXPECTED_TOKEN,
                "Program nested too deeply",
                self._token.line,
                self._token.column,
            ) from None

    def _parse_program(self) -> None:
        """Parse: program { declarations statements } end-of-input"""
        self._advance()
        self._expect(Keyword.START)
        self._expect(Delimiter.BEGIN)
        self._parse_declarations()
        self._parse_statements()
        self._expect(Delimiter.END)
        if not self._check(TokenKind.FINAL):
            raise self._unexpected(TokenKind.FINAL)

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _advance(self) -> Token:
        """Replace the current token with the next one from the scanner.

        Returns the token that was current before the call.
        """
        tok = self._token
        self._token = self._scanner.next_token()
        return tok

    def _check(self, *symbols: Symbol) -> bool:
        """Return True if the current token matches any of the given symbols."""
        return any(self._token.matches(symbol) for symbol in symbols)

    def _expect(self, *symbols: Symbol) -> Token:
        """Consume the current token if it matches any of the given symbols.

        Raises AnalysisError (UNEXPECTED_TOKEN) if it does not.
        """
        if not self._check(*symbols):
            raise self._unexpected(*symbols)
        return self._advance()

    def _unexpected(self, *symbols: Symbol) -> AnalysisError:
        expected = ", ".join(repr(symbol_spelling(symbol)) for symbol in symbols)
        return AnalysisError(
            ErrorKind.UNEXPECTED_TOKEN,
            f"Expected {expected}, got {self._scanner.spell(self._token)!r}",
            self._token.line,
            self._token.column,
        )

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _parse_declarations(self) -> None:
        """Parse: ( (int|string) item (, item)* ; )*"""
        while self._check(Keyword.INT, Keyword.STRING):
            self._advance()
            self._parse_declaration_item()
            while self._check(Delimiter.COMMA):
                self._advance()
                self._parse_declaration_item()
            self._expect(Delimiter.SEMICOLON)

    def _parse_declaration_item(self) -> None:
        """Parse: identifier [= constant]"""
        self._expect(TokenKind.IDENTIFIER)
        if self._check(Delimiter.ASSIGN):
            self._advance()
            self._parse_constant()

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_statements(self) -> None:
        """Parse statements up to the closing brace of the enclosing block."""
        while not self._check(Delimiter.END, TokenKind.FINAL):
            self._parse_statement()

    def _parse_statement(self) -> None:
        if self._check(Keyword.READ):
            self._advance()
            self._expect(Delimiter.LEFT_BRACKET)
            self._expect(TokenKind.IDENTIFIER)
            self._expect(Delimiter.RIGHT_BRACKET)
            self._expect(Delimiter.SEMICOLON)
        elif self._check(Keyword.WRITE):
            self._advance()
            self._expect(Delimiter.LEFT_BRACKET)
            self._parse_expression()
            while self._check(Delimiter.COMMA):
                self._advance()
                self._parse_expression()
            self._expect(Delimiter.RIGHT_BRACKET)
            self._expect(Delimiter.SEMICOLON)
        elif self._check(Keyword.WHILE):
            self._advance()
            self._parse_condition()
            self._parse_statement()
        elif self._check(Keyword.IF):
            self._advance()
            self._parse_condition()
            self._parse_statement()
            self._expect(Keyword.ELSE)
            self._parse_statement()
        elif self._check(Keyword.LABEL):
            self._advance()
            self._expect(Delimiter.COLON)
        elif self._check(Keyword.GOTO):
            self._advance()
            self._expect(Keyword.LABEL)
            self._expect(Delimiter.SEMICOLON)
        elif self._check(Delimiter.BEGIN):
            self._advance()
            self._parse_statements()
            self._expect(Delimiter.END)
        else:
            self._parse_expression()
            self._expect(Delimiter.SEMICOLON)

    def _parse_condition(self) -> None:
        """Parse: ( expression )"""
        self._expect(Delimiter.LEFT_BRACKET)
        self._parse_expression()
        self._expect(Delimiter.RIGHT_BRACKET)

    # ------------------------------------------------------------------
    # Expressions, loosest binding first
    # ------------------------------------------------------------------

    def _parse_expression(self) -> None:
        self._parse_disjunction()
        while self._check(Delimiter.ASSIGN):
            self._advance()
            self._parse_disjunction()

    def _parse_disjunction(self) -> None:
        self._parse_conjunction()
        while self._check(Keyword.OR):
            self._advance()
            self._parse_conjunction()

    def _parse_conjunction(self) -> None:
        self._parse_comparison()
        while self._check(Keyword.AND):
            self._advance()
            self._parse_comparison()

    def _parse_comparison(self) -> None:
        self._parse_sum()
        if self._check(*_RELATIONAL_OPERATORS):
            self._advance()
            self._parse_sum()

    def _parse_sum(self) -> None:
        self._parse_product()
        while self._check(Delimiter.PLUS, Delimiter.MINUS):
            self._advance()
            self._parse_product()

    def _parse_product(self) -> None:
        self._parse_factor()
        while self._check(Delimiter.MULTIPLY, Delimiter.DIVIDE):
            self._advance()
            self._parse_factor()

    def _parse_factor(self) -> None:
        """Parse: not* (+|-)* ( '(' expression ')' | value )"""
        while self._check(Keyword.NOT):
            self._advance()
        while self._check(Delimiter.PLUS, Delimiter.MINUS):
            self._advance()
        if self._check(Delimiter.LEFT_BRACKET):
            self._advance()
            self._parse_expression()
            self._expect(Delimiter.RIGHT_BRACKET)
        else:
            self._parse_value()

    def _parse_value(self) -> None:
        if self._check(TokenKind.IDENTIFIER):
            self._advance()
        else:
            self._parse_constant()

    def _parse_constant(self) -> None:
        """Parse: [+|-] number | string"""
        if self._check(Delimiter.PLUS, Delimiter.MINUS):
            self._advance()
            if not self._check(TokenKind.NUMBER):
                raise self._invalid_constant("Expected number after sign")
            self._advance()
        elif self._check(TokenKind.NUMBER, TokenKind.STRING_CONST) and not self._legacy_constants:
            self._advance()
        else:
            raise self._invalid_constant("Expected constant")

    def _invalid_constant(self, message: str) -> AnalysisError:
        return AnalysisError(
            ErrorKind.INVALID_CONSTANT,
            f"{message}, got {self._scanner.spell(self._token)!r}",
            self._token.line,
            self._token.column,
        )


# ################
# Implementation
# ################

_RELATIONAL_OPERATORS: tuple[Delimiter, ...] = (
    Delimiter.EQUAL,
    Delimiter.LESS,
    Delimiter.GREATER,
    Delimiter.NEQ,
    Delimiter.LEQ,
    Delimiter.GEQ,
)
