# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for MiniLang programs.

A finite-state machine reads characters from a :class:`SourceCursor` and
produces one :class:`Token` per call.  Identifiers and string literals are
interned into the session's symbol tables as they are scanned.
"""

import enum
import string
from collections.abc import Iterator

from minilang.compiler.errors import AnalysisError, ErrorKind
from minilang.compiler.source import EOF, SourceCursor
from minilang.model.symbols import SymbolTables
from minilang.model.tokens import (
    DELIMITER_TABLE,
    KEYWORD_TABLE,
    NO_MATCH,
    Delimiter,
    Token,
    TokenKind,
    lookup_delimiter,
    lookup_keyword,
)

# ###############
# Public Interface
# ###############


class Scanner:
    """Pulls tokens out of a source cursor, one per :meth:`next_token` call.

    The token stream is not restartable: every call advances the cursor.
    Once the end of input is reached, every further call returns ``FINAL``.
    """

    def __init__(self, cursor: SourceCursor, tables: SymbolTables) -> None:
        self._cursor = cursor
        self._tables = tables

    @property
    def tables(self) -> SymbolTables:
        return self._tables

    def next_token(self) -> Token:
        """Run the state machine until exactly one token is recognized.

        Raises:
            AnalysisError: On an unexpected character, an invalid compound
                delimiter, or an unterminated comment or string literal.
        """
        state = _State.START
        buffer: list[str] = []
        number = 0
        line = column = 0

        while True:
            ch = self._cursor.read()

            if state is _State.START:
                line, column = self._cursor.line, self._cursor.column
                if ch == EOF:
                    return Token(TokenKind.FINAL, 0, line, column)
                if ch in _WHITESPACE:
                    continue
                if ch in _LETTERS:
                    buffer.append(ch)
                    state = _State.IN_IDENTIFIER
                elif ch in _DIGITS:
                    number = int(ch)
                    state = _State.IN_NUMBER
                elif ch == "@":
                    state = _State.IN_COMMENT
                elif ch == '"':
                    state = _State.IN_STRING
                elif ch in _COMPOUND_STARTS:
                    buffer.append(ch)
                    state = _State.AFTER_ANGLE_OR_COLON
                elif ch == "!":
                    state = _State.AFTER_BANG
                else:
                    index = lookup_delimiter(ch)
                    if index == NO_MATCH:
                        raise AnalysisError(
                            ErrorKind.UNEXPECTED_CHARACTER,
                            f"Unexpected character {ch!r}",
                            line,
                            column,
                        )
                    return Token(TokenKind.DELIMITER, index, line, column)

            elif state is _State.IN_IDENTIFIER:
                if ch in _LETTERS or ch in _DIGITS:
                    buffer.append(ch)
                else:
                    self._cursor.putback()
                    return self._word_token("".join(buffer), line, column)

            elif state is _State.IN_NUMBER:
                if ch in _DIGITS:
                    number = number * 10 + int(ch)
                else:
                    self._cursor.putback()
                    return Token(TokenKind.NUMBER, number, line, column)

            elif state is _State.IN_COMMENT:
                if ch == "@":
                    state = _State.START
                elif ch == EOF:
                    raise AnalysisError(ErrorKind.UNTERMINATED_COMMENT, "Unterminated comment", line, column)

            elif state is _State.IN_STRING:
                if ch == '"':
                    index = self._tables.strings.intern("".join(buffer))
                    return Token(TokenKind.STRING_CONST, index, line, column)
                if ch == EOF:
                    raise AnalysisError(ErrorKind.UNTERMINATED_STRING, "Unterminated string literal", line, column)
                buffer.append(ch)

            elif state is _State.AFTER_ANGLE_OR_COLON:
                if ch == "=":
                    buffer.append(ch)
                    spelling = "".join(buffer)
                    index = lookup_delimiter(spelling)
                    if index == NO_MATCH:
                        raise AnalysisError(
                            ErrorKind.UNEXPECTED_CHARACTER,
                            f"Unexpected character '=' after {buffer[0]!r}",
                            self._cursor.line,
                            self._cursor.column,
                        )
                    return Token(TokenKind.DELIMITER, index, line, column)
                self._cursor.putback()
                return Token(TokenKind.DELIMITER, lookup_delimiter(buffer[0]), line, column)

            else:  # _State.AFTER_BANG
                if ch == "=":
                    return Token(TokenKind.DELIMITER, Delimiter.NEQ.value, line, column)
                raise AnalysisError(
                    ErrorKind.UNEXPECTED_CHARACTER,
                    "Unexpected character '!' (only '!=' is allowed)",
                    line,
                    column,
                )

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first ``FINAL`` token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.FINAL:
                return

    def spell(self, token: Token) -> str:
        """Return the source spelling of *token* for use in diagnostics."""
        if token.kind is TokenKind.KEYWORD:
            return KEYWORD_TABLE[token.payload]
        if token.kind is TokenKind.DELIMITER:
            return DELIMITER_TABLE[token.payload]
        if token.kind is TokenKind.NUMBER:
            return str(token.payload)
        if token.kind is TokenKind.IDENTIFIER:
            return self._tables.identifiers[token.payload].name
        if token.kind is TokenKind.STRING_CONST:
            return f'"{self._tables.strings[token.payload]}"'
        if token.kind is TokenKind.FINAL:
            return "end of input"
        return token.kind.value

    def _word_token(self, spelling: str, line: int, column: int) -> Token:
        index = lookup_keyword(spelling)
        if index != NO_MATCH:
            return Token(TokenKind.KEYWORD, index, line, column)
        identifier_id = self._tables.identifiers.intern(spelling)
        return Token(TokenKind.IDENTIFIER, identifier_id, line, column)


def tokenize(source: str, tables: SymbolTables | None = None) -> list[Token]:
    """Tokenize MiniLang source text into a list of tokens.

    Args:
        source: The full program text.
        tables: Symbol tables to intern into. A fresh pair is used if omitted.

    Returns:
        A list of Token objects ending with a single ``FINAL`` token.

    Raises:
        AnalysisError: On any lexical error.
    """
    cursor = SourceCursor.from_string(source)
    return list(Scanner(cursor, tables if tables is not None else SymbolTables()))


# ################
# Implementation
# ################


class _State(enum.Enum):
    START = enum.auto()
    IN_IDENTIFIER = enum.auto()
    IN_NUMBER = enum.auto()
    IN_STRING = enum.auto()
    IN_COMMENT = enum.auto()
    AFTER_ANGLE_OR_COLON = enum.auto()
    AFTER_BANG = enum.auto()


_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_WHITESPACE = frozenset(string.whitespace)

# "=" is included so that "==" scans as the EQUAL delimiter.
_COMPOUND_STARTS = frozenset(":<>=")
