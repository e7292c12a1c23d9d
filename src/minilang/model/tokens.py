# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token vocabulary of the MiniLang language.

Keywords and delimiters are identified by their index into a static spelling
table.  Index 0 of each table is a sentinel meaning "no match".
"""

import enum
from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """Discriminator of the token tagged union."""

    KEYWORD = "keyword"
    DELIMITER = "delimiter"
    NUMBER = "number"
    STRING_CONST = "string"
    IDENTIFIER = "identifier"
    FINAL = "final"

    # Reserved for postfix (reverse-Polish) code; never produced by the scanner.
    POLIZ_LABEL = "poliz-label"
    POLIZ_ADDRESS = "poliz-address"
    POLIZ_GO = "poliz-go"
    POLIZ_FGO = "poliz-fgo"


class Keyword(enum.Enum):
    """Reserved words. The value is the index into KEYWORD_TABLE."""

    INT = 1
    STRING = 2
    BOOL = 3
    GOTO = 4
    LABEL = 5
    IF = 6
    ELSE = 7
    READ = 8
    WRITE = 9
    WHILE = 10
    AND = 11
    OR = 12
    NOT = 13
    START = 14


class Delimiter(enum.Enum):
    """Punctuation and operators. The value is the index into DELIMITER_TABLE."""

    SEMICOLON = 1
    COLON = 2
    POINT = 3
    COMMA = 4
    ASSIGN = 5
    EQUAL = 6
    LESS = 7
    GREATER = 8
    NEQ = 9
    LEQ = 10
    GEQ = 11
    LEFT_BRACKET = 12
    RIGHT_BRACKET = 13
    BEGIN = 14
    END = 15
    PLUS = 16
    MINUS = 17
    MULTIPLY = 18
    DIVIDE = 19


NO_MATCH = 0

KEYWORD_TABLE: tuple[str, ...] = (
    "",
    "int",
    "string",
    "bool",
    "goto",
    "label",
    "if",
    "else",
    "read",
    "write",
    "while",
    "and",
    "or",
    "not",
    "program",
)

DELIMITER_TABLE: tuple[str, ...] = (
    "",
    ";",
    ":",
    ".",
    ",",
    "=",
    "==",
    "<",
    ">",
    "!=",
    "<=",
    ">=",
    "(",
    ")",
    "{",
    "}",
    "+",
    "-",
    "*",
    "/",
)

Symbol = Keyword | Delimiter | TokenKind


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        kind: The tag of the token.
        payload: Kind-dependent integer: table index for keywords and
            delimiters, the value for numbers, the Identifier Table id for
            identifiers, the String Table index for strings.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    kind: TokenKind
    payload: int = 0
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def matches(self, symbol: Symbol) -> bool:
        """Return True if this token is the given keyword, delimiter or kind."""
        if isinstance(symbol, Keyword):
            return self.kind is TokenKind.KEYWORD and self.payload == symbol.value
        if isinstance(symbol, Delimiter):
            return self.kind is TokenKind.DELIMITER and self.payload == symbol.value
        return self.kind is symbol

    def __str__(self) -> str:
        return f"({self.kind.value},{self.payload});"


def lookup_keyword(spelling: str) -> int:
    """Return the KEYWORD_TABLE index of *spelling*, or NO_MATCH."""
    return _table_lookup(spelling, KEYWORD_TABLE)


def lookup_delimiter(spelling: str) -> int:
    """Return the DELIMITER_TABLE index of *spelling*, or NO_MATCH."""
    return _table_lookup(spelling, DELIMITER_TABLE)


def symbol_spelling(symbol: Symbol) -> str:
    """Return a human-readable spelling of a grammar symbol for diagnostics."""
    if isinstance(symbol, Keyword):
        return KEYWORD_TABLE[symbol.value]
    if isinstance(symbol, Delimiter):
        return DELIMITER_TABLE[symbol.value]
    if symbol is TokenKind.FINAL:
        return "end of input"
    return symbol.value


# ################
# Implementation
# ################


def _table_lookup(spelling: str, table: tuple[str, ...]) -> int:
    if not spelling:
        return NO_MATCH
    for index in range(1, len(table)):
        if table[index] == spelling:
            return index
    return NO_MATCH
