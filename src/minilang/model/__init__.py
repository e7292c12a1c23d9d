# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token vocabulary and symbol tables of MiniLang."""

from minilang.model.symbols import (
    IdentifierEntry,
    IdentifierTable,
    StringTable,
    SymbolTables,
    SymbolTablesSnapshot,
)
from minilang.model.tokens import (
    DELIMITER_TABLE,
    KEYWORD_TABLE,
    NO_MATCH,
    Delimiter,
    Keyword,
    Symbol,
    Token,
    TokenKind,
    lookup_delimiter,
    lookup_keyword,
    symbol_spelling,
)

__all__ = [
    "DELIMITER_TABLE",
    "KEYWORD_TABLE",
    "NO_MATCH",
    "Delimiter",
    "IdentifierEntry",
    "IdentifierTable",
    "Keyword",
    "StringTable",
    "Symbol",
    "SymbolTables",
    "SymbolTablesSnapshot",
    "Token",
    "TokenKind",
    "lookup_delimiter",
    "lookup_keyword",
    "symbol_spelling",
]
