# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier and string-literal tables filled in by the scanner.

Both tables are append-only and insertion-ordered.  Each analysis session
owns its own pair of tables.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel
from pydantic import Field as _Field

from minilang.model.tokens import Keyword

# ###############
# Public Interface
# ###############


class IdentifierEntry(BaseModel):
    """One distinct identifier spelling.

    Only ``name`` and ``id`` are set by the lexical and syntactic core.  The
    remaining attributes are placeholders for a semantic-analysis phase.
    """

    name: str
    id: int
    declared: bool = False
    assigned: bool = False
    declared_type: Keyword | None = None
    value: int = 0


class SymbolTablesSnapshot(BaseModel):
    """Serializable copy of a session's symbol tables."""

    identifiers: list[IdentifierEntry] = _Field(default_factory=list)
    strings: list[str] = _Field(default_factory=list)


class IdentifierTable:
    """Identifier registry deduplicated by spelling."""

    def __init__(self) -> None:
        self._entries: list[IdentifierEntry] = []

    def intern(self, name: str) -> int:
        """Return the id of *name*, creating a new entry on first sighting."""
        for entry in self._entries:
            if entry.name == name:
                return entry.id
        entry = IdentifierEntry(name=name, id=len(self._entries))
        self._entries.append(entry)
        return entry.id

    def __getitem__(self, identifier_id: int) -> IdentifierEntry:
        return self._entries[identifier_id]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IdentifierEntry]:
        return iter(self._entries)

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]


class StringTable:
    """String-literal registry. Duplicates are stored as separate entries."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    def intern(self, text: str) -> int:
        """Append *text* and return its index."""
        self._entries.append(text)
        return len(self._entries) - 1

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


@dataclass
class SymbolTables:
    """The pair of tables owned by one analysis session."""

    identifiers: IdentifierTable = field(default_factory=IdentifierTable)
    strings: StringTable = field(default_factory=StringTable)

    def snapshot(self) -> SymbolTablesSnapshot:
        """Return a detached, serializable copy of both tables."""
        return SymbolTablesSnapshot(
            identifiers=[entry.model_copy() for entry in self.identifiers],
            strings=list(self.strings),
        )
