# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Analysis sessions: one source, one pair of symbol tables, one pass.

A session owns every piece of mutable state used while analyzing a program,
so independent sessions can run side by side.  The source is closed when the
session ends, on success and on error alike.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType

from minilang.compiler.errors import AnalysisError
from minilang.compiler.parser import Recognizer
from minilang.compiler.scanner import Scanner
from minilang.compiler.source import SourceCursor
from minilang.model.symbols import SymbolTables
from minilang.model.tokens import Token
from minilang.workspace.config import AnalyzerConfig

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class AnalysisSession:
    """A single scanning/recognizing run over one source.

    Attributes:
        name: Label of the source used in log messages.
        tables: The identifier and string tables filled in by the scanner.
    """

    def __init__(self, cursor: SourceCursor, *, name: str = "<string>", legacy_constants: bool = False) -> None:
        self.name = name
        self.tables = SymbolTables()
        self._cursor = cursor
        self._scanner = Scanner(cursor, self.tables)
        self._legacy_constants = legacy_constants
        self._closed = False
        logger.debug("Opened analysis session for %s", name)

    @classmethod
    def from_file(cls, path: Path, encoding: str = "utf-8", *, legacy_constants: bool = False) -> AnalysisSession:
        """Open a session over the file at *path*.

        Raises:
            AnalysisError: With kind IO if the file cannot be opened.
        """
        cursor = SourceCursor.open(path, encoding=encoding)
        return cls(cursor, name=str(path), legacy_constants=legacy_constants)

    @classmethod
    def from_string(cls, source: str, *, legacy_constants: bool = False) -> AnalysisSession:
        return cls(SourceCursor.from_string(source), legacy_constants=legacy_constants)

    @property
    def scanner(self) -> Scanner:
        return self._scanner

    def analyze(self) -> None:
        """Validate the whole source as one program.

        Raises:
            AnalysisError: On the first lexical or syntax error.
        """
        try:
            Recognizer(self._scanner, legacy_constants=self._legacy_constants).analyze()
        except AnalysisError as exc:
            logger.debug("Rejected %s: %s (%s)", self.name, exc, exc.kind.value)
            raise
        logger.info("Accepted %s", self.name)

    def tokens(self) -> Iterator[Token]:
        """Yield the remaining tokens of the source, ending with ``FINAL``."""
        return iter(self._scanner)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._cursor.close()
        logger.debug("Closed analysis session for %s", self.name)

    def __enter__(self) -> AnalysisSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def analyze(source: str, *, legacy_constants: bool = False) -> SymbolTables:
    """Analyze MiniLang source text.

    Args:
        source: The full program text.
        legacy_constants: See :class:`~minilang.compiler.parser.Recognizer`.

    Returns:
        The symbol tables filled in while scanning the accepted program.

    Raises:
        AnalysisError: If the program is lexically or syntactically invalid.
    """
    with AnalysisSession.from_string(source, legacy_constants=legacy_constants) as session:
        session.analyze()
        return session.tables


def analyze_file(path: Path, config: AnalyzerConfig | None = None) -> SymbolTables:
    """Analyze the MiniLang program stored at *path*.

    Raises:
        AnalysisError: If the file cannot be opened or the program is invalid.
    """
    config = config or AnalyzerConfig()
    with AnalysisSession.from_file(path, config.encoding, legacy_constants=config.legacy_constants) as session:
        session.analyze()
        return session.tables
