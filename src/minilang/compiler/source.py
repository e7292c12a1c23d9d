# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Character source with one character of lookahead and explicit putback."""

from __future__ import annotations

import io
from pathlib import Path
from types import TracebackType
from typing import TextIO

from minilang.compiler.errors import AnalysisError, ErrorKind

# ###############
# Public Interface
# ###############

EOF = ""


class SourceCursor:
    """Reads a text stream one character at a time.

    ``read()`` returns :data:`EOF` at end of input, as many times as it is
    called.  ``putback()`` makes the next ``read()`` return the previous
    character again; at most one putback may be pending.

    Attributes:
        line: 1-based line of the most recently read character.
        column: 1-based column of the most recently read character.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._last = EOF
        self._pending: str | None = None
        self._next_line = 1
        self._next_column = 1
        self.line = 1
        self.column = 0

    @classmethod
    def open(cls, path: Path, encoding: str = "utf-8") -> SourceCursor:
        """Open *path* for reading.

        Raises:
            AnalysisError: With kind IO if the file cannot be opened.
        """
        try:
            stream = open(path, encoding=encoding, newline="")  # noqa: SIM115
        except OSError as exc:
            raise AnalysisError(ErrorKind.IO, f"Cannot open source file {str(path)!r}: {exc.strerror}") from exc
        except LookupError as exc:
            raise AnalysisError(ErrorKind.IO, f"Unknown source encoding {encoding!r}") from exc
        return cls(stream)

    @classmethod
    def from_string(cls, text: str) -> SourceCursor:
        """Wrap an in-memory source text."""
        return cls(io.StringIO(text, newline=""))

    def read(self) -> str:
        """Consume and return the next character, or EOF."""
        if self._pending is not None:
            ch = self._pending
            self._pending = None
        else:
            ch = self._read_stream()
        self._last = ch
        self.line = self._next_line
        self.column = self._next_column
        if ch == "\n":
            self._next_line += 1
            self._next_column = 1
        elif ch != EOF:
            self._next_column += 1
        return ch

    def putback(self) -> None:
        """Push the most recently read character back onto the input."""
        if self.column == 0:
            raise RuntimeError("Nothing has been read yet")
        if self._pending is not None:
            raise RuntimeError("Only one character of putback is supported")
        self._pending = self._last
        self._next_line = self.line
        self._next_column = self.column

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> SourceCursor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _read_stream(self) -> str:
        try:
            return self._stream.read(1)
        except (OSError, UnicodeDecodeError) as exc:
            raise AnalysisError(ErrorKind.IO, f"Cannot read source: {exc}") from exc
