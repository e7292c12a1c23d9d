# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""The single error type raised by the scanner, recognizer and session."""

import enum

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """Classification of an analysis failure."""

    IO = "IOError"
    UNEXPECTED_CHARACTER = "UnexpectedCharacter"
    UNTERMINATED_COMMENT = "UnterminatedComment"
    UNTERMINATED_STRING = "UnterminatedString"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    INVALID_CONSTANT = "InvalidConstant"


class AnalysisError(Exception):
    """Raised on the first lexical, syntactic or I/O failure of an analysis run.

    Attributes:
        kind: What went wrong.
        line: 1-based line number of the error, if known.
        column: 1-based column number of the error, if known.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        if line is not None and column is not None:
            super().__init__(f"Line {line}, column {column}: {message}")
        else:
            super().__init__(message)
        self.kind = kind
        self.message = message
        self.line = line
        self.column = column
