# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Analysis pipeline for MiniLang programs: source cursor, scanner, and syntax recognizer."""

from minilang.compiler.errors import AnalysisError, ErrorKind
from minilang.compiler.parser import Recognizer
from minilang.compiler.scanner import Scanner, tokenize
from minilang.compiler.session import AnalysisSession, analyze, analyze_file
from minilang.compiler.source import EOF, SourceCursor

__all__ = [
    "EOF",
    "AnalysisError",
    "AnalysisSession",
    "ErrorKind",
    "Recognizer",
    "Scanner",
    "SourceCursor",
    "analyze",
    "analyze_file",
    "tokenize",
]
