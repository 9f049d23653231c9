"""
Exceptions Module
Error types raised by the suggestion engine and the patch generator.
"""

from typing import Optional


class RefactorError(Exception):
    """Base class for every error raised by the refactoring toolkit."""


class ParseError(RefactorError):
    """Raised when CSS input cannot be parsed into rules."""

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None, kind: Optional[str] = None):
        self.line = line
        self.column = column
        self.kind = kind
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class GenerationError(RefactorError):
    """Raised when computing a suggestion or a diff fails unexpectedly."""
