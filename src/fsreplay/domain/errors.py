from __future__ import annotations

"""
Transcript Error Taxonomy.

Every failure of the lex / replay pipeline is fatal and surfaces as a
subclass of TranscriptError carrying a distinguishable ErrorKind. Failures
to obtain the transcript text itself are reported separately through
TranscriptSourceError.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    MISSING_ARGUMENT = "MissingArgument"
    INVALID_COMMAND = "InvalidCommand"
    INVALID_ROOT = "InvalidRoot"
    INVALID_OPERATION = "InvalidOperation"
    MALFORMED_OUTPUT = "MalformedOutput"


# -----------------------------------------------------------------------------
# PIPELINE ERRORS
# -----------------------------------------------------------------------------

class TranscriptError(Exception):
    """
    Base class for all lexing and replay failures.

    Attributes:
        kind: Category of the failure.
        message: Human readable description without location info.
        line: 1-based transcript line where the failure was detected, if known.
    """
    kind: ErrorKind

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.message = message
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line is None:
            return f"{self.kind.value}: {self.message}"
        return f"{self.kind.value} (line {self.line}): {self.message}"


class MissingArgumentError(TranscriptError):
    kind = ErrorKind.MISSING_ARGUMENT


class InvalidCommandError(TranscriptError):
    kind = ErrorKind.INVALID_COMMAND


class InvalidRootError(TranscriptError):
    kind = ErrorKind.INVALID_ROOT


class InvalidOperationError(TranscriptError):
    kind = ErrorKind.INVALID_OPERATION


class MalformedOutputError(TranscriptError):
    kind = ErrorKind.MALFORMED_OUTPUT


# -----------------------------------------------------------------------------
# SOURCING ERRORS
# -----------------------------------------------------------------------------

class TranscriptSourceError(Exception):
    """Raised when the transcript text cannot be read or downloaded."""
