"""Failure values and the exception raised for them.

Store operations never branch on the reporting mode while they work.
The walker and the operations return a ``Failure`` value when
something is wrong, and the store turns that value into either a
``MiniFSError`` or a sentinel (``None`` / ``False``) at the very end.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Why an operation failed.

    - NOT_FOUND — a required entry does not exist and may not be created.
    - TYPE_MISMATCH — a file where a directory is needed, or vice versa.
    - EMPTY_CONTENT — the file exists but was never written.
    - INVALID_PATH — the path cannot name a target (e.g. removing the root).
    """

    NOT_FOUND = "not_found"
    TYPE_MISMATCH = "type_mismatch"
    EMPTY_CONTENT = "empty_content"
    INVALID_PATH = "invalid_path"


@dataclass(frozen=True)
class Failure:
    """The error half of an operation's result.

    Attributes:
        kind: What went wrong.
        operation: The store operation that failed (e.g. ``"readFile"``).
        message: Human-readable description naming the offending segment.
        segment: The segment (or joined path) the failure is about.

    """

    kind: ErrorKind
    operation: str
    message: str
    segment: str = ""

    def __str__(self) -> str:
        """Format as ``[MiniFS.operation] message``."""
        return f"[MiniFS.{self.operation}] {self.message}"

    def to_error(self) -> MiniFSError:
        """Build the exception that reports this failure."""
        return MiniFSError(self)


class MiniFSError(Exception):
    """Raise when a store operation fails and errors are preferred."""

    def __init__(self, failure: Failure) -> None:
        """Wrap a failure value."""
        super().__init__(str(failure))
        self.failure = failure

    @property
    def kind(self) -> ErrorKind:
        """Return the kind of failure."""
        return self.failure.kind

    @property
    def operation(self) -> str:
        """Return the operation that failed."""
        return self.failure.operation

    @property
    def segment(self) -> str:
        """Return the offending segment or path."""
        return self.failure.segment
