"""Store logging and audit trail.

Every ``MiniFS`` records what it did to its tree in an in-memory log:
directories created, files written, entries removed, and every failed
operation (whether it raised or returned a sentinel).  In sentinel mode
this log is the only place the *kind* of failure survives.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, operation, path).
- **Logger** — an append-only log with filtering and clearing, optionally
  capped as a ring buffer.

Why a ring buffer?
    A store's only real resource is its tree.  A log that grew with every
    write would let a store that overwrites a single file use unbounded
    memory.  Each store therefore keeps its private log in a fixed-size
    ``deque``, so the oldest entries fall off once the log is full, like
    the kernel's ``dmesg`` ring.  Callers that want a full history pass
    in their own unbounded ``Logger``.

Why entries keep the operation and path rather than an exception?
    In sentinel mode the caller only sees ``None`` or ``False``.  Each
    log record keeps the operation name, the path and the failure kind
    as plain strings.  That is enough to explain what went wrong without
    holding on to exception objects or any part of the tree.
"""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        operation: The store operation that generated the event
            (e.g. ``"writeFile"``).
        path: The path the operation was given, joined with ``/``.

    """

    level: LogLevel
    message: str
    operation: str
    path: str = ""

    def __str__(self) -> str:
        """Format as ``[LEVEL] operation: message``."""
        return f"[{self.level.name}] {self.operation}: {self.message}"


class Logger:
    """Append-only log buffer with filtering.

    When *capacity* is set, the oldest entries are dropped once the
    buffer is full.
    """

    def __init__(self, capacity: int | None = None) -> None:
        """Create an empty logger.

        Args:
            capacity: Maximum number of entries to keep, or ``None``
                for an unbounded log.

        Raises:
            ValueError: If *capacity* is not positive.

        """
        if capacity is not None and capacity <= 0:
            msg = f"Logger capacity must be positive, got {capacity}"
            raise ValueError(msg)
        self._entries: deque[LogEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int | None:
        """Return the maximum number of retained entries."""
        return self._entries.maxlen

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        operation: str,
        path: str = "",
    ) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            operation: Store operation that generated the event.
            path: Path the operation acted on.

        """
        self._entries.append(
            LogEntry(level=level, message=message, operation=operation, path=path)
        )

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        operation: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            operation: If set, only return entries from this operation.

        Returns:
            A filtered list of log entries.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if operation is not None:
            result = [e for e in result if e.operation == operation]
        return result

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()
