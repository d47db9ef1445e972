"""Tests for the store's logging and audit trail.

The logger records structured entries for every mutation and failure a
store sees.  In sentinel mode it is the only record of why an
operation failed.
"""

import pytest

from minifs.logging import LogEntry, Logger, LogLevel


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_has_fields(self) -> None:
        """A log entry should store level, message, operation, and path."""
        entry = LogEntry(
            level=LogLevel.INFO,
            message="Created file",
            operation="writeFile",
            path="a/b.txt",
        )
        assert entry.level is LogLevel.INFO
        assert entry.message == "Created file"
        assert entry.operation == "writeFile"
        assert entry.path == "a/b.txt"

    def test_entry_str(self) -> None:
        """String representation should include level, operation and message."""
        entry = LogEntry(level=LogLevel.WARNING, message="not_found: gone", operation="remove")
        assert str(entry) == "[WARNING] remove: not_found: gone"


class TestLogger:
    """Verify the logger."""

    def test_log_stores_entries(self) -> None:
        """Logged entries should be retrievable."""
        logger = Logger()
        logger.log(LogLevel.INFO, "Created directory", operation="createDirectory")
        assert len(logger.entries) == 1
        assert logger.entries[0].message == "Created directory"

    def test_log_with_path(self) -> None:
        """Entries should record the path."""
        logger = Logger()
        logger.log(LogLevel.INFO, "Removed entry", operation="remove", path="a/b")
        assert logger.entries[0].path == "a/b"

    def test_entries_are_ordered(self) -> None:
        """Entries should be in chronological order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", operation="test")
        logger.log(LogLevel.INFO, "second", operation="test")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_filter_by_level(self) -> None:
        """Filtering should return only entries at or above the level."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "debug msg", operation="test")
        logger.log(LogLevel.INFO, "info msg", operation="test")
        logger.log(LogLevel.ERROR, "error msg", operation="test")
        warnings_and_above = logger.filter(min_level=LogLevel.WARNING)
        assert len(warnings_and_above) == 1
        assert warnings_and_above[0].level is LogLevel.ERROR

    def test_filter_by_operation(self) -> None:
        """Filtering by operation should return matching entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "write", operation="writeFile")
        logger.log(LogLevel.INFO, "remove", operation="remove")
        writes = logger.filter(operation="writeFile")
        assert len(writes) == 1
        assert writes[0].operation == "writeFile"

    def test_filter_returns_copy(self) -> None:
        """Mutating a filter result should not touch the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", operation="test")
        logger.filter().clear()
        assert len(logger.entries) == 1

    def test_clear(self) -> None:
        """Clearing should remove all entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "test", operation="test")
        logger.clear()
        assert len(logger.entries) == 0


class TestLoggerCapacity:
    """Verify the bounded ring buffer."""

    def test_unbounded_by_default(self) -> None:
        """Without a capacity the log keeps everything."""
        assert Logger().capacity is None

    def test_oldest_entries_dropped(self) -> None:
        """Once full, the oldest entries make room for new ones."""
        logger = Logger(capacity=2)
        for message in ("one", "two", "three"):
            logger.log(LogLevel.INFO, message, operation="test")
        assert [e.message for e in logger.entries] == ["two", "three"]

    def test_capacity_must_be_positive(self) -> None:
        """Zero or negative capacities are rejected."""
        with pytest.raises(ValueError, match="positive"):
            Logger(capacity=0)
