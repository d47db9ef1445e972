"""Tests for path normalization.

Strings are split literally on ``/``; only the empty string is special,
standing for the root.
"""

from minifs.paths import ROOT_PATH, as_segments, format_path


class TestAsSegments:
    """Verify converting paths to segments."""

    def test_simple_string(self) -> None:
        """A plain path splits on slashes."""
        assert as_segments("path/to/file.txt") == ["path", "to", "file.txt"]

    def test_single_name(self) -> None:
        """A bare name is one segment."""
        assert as_segments("file.txt") == ["file.txt"]

    def test_empty_string_is_root(self) -> None:
        """The empty string is zero segments, not one empty segment."""
        assert as_segments("") == []

    def test_root_path_constant(self) -> None:
        """ROOT_PATH should normalize to zero segments."""
        assert as_segments(ROOT_PATH) == []

    def test_double_slash_is_literal(self) -> None:
        """Doubled slashes keep their empty segment."""
        assert as_segments("a//b") == ["a", "", "b"]

    def test_leading_slash_is_literal(self) -> None:
        """A leading slash yields a leading empty segment."""
        assert as_segments("/a") == ["", "a"]

    def test_trailing_slash_is_literal(self) -> None:
        """A trailing slash yields a trailing empty segment."""
        assert as_segments("a/") == ["a", ""]

    def test_sequence_passes_through(self) -> None:
        """Pre-split paths are kept as they are, irregularities included."""
        assert as_segments(["a", "", "b/c"]) == ["a", "", "b/c"]

    def test_sequence_is_copied(self) -> None:
        """The returned list should not be the caller's list."""
        segments = ["a", "b"]
        result = as_segments(segments)
        assert result == segments
        assert result is not segments

    def test_tuple_becomes_list(self) -> None:
        """Any sequence of strings is accepted."""
        assert as_segments(("a", "b")) == ["a", "b"]


class TestFormatPath:
    """Verify joining segments for messages."""

    def test_join(self) -> None:
        """Segments are joined with slashes."""
        assert format_path(["a", "b.txt"]) == "a/b.txt"

    def test_root(self) -> None:
        """The root formats as the empty string."""
        assert format_path([]) == ""
