"""Path normalization.

A path is either a ``/``-delimited string or an already-split sequence
of segments.  Both become a list of segments before the walker sees
them; the empty list is the root.

Strings are split literally, with no cleanup::

    "a/b.txt"  → ["a", "b.txt"]
    "a//b"     → ["a", "", "b"]
    "/a"       → ["", "a"]
    ""         → []            (the root)

Empty segments produced by a leading, trailing, or doubled slash are
ordinary (if unusual) names.  Only the empty string as a whole is
special-cased, because the root is zero segments rather than one
empty-named segment.
"""

from collections.abc import Sequence

PathSegments = list[str]
Path = str | Sequence[str]

ROOT_PATH: tuple[str, ...] = ()
"""The root path.  Can be passed to any store operation."""

SEPARATOR = "/"


def as_segments(path: Path) -> PathSegments:
    """Convert a path to a list of segments.

    Args:
        path: A ``/``-delimited string or a sequence of segments.
            Sequences pass through unchanged (copied).

    Returns:
        The segments, empty for the root.

    """
    if isinstance(path, str):
        if path == "":
            return []
        return path.split(SEPARATOR)
    return list(path)


def format_path(segments: Sequence[str]) -> str:
    """Join segments back into a ``/``-delimited string for messages."""
    return SEPARATOR.join(segments)
