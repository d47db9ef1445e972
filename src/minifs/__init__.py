"""minifs — an in-memory hierarchical store with filesystem semantics.

Re-exports public symbols so callers can write::

    from minifs import MiniFS, ROOT_PATH
"""

from minifs.errors import ErrorKind, Failure, MiniFSError
from minifs.logging import LogEntry, Logger, LogLevel
from minifs.nodes import Directory, Entry, File, Node, NodeType
from minifs.paths import ROOT_PATH, Path, PathSegments, as_segments
from minifs.store import MiniFS
from minifs.walker import WalkMode, iter_entries, walk_to, walk_to_parent

__all__ = [
    "ROOT_PATH",
    "Directory",
    "Entry",
    "ErrorKind",
    "Failure",
    "File",
    "LogEntry",
    "LogLevel",
    "Logger",
    "MiniFS",
    "MiniFSError",
    "Node",
    "NodeType",
    "Path",
    "PathSegments",
    "WalkMode",
    "as_segments",
    "iter_entries",
    "walk_to",
    "walk_to_parent",
]
