"""Node model — the two kinds of entry that make up a tree.

- **File**: a terminal entry with a name and an opaque ``content``
  payload.  ``content is None`` means the file was created but never
  written.
- **Directory**: an interior entry whose ``content`` is a
  ``dict[str, Entry]`` mapping child names to child entries.  The root
  directory is the only one without a name.

Both carry a ``data`` slot for caller-owned metadata.  The store never
looks inside it.

The name of a child is stored twice: as the key in its parent's mapping
and on the entry itself.  The mapping key is authoritative; ``name`` is
there so a returned entry can describe itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Generic, TypeVar

TContent = TypeVar("TContent")


class NodeType(StrEnum):
    """The kind of entry a node represents."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class Node:
    """Common base for files and directories, holding only the auxiliary slot."""

    data: dict[str, Any] = field(default_factory=dict, kw_only=True)  # pyright: ignore[reportUnknownVariableType]


@dataclass
class File(Node, Generic[TContent]):
    """A terminal entry holding an opaque payload."""

    name: str
    content: TContent | None = None

    @property
    def node_type(self) -> NodeType:
        """Return ``NodeType.FILE``."""
        return NodeType.FILE


@dataclass
class Directory(Node, Generic[TContent]):
    """An interior entry mapping child names to entries."""

    content: dict[str, Entry] = field(default_factory=dict)  # pyright: ignore[reportUnknownVariableType]
    name: str | None = None

    @property
    def node_type(self) -> NodeType:
        """Return ``NodeType.DIRECTORY``."""
        return NodeType.DIRECTORY


Entry = File | Directory
"""A tree entry: either a ``File`` or a ``Directory``."""
