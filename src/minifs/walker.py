"""Path resolution — walking segments through the tree.

Every store operation reduces to one walk from the root directory,
consuming a segment at a time.  The walk has two modes:

- **READ**: a missing segment is a failure and nothing is touched.
- **CREATE**: a missing segment becomes a new empty directory, unless
  ``recursive`` is off, in which case it is a failure as in READ.

In both modes a file can only ever be the *last* segment.  A file in
the middle of a path is a type mismatch, and an existing entry is never
replaced by one of the other kind.

The walker does not raise for path problems.  It returns a ``Failure``
and leaves the decision to raise or not to the store.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from enum import StrEnum

from minifs.errors import ErrorKind, Failure
from minifs.nodes import Directory, Entry, File


class WalkMode(StrEnum):
    """Policy for segments that do not exist yet."""

    READ = "read"
    CREATE = "create"


def walk_to(
    root: Directory,
    segments: Sequence[str],
    *,
    mode: WalkMode,
    operation: str,
    recursive: bool = True,
    on_create: Callable[[list[str]], None] | None = None,
) -> Entry | Failure:
    """Resolve *segments* from *root* and return the terminal entry.

    Args:
        root: The directory to start from.
        segments: Path segments; empty resolves to *root* itself.
        mode: Whether missing segments fail or become directories.
        operation: Operation name recorded on any failure.
        recursive: In CREATE mode, whether missing segments may be created.
        on_create: Called with the full segments of each directory the
            walk creates, in creation order.

    Returns:
        The entry the path names, or a ``Failure``.

    """
    current = root
    last = len(segments) - 1

    for i, segment in enumerate(segments):
        child = current.content.get(segment)

        if child is None:
            if mode is WalkMode.READ:
                return Failure(
                    ErrorKind.NOT_FOUND,
                    operation,
                    f'Path segment "{segment}" does not exist.',
                    segment,
                )
            if not recursive:
                return Failure(
                    ErrorKind.NOT_FOUND,
                    operation,
                    f'Directory "{segment}" does not exist.',
                    segment,
                )
            child = Directory(name=segment)
            current.content[segment] = child
            if on_create is not None:
                on_create(list(segments[: i + 1]))

        match child:
            case File() if i < last:
                return Failure(
                    ErrorKind.TYPE_MISMATCH,
                    operation,
                    f'Intermediate path segment "{segment}" is a file.',
                    segment,
                )
            case File():
                return child
            case Directory():
                current = child

    return current


def walk_to_parent(
    root: Directory,
    segments: Sequence[str],
    *,
    mode: WalkMode,
    operation: str,
    recursive: bool = True,
    on_create: Callable[[list[str]], None] | None = None,
) -> tuple[Directory, str] | Failure:
    """Resolve all but the last segment and return ``(parent, name)``.

    The root has no parent, so an empty path is an ``INVALID_PATH``
    failure.
    """
    if not segments:
        return Failure(
            ErrorKind.INVALID_PATH,
            operation,
            "The root path has no parent entry.",
        )

    *parent_segments, name = segments
    parent = walk_to(
        root,
        parent_segments,
        mode=mode,
        operation=operation,
        recursive=recursive,
        on_create=on_create,
    )
    match parent:
        case Failure():
            return parent
        case File():
            return Failure(
                ErrorKind.TYPE_MISMATCH,
                operation,
                f'Intermediate path segment "{parent.name}" is a file.',
                parent.name,
            )
        case Directory():
            return parent, name


def iter_entries(
    directory: Directory,
    prefix: Sequence[str] = (),
) -> Iterator[tuple[list[str], Entry]]:
    """Yield ``(segments, entry)`` for everything below *directory*, pre-order.

    A directory is yielded before its children.  Children come in the
    order of the directory's mapping.  Uses an explicit stack, so tree
    depth is not bounded by the interpreter's recursion limit.
    """
    stack: list[tuple[list[str], Entry]] = [
        ([*prefix, name], entry) for name, entry in reversed(directory.content.items())
    ]
    while stack:
        entry_path, entry = stack.pop()
        yield entry_path, entry
        if isinstance(entry, Directory):
            stack.extend(
                ([*entry_path, name], child)
                for name, child in reversed(entry.content.items())
            )
