"""The in-memory store — filesystem operations over a tree of entries.

``MiniFS`` owns one root directory and exposes six operations on it:
``create_directory``, ``read_directory``, ``read_file``, ``write_file``
(plus ``write_file_with_callback``), ``remove``, and ``walk``.

Each operation is written as a private method that returns either its
value or a ``Failure``.  The public method hands that result to
``_settle``, which is the only place the reporting mode matters:

- ``prefer_errors=True`` — the failure is raised as ``MiniFSError``.
- ``prefer_errors=False`` — the failure becomes ``None`` (reads) or
  ``False`` (everything else).

Either way the failure is written to the store's log first.  Successful
mutations are logged too: every directory the walk creates, whether it
was asked for or is an implicit parent, plus each file written and each
entry removed.

Entries returned with ``return_entry=True`` or from ``walk()`` are the
live entries in the tree, not copies.  Do not edit a directory's
``content`` mapping through them; use the store operations instead.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Generic, TypeVar

from minifs.errors import ErrorKind, Failure
from minifs.logging import Logger, LogLevel
from minifs.nodes import Directory, Entry, File, TContent
from minifs.paths import Path, as_segments, format_path
from minifs.walker import WalkMode, iter_entries, walk_to, walk_to_parent

_T = TypeVar("_T")
_D = TypeVar("_D")

DEFAULT_LOG_CAPACITY = 1024
"""How many entries a store's private log keeps before dropping the oldest."""


class MiniFS(Generic[TContent]):
    """An in-memory hierarchical store with filesystem semantics.

    The store starts with an empty, unnamed root directory.  Paths are
    ``/``-delimited strings or sequences of segments, always resolved
    from the root.
    """

    def __init__(self, *, prefer_errors: bool = False, logger: Logger | None = None) -> None:
        """Create a store with an empty root directory.

        Args:
            prefer_errors: Raise ``MiniFSError`` on failure instead of
                returning ``None`` / ``False``.  Fixed for the store's lifetime.
            logger: Log to record operations in.  When omitted, a
                private log bounded to ``DEFAULT_LOG_CAPACITY`` entries
                is created, so a long-lived store does not grow without
                bound.  A caller-supplied log is used as given.

        """
        self._root: Directory[TContent] = Directory()
        self._prefer_errors = prefer_errors
        self._logger = logger if logger is not None else Logger(capacity=DEFAULT_LOG_CAPACITY)

    @property
    def prefer_errors(self) -> bool:
        """Return whether failures raise instead of returning a sentinel."""
        return self._prefer_errors

    @property
    def logger(self) -> Logger:
        """Return the log this store writes to."""
        return self._logger

    # -- Result handling ----------------------------------------------------

    def _settle(self, result: _T | Failure, sentinel: _D, path: str) -> _T | _D:
        """Return *result*, or report the failure it carries."""
        if not isinstance(result, Failure):
            return result
        self._logger.log(
            LogLevel.WARNING,
            f"{result.kind}: {result.message}",
            operation=result.operation,
            path=path,
        )
        if self._prefer_errors:
            raise result.to_error()
        return sentinel

    def _audit(self, message: str, *, operation: str, path: str) -> None:
        """Record a successful mutation at INFO level."""
        self._logger.log(LogLevel.INFO, message, operation=operation, path=path)

    def _audit_created(self, operation: str) -> Callable[[list[str]], None]:
        """Return a walker callback that audits each directory it creates."""

        def record(segments: list[str]) -> None:
            self._audit("Created directory", operation=operation, path=format_path(segments))

        return record

    # -- Directories --------------------------------------------------------

    def create_directory(self, path: Path, *, recursive: bool = True) -> bool:
        """Create a directory, and by default any missing parents.

        Directories created before a failure are kept.  Creating a
        directory that already exists succeeds.

        Args:
            path: Path of the directory.
            recursive: Create missing directories.  When off, the call
                only succeeds if the whole path already exists.

        Returns:
            ``True`` once the path names a directory; ``False`` on
            failure in sentinel mode.

        Raises:
            MiniFSError: On failure when errors are preferred.

        """
        segments = as_segments(path)
        result = self._create_directory(segments, recursive=recursive)
        return self._settle(result, False, format_path(segments))

    def _create_directory(self, segments: list[str], *, recursive: bool) -> bool | Failure:
        """Ensure a directory at *segments*, creating what is missing."""
        operation = "createDirectory"
        entry = walk_to(
            self._root,
            segments,
            mode=WalkMode.CREATE,
            operation=operation,
            recursive=recursive,
            on_create=self._audit_created(operation),
        )
        match entry:
            case Failure():
                return entry
            case File():
                return Failure(
                    ErrorKind.TYPE_MISMATCH,
                    operation,
                    f'"{entry.name}" is a file.',
                    entry.name,
                )
        return True

    def read_directory(
        self, path: Path, *, return_entry: bool = False
    ) -> list[str] | Directory[TContent] | None:
        """List a directory's children.

        Args:
            path: Path of the directory; the root path always succeeds.
            return_entry: Return the ``Directory`` itself instead of
                the names of its children.

        Returns:
            Child names in insertion order, or the directory.  ``None``
            on failure in sentinel mode.

        Raises:
            MiniFSError: If the path is missing or names a file, when
                errors are preferred.

        """
        segments = as_segments(path)
        result = self._read_directory(segments, return_entry=return_entry)
        return self._settle(result, None, format_path(segments))

    def _read_directory(
        self, segments: list[str], *, return_entry: bool
    ) -> list[str] | Directory[TContent] | Failure:
        """Resolve *segments* to a directory and list or return it."""
        operation = "readDirectory"
        entry = walk_to(self._root, segments, mode=WalkMode.READ, operation=operation)
        match entry:
            case Failure():
                return entry
            case File():
                return Failure(
                    ErrorKind.TYPE_MISMATCH,
                    operation,
                    f'"{format_path(segments)}" is a file.',
                    format_path(segments),
                )
            case Directory():
                return entry if return_entry else list(entry.content)

    # -- Files --------------------------------------------------------------

    def read_file(self, path: Path, *, return_entry: bool = False) -> TContent | File[TContent] | None:
        """Read a file's content.

        A file that was created but never written has no content and
        is reported the same way as a missing file.

        Args:
            path: Path of the file.
            return_entry: Return the ``File`` itself instead of its content.

        Returns:
            The content, or the file.  ``None`` on failure in sentinel mode.

        Raises:
            MiniFSError: If the path is missing, names a directory, or
                the file has no content, when errors are preferred.

        """
        segments = as_segments(path)
        result = self._read_file(segments, return_entry=return_entry)
        return self._settle(result, None, format_path(segments))

    def _read_file(
        self, segments: list[str], *, return_entry: bool
    ) -> TContent | File[TContent] | Failure:
        """Resolve *segments* to a written file and return its content or entry."""
        operation = "readFile"
        joined = format_path(segments)
        entry = walk_to(self._root, segments, mode=WalkMode.READ, operation=operation)
        match entry:
            case Failure():
                return entry
            case Directory():
                return Failure(
                    ErrorKind.TYPE_MISMATCH,
                    operation,
                    f'"{joined}" is a directory.',
                    joined,
                )
            case File(content=None):
                return Failure(
                    ErrorKind.EMPTY_CONTENT,
                    operation,
                    f'"{joined}" has no content.',
                    joined,
                )
            case File():
                return entry if return_entry else entry.content

    def write_file(
        self,
        path: Path,
        content: TContent | None = None,
        *,
        recursive: bool = True,
    ) -> bool:
        """Write a file, creating it (and by default its parents) if needed.

        An existing file is overwritten in place, so its ``data`` slot
        survives.  Passing no content creates an empty file, or leaves
        an existing file's content as it was.

        Args:
            path: Path of the file.
            content: The payload to store.
            recursive: Create missing parent directories.

        Returns:
            ``True`` on success; ``False`` on failure in sentinel mode.

        Raises:
            MiniFSError: If a parent is missing (non-recursive), a parent
                is a file, or the path names a directory, when errors are
                preferred.

        """

        def assign(entry: File[TContent]) -> None:
            if content is not None:
                entry.content = content

        segments = as_segments(path)
        result = self._write(segments, assign, operation="writeFile", recursive=recursive)
        return self._settle(result, False, format_path(segments))

    def write_file_with_callback(
        self,
        path: Path,
        mutator: Callable[[File[TContent]], None],
        *,
        recursive: bool = True,
    ) -> bool:
        """Write a file by handing it to *mutator*.

        Lets a caller set ``content`` and ``data`` together in one
        call.  A new file is only attached to the tree after *mutator*
        returns; if it raises, the exception propagates and no file is
        added (parent directories created on the way are kept).

        Args:
            path: Path of the file.
            mutator: Called with the new or existing ``File``.
            recursive: Create missing parent directories.

        Returns:
            ``True`` on success; ``False`` on failure in sentinel mode.

        Raises:
            MiniFSError: As for ``write_file``, when errors are preferred.

        """
        segments = as_segments(path)
        result = self._write(
            segments, mutator, operation="writeFileWithCallback", recursive=recursive
        )
        return self._settle(result, False, format_path(segments))

    def _write(
        self,
        segments: list[str],
        apply: Callable[[File[TContent]], None],
        *,
        operation: str,
        recursive: bool,
    ) -> bool | Failure:
        """Create or update the file at *segments* by calling *apply* on it."""
        joined = format_path(segments)
        if not segments:
            return Failure(
                ErrorKind.TYPE_MISMATCH,
                operation,
                "The root path is a directory.",
            )

        located = walk_to_parent(
            self._root,
            segments,
            mode=WalkMode.CREATE,
            operation=operation,
            recursive=recursive,
            on_create=self._audit_created(operation),
        )
        if isinstance(located, Failure):
            return located
        parent, name = located

        match parent.content.get(name):
            case None:
                created: File[TContent] = File(name)
                apply(created)
                parent.content[name] = created
                self._audit("Created file", operation=operation, path=joined)
            case File() as entry:
                apply(entry)
                self._audit("Updated file", operation=operation, path=joined)
            case Directory():
                return Failure(
                    ErrorKind.TYPE_MISMATCH,
                    operation,
                    f'"{name}" is a directory.',
                    name,
                )
        return True

    # -- Removal ------------------------------------------------------------

    def remove(self, path: Path) -> bool:
        """Remove a file or a whole directory subtree.

        There is no "directory not empty" check: removing a directory
        detaches everything below it.  The root cannot be removed.

        Args:
            path: Path of the entry.

        Returns:
            ``True`` on success; ``False`` on failure in sentinel mode.

        Raises:
            MiniFSError: If the entry is missing, a parent is a file, or
                the path is the root, when errors are preferred.

        """
        segments = as_segments(path)
        result = self._remove(segments)
        return self._settle(result, False, format_path(segments))

    def _remove(self, segments: list[str]) -> bool | Failure:
        """Detach the entry at *segments* from its parent."""
        operation = "remove"
        located = walk_to_parent(self._root, segments, mode=WalkMode.READ, operation=operation)
        if isinstance(located, Failure):
            return located
        parent, name = located

        if name not in parent.content:
            return Failure(
                ErrorKind.NOT_FOUND,
                operation,
                f'"{name}" does not exist.',
                name,
            )
        del parent.content[name]
        self._audit("Removed entry", operation=operation, path=format_path(segments))
        return True

    # -- Queries ------------------------------------------------------------

    def walk(
        self,
        directory: Directory[TContent] | None = None,
        path: Sequence[str] = (),
    ) -> Iterator[tuple[list[str], Entry]]:
        """Yield ``(segments, entry)`` for every entry, depth-first, pre-order.

        Each call starts a fresh traversal.  Do not mutate the store
        while a traversal is in progress.

        Args:
            directory: Where to start; the root by default.
            path: Segments to prefix onto every yielded path.

        """
        return iter_entries(self._root if directory is None else directory, path)

    def exists(self, path: Path) -> bool:
        """Check whether a path names any entry.  Never raises or logs."""
        entry = walk_to(self._root, as_segments(path), mode=WalkMode.READ, operation="exists")
        return not isinstance(entry, Failure)
