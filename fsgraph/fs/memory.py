"""Synthetic in-memory filesystem for tests and dry runs."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from fsgraph.fs.base import EnumerationCause, EnumerationError
from fsgraph.paths import Path, PathLike, as_path


class MemoryFileSystem:
    """A directory tree described by a mapping of directory to children.

    Every key of ``tree`` is a directory; every child that is not itself a
    key is a regular file. Failures can be injected per path, either when
    listing a directory (``children_errors``) or when classifying an entry
    (``classify_errors``).

    Example:
        >>> fs = MemoryFileSystem({"/r": ["/r/a", "/r/b"], "/r/a": []})
        >>> fs.is_directory("/r/a"), fs.is_directory("/r/b")
        (True, False)

    Args:
        tree: Mapping of directory path to its children, in listing order.
        children_errors: Mapping of directory path to the cause raised by
            :meth:`children`.
        classify_errors: Mapping of path to the cause raised by
            :meth:`is_directory`.
    """

    def __init__(
        self,
        tree: Optional[Mapping[PathLike, Iterable[PathLike]]] = None,
        children_errors: Optional[Mapping[PathLike, EnumerationCause]] = None,
        classify_errors: Optional[Mapping[PathLike, EnumerationCause]] = None,
    ) -> None:
        self._dirs: Dict[Path, List[Path]] = {}
        self._files: set[Path] = set()
        self._children_errors: Dict[Path, EnumerationCause] = {
            as_path(p): EnumerationCause(c) for p, c in (children_errors or {}).items()
        }
        self._classify_errors: Dict[Path, EnumerationCause] = {
            as_path(p): EnumerationCause(c) for p, c in (classify_errors or {}).items()
        }
        # Calls to children(), in order, for assertions in tests
        self.listed: List[Path] = []

        for directory, entries in (tree or {}).items():
            self.add_directory(directory, entries)

    def add_directory(
        self, directory: PathLike, entries: Iterable[PathLike] = ()
    ) -> None:
        """Register ``directory`` with ``entries`` appended to its children."""
        parent = as_path(directory)
        self._files.discard(parent)
        listing = self._dirs.setdefault(parent, [])
        for entry in entries:
            child = as_path(entry)
            listing.append(child)
            if child not in self._dirs:
                self._files.add(child)

    def fail(
        self, path: PathLike, cause: EnumerationCause = EnumerationCause.PERMISSION
    ) -> None:
        """Make listing ``path`` raise :class:`EnumerationError`."""
        self._children_errors[as_path(path)] = EnumerationCause(cause)

    def exists(self, path: PathLike) -> bool:
        p = as_path(path)
        return p in self._dirs or p in self._files

    def is_directory(self, path: PathLike) -> bool:
        p = as_path(path)
        cause = self._classify_errors.get(p)
        if cause is not None:
            raise EnumerationError(p, cause, "injected classification failure")
        return p in self._dirs

    def children(self, path: PathLike) -> List[Path]:
        p = as_path(path)
        self.listed.append(p)
        cause = self._children_errors.get(p)
        if cause is not None:
            raise EnumerationError(p, cause, "injected enumeration failure")
        if p not in self._dirs:
            raise EnumerationError(p, EnumerationCause.NOT_FOUND, "not a directory")
        return list(self._dirs[p])
