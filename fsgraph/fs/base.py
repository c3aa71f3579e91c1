"""Filesystem adapter capability consumed by the traversal builder.

Adapters answer three questions about a path: does it exist, is it a
directory, and what are its immediate children. They are injected into
:func:`fsgraph.algorithms.build.build_from_filesystem`, so tests can swap the
host filesystem for a synthetic tree.
"""

from __future__ import annotations

import errno
from enum import Enum
from typing import Iterable, Optional, Protocol, runtime_checkable

from fsgraph.paths import Path


class EnumerationCause(str, Enum):
    """Why an adapter could not enumerate or classify a path."""

    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    IO = "io"
    CANCELLED = "cancelled"
    OTHER = "other"


class EnumerationError(Exception):
    """An adapter failed for a specific path.

    Attributes:
        path: The path that could not be enumerated or classified.
        cause: Broad failure category.
        detail: Optional human-readable detail, typically the OS message.
    """

    def __init__(
        self,
        path: Path,
        cause: EnumerationCause = EnumerationCause.OTHER,
        detail: Optional[str] = None,
    ) -> None:
        self.path = path
        self.cause = EnumerationCause(cause)
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        message = f"cannot enumerate '{self.path}' ({self.cause.value})"
        if self.detail:
            message += f": {self.detail}"
        return message

    def __reduce__(self):
        return (self.__class__, (self.path, self.cause, self.detail))


_ERRNO_CAUSES = {
    errno.EACCES: EnumerationCause.PERMISSION,
    errno.EPERM: EnumerationCause.PERMISSION,
    errno.ENOENT: EnumerationCause.NOT_FOUND,
    errno.ENOTDIR: EnumerationCause.NOT_FOUND,
}


def classify_os_error(exc: OSError) -> EnumerationCause:
    """Map an ``OSError`` onto an :class:`EnumerationCause`.

    Args:
        exc: The error raised by the operating system.

    Returns:
        The matching cause; anything unrecognised is ``IO``.
    """
    if isinstance(exc, PermissionError):
        return EnumerationCause.PERMISSION
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return EnumerationCause.NOT_FOUND
    return _ERRNO_CAUSES.get(exc.errno, EnumerationCause.IO)


@runtime_checkable
class FileSystemAdapter(Protocol):
    """Protocol for filesystem operations used by the traversal builder."""

    def exists(self, path: Path) -> bool:
        """Return True if ``path`` exists."""
        ...

    def is_directory(self, path: Path) -> bool:
        """Return True if ``path`` is a directory that may be descended into.

        Raises:
            EnumerationError: If ``path`` cannot be classified.
        """
        ...

    def children(self, path: Path) -> Iterable[Path]:
        """Return the immediate children of ``path``.

        Order is whatever the adapter produces; the graph keeps it.

        Raises:
            EnumerationError: If ``path`` cannot be enumerated.
        """
        ...


def root_is_directory(adapter: FileSystemAdapter, path: Path) -> bool:
    """Return True if ``path`` can serve as the root of a traversal.

    Adapters may expose an optional ``root_is_directory(path)`` method when
    the root is classified differently from the entries below it, for
    example to follow a symlink given explicitly as the root. Otherwise
    ``exists`` and ``is_directory`` decide.

    Raises:
        EnumerationError: If ``path`` cannot be classified.
    """
    classify = getattr(adapter, "root_is_directory", None)
    if classify is not None:
        return classify(path)
    return adapter.exists(path) and adapter.is_directory(path)


def canonical_identity(adapter: FileSystemAdapter, path: Path) -> Path:
    """Return the identity used to detect repeated directories.

    Adapters may expose an optional ``canonical(path)`` method, for example to
    resolve symbolic links; otherwise the path is its own identity.
    """
    canonical = getattr(adapter, "canonical", None)
    if canonical is None:
        return path
    return canonical(path)
