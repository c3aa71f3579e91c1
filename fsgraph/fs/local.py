"""Adapter over the host filesystem."""

from __future__ import annotations

import os
import stat
from typing import List

from fsgraph.fs.base import EnumerationError, classify_os_error
from fsgraph.logging import get_logger
from fsgraph.paths import Path, PathLike, as_path

logger = get_logger(__name__)


class LocalFileSystem:
    """Enumerate and classify paths with ``os.scandir``.

    By default symbolic links are reported as non-directories, so a
    traversal never follows them and always terminates. With
    ``follow_symlinks=True`` links to directories are descended into and
    :meth:`canonical` resolves them, letting the builder expand each real
    directory once.

    Args:
        follow_symlinks: Treat symlinks to directories as directories.
    """

    def __init__(self, follow_symlinks: bool = False) -> None:
        self.follow_symlinks = follow_symlinks

    def __repr__(self) -> str:
        return f"LocalFileSystem(follow_symlinks={self.follow_symlinks})"

    def exists(self, path: PathLike) -> bool:
        if self.follow_symlinks:
            return os.path.exists(path)
        return os.path.lexists(path)

    def is_directory(self, path: PathLike) -> bool:
        """Classify ``path``.

        Raises:
            EnumerationError: If the path cannot be stat'ed for any reason
                other than not existing.
        """
        try:
            st = os.stat(path) if self.follow_symlinks else os.lstat(path)
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise EnumerationError(
                as_path(path), classify_os_error(exc), exc.strerror
            ) from exc
        return stat.S_ISDIR(st.st_mode)

    def root_is_directory(self, path: PathLike) -> bool:
        """Classify a traversal root, always following a symlink.

        A root named explicitly by the caller is resolved even when
        ``follow_symlinks`` is off; entries found below it still follow the
        adapter's policy.

        Raises:
            EnumerationError: If the root cannot be stat'ed for any reason
                other than not existing.
        """
        try:
            st = os.stat(path)
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise EnumerationError(
                as_path(path), classify_os_error(exc), exc.strerror
            ) from exc
        return stat.S_ISDIR(st.st_mode)

    def children(self, path: PathLike) -> List[Path]:
        """List immediate children of ``path`` in ``os.scandir`` order.

        The directory handle is closed before returning, whether the listing
        succeeded, failed part-way or was empty.

        Raises:
            EnumerationError: If the directory cannot be opened or read.
        """
        directory = as_path(path)
        entries: List[Path] = []
        try:
            with os.scandir(directory) as iterator:
                for entry in iterator:
                    entries.append(directory / entry.name)
        except OSError as exc:
            raise EnumerationError(
                directory, classify_os_error(exc), exc.strerror
            ) from exc
        logger.debug("Listed %d entries under %s", len(entries), directory)
        return entries

    def canonical(self, path: PathLike) -> Path:
        """Return the identity of ``path`` for repeat detection.

        Without symlink following the path itself is its identity; with it,
        the fully resolved real path is used.
        """
        if not self.follow_symlinks:
            return as_path(path)
        return as_path(os.path.realpath(path))
