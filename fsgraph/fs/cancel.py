"""Cancellation-aware adapter wrapper."""

from __future__ import annotations

import threading
from typing import Iterable, Optional

from fsgraph.fs.base import (
    EnumerationCause,
    EnumerationError,
    FileSystemAdapter,
    canonical_identity,
    root_is_directory,
)
from fsgraph.paths import Path, PathLike, as_path


class CancellableFileSystem:
    """Wrap an adapter so a traversal can be stopped from another thread.

    Once ``event`` is set, every call to :meth:`children` raises
    :class:`EnumerationError` with cause ``CANCELLED``. The builder treats
    that like any other enumeration failure: the directory is skipped and a
    diagnostic is emitted, so remaining siblings unwind quickly without
    further I/O.

    Args:
        inner: The adapter doing the real work.
        event: Event signalling cancellation; a new one is created if omitted.
    """

    def __init__(
        self, inner: FileSystemAdapter, event: Optional[threading.Event] = None
    ) -> None:
        self.inner = inner
        self.event = event if event is not None else threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self.event.set()

    @property
    def cancelled(self) -> bool:
        return self.event.is_set()

    def exists(self, path: PathLike) -> bool:
        return self.inner.exists(path)

    def is_directory(self, path: PathLike) -> bool:
        return self.inner.is_directory(path)

    def root_is_directory(self, path: PathLike) -> bool:
        return root_is_directory(self.inner, as_path(path))

    def children(self, path: PathLike) -> Iterable[Path]:
        if self.event.is_set():
            raise EnumerationError(as_path(path), EnumerationCause.CANCELLED)
        return self.inner.children(path)

    def canonical(self, path: PathLike) -> Path:
        return canonical_identity(self.inner, as_path(path))
