"""Filesystem adapters.

`FileSystemAdapter` is the capability the traversal builder consumes.
`LocalFileSystem` talks to the host, `MemoryFileSystem` serves a synthetic
tree, and `CancellableFileSystem` wraps either to support stopping a build.
"""

from fsgraph.fs.base import (
    EnumerationCause,
    EnumerationError,
    FileSystemAdapter,
    canonical_identity,
    classify_os_error,
    root_is_directory,
)
from fsgraph.fs.cancel import CancellableFileSystem
from fsgraph.fs.local import LocalFileSystem
from fsgraph.fs.memory import MemoryFileSystem

__all__ = [
    "CancellableFileSystem",
    "EnumerationCause",
    "EnumerationError",
    "FileSystemAdapter",
    "LocalFileSystem",
    "MemoryFileSystem",
    "canonical_identity",
    "classify_os_error",
    "root_is_directory",
]
