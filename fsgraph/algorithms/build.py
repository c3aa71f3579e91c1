"""Populate a PathGraph by walking a directory tree.

The walk is depth-first and visits children in the order the adapter lists
them, so the resulting out-neighbor lists mirror directory listings. Every
listed child yields exactly one ``parent -> child`` edge, added before the
child is classified or descended into; a failure below a child therefore
never removes the edge that leads to it.

Failures are reported, not raised: each :class:`EnumerationError` becomes one
diagnostic line passed to the error sink, the affected subtree is skipped and
the walk continues with the next sibling.

The walk keeps its own stack instead of recursing, so directory depth is not
limited by the interpreter's recursion limit.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Set, Tuple

from fsgraph.config import TRAVERSAL_CONFIG, TraversalConfig
from fsgraph.fs.base import (
    EnumerationError,
    FileSystemAdapter,
    canonical_identity,
    root_is_directory,
)
from fsgraph.fs.local import LocalFileSystem
from fsgraph.graph.store import PathGraph
from fsgraph.logging import get_logger
from fsgraph.paths import Path, PathLike, as_path

logger = get_logger(__name__)

ErrorSink = Callable[[str], None]


def stderr_sink(message: str) -> None:
    """Default error sink: write ``message`` to standard error."""
    print(message, file=sys.stderr)


@dataclass
class BuildStats:
    """Counters describing one call to :func:`build_from_filesystem`.

    Attributes:
        directories: Directories successfully listed.
        edges: Edges added to the graph.
        errors: Diagnostics sent to the error sink.
        skipped: Directories not expanded because of ``max_depth`` or
            because their canonical identity was already expanded.
    """

    directories: int = 0
    edges: int = 0
    errors: int = 0
    skipped: int = 0


def build_from_filesystem(
    graph: PathGraph,
    root: PathLike,
    adapter: Optional[FileSystemAdapter] = None,
    sink: Optional[ErrorSink] = None,
    *,
    config: Optional[TraversalConfig] = None,
) -> BuildStats:
    """Add the directory tree under ``root`` to ``graph``.

    If ``root`` does not exist or is not a directory the graph is left
    unchanged. Existing graph content is kept; new edges are appended.

    Args:
        graph: Graph to populate; may already contain vertices and edges.
        root: Directory to start from.
        adapter: Filesystem adapter; defaults to :class:`LocalFileSystem`.
        sink: Callable receiving one human-readable line per failure;
            defaults to :func:`stderr_sink`.
        config: Traversal limits; defaults to ``TRAVERSAL_CONFIG``.

    Returns:
        BuildStats: Counters for the walk.
    """
    fs = adapter if adapter is not None else LocalFileSystem()
    report = sink if sink is not None else stderr_sink
    cfg = config if config is not None else TRAVERSAL_CONFIG
    stats = BuildStats()
    root_path = as_path(root)

    def fail(exc: EnumerationError) -> None:
        stats.errors += 1
        logger.debug("Skipping %s: %s", exc.path, exc.cause.value)
        report(str(exc))

    def open_directory(directory: Path) -> Optional[Iterator[Path]]:
        try:
            listing = [as_path(child) for child in fs.children(directory)]
        except EnumerationError as exc:
            fail(exc)
            return None
        stats.directories += 1
        return iter(listing)

    try:
        if not root_is_directory(fs, root_path):
            logger.debug("Root %s is not a directory; graph unchanged", root_path)
            return stats
    except EnumerationError as exc:
        fail(exc)
        return stats

    if not cfg.allows_descent(0):
        stats.skipped += 1
        return stats

    logger.debug("Building graph from %s", root_path)
    visited: Set[Path] = {canonical_identity(fs, root_path)}

    root_entries = open_directory(root_path)
    if root_entries is None:
        return stats
    stack: List[Tuple[Path, int, Iterator[Path]]] = [(root_path, 0, root_entries)]

    while stack:
        directory, depth, entries = stack[-1]
        child = next(entries, None)
        if child is None:
            stack.pop()
            continue

        graph.add_edge(directory, child)
        stats.edges += 1

        try:
            descend = fs.is_directory(child)
        except EnumerationError as exc:
            fail(exc)
            continue
        if not descend:
            continue

        child_depth = depth + 1
        if not cfg.allows_descent(child_depth):
            stats.skipped += 1
            continue

        if cfg.skip_visited:
            identity = canonical_identity(fs, child)
            if identity in visited:
                logger.debug("Already expanded %s (as %s)", child, identity)
                stats.skipped += 1
                continue
            visited.add(identity)

        child_entries = open_directory(child)
        if child_entries is not None:
            stack.append((child, child_depth, child_entries))

    logger.debug(
        "Built graph from %s: %d directories, %d edges, %d errors, %d skipped",
        root_path,
        stats.directories,
        stats.edges,
        stats.errors,
        stats.skipped,
    )
    return stats
