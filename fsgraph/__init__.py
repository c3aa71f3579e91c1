"""fsgraph: directory trees as directed graphs.

fsgraph builds a path-keyed directed graph from a directory tree and runs
classical graph queries over it.

Primary API:
    PathGraph - Directed multigraph keyed by filesystem paths
    build_from_filesystem() - Add a directory tree to a graph
    shortest_path() - Fewest-hop path between two paths
    min_spanning_tree() - Spanning tree of the vertices reachable from the first
    print_graph() / render() - Stable text rendering

Example:
    from fsgraph import PathGraph, build_from_filesystem, shortest_path

    graph = PathGraph()
    build_from_filesystem(graph, "/srv/data")
    hops = shortest_path(graph, "/srv/data", "/srv/data/2024/report.csv")
"""

from __future__ import annotations

from fsgraph import logging
from fsgraph._version import __version__
from fsgraph.algorithms import (
    BuildStats,
    build_from_filesystem,
    min_spanning_tree,
    shortest_path,
    shortest_path_length,
    stderr_sink,
)
from fsgraph.config import TRAVERSAL_CONFIG, TraversalConfig
from fsgraph.fs import (
    CancellableFileSystem,
    EnumerationCause,
    EnumerationError,
    FileSystemAdapter,
    LocalFileSystem,
    MemoryFileSystem,
)
from fsgraph.graph import PathGraph
from fsgraph.paths import Path, as_path
from fsgraph.render import print_graph, render

__all__ = [
    # Version
    "__version__",
    # Model
    "Path",
    "PathGraph",
    "as_path",
    # Algorithms
    "build_from_filesystem",
    "shortest_path",
    "shortest_path_length",
    "min_spanning_tree",
    "BuildStats",
    "stderr_sink",
    # Filesystem adapters
    "FileSystemAdapter",
    "LocalFileSystem",
    "MemoryFileSystem",
    "CancellableFileSystem",
    "EnumerationError",
    "EnumerationCause",
    # Configuration
    "TraversalConfig",
    "TRAVERSAL_CONFIG",
    # Rendering
    "print_graph",
    "render",
    # Utilities
    "logging",
]
