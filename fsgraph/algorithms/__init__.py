"""Graph algorithms over `PathGraph`.

- `build_from_filesystem`: populate a graph from a directory tree.
- `bfs` / `shortest_path`: unit-weight shortest paths.
- `min_spanning_tree`: Prim-style spanning tree (or forest).
"""

from fsgraph.algorithms.bfs import bfs, resolve_to_path
from fsgraph.algorithms.build import BuildStats, build_from_filesystem, stderr_sink
from fsgraph.algorithms.mst import min_spanning_tree
from fsgraph.algorithms.spf import shortest_path, shortest_path_length

__all__ = [
    "BuildStats",
    "bfs",
    "build_from_filesystem",
    "min_spanning_tree",
    "resolve_to_path",
    "shortest_path",
    "shortest_path_length",
    "stderr_sink",
]
