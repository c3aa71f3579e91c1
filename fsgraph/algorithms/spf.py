"""Shortest path between two vertices of a PathGraph."""

from __future__ import annotations

from typing import List

from fsgraph.algorithms.bfs import bfs, resolve_to_path
from fsgraph.graph.store import PathGraph
from fsgraph.logging import get_logger
from fsgraph.paths import Path, PathLike, as_path

logger = get_logger(__name__)


def shortest_path(
    graph: PathGraph, source: PathLike, destination: PathLike
) -> List[Path]:
    """Return the fewest-hop directed path from ``source`` to ``destination``.

    All edges weigh one, so this is a breadth-first search that stops at the
    destination. Among equally short paths the first one discovered in
    neighbor-insertion order is returned.

    Args:
        graph: Graph to search.
        source: Start vertex.
        destination: Target vertex.

    Returns:
        Vertices from source to destination inclusive (hop count + 1 items).
        ``[source]`` when both are the same vertex. An empty list if either
        vertex is absent or the destination is unreachable.
    """
    if not graph.contains(source) or not graph.contains(destination):
        logger.debug("No path %s -> %s: vertex missing", source, destination)
        return []
    src, dst = as_path(source), as_path(destination)

    _, pred = bfs(graph, src, dst)
    return resolve_to_path(src, dst, pred)


def shortest_path_length(
    graph: PathGraph, source: PathLike, destination: PathLike
) -> int:
    """Return the hop count of :func:`shortest_path`, or -1 if there is none."""
    return len(shortest_path(graph, source, destination)) - 1
