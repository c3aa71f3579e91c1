"""Breadth-first search over a PathGraph.

Every edge has unit cost, so breadth-first order settles vertices at their
minimal hop count. Each vertex keeps the first predecessor that reached it;
since the queue is FIFO and neighbors are scanned in insertion order, that is
the first shortest path discovered in neighbor-insertion order.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Tuple

from fsgraph.graph.store import PathGraph
from fsgraph.paths import Path, PathLike, as_path

Costs = Dict[Path, int]
Predecessors = Dict[Path, Optional[Path]]


def bfs(
    graph: PathGraph,
    src_node: PathLike,
    dst_node: Optional[PathLike] = None,
) -> Tuple[Costs, Predecessors]:
    """Breadth-first search from ``src_node``.

    Args:
        graph: Graph to search.
        src_node: Start vertex; must be present in ``graph``.
        dst_node: Optional target. When given, the search stops as soon as
            the target is reached; other vertices may then be missing from
            the result.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reached vertex to its hop count from src_node.
          - pred: Maps each reached vertex to the vertex it was first reached
            from; the source maps to None.

    Raises:
        KeyError: If ``src_node`` is not in the graph.
    """
    src_node = as_path(src_node)
    if dst_node is not None:
        dst_node = as_path(dst_node)
    if not graph.contains(src_node):
        raise KeyError(f"Source node '{src_node}' is not in the graph.")

    costs: Costs = {src_node: 0}
    pred: Predecessors = {src_node: None}
    if dst_node == src_node:
        return costs, pred

    queue = deque([src_node])
    while queue:
        node_id = queue.popleft()
        next_cost = costs[node_id] + 1
        for neighbor_id in graph.neighbors(node_id):
            if neighbor_id in costs:
                # already settled at an equal or lower cost (self-loops included)
                continue
            costs[neighbor_id] = next_cost
            pred[neighbor_id] = node_id
            if neighbor_id == dst_node:
                return costs, pred
            queue.append(neighbor_id)
    return costs, pred


def resolve_to_path(src_node: Path, dst_node: Path, pred: Predecessors) -> List[Path]:
    """Walk ``pred`` back from ``dst_node`` and return the path from ``src_node``.

    Args:
        src_node: Vertex the search started from.
        dst_node: Vertex to reach.
        pred: Predecessor map as returned by :func:`bfs`.

    Returns:
        Vertices from src_node to dst_node inclusive, or an empty list if
        dst_node was not reached.
    """
    if dst_node not in pred:
        return []
    path: List[Path] = [dst_node]
    node: Optional[Path] = pred[dst_node]
    while node is not None:
        path.append(node)
        node = pred[node]
    path.reverse()
    if path[0] != src_node:
        return []
    return path
