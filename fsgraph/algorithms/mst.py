"""Minimum spanning tree (arborescence) of a PathGraph.

Prim-style expansion with a min-priority queue. Edges have unit weight, so
the queue order reduces to the order in which candidate edges were pushed:
the tree is the breadth-first tree of the start vertex, with each vertex
attached by the first edge that reaches it in neighbor-insertion order.
Only forward edges are followed.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, Set, Tuple

from fsgraph.graph.store import PathGraph
from fsgraph.logging import get_logger
from fsgraph.paths import Path

logger = get_logger(__name__)

#: Weight of every edge.
UNIT_WEIGHT = 1

# (weight, push sequence, source, destination)
_Candidate = Tuple[int, int, Path, Path]


def min_spanning_tree(graph: PathGraph, *, forest: bool = False) -> PathGraph:
    """Return a spanning tree of the vertices reachable from the first vertex.

    The start vertex is the first vertex in canonical order. Vertices that
    cannot be reached from it along out-edges are left out, unless
    ``forest`` is True, in which case every still-unvisited vertex, taken in
    canonical order, seeds a further tree.

    Args:
        graph: Input graph; it is not modified.
        forest: Cover every vertex with a spanning forest.

    Returns:
        PathGraph: A new graph whose edges are a subset of ``graph``'s edges,
        with no cycles and exactly one incoming edge for every vertex except
        the tree roots. Empty if ``graph`` is empty.
    """
    tree = PathGraph()
    vertices = graph.vertices()
    if not vertices:
        return tree

    visited: Set[Path] = set()
    seeds = vertices if forest else vertices[:1]
    for seed in seeds:
        if seed in visited:
            continue
        _grow(graph, tree, seed, visited)

    logger.debug(
        "Spanning %s: %d of %d vertices, %d edges",
        "forest" if forest else "tree",
        tree.number_of_nodes(),
        len(vertices),
        tree.edge_count(),
    )
    return tree


def _grow(graph: PathGraph, tree: PathGraph, start: Path, visited: Set[Path]) -> None:
    """Add the tree rooted at ``start`` to ``tree``, updating ``visited``."""
    min_pq: List[_Candidate] = []
    sequence = 0

    def push_out_edges(node_id: Path) -> None:
        nonlocal sequence
        for neighbor_id in graph.neighbors(node_id):
            if neighbor_id not in visited:
                heappush(min_pq, (UNIT_WEIGHT, sequence, node_id, neighbor_id))
                sequence += 1

    visited.add(start)
    tree.add_vertex(start)
    push_out_edges(start)

    while min_pq:
        _, _, node_id, neighbor_id = heappop(min_pq)
        if neighbor_id in visited:
            continue
        visited.add(neighbor_id)
        tree.add_edge(node_id, neighbor_id)
        push_out_edges(neighbor_id)
