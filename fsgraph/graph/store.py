"""Directed multigraph keyed by filesystem paths.

`PathGraph` extends `networkx.MultiDiGraph` so the standard NetworkX tooling
keeps working on it, while exposing the small adjacency-list surface the
fsgraph algorithms rely on: idempotent vertex insertion, edge insertion that
creates missing endpoints, canonical vertex order, and out-neighbor lists in
insertion order.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import networkx as nx

from fsgraph.paths import Path, PathLike, as_path

EdgeID = int
EdgePair = Tuple[Path, Path]


class PathGraph(nx.MultiDiGraph):
    """A multi-directed graph whose vertices are pure filesystem paths.

    This class guarantees:
      - Every vertex is a host-flavoured ``PurePath``; strings and concrete
        paths are coerced on insertion.
      - Adding an existing vertex is a no-op.
      - Adding an edge creates missing endpoints.
      - Parallel edges and self-loops are kept as given.
      - Edge keys are monotonically increasing integers, so ``neighbors``
        reports destinations in the order the edges were added.
      - Nothing is ever removed by the fsgraph algorithms.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize an empty PathGraph.

        Args:
            *args: Positional arguments forwarded to the MultiDiGraph constructor.
            **kwargs: Keyword arguments forwarded to the MultiDiGraph constructor.
        """
        # Counter must exist before MultiDiGraph may load incoming data
        self._next_edge_id: int = 0
        super().__init__(*args, **kwargs)

    def new_edge_key(self, u: Any, v: Any, key: Optional[int] = None) -> EdgeID:  # type: ignore[override]
        """Return the next edge key.

        Keys are global to the graph rather than per node pair, which makes
        them usable as an insertion sequence number.

        Args:
            u: Source vertex (unused).
            v: Destination vertex (unused).
            key: Ignored; kept for NetworkX signature compatibility.

        Returns:
            A new unique integer edge key.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    def copy(self, as_view: bool = False, pickle: bool = True) -> PathGraph:
        """Create an independent copy of this graph.

        Args:
            as_view: If True, return a view instead; only used if ``pickle=False``.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            PathGraph: A new instance (or view) of the graph.
        """
        if not pickle:
            return super().copy(as_view=as_view)  # type: ignore[return-value]
        return loads(dumps(self))

    #
    # Mutation
    #
    def add_vertex(self, path: PathLike) -> Path:
        """Insert ``path`` if absent.

        Args:
            path: The vertex to add.

        Returns:
            The stored (coerced) vertex.
        """
        vertex = as_path(path)
        if vertex not in self._node:
            super().add_node(vertex)
        return vertex

    def add_node(self, node_for_adding: PathLike, **attr: Any) -> None:
        """Add a vertex with optional attributes, coercing it to a path."""
        super().add_node(as_path(node_for_adding), **attr)

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: PathLike,
        v_for_edge: PathLike,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Append a directed edge from ``u_for_edge`` to ``v_for_edge``.

        Both endpoints are created if missing. When an explicit integer key is
        provided the internal counter is advanced past it so later automatic
        keys keep increasing.

        Args:
            u_for_edge: Source vertex.
            v_for_edge: Destination vertex.
            key: Optional edge key; a new one is generated when None.
            **attr: Arbitrary edge attributes.

        Returns:
            EdgeID: The key of the new edge.
        """
        source, destination = as_path(u_for_edge), as_path(v_for_edge)
        self.add_vertex(source)
        self.add_vertex(destination)

        if key is None:
            key = self.new_edge_key(source, destination)
        elif isinstance(key, int) and key >= self._next_edge_id:
            self._next_edge_id = key + 1

        super().add_edge(source, destination, key=key, **attr)
        return key

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        """Add several vertices, coercing each one to a path.

        Accepts the NetworkX forms: bare vertices or ``(vertex, attr_dict)``
        pairs. Per-vertex attributes take precedence over ``attr``.

        Args:
            nodes_for_adding: Iterable of vertices or ``(vertex, dict)`` pairs.
            **attr: Attributes applied to every vertex.
        """
        for item in nodes_for_adding:
            if isinstance(item, tuple) and len(item) == 2 and isinstance(item[1], Mapping):
                node, data = item
                self.add_node(node, **{**attr, **data})
            else:
                self.add_node(item, **attr)

    def add_edges_from(  # pyright: ignore[reportIncompatibleMethodOverride]
        self, ebunch_to_add: Iterable[Tuple[Any, ...]], **attr: Any
    ) -> List[EdgeID]:
        """Add several edges through :meth:`add_edge`.

        Accepts the NetworkX forms ``(u, v)``, ``(u, v, attr_dict)``,
        ``(u, v, key)`` and ``(u, v, key, attr_dict)``. Endpoints are coerced
        and created as needed. ``add_weighted_edges_from`` is inherited and
        delegates here.

        Args:
            ebunch_to_add: Iterable of edge tuples.
            **attr: Attributes applied to every edge; per-edge data wins.

        Returns:
            List of the keys of the added edges, in order.

        Raises:
            ValueError: If an edge tuple does not have 2, 3 or 4 items.
        """
        keys: List[EdgeID] = []
        for edge in ebunch_to_add:
            key: Optional[EdgeID] = None
            data: Mapping[str, Any] = {}
            if len(edge) == 4:
                u, v, key, data = edge
            elif len(edge) == 3:
                u, v, extra = edge
                if isinstance(extra, Mapping):
                    data = extra
                else:
                    key = extra
            elif len(edge) == 2:
                u, v = edge
            else:
                raise ValueError(f"Edge tuple {edge} must be a 2-tuple, 3-tuple or 4-tuple.")
            keys.append(self.add_edge(u, v, key, **{**attr, **data}))
        return keys

    #
    # Read-only access
    #
    def contains(self, path: PathLike) -> bool:
        """Return True if ``path`` is a vertex of the graph."""
        try:
            return as_path(path) in self._node
        except (TypeError, ValueError):
            return False

    def vertices(self) -> List[Path]:
        """Return all vertices in canonical path order.

        A fresh list is built on every call, so iteration can be restarted
        and the graph may be mutated while a previous result is in use.
        """
        return sorted(self._node)

    def neighbors(self, n: PathLike) -> List[Path]:  # type: ignore[override]
        """Return out-neighbors of ``n`` in edge insertion order.

        Unlike ``networkx.MultiDiGraph.neighbors`` this never raises: an
        absent vertex has no neighbors. Parallel edges yield the destination
        once per edge.

        Args:
            n: The source vertex.

        Returns:
            List of destination vertices.
        """
        return [destination for destination, _ in self._out_edges_in_order(n)]

    def edge_list(self) -> List[EdgePair]:
        """Return every ``(source, destination)`` pair in insertion order."""
        ordered: List[Tuple[EdgeID, Path, Path]] = []
        for source, adjacency in self._succ.items():
            for destination, keyed in adjacency.items():
                for key in keyed:
                    ordered.append((key, source, destination))
        ordered.sort(key=lambda item: item[0])
        return [(source, destination) for _, source, destination in ordered]

    def edge_count(self) -> int:
        """Return the number of edges, counting parallel edges separately."""
        return self.number_of_edges()

    def adjacency_lists(self) -> Dict[Path, List[Path]]:
        """Return the graph as a plain ``{vertex: [out-neighbors]}`` mapping.

        Keys follow canonical order and values follow insertion order.
        """
        return {vertex: self.neighbors(vertex) for vertex in self.vertices()}

    def _out_edges_in_order(self, n: PathLike) -> Iterator[Tuple[Path, EdgeID]]:
        """Yield ``(destination, key)`` for edges leaving ``n`` sorted by key."""
        try:
            vertex = as_path(n)
        except (TypeError, ValueError):
            return
        adjacency = self._succ.get(vertex)
        if not adjacency:
            return
        keyed = [
            (key, destination)
            for destination, edges in adjacency.items()
            for key in edges
        ]
        keyed.sort(key=lambda item: item[0])
        for key, destination in keyed:
            yield destination, key
