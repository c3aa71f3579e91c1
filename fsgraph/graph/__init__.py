"""Graph primitives.

This package provides `PathGraph`, the path-keyed directed multigraph every
fsgraph algorithm reads and writes.
"""

from fsgraph.graph.store import EdgeID, EdgePair, PathGraph

__all__ = ["EdgeID", "EdgePair", "PathGraph"]
