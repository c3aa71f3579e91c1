"""Plain-text rendering of a PathGraph.

Output format, one block per vertex in canonical order::

    "/r":
      "/r/a"
      "/r/b"
    "/r/a":
    "/r/b":

Neighbors are listed in insertion order. The output depends only on the
graph contents, so it can be compared byte for byte in regression tests.
"""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from fsgraph.graph.store import PathGraph

INDENT = "  "


def iter_lines(graph: PathGraph) -> Iterator[str]:
    """Yield rendered lines without trailing newlines."""
    for vertex in graph.vertices():
        yield f'"{vertex}":'
        for neighbor in graph.neighbors(vertex):
            yield f'{INDENT}"{neighbor}"'


def render(graph: PathGraph) -> str:
    """Return the full rendering of ``graph`` as a string."""
    return "".join(f"{line}\n" for line in iter_lines(graph))


def print_graph(graph: PathGraph, sink: Optional[TextIO] = None) -> None:
    """Write the rendering of ``graph`` to ``sink`` (default: stdout)."""
    out = sink if sink is not None else sys.stdout
    for line in iter_lines(graph):
        out.write(f"{line}\n")
