"""Global pytest configuration and shared sample trees."""

from __future__ import annotations

import pytest

from fsgraph.fs.memory import MemoryFileSystem
from fsgraph.graph.store import PathGraph


@pytest.fixture
def tree_s1():
    # /r
    #  ├── a/
    #  └── b
    return MemoryFileSystem({"/r": ["/r/a", "/r/b"], "/r/a": []})


@pytest.fixture
def tree_s2():
    # /r
    #  ├── a/
    #  │   └── x
    #  └── b
    return MemoryFileSystem({"/r": ["/r/a", "/r/b"], "/r/a": ["/r/a/x"]})


@pytest.fixture
def tree_deep():
    # /r
    #  ├── a/
    #  │   ├── c/
    #  │   │   └── e
    #  │   └── d
    #  └── b/
    #      └── f/
    #          └── g
    return MemoryFileSystem(
        {
            "/r": ["/r/a", "/r/b"],
            "/r/a": ["/r/a/c", "/r/a/d"],
            "/r/a/c": ["/r/a/c/e"],
            "/r/b": ["/r/b/f"],
            "/r/b/f": ["/r/b/f/g"],
        }
    )


@pytest.fixture
def graph_s2():
    g = PathGraph()
    g.add_edge("/r", "/r/a")
    g.add_edge("/r", "/r/b")
    g.add_edge("/r/a", "/r/a/x")
    return g


@pytest.fixture
def diamond():
    #      ┌──► B ──┐
    #  A ──┤        ├──► D ──► E
    #      └──► C ──┘
    g = PathGraph()
    g.add_edge("/A", "/B")
    g.add_edge("/A", "/C")
    g.add_edge("/B", "/D")
    g.add_edge("/C", "/D")
    g.add_edge("/D", "/E")
    return g


@pytest.fixture
def two_islands():
    # /a -> /a/1 -> /a/2     /z -> /z/1     /m (isolated)
    g = PathGraph()
    g.add_edge("/a", "/a/1")
    g.add_edge("/a/1", "/a/2")
    g.add_edge("/z", "/z/1")
    g.add_vertex("/m")
    return g
