import io
from pathlib import PurePath

import fsgraph
from fsgraph import (
    MemoryFileSystem,
    PathGraph,
    build_from_filesystem,
    min_spanning_tree,
    print_graph,
    shortest_path,
)


def test_all_exports_resolve():
    for name in fsgraph.__all__:
        assert hasattr(fsgraph, name), name


def test_version():
    assert fsgraph.__version__ == "0.1.0"


def test_end_to_end_with_synthetic_tree():
    fs = MemoryFileSystem(
        {
            "/srv": ["/srv/logs", "/srv/data"],
            "/srv/data": ["/srv/data/2024"],
            "/srv/data/2024": ["/srv/data/2024/q1.csv"],
            "/srv/logs": [],
        }
    )
    fs.fail("/srv/logs")
    graph = PathGraph()
    diagnostics = []

    stats = build_from_filesystem(graph, "/srv", fs, diagnostics.append)

    assert stats.edges == 4
    assert stats.errors == 1
    assert shortest_path(graph, "/srv", "/srv/data/2024/q1.csv") == [
        PurePath("/srv"),
        PurePath("/srv/data"),
        PurePath("/srv/data/2024"),
        PurePath("/srv/data/2024/q1.csv"),
    ]

    out = io.StringIO()
    print_graph(min_spanning_tree(graph), out)
    assert out.getvalue().splitlines()[0] == '"/srv":'
