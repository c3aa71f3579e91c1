import itertools
from pathlib import PurePath

import networkx as nx

from fsgraph.algorithms.build import build_from_filesystem
from fsgraph.algorithms.spf import shortest_path, shortest_path_length
from fsgraph.graph.store import PathGraph

P = PurePath


def _assert_valid_path(g, path, src, dst):
    assert path[0] == P(src)
    assert path[-1] == P(dst)
    for u, v in zip(path, path[1:]):
        assert v in g.neighbors(u)


def test_shortest_path_s2(tree_s2):
    g = PathGraph()
    build_from_filesystem(g, "/r", tree_s2, lambda m: None)
    path = shortest_path(g, "/r", "/r/a/x")
    assert path == [P("/r"), P("/r/a"), P("/r/a/x")]
    assert len(path) == 3


def test_shortest_path_no_directed_path_s3(graph_s2):
    assert shortest_path(graph_s2, "/r/b", "/r/a/x") == []


def test_shortest_path_same_vertex_s4(graph_s2):
    assert shortest_path(graph_s2, "/r", "/r") == [P("/r")]


def test_shortest_path_missing_vertices(graph_s2):
    assert shortest_path(graph_s2, "/nope", "/r") == []
    assert shortest_path(graph_s2, "/r", "/nope") == []
    assert shortest_path(graph_s2, "/nope", "/nope") == []
    assert shortest_path(graph_s2, "", "/r") == []
    assert shortest_path_length(graph_s2, "/r", "") == -1


def test_shortest_path_tie_break_by_insertion_order(diamond):
    assert shortest_path(diamond, "/A", "/E") == [P("/A"), P("/B"), P("/D"), P("/E")]

    flipped = PathGraph()
    flipped.add_edge("/A", "/C")
    flipped.add_edge("/A", "/B")
    flipped.add_edge("/B", "/D")
    flipped.add_edge("/C", "/D")
    assert shortest_path(flipped, "/A", "/D") == [P("/A"), P("/C"), P("/D")]


def test_shortest_path_prefers_fewer_hops():
    g = PathGraph()
    g.add_edge("/A", "/B")
    g.add_edge("/B", "/C")
    g.add_edge("/C", "/D")
    g.add_edge("/A", "/D")
    assert shortest_path(g, "/A", "/D") == [P("/A"), P("/D")]


def test_shortest_path_self_loop_does_not_shorten():
    g = PathGraph()
    g.add_edge("/A", "/A")
    g.add_edge("/A", "/B")
    assert shortest_path(g, "/A", "/A") == [P("/A")]
    assert shortest_path(g, "/A", "/B") == [P("/A"), P("/B")]


def test_shortest_path_parallel_edges():
    g = PathGraph()
    g.add_edge("/A", "/B")
    g.add_edge("/A", "/B")
    assert shortest_path(g, "/A", "/B") == [P("/A"), P("/B")]


def test_shortest_path_length(graph_s2):
    assert shortest_path_length(graph_s2, "/r", "/r/a/x") == 2
    assert shortest_path_length(graph_s2, "/r", "/r") == 0
    assert shortest_path_length(graph_s2, "/r/b", "/r") == -1


def test_shortest_path_matches_networkx_lengths():
    """Every returned path is valid and as short as NetworkX's."""
    g = PathGraph()
    edges = [
        ("/1", "/2"), ("/1", "/3"), ("/2", "/4"), ("/3", "/4"), ("/4", "/5"),
        ("/5", "/1"), ("/3", "/6"), ("/6", "/5"), ("/2", "/2"), ("/6", "/7"),
    ]
    for u, v in edges:
        g.add_edge(u, v)

    for src, dst in itertools.product(g.vertices(), repeat=2):
        path = shortest_path(g, src, dst)
        if nx.has_path(g, src, dst):
            _assert_valid_path(g, path, src, dst)
            assert len(path) == nx.shortest_path_length(g, src, dst) + 1
        else:
            assert path == []
