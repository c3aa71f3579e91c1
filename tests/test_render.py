import io
from pathlib import PurePath

from fsgraph.algorithms.build import build_from_filesystem
from fsgraph.graph.store import PathGraph
from fsgraph.render import iter_lines, print_graph, render

EXPECTED_S2 = (
    '"/r":\n'
    '  "/r/a"\n'
    '  "/r/b"\n'
    '"/r/a":\n'
    '  "/r/a/x"\n'
    '"/r/a/x":\n'
    '"/r/b":\n'
)


def test_render_s2(tree_s2):
    g = PathGraph()
    build_from_filesystem(g, "/r", tree_s2, lambda m: None)
    assert render(g) == EXPECTED_S2


def test_render_empty_graph():
    assert render(PathGraph()) == ""
    assert list(iter_lines(PathGraph())) == []


def test_render_stable_across_insertion_order():
    """Vertex blocks follow canonical order regardless of how the graph was built."""
    a = PathGraph()
    a.add_edge("/r", "/r/a")
    a.add_vertex("/q")
    b = PathGraph()
    b.add_vertex("/q")
    b.add_edge("/r", "/r/a")
    assert render(a) == render(b)
    assert render(a) == render(a)


def test_render_keeps_duplicate_neighbors():
    g = PathGraph()
    g.add_edge("/r", "/r/a")
    g.add_edge("/r", "/r/a")
    assert render(g).splitlines()[:3] == ['"/r":', '  "/r/a"', '  "/r/a"']


def test_print_graph_to_sink(graph_s2):
    out = io.StringIO()
    print_graph(graph_s2, out)
    assert out.getvalue() == EXPECTED_S2


def test_print_graph_defaults_to_stdout(graph_s2, capsys):
    print_graph(graph_s2)
    assert capsys.readouterr().out == EXPECTED_S2


def test_render_quotes_paths_with_spaces():
    g = PathGraph()
    g.add_edge("/my dir", PurePath("/my dir") / "file one")
    assert render(g) == '"/my dir":\n  "/my dir/file one"\n"/my dir/file one":\n'
