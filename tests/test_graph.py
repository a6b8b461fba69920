import pytest

from maxflowkit.graph import (
    DimacsError,
    Edge,
    FFStats,
    FlowProblem,
    Graph,
    parse_dimacs,
    read_dimacs,
)

SAMPLE = """c sample network
p max 4 5
n 1 s
n 4 t
a 1 2 10
a 1 3 5
a 2 3 15
a 2 4 5
a 3 4 10
"""


def test_edge_residual_is_capacity_minus_flow():
    edge = Edge(1, 2, 7, 3)
    assert edge.residual() == 4
    edge.flow = 7
    assert edge.residual() == 0


def test_graph_sized_from_vertex_count():
    graph = Graph(n=4)
    assert len(graph.adj) == 5
    assert all(neighbours == [] for neighbours in graph.adj)


def test_add_edge_creates_reverse_pair():
    graph = Graph(n=3)
    index = graph.add_edge(1, 2, 9)
    forward, backward = graph.edges[index], graph.edges[index ^ 1]
    assert (forward.origin, forward.to, forward.capacity, forward.flow) == (1, 2, 9, 0)
    assert (backward.origin, backward.to, backward.capacity, backward.flow) == (2, 1, 0, 0)
    assert graph.adj[1] == [index]
    assert graph.adj[2] == [index + 1]


def test_add_edge_grows_adjacency():
    graph = Graph()
    graph.add_edge(0, 6, 1)
    assert len(graph.adj) == 7
    assert graph.adj[6] == [1]


def test_add_edge_rejects_negative_vertex():
    with pytest.raises(ValueError):
        Graph(n=2).add_edge(-1, 2, 3)


def test_edge_count_ignores_reverse_arcs():
    graph = Graph(n=3)
    graph.add_edge(1, 2, 1)
    graph.add_edge(2, 3, 1)
    assert graph.edge_count() == 2
    assert len(graph.edges) == 4


def test_reset_flow_zeroes_all_arcs():
    graph = Graph(n=2)
    graph.add_edge(1, 2, 5)
    graph.edges[0].flow = 4
    graph.edges[1].flow = -4
    graph.reset_flow()
    assert [edge.flow for edge in graph.edges] == [0, 0]


def test_stats_add_iteration_updates_totals_and_lists():
    stats = FFStats()
    stats.add_iteration(4, 3, 2)
    stats.add_iteration(6, 5, 4)
    assert stats.iterations == 2
    assert stats.vertices_visited == 10
    assert stats.edges_visited == 8
    assert stats.iter_vertices == [4, 6]
    assert stats.iter_edges == [3, 5]
    assert stats.path_lengths == [2, 4]


def test_stats_summary_without_iterations_has_no_averages():
    text = FFStats().summary()
    assert text.splitlines() == [
        "Total iterations: 0",
        "Total vertices visited: 0",
        "Total edges visited: 0",
    ]


def test_stats_summary_with_iterations_reports_averages():
    stats = FFStats()
    stats.add_iteration(4, 4, 2)
    stats.add_iteration(4, 4, 2)
    lines = stats.summary().splitlines()
    assert len(lines) == 6
    assert lines[0] == "Total iterations: 2"
    assert lines[3] == "Average vertices per iteration: 4"
    assert lines[5] == "Average path length: 2"


def test_parse_dimacs_sample():
    problem = parse_dimacs(SAMPLE.splitlines(keepends=True))
    assert isinstance(problem, FlowProblem)
    assert problem.source == 1
    assert problem.sink == 4
    assert problem.graph.n == 4
    assert problem.graph.edge_count() == 5
    first = problem.graph.edges[0]
    assert (first.origin, first.to, first.capacity) == (1, 2, 10)


def test_parse_dimacs_skips_comments_and_blank_lines():
    lines = ["c hi", "", "p max 2 1", "c mid", "n 1 s", "n 2 t", "a 1 2 3", ""]
    problem = parse_dimacs(lines)
    assert problem.graph.edge_count() == 1
    assert problem.graph.edges[0].capacity == 3


def test_parse_dimacs_node_designator_uses_first_letter():
    problem = parse_dimacs(["p max 3 0", "n 3 source", "n 2 target"])
    assert (problem.source, problem.sink) == (3, 2)


@pytest.mark.parametrize(
    "lines",
    [
        ["p max 2 1", "n 2 t", "a 1 2 3"],
        ["p max 2 1", "n 1 s", "a 1 2 3"],
        ["p max x 1", "n 1 s", "n 2 t"],
        ["p min 2 1", "n 1 s", "n 2 t"],
        ["p max 2 1", "n 1 s", "n 2 t", "a 1 2"],
        ["p max 2 1", "n 1 s", "n 2 t", "a 1 -2 4"],
    ],
)
def test_parse_dimacs_errors(lines):
    with pytest.raises(DimacsError):
        parse_dimacs(lines)


def test_read_dimacs_matches_parse(tmp_path):
    path = tmp_path / "net.max"
    path.write_text(SAMPLE, encoding="utf-8")
    from_file = read_dimacs(path)
    from_text = parse_dimacs(SAMPLE.splitlines())
    assert from_file == from_text


def test_read_dimacs_missing_file(tmp_path):
    with pytest.raises(DimacsError, match="Error opening file"):
        read_dimacs(tmp_path / "absent.max")