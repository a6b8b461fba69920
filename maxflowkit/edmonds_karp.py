"""Maximum flow by breadth-first augmenting paths."""

from __future__ import annotations

import sys
import time
from collections import deque
from typing import Sequence

from maxflowkit.graph import DimacsError, FFStats, Graph, read_dimacs


def _check_terminals(graph: Graph, source: int, sink: int) -> None:
    size = len(graph.adj)
    for name, vertex in (("source", source), ("sink", sink)):
        if not 0 <= vertex < size:
            raise ValueError(f"{name} {vertex} is not a vertex of the graph")
    if source == sink:
        raise ValueError("source and sink must differ")


def _augment(graph: Graph, source: int, sink: int, edge_used: list[int]) -> tuple[int, int]:
    path = []
    vertex = sink
    while vertex != source:
        index = edge_used[vertex]
        path.append(index)
        vertex = graph.edges[index].origin
    path_flow = min(graph.edges[index].residual() for index in path)
    for index in path:
        graph.edges[index].flow += path_flow
        graph.edges[index ^ 1].flow -= path_flow
    return path_flow, len(path)


def edmonds_karp(graph: Graph, source: int, sink: int) -> tuple[int, FFStats]:
    """Push maximum flow from source to sink; return the flow value and statistics."""
    _check_terminals(graph, source, sink)
    size = len(graph.adj)
    stats = FFStats()
    max_flow = 0

    while True:
        visited = [False] * size
        edge_used = [-1] * size
        queue = deque([source])
        visited[source] = True
        vertices_visited = 1
        edges_visited = 0

        while queue and not visited[sink]:
            u = queue.popleft()
            for index in graph.adj[u]:
                edge = graph.edges[index]
                if not visited[edge.to] and edge.residual() > 0:
                    visited[edge.to] = True
                    edge_used[edge.to] = index
                    queue.append(edge.to)
                    vertices_visited += 1
                    edges_visited += 1

        if not visited[sink]:
            break

        path_flow, path_length = _augment(graph, source, sink, edge_used)
        max_flow += path_flow
        stats.add_iteration(vertices_visited, edges_visited, path_length)

    return max_flow, stats


def main(argv: Sequence[str] | None = None) -> int:
    """Run Edmonds-Karp on a DIMACS file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: edmonds-karp <input_file>", file=sys.stderr)
        return 1
    path = args[0]
    try:
        problem = read_dimacs(path)
    except DimacsError as exc:
        print(exc, file=sys.stderr)
        return 1

    graph = problem.graph
    print(f"Running Edmonds-Karp algorithm on {path}")
    print(f"Graph has {graph.n} vertices and {graph.edge_count()} edges")

    start = time.perf_counter()
    try:
        max_flow, _stats = edmonds_karp(graph, problem.source, problem.sink)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start

    print(f"Maximum flow: {max_flow}")
    print(f"Time taken: {elapsed:g} seconds")
    return 0