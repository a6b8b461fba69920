"""Maximum flow by augmenting along the widest (fattest) residual path."""

from __future__ import annotations

import math
import sys
import time
from typing import Sequence

from maxflowkit.graph import DimacsError, FFStats, Graph, read_dimacs

DEFAULT_K = 2


class KHeap:
    """An indexed k-ary max-heap of vertices keyed by their bottleneck value.

    Vertices are integers in ``range(capacity)``; each may be in the heap at
    most once, and its position is tracked so its key can be changed in place.
    """

    def __init__(self, capacity: int, k: int = DEFAULT_K) -> None:
        if k < 2:
            raise ValueError("k must be at least 2")
        self._k = k
        self._heap: list[int] = []
        self._positions = [-1] * capacity
        self._bottleneck: list[float] = [0] * capacity

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, vertex: object) -> bool:
        return (
            isinstance(vertex, int)
            and 0 <= vertex < len(self._positions)
            and self._positions[vertex] != -1
        )

    def bottleneck(self, vertex: int) -> float:
        """The key currently stored for a vertex."""
        return self._bottleneck[vertex]

    def set_bottleneck(self, vertex: int, value: float) -> None:
        """Store a key without restoring heap order; use before ``insert``."""
        self._bottleneck[vertex] = value

    def peek_max(self) -> int:
        """The vertex with the largest key."""
        if not self._heap:
            raise IndexError("heap is empty")
        return self._heap[0]

    def insert(self, vertex: int) -> None:
        """Add a vertex using its stored key."""
        if self._positions[vertex] != -1:
            raise ValueError(f"vertex {vertex} is already in the heap")
        self._heap.append(vertex)
        self._positions[vertex] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def delete_at(self, index: int) -> int:
        """Remove and return the vertex at a heap position."""
        if not 0 <= index < len(self._heap):
            raise IndexError("index out of range")
        last = self._heap.pop()
        if index == len(self._heap):
            self._positions[last] = -1
            return last
        removed = self._heap[index]
        self._heap[index] = last
        self._positions[last] = index
        self._positions[removed] = -1
        if index > 0 and self._key(index) > self._key(self._parent(index)):
            self._sift_up(index)
        else:
            self._sift_down(index)
        return removed

    def update(self, vertex: int, value: float) -> None:
        """Set a vertex's key, inserting it if absent and restoring heap order."""
        position = self._positions[vertex]
        if position == -1:
            self._bottleneck[vertex] = value
            self.insert(vertex)
            return
        old = self._bottleneck[vertex]
        self._bottleneck[vertex] = value
        if value > old:
            self._sift_up(position)
        elif value < old:
            self._sift_down(position)

    def pop_max(self) -> int:
        """Remove and return the vertex with the largest key."""
        if not self._heap:
            raise IndexError("heap is empty")
        return self.delete_at(0)

    def _parent(self, index: int) -> int:
        return (index - 1) // self._k

    def _key(self, index: int) -> float:
        return self._bottleneck[self._heap[index]]

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._positions[heap[i]] = i
        self._positions[heap[j]] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = self._parent(index)
            if self._key(parent) >= self._key(index):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            first = self._k * index + 1
            if first >= size:
                return
            largest = max(range(first, min(first + self._k, size)), key=self._key)
            if self._key(largest) <= self._key(index):
                return
            self._swap(index, largest)
            index = largest


def _check_terminals(graph: Graph, source: int, sink: int) -> None:
    size = len(graph.adj)
    for name, vertex in (("source", source), ("sink", sink)):
        if not 0 <= vertex < size:
            raise ValueError(f"{name} {vertex} is not a vertex of the graph")
    if source == sink:
        raise ValueError("source and sink must differ")


def _widest_path(graph: Graph, source: int, sink: int, k: int) -> tuple[list[int], list[float]]:
    """Search for a path of maximum bottleneck; return (edge_used, bottleneck)."""
    size = len(graph.adj)
    edge_used = [-1] * size
    bottleneck: list[float] = [0] * size
    bottleneck[source] = math.inf

    heap = KHeap(size, k)
    heap.update(source, bottleneck[source])

    while heap and edge_used[sink] == -1:
        u = heap.pop_max()
        for index in graph.adj[u]:
            edge = graph.edges[index]
            residual = edge.residual()
            if residual <= 0:
                continue
            candidate = min(bottleneck[u], residual)
            if candidate > bottleneck[edge.to]:
                bottleneck[edge.to] = candidate
                edge_used[edge.to] = index
                heap.update(edge.to, candidate)

    return edge_used, bottleneck


def fattest_path(graph: Graph, source: int, sink: int, k: int = DEFAULT_K) -> tuple[int, FFStats]:
    """Push maximum flow from source to sink; return the flow value and statistics.

    ``k`` is the arity of the heap used to pick the widest frontier vertex.
    """
    if k < 2:
        raise ValueError("k must be at least 2")
    _check_terminals(graph, source, sink)
    stats = FFStats()
    max_flow = 0

    while True:
        edge_used, bottleneck = _widest_path(graph, source, sink, k)
        if edge_used[sink] == -1:
            break
        path_flow = int(bottleneck[sink])
        vertex = sink
        while vertex != source:
            index = edge_used[vertex]
            graph.edges[index].flow += path_flow
            graph.edges[index ^ 1].flow -= path_flow
            vertex = graph.edges[index].origin
        max_flow += path_flow
        stats.iterations += 1

    return max_flow, stats


def main(argv: Sequence[str] | None = None) -> int:
    """Run the fattest-path algorithm on a DIMACS file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: fattest-path <input_file> [k-value]", file=sys.stderr)
        return 1
    path = args[0]
    k = DEFAULT_K
    if len(args) >= 2:
        try:
            k = int(args[1])
        except ValueError:
            print(f"invalid k-value: {args[1]!r}", file=sys.stderr)
            return 1
    try:
        problem = read_dimacs(path)
    except DimacsError as exc:
        print(exc, file=sys.stderr)
        return 1

    graph = problem.graph
    print(f"Running Fattest Path algorithm (k-heap, k={k}) on {path}")
    print(f"Graph has {graph.n} vertices and {graph.edge_count()} edges")

    start = time.perf_counter()
    try:
        max_flow, _stats = fattest_path(graph, problem.source, problem.sink, k)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start

    print(f"Maximum flow: {max_flow}")
    print(f"Time taken: {elapsed:g} seconds")
    return 0