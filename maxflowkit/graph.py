"""Flow networks, DIMACS max-flow input and per-run search statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable


class DimacsError(ValueError):
    """Raised when a DIMACS max-flow file cannot be read or is malformed."""


@dataclass
class Edge:
    """A directed arc of the residual network."""

    origin: int
    to: int
    capacity: int
    flow: int = 0

    def residual(self) -> int:
        """Capacity still available on this arc."""
        return self.capacity - self.flow


@dataclass
class Graph:
    """A flow network stored as paired forward/reverse arcs.

    The arc at index ``i`` and the arc at ``i ^ 1`` are each other's reverse.
    """

    n: int = 0
    edges: list[Edge] = field(default_factory=list)
    adj: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._ensure_vertex(self.n)

    def _ensure_vertex(self, vertex: int) -> None:
        if vertex >= len(self.adj):
            self.adj.extend([] for _ in range(vertex + 1 - len(self.adj)))

    def add_edge(self, u: int, v: int, capacity: int) -> int:
        """Add an arc u -> v with its zero-capacity reverse; return the arc's index."""
        if u < 0 or v < 0:
            raise ValueError(f"vertex indices must be non-negative, got {u} and {v}")
        index = len(self.edges)
        self.edges.append(Edge(u, v, capacity))
        self.edges.append(Edge(v, u, 0))
        self._ensure_vertex(max(u, v))
        self.adj[u].append(index)
        self.adj[v].append(index + 1)
        return index

    def reset_flow(self) -> None:
        """Set the flow on every arc back to zero."""
        for edge in self.edges:
            edge.flow = 0

    def edge_count(self) -> int:
        """Number of arcs added, not counting reverse arcs."""
        return len(self.edges) // 2


@dataclass
class FFStats:
    """Counters gathered while augmenting paths are searched for."""

    iterations: int = 0
    vertices_visited: int = 0
    edges_visited: int = 0
    iter_vertices: list[int] = field(default_factory=list)
    iter_edges: list[int] = field(default_factory=list)
    path_lengths: list[int] = field(default_factory=list)

    def add_iteration(self, vertices: int, edges: int, path_length: int) -> None:
        """Record one successful augmentation."""
        self.iterations += 1
        self.vertices_visited += vertices
        self.edges_visited += edges
        self.iter_vertices.append(vertices)
        self.iter_edges.append(edges)
        self.path_lengths.append(path_length)

    def summary(self) -> str:
        """Totals and, if any augmentation happened, per-iteration averages."""
        lines = [
            f"Total iterations: {self.iterations}",
            f"Total vertices visited: {self.vertices_visited}",
            f"Total edges visited: {self.edges_visited}",
        ]
        if self.iter_vertices:
            lines += [
                f"Average vertices per iteration: {self.vertices_visited / self.iterations:g}",
                f"Average edges per iteration: {self.edges_visited / self.iterations:g}",
                f"Average path length: {sum(self.path_lengths) / self.iterations:g}",
            ]
        return "\n".join(lines)


@dataclass
class FlowProblem:
    """A network together with its designated source and sink."""

    graph: Graph
    source: int
    sink: int


def _ints(tokens: list[str], lineno: int) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise DimacsError(f"line {lineno}: expected integers, got {tokens!r}") from exc


def parse_dimacs(lines: Iterable[str]) -> FlowProblem:
    """Parse DIMACS max-flow text (``p``, ``n`` and ``a`` lines)."""
    graph = Graph()
    source: int | None = None
    sink: int | None = None

    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line or line[0] == "c":
            continue
        tokens = line.split()
        kind = line[0]
        if kind == "p":
            if len(tokens) < 4 or tokens[0] != "p" or tokens[1] != "max":
                raise DimacsError(f"line {lineno}: malformed problem line {line!r}")
            n, _m = _ints(tokens[2:4], lineno)
            if n < 0:
                raise DimacsError(f"line {lineno}: negative vertex count {n}")
            graph.n = n
            graph._ensure_vertex(n)
        elif kind == "n":
            if len(tokens) < 3 or tokens[0] != "n":
                raise DimacsError(f"line {lineno}: malformed node line {line!r}")
            (vertex,) = _ints(tokens[1:2], lineno)
            designator = tokens[2][0]
            if designator == "s":
                source = vertex
            elif designator == "t":
                sink = vertex
        elif kind == "a":
            if len(tokens) < 4 or tokens[0] != "a":
                raise DimacsError(f"line {lineno}: malformed arc line {line!r}")
            u, v, capacity = _ints(tokens[1:4], lineno)
            try:
                graph.add_edge(u, v, capacity)
            except ValueError as exc:
                raise DimacsError(f"line {lineno}: {exc}") from exc

    if source is None:
        raise DimacsError("no source vertex given")
    if sink is None:
        raise DimacsError("no sink vertex given")
    return FlowProblem(graph, source, sink)


def read_dimacs(path: str | Path) -> FlowProblem:
    """Read a DIMACS max-flow file."""
    try:
        with open(path, encoding="utf-8") as handle:
            return parse_dimacs(handle)
    except OSError as exc:
        raise DimacsError(f"Error opening file: {path}") from exc