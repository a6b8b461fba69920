# maxflowkit

This package provides maximum-flow algorithms for graphs in the DIMACS max-flow format:

- **Edmonds-Karp** (`maxflowkit.edmonds_karp`): Ford-Fulkerson that finds each augmenting path by breadth-first search.
- **Randomized Ford-Fulkerson** (`maxflowkit.random_dfs`): finds each augmenting path by depth-first search. It shuffles the edge order at each vertex with a seeded random generator. The default seed is 42.
- **Fattest path** (`maxflowkit.fattest_path`): always augments along the residual path with the largest bottleneck. It finds that path with an indexed k-ary max-heap (`KHeap`).

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Command line

Each algorithm has its own command. A command reads a DIMACS file, runs the algorithm, and prints the problem size, the maximum flow and the time taken:

```
maxflow-edmonds-karp network.max
maxflow-random-dfs network.max
maxflow-fattest-path network.max 4
```

The optional second argument of `maxflow-fattest-path` sets the arity `k` of the heap. It defaults to 2 and must be an integer of at least 2.

A command prints a usage message and exits with status 1 in these cases:

- the arguments are wrong;
- the file cannot be read or is malformed;
- the source or sink is not a vertex of the graph;
- the source and the sink are the same vertex.

## Input format

```
c comment lines start with c
p max 4 5
n 1 s
n 4 t
a 1 2 3
a 1 3 2
a 2 3 1
a 2 4 2
a 3 4 3
```

- `p max <vertices> <arcs>` declares the problem size.
- `n <v> s` marks the source and `n <v> t` marks the sink. Both are required.
- `a <u> <v> <capacity>` adds an arc.

Blank lines and lines that start with `c` are ignored. The maximum flow of the example above is 5.

## Library use

```python
from maxflowkit.graph import parse_dimacs, read_dimacs
from maxflowkit.edmonds_karp import edmonds_karp
from maxflowkit.random_dfs import randomized_ford_fulkerson
from maxflowkit.fattest_path import fattest_path

problem = read_dimacs("network.max")
graph = problem.graph

flow, stats = edmonds_karp(graph, problem.source, problem.sink)
print(flow, stats.iterations)
print(stats.summary())

graph.reset_flow()
flow, stats = randomized_ford_fulkerson(graph, problem.source, problem.sink, seed=42)

graph.reset_flow()
flow, stats = fattest_path(graph, problem.source, problem.sink, k=4)
```

You can also build a graph directly:

```python
from maxflowkit.graph import Graph

graph = Graph(n=4)
graph.add_edge(1, 2, 3)   # returns the index of the forward arc
graph.add_edge(2, 4, 2)
print(graph.edge_count())  # 2
```

`Graph` stores every arc next to its reverse arc. The arcs at index `i` and `i ^ 1` are reverses of each other. `Edge.residual()` gives the capacity still free on an arc.

The algorithms change the flow stored on the graph's edges. Call `Graph.reset_flow()` before you run another algorithm on the same graph.

Each algorithm returns a tuple `(flow, stats)` and raises `ValueError` in these cases:

- the source or sink is out of range;
- the source and the sink are the same vertex;
- `fattest_path` is given a `k` below 2.

`read_dimacs` reads a file. `parse_dimacs` does the same job but takes any iterable of lines. Both return a `FlowProblem` with the fields `graph`, `source` and `sink`. Both raise `DimacsError`, a subclass of `ValueError`, in these cases:

- the input cannot be read;
- a line is malformed;
- the source or the sink is missing.

`FFStats` holds the iteration count and the totals of vertices and edges visited. It also holds, for each iteration, the vertices and edges visited and the length of the augmenting path. `FFStats.summary()` returns these figures as text, with the averages per iteration. Edmonds-Karp and randomized Ford-Fulkerson fill in all fields. The fattest-path algorithm counts only iterations.

## Limitations

The package computes only the value of the maximum flow. It does not:

- write the resulting flow or a minimum cut to a file;
- print the statistics from the command line (`summary()` is available only from Python).