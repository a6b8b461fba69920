"""Maximum-flow algorithms (Edmonds-Karp, randomized DFS, fattest path) over DIMACS max-flow graphs."""

__version__ = "0.1.0"
__all__ = ["graph", "edmonds_karp", "random_dfs", "fattest_path"]