[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maxflowkit"
version = "0.1.0"
description = "Maximum-flow algorithms (Edmonds-Karp, randomized DFS Ford-Fulkerson, fattest path) over DIMACS max-flow graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["max-flow", "ford-fulkerson", "edmonds-karp", "dimacs", "graph", "network-flow"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
maxflow-edmonds-karp = "maxflowkit.edmonds_karp:main"
maxflow-random-dfs = "maxflowkit.random_dfs:main"
maxflow-fattest-path = "maxflowkit.fattest_path:main"

[tool.hatch.build.targets.wheel]
packages = ["maxflowkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
