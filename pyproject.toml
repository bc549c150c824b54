[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphkit"
version = "0.1.0"
description = "Graph and tree algorithms on plain Python data: union-find, binary lifting, LCA, Euler tours, heavy-light and centroid decomposition."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "tree",
    "algorithms",
    "union-find",
    "lca",
    "shortest-path",
    "segment-tree",
    "heavy-light-decomposition",
    "centroid-decomposition",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graphkit"]

[tool.pytest.ini_options]
addopts = "-ra"
