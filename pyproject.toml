[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphpart"
version = "0.1.0"
description = "Graph data structures and algorithms for multilevel graph partitioning: CSR graphs, priority queues, flow graphs, cycle search and max-flow."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "partitioning",
    "max-flow",
    "push-relabel",
    "strongly-connected-components",
    "topological-sort",
    "priority-queue",
    "union-find",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["graphpart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
