"""gsearch: generic breadth-first search.

gsearch finds one shortest (fewest-steps) path through any state space
described by a domain object, a start state and two callbacks.

Primary API:
    breadth_first_search() / search() - Canonical BFS returning a path or None
    bfs_with_summary() - Same search plus run counters (SearchSummary)
    SearchConfig - Optional engine settings
    Problem, load_problem() - Bundled problems and the YAML loader
    GridMaze, CounterDomain, GraphDomain - Example domain adapters

Example:
    from gsearch import breadth_first_search

    path = breadth_first_search(
        None,
        0,
        lambda _, x: x == 5,
        lambda _, x: [x + 1],
    )
    # [0, 1, 2, 3, 4, 5]
"""

from __future__ import annotations

from gsearch import cli, logging
from gsearch._version import __version__
from gsearch.algorithms.bfs import (
    SearchAborted,
    SearchSummary,
    bfs_with_summary,
    breadth_first_search,
)
from gsearch.algorithms.path_copy import path_copying_bfs
from gsearch.algorithms.tree import SearchTree, SearchTreeNode
from gsearch.config import SEARCH_CONFIG, SearchConfig
from gsearch.domains import CounterDomain, GraphDomain, GridMaze, random_maze
from gsearch.loader import load_problem, load_problem_yaml
from gsearch.problem import Problem
from gsearch.types.base import VisitedCheck

search = breadth_first_search

__all__ = [
    # Version
    "__version__",
    # Engine
    "search",
    "breadth_first_search",
    "bfs_with_summary",
    "path_copying_bfs",
    "SearchAborted",
    "SearchSummary",
    "SearchTree",
    "SearchTreeNode",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    "VisitedCheck",
    # Problems and domains
    "Problem",
    "load_problem",
    "load_problem_yaml",
    "GridMaze",
    "CounterDomain",
    "GraphDomain",
    "random_maze",
    # Modules
    "cli",
    "logging",
]
