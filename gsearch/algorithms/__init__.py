"""Breadth-first search engine and its bookkeeping structures.

- ``breadth_first_search`` is the canonical engine backed by ``SearchTree``.
- ``path_copying_bfs`` is a naive comparison variant.
"""

from gsearch.algorithms.bfs import (
    SearchAborted,
    SearchSummary,
    bfs_with_summary,
    breadth_first_search,
)
from gsearch.algorithms.path_copy import path_copying_bfs
from gsearch.algorithms.tree import SearchTree, SearchTreeNode

__all__ = [
    "SearchAborted",
    "SearchSummary",
    "SearchTree",
    "SearchTreeNode",
    "bfs_with_summary",
    "breadth_first_search",
    "path_copying_bfs",
]
