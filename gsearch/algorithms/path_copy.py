"""Path-copying breadth-first search (comparison variant).

Every frontier entry carries the full path that reached it, so each enqueued
successor costs O(depth) extra memory and copy work. ``breadth_first_search``
avoids this with a parent back-reference tree and should be used instead.
This variant exists to cross-check the canonical engine and to measure the
difference with ``gsearch bench --naive``.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Set, Tuple

from gsearch.types.base import D, ExpandFn, GoalFn, S


def path_copying_bfs(
    domain: D,
    initial_state: S,
    is_goal: GoalFn,
    expand: ExpandFn,
) -> Optional[List[S]]:
    """Breadth-first search that stores a path prefix in every queue entry.

    Same contract and tie-breaking as ``breadth_first_search``.
    """
    frontier: Deque[Tuple[S, Tuple[S, ...]]] = deque(
        [(initial_state, (initial_state,))]
    )
    visited: Set[S] = set()

    while frontier:
        state, path = frontier.popleft()
        if state in visited:
            continue
        if is_goal(domain, state):
            return list(path)
        for successor in expand(domain, state):
            frontier.append((successor, path + (successor,)))
        visited.add(state)

    return None
