"""Breadth-first search over caller-defined state spaces.

The engine knows nothing about the states it visits. A caller supplies an
opaque domain object, a start state and two callbacks:

- ``is_goal(domain, state) -> bool``
- ``expand(domain, state) -> iterable of successor states``

and receives one shortest (fewest-steps) path from the start to a goal state,
or ``None`` when every reachable state has been expanded without reaching a
goal.

Notes:
    Discovered states are recorded in a ``SearchTree`` holding one parent
    back-reference per node; the frontier is a FIFO of node indices. The path
    is rebuilt once, when a goal is dequeued.

    Memory use is dominated by the tree and the frontier, which together hold
    one entry per (state, parent) pair ever enqueued. On dense graphs this can
    exceed the number of distinct states; ``VisitedCheck.ENQUEUE`` bounds it by
    the number of distinct states instead. ``bfs_with_summary`` reports the
    actual figures for a run.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, Set, Tuple

from gsearch.algorithms.tree import SearchTree
from gsearch.config import SEARCH_CONFIG, SearchConfig
from gsearch.logging import get_logger
from gsearch.types.base import D, ExpandFn, GoalFn, NodeIndex, S, VisitedCheck

logger = get_logger(__name__)


@dataclass(frozen=True)
class SearchSummary:
    """Counters describing one search run.

    Attributes:
        found: Whether a goal state was reached.
        path_length: Number of edges in the returned path, or ``None``.
        expanded: States passed to ``expand``.
        generated: Successor nodes appended to the search tree.
        duplicates_skipped: Frontier entries discarded because their state
            had already been expanded.
        max_frontier: Largest frontier length observed.
        tree_size: Nodes in the search tree when the run ended.
    """

    found: bool
    path_length: Optional[int]
    expanded: int
    generated: int
    duplicates_skipped: int
    max_frontier: int
    tree_size: int


class SearchAborted(RuntimeError):
    """Raised when a caller-requested limit stops a search early.

    Attributes:
        summary: Counters at the moment the search stopped.
    """

    def __init__(self, message: str, summary: SearchSummary) -> None:
        super().__init__(message)
        self.summary = summary


def _run_bfs(
    domain: D,
    initial_state: S,
    is_goal: GoalFn,
    expand: ExpandFn,
    config: SearchConfig,
    should_stop: Optional[Callable[[], bool]],
) -> Tuple[Optional[List[S]], SearchSummary]:
    tree: SearchTree[S] = SearchTree()
    frontier: Deque[NodeIndex] = deque([tree.add_root(initial_state)])
    visited: Set[S] = set()
    # States ever enqueued; only tracked when filtering at enqueue time
    enqueued: Optional[Set[S]] = (
        {initial_state} if config.visited_check == VisitedCheck.ENQUEUE else None
    )
    max_expansions = config.max_expansions

    expanded = 0
    duplicates_skipped = 0
    max_frontier = 1

    def summarize(path: Optional[List[S]]) -> SearchSummary:
        return SearchSummary(
            found=path is not None,
            path_length=None if path is None else len(path) - 1,
            expanded=expanded,
            generated=len(tree) - 1,
            duplicates_skipped=duplicates_skipped,
            max_frontier=max_frontier,
            tree_size=len(tree),
        )

    while frontier:
        index = frontier.popleft()

        # Nothing is pending between iterations, so stopping here is clean
        if should_stop is not None and should_stop():
            raise SearchAborted("Search stopped by caller.", summarize(None))

        state = tree[index].state
        if state in visited:
            duplicates_skipped += 1
            continue

        if is_goal(domain, state):
            path = tree.path_to(index)
            return path, summarize(path)

        if max_expansions is not None and expanded >= max_expansions:
            raise SearchAborted(
                f"Search reached the expansion limit ({max_expansions}).",
                summarize(None),
            )

        for successor in expand(domain, state):
            if enqueued is not None:
                if successor in enqueued:
                    continue
                enqueued.add(successor)
            frontier.append(tree.add(successor, index))

        expanded += 1
        visited.add(state)
        if len(frontier) > max_frontier:
            max_frontier = len(frontier)

    return None, summarize(None)


def bfs_with_summary(
    domain: D,
    initial_state: S,
    is_goal: GoalFn,
    expand: ExpandFn,
    *,
    config: Optional[SearchConfig] = None,
    should_stop: Optional[Callable[[], bool]] = None,
) -> Tuple[Optional[List[S]], SearchSummary]:
    """Run breadth-first search and also return the run's counters.

    Arguments are the same as for ``breadth_first_search``.

    Returns:
        A tuple ``(path, summary)`` where ``path`` is the start-to-goal state
        list or ``None``.

    Raises:
        SearchAborted: If ``should_stop`` returns true or
            ``config.max_expansions`` is exhausted.
    """
    cfg = SEARCH_CONFIG if config is None else config
    logger.debug(
        f"Starting BFS from {initial_state!r} "
        f"(visited_check={cfg.visited_check.name}, max_expansions={cfg.max_expansions})"
    )
    path, summary = _run_bfs(domain, initial_state, is_goal, expand, cfg, should_stop)
    if path is None:
        logger.debug(
            f"BFS exhausted the state space after {summary.expanded} expansions"
        )
    else:
        logger.debug(
            f"BFS found a path of {summary.path_length} steps after "
            f"{summary.expanded} expansions ({summary.tree_size} tree nodes)"
        )
    return path, summary


def breadth_first_search(
    domain: D,
    initial_state: S,
    is_goal: GoalFn,
    expand: ExpandFn,
    *,
    config: Optional[SearchConfig] = None,
    should_stop: Optional[Callable[[], bool]] = None,
) -> Optional[List[S]]:
    """Find one shortest path from ``initial_state`` to a goal state.

    States are dequeued in non-decreasing distance from the start, so the
    first goal dequeued ends a fewest-steps path. Among equally short paths
    the one returned is fixed by FIFO order and the order ``expand`` yields
    successors in.

    Args:
        domain: Read-only context forwarded unchanged to both callbacks.
        initial_state: Start state. Must be hashable.
        is_goal: ``is_goal(domain, state) -> bool``. Checked on every dequeued
            state before it is expanded, the start state included.
        expand: ``expand(domain, state) -> iterable`` of successors. May yield
            duplicates or already visited states.
        config: Optional ``SearchConfig``; defaults to ``SEARCH_CONFIG``.
        should_stop: Optional zero-argument callable polled once per frontier
            pop; a true result aborts the search.

    Returns:
        The list of states from ``initial_state`` to the goal, both inclusive,
        or ``None`` if no goal is reachable. If ``initial_state`` is a goal the
        result is ``[initial_state]`` and ``expand`` is never called.

    Raises:
        SearchAborted: Only when ``should_stop`` or ``config.max_expansions``
            is used and triggers. Exceptions from the callbacks propagate
            unchanged.
    """
    path, _ = bfs_with_summary(
        domain,
        initial_state,
        is_goal,
        expand,
        config=config,
        should_stop=should_stop,
    )
    return path
