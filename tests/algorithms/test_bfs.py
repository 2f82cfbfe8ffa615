import logging
from collections import Counter

import networkx as nx
import pytest

from gsearch.algorithms.bfs import (
    SearchAborted,
    bfs_with_summary,
    breadth_first_search,
)
from gsearch.config import SearchConfig
from gsearch.domains.graph import GraphDomain
from gsearch.domains.grid import GridMaze, random_maze
from gsearch.types.base import VisitedCheck

ENQUEUE = SearchConfig(visited_check=VisitedCheck.ENQUEUE)


def chain_goal(_, x):
    return x == 5


def chain_expand(_, x):
    return [x + 1]


def diamond_expand(_, node):
    return {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}[node]


def test_linear_chain():
    domain = [0, 0, 0, 0, 0, 0]
    res = breadth_first_search(domain, 0, chain_goal, chain_expand)
    assert res == [0, 1, 2, 3, 4, 5]


def test_maze_shortest_path(maze, maze_start, maze_path):
    res = breadth_first_search(maze, maze_start, GridMaze.is_goal, GridMaze.expand)
    assert res == maze_path


def test_maze_no_path(blocked_maze, maze_start):
    res = breadth_first_search(
        blocked_maze, maze_start, GridMaze.is_goal, GridMaze.expand
    )
    assert res is None


def test_initial_state_is_goal_never_expands():
    def expand(_, x):
        raise AssertionError("expand must not be called")

    assert breadth_first_search(None, 7, lambda _, x: x == 7, expand) == [7]


def test_dead_end_start_returns_none():
    calls = []

    def expand(_, x):
        calls.append(x)
        return []

    assert breadth_first_search(None, "s", lambda _, x: False, expand) is None
    assert calls == ["s"]


def test_cycle_terminates_and_expands_each_state_once():
    expansions = Counter()

    def expand(_, x):
        expansions[x] += 1
        # 0 -> 1 -> 2 -> 3 -> 0 plus a chord back to 1
        return [(x + 1) % 4, 1]

    res = breadth_first_search(None, 0, lambda _, x: x == 99, expand)

    assert res is None
    assert set(expansions) == {0, 1, 2, 3}
    assert all(count == 1 for count in expansions.values())


def test_duplicate_successors_checked_once():
    goal_checks = Counter()

    def is_goal(_, x):
        goal_checks[x] += 1
        return x == 4

    def expand(_, x):
        return [x + 1, x + 1, x, x + 1]

    res = breadth_first_search(None, 0, is_goal, expand)

    assert res == [0, 1, 2, 3, 4]
    assert all(count == 1 for count in goal_checks.values())


def test_tie_break_follows_expand_order():
    res = breadth_first_search(None, "A", lambda _, n: n == "D", diamond_expand)
    assert res == ["A", "B", "D"]

    def reversed_expand(domain, node):
        return list(reversed(diamond_expand(domain, node)))

    res = breadth_first_search(None, "A", lambda _, n: n == "D", reversed_expand)
    assert res == ["A", "C", "D"]


def test_domain_is_passed_through_unchanged():
    domain = {"limit": 3}
    seen = []

    def is_goal(d, x):
        seen.append(d)
        return x == d["limit"]

    def expand(d, x):
        seen.append(d)
        return [x + 1]

    assert breadth_first_search(domain, 0, is_goal, expand) == [0, 1, 2, 3]
    assert all(d is domain for d in seen)
    assert domain == {"limit": 3}


def test_callback_exceptions_propagate():
    def expand(_, x):
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        breadth_first_search(None, 0, lambda _, x: False, expand)

    def is_goal(_, x):
        if x == 2:
            raise KeyError("bad state")
        return False

    with pytest.raises(KeyError):
        breadth_first_search(None, 0, is_goal, chain_expand)


def test_expand_may_return_generator():
    def expand(_, x):
        yield x + 1
        yield x + 2

    res = breadth_first_search(None, 0, lambda _, x: x == 5, expand)
    assert res == [0, 1, 3, 5]


def test_long_chain():
    res = breadth_first_search(None, 0, lambda _, x: x == 10_000, chain_expand)
    assert res == list(range(10_001))


@pytest.mark.parametrize("seed", range(10))
def test_paths_are_valid_and_shortest_on_random_graphs(seed):
    g = nx.gnp_random_graph(40, 0.08, seed=seed, directed=True)
    goals = {35, 36, 37, 38, 39}
    domain = GraphDomain(g, goals)

    res = breadth_first_search(domain, 0, GraphDomain.is_goal, GraphDomain.expand)

    lengths = nx.single_source_shortest_path_length(g, 0)
    reachable_goals = [lengths[n] for n in goals if n in lengths]
    if not reachable_goals:
        assert res is None
        return

    assert res is not None
    assert res[0] == 0
    assert res[-1] in goals
    assert len(res) - 1 == min(reachable_goals)
    for src, dst in zip(res, res[1:]):
        assert dst in list(g.successors(src))


@pytest.mark.parametrize("seed", range(20))
def test_enqueue_check_returns_same_path_on_random_mazes(seed):
    maze, start = random_maze(15, 12, wall_ratio=0.3, seed=seed)
    default = breadth_first_search(maze, start, GridMaze.is_goal, GridMaze.expand)
    early = breadth_first_search(
        maze, start, GridMaze.is_goal, GridMaze.expand, config=ENQUEUE
    )
    assert default == early


@pytest.mark.parametrize("seed", range(10))
def test_enqueue_check_returns_same_path_on_random_graphs(seed):
    g = nx.gnp_random_graph(30, 0.15, seed=seed, directed=True)
    domain = GraphDomain(g, {29})
    default = breadth_first_search(domain, 0, GraphDomain.is_goal, GraphDomain.expand)
    early = breadth_first_search(
        domain, 0, GraphDomain.is_goal, GraphDomain.expand, config=ENQUEUE
    )
    assert default == early


def test_summary_linear_chain():
    path, summary = bfs_with_summary(None, 0, chain_goal, chain_expand)

    assert path == [0, 1, 2, 3, 4, 5]
    assert summary.found is True
    assert summary.path_length == 5
    assert summary.expanded == 5
    assert summary.generated == 5
    assert summary.duplicates_skipped == 0
    assert summary.max_frontier == 1
    assert summary.tree_size == 6


def test_summary_counts_duplicates_per_visited_check():
    never = lambda _, n: False  # noqa: E731

    path, summary = bfs_with_summary(None, "A", never, diamond_expand)
    assert path is None
    assert summary.found is False
    assert summary.path_length is None
    assert summary.expanded == 4
    assert summary.generated == 4
    assert summary.duplicates_skipped == 1
    assert summary.max_frontier == 2

    path, summary = bfs_with_summary(None, "A", never, diamond_expand, config=ENQUEUE)
    assert path is None
    assert summary.expanded == 4
    assert summary.generated == 3
    assert summary.duplicates_skipped == 0


def test_summary_maze(maze, maze_start):
    path, summary = bfs_with_summary(
        maze, maze_start, GridMaze.is_goal, GridMaze.expand
    )
    assert summary.found
    assert summary.path_length == 11
    assert summary.tree_size == summary.generated + 1
    assert summary.expanded >= summary.path_length


def test_max_expansions_aborts():
    config = SearchConfig(max_expansions=3)
    with pytest.raises(SearchAborted, match="expansion limit") as exc_info:
        breadth_first_search(
            None, 0, lambda _, x: x == 100, chain_expand, config=config
        )
    assert exc_info.value.summary.expanded == 3
    assert exc_info.value.summary.found is False


def test_max_expansions_allows_goal_within_limit():
    config = SearchConfig(max_expansions=3)
    res = breadth_first_search(None, 0, lambda _, x: x == 3, chain_expand, config=config)
    assert res == [0, 1, 2, 3]


def test_should_stop_is_polled_per_pop():
    polls = []

    def should_stop():
        polls.append(True)
        return len(polls) > 2

    with pytest.raises(SearchAborted) as exc_info:
        breadth_first_search(
            None, 0, lambda _, x: False, chain_expand, should_stop=should_stop
        )

    assert isinstance(exc_info.value, RuntimeError)
    assert len(polls) == 3
    assert exc_info.value.summary.expanded == 2


def test_debug_logging_reports_outcome(caplog):
    caplog.set_level(logging.DEBUG, logger="gsearch.algorithms.bfs")
    breadth_first_search(None, 0, chain_goal, chain_expand)
    breadth_first_search(None, 0, lambda _, x: False, lambda _, x: [])

    messages = [r.getMessage() for r in caplog.records]
    assert any("found a path of 5 steps" in m for m in messages)
    assert any("exhausted the state space" in m for m in messages)
