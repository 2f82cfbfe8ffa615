"""YAML loader for search problems.

A problem file is a mapping with a ``kind`` key selecting the domain adapter
plus kind-specific keys::

    name: small_maze
    kind: grid
    layout: |
      ######
      #S..G#
      ######
    search:
      visited_check: enqueue

    kind: counter
    start: 0
    target: 5
    steps: [1]

    kind: graph
    directed: true
    edges: [[A, B], [B, C]]
    start: A
    goals: [C]

The optional ``search`` mapping is passed to ``SearchConfig.from_dict``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from gsearch.config import SearchConfig
from gsearch.domains.counter import CounterDomain
from gsearch.domains.graph import GraphDomain
from gsearch.domains.grid import WALL, GridMaze
from gsearch.logging import get_logger
from gsearch.problem import Problem

logger = get_logger(__name__)

_COMMON_KEYS = {"name", "kind", "search"}


def _check_keys(data: Dict[str, Any], allowed: set, kind: str) -> None:
    for key in data:
        if key not in allowed and key not in _COMMON_KEYS:
            raise ValueError(f"Unrecognized key '{key}' in {kind} problem")


def _require_int(data: Dict[str, Any], key: str, kind: str) -> int:
    if key not in data:
        raise ValueError(f"{kind} problem must define '{key}'")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    return value


def _optional_int(data: Dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    return value


def _require_node(value: Any, key: str) -> None:
    # Graph nodes in problem files are YAML scalars
    if not isinstance(value, (str, int, float)):
        raise ValueError(f"Graph node in '{key}' must be a scalar name, got {value!r}")


def _build_grid(data: Dict[str, Any], name: str, config: Optional[SearchConfig]) -> Problem:
    _check_keys(data, {"layout", "cells", "start"}, "grid")
    if ("layout" in data) == ("cells" in data):
        raise ValueError("grid problem must define exactly one of 'layout' or 'cells'")

    if "layout" in data:
        if not isinstance(data["layout"], str):
            raise ValueError("'layout' must be a string")
        maze, layout_start = GridMaze.from_text(data["layout"])
    else:
        if not isinstance(data["cells"], list):
            raise ValueError("'cells' must be a list of rows")
        maze, layout_start = GridMaze.from_rows(data["cells"]), None

    raw_start = data.get("start")
    if raw_start is not None and layout_start is not None:
        raise ValueError("grid start is given both as 'start' and as an 'S' cell")
    if raw_start is None:
        if layout_start is None:
            raise ValueError("grid problem must define 'start' or mark an 'S' cell")
        start = layout_start
    else:
        if (
            not isinstance(raw_start, list)
            or len(raw_start) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in raw_start)
        ):
            raise ValueError(f"'start' must be a pair of integers [x, y], got {raw_start!r}")
        start = (raw_start[0], raw_start[1])

    if not maze.in_bounds(start):
        raise ValueError(f"Start {start} is outside the {maze.width}x{maze.height} grid")
    if maze.cell(start) == WALL:
        raise ValueError(f"Start {start} is a wall cell")

    return Problem(name, maze, start, GridMaze.is_goal, GridMaze.expand, config)


def _build_counter(
    data: Dict[str, Any], name: str, config: Optional[SearchConfig]
) -> Problem:
    _check_keys(data, {"start", "target", "steps", "lower_bound", "upper_bound"}, "counter")
    start = _require_int(data, "start", "counter")
    target = _require_int(data, "target", "counter")
    steps = data.get("steps", [1])
    if not isinstance(steps, list) or not all(
        isinstance(s, int) and not isinstance(s, bool) for s in steps
    ):
        raise ValueError(f"'steps' must be a list of integers, got {steps!r}")
    domain = CounterDomain(
        target=target,
        steps=tuple(steps),
        lower_bound=_optional_int(data, "lower_bound"),
        upper_bound=_optional_int(data, "upper_bound"),
    )
    return Problem(name, domain, start, CounterDomain.is_goal, CounterDomain.expand, config)


def _build_graph(data: Dict[str, Any], name: str, config: Optional[SearchConfig]) -> Problem:
    _check_keys(data, {"edges", "nodes", "start", "goals", "directed"}, "graph")
    edges = data.get("edges", [])
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")
    for entry in edges:
        if not isinstance(entry, list) or len(entry) != 2:
            raise ValueError(f"Each edge must be a [source, target] pair, got {entry!r}")
        for node in entry:
            _require_node(node, "edges")
    nodes = data.get("nodes") or []
    if not isinstance(nodes, list):
        raise ValueError(f"'nodes' must be a list, got {nodes!r}")
    for node in nodes:
        _require_node(node, "nodes")
    if "start" not in data:
        raise ValueError("graph problem must define 'start'")
    _require_node(data["start"], "start")
    goals = data.get("goals")
    if not isinstance(goals, list):
        raise ValueError("graph problem must define 'goals' as a list")
    for goal in goals:
        _require_node(goal, "goals")
    directed = data.get("directed", True)
    if not isinstance(directed, bool):
        raise ValueError(f"'directed' must be a boolean, got {directed!r}")

    domain = GraphDomain.from_edges(
        [tuple(entry) for entry in edges],
        goals,
        directed=directed,
        nodes=nodes,
    )
    domain.check_node(data["start"])
    return Problem(
        name, domain, data["start"], GraphDomain.is_goal, GraphDomain.expand, config
    )


_BUILDERS: Dict[str, Callable[[Dict[str, Any], str, Optional[SearchConfig]], Problem]] = {
    "grid": _build_grid,
    "counter": _build_counter,
    "graph": _build_graph,
}


def load_problem_yaml(yaml_str: str, default_name: str = "problem") -> Problem:
    """Parse a problem YAML string into a ``Problem``.

    Args:
        yaml_str: YAML document text.
        default_name: Name used when the document has no ``name`` key.

    Raises:
        ValueError: If the document is malformed.
        KeyError: If a graph start or goal node is not part of the graph.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    kind = data.get("kind")
    if kind is None:
        raise ValueError("Problem YAML must define 'kind'")
    builder = _BUILDERS.get(str(kind).lower())
    if builder is None:
        valid = ", ".join(sorted(_BUILDERS))
        raise ValueError(f"Unknown problem kind '{kind}'. Valid kinds are: {valid}")

    config: Optional[SearchConfig] = None
    if data.get("search") is not None:
        if not isinstance(data["search"], dict):
            raise ValueError("'search' must be a mapping")
        config = SearchConfig.from_dict(data["search"])

    name = str(data.get("name", default_name))
    problem = builder(data, name, config)
    logger.debug(f"Loaded {kind} problem '{name}' starting at {problem.initial_state!r}")
    return problem


def load_problem(path: Path) -> Problem:
    """Read and parse a problem file; the file stem is the default name."""
    path = Path(path)
    return load_problem_yaml(path.read_text(), default_name=path.stem)
