"""Example state spaces for the search engine.

Each adapter class exposes ``is_goal(self, state)`` and ``expand(self, state)``,
so the unbound methods match the engine's ``(domain, state)`` callbacks:
- ``GridMaze`` for 2-D mazes of walls, open cells and goals.
- ``CounterDomain`` for integer counters.
- ``GraphDomain`` for NetworkX graphs.
"""

from gsearch.domains.counter import CounterDomain
from gsearch.domains.graph import GraphDomain
from gsearch.domains.grid import GOAL, OPEN, WALL, GridMaze, random_maze

__all__ = [
    "CounterDomain",
    "GOAL",
    "GraphDomain",
    "GridMaze",
    "OPEN",
    "WALL",
    "random_maze",
]
