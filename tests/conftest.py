"""Global pytest configuration and shared maze fixtures."""

from __future__ import annotations

import pytest

from gsearch.domains.grid import OPEN, GridMaze

# Walls are 1, open cells 0, the goal 2. Indexed [y][x].
#
#   x: 012345
#   y0 ######
#   y1 #.#..#
#   y2 #....#
#   y3 #.##G#
#   y4 #...##
#   y5 ###.##
#   y6 #...S#
#   y7 ######
MAZE_ROWS = [
    [1, 1, 1, 1, 1, 1],
    [1, 0, 1, 0, 0, 1],
    [1, 0, 0, 0, 0, 1],
    [1, 0, 1, 1, 2, 1],
    [1, 0, 0, 0, 1, 1],
    [1, 1, 1, 0, 1, 1],
    [1, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1],
]

MAZE_START = (4, 6)

MAZE_PATH = [
    (4, 6),
    (3, 6),
    (3, 5),
    (3, 4),
    (2, 4),
    (1, 4),
    (1, 3),
    (1, 2),
    (2, 2),
    (3, 2),
    (4, 2),
    (4, 3),
]


@pytest.fixture
def maze_rows():
    return [list(row) for row in MAZE_ROWS]


@pytest.fixture
def maze():
    return GridMaze.from_rows(MAZE_ROWS)


@pytest.fixture
def blocked_maze(maze):
    # Goal cell turned into a plain open cell
    return maze.with_cell((4, 3), OPEN)


@pytest.fixture
def maze_start():
    return MAZE_START


@pytest.fixture
def maze_path():
    return list(MAZE_PATH)
