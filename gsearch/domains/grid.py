"""Grid maze state space.

A maze is a rectangular grid of cells stored as a read-only ``numpy`` array
indexed ``[y, x]``. States are ``(x, y)`` positions. Moves go to the four
orthogonal neighbours that lie inside the grid and are not walls.

Text form, one row per line::

    ######
    #.#..#
    #....#
    #.##G#
    #...##
    ###.##
    #...S#
    ######

``#`` is a wall, ``.`` an open cell, ``G`` a goal and ``S`` an open start cell.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

#: Cell values.
OPEN = 0
WALL = 1
GOAL = 2

Position = Tuple[int, int]

_SYMBOL_TO_CELL = {".": OPEN, "#": WALL, "G": GOAL, "S": OPEN}
_CELL_TO_SYMBOL = {OPEN: ".", WALL: "#", GOAL: "G"}

_CELL_VALUES = (OPEN, WALL, GOAL)


def _check_row(row: Sequence[int], y: int) -> List[int]:
    """Return ``row`` as a list after checking every value is a cell value.

    Runs before the int8 conversion, so out-of-range and float values are
    rejected rather than wrapped or truncated.
    """
    if not isinstance(row, (list, tuple, np.ndarray)):
        raise ValueError(f"Grid row {y} must be a sequence of cells, got {row!r}.")
    for value in row:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"Grid cells must be integers, got {value!r} in row {y}.")
        if value not in _CELL_VALUES:
            raise ValueError(
                f"Grid cells must be {OPEN} (open), {WALL} (wall) or {GOAL} (goal), "
                f"got {value!r} in row {y}."
            )
    return list(row)


class GridMaze:
    """Read-only grid maze usable as a breadth-first search domain.

    ``GridMaze.is_goal`` and ``GridMaze.expand`` have the ``(domain, state)``
    callback signature and can be passed to the engine directly::

        breadth_first_search(maze, start, GridMaze.is_goal, GridMaze.expand)

    Attributes:
        cells: 2-D int8 array of ``OPEN``/``WALL``/``GOAL`` values, ``[y, x]``.
    """

    __slots__ = ("cells", "_passable")

    def __init__(self, cells: Union[np.ndarray, Iterable[Sequence[int]]]) -> None:
        if isinstance(cells, np.ndarray):
            if cells.dtype == np.bool_ or not np.issubdtype(cells.dtype, np.integer):
                raise ValueError(f"Grid cells must be integers, got dtype {cells.dtype}.")
            if not np.isin(cells, _CELL_VALUES).all():
                raise ValueError(
                    f"Grid cells must be {OPEN} (open), {WALL} (wall) or {GOAL} (goal)."
                )
            arr = cells.astype(np.int8, copy=True)
        else:
            rows = [_check_row(row, y) for y, row in enumerate(cells)]
            if len({len(row) for row in rows}) > 1:
                raise ValueError("Grid rows must all have the same length.")
            arr = np.array(rows, dtype=np.int8)

        if arr.ndim != 2 or arr.size == 0:
            raise ValueError("Grid must be a non-empty 2-D array of cells.")

        arr.setflags(write=False)
        self.cells = arr
        # Plain nested lists are much faster than numpy scalar lookups in expand()
        self._passable: List[List[bool]] = (arr != WALL).tolist()

    def __repr__(self) -> str:
        return f"GridMaze(width={self.width}, height={self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridMaze):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    @property
    def shape(self) -> Tuple[int, int]:
        """Return ``(height, width)``."""
        return self.cells.shape  # type: ignore[return-value]

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, pos: Position) -> int:
        """Return the cell value at ``pos``.

        Raises:
            IndexError: If ``pos`` lies outside the grid.
        """
        if not self.in_bounds(pos):
            raise IndexError(f"Position {pos} is outside a {self.width}x{self.height} grid.")
        x, y = pos
        return int(self.cells[y, x])

    def is_goal(self, pos: Position) -> bool:
        return self.cell(pos) == GOAL

    def expand(self, pos: Position) -> List[Position]:
        """Return open neighbours of ``pos`` in left, up, right, down order."""
        x, y = pos
        width, height = self.width, self.height
        passable = self._passable
        successors = []
        for nx_, ny in ((x - 1, y), (x, y - 1), (x + 1, y), (x, y + 1)):
            if 0 <= nx_ < width and 0 <= ny < height and passable[ny][nx_]:
                successors.append((nx_, ny))
        return successors

    def goals(self) -> List[Position]:
        """Return all goal positions in row-major order."""
        return [(int(x), int(y)) for y, x in np.argwhere(self.cells == GOAL)]

    def with_cell(self, pos: Position, value: int) -> "GridMaze":
        """Return a copy of the maze with one cell replaced."""
        self.cell(pos)
        updated = self.cells.copy()
        x, y = pos
        updated[y, x] = value
        return GridMaze(updated)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "GridMaze":
        return cls(rows)

    @classmethod
    def from_text(cls, text: str) -> Tuple["GridMaze", Optional[Position]]:
        """Parse the text form of a maze.

        Returns:
            A tuple ``(maze, start)`` where ``start`` is the position of the
            ``S`` cell, or ``None`` when the layout has none.

        Raises:
            ValueError: On unknown symbols, ragged rows or several ``S`` cells.
        """
        lines = [line.rstrip() for line in text.strip("\n").splitlines()]
        rows: List[List[int]] = []
        start: Optional[Position] = None
        for y, line in enumerate(lines):
            row = []
            for x, symbol in enumerate(line):
                if symbol not in _SYMBOL_TO_CELL:
                    raise ValueError(
                        f"Unknown maze symbol {symbol!r} at line {y + 1}, column {x + 1}"
                    )
                if symbol == "S":
                    if start is not None:
                        raise ValueError("Maze layout has more than one start cell 'S'")
                    start = (x, y)
                row.append(_SYMBOL_TO_CELL[symbol])
            rows.append(row)
        return cls(rows), start

    def to_text(self) -> str:
        return "\n".join(
            "".join(_CELL_TO_SYMBOL[int(value)] for value in row) for row in self.cells
        )

    def render(self, path: Optional[Sequence[Position]] = None) -> str:
        """Return the text form with ``path`` drawn over it.

        The first path cell is drawn as ``S``, goal cells keep ``G`` and the
        remaining path cells are drawn as ``*``.
        """
        grid = [[_CELL_TO_SYMBOL[int(value)] for value in row] for row in self.cells]
        for step, (x, y) in enumerate(path or ()):
            if step == 0:
                grid[y][x] = "S"
            elif grid[y][x] != "G":
                grid[y][x] = "*"
        return "\n".join("".join(row) for row in grid)


def random_maze(
    width: int,
    height: int,
    wall_ratio: float = 0.3,
    seed: Optional[int] = None,
) -> Tuple[GridMaze, Position]:
    """Generate a random walled maze with one goal.

    The border is solid wall. Interior cells become walls with probability
    ``wall_ratio``; a start and a goal are then placed on two distinct open
    interior cells. The goal is not guaranteed to be reachable.

    Args:
        width: Grid width including the border (at least 3).
        height: Grid height including the border (at least 3).
        wall_ratio: Probability that an interior cell is a wall, in ``[0, 1)``.
        seed: Seed for ``numpy.random.default_rng``.

    Returns:
        A tuple ``(maze, start)``.
    """
    if width < 3 or height < 3 or (width - 2) * (height - 2) < 2:
        raise ValueError("Random mazes need at least two interior cells.")
    if not 0.0 <= wall_ratio < 1.0:
        raise ValueError(f"wall_ratio must be in [0, 1), got {wall_ratio}")

    rng = np.random.default_rng(seed)
    cells = np.full((height, width), WALL, dtype=np.int8)
    interior = np.where(rng.random((height - 2, width - 2)) < wall_ratio, WALL, OPEN)
    cells[1:-1, 1:-1] = interior

    open_cells = np.argwhere(cells == OPEN)
    if len(open_cells) < 2:
        # Carve two cells so there is always a start and a goal
        cells[1, 1] = OPEN
        cells[height - 2, width - 2] = OPEN
        open_cells = np.argwhere(cells == OPEN)

    start_idx, goal_idx = rng.choice(len(open_cells), size=2, replace=False)
    sy, sx = open_cells[start_idx]
    gy, gx = open_cells[goal_idx]
    cells[gy, gx] = GOAL
    return GridMaze(cells), (int(sx), int(sy))
