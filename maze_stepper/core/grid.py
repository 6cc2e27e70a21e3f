import operator
from array import array
from typing import List, NamedTuple, Tuple

import numpy as np

from maze_stepper.core.errors import InvalidDimensions, InternalInvariantViolation


class Cell(NamedTuple):
    """Read-only snapshot of one cell: visited flag plus the raw 4-bit wall mask."""
    visited: bool
    wall_mask: int

    @property
    def up(self) -> bool:
        return bool(self.wall_mask & Grid.UP)

    @property
    def right(self) -> bool:
        return bool(self.wall_mask & Grid.RIGHT)

    @property
    def down(self) -> bool:
        return bool(self.wall_mask & Grid.DOWN)

    @property
    def left(self) -> bool:
        return bool(self.wall_mask & Grid.LEFT)

    @property
    def walls(self) -> Tuple[bool, bool, bool, bool]:
        return (self.up, self.right, self.down, self.left)


class Grid:
    # Bitmask Constants (set bit = wall present)
    UP    = 0b00000001
    RIGHT = 0b00000010
    DOWN  = 0b00000100
    LEFT  = 0b00001000

    # Flags
    VISITED = 0b00010000

    # All walls present by default (U|R|D|L) = 15
    ALL_WALLS = UP | RIGHT | DOWN | LEFT

    # Direction Helpers, as (row, column) deltas
    DELTAS = {UP: (-1, 0), RIGHT: (0, 1), DOWN: (1, 0), LEFT: (0, -1)}
    OPPOSITE = {UP: DOWN, DOWN: UP, RIGHT: LEFT, LEFT: RIGHT}

    GLYPH_UNVISITED = '◻'
    GLYPH_VISITED = '◼'

    __slots__ = ('width', 'height', 'cells', 'visited_count')

    def __init__(self, width: int, height: int):
        # Any integer type (numpy sizes included), but not bool
        if isinstance(width, bool) or isinstance(height, bool):
            raise InvalidDimensions(width, height)
        try:
            width, height = operator.index(width), operator.index(height)
        except TypeError:
            raise InvalidDimensions(width, height) from None
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        self.width = width
        self.height = height
        self.visited_count = 0
        # 'B' (unsigned char) -> 1 byte per cell, row-major
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    def __len__(self) -> int:
        return len(self.cells)

    def index_of(self, row: int, column: int) -> int:
        if self.in_bounds(row, column):
            return row * self.width + column
        raise IndexError(f"Cell (row={row}, column={column}) out of bounds")

    def position(self, index: int) -> Tuple[int, int]:
        return divmod(index, self.width)

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self.width

    def candidates(self, index: int) -> List[Tuple[int, int]]:
        """
        The four grid-adjacent coordinates of a cell in up, right, down, left order.
        Not bounds-checked: edge cells get coordinates outside the grid.
        """
        row, column = self.position(index)
        return [
            (row - 1, column),
            (row, column + 1),
            (row + 1, column),
            (row, column - 1),
        ]

    def is_visited(self, index: int) -> bool:
        return (self.cells[index] & self.VISITED) != 0

    def set_visited(self, index: int) -> bool:
        """Marks a cell visited. Returns True only if it was not visited before."""
        if self.cells[index] & self.VISITED:
            return False
        self.cells[index] |= self.VISITED
        self.visited_count += 1
        return True

    def has_wall(self, index: int, dir_bit: int) -> bool:
        return (self.cells[index] & dir_bit) != 0

    def wall_mask(self, index: int) -> int:
        return self.cells[index] & self.ALL_WALLS

    def direction_between(self, current: int, nxt: int) -> int:
        size = len(self.cells)
        if not (0 <= current < size and 0 <= nxt < size):
            raise InternalInvariantViolation(f"Carve between {current} and {nxt} leaves the grid")

        row1, col1 = self.position(current)
        row2, col2 = self.position(nxt)
        delta = (row2 - row1, col2 - col1)
        for dir_bit, d in self.DELTAS.items():
            if d == delta:
                return dir_bit
        raise InternalInvariantViolation(f"Cells {current} and {nxt} are not adjacent")

    def carve(self, current: int, nxt: int) -> int:
        """
        Removes the wall between two adjacent cells, on both sides.
        The side is taken from the row/column difference rather than the raw
        index offset, so a one-column grid never mistakes +1 for +width.
        Returns the direction bit opened on `current`.
        """
        dir_bit = self.direction_between(current, nxt)
        self.cells[current] &= ~dir_bit
        self.cells[nxt] &= ~self.OPPOSITE[dir_bit]
        return dir_bit

    def cell(self, index: int) -> Cell:
        if not 0 <= index < len(self.cells):
            raise IndexError(f"Cell index {index} out of range")
        val = self.cells[index]
        return Cell(bool(val & self.VISITED), val & self.ALL_WALLS)

    def cells_view(self) -> List[Cell]:
        return [Cell(bool(v & self.VISITED), v & self.ALL_WALLS) for v in self.cells]

    def to_numpy(self) -> np.ndarray:
        """Copy of the raw cell bytes shaped (height, width) for bulk rendering."""
        return np.frombuffer(self.cells.tobytes(), dtype=np.uint8).reshape(self.height, self.width).copy()

    def open_edge_count(self) -> int:
        # Only count RIGHT and DOWN so every internal edge is seen once
        count = 0
        for index, val in enumerate(self.cells):
            row, column = divmod(index, self.width)
            if not val & self.RIGHT and column < self.width - 1:
                count += 1
            if not val & self.DOWN and row < self.height - 1:
                count += 1
        return count

    def render(self, unvisited: str = GLYPH_UNVISITED, visited: str = GLYPH_VISITED) -> str:
        lines = []
        for row in range(self.height):
            start = row * self.width
            line = ''.join(visited if v & self.VISITED else unvisited
                           for v in self.cells[start:start + self.width])
            lines.append(line + '\n')
        return ''.join(lines)
