import logging
import random
from typing import List, Optional, Tuple

import numpy as np

from maze_stepper.core.errors import InternalInvariantViolation
from maze_stepper.core.grid import Cell, Grid
from maze_stepper.algo.base import Generator

logger = logging.getLogger(__name__)


class MazeGenerator(Generator):
    """
    Randomized depth-first backtracker that advances one cell (or one
    backtrack) per call to step(), so a render loop can animate it.

    The depth-first path is kept as an explicit stack; the top of the stack
    is always the head. Generation is complete exactly when every cell has
    been visited.
    """

    def __init__(self, width: int, height: int, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        super().__init__(Grid(width, height), seed=seed, rng=rng)

        # Start at index 0 (top-left)
        self.head = 0
        self.grid.set_visited(self.head)
        self._stack: List[int] = [self.head]
        self._carves: List[Tuple[int, int]] = []

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def total_cells(self) -> int:
        return len(self.grid)

    @property
    def visited_count(self) -> int:
        return self.grid.visited_count

    @property
    def is_complete(self) -> bool:
        return self.grid.visited_count == len(self.grid)

    @property
    def stack(self) -> Tuple[int, ...]:
        return tuple(self._stack)

    @property
    def carves(self) -> Tuple[Tuple[int, int], ...]:
        """Carved edges as (from, to) index pairs, in carve order."""
        return tuple(self._carves)

    def step(self) -> None:
        """
        Moves the head forward into a random unvisited neighbor, or back one
        cell on a dead end. A cell carved into becomes visited on the
        following step, when it is processed as the head.
        """
        if self.is_complete:
            return

        self.grid.set_visited(self.head)
        self.step_count += 1

        if self.is_complete:
            # Last cell reached: it stays the head, nothing to carve or pop
            logger.debug("Maze %dx%d complete after %d steps (%d edges carved)",
                         self.width, self.height, self.step_count, len(self._carves))
            return

        nxt = self._pick_unvisited(self.head)
        if nxt is not None:
            self.grid.carve(self.head, nxt)
            self._carves.append((self.head, nxt))
            self.head = nxt
            self._stack.append(nxt)
        else:
            # Dead end: the start cell is never popped while cells remain
            if len(self._stack) < 2:
                raise InternalInvariantViolation(
                    f"Backtrack from {self.head} with {self.visited_count}/{self.total_cells} cells visited")
            self._stack.pop()
            self.head = self._stack[-1]

    def _pick_unvisited(self, index: int) -> Optional[int]:
        # Shuffle then take the first valid candidate: a uniform pick among the valid ones
        neighbors = self.grid.candidates(index)
        self.rng.shuffle(neighbors)

        for row, column in neighbors:
            if self.grid.in_bounds(row, column):
                idx = self.grid.index_of(row, column)
                if not self.grid.is_visited(idx):
                    return idx
        return None

    def cell_at(self, index: int) -> Cell:
        return self.grid.cell(index)

    def cells(self) -> List[Cell]:
        return self.grid.cells_view()

    def to_numpy(self) -> np.ndarray:
        return self.grid.to_numpy()

    def render(self) -> str:
        return self.grid.render()

    def __str__(self) -> str:
        return self.render()
