"""
Handle-style entry points for host UI loops.

A handle is simply the MazeGenerator instance; these functions exist so a
render loop can drive a maze without knowing the class layout.
"""
import random
from typing import List, Optional

import numpy as np

from maze_stepper.algo.dfs import MazeGenerator
from maze_stepper.core.grid import Cell

MazeHandle = MazeGenerator


def create(width: int, height: int, seed: Optional[int] = None,
           rng: Optional[random.Random] = None) -> MazeHandle:
    return MazeGenerator(width, height, seed=seed, rng=rng)


def step(handle: MazeHandle) -> None:
    handle.step()


def is_complete(handle: MazeHandle) -> bool:
    return handle.is_complete


def head_index(handle: MazeHandle) -> int:
    return handle.head


def cell_at(handle: MazeHandle, index: int) -> Cell:
    return handle.cell_at(index)


def cells(handle: MazeHandle) -> List[Cell]:
    return handle.cells()


def cells_array(handle: MazeHandle) -> np.ndarray:
    """Raw cell bytes (wall bits plus Grid.VISITED) as a (height, width) uint8 array."""
    return handle.to_numpy()


def width(handle: MazeHandle) -> int:
    return handle.width


def height(handle: MazeHandle) -> int:
    return handle.height


def render(handle: MazeHandle) -> str:
    return handle.render()
