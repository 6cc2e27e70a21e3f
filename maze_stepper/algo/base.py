import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from maze_stepper.core.grid import Grid


class Generator(ABC):
    def __init__(self, grid: Grid, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.grid = grid
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @property
    @abstractmethod
    def is_complete(self) -> bool:
        pass

    @abstractmethod
    def step(self) -> None:
        """
        Advances generation by one unit of work. Must be a no-op once
        is_complete is True.
        """
        pass

    def run(self) -> Iterator[str]:
        """
        Yields a status string after every step, for loops that want to
        interleave generation with drawing.
        """
        while not self.is_complete:
            self.step()
            yield f"Step {self.step_count}"
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
