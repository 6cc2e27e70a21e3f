import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper import api
from maze_stepper.core.grid import Cell, Grid
from maze_stepper.core.errors import InvalidDimensions


class TestApi(unittest.TestCase):
    def test_create_rejects_zero(self):
        with self.assertRaises(InvalidDimensions):
            api.create(0, 5)
        with self.assertRaises(InvalidDimensions):
            api.create(5, 0)

    def test_fresh_handle(self):
        handle = api.create(5, 5, seed=1)
        self.assertEqual(api.width(handle), 5)
        self.assertEqual(api.height(handle), 5)
        self.assertEqual(api.head_index(handle), 0)
        self.assertFalse(api.is_complete(handle))
        self.assertEqual(api.cell_at(handle, 0), Cell(True, Grid.ALL_WALLS))
        self.assertEqual(api.cell_at(handle, 24), Cell(False, Grid.ALL_WALLS))
        with self.assertRaises(IndexError):
            api.cell_at(handle, 25)

    def test_animation_loop(self):
        handle = api.create(6, 4, seed=8)
        frames = 0
        while not api.is_complete(handle):
            api.step(handle)
            frames += 1
        self.assertEqual(frames, handle.step_count)

        cells = api.cells(handle)
        self.assertEqual(len(cells), 24)
        self.assertTrue(all(c.visited for c in cells))

        arr = api.cells_array(handle)
        self.assertEqual(arr.shape, (4, 6))
        self.assertTrue(((arr & Grid.VISITED) != 0).all())
        self.assertEqual([int(v) & Grid.ALL_WALLS for v in arr.flatten()],
                         [c.wall_mask for c in cells])

        self.assertEqual(api.render(handle), ("◼" * 6 + "\n") * 4)

    def test_step_is_noop_once_complete(self):
        handle = api.create(1, 1)
        api.step(handle)
        self.assertTrue(api.is_complete(handle))
        api.step(handle)
        self.assertEqual(api.head_index(handle), 0)
        self.assertEqual(api.cells(handle), [Cell(True, Grid.ALL_WALLS)])


if __name__ == '__main__':
    unittest.main()
