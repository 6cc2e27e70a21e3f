import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# No window needed for offscreen drawing
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from maze_stepper.algo.dfs import MazeGenerator
from maze_stepper.viz.renderer import Renderer


class TestRenderer(unittest.TestCase):
    def make_renderer(self, w=4, h=4, **kwargs):
        gen = MazeGenerator(w, h, seed=21)
        # 200px screen, 40px padding -> 30px cells starting at (40, 40)
        renderer = Renderer(gen, width=200, height=200, **kwargs)
        renderer.fit_to_screen()
        return gen, renderer

    def pixel_at_cell(self, surface, row, column):
        color = surface.get_at((40 + column * 30 + 15, 40 + row * 30 + 15))
        return (color.r, color.g, color.b)

    def test_fit_to_screen(self):
        _, renderer = self.make_renderer()
        self.assertAlmostEqual(renderer.cell_size, 30.0)
        self.assertAlmostEqual(renderer.offset_x, 40.0)
        self.assertAlmostEqual(renderer.offset_y, 40.0)

    def test_draw_head_and_unvisited(self):
        gen, renderer = self.make_renderer()
        surface = pygame.Surface((200, 200))
        renderer.draw_grid(surface)

        self.assertEqual(self.pixel_at_cell(surface, 0, 0), Renderer.COLOR_HEAD)
        self.assertEqual(self.pixel_at_cell(surface, 3, 3), Renderer.COLOR_BG)

    def test_draw_completed_maze(self):
        gen, renderer = self.make_renderer()
        gen.run_all()
        surface = pygame.Surface((200, 200))
        renderer.draw_grid(surface)

        for row in range(4):
            for column in range(4):
                self.assertEqual(self.pixel_at_cell(surface, row, column), Renderer.COLOR_VISITED)

        # Outer top wall of the first cell
        color = surface.get_at((55, 40))
        self.assertEqual((color.r, color.g, color.b), Renderer.COLOR_WALL)

    def test_advance_steps_per_frame(self):
        gen, renderer = self.make_renderer(w=5, h=5, steps_per_frame=3)
        renderer.advance()
        self.assertEqual(gen.step_count, 3)

        renderer.paused = True
        renderer.advance()
        self.assertEqual(gen.step_count, 3)

    def test_advance_stops_at_completion(self):
        gen, renderer = self.make_renderer(w=2, h=1, steps_per_frame=10)
        renderer.advance()
        self.assertTrue(gen.is_complete)
        self.assertEqual(gen.step_count, 2)


if __name__ == '__main__':
    unittest.main()
