import pygame

from maze_stepper.algo.dfs import MazeGenerator
from maze_stepper.core.grid import Grid


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_VISITED = (60, 100, 160) # Blue tint
    COLOR_HEAD = (255, 215, 0) # Gold
    COLOR_TEXT = (255, 255, 255)

    MIN_CELL_SIZE = 1.0
    MAX_CELL_SIZE = 200.0

    def __init__(self, generator: MazeGenerator, width=1280, height=720,
                 steps_per_frame=1, fps=60):
        self.generator = generator
        self.grid = generator.grid
        self.screen_width = width
        self.screen_height = height
        self.steps_per_frame = steps_per_frame
        self.fps = fps

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.paused = False
        self.clock = None
        self.surface = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = max(1, self.screen_width - (padding * 2))
        available_h = max(1, self.screen_height - (padding * 2))

        self.cell_size = min(available_w / self.grid.width, available_h / self.grid.height)

        self.offset_x = (self.screen_width - self.grid.width * self.cell_size) / 2
        self.offset_y = (self.screen_height - self.grid.height * self.cell_size) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Stepper - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def cell_rect(self, index: int):
        row, column = self.grid.position(index)
        px = int(column * self.cell_size + self.offset_x)
        py = int(row * self.cell_size + self.offset_y)
        size = int(self.cell_size) + 1
        return px, py, size

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_f:
                    self.fit_to_screen()

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(self.MIN_CELL_SIZE, min(self.MAX_CELL_SIZE, self.cell_size))

                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if event.buttons[0] or event.buttons[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_grid(self, surface=None):
        if surface is None:
            surface = self.surface
        surface.fill(self.COLOR_BG)
        screen_w, screen_h = surface.get_size()

        # Culling: visible row/column range
        start_col = max(0, int(-self.offset_x / self.cell_size))
        start_row = max(0, int(-self.offset_y / self.cell_size))
        end_col = min(self.grid.width, int((screen_w - self.offset_x) / self.cell_size) + 1)
        end_row = min(self.grid.height, int((screen_h - self.offset_y) / self.cell_size) + 1)

        cells = self.grid.cells
        width = self.grid.width

        # Pass 1 - Backgrounds
        for row in range(start_row, end_row):
            for column in range(start_col, end_col):
                idx = row * width + column
                if cells[idx] & Grid.VISITED:
                    px, py, size = self.cell_rect(idx)
                    pygame.draw.rect(surface, self.COLOR_VISITED, (px, py, size, size))

        if not self.generator.is_complete:
            px, py, size = self.cell_rect(self.generator.head)
            pygame.draw.rect(surface, self.COLOR_HEAD, (px, py, size, size))

        # Pass 2 - Walls (each cell owns its right and bottom edge)
        if self.cell_size > 4.0:
            for row in range(start_row, end_row):
                for column in range(start_col, end_col):
                    idx = row * width + column
                    cell = cells[idx]
                    px, py, size = self.cell_rect(idx)

                    if cell & Grid.DOWN:
                        pygame.draw.line(surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), 1)
                    if cell & Grid.RIGHT:
                        pygame.draw.line(surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 1)
                    if row == 0 and (cell & Grid.UP):
                        pygame.draw.line(surface, self.COLOR_WALL, (px, py), (px + size, py), 1)
                    if column == 0 and (cell & Grid.LEFT):
                        pygame.draw.line(surface, self.COLOR_WALL, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        if self.generator.is_complete:
            status = "Done"
        elif self.paused:
            status = "Paused"
        else:
            status = "Running"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height} ({self.generator.total_cells:,})",
            f"Visited: {self.generator.visited_count:,}",
            f"Status: {status}",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (10, 10 + i * 20))

    def advance(self):
        """One animation frame worth of generation."""
        if self.paused:
            return
        for _ in range(self.steps_per_frame):
            if self.generator.is_complete:
                break
            self.generator.step()

    def render_frame(self):
        self.draw_grid()
        self.draw_hud()

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.advance()
            self.render_frame()
            pygame.display.flip()

            self.clock.tick(self.fps)

        pygame.quit()
