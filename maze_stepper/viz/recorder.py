import logging
import os

import cv2
import numpy as np
import pygame

from maze_stepper.algo.dfs import MazeGenerator
from maze_stepper.viz.renderer import Renderer

logger = logging.getLogger(__name__)


class GenerationRecorder:
    """
    Renders a stepping maze offscreen and writes one video frame per
    animation frame, so a generation run can be exported without a window.
    """

    # Container extension -> fourcc
    CODECS = {".mp4": "mp4v", ".avi": "MJPG"}

    def __init__(self, output_file: str, fps: int = 30, frame_size=(640, 480)):
        ext = os.path.splitext(output_file)[1].lower()
        if ext not in self.CODECS:
            raise ValueError(f"Unsupported video format '{ext}' (use one of {sorted(self.CODECS)})")
        self.output_file = output_file
        self.fps = fps
        self.frame_size = tuple(frame_size)
        self.fourcc = cv2.VideoWriter_fourcc(*self.CODECS[ext])
        self.writer = None
        self.frame_count = 0

    def _open(self):
        self.writer = cv2.VideoWriter(self.output_file, self.fourcc, self.fps, self.frame_size)
        if not self.writer.isOpened():
            self.writer = None
            raise OSError(f"Could not open video writer for {self.output_file}")
        logger.info("Recording started: %s (%dx%d @ %d fps)",
                    self.output_file, self.frame_size[0], self.frame_size[1], self.fps)

    def write_surface(self, surface: pygame.Surface):
        if surface.get_size() != self.frame_size:
            raise ValueError(f"Frame size {surface.get_size()} does not match {self.frame_size}")
        if self.writer is None:
            self._open()

        # surfarray is (width, height, 3) RGB, OpenCV wants (height, width, 3) BGR
        rgb = np.ascontiguousarray(np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2)))
        self.writer.write(cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR))
        self.frame_count += 1

    def record(self, generator: MazeGenerator, steps_per_frame: int = 1, hold_frames: int = 0) -> int:
        """
        Draws the maze, advances it by steps_per_frame, and repeats until
        generation completes. The finished maze is written once more for
        every hold frame. Returns the number of frames written by this call.
        """
        renderer = Renderer(generator, width=self.frame_size[0], height=self.frame_size[1],
                            steps_per_frame=steps_per_frame, fps=self.fps)
        renderer.fit_to_screen()
        surface = pygame.Surface(self.frame_size)

        written = 0
        while True:
            renderer.draw_grid(surface)
            self.write_surface(surface)
            written += 1
            if generator.is_complete:
                break
            renderer.advance()

        for _ in range(hold_frames):
            self.write_surface(surface)
            written += 1
        return written

    def close(self):
        if self.writer:
            self.writer.release()
            logger.info("Video saved: %s (%d frames)", self.output_file, self.frame_count)
            self.writer = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
