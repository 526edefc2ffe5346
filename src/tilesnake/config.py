from dataclasses import dataclass
from typing import Optional

import pygame  # type: ignore

# ----- Window & grid -----
GRID_W, GRID_H = 20, 20
CELL_SIZE = 20
WIDTH, HEIGHT = GRID_W * CELL_SIZE, GRID_H * CELL_SIZE

# ----- Colors -----
BG         = (0, 0, 0)
HEAD_COLOR = (0, 228, 48)
TAIL_COLOR = (0, 117, 44)
APPLE_COLOR = (230, 41, 55)
TEXT       = (255, 255, 255)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

# ----- Starting layout -----
SNAKE_START = (4, 4)
APPLE_START = (1, 2)

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None   # None -> fresh entropy each launch
    tick_seconds: float = 0.1    # snake advances one cell per tick
    fps: int = 60
    title: str = "Snake"
    font_size: int = 32

    def __post_init__(self):
        if self.tick_seconds <= 0:
            raise ValueError(f"tick_seconds must be positive, got {self.tick_seconds}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

CFG = Config()
