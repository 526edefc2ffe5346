# game.py
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Tuple
import logging

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, GRID_W, GRID_H,
    BG, HEAD_COLOR, TAIL_COLOR, APPLE_COLOR, TEXT,
    DOWN, KEY_TO_DIRECTION,
    SNAKE_START, APPLE_START,
)

logger = logging.getLogger(__name__)

Vec = Tuple[int, int]

# ---------- Helpers ----------
def in_bounds(x: int, y: int) -> bool:
    """Check if a cell is inside the grid."""
    return 0 <= x < GRID_W and 0 <= y < GRID_H

def is_opposite(a: Vec, b: Vec) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)

# ---------- Entities ----------
@dataclass
class Tail:
    x: int
    y: int

    @property
    def position(self) -> Vec:
        return (self.x, self.y)

@dataclass
class Apple:
    x: int
    y: int

    @property
    def position(self) -> Vec:
        return (self.x, self.y)

@dataclass
class Snake:
    x: int
    y: int
    tail: Deque[Tail] = field(default_factory=deque)   # index 0 is nearest the head
    direction: Vec = DOWN
    pending: Optional[Vec] = None                      # requested, applied on next tick

    def __post_init__(self):
        if not self.tail:
            # one segment directly behind the head
            dx, dy = self.direction
            self.tail.append(Tail(self.x - dx, self.y - dy))

    @property
    def position(self) -> Vec:
        return (self.x, self.y)

    def tail_positions(self) -> List[Vec]:
        return [seg.position for seg in self.tail]

# ---------- State ----------
@dataclass
class GameState:
    snake: Snake
    apple: Apple
    game_over: bool = False
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)

def new_game_state(seed: Optional[int] = None) -> GameState:
    return GameState(
        snake=Snake(*SNAKE_START),
        apple=Apple(*APPLE_START),
        game_over=False,
        rng=np.random.default_rng(seed),
    )

# ---------- Input / Update / Draw ----------
def handle_input(state: GameState, events: List[pygame.event.Event]) -> bool:
    """
    Process one frame's events; update the pending direction (no 180° turns).
    Only the last key press of the frame counts. Return False to quit.
    """
    running = True
    key = None
    for event in events:
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            key = event.key

    cand = KEY_TO_DIRECTION.get(key) if key is not None else None
    # Guarded against the committed direction, not an earlier pending one
    if cand is not None and not is_opposite(cand, state.snake.direction):
        state.snake.pending = cand
    return running

def step_game(state: GameState) -> None:
    """
    Advance the game by one tick.

    Collisions only raise the game_over flag; the move itself still
    completes on the colliding tick.
    """
    snake = state.snake
    hx, hy = snake.x, snake.y

    # Commit direction once per tick
    if snake.pending is not None:
        snake.direction = snake.pending
        snake.pending = None
    dx, dy = snake.direction
    nx, ny = hx + dx, hy + dy

    was_over = state.game_over

    # Self collision, against the tail before it moves
    if (nx, ny) in snake.tail_positions():
        state.game_over = True

    # Wall collision
    if not in_bounds(nx, ny):
        state.game_over = True

    if state.game_over and not was_over:
        logger.info("Game over at (%d, %d), tail length %d", nx, ny, len(snake.tail))

    # Grow / move
    if (nx, ny) == state.apple.position:
        snake.tail.appendleft(Tail(hx, hy))
        state.apple.x = int(state.rng.integers(GRID_W))
        state.apple.y = int(state.rng.integers(GRID_H))
        logger.debug("Apple eaten, tail length %d, new apple at %s",
                     len(snake.tail), state.apple.position)
    else:
        end = snake.tail.pop()
        end.x, end.y = hx, hy
        snake.tail.appendleft(end)

    snake.x, snake.y = nx, ny

def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    screen.fill(BG)
    if state.game_over:
        draw_game_over(screen, font)
        return

    # head
    draw_cell(screen, state.snake.x, state.snake.y, HEAD_COLOR)
    # tail
    for seg in state.snake.tail:
        draw_cell(screen, seg.x, seg.y, TAIL_COLOR)
    # apple
    draw_cell(screen, state.apple.x, state.apple.y, APPLE_COLOR)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font) -> None:
    title = font.render("Game over!", True, TEXT)
    tx = title.get_rect(center=(WIDTH // 2, HEIGHT // 2))
    screen.blit(title, tx)
