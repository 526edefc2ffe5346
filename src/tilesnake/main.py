# main.py
import logging

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG, Config
from .game import new_game_state, handle_input, step_game, draw_game

logger = logging.getLogger(__name__)


class TickTimer:
    """Countdown that fires once every `interval` seconds of frame time."""

    def __init__(self, interval: float):
        self.interval = interval
        self.remaining = interval

    def elapse(self, dt: float) -> bool:
        self.remaining -= dt
        if self.remaining <= 0:
            self.remaining = self.interval
            return True
        return False


def run(cfg: Config = CFG) -> None:
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            logger.error("Could not open a %dx%d window: %s", WIDTH, HEIGHT, exc)
            raise SystemExit(1) from exc
        pygame.display.set_caption(cfg.title)
        font = pygame.font.SysFont(None, cfg.font_size)
        clock = pygame.time.Clock()

        state = new_game_state(cfg.seed)
        timer = TickTimer(cfg.tick_seconds)
        logger.info("Started %dx%d window, %.0f ticks/s at %d fps",
                    WIDTH, HEIGHT, 1 / cfg.tick_seconds, cfg.fps)

        running = True
        while running:
            # 1) timing
            dt = clock.tick(cfg.fps) / 1000.0

            # 2) input
            running = handle_input(state, pygame.event.get())
            if not running:
                break

            # 3) update, at the fixed tick rate only
            if timer.elapse(dt):
                step_game(state)

            # 4) render, every frame
            draw_game(screen, font, state)
            pygame.display.flip()

        logger.info("Window closed, tail length %d", len(state.snake.tail))
    finally:
        pygame.quit()


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(CFG)

if __name__ == "__main__":
    main()
