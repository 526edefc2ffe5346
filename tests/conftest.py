import os

# Headless pygame for the whole test session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from tilesnake.config import WIDTH, HEIGHT  # noqa: E402
from tilesnake.game import new_game_state  # noqa: E402


@pytest.fixture
def state():
    """A fresh game with a fixed seed."""
    return new_game_state(seed=1234)


@pytest.fixture
def screen():
    return pygame.Surface((WIDTH, HEIGHT))


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.SysFont(None, 32)
