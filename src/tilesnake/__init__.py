"""Grid snake game: state, input, simulation step and rendering on pygame."""

from tilesnake.game import (
    Apple,
    GameState,
    Snake,
    Tail,
    draw_game,
    handle_input,
    new_game_state,
    step_game,
)

__all__ = [
    "Apple", "GameState", "Snake", "Tail",
    "draw_game", "handle_input", "new_game_state", "step_game",
]
