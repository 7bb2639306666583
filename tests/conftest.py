"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

import pytest

from src.bowling.game import Game


@pytest.fixture
def mixed_game_frames() -> list[list[int]]:
    """A game with a bit of everything: open frames, spares, strikes and a tenth frame with a fill ball. Scores 133."""
    return [[1, 4], [4, 5], [6, 4], [5, 5], [10], [0, 1], [7, 3], [6, 4], [10], [2, 8, 6]]


@pytest.fixture
def empty_game() -> Game:
    return Game()


@pytest.fixture
def open_game() -> Game:
    """All ten frames played, not a single mark. Scores 70."""
    game = Game()
    for _ in range(10):
        game.add_frame([3, 4])
    return game
