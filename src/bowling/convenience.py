"""
Batch entry points: score a whole game given as a list of frames, e.g. score([[5, 3], [10], [4, 6]]) == 38
"""

import logging
from typing import Any

from src.bowling.frame import MAX_FRAMES
from src.bowling.game import Game
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import ValidationReason

logger = logging.getLogger(__name__)


def score(frames_data: Any) -> int:
    """Validate the input, build the game, and return its total score."""
    total = create_game(frames_data).score()
    logger.debug("Scored %d frames: %d", len(frames_data), total)
    return total


def create_game(frames_data: Any) -> Game:
    """Same validation as score(), but hand back the Game for further inspection."""
    validate_frames_data(frames_data)
    return Game.from_rolls(frames_data)


def validate_frames_data(frames_data: Any) -> None:
    """
    Structural checks on the batch input, done before any frame gets built.
    ----

    * must be a list (or tuple) of at most 10 frames, and not empty
    * every frame must itself be a list (or tuple) of integers

    Range checks of the pins are left to the frames.
    """
    if not isinstance(frames_data, (list, tuple)):
        raise InvalidRequestError("Input must be a list")
    if len(frames_data) == 0:
        raise InvalidRequestError(
            "Input cannot be empty", ValidationReason.EMPTY_INPUT
        )
    if len(frames_data) > MAX_FRAMES:
        raise InvalidRequestError(
            f"Cannot have more than {MAX_FRAMES} frames",
            ValidationReason.TOO_MANY_FRAMES,
        )

    for index, frame_rolls in enumerate(frames_data):
        if not isinstance(frame_rolls, (list, tuple)):
            raise InvalidRequestError(f"Frame {index + 1} must be a list")
        if not all(
            isinstance(roll, int) and not isinstance(roll, bool) for roll in frame_rolls
        ):
            raise InvalidRequestError(
                f"Frame {index + 1} must only contain integers",
                ValidationReason.INVALID_PIN_COUNT,
            )
