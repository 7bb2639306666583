from typing import Any

import pytest

from src.api.models import AddFrameRequest, GameResponse, ScoreRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import ValidationReason


# -- Validation - ScoreRequest --
def test_valid_frames(mixed_game_frames: list[list[int]]) -> None:
    request = ScoreRequest(frames=mixed_game_frames)
    assert request.frames == mixed_game_frames


def test_pin_ranges_are_left_to_the_domain() -> None:
    """The request only checks structure. An 11 is still an integer."""
    request = ScoreRequest(frames=[[11]])
    assert request.frames == [[11]]


@pytest.mark.parametrize(
    "frames",
    [
        "nonsense",
        [],
        [[3, 4]] * 11,
        [[3, 4], "x"],
        [["3", "4"]],  # would otherwise be coerced by pydantic
        [[3.0, 4.0]],
    ],
)
def test_invalid_frames(frames: Any) -> None:
    with pytest.raises(InvalidRequestError):
        _ = ScoreRequest(frames=frames)


# -- Validation - AddFrameRequest --
def test_valid_rolls() -> None:
    request = AddFrameRequest(rolls=[7, 3])
    assert request.rolls == [7, 3]


@pytest.mark.parametrize(
    "rolls, reason",
    [
        ("73", ValidationReason.MALFORMED_INPUT),
        (7, ValidationReason.MALFORMED_INPUT),
        ([7, "3"], ValidationReason.INVALID_PIN_COUNT),
        ([False], ValidationReason.INVALID_PIN_COUNT),
    ],
)
def test_invalid_rolls(rolls: Any, reason: ValidationReason) -> None:
    with pytest.raises(InvalidRequestError) as error:
        _ = AddFrameRequest(rolls=rolls)
    assert error.value.reason == reason


# -- Responses --
def test_game_response_serialises() -> None:
    response = GameResponse(
        frames=[[5, 3]],
        frame_scores=[8],
        running_totals=[8],
        total_score=8,
        is_complete=False,
        current_frame_number=2,
    )
    assert response.model_dump()["total_score"] == 8
