"""Requests and Response models"""

from typing import Any

from pydantic import BaseModel, field_validator

from src.bowling.convenience import validate_frames_data
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import ValidationReason

Rolls = list[int]


# --- REQUEST MODELS ---
class ScoreRequest(BaseModel):
    frames: list[Rolls]

    @field_validator("frames", mode="before")
    @classmethod
    def validate_frames(cls, value: Any) -> Any:
        # NOTE: runs before pydantic coerces anything, so "5" or 5.0 never sneak in as pin counts
        validate_frames_data(value)
        return value


class AddFrameRequest(BaseModel):
    rolls: Rolls

    @field_validator("rolls", mode="before")
    @classmethod
    def validate_rolls(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            raise InvalidRequestError("Rolls must be a list")
        if not all(
            isinstance(roll, int) and not isinstance(roll, bool) for roll in value
        ):
            raise InvalidRequestError(
                f"Cannot interpret rolls: {value!r} as pin counts.",
                ValidationReason.INVALID_PIN_COUNT,
            )
        return value


# --- RESPONSE MODELS ---
class ScoreResponse(BaseModel):
    total_score: int


class GameResponse(BaseModel):
    frames: list[Rolls]
    frame_scores: list[int]
    running_totals: list[int]
    total_score: int
    is_complete: bool
    current_frame_number: int
