"""
A single frame: the rolls bowled in one turn, classified into a FrameKind.

Validation happens exactly once, when the frame is created. Afterwards the rolls are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self, Sequence

from src.core.exceptions import ValidationError
from src.core.shared_types import FrameKind, ValidationReason

MAX_PINS = 10
MAX_FRAMES = 10
TENTH_FRAME_INDEX = MAX_FRAMES - 1
MAX_ROLLS_PER_FRAME = 2
MAX_ROLLS_TENTH_FRAME = 3

# How many of the following rolls count towards the bonus of a frame of this kind.
BONUS_MULTIPLIERS: dict[FrameKind, int] = {
    FrameKind.STRIKE: 2,
    FrameKind.SPARE: 1,
}


@dataclass(frozen=True)
class Frame:
    kind: FrameKind
    rolls: tuple[int, ...]

    @classmethod
    def from_rolls(cls, rolls: Sequence[int], position: int) -> Self:
        """Construct the frame that the given rolls make at the given (0-based) position in the game."""
        kind = classify_and_validate_rolls(rolls, position)
        return cls(kind, tuple(rolls))

    @property
    def base_score(self) -> int:
        """Pins knocked down in this frame. The tenth frame counts all of its rolls here."""
        return sum(self.rolls)

    @property
    def is_strike(self) -> bool:
        if self.kind == FrameKind.TENTH:
            return self.rolls[0] == MAX_PINS
        return self.kind == FrameKind.STRIKE

    @property
    def is_spare(self) -> bool:
        if self.kind == FrameKind.TENTH:
            return (
                not self.is_strike
                and len(self.rolls) >= 2
                and self.rolls[0] + self.rolls[1] == MAX_PINS
            )
        return self.kind == FrameKind.SPARE

    @property
    def bonus_multiplier(self) -> int:
        """The tenth frame never asks for a bonus: there are no frames after it."""
        return BONUS_MULTIPLIERS.get(self.kind, 0)

    @property
    def is_finished(self) -> bool:
        """No further roll belongs to this frame."""
        if self.kind == FrameKind.TENTH:
            if self.is_strike or self.is_spare:
                return len(self.rolls) == MAX_ROLLS_TENTH_FRAME
            return len(self.rolls) == 2
        return self.is_strike or len(self.rolls) == MAX_ROLLS_PER_FRAME

    def bonus_pins(self, count: int = 2) -> list[int]:
        """The first `count` rolls of this frame, in the order they were bowled."""
        return list(self.rolls[:count])


def classify_and_validate(rolls: Sequence[int], position: int) -> Frame:
    """Entrypoint used by the Game: validate the rolls for this position and return the frozen Frame."""
    return Frame.from_rolls(rolls, position)


def classify_and_validate_rolls(rolls: Any, position: int) -> FrameKind:
    """
    Decide which kind of frame the rolls make, or raise ValidationError.
    ----

    1. Shared checks (every position): a non-empty list of valid pin counts.
    2. Frames 1-9: at most two rolls, at most 10 pins, a strike ends the frame.
    3. Frame 10: special rules, see validate_tenth_frame.
    """
    validate_shared(rolls)
    if not 0 <= position <= TENTH_FRAME_INDEX:
        raise ValidationError(
            f"Frame position must be between 0 and {TENTH_FRAME_INDEX}, got {position}",
            ValidationReason.TOO_MANY_FRAMES,
        )

    if position == TENTH_FRAME_INDEX:
        validate_tenth_frame(rolls)
        return FrameKind.TENTH

    return classify_regular_frame(rolls)


def is_valid_pin_count(roll: Any) -> bool:
    # bool is a subclass of int, but True is not a pin count
    return (
        isinstance(roll, int)
        and not isinstance(roll, bool)
        and 0 <= roll <= MAX_PINS
    )


def validate_shared(rolls: Any) -> None:
    if not isinstance(rolls, (list, tuple)):
        raise ValidationError(
            "Rolls must be a list", ValidationReason.MALFORMED_INPUT
        )
    if len(rolls) == 0:
        raise ValidationError("Rolls cannot be empty", ValidationReason.EMPTY_ROLLS)
    if not all(is_valid_pin_count(roll) for roll in rolls):
        raise ValidationError(
            f"Invalid pin count in {list(rolls)!r}", ValidationReason.INVALID_PIN_COUNT
        )


def classify_regular_frame(rolls: Sequence[int]) -> FrameKind:
    """Frames 1-9."""
    if len(rolls) > MAX_ROLLS_PER_FRAME:
        raise ValidationError(
            "Regular frames can have at most 2 rolls", ValidationReason.TOO_MANY_ROLLS
        )

    # a strike ends the frame: nothing may be bowled after it
    if rolls[0] == MAX_PINS:
        if len(rolls) != 1:
            raise ValidationError(
                "Strike frame must have exactly one roll of 10",
                ValidationReason.TOO_MANY_ROLLS,
            )
        return FrameKind.STRIKE

    if sum(rolls) > MAX_PINS:
        raise ValidationError(
            "Cannot knock down more than 10 pins in a frame",
            ValidationReason.TOO_MANY_PINS,
        )

    if len(rolls) == 2 and sum(rolls) == MAX_PINS:
        return FrameKind.SPARE
    return FrameKind.REGULAR


def validate_tenth_frame(rolls: Sequence[int]) -> None:
    """
    Frame 10 allows up to three rolls.
    ----

    * One roll: an in-progress frame. Only a lone strike is rejected, as it can never be the final state of the frame.
    * Two rolls: after a strike the rack is reset, so anything goes. Otherwise at most 10 pins.
    * Three rolls: only after a strike or a spare in the first two rolls.
    """
    if not 1 <= len(rolls) <= MAX_ROLLS_TENTH_FRAME:
        raise ValidationError(
            "Tenth frame must have 1-3 rolls", ValidationReason.TOO_MANY_ROLLS
        )

    first = rolls[0]
    if len(rolls) == 1:
        if first == MAX_PINS:
            raise ValidationError(
                "Tenth frame with one roll must be less than 10 (incomplete)",
                ValidationReason.INCOMPLETE_TENTH_FRAME,
            )
        return

    second = rolls[1]
    if len(rolls) == 2:
        if first != MAX_PINS and first + second > MAX_PINS:
            raise ValidationError(
                "First two rolls cannot exceed 10 pins in tenth frame",
                ValidationReason.TOO_MANY_PINS,
            )
        return

    third = rolls[2]
    if first == MAX_PINS:
        # second strike resets the rack again, otherwise the last two rolls share one rack
        if second != MAX_PINS and second + third > MAX_PINS:
            raise ValidationError(
                "Invalid roll combination in tenth frame after strike",
                ValidationReason.INVALID_BONUS_ROLLS,
            )
        return

    if first + second == MAX_PINS:
        return

    raise ValidationError(
        "Tenth frame can only have 3 rolls after strike or spare",
        ValidationReason.INVALID_TENTH_FRAME,
    )
