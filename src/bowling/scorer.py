"""
Score calculation.

Stateless: every function is a pure function of the (already validated) frames it receives.
The frames can only be built through Frame.from_rolls, so nothing in here raises.
"""

from itertools import accumulate
from typing import Sequence

from src.bowling.frame import TENTH_FRAME_INDEX, Frame


def calculate(frames: Sequence[Frame]) -> int:
    """Total score: base pins of every frame plus the look-ahead bonus of every strike and spare."""
    return sum(frame_scores(frames))


def frame_scores(frames: Sequence[Frame]) -> list[int]:
    """Score of each individual frame, bonus included (partial if the bonus rolls were not bowled yet)."""
    return [frame_score(frames, index) for index in range(len(frames))]


def running_totals(frames: Sequence[Frame]) -> list[int]:
    """What a scorecard shows under each frame."""
    return list(accumulate(frame_scores(frames)))


def frame_score(frames: Sequence[Frame], index: int) -> int:
    frame = frames[index]
    return frame.base_score + bonus(frames, index)


def bonus(frames: Sequence[Frame], index: int) -> int:
    """
    Bonus for the frame at index.
    ----

    * Open frames get nothing.
    * The tenth frame already counts all of its own rolls in its base score.
    * Strike: the next two rolls. Spare: the next roll.
    """
    frame = frames[index]
    if not (frame.is_strike or frame.is_spare):
        return 0
    if index == TENTH_FRAME_INDEX:
        return 0
    return sum(bonus_rolls(frames, index))


def bonus_rolls(frames: Sequence[Frame], index: int) -> list[int]:
    """
    Collect the rolls bowled after the frame at index, in order, until the frame's bonus is satisfied.

    NOTE A single roll frame (a strike) only supplies one pin, so a strike may need to look two frames ahead.
    """
    pins_needed = frames[index].bonus_multiplier
    pins: list[int] = []

    for next_frame in frames[index + 1 :]:
        if len(pins) >= pins_needed:
            break
        pins.extend(next_frame.bonus_pins(pins_needed - len(pins)))

    return pins[:pins_needed]
