"""
Type definitions used across layers
"""

from enum import StrEnum


class FrameKind(StrEnum):
    REGULAR = "regular"
    STRIKE = "strike"
    SPARE = "spare"
    TENTH = "tenth"


# --- NOTE Every rejection carries one of these. The message explains the specific case, the reason lets callers branch on it.
class ValidationReason(StrEnum):
    MALFORMED_INPUT = "malformed input"
    EMPTY_INPUT = "empty input"
    EMPTY_ROLLS = "empty rolls"
    INVALID_PIN_COUNT = "invalid pin count"
    TOO_MANY_FRAMES = "too many frames"
    TOO_MANY_ROLLS = "too many rolls"
    TOO_MANY_PINS = "too many pins"
    INVALID_TENTH_FRAME = "invalid tenth frame"
    INVALID_BONUS_ROLLS = "invalid bonus rolls"
    INCOMPLETE_TENTH_FRAME = "incomplete tenth frame"
    GAME_COMPLETE = "game complete"
