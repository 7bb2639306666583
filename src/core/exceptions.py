"""Exceptions raised by the domain layer and the request models."""

from src.core.shared_types import ValidationReason


class GameError(Exception):
    """Base class for everything the bowling package raises on purpose."""


class ValidationError(GameError):
    """
    An operation was rejected: constructing a frame, adding a frame or validating batch input.

    NOTE: deliberately not a ValueError, so it passes through pydantic validators as-is.
    """

    def __init__(self, message: str, reason: ValidationReason) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason


class InvalidRequestError(ValidationError):
    """The container handed to a batch entry point is structurally wrong."""

    def __init__(
        self, message: str, reason: ValidationReason = ValidationReason.MALFORMED_INPUT
    ) -> None:
        super().__init__(message, reason)


class GameStateError(ValidationError):
    """Rejections that concern the sequencing of the Game, not the content of the rolls."""


class GameCompleteError(GameStateError):
    def __init__(self, message: str = "Game is already complete") -> None:
        super().__init__(message, ValidationReason.GAME_COMPLETE)
