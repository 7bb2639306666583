"""
The Game class is the entrypoint into the domain layer for the service layer.
It is responsible for the sequencing rules: which kind of frame is legal at which position, and when the game is over.
Scoring itself is delegated to the scorer.
"""

import logging
from dataclasses import dataclass, field
from typing import Self, Sequence

from src.bowling import scorer
from src.bowling.frame import MAX_FRAMES, Frame
from src.core.exceptions import GameCompleteError
from src.core.models import GameModel

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    frames: list[Frame] = field(default_factory=list, init=False)

    @classmethod
    def from_rolls(cls, frames_data: Sequence[Sequence[int]]) -> Self:
        """Build a game by adding the frames one after the other. Any rejection propagates."""
        game = cls()
        for rolls in frames_data:
            game.add_frame(rolls)
        return game

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """
        Reconstruct a Game from the information the Service layer has.
        NOTE: the derived fields of the model (scores etc.) are ignored. They are recomputed from the rolls, which are validated again.
        """
        return cls.from_rolls(model.frames)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            frames=[list(frame.rolls) for frame in self.frames],
            frame_scores=self.frame_scores(),
            running_totals=self.running_totals(),
            total_score=self.score(),
            is_complete=self.is_complete,
            current_frame_number=self.current_frame_number,
        )

    @property
    def next_frame_index(self) -> int:
        return len(self.frames)

    @property
    def current_frame_number(self) -> int:
        """1-indexed number of the next frame to be added."""
        return self.next_frame_index + 1

    @property
    def is_complete(self) -> bool:
        """
        All ten frames have been added.
        NOTE: a tenth frame holding a single roll below 10 counts as played. Its pins are scored and no frame can follow it.
        """
        return len(self.frames) == MAX_FRAMES

    def add_frame(self, rolls: Sequence[int]) -> Self:
        """
        Attempt to add the next frame
        -----

        1. make sure the game is not over yet
        2. classify/validate the rolls for the current position (errors propagate unchanged)
        3. append the frozen frame

        Returns the game itself, so calls can be chained.
        """
        if self.is_complete:
            raise GameCompleteError()

        frame_number = self.current_frame_number
        frame = Frame.from_rolls(rolls, self.next_frame_index)
        self.frames.append(frame)
        logger.debug("Added %s frame %d: %s", frame.kind, frame_number, frame.rolls)
        return self

    def score(self) -> int:
        """Total (possibly partial) score of the frames played so far."""
        return scorer.calculate(self.frames)

    def frame_scores(self) -> list[int]:
        return scorer.frame_scores(self.frames)

    def running_totals(self) -> list[int]:
        return scorer.running_totals(self.frames)
