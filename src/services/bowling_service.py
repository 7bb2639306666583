"""Orchestration of communication from the API models to the business logic (and the reverse direction)."""

import logging

from src.api.models import AddFrameRequest, GameResponse, ScoreRequest, ScoreResponse
from src.bowling.convenience import create_game
from src.bowling.game import Game
from src.core.exceptions import ValidationError
from src.core.models import GameModel

logger = logging.getLogger(__name__)


class BowlingService:
    """Orchestration of layers for scoring bowling games. Holds no state of its own."""

    def score(self, request: ScoreRequest) -> ScoreResponse:
        """Score a full (or partial) game in one go."""
        game = self._build_game(request)
        return ScoreResponse(total_score=game.score())

    def create_game(self, request: ScoreRequest) -> GameResponse:
        """Build the game and return the complete scorecard."""
        game = self._build_game(request)
        return self._create_game_response(game.to_model())

    def add_frame(self, model: GameModel, request: AddFrameRequest) -> GameResponse:
        """
        Add a single frame to a game in progress.
        ----
        The GameModel is replayed into a Game first, so a tampered model gets rejected just like bad rolls would.
        """
        game = Game.from_model(model)
        try:
            game.add_frame(request.rolls)
        except ValidationError as error:
            logger.info(
                "Rejected frame %d %s: %s",
                game.current_frame_number,
                request.rolls,
                error.reason,
            )
            raise
        return self._create_game_response(game.to_model())

    # -- Internal helpers --
    def _build_game(self, request: ScoreRequest) -> Game:
        try:
            return create_game(request.frames)
        except ValidationError as error:
            logger.info("Rejected game %s: %s", request.frames, error.reason)
            raise

    def _create_game_response(self, model: GameModel) -> GameResponse:
        return GameResponse(
            frames=model.frames,
            frame_scores=model.frame_scores,
            running_totals=model.running_totals,
            total_score=model.total_score,
            is_complete=model.is_complete,
            current_frame_number=model.current_frame_number,
        )
