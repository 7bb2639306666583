"""Unit tests for src/services/bowling_service.py"""

import logging

import pytest

from src.core.exceptions import GameCompleteError, ValidationError
from src.core.models import GameModel
from src.services.bowling_service import (
    AddFrameRequest,
    BowlingService,
    GameResponse,
    ScoreRequest,
    ScoreResponse,
)


@pytest.fixture
def service() -> BowlingService:
    return BowlingService()


# --- SERVICE - SCORE ----
def test_score(service: BowlingService, mixed_game_frames: list[list[int]]) -> None:
    response = service.score(ScoreRequest(frames=mixed_game_frames))
    assert response == ScoreResponse(total_score=133)


def test_score_invalid_game(service: BowlingService, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="src.services.bowling_service"):
        with pytest.raises(ValidationError):
            service.score(ScoreRequest(frames=[[6, 5]]))
    assert "Rejected game" in caplog.text


# --- SERVICE - CREATE GAME ----
def test_create_game(service: BowlingService, mixed_game_frames: list[list[int]]) -> None:
    response = service.create_game(ScoreRequest(frames=mixed_game_frames))
    assert isinstance(response, GameResponse)
    assert response.frames == mixed_game_frames
    assert response.frame_scores == [5, 9, 15, 20, 11, 1, 16, 20, 20, 16]
    assert response.running_totals[-1] == 133
    assert response.total_score == 133
    assert response.is_complete
    assert response.current_frame_number == 11


# --- SERVICE - ADD FRAME ----
def test_add_frame(service: BowlingService) -> None:
    model = GameModel(frames=[[5, 3], [10]])
    response = service.add_frame(model, AddFrameRequest(rolls=[4, 6]))
    assert response.frames == [[5, 3], [10], [4, 6]]
    assert response.total_score == 38
    assert response.current_frame_number == 4
    assert not response.is_complete


def test_add_frame_to_complete_game(service: BowlingService) -> None:
    model = GameModel(frames=[[3, 4]] * 10)
    with pytest.raises(GameCompleteError):
        service.add_frame(model, AddFrameRequest(rolls=[3, 4]))


def test_add_invalid_frame(service: BowlingService, caplog: pytest.LogCaptureFixture) -> None:
    model = GameModel(frames=[[5, 3]])
    with caplog.at_level(logging.INFO, logger="src.services.bowling_service"):
        with pytest.raises(ValidationError):
            service.add_frame(model, AddFrameRequest(rolls=[6, 5]))
    assert "Rejected frame 2" in caplog.text


def test_add_frame_rejects_tampered_model(service: BowlingService) -> None:
    """The stored rolls are replayed, so an invalid model never turns into a game."""
    model = GameModel(frames=[[10, 10]], total_score=20)
    with pytest.raises(ValidationError):
        service.add_frame(model, AddFrameRequest(rolls=[3, 4]))
