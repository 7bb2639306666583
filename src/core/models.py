"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and the domain layer (lower) use the model defined here to send to/receive from the Service
(Decouples the domain objects from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field

# Type aliases to make GameModel easier to read
Rolls = list[int]


@dataclass
class GameModel:
    """Transport-safe representation of a bowling game used between API, Service and Game layers."""

    frames: list[Rolls]
    frame_scores: list[int] = field(default_factory=list)
    running_totals: list[int] = field(default_factory=list)
    total_score: int = 0
    is_complete: bool = False
    current_frame_number: int = 1
