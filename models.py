"""Pydantic models for the Battlesnake API request/response schemas."""

from __future__ import annotations

import enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _BaseModel(BaseModel):
    # Unknown keys from newer orchestrator versions are dropped, not rejected
    model_config = ConfigDict(frozen=True, extra="ignore")


class Direction(str, enum.Enum):
    """The four legal moves."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Coordinates(_BaseModel):
    x: int
    y: int


class Ruleset(_BaseModel):
    """Ruleset the game is played under, e.g. {"name": "standard", "version": "v1.2.3"}."""

    name: str
    version: str = ""
    settings: Dict[str, Any] = Field(default_factory=dict)


class Game(_BaseModel):
    id: str
    ruleset: Optional[Ruleset] = None
    timeout: int = 500  # milliseconds
    map: Optional[str] = None
    source: Optional[str] = None


class Customizations(_BaseModel):
    color: Optional[str] = None
    head: Optional[str] = None
    tail: Optional[str] = None


class Snake(_BaseModel):
    """A snake on the board.

    ``body`` is ordered head to tail, so ``head`` must equal ``body[0]`` and
    ``length`` must equal ``len(body)``. A latency of ``"0"`` means the snake
    timed out on the previous turn.
    """

    id: str
    name: str
    health: int = Field(ge=0, le=100)
    body: List[Coordinates]
    latency: str = ""
    head: Coordinates
    length: int = Field(ge=0)
    shout: str = ""
    squad: str = ""
    customizations: Optional[Customizations] = None

    @model_validator(mode="after")
    def check_body_consistency(self) -> "Snake":
        if self.body and self.head != self.body[0]:
            raise ValueError("head must equal the first body segment")
        if self.length != len(self.body):
            raise ValueError(f"length {self.length} does not match body of {len(self.body)} segments")
        return self


class Board(_BaseModel):
    height: int = Field(gt=0)
    width: int = Field(gt=0)
    food: List[Coordinates] = Field(default_factory=list)
    hazards: List[Coordinates] = Field(default_factory=list)
    snakes: List[Snake] = Field(default_factory=list)


class GameState(_BaseModel):
    """Full game state sent with every /start, /move and /end request."""

    game: Game
    turn: int = Field(ge=0)
    board: Board
    you: Snake


class Move(_BaseModel):
    """Response body for /move."""

    move: Direction
    shout: Optional[str] = Field(default=None, max_length=256)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SnakeInfo(_BaseModel):
    """Descriptor returned by GET /. Cosmetic fields only affect rendering."""

    apiversion: str
    author: Optional[str] = None
    color: Optional[str] = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")
    head: Optional[str] = None
    tail: Optional[str] = None
    version: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
