from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from ninetoes.core.config import settings
from ninetoes.schemas.game import Difficulty, GameState, MoveBody, StateRequest, Variant


class AIAction(str, Enum):
    MOVE = "move"
    OFFER_DOUBLE = "offer_double"
    ACCEPT_DOUBLE = "accept_double"
    DECLINE_DOUBLE = "decline_double"
    NONE = "none"


class PickMoveRequest(StateRequest):
    difficulty: Difficulty = Difficulty(settings.DEFAULT_DIFFICULTY)


class PickMoveResponse(BaseModel):
    move: Optional[MoveBody] = None


class ScoreRequest(StateRequest):
    move: MoveBody


class ScoreResponse(BaseModel):
    move: MoveBody
    score: float


class AITurnRequest(PickMoveRequest):
    use_cube: bool = Field(False, description="Whether the doubling cube is in play")


class AITurnResponse(BaseModel):
    action: AIAction
    move: Optional[MoveBody] = None
    state: GameState


class DecisionResponse(BaseModel):
    decision: bool
    position: float = Field(..., description="Position score for the deciding player (-100 to 100)")


class CommentaryRequest(BaseModel):
    before: GameState
    after: GameState
    move: MoveBody
    variant: Variant = Variant(settings.DEFAULT_VARIANT)


class CommentaryResponse(BaseModel):
    comment: Optional[str] = None
