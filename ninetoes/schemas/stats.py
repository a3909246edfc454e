from pydantic import BaseModel, Field

from ninetoes.schemas.game import GameState


class Stats(BaseModel):
    """Running totals across finished games. Missing fields load as 0."""
    games: int = Field(0, ge=0)
    x_wins: int = Field(0, ge=0)
    o_wins: int = Field(0, ge=0)
    draws: int = Field(0, ge=0)
    x_points: int = Field(0, ge=0)
    o_points: int = Field(0, ge=0)


class RecordGame(BaseModel):
    state: GameState
    use_cube: bool = Field(False, description="Score points at the cube value instead of 1")
