from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from ninetoes.core.config import settings
from ninetoes.core.game_config import BOARD_CELLS, CUBE_VALUES, INITIAL_CUBE_VALUE


class Player(str, Enum):
    X = "X"
    O = "O"

    @property
    def other(self) -> "Player":
        return Player.O if self is Player.X else Player.X


def other_player(player: Player) -> Player:
    return player.other


class Outcome(str, Enum):
    """Result of a local board or of the whole game."""
    X = "X"
    O = "O"
    DRAW = "D"
    UNDECIDED = "undecided"

    @classmethod
    def of(cls, player: Player) -> "Outcome":
        return cls(player.value)

    @property
    def player(self) -> Optional[Player]:
        """The winning player, or None for a draw or an open board."""
        if self is Outcome.X:
            return Player.X
        if self is Outcome.O:
            return Player.O
        return None

    @property
    def is_decided(self) -> bool:
        return self is not Outcome.UNDECIDED


class Variant(str, Enum):
    CLASSIC = "classic"
    TICTACKU = "tictacku"  # first to win 5 of the 9 boards


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Move(NamedTuple):
    board: int
    cell: int


Cell = Optional[Player]
LocalBoard = Tuple[Cell, ...]


def _parse_outcome(value):
    if value is None:
        return Outcome.UNDECIDED
    return value


def _dump_outcome(outcome: Outcome):
    return None if outcome is Outcome.UNDECIDED else outcome.value


class GameState(BaseModel):
    """
    Immutable snapshot of a game.

    Transitions never mutate a state; they return a new one built with
    ``model_copy``. ``local`` and ``result`` are cached derivations of
    ``boards`` and are trusted as given when loading a snapshot.
    """
    model_config = ConfigDict(frozen=True)

    boards: Tuple[LocalBoard, ...]
    local: Tuple[Outcome, ...]
    next_board: Optional[int] = Field(None, ge=0, le=BOARD_CELLS - 1)
    turn: Player = Player.X
    result: Outcome = Outcome.UNDECIDED
    cube_value: int = INITIAL_CUBE_VALUE
    cube_owner: Optional[Player] = None
    pending_double: Optional[Player] = None

    @field_validator("local", mode="before")
    @classmethod
    def parse_local(cls, v):
        return [_parse_outcome(item) for item in v]

    @field_validator("result", mode="before")
    @classmethod
    def parse_result(cls, v):
        return _parse_outcome(v)

    @field_validator("cube_value")
    @classmethod
    def check_cube_value(cls, v):
        if v not in CUBE_VALUES:
            raise ValueError(f"Cube value must be one of {sorted(CUBE_VALUES)}, got {v}")
        return v

    @model_validator(mode="after")
    def check_shape(self):
        if len(self.boards) != BOARD_CELLS or any(len(b) != BOARD_CELLS for b in self.boards):
            raise ValueError("State must have 9 boards of 9 cells each")
        if len(self.local) != BOARD_CELLS:
            raise ValueError("State must have exactly 9 local results")
        return self

    @field_serializer("local")
    def dump_local(self, local):
        return [_dump_outcome(item) for item in local]

    @field_serializer("result")
    def dump_result(self, result):
        return _dump_outcome(result)

    @property
    def is_over(self) -> bool:
        return self.result.is_decided


def initial_state() -> GameState:
    return GameState(
        boards=((None,) * BOARD_CELLS,) * BOARD_CELLS,
        local=(Outcome.UNDECIDED,) * BOARD_CELLS,
    )


# HTTP payloads

class MoveBody(BaseModel):
    board: int = Field(..., ge=0, le=BOARD_CELLS - 1, description="Local board index (0-8)")
    cell: int = Field(..., ge=0, le=BOARD_CELLS - 1, description="Cell index inside the board (0-8)")

    def to_move(self) -> Move:
        return Move(self.board, self.cell)


class NewGame(BaseModel):
    variant: Variant = Field(Variant(settings.DEFAULT_VARIANT), description="Meta-board win condition")


class StateRequest(BaseModel):
    state: GameState
    variant: Variant = Variant(settings.DEFAULT_VARIANT)


class MoveRequest(StateRequest):
    move: MoveBody


class LegalMovesResponse(BaseModel):
    moves: List[MoveBody]


class StatusResponse(BaseModel):
    status: str
    can_double: bool
    is_over: bool
    win_lines: List[Optional[int]]
