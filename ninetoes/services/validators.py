from ninetoes.core.exceptions import (
    BoardDecided, CellOccupied, DoublePending, GameEnded, InvalidPosition, WrongBoard
)
from ninetoes.core.game_config import is_valid_index
from ninetoes.schemas.game import GameState, Move


class MoveValidator:
    """Validates moves against a game state, naming the rule that was broken."""

    def validate_move(self, state: GameState, move: Move) -> None:
        board, cell = move

        # Validate position bounds
        if not (is_valid_index(board) and is_valid_index(cell)):
            raise InvalidPosition(f"Position ({board}, {cell}) is off the 9x9 grid")

        # Check if game is still running
        if state.is_over:
            raise GameEnded(f"Game has already ended ({state.result.value})")

        if state.pending_double is not None:
            raise DoublePending(
                f"Player {state.pending_double.value} offered a double that must be answered first"
            )

        # Check the forced board
        if state.next_board is not None and state.next_board != board:
            raise WrongBoard(f"Player {state.turn.value} must play on board {state.next_board}")

        if state.local[board].is_decided:
            raise BoardDecided(f"Board {board} is already decided")

        # Check if cell is already occupied
        if state.boards[board][cell] is not None:
            raise CellOccupied(f"Cell {cell} on board {board} is already occupied")


move_validator = MoveValidator()
