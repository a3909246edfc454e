"""
Pure state transitions. Each returns a new GameState, except that the cube
transitions return their input unchanged when they do not apply.
"""
from ninetoes.schemas.game import GameState, Move, Outcome, Variant
from ninetoes.services.board import local_result
from ninetoes.services.rules import can_double, meta_result
from ninetoes.services.validators import move_validator


def apply_move(state: GameState, move: Move, variant: Variant = Variant.CLASSIC) -> GameState:
    """
    Place the mover's mark and advance the game.

    Raises an IllegalMove subclass if the move is not legal in ``state``.
    """
    move_validator.validate_move(state, move)
    board, cell = move

    cells = list(state.boards[board])
    cells[cell] = state.turn
    boards = list(state.boards)
    boards[board] = tuple(cells)

    local = list(state.local)
    local[board] = local_result(boards[board])

    # Sending the opponent to a decided board gives them free choice.
    next_board = None if local[cell].is_decided else cell

    result = meta_result(local, variant)

    return state.model_copy(update={
        "boards": tuple(boards),
        "local": tuple(local),
        "next_board": next_board,
        "turn": state.turn if result.is_decided else state.turn.other,
        "result": result,
        "pending_double": None,
    })


def offer_double(state: GameState) -> GameState:
    if not can_double(state):
        return state
    return state.model_copy(update={"pending_double": state.turn})


def accept_double(state: GameState) -> GameState:
    if state.pending_double is None:
        return state
    return state.model_copy(update={
        "cube_value": state.cube_value * 2,
        "cube_owner": state.pending_double.other,
        "pending_double": None,
    })


def decline_double(state: GameState) -> GameState:
    """The doubler wins at the current, undoubled stake."""
    if state.pending_double is None:
        return state
    return state.model_copy(update={
        "result": Outcome.of(state.pending_double),
        "pending_double": None,
    })
