"""
Game rule endpoints.

The API keeps no game state: the client sends the current state and receives
the next one.
"""
from fastapi import APIRouter

from ninetoes.schemas import game as game_schemas
from ninetoes.services.game_service import describe_status, game_service_obj
from ninetoes.services.rules import can_double, legal_moves

router = APIRouter(
    prefix="/games",
    tags=["games"],
    responses={400: {"description": "Illegal move"}}
)


@router.post("", response_model=game_schemas.GameState)
def create_game(game: game_schemas.NewGame):
    """
    Create the initial empty state.

    X moves first with free choice of board and a centered cube at 1.
    """
    return game_service_obj.new_game(game.variant)


@router.post("/legal-moves", response_model=game_schemas.LegalMovesResponse)
def list_legal_moves(request: game_schemas.StateRequest):
    """
    List every legal move for the player to move.

    Empty when the game is over.
    """
    moves = legal_moves(request.state)
    return {"moves": [{"board": m.board, "cell": m.cell} for m in moves]}


@router.post("/move", response_model=game_schemas.GameState)
def make_move(request: game_schemas.MoveRequest):
    """
    Apply a move and return the next state.

    Rejects with 400 and an error code when:
    - The game is over or a double is pending
    - The move ignores the forced board
    - The board is decided or the cell is occupied
    """
    return game_service_obj.make_move(request.state, request.move.to_move(), request.variant)


@router.post("/double/offer", response_model=game_schemas.GameState)
def offer_double(request: game_schemas.StateRequest):
    """
    Offer to double the cube. Returns the state unchanged if not allowed.
    """
    return game_service_obj.offer_double(request.state)


@router.post("/double/accept", response_model=game_schemas.GameState)
def accept_double(request: game_schemas.StateRequest):
    """
    Accept a pending double: the cube doubles and passes to the accepter.
    """
    return game_service_obj.accept_double(request.state)


@router.post("/double/decline", response_model=game_schemas.GameState)
def decline_double(request: game_schemas.StateRequest):
    """
    Decline a pending double: the doubler wins at the current stake.
    """
    return game_service_obj.decline_double(request.state)


@router.post("/status", response_model=game_schemas.StatusResponse)
def get_status(request: game_schemas.StateRequest):
    """
    Describe the state for display.

    Returns:
    - Status line
    - Whether the player to move may double
    - Whether the game is over
    - Winning line index per local board (null when not won)
    """
    state = request.state
    return {
        "status": describe_status(state),
        "can_double": can_double(state),
        "is_over": state.is_over,
        "win_lines": game_service_obj.win_lines(state),
    }
