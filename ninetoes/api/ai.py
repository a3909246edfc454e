"""
Computer opponent endpoints.
"""
import random

from fastapi import APIRouter, Depends

from ninetoes.api.deps import get_rng
from ninetoes.schemas import ai as ai_schemas
from ninetoes.schemas.game import StateRequest
from ninetoes.services.ai_player import (
    evaluate_position, pick_move, should_accept_double, should_double
)
from ninetoes.services.commentary import generate_commentary
from ninetoes.services.game_service import game_service_obj
from ninetoes.services.scoring import score_move

router = APIRouter(
    prefix="/ai",
    tags=["ai"],
)


def _move_body(move):
    return None if move is None else {"board": move.board, "cell": move.cell}


@router.post("/move", response_model=ai_schemas.PickMoveResponse)
def suggest_move(
        request: ai_schemas.PickMoveRequest,
        rng: random.Random = Depends(get_rng)
):
    """
    Pick a move for the player to move at the given difficulty.

    Returns a null move when no legal move exists.
    """
    move = pick_move(request.state, request.difficulty, request.variant, rng)
    return {"move": _move_body(move)}


@router.post("/score", response_model=ai_schemas.ScoreResponse)
def score(request: ai_schemas.ScoreRequest):
    """
    Heuristic score of one move for the player to move.
    """
    move = request.move.to_move()
    return {"move": request.move, "score": score_move(request.state, move, request.variant)}


@router.post("/turn", response_model=ai_schemas.AITurnResponse)
def take_turn(
        request: ai_schemas.AITurnRequest,
        rng: random.Random = Depends(get_rng)
):
    """
    Let the computer act: answer a pending double, offer one, or move.
    """
    action, move, state = game_service_obj.ai_turn(
        request.state, request.difficulty, request.variant, request.use_cube, rng
    )
    return {"action": action, "move": _move_body(move), "state": state}


@router.post("/double", response_model=ai_schemas.DecisionResponse)
def decide_double(
        request: StateRequest,
        rng: random.Random = Depends(get_rng)
):
    """
    Would the computer double here, as the player to move?
    """
    state = request.state
    return {
        "decision": should_double(state, request.variant, rng),
        "position": evaluate_position(state, state.turn, request.variant),
    }


@router.post("/accept-double", response_model=ai_schemas.DecisionResponse)
def decide_accept(request: StateRequest):
    """
    Would the computer take the pending double? True when nothing is pending.
    """
    state = request.state
    responder = state.pending_double.other if state.pending_double else state.turn
    return {
        "decision": should_accept_double(state, request.variant),
        "position": evaluate_position(state, responder, request.variant),
    }


@router.post("/commentary", response_model=ai_schemas.CommentaryResponse)
def commentary(
        request: ai_schemas.CommentaryRequest,
        rng: random.Random = Depends(get_rng)
):
    """
    The computer's remark on the human's last move, if it has one.
    """
    comment = generate_commentary(
        request.before, request.after, request.move.to_move(), request.variant, rng
    )
    return {"comment": comment}
