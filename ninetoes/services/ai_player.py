"""
Move selection and doubling-cube decisions for the computer opponent.

Every decision that involves chance takes an explicit random source so games
can be replayed from a seed. Without one, the module-level ``random`` is used.
"""
import logging
import random
from typing import Optional

from ninetoes.core.game_config import (
    BOARD_VALUE, EASY_BLUNDER_CHANCE, META_LINE_VALUE, NEAR_WIN_BOARDS, NEAR_WIN_BONUS,
    POSITION_CLAMP, DOUBLE_RELUCTANCE, WIN_LINES, accept_threshold, double_threshold,
    tolerance_for,
)
from ninetoes.schemas.game import Difficulty, GameState, Move, Outcome, Player, Variant
from ninetoes.services.board import as_cells, count_in_line
from ninetoes.services.rules import can_double, legal_moves
from ninetoes.services.scoring import score_moves

logger = logging.getLogger(__name__)


def pick_move(state: GameState, difficulty: Difficulty = Difficulty.MEDIUM,
              variant: Variant = Variant.CLASSIC,
              rng: Optional[random.Random] = None) -> Optional[Move]:
    """
    Choose a move for the player to move, or None when there is none.

    Easy play sometimes blunders with a uniformly random move. Otherwise a
    move is drawn uniformly from those scoring within the difficulty's
    tolerance of the best score.
    """
    picker = rng if rng is not None else random
    difficulty = Difficulty(difficulty)

    moves = legal_moves(state)
    if not moves:
        return None

    if difficulty == Difficulty.EASY and picker.random() < EASY_BLUNDER_CHANCE:
        move = picker.choice(moves)
        logger.debug(f"Easy AI blundered into {move}")
        return move

    scored = score_moves(state, variant)
    best = scored[0][1]
    floor = best - tolerance_for(difficulty.value)
    candidates = [move for move, score in scored if score >= floor]

    move = picker.choice(candidates)
    logger.debug(
        f"AI ({difficulty.value}) picked {move} from {len(candidates)} candidates, best score {best}"
    )
    return move


def evaluate_position(state: GameState, player: Player,
                      variant: Variant = Variant.CLASSIC) -> float:
    """Rough strength of ``player``'s position, from -100 to 100."""
    variant = Variant(variant)
    opp = player.other
    mine = sum(1 for r in state.local if r == Outcome.of(player))
    theirs = sum(1 for r in state.local if r == Outcome.of(opp))

    score = (mine - theirs) * BOARD_VALUE[variant.value]

    if variant == Variant.CLASSIC:
        meta = as_cells(state.local)
        for line in WIN_LINES:
            my_count = count_in_line(meta, line, player)
            opp_count = count_in_line(meta, line, opp)
            if my_count == 2 and opp_count == 0:
                score += META_LINE_VALUE
            if opp_count == 2 and my_count == 0:
                score -= META_LINE_VALUE
    else:
        if mine >= NEAR_WIN_BOARDS:
            score += NEAR_WIN_BONUS
        if theirs >= NEAR_WIN_BOARDS:
            score -= NEAR_WIN_BONUS

    return max(-POSITION_CLAMP, min(POSITION_CLAMP, score))


def should_double(state: GameState, variant: Variant = Variant.CLASSIC,
                  rng: Optional[random.Random] = None) -> bool:
    if not can_double(state):
        return False

    picker = rng if rng is not None else random
    position = evaluate_position(state, state.turn, variant)
    if position <= double_threshold(state.cube_value):
        return False
    # Not every strong position is doubled.
    return picker.random() > DOUBLE_RELUCTANCE


def should_accept_double(state: GameState, variant: Variant = Variant.CLASSIC) -> bool:
    if state.pending_double is None:
        return True

    responder = state.pending_double.other
    position = evaluate_position(state, responder, variant)
    return position > accept_threshold(state.cube_value)
