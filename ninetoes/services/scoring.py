"""
One-ply move scoring for the computer opponent.

``score_move`` is deterministic: the same state, move and variant always give
the same number. Higher is better for the player to move. Only an immediate
game win short-circuits; every other term accumulates.
"""
from typing import List, Tuple

from ninetoes.core.game_config import (
    BLOCK_TWO_SCORE, CENTER_CELL, CENTER_SCORE, CORNER_CELLS, CORNER_SCORE,
    FREE_CHOICE_PENALTY, GAME_BLOCK_SCORE, GAME_WIN_SCORE, LINES_THROUGH,
    LOCAL_BLOCK_SCORE, LOCAL_WIN_SCORE, META_THREAT_BONUS, OPEN_LINE_WEIGHT,
    SEND_TO_OWN_THREAT_BONUS, SEND_TO_THREAT_PENALTY, TWO_IN_A_ROW_SCORE, WIN_LINES,
)
from ninetoes.schemas.game import GameState, Move, Outcome, Variant
from ninetoes.services.board import as_cells, count_in_line, count_open_lines, winner
from ninetoes.services.rules import decides_game_for, legal_moves


def score_move(state: GameState, move: Move, variant: Variant = Variant.CLASSIC) -> float:
    board, cell = move
    variant = Variant(variant)
    me = state.turn
    opp = me.other
    cells = state.boards[board]
    score = 0.0

    placed = list(cells)
    placed[cell] = me
    wins_board = winner(placed) == me

    # Taking the board also takes the game.
    if wins_board and decides_game_for(state.local, board, me, variant):
        return GAME_WIN_SCORE

    if wins_board:
        score += LOCAL_WIN_SCORE[variant.value]
        if variant == Variant.CLASSIC:
            local_after = list(state.local)
            local_after[board] = Outcome.of(me)
            meta = as_cells(local_after)
            for line in LINES_THROUGH[board]:
                if count_in_line(meta, line, me) == 2:
                    score += META_THREAT_BONUS

    blocked = list(cells)
    blocked[cell] = opp
    if winner(blocked) == opp:
        score += LOCAL_BLOCK_SCORE[variant.value]
        if decides_game_for(state.local, board, opp, variant):
            score += GAME_BLOCK_SCORE

    for line in LINES_THROUGH[cell]:
        mine = count_in_line(cells, line, me)
        theirs = count_in_line(cells, line, opp)
        if mine == 1 and theirs == 0:
            score += TWO_IN_A_ROW_SCORE
        if theirs == 2 and mine == 0:
            score += BLOCK_TWO_SCORE

    if cell == CENTER_CELL:
        score += CENTER_SCORE
    elif cell in CORNER_CELLS:
        score += CORNER_SCORE

    # The cell index is the board the opponent is sent to.
    if state.local[cell].is_decided:
        score -= FREE_CHOICE_PENALTY
    else:
        target = state.boards[cell]
        for line in WIN_LINES:
            mine = count_in_line(target, line, me)
            theirs = count_in_line(target, line, opp)
            if theirs == 2 and mine == 0:
                score -= SEND_TO_THREAT_PENALTY
            if mine == 2 and theirs == 0:
                score += SEND_TO_OWN_THREAT_BONUS

    score += count_open_lines(placed, me) * OPEN_LINE_WEIGHT
    return score


def score_moves(state: GameState, variant: Variant = Variant.CLASSIC) -> List[Tuple[Move, float]]:
    """All legal moves with their scores, best first. Ties keep board order."""
    scored = [(move, score_move(state, move, variant)) for move in legal_moves(state)]
    scored.sort(key=lambda item: item[1], reverse=True)
    return scored
