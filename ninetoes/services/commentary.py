"""
Canned remarks from the computer opponent about the human's last move.
"""
import random
from typing import Optional

from ninetoes.core.game_config import BLOCK_COMMENT_GATE, COMMENTARY_CHANCE, POSITION_SWING
from ninetoes.schemas.game import GameState, Move, Outcome, Variant
from ninetoes.services.ai_player import evaluate_position
from ninetoes.services.board import winner
from ninetoes.services.scoring import score_moves

GOOD_MOVE_COMMENTS = [
    "Nice move!",
    "Well played.",
    "I see what you did there.",
    "Clever!",
    "Good choice.",
    "Solid move.",
    "I would've done the same.",
    "Strong play!",
]

GREAT_MOVE_COMMENTS = [
    "Excellent move!",
    "Impressive!",
    "I didn't see that coming!",
    "Wow, nice one!",
    "That's a strong play.",
    "You're making this tough.",
]

BAD_MOVE_COMMENTS = [
    "Interesting choice...",
    "Hmm, are you sure?",
    "Bold strategy.",
    "That's... unexpected.",
    "I wouldn't have done that.",
    "Okay then!",
    "If you say so...",
]

BLUNDER_COMMENTS = [
    "Oh no...",
    "That might be a mistake.",
    "Are you feeling okay?",
    "I'll take it!",
    "Thanks for that!",
    "You sure about that?",
]

LOCAL_WIN_COMMENTS = [
    "Nice, you got that board!",
    "Well done on that one.",
    "One for you.",
    "You claimed that board.",
]

BLOCK_COMMENTS = [
    "Good block!",
    "You saw that coming.",
    "Nice defensive play.",
    "Denied!",
]

AI_WINNING_COMMENTS = [
    "I'm feeling good about this.",
    "Things are going my way.",
    "I like my position here.",
]

AI_LOSING_COMMENTS = [
    "You're playing well!",
    "I'm in trouble here.",
    "Okay, you've got the edge.",
]


def generate_commentary(before: GameState, after: GameState, move: Move,
                        variant: Variant = Variant.CLASSIC,
                        rng: Optional[random.Random] = None) -> Optional[str]:
    """
    Comment on the move that took ``before`` to ``after``, or stay quiet.

    The opponent only speaks on some moves. When it does, the first matching
    category wins: a local board taken, a local win blocked, a blunder, a bad
    move, a great move, a good move, and finally a large swing in the
    opponent's own position.
    """
    picker = rng if rng is not None else random

    if picker.random() > COMMENTARY_CHANCE:
        return None

    scored = score_moves(before, variant)
    if not scored:
        return None

    move = Move(*move)
    player = before.turn
    ai = player.other

    best = scored[0][1]
    worst = scored[-1][1]
    rank = next((i for i, (m, _) in enumerate(scored) if m == move), len(scored))
    this_score = scored[rank][1] if rank < len(scored) else 0.0

    score_range = best - worst
    from_best = best - this_score

    won_board = (not before.local[move.board].is_decided
                 and after.local[move.board] == Outcome.of(player))

    blocked = list(before.boards[move.board])
    blocked[move.cell] = ai
    blocked_win = winner(blocked) == ai

    if won_board:
        return picker.choice(LOCAL_WIN_COMMENTS)

    if blocked_win and picker.random() > BLOCK_COMMENT_GATE:
        return picker.choice(BLOCK_COMMENTS)

    if from_best > score_range * 0.8 and score_range > 30:
        return picker.choice(BLUNDER_COMMENTS)

    if from_best > score_range * 0.6 and score_range > 15:
        return picker.choice(BAD_MOVE_COMMENTS)

    if (rank <= 2 or from_best < 10) and best > 50:
        return picker.choice(GREAT_MOVE_COMMENTS)

    if from_best < score_range * 0.3:
        return picker.choice(GOOD_MOVE_COMMENTS)

    position_before = evaluate_position(before, ai, variant)
    position_after = evaluate_position(after, ai, variant)
    if position_after < position_before - POSITION_SWING:
        return picker.choice(AI_LOSING_COMMENTS)
    if position_after > position_before + POSITION_SWING:
        return picker.choice(AI_WINNING_COMMENTS)

    return None
