from ninetoes.schemas.game import Move
from ninetoes.services.commentary import (
    AI_LOSING_COMMENTS, AI_WINNING_COMMENTS, BAD_MOVE_COMMENTS, BLOCK_COMMENTS,
    BLUNDER_COMMENTS, GOOD_MOVE_COMMENTS, GREAT_MOVE_COMMENTS, LOCAL_WIN_COMMENTS,
    generate_commentary,
)
from ninetoes.services.transitions import apply_move


def won(board, player):
    return {(board, c): player for c in (0, 1, 2)}


def comment_on(state, move, rng, after=None):
    if after is None:
        after = apply_move(state, move)
    return generate_commentary(state, after, move, rng=rng)


class TestCommentary:

    def test_stays_quiet_most_of_the_time(self, make_state, fixed_rng):
        state = make_state({(0, 0): "X", (0, 1): "X"}, next_board=0)
        assert comment_on(state, Move(0, 2), fixed_rng(0.36)) is None

    def test_local_win(self, make_state, fixed_rng):
        state = make_state({(0, 0): "X", (0, 1): "X"}, next_board=0)
        assert comment_on(state, Move(0, 2), fixed_rng(0.0)) == LOCAL_WIN_COMMENTS[0]

    def test_block_needs_second_gate(self, make_state, fixed_rng):
        state = make_state({(0, 0): "O", (0, 1): "O"}, next_board=0)
        assert comment_on(state, Move(0, 2), fixed_rng(0.0, 0.9)) == BLOCK_COMMENTS[0]
        # Without the second gate the best move is praised instead.
        assert comment_on(state, Move(0, 2), fixed_rng(0.0, 0.1)) == GREAT_MOVE_COMMENTS[0]

    def test_blunder(self, make_state, fixed_rng):
        # Best is 107 for taking the board, worst is 4 for cell 5.
        state = make_state({(0, 0): "X", (0, 1): "X"}, next_board=0)
        assert comment_on(state, Move(0, 5), fixed_rng(0.0)) == BLUNDER_COMMENTS[0]

    def test_bad_move(self, make_state, fixed_rng):
        state = make_state({(0, 0): "X", (0, 1): "X"}, next_board=0)
        assert comment_on(state, Move(0, 4), fixed_rng(0.0)) == BAD_MOVE_COMMENTS[0]

    def test_great_move_by_rank(self, make_state, fixed_rng):
        # Taking the board scores 107, the center 56 and cell 5 only 4; the
        # center is second best though 51 points behind.
        marks = {(0, 0): "X", (0, 1): "X", (4, 0): "X", (4, 1): "X", (4, 3): "X"}
        state = make_state(marks, next_board=0)
        assert comment_on(state, Move(0, 4), fixed_rng(0.0)) == GREAT_MOVE_COMMENTS[0]

    def test_good_move(self, make_state, fixed_rng):
        state = make_state(next_board=4)
        assert comment_on(state, Move(4, 4), fixed_rng(0.0)) == GOOD_MOVE_COMMENTS[0]

    def test_nothing_to_say(self, make_state, fixed_rng):
        state = make_state(next_board=4)
        assert comment_on(state, Move(4, 0), fixed_rng(0.0)) is None

    def test_position_swing(self, make_state, fixed_rng):
        state = make_state(next_board=4)
        worse_for_ai = make_state({**won(0, "X"), **won(1, "X")})
        better_for_ai = make_state({**won(0, "O"), **won(1, "O")})
        assert comment_on(state, Move(4, 0), fixed_rng(0.0), worse_for_ai) == AI_LOSING_COMMENTS[0]
        assert comment_on(state, Move(4, 0), fixed_rng(0.0), better_for_ai) == AI_WINNING_COMMENTS[0]

    def test_no_moves_no_comment(self, make_state, fixed_rng):
        state = make_state(result="D")
        assert generate_commentary(state, state, Move(0, 0), rng=fixed_rng(0.0)) is None
