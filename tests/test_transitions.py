import random

import pytest

from ninetoes.core.exceptions import (
    BoardDecided, CellOccupied, DoublePending, GameEnded, IllegalMove, InvalidPosition, WrongBoard
)
from ninetoes.schemas.game import Move, Outcome, Player, Variant, initial_state
from ninetoes.services.board import local_result
from ninetoes.services.rules import legal_moves, meta_result
from ninetoes.services.transitions import accept_double, apply_move, decline_double, offer_double


class TestApplyMove:

    def test_places_mark_and_forces_board(self):
        state = initial_state()
        next_state = apply_move(state, Move(0, 5))
        assert next_state.boards[0][5] == Player.X
        assert next_state.next_board == 5
        assert next_state.turn == Player.O

    def test_input_state_is_untouched(self):
        state = initial_state()
        apply_move(state, Move(0, 5))
        assert state.boards[0][5] is None
        assert state.turn == Player.X

    def test_free_choice_when_target_board_decided(self, make_state):
        state = make_state(local=["undecided"] * 5 + ["X"] + ["undecided"] * 3)
        next_state = apply_move(state, Move(0, 5))
        assert next_state.next_board is None

    def test_local_win_recorded(self, make_state):
        state = make_state({(0, 0): "X", (0, 1): "X", (5, 0): "O", (5, 1): "O"}, next_board=0)
        next_state = apply_move(state, Move(0, 2))
        assert next_state.local[0] == Outcome.X
        assert next_state.result == Outcome.UNDECIDED

    def test_meta_line_ends_game_without_flipping_turn(self, make_state):
        marks = {(b, c): "X" for b in (0, 1) for c in (0, 1, 2)}
        marks.update({(2, 0): "X", (2, 1): "X"})
        state = make_state(marks, next_board=2)
        next_state = apply_move(state, Move(2, 2))
        assert next_state.result == Outcome.X
        assert next_state.turn == Player.X
        assert legal_moves(next_state) == []

    def test_tictacku_fifth_board_wins(self, make_state):
        marks = {(b, c): "O" for b in range(4) for c in (3, 4, 5)}
        marks.update({(4, 0): "O", (4, 4): "O"})
        state = make_state(marks, turn="O", next_board=4)
        next_state = apply_move(state, Move(4, 8), Variant.TICTACKU)
        assert next_state.result == Outcome.O

    def test_same_move_is_no_win_in_tictacku_without_five(self, make_state):
        marks = {(b, c): "O" for b in range(2) for c in (3, 4, 5)}
        marks.update({(2, 0): "O", (2, 1): "O"})
        state = make_state(marks, turn="O", next_board=2)
        assert apply_move(state, Move(2, 2), Variant.TICTACKU).result == Outcome.UNDECIDED
        assert apply_move(state, Move(2, 2), Variant.CLASSIC).result == Outcome.O

    @pytest.mark.parametrize("update, move, error", [
        ({"result": "D"}, Move(0, 0), GameEnded),
        ({"pending_double": "X"}, Move(0, 0), DoublePending),
        ({"next_board": 3}, Move(0, 0), WrongBoard),
        ({}, Move(0, 9), InvalidPosition),
    ])
    def test_illegal_moves_raise(self, make_state, update, move, error):
        state = make_state(**update)
        with pytest.raises(error):
            apply_move(state, move)

    def test_occupied_cell_and_decided_board_raise(self, make_state):
        state = make_state({(0, 4): "X", (1, 0): "O", (1, 1): "O", (1, 2): "O"})
        with pytest.raises(CellOccupied):
            apply_move(state, Move(0, 4))
        with pytest.raises(BoardDecided):
            apply_move(state, Move(1, 5))

    def test_illegal_move_is_a_game_exception(self, make_state):
        with pytest.raises(IllegalMove, match="already occupied"):
            apply_move(make_state({(0, 0): "X"}), Move(0, 0))


class TestDoublingCube:

    def test_offer_then_accept(self, make_state):
        state = make_state(cube_value=4, cube_owner="X")
        offered = offer_double(state)
        assert offered.pending_double == Player.X
        assert offered.cube_value == 4

        accepted = accept_double(offered)
        assert accepted.cube_value == 8
        assert accepted.cube_owner == Player.O
        assert accepted.pending_double is None

    def test_offer_leaves_board_untouched(self):
        state = apply_move(initial_state(), Move(4, 4))
        offered = offer_double(state)
        assert offered.boards == state.boards
        assert offered.turn == state.turn
        assert offered.cube_owner is None

    def test_decline_hands_doubler_the_game(self, make_state):
        state = offer_double(make_state(cube_value=2, cube_owner="X"))
        declined = decline_double(state)
        assert declined.result == Outcome.X
        assert declined.cube_value == 2
        assert declined.pending_double is None

    def test_accept_and_decline_without_offer_return_same_state(self):
        state = initial_state()
        assert accept_double(state) is state
        assert decline_double(state) is state

    def test_disallowed_offer_returns_same_state(self, make_state):
        state = make_state(cube_value=2, cube_owner="O")
        assert offer_double(state) is state
        capped = make_state(cube_value=64, cube_owner="X")
        assert offer_double(capped) is capped

    def test_no_move_while_double_pending(self):
        state = offer_double(initial_state())
        with pytest.raises(DoublePending):
            apply_move(state, Move(0, 0))

    def test_cube_never_exceeds_64(self):
        state = initial_state()
        for _ in range(10):
            state = accept_double(offer_double(state))
            state = state.model_copy(update={"turn": state.cube_owner or state.turn})
        assert state.cube_value == 64


class TestRandomPlayouts:

    @pytest.mark.parametrize("variant", [Variant.CLASSIC, Variant.TICTACKU])
    def test_state_stays_consistent_over_random_games(self, variant):
        rng = random.Random(7)
        for _ in range(20):
            state = initial_state()
            cube = state.cube_value
            declined = False
            while not state.is_over:
                roll = rng.random()
                if roll < 0.05:
                    state = offer_double(state)
                elif state.pending_double is not None:
                    declined = roll >= 0.9
                    state = decline_double(state) if declined else accept_double(state)
                else:
                    previous = state
                    state = apply_move(state, rng.choice(legal_moves(state)), variant)
                    for b in range(9):
                        for c in range(9):
                            if previous.boards[b][c] is not None:
                                assert state.boards[b][c] == previous.boards[b][c]
                assert state.cube_value >= cube
                cube = state.cube_value
                for b in range(9):
                    assert state.local[b] == local_result(state.boards[b])
                if not declined:
                    assert state.result == meta_result(state.local, variant)
