from ninetoes.schemas.game import Outcome, Player
from ninetoes.services.board import is_full, local_result, winner, winning_line_index

X, O, _ = Player.X, Player.O, None


class TestBoardPrimitives:

    def test_row_win(self):
        cells = [_, _, _, X, X, X, O, O, _]
        assert winner(cells) == X
        assert winning_line_index(cells) == 1

    def test_column_win(self):
        cells = [O, X, _, O, X, _, O, _, _]
        assert winner(cells) == O
        assert winning_line_index(cells) == 3

    def test_diagonal_wins(self):
        assert winning_line_index([X, O, _, O, X, _, _, _, X]) == 6
        assert winning_line_index([X, X, O, _, O, _, O, _, X]) == 7

    def test_no_winner(self):
        cells = [X, O, X, _, _, _, _, _, _]
        assert winner(cells) is None
        assert winning_line_index(cells) is None
        assert local_result(cells) == Outcome.UNDECIDED

    def test_full_board_without_line_is_draw(self):
        cells = [X, O, X, X, O, O, O, X, X]
        assert is_full(cells)
        assert local_result(cells) == Outcome.DRAW

    def test_win_on_full_board_beats_draw(self):
        cells = [X, X, X, O, O, X, X, O, O]
        assert is_full(cells)
        assert local_result(cells) == Outcome.X

    def test_first_line_in_scan_order_wins(self):
        # Row 0 and column 0 are both complete; the row is scanned first.
        cells = [X, X, X, X, O, O, X, O, O]
        assert winning_line_index(cells) == 0

    def test_empty_board(self):
        cells = [_] * 9
        assert not is_full(cells)
        assert local_result(cells) == Outcome.UNDECIDED

    def test_other_player(self):
        assert X.other == O
        assert O.other == X
