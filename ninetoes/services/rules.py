"""
Legality, forced-board and meta-board rules.
"""
from typing import List, Optional, Sequence

from ninetoes.core.game_config import BOARDS_TO_WIN, BOARD_CELLS, MAX_CUBE_VALUE, is_valid_index
from ninetoes.schemas.game import GameState, Move, Outcome, Player, Variant
from ninetoes.services.board import as_cells, winner, winning_line_index


def legal_moves(state: GameState) -> List[Move]:
    """Every playable move. None while the game is over or a double awaits an answer."""
    if state.is_over or state.pending_double is not None:
        return []

    moves = []
    for b in range(BOARD_CELLS):
        if state.local[b].is_decided:
            continue
        if state.next_board is not None and state.next_board != b:
            continue
        cells = state.boards[b]
        for c in range(BOARD_CELLS):
            if cells[c] is None:
                moves.append(Move(b, c))
    return moves


def is_legal_move(state: GameState, move: Move) -> bool:
    board, cell = move
    if not (is_valid_index(board) and is_valid_index(cell)):
        return False
    if state.is_over or state.pending_double is not None:
        return False
    if state.local[board].is_decided:
        return False
    if state.next_board is not None and state.next_board != board:
        return False
    return state.boards[board][cell] is None


def _classic_result(local: Sequence[Outcome]) -> Outcome:
    who = winner(as_cells(local))
    if who is not None:
        return Outcome.of(who)
    if all(result.is_decided for result in local):
        return Outcome.DRAW
    return Outcome.UNDECIDED


def _tictacku_result(local: Sequence[Outcome]) -> Outcome:
    x_boards = sum(1 for r in local if r is Outcome.X)
    o_boards = sum(1 for r in local if r is Outcome.O)
    remaining = sum(1 for r in local if not r.is_decided)

    if x_boards >= BOARDS_TO_WIN:
        return Outcome.X
    if o_boards >= BOARDS_TO_WIN:
        return Outcome.O
    if remaining == 0:
        return Outcome.DRAW
    # Nobody can get to five any more: call it early.
    if x_boards + remaining < BOARDS_TO_WIN and o_boards + remaining < BOARDS_TO_WIN:
        return Outcome.DRAW
    return Outcome.UNDECIDED


def meta_result(local: Sequence[Outcome], variant: Variant = Variant.CLASSIC) -> Outcome:
    """Outcome of the whole game from the nine local results."""
    if variant == Variant.TICTACKU:
        return _tictacku_result(local)
    return _classic_result(local)


def decides_game_for(local: Sequence[Outcome], board: int, player: Player,
                     variant: Variant = Variant.CLASSIC) -> bool:
    """Would winning ``board`` hand ``player`` the game?"""
    after = list(local)
    after[board] = Outcome.of(player)
    return meta_result(after, variant) == Outcome.of(player)


def can_double(state: GameState) -> bool:
    if state.is_over:
        return False
    if state.pending_double is not None:
        return False
    if state.cube_value >= MAX_CUBE_VALUE:
        return False
    return state.cube_owner is None or state.cube_owner == state.turn


def win_line_for(state: GameState, board: int) -> Optional[int]:
    """Winning line of a local board won by a player, for overlays."""
    if state.local[board].player is None:
        return None
    return winning_line_index(state.boards[board])
