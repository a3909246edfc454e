"""
Win and draw detection for a single 3x3 board.

Boards are flat sequences of nine cells, each a Player or None. The same
functions evaluate the meta-board once local results are mapped to cells.
"""
from typing import Optional, Sequence

from ninetoes.core.game_config import WIN_LINES
from ninetoes.schemas.game import Outcome, Player


def winning_line_index(cells: Sequence[Optional[Player]]) -> Optional[int]:
    """Index into WIN_LINES of the first completed line, scanning in order."""
    for i, (a, b, c) in enumerate(WIN_LINES):
        v = cells[a]
        if v is not None and v == cells[b] == cells[c]:
            return i
    return None


def winner(cells: Sequence[Optional[Player]]) -> Optional[Player]:
    index = winning_line_index(cells)
    if index is None:
        return None
    return cells[WIN_LINES[index][0]]


def is_full(cells: Sequence[Optional[Player]]) -> bool:
    return all(cell is not None for cell in cells)


def local_result(cells: Sequence[Optional[Player]]) -> Outcome:
    who = winner(cells)
    if who is not None:
        return Outcome.of(who)
    if is_full(cells):
        return Outcome.DRAW
    return Outcome.UNDECIDED


def count_in_line(cells: Sequence[Optional[Player]], line: Sequence[int], player: Player) -> int:
    return sum(1 for i in line if cells[i] == player)


def count_open_lines(cells: Sequence[Optional[Player]], player: Player) -> int:
    """Lines the opponent of ``player`` has not yet touched."""
    opp = player.other
    return sum(1 for line in WIN_LINES if all(cells[i] != opp for i in line))


def as_cells(local: Sequence[Outcome]) -> list:
    """Map local results to meta-board cells; draws count as empty."""
    return [result.player for result in local]
