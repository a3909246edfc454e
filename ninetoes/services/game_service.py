import logging
import random
from typing import List, Optional, Tuple

from ninetoes.core.game_config import BOARD_CELLS
from ninetoes.schemas.ai import AIAction
from ninetoes.schemas.game import Difficulty, GameState, Move, Outcome, Variant, initial_state
from ninetoes.services.ai_player import pick_move, should_accept_double, should_double
from ninetoes.services.rules import win_line_for
from ninetoes.services.transitions import accept_double, apply_move, decline_double, offer_double

logger = logging.getLogger(__name__)


def describe_status(state: GameState) -> str:
    """One-line status for the current state, boards numbered from 1."""
    if state.result.player is not None:
        return f"{state.result.value} wins!"
    if state.result == Outcome.DRAW:
        return "Draw."
    if state.pending_double is not None:
        return f"{state.pending_double.value} doubles! {state.pending_double.other.value} to respond..."
    forced = "Any board" if state.next_board is None else f"Board {state.next_board + 1}"
    return f"{state.turn.value} to move • {forced}"


class GameService:
    """Logged entry points over the pure engine, used by the API."""

    def new_game(self, variant: Variant = Variant.CLASSIC) -> GameState:
        logger.info(f"New {Variant(variant).value} game")
        return initial_state()

    def make_move(self, state: GameState, move: Move,
                  variant: Variant = Variant.CLASSIC) -> GameState:
        new_state = apply_move(state, move, variant)
        logger.info(f"Player {state.turn.value} played board {move.board} cell {move.cell}")
        if new_state.is_over:
            logger.info(f"Game ended: {new_state.result.value} at cube value {new_state.cube_value}")
        return new_state

    def offer_double(self, state: GameState) -> GameState:
        new_state = offer_double(state)
        if new_state is state:
            logger.info(f"Double by {state.turn.value} ignored: cube not available")
        else:
            logger.info(f"Player {state.turn.value} offers to double to {state.cube_value * 2}")
        return new_state

    def accept_double(self, state: GameState) -> GameState:
        new_state = accept_double(state)
        if new_state is not state:
            logger.info(
                f"Player {new_state.cube_owner.value} accepts; cube now {new_state.cube_value}"
            )
        return new_state

    def decline_double(self, state: GameState) -> GameState:
        new_state = decline_double(state)
        if new_state is not state:
            logger.info(
                f"Double declined; {new_state.result.value} wins at cube value {new_state.cube_value}"
            )
        return new_state

    def ai_turn(self, state: GameState, difficulty: Difficulty = Difficulty.MEDIUM,
                variant: Variant = Variant.CLASSIC, use_cube: bool = False,
                rng: Optional[random.Random] = None) -> Tuple[AIAction, Optional[Move], GameState]:
        """
        Let the computer act for whoever must act next.

        A pending double is answered first. Otherwise, with the cube in play,
        the computer may double instead of moving.
        """
        if state.is_over:
            return AIAction.NONE, None, state

        if state.pending_double is not None:
            if should_accept_double(state, variant):
                return AIAction.ACCEPT_DOUBLE, None, self.accept_double(state)
            return AIAction.DECLINE_DOUBLE, None, self.decline_double(state)

        if use_cube and should_double(state, variant, rng):
            return AIAction.OFFER_DOUBLE, None, self.offer_double(state)

        move = pick_move(state, difficulty, variant, rng)
        if move is None:
            return AIAction.NONE, None, state
        return AIAction.MOVE, move, self.make_move(state, move, variant)

    def win_lines(self, state: GameState) -> List[Optional[int]]:
        return [win_line_for(state, b) for b in range(BOARD_CELLS)]


game_service_obj = GameService()
