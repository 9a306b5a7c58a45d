"""Screen flow for GridXO: size menu, mode menu, board, result.

Each handler takes the current ``AppState`` and returns the next one. Actions that
do not fit the current screen return the state unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import game as engine
from .ai import RandomAI
from .game import GameState, Mode

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    SIZE_SELECT = "size_select"
    MODE_SELECT = "mode_select"
    PLAYING = "playing"
    FINISHED = "finished"


@dataclass(frozen=True)
class AppState:
    size: Optional[int] = None
    mode: Optional[Mode] = None
    game: Optional[GameState] = None

    @property
    def screen(self) -> Screen:
        if self.size is None:
            return Screen.SIZE_SELECT
        if self.mode is None or self.game is None:
            return Screen.MODE_SELECT
        if self.game.finished:
            return Screen.FINISHED
        return Screen.PLAYING


def select_size(state: AppState, size: int) -> AppState:
    if size not in engine.SUPPORTED_SIZES:
        logger.debug("Ignoring unsupported size %s", size)
        return state
    # Picking a size always sends the player on to the mode menu
    return AppState(size=size)


def select_mode(state: AppState, mode: Mode) -> AppState:
    if state.screen is not Screen.MODE_SELECT:
        logger.debug("Ignoring mode %s on the %s screen", mode, state.screen.value)
        return state
    mode = Mode(mode)
    return AppState(size=state.size, mode=mode, game=engine.new_game(state.size, mode))


def select_cell(state: AppState, index: int, ai: Optional[RandomAI] = None) -> AppState:
    """Play the human move at ``index`` and, in PvC, the computer's reply."""

    game = state.game
    if state.screen is not Screen.PLAYING or game is None:
        return state
    if state.mode is Mode.PVC and ai is None:
        ai = RandomAI()

    reason = engine.move_rejection(game, index)
    if reason is not None:
        logger.debug("Rejected move at %s: %s", index, reason.value)
        return state
    game = engine.apply_move(game, index)

    if (
        state.mode is Mode.PVC
        and ai is not None
        and not game.finished
        and game.current_player == ai.player
    ):
        reply = ai.choose(game)
        if reply is not None:
            game = engine.apply_move(game, reply)

    if game.finished:
        logger.info(
            "Game finished on %dx%d board: %s", game.size, game.size, game.outcome.value
        )
    return AppState(size=state.size, mode=state.mode, game=game)


def reset(state: AppState) -> AppState:
    if state.game is None:
        return state
    return AppState(size=state.size, mode=state.mode, game=engine.reset(state.game))


def main_menu(state: AppState) -> AppState:
    return AppState()
