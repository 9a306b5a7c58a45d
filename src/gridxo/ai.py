"""Computer opponent for GridXO: uniformly random among legal moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence
import random

from .game import EMPTY, GameState, Player


def select_computer_move(
    board: Sequence[str], rng: Optional[random.Random] = None
) -> Optional[int]:
    """Pick one empty cell index uniformly at random, or ``None`` on a full board."""

    empties = [i for i, c in enumerate(board) if c == EMPTY]
    if not empties:
        return None
    return (rng or random).choice(empties)


@dataclass
class RandomAI:
    """AI player with no look-ahead.

    Public surface used by the controller:
      - RandomAI(player="O", seed=None)
      - choose(state) -> cell index or None
    """

    player: Player = "O"
    seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def choose(self, state: GameState) -> Optional[int]:
        if state.current_player != self.player:
            raise ValueError("It is not this AI player's turn")
        if state.finished:
            return None
        return select_computer_move(state.board, self._rng)
