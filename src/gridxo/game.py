"""Core rules for GridXO (tic-tac-toe on 3x3 and 4x4 boards)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple

Player = str  # "X" or "O"
Board = Tuple[str, ...]
Line = Tuple[int, ...]

EMPTY = " "
SUPPORTED_SIZES: Tuple[int, ...] = (3, 4)


class Mode(str, Enum):
    """Who sits at the O side of the board."""

    PVP = "PvP"
    PVC = "PvC"


class Outcome(str, Enum):
    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"


class MoveRejected(str, Enum):
    """Reasons a cell selection is ignored."""

    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"
    GAME_OVER = "game_over"


_WIN_BY_PLAYER = {"X": Outcome.X_WINS, "O": Outcome.O_WINS}


def other_player(player: Player) -> Player:
    return "O" if player == "X" else "X"


# ---------- Lines ----------


@lru_cache(maxsize=None)
def winning_lines(size: int) -> Tuple[Line, ...]:
    """Rows, then columns, then the main and anti diagonals.

    The anti-diagonal cell of row ``i`` sits in column ``size - 1 - i``, which is
    index ``i * size + size - 1 - i == (i + 1) * (size - 1)``.
    """
    span = range(size)
    rows = [tuple(r * size + c for c in span) for r in span]
    cols = [tuple(r * size + c for r in span) for c in span]
    main = tuple(i * (size + 1) for i in span)
    anti = tuple((i + 1) * (size - 1) for i in span)
    return tuple(rows + cols + [main, anti])


def evaluate_outcome(board: Sequence[str], size: int) -> Outcome:
    for line in winning_lines(size):
        v = board[line[0]]
        if v != EMPTY and all(board[i] == v for i in line):
            return _WIN_BY_PLAYER[v]
    if all(c != EMPTY for c in board):
        return Outcome.DRAW
    return Outcome.IN_PROGRESS


# ---------- State ----------


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of one game; every accepted move yields a new instance."""

    size: int
    mode: Mode = Mode.PVP
    board: Board = ()
    current_player: Player = "X"
    outcome: Outcome = Outcome.IN_PROGRESS
    # Accepted cell indices in play order
    moves: Tuple[int, ...] = field(default=())

    @property
    def finished(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        if self.outcome is Outcome.X_WINS:
            return "X"
        if self.outcome is Outcome.O_WINS:
            return "O"
        return None

    def available_moves(self) -> List[int]:
        if self.finished:
            return []
        return [i for i, c in enumerate(self.board) if c == EMPTY]

    def rows(self) -> List[Board]:
        n = self.size
        return [self.board[r * n : (r + 1) * n] for r in range(n)]


def new_game(size: int, mode: Mode = Mode.PVP) -> GameState:
    if size not in SUPPORTED_SIZES:
        raise ValueError(
            f"Unsupported board size {size}. "
            f"Choose one of {', '.join(map(str, SUPPORTED_SIZES))}."
        )
    return GameState(size=size, mode=Mode(mode), board=(EMPTY,) * (size * size))


def move_rejection(state: GameState, index: int) -> Optional[MoveRejected]:
    """Explain why ``apply_move`` would ignore ``index``, or ``None`` if it is legal."""

    if state.finished:
        return MoveRejected.GAME_OVER
    if not 0 <= index < len(state.board):
        return MoveRejected.OUT_OF_RANGE
    if state.board[index] != EMPTY:
        return MoveRejected.OCCUPIED
    return None


def apply_move(state: GameState, index: int) -> GameState:
    """Place the current player's mark at ``index`` and pass the turn.

    Illegal moves are ignored: the very same ``state`` object is returned.
    """
    if move_rejection(state, index) is not None:
        return state

    cells = list(state.board)
    cells[index] = state.current_player
    board: Board = tuple(cells)
    return replace(
        state,
        board=board,
        current_player=other_player(state.current_player),
        outcome=evaluate_outcome(board, state.size),
        moves=state.moves + (index,),
    )


def reset(state: GameState) -> GameState:
    return new_game(state.size, state.mode)


def replay(size: int, mode: Mode, moves: Iterable[int]) -> GameState:
    state = new_game(size, mode)
    for index in moves:
        state = apply_move(state, index)
    return state
