"""FastAPI-powered web UI for playing GridXO in the browser."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field, field_validator

from . import controller
from .ai import RandomAI
from .config import get_settings
from .controller import AppState, Screen
from .game import SUPPORTED_SIZES, Mode, Outcome, move_rejection

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Container for one player's screen flow and its computer opponent."""

    state: AppState = field(default_factory=AppState)
    ai: RandomAI = field(default_factory=RandomAI)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, GameSession] = {}
app = FastAPI(title="GridXO", description="3x3 and 4x4 tic-tac-toe played in the browser")


class SizeRequest(BaseModel):
    """Request payload for picking the board size."""

    size: int = Field(description="Board edge length")

    @field_validator("size")
    @classmethod
    def ensure_supported_size(cls, value: int) -> int:
        if value not in SUPPORTED_SIZES:
            raise ValueError(
                f"Unsupported board size {value}. "
                f"Choose one of {', '.join(map(str, SUPPORTED_SIZES))}."
            )
        return value


class ModeRequest(BaseModel):
    mode: Mode


class CellRequest(BaseModel):
    """Request payload for marking a cell on the running game."""

    index: int = Field(ge=0)


def _create_session() -> Tuple[str, GameSession]:
    """Create a new session and register it for later access."""

    session = GameSession(ai=RandomAI(player="O", seed=get_settings().computer_seed))
    session_id = uuid.uuid4().hex
    SESSIONS[session_id] = session
    logger.info("Created session %s", session_id)
    return session_id, session


def _get_session(session_id: str) -> GameSession:
    try:
        return SESSIONS[session_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Session not found") from exc


def _status_text(state: AppState) -> str:
    game = state.game
    if game is None:
        if state.size is None:
            return "Select Game Size"
        return "Select Game Mode"
    if game.outcome is Outcome.DRAW:
        return "It's a draw"
    if game.winner:
        return f"Player {game.winner} wins!"
    return f"Player {game.current_player}'s turn"


def _serialize_session(session_id: str, session: GameSession) -> Dict[str, object]:
    with session.lock:
        state = session.state
        game = state.game
        payload: Dict[str, object] = {
            "id": session_id,
            "screen": state.screen.value,
            "size": state.size,
            "mode": state.mode.value if state.mode else None,
            "status": _status_text(state),
            "board": [],
            "currentPlayer": None,
            "outcome": None,
            "winner": None,
            "availableMoves": [],
            "moveLog": [],
        }
        if game is not None:
            move_log: List[Dict[str, object]] = [
                {"player": "X" if n % 2 == 0 else "O", "index": index}
                for n, index in enumerate(game.moves)
            ]
            payload.update(
                {
                    "board": [c if c in ("X", "O") else "" for c in game.board],
                    "currentPlayer": game.current_player,
                    "outcome": game.outcome.value,
                    "winner": game.winner,
                    "availableMoves": game.available_moves(),
                    "moveLog": move_log,
                }
            )
            if move_log:
                payload["lastMove"] = move_log[-1]
        return payload


def _transition(
    session_id: str, action: Callable[[AppState], AppState]
) -> Dict[str, object]:
    session = _get_session(session_id)
    with session.lock:
        session.state = action(session.state)
    return _serialize_session(session_id, session)


def _apply_cell(session: GameSession, index: int) -> None:
    with session.lock:
        state = session.state
        if state.game is None:
            raise HTTPException(status_code=409, detail="No game in progress")

        reason = move_rejection(state.game, index)
        if reason is not None:
            raise HTTPException(status_code=400, detail=reason.value)
        session.state = controller.select_cell(state, index, session.ai)


@app.post("/api/session")
def create_session() -> Dict[str, object]:
    session_id, session = _create_session()
    return _serialize_session(session_id, session)


@app.get("/api/session/{session_id}")
def get_session(session_id: str) -> Dict[str, object]:
    session = _get_session(session_id)
    return _serialize_session(session_id, session)


@app.post("/api/session/{session_id}/size")
def choose_size(session_id: str, request: SizeRequest) -> Dict[str, object]:
    return _transition(session_id, lambda s: controller.select_size(s, request.size))


@app.post("/api/session/{session_id}/mode")
def choose_mode(session_id: str, request: ModeRequest) -> Dict[str, object]:
    session = _get_session(session_id)
    with session.lock:
        if session.state.size is None:
            raise HTTPException(status_code=409, detail="Select a board size first")
        if session.state.screen is not Screen.MODE_SELECT:
            raise HTTPException(status_code=409, detail="A game is already running")
        session.state = controller.select_mode(session.state, request.mode)
    return _serialize_session(session_id, session)


@app.post("/api/session/{session_id}/cell")
def choose_cell(session_id: str, request: CellRequest) -> Dict[str, object]:
    session = _get_session(session_id)
    _apply_cell(session, request.index)
    return _serialize_session(session_id, session)


@app.post("/api/session/{session_id}/reset")
def reset_game(session_id: str) -> Dict[str, object]:
    session = _get_session(session_id)
    with session.lock:
        if session.state.game is None:
            raise HTTPException(status_code=409, detail="No game to reset")
        session.state = controller.reset(session.state)
    return _serialize_session(session_id, session)


@app.post("/api/session/{session_id}/menu")
def main_menu(session_id: str) -> Dict[str, object]:
    return _transition(session_id, controller.main_menu)


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return HTML_PAGE


HTML_PAGE = """<!DOCTYPE html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <title>GridXO</title>
    <style>
      :root {
        color-scheme: light;
        font-family: system-ui, -apple-system, BlinkMacSystemFont, \"Segoe UI\", sans-serif;
      }
      body {
        margin: 0;
        min-height: 100vh;
        display: flex;
        justify-content: center;
        align-items: center;
        background: #f4f2fa;
        color: #363062;
      }
      main {
        display: grid;
        gap: 1rem;
        justify-items: center;
        padding: 2rem;
      }
      h1 {
        margin: 0;
        font-size: 1.5rem;
      }
      button {
        font-size: 1rem;
        font-weight: 600;
        padding: 0.9rem 2.5rem;
        border: none;
        border-radius: 5px;
        background: #363062;
        color: #fff;
        cursor: pointer;
        min-width: 14rem;
      }
      .board {
        display: grid;
        width: 300px;
        height: 300px;
      }
      .board button {
        min-width: 0;
        padding: 0;
        border-radius: 0;
        border: 2px solid #363062;
        background: #fff;
        font-size: 2rem;
      }
      .board button.x {
        color: #435585;
      }
      .board button.o {
        color: #e5c3a6;
      }
      #status {
        font-weight: 700;
        min-height: 1.5rem;
      }
      #message {
        color: #b00020;
        min-height: 1.25rem;
      }
      .hidden {
        display: none !important;
      }
    </style>
  </head>
  <body>
    <main>
      <h1 id=\"status\">Select Game Size</h1>
      <section id=\"size-menu\">
        <button data-size=\"3\">3 x 3</button>
        <button data-size=\"4\">4 x 4</button>
      </section>
      <section id=\"mode-menu\" class=\"hidden\">
        <button data-mode=\"PvP\">Player vs Player</button>
        <button data-mode=\"PvC\">Player vs Computer</button>
      </section>
      <section id=\"game-area\" class=\"hidden\">
        <div id=\"board\" class=\"board\"></div>
      </section>
      <div id=\"message\"></div>
      <section id=\"game-controls\" class=\"hidden\">
        <button id=\"reset\">Reset Game</button>
        <button id=\"menu\">Main Menu</button>
      </section>
    </main>
    <script>
      const statusEl = document.getElementById('status');
      const messageEl = document.getElementById('message');
      const boardEl = document.getElementById('board');
      const sizeMenu = document.getElementById('size-menu');
      const modeMenu = document.getElementById('mode-menu');
      const gameArea = document.getElementById('game-area');
      const gameControls = document.getElementById('game-controls');
      let sessionId = null;
      let isRequestPending = false;

      async function call(path, body) {
        if (isRequestPending) return;
        isRequestPending = true;
        messageEl.textContent = '';
        try {
          const response = await fetch(`/api/session/${sessionId}${path}`, {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: body ? JSON.stringify(body) : undefined,
          });
          const payload = await response.json().catch(() => ({}));
          if (!response.ok) {
            messageEl.textContent = payload?.detail || 'Request failed';
            return;
          }
          render(payload);
        } catch (error) {
          messageEl.textContent = 'Network error. Please try again.';
        } finally {
          isRequestPending = false;
        }
      }

      function render(state) {
        statusEl.textContent = state.status;
        const playing = state.screen === 'playing' || state.screen === 'finished';
        sizeMenu.classList.toggle('hidden', state.screen !== 'size_select');
        modeMenu.classList.toggle('hidden', state.screen !== 'mode_select');
        gameArea.classList.toggle('hidden', !playing);
        gameControls.classList.toggle('hidden', !playing);
        boardEl.innerHTML = '';
        if (!playing) return;
        boardEl.style.gridTemplateColumns = `repeat(${state.size}, 1fr)`;
        boardEl.style.fontSize = `${48 / state.size}px`;
        state.board.forEach((value, index) => {
          const cell = document.createElement('button');
          cell.textContent = value;
          if (value) cell.classList.add(value.toLowerCase());
          cell.disabled = Boolean(value) || state.screen === 'finished';
          cell.addEventListener('click', () => call('/cell', { index }));
          boardEl.appendChild(cell);
        });
      }

      sizeMenu.querySelectorAll('button').forEach((button) => {
        button.addEventListener('click', () =>
          call('/size', { size: Number.parseInt(button.dataset.size, 10) }),
        );
      });
      modeMenu.querySelectorAll('button').forEach((button) => {
        button.addEventListener('click', () => call('/mode', { mode: button.dataset.mode }));
      });
      document.getElementById('reset').addEventListener('click', () => call('/reset'));
      document.getElementById('menu').addEventListener('click', () => call('/menu'));

      (async () => {
        const response = await fetch('/api/session', { method: 'POST' });
        const data = await response.json();
        sessionId = data.id;
        render(data);
      })();
    </script>
  </body>
</html>
"""
