"""GridXO package exposing game logic, the computer player, and the web application."""

from .ai import RandomAI
from .game import GameState, Mode, Outcome
from .ui import app

__all__ = ["GameState", "Mode", "Outcome", "RandomAI", "app"]
