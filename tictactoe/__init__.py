"""
Tic-tac-toe against the computer.
Handles game state, rules, scores, and the AI opponent.
"""

__version__ = "1.0.0"

from .game_state import (
    GameState,
    Mark,
    Outcome,
    Phase,
    ScoreBoard,
    Status,
    WINNING_LINES,
    apply_move,
    empty_board,
    is_full,
)
from .move_validator import MoveValidator, legal_moves
from .win_checker import WinChecker, evaluate
from .ai_player import AIPlayer, Difficulty
from .config import GameConfig
from .session import GameSession
