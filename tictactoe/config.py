"""
Game configuration for tic-tac-toe.
Marks, default difficulty, and the computer's thinking delay.

Environment overrides:
    TICTACTOE_DIFFICULTY   easy | medium | hard
    TICTACTOE_DELAY_MS     thinking delay in milliseconds
"""

import os
from typing import Optional

from .game_state import Mark


class GameConfig:
    """
    Configuration for a game session.
    Change these values (or set the environment variables) to tune play.
    """

    # ==================== PLAYERS ====================
    # Fixed assignment: the human always plays X and opens the game
    HUMAN_MARK = Mark.X
    COMPUTER_MARK = Mark.O

    # ==================== DIFFICULTY ====================
    DIFFICULTIES = ("easy", "medium", "hard")
    DEFAULT_DIFFICULTY = os.getenv("TICTACTOE_DIFFICULTY", "medium").strip().lower()

    # ==================== MINIMAX ====================
    # Base score of a won position, reduced by one per ply
    WIN_SCORE = 10

    # ==================== THINKING DELAY ====================
    # How long the computer "thinks" before moving (milliseconds)
    MIN_DELAY_MS = 0
    MAX_DELAY_MS = 2000
    DEFAULT_DELAY_MS = 500
    DELAY_MS_OVERRIDE = os.getenv("TICTACTOE_DELAY_MS")


def parse_delay(raw: Optional[str], default: int = GameConfig.DEFAULT_DELAY_MS) -> int:
    """
    Turn operator input into a usable thinking delay.

    Args:
        raw: Text typed by the operator. None or blank counts as 0.
        default: Used when the text is not a number.

    Returns:
        Delay in milliseconds, clamped to MIN_DELAY_MS..MAX_DELAY_MS.
    """
    if raw is None or not str(raw).strip():
        value = 0.0
    else:
        try:
            value = float(str(raw).strip())
        except ValueError:
            return default
        if value != value:  # NaN
            return default

    value = min(max(value, GameConfig.MIN_DELAY_MS), GameConfig.MAX_DELAY_MS)
    return int(round(value))


def default_delay() -> int:
    """The configured thinking delay, clamped."""
    if GameConfig.DELAY_MS_OVERRIDE is None:
        return GameConfig.DEFAULT_DELAY_MS
    return parse_delay(GameConfig.DELAY_MS_OVERRIDE)
