"""
AI player for tic-tac-toe.
Picks the computer's move: random, full minimax, or a coin flip between them.
"""

import logging
from enum import Enum
from functools import lru_cache
from typing import Optional, Union

import numpy as np

from .config import GameConfig
from .game_state import Board, Mark, Status, apply_move
from .move_validator import legal_moves
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

_win_checker = WinChecker()


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Coin flip between random and minimax, every turn
    HARD = "hard"        # Full minimax

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        """
        Accept a Difficulty or its name in any case ("Hard", "easy").

        Raises:
            ValueError: For an unknown level.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r}. Choose one of: {names}") from None


@lru_cache(maxsize=65536)
def _score_position(board: Board, to_move: Mark, ai_mark: Mark, depth: int) -> int:
    """
    Minimax value of `board` for `ai_mark`.

    Terminal positions score WIN_SCORE - depth for an AI win, the negation
    for a loss, and 0 for a draw. The AI maximizes, its opponent minimizes.
    """
    outcome = _win_checker.evaluate(board)
    if outcome.status == Status.WIN:
        score = GameConfig.WIN_SCORE - depth
        return score if outcome.winner == ai_mark else -score
    if outcome.status == Status.DRAW:
        return 0

    scores = [
        _score_position(apply_move(board, index, to_move), to_move.opposite(), ai_mark, depth + 1)
        for index in legal_moves(board)
    ]
    return max(scores) if to_move == ai_mark else min(scores)


class AIPlayer:
    """
    The computer opponent.

    HARD never loses: it wins if possible, blocks if needed, and prefers
    faster wins and slower losses. All randomness comes from a numpy
    Generator so games can be replayed from a seed.
    """

    def __init__(
        self,
        mark: Mark = GameConfig.COMPUTER_MARK,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
            seed: Seed for the random generator.
            rng: A ready-made generator; overrides `seed`.
        """
        self.mark = mark
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self._strategies = {
            Difficulty.EASY: self.random_move,
            Difficulty.MEDIUM: self.medium_move,
            Difficulty.HARD: self.best_move,
        }

    def choose_move(self, board: Board, difficulty: Union[Difficulty, str] = Difficulty.HARD) -> Optional[int]:
        """
        Pick a move for the given difficulty.

        Args:
            board: Current board. It is never modified.
            difficulty: Difficulty level or its name.

        Returns:
            Cell index, or None if there is no legal move.
        """
        strategy = self._strategies[Difficulty.parse(difficulty)]
        return strategy(board)

    def random_move(self, board: Board) -> Optional[int]:
        """Any empty cell, uniformly at random."""
        moves = legal_moves(board)
        if not moves:
            return None
        return int(self.rng.choice(moves))

    def medium_move(self, board: Board) -> Optional[int]:
        """Flip a fair coin each turn: minimax on heads, random on tails."""
        if self.rng.random() < 0.5:
            return self.best_move(board)
        return self.random_move(board)

    def best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move using exhaustive minimax.

        Candidates are tried in ascending index order and only a strictly
        better score replaces the current best, so the lowest index wins ties.

        Returns:
            Cell index, or None if no moves are available.
        """
        moves = legal_moves(board)
        if not moves:
            return None

        best_score = float('-inf')
        best_move = None

        for index in moves:
            score = _score_position(
                apply_move(board, index, self.mark),
                self.mark.opposite(),
                self.mark,
                0
            )
            if score > best_score:
                best_score = score
                best_move = index

        logger.debug("%s minimax picked cell %d (score %d)", self.mark.value, best_move, best_score)
        return best_move


def computer_move(
    board: Board,
    mark: Mark = GameConfig.COMPUTER_MARK,
    difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
    rng: Optional[np.random.Generator] = None
) -> Optional[int]:
    """One-shot helper: choose a move for `mark` without keeping an AIPlayer."""
    return AIPlayer(mark, rng=rng).choose_move(board, difficulty)
