"""
Game session for tic-tac-toe.

Owns the game state and the scores, and runs the turn cycle:
1. Human (X) submits a move
2. Move is validated, applied and the board evaluated
3. Computer (O) picks a move for the current difficulty
4. Move is applied and the board evaluated
5. Repeat until someone wins or the board is full

Invalid requests are ignored and leave the state unchanged.
"""

import logging
import threading
from typing import Optional, Tuple, Union

from .ai_player import AIPlayer, Difficulty
from .config import GameConfig
from .game_state import GameState, Mark, Move, ScoreBoard, apply_move
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class GameSession:
    """
    Controller for a series of games between the human and the computer.

    Every public method runs under one lock, so only one move is ever in
    flight even when a front end computes the computer move on a worker
    thread.
    """

    def __init__(
        self,
        difficulty: Union[Difficulty, str] = GameConfig.DEFAULT_DIFFICULTY,
        seed: Optional[int] = None,
        ai: Optional[AIPlayer] = None
    ):
        """
        Initialize the session.

        Args:
            difficulty: Starting difficulty (default: medium).
            seed: Seed for the computer's random choices.
            ai: A ready-made AI player; overrides `seed`.
        """
        self.human_mark = GameConfig.HUMAN_MARK
        self.computer_mark = GameConfig.COMPUTER_MARK

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = ai if ai is not None else AIPlayer(self.computer_mark, seed=seed)

        self._difficulty = Difficulty.parse(difficulty)
        self._lock = threading.Lock()

        self.state = GameState()
        self.scores = ScoreBoard()

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def submit_human_move(self, index: int) -> Tuple[bool, GameState]:
        """
        Play the human's move.

        Args:
            index: Cell index (0-8).

        Returns:
            (accepted, snapshot of the state after the call).
        """
        with self._lock:
            accepted = self._play(index, self.human_mark)
            return accepted, self.state.copy()

    def request_computer_move(self) -> Optional[int]:
        """
        Let the computer pick and play its move.

        Returns:
            The cell played, or None when it is not the computer's turn
            or no move is available. State is unchanged in that case.
        """
        with self._lock:
            if not self.state.is_active or self.state.current_mark != self.computer_mark:
                logger.debug("Computer move requested out of turn, ignoring")
                return None

            index = self.ai.choose_move(self.state.board, self._difficulty)
            if index is None:
                logger.warning("Computer has no legal move, leaving the game as is")
                return None

            if not self._play(index, self.computer_mark):
                return None
            return index

    def get_state(self) -> GameState:
        """Snapshot of the current game state."""
        with self._lock:
            return self.state.copy()

    def get_scores(self) -> ScoreBoard:
        """Snapshot of the scores."""
        with self._lock:
            return self.scores.copy()

    def reset(self):
        """Start a new game. Scores are kept."""
        with self._lock:
            self._reset()

    def reset_score(self):
        """Zero the scores and start a new game."""
        with self._lock:
            self.scores.reset()
            logger.info("Scores reset")
            self._reset()

    def set_difficulty(self, difficulty: Union[Difficulty, str]):
        """
        Change the difficulty and start a new game. Scores are kept.

        Raises:
            ValueError: For an unknown difficulty name.
        """
        level = Difficulty.parse(difficulty)
        with self._lock:
            self._difficulty = level
            logger.info("Difficulty set to %s", level.value)
            self._reset()

    def _play(self, index: int, mark: Mark) -> bool:
        result = self.validator.validate_move(self.state, index, mark)
        if not result.is_valid:
            logger.debug("Ignoring move by %s at %r: %s", mark.value, index, result.error_message)
            return False

        state = self.state
        state.board = apply_move(state.board, index, mark)
        state.moves.append(Move(mark=mark, index=index, move_number=len(state.moves)))
        logger.debug("%s played cell %d", mark.value, index)

        outcome = self.win_checker.evaluate(state.board)
        if outcome.is_terminal:
            state.outcome = outcome
            state.is_active = False
            self.scores.record(outcome, self.human_mark)
            if outcome.winner is not None:
                logger.info("%s wins on line %s", outcome.winner.value, outcome.line)
            else:
                logger.info("Game drawn")
        else:
            state.current_mark = mark.opposite()

        return True

    def _reset(self):
        self.state = GameState()
        logger.debug("New game, %s to move", self.state.current_mark.value)
