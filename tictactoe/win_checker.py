"""
Win checker for tic-tac-toe.
Decides whether a board is won, drawn, or still in progress.
"""

from typing import Optional, Tuple
from .game_state import (
    Board,
    DRAW,
    IN_PROGRESS,
    Mark,
    Outcome,
    WINNING_LINES,
    is_full,
)


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    Win condition: 3 cells holding the same mark in a row
    (horizontally, vertically, or diagonally). Lines are checked in
    the order of WINNING_LINES and the first complete one is reported.
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Board) -> Outcome:
        """
        Evaluate a board.

        Args:
            board: The board to check.

        Returns:
            Outcome.win(mark, line), DRAW, or IN_PROGRESS.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return Outcome.win(winner, line)

        if is_full(board):
            return DRAW

        return IN_PROGRESS

    def check_winner(self, board: Board) -> Optional[Mark]:
        """The winning mark, or None if nobody has three in a row."""
        return self.evaluate(board).winner

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """The first complete line, or None."""
        return self.evaluate(board).line

    def check_draw(self, board: Board) -> bool:
        """True when the board is full and nobody has won."""
        return self.evaluate(board) == DRAW

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Mark]:
        a, b, c = line
        mark = board[a]
        if mark is not None and mark == board[b] == board[c]:
            return mark
        return None


_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Module-level shortcut for WinChecker().evaluate()."""
    return _checker.evaluate(board)
