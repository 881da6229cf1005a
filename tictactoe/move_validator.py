"""
Move validator for tic-tac-toe.
Lists legal moves and screens move requests before they reach the board.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import Board, BOARD_CELLS, GameState, Mark


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def legal_moves(board: Board) -> List[int]:
    """Indices of the empty cells, ascending."""
    return [index for index in range(BOARD_CELLS) if board[index] is None]


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. Game must not be over
    2. Index must be an integer in 0-8
    3. It must be that mark's turn
    4. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index, mark: Mark) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on. Anything that is not an int
                in 0-8 is rejected.
            mark: The mark being placed.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not game_state.is_active:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # bool is an int subclass, reject it explicitly
        if isinstance(index, bool) or not isinstance(index, int):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be an integer."
            )

        if not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-8."
            )

        if game_state.current_mark != mark:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {mark.value}'s turn!"
            )

        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the mark to move.

        Returns:
            Empty cell indices, or [] once the game is over.
        """
        if not game_state.is_active:
            return []
        return legal_moves(game_state.board)
