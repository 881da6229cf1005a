"""
Game state for tic-tac-toe.
Holds the board model, the outcome types, and the running scores.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field, replace


class Mark(Enum):
    """The two marks on the board. X is the human, O the computer."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


# 9 cells, row by row. None means empty.
Board = Tuple[Optional[Mark], ...]

BOARD_CELLS = 9

# Rows, then columns, then diagonals
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class InvalidMoveError(ValueError):
    """Raised when a move is applied to an occupied or non-existent cell."""


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    For a win, `winner` is the mark and `line` the index triple that won.
    """
    status: Status
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def win(cls, mark: Mark, line: Tuple[int, int, int]) -> "Outcome":
        return cls(Status.WIN, winner=mark, line=tuple(line))

    @property
    def is_terminal(self) -> bool:
        return self.status != Status.IN_PROGRESS


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


class Phase(Enum):
    """Where the session is in its turn cycle."""
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    AWAITING_COMPUTER_MOVE = "awaiting_computer_move"
    ENDED = "ended"


def empty_board() -> Board:
    """A board with all 9 cells empty."""
    return (None,) * BOARD_CELLS


def apply_move(board: Board, index: int, mark: Mark) -> Board:
    """
    Place a mark and return the new board.

    Args:
        board: The current board (left unchanged).
        index: Cell index (0-8).
        mark: The mark to place.

    Returns:
        A new board with `index` occupied by `mark`.

    Raises:
        InvalidMoveError: If the index is out of range or the cell is taken.
    """
    if not 0 <= index < BOARD_CELLS:
        raise InvalidMoveError(f"Invalid cell {index}. Must be 0-8.")
    if board[index] is not None:
        raise InvalidMoveError(f"Cell {index} is already occupied by {board[index].value}")

    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def is_full(board: Board) -> bool:
    """True when no empty cell remains."""
    return all(cell is not None for cell in board)


def format_board(board: Board) -> str:
    """Render the board as a 3x3 text grid, empty cells show their index."""
    rows = []
    for row in range(3):
        cells = []
        for col in range(3):
            index = row * 3 + col
            mark = board[index]
            cells.append(mark.value if mark is not None else str(index))
        rows.append(" " + " | ".join(cells))
    return "\n---+---+---\n".join(rows)


@dataclass
class Move:
    """A move that was played."""
    mark: Mark              # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # 0 for the first move of the game


@dataclass
class GameState:
    """
    The state of one game.

    Tracks:
    - The board (immutable snapshot, replaced on every move)
    - Mark to move
    - Whether the game is still active
    - The last outcome (in progress, win with line, draw)
    - Move history
    """

    board: Board = field(default_factory=empty_board)

    # X always opens
    current_mark: Mark = Mark.X

    is_active: bool = True
    outcome: Outcome = IN_PROGRESS

    moves: List[Move] = field(default_factory=list)

    @property
    def phase(self) -> Phase:
        if not self.is_active:
            return Phase.ENDED
        if self.current_mark == Mark.X:
            return Phase.AWAITING_HUMAN_MOVE
        return Phase.AWAITING_COMPUTER_MOVE

    def copy(self) -> "GameState":
        """Create a snapshot that shares nothing mutable with this state."""
        return replace(self, moves=list(self.moves))


@dataclass
class ScoreBoard:
    """Wins and draws across the games of one session."""
    human_wins: int = 0
    computer_wins: int = 0
    draws: int = 0

    def record(self, outcome: Outcome, human_mark: Mark = Mark.X):
        """Count a finished game. In-progress outcomes are ignored."""
        if outcome.status == Status.DRAW:
            self.draws += 1
        elif outcome.status == Status.WIN:
            if outcome.winner == human_mark:
                self.human_wins += 1
            else:
                self.computer_wins += 1

    def reset(self):
        self.human_wins = 0
        self.computer_wins = 0
        self.draws = 0

    def copy(self) -> "ScoreBoard":
        return replace(self)

    def as_dict(self) -> dict:
        return {
            "human_wins": self.human_wins,
            "computer_wins": self.computer_wins,
            "draws": self.draws,
        }
