"""
Tic-Tac-Toe UI
A graphical interface for playing against the computer using Tkinter.

Shows:
- The 3x3 board (click a cell to place X)
- Game status and scores
- Difficulty level selection
- Thinking delay for the computer
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from tictactoe.ai_player import Difficulty
from tictactoe.config import GameConfig, default_delay, parse_delay
from tictactoe.game_state import Mark
from tictactoe.session import GameSession

from main import score_text, status_text

logger = logging.getLogger(__name__)

CELL_BG = '#16213e'
WIN_BG = '#ffd700'
MARK_COLORS = {Mark.X: '#00ff88', Mark.O: '#ff6b6b'}
DIFFICULTY_COLORS = {
    Difficulty.EASY: '#4ade80',
    Difficulty.MEDIUM: '#fbbf24',
    Difficulty.HARD: '#f87171',
}


class TicTacToeUI:
    """
    Main UI class for the game.
    """

    def __init__(
        self,
        difficulty=GameConfig.DEFAULT_DIFFICULTY,
        delay_ms: Optional[int] = None,
        seed: Optional[int] = None,
        root: Optional[tk.Tk] = None
    ):
        """Initialize the UI."""
        self.session = GameSession(difficulty=difficulty, seed=seed)

        # after() id of the scheduled computer move
        self.pending_move: Optional[str] = None

        self.root = root if root is not None else tk.Tk()
        self._create_ui(default_delay() if delay_ms is None else delay_ms)
        self._refresh()

    def _create_ui(self, delay_ms: int):
        """Create the Tkinter UI."""
        self.root.title("Tic-Tac-Toe")
        self.root.configure(bg='#1a1a2e')
        self.root.minsize(360, 520)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text="🎮 Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 10))

        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(9):
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=3,
                height=1,
                bg=CELL_BG,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=index // 3, column=index % 3, padx=2, pady=2)
            self.board_cells.append(cell)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.score_label = ttk.Label(main_frame, text="")
        self.score_label.pack()

        # Difficulty section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(main_frame, text="⚙️ Difficulty", style='Title.TLabel').pack()

        diff_frame = ttk.Frame(main_frame)
        diff_frame.pack(pady=10)

        self.difficulty_buttons = {}
        for level in Difficulty:
            btn = tk.Button(
                diff_frame,
                text=level.value.capitalize(),
                font=('Segoe UI', 10, 'bold'),
                width=8,
                activebackground=DIFFICULTY_COLORS[level],
                command=lambda d=level: self._set_difficulty(d)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.difficulty_buttons[level] = btn

        # Thinking delay
        delay_frame = ttk.Frame(main_frame)
        delay_frame.pack(pady=5)
        ttk.Label(delay_frame, text="Thinking delay (0-2000 ms):").pack(side=tk.LEFT)
        self.delay_var = tk.StringVar(value=str(delay_ms))
        ttk.Entry(delay_frame, textvariable=self.delay_var, width=6).pack(side=tk.LEFT, padx=5)

        # Control buttons
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Reset Score",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._reset_score
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        accepted, state = self.session.submit_human_move(index)
        if not accepted:
            return

        self._refresh()
        if state.is_active:
            delay = parse_delay(self.delay_var.get())
            self.pending_move = self.root.after(delay, self._computer_turn)

    def _computer_turn(self):
        """Play the computer's move (runs on the UI thread after the delay)."""
        self.pending_move = None
        self.session.request_computer_move()
        self._refresh()

    def _cancel_pending(self):
        if self.pending_move is not None:
            self.root.after_cancel(self.pending_move)
            self.pending_move = None

    def _set_difficulty(self, level: Difficulty):
        """Set the AI difficulty level. Starts a new game."""
        self._cancel_pending()
        self.session.set_difficulty(level)
        self._refresh()

    def _reset_game(self):
        self._cancel_pending()
        self.session.reset()
        self._refresh()

    def _reset_score(self):
        self._cancel_pending()
        self.session.reset_score()
        self._refresh()

    def _refresh(self):
        """Redraw board, status, scores and difficulty buttons."""
        state = self.session.get_state()
        winning = set(state.outcome.line or ())

        for index, cell in enumerate(self.board_cells):
            mark = state.board[index]
            cell.configure(
                text=mark.value if mark is not None else "",
                fg=MARK_COLORS.get(mark, 'white'),
                bg=WIN_BG if index in winning else CELL_BG
            )

        self.status_label.configure(text=status_text(state))
        self.score_label.configure(text=score_text(self.session))

        for level, btn in self.difficulty_buttons.items():
            if level == self.session.difficulty:
                btn.configure(bg=DIFFICULTY_COLORS[level], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting")
        self._cancel_pending()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


if __name__ == "__main__":
    from main import main
    main()
