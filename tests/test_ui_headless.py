import unittest

try:
    import tkinter as tk
except ImportError:  # Python built without Tk
    tk = None

from tictactoe.game_state import Mark


@unittest.skipIf(tk is None, "tkinter not installed")
class TestUiHeadless(unittest.TestCase):
    def setUp(self) -> None:
        try:
            self.root = tk.Tk()
        except tk.TclError:
            self.skipTest("Tk unavailable in headless environment")
        self.root.withdraw()

        import ui

        self.ui = ui.TicTacToeUI(difficulty="hard", delay_ms=0, seed=0, root=self.root)

    def tearDown(self) -> None:
        self.root.destroy()

    def test_click_schedules_and_plays_computer_move(self) -> None:
        self.ui._on_cell_click(4)
        self.assertIsNotNone(self.ui.pending_move)
        self.assertEqual(self.ui.board_cells[4].cget("text"), "X")

        self.ui._computer_turn()

        self.assertIsNone(self.ui.pending_move)
        self.assertEqual(self.ui.session.get_state().board[0], Mark.O)
        self.assertEqual(self.ui.board_cells[0].cget("text"), "O")

    def test_reset_cancels_pending_move(self) -> None:
        self.ui._on_cell_click(4)
        self.ui._reset_game()
        self.assertIsNone(self.ui.pending_move)
        self.assertEqual(self.ui.board_cells[4].cget("text"), "")


if __name__ == "__main__":
    unittest.main()
