import unittest

from tictactoe.game_state import (
    DRAW,
    IN_PROGRESS,
    GameState,
    InvalidMoveError,
    Mark,
    Outcome,
    Phase,
    ScoreBoard,
    apply_move,
    empty_board,
    format_board,
    is_full,
)

X, O, _ = Mark.X, Mark.O, None


class TestBoard(unittest.TestCase):
    def test_empty_board_has_nine_empty_cells(self) -> None:
        board = empty_board()
        self.assertEqual(len(board), 9)
        self.assertTrue(all(cell is None for cell in board))

    def test_apply_move_returns_new_board(self) -> None:
        board = empty_board()
        after = apply_move(board, 4, X)
        self.assertEqual(after[4], X)
        self.assertIsNone(board[4])

    def test_apply_move_rejects_occupied_and_out_of_range(self) -> None:
        board = apply_move(empty_board(), 0, X)
        with self.assertRaises(InvalidMoveError):
            apply_move(board, 0, O)
        with self.assertRaises(InvalidMoveError):
            apply_move(board, 9, O)
        with self.assertRaises(InvalidMoveError):
            apply_move(board, -1, O)

    def test_is_full(self) -> None:
        self.assertFalse(is_full(empty_board()))
        full = (X, O, X, X, O, O, O, X, X)
        self.assertTrue(is_full(full))
        self.assertFalse(is_full((X, O, X, X, O, O, O, X, _)))

    def test_format_board_shows_marks_and_free_indices(self) -> None:
        text = format_board((X, _, _, _, O, _, _, _, _))
        self.assertIn("X | 1 | 2", text)
        self.assertIn("3 | O | 5", text)


class TestGameState(unittest.TestCase):
    def test_new_state_awaits_human(self) -> None:
        state = GameState()
        self.assertEqual(state.current_mark, X)
        self.assertTrue(state.is_active)
        self.assertEqual(state.outcome, IN_PROGRESS)
        self.assertEqual(state.phase, Phase.AWAITING_HUMAN_MOVE)

    def test_phase_follows_mark_and_activity(self) -> None:
        state = GameState(current_mark=O)
        self.assertEqual(state.phase, Phase.AWAITING_COMPUTER_MOVE)
        state.is_active = False
        self.assertEqual(state.phase, Phase.ENDED)

    def test_copy_does_not_share_move_history(self) -> None:
        state = GameState()
        snapshot = state.copy()
        state.moves.append("dummy")
        self.assertEqual(snapshot.moves, [])


class TestScoreBoard(unittest.TestCase):
    def test_record_counts_each_outcome(self) -> None:
        scores = ScoreBoard()
        scores.record(Outcome.win(X, (0, 1, 2)))
        scores.record(Outcome.win(O, (2, 4, 6)))
        scores.record(Outcome.win(O, (0, 3, 6)))
        scores.record(DRAW)
        scores.record(IN_PROGRESS)
        self.assertEqual(scores.as_dict(), {"human_wins": 1, "computer_wins": 2, "draws": 1})

    def test_reset_zeroes_counters(self) -> None:
        scores = ScoreBoard(human_wins=3, computer_wins=4, draws=5)
        scores.reset()
        self.assertEqual(scores, ScoreBoard())


if __name__ == "__main__":
    unittest.main()
