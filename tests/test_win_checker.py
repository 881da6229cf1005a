import itertools
import unittest

from tictactoe.game_state import DRAW, IN_PROGRESS, Mark, Outcome, Status, WINNING_LINES
from tictactoe.win_checker import WinChecker, evaluate

X, O, _ = Mark.X, Mark.O, None


class TestWinChecker(unittest.TestCase):
    def setUp(self) -> None:
        self.checker = WinChecker()

    def test_every_line_is_detected(self) -> None:
        for line in WINNING_LINES:
            board = [_] * 9
            for index in line:
                board[index] = O
            outcome = self.checker.evaluate(tuple(board))
            self.assertEqual(outcome, Outcome.win(O, line))

    def test_row_win_reports_line(self) -> None:
        board = (X, X, X, O, O, _, _, _, _)
        outcome = evaluate(board)
        self.assertEqual(outcome.status, Status.WIN)
        self.assertEqual(outcome.winner, X)
        self.assertEqual(outcome.line, (0, 1, 2))
        self.assertEqual(self.checker.check_winner(board), X)
        self.assertEqual(self.checker.get_winning_line(board), (0, 1, 2))

    def test_full_board_without_line_is_draw(self) -> None:
        board = (X, O, X, X, O, O, O, X, X)
        self.assertEqual(evaluate(board), DRAW)
        self.assertTrue(self.checker.check_draw(board))
        self.assertIsNone(self.checker.check_winner(board))

    def test_win_on_last_cell_is_not_draw(self) -> None:
        board = (X, O, X, O, X, O, O, X, X)
        self.assertEqual(evaluate(board), Outcome.win(X, (0, 4, 8)))

    def test_partial_board_in_progress(self) -> None:
        self.assertEqual(evaluate((X, O, _, _, _, _, _, _, _)), IN_PROGRESS)
        self.assertEqual(evaluate((_,) * 9), IN_PROGRESS)

    def test_first_declared_line_wins_when_several_complete(self) -> None:
        board = (X, X, X, X, O, O, X, O, O)
        self.assertEqual(evaluate(board).line, (0, 1, 2))

    def test_evaluate_is_pure_over_all_small_boards(self) -> None:
        # Every board with up to three marks placed
        for count in range(4):
            for cells in itertools.combinations(range(9), count):
                board = [_] * 9
                for n, index in enumerate(cells):
                    board[index] = X if n % 2 == 0 else O
                board = tuple(board)
                first = evaluate(board)
                self.assertEqual(first, evaluate(board))
                self.assertIn(first.status, (Status.IN_PROGRESS, Status.WIN, Status.DRAW))


if __name__ == "__main__":
    unittest.main()
