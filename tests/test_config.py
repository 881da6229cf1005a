import unittest

from tictactoe.config import GameConfig, parse_delay
from tictactoe.game_state import Mark


class TestConfig(unittest.TestCase):
    def test_fixed_marks(self) -> None:
        self.assertIs(GameConfig.HUMAN_MARK, Mark.X)
        self.assertIs(GameConfig.COMPUTER_MARK, Mark.O)

    def test_parse_delay_clamps(self) -> None:
        self.assertEqual(parse_delay("750"), 750)
        self.assertEqual(parse_delay("-20"), 0)
        self.assertEqual(parse_delay("99999"), 2000)
        self.assertEqual(parse_delay("12.6"), 13)

    def test_parse_delay_fallbacks(self) -> None:
        self.assertEqual(parse_delay("soon"), 500)
        self.assertEqual(parse_delay("nan"), 500)
        self.assertEqual(parse_delay("abc", default=100), 100)
        self.assertEqual(parse_delay(""), 0)
        self.assertEqual(parse_delay(None), 0)


if __name__ == "__main__":
    unittest.main()
