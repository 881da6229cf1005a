"""
Main entry point for tic-tac-toe against the computer.

Launches the Tk window by default, or a console game with --console.

Console commands:
    0-8            place X on that cell
    r              new game
    s              reset the score
    d <level>      set difficulty (easy, medium, hard)
    q              quit
"""

import argparse
import logging
import time
from typing import Optional

from tictactoe.ai_player import Difficulty
from tictactoe.config import GameConfig, default_delay, parse_delay
from tictactoe.game_state import GameState, Status, format_board
from tictactoe.session import GameSession


def status_text(state: GameState, human_mark=GameConfig.HUMAN_MARK) -> str:
    """One-line status for the current state."""
    if state.outcome.status == Status.WIN:
        return "You win!" if state.outcome.winner == human_mark else "Computer wins!"
    if state.outcome.status == Status.DRAW:
        return "Draw!"
    if state.current_mark == human_mark:
        return f"Your turn ({human_mark.value})"
    return f"Computer ({state.current_mark.value}) is thinking..."


def score_text(session: GameSession) -> str:
    scores = session.get_scores()
    return (
        f"You: {scores.human_wins}  |  Computer: {scores.computer_wins}  |  "
        f"Draws: {scores.draws}  ({session.difficulty.value})"
    )


class ConsoleGame:
    """
    Plays a session in the terminal.

    Game flow:
    1. Human types a cell number
    2. Computer waits the thinking delay, then answers
    3. Repeat; after a game ends, type 'r' for a new one
    """

    def __init__(self, session: GameSession, delay_ms: int):
        self.session = session
        self.delay_ms = delay_ms
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\n" + "=" * 40)
        print("   Tic-Tac-Toe - you are X")
        print("=" * 40)
        print(__doc__.split("Console commands:")[1])

        self.is_running = True
        self._show()
        while self.is_running:
            try:
                line = input("> ").strip()
            except EOFError:
                break
            self.handle_command(line)

    def handle_command(self, line: str):
        """Run one console command."""
        if not line:
            return

        command, _, argument = line.partition(" ")
        command = command.lower()

        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            self.session.reset()
            self._show()
        elif command == "s":
            self.session.reset_score()
            self._show()
        elif command == "d":
            try:
                self.session.set_difficulty(argument)
            except ValueError as e:
                print(e)
                return
            self._show()
        elif command.isdecimal():
            self._human_move(int(command))
        else:
            print(f"Unknown command: {line}")

    def _human_move(self, index: int):
        accepted, state = self.session.submit_human_move(index)
        if not accepted:
            print("That move is not allowed.")
            return

        self._show()
        if state.is_active:
            time.sleep(self.delay_ms / 1000.0)
            move = self.session.request_computer_move()
            if move is not None:
                print(f"\nComputer played cell {move}")
            self._show()

    def _show(self):
        state = self.session.get_state()
        print()
        print(format_board(state.board))
        print(f"\n{status_text(state)}")
        print(score_text(self.session))


def main(argv: Optional[list] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe vs. Computer")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="Computer difficulty (default: %(default)s)"
    )
    parser.add_argument(
        "--delay",
        default=None,
        help="Computer thinking delay in ms, 0-2000"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Play in the terminal instead of the window"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move"
    )

    args = parser.parse_args(argv)

    # argparse skips the choices check for defaults, which may come from the environment
    try:
        args.difficulty = Difficulty.parse(args.difficulty).value
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    delay_ms = default_delay() if args.delay is None else parse_delay(args.delay)

    if not args.console:
        from ui import TicTacToeUI
        ui = TicTacToeUI(difficulty=args.difficulty, delay_ms=delay_ms, seed=args.seed)
        ui.run()
        return

    session = GameSession(difficulty=args.difficulty, seed=args.seed)
    game = ConsoleGame(session, delay_ms)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
