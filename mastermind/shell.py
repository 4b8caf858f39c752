"""
Text console for playing Mastermind.

    mastermind> move 0 1 2 3      (you guess; the computer keeps the secret)
    black: 2 white: 1
    mastermind> switch            (the computer guesses; you rate)
    machine guess: 0 0 0 0
    mastermind> eval 1 0
    machine guess: 0 1 1 1

Commands are recognised by their first letter: help, quit, switch, new, move, eval.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import DEFAULT_CONFIG, GameConfig, configure_logging, load_config
from .engine import Code, Feedback
from .errors import Contradiction, InvalidArgument
from .session import GameSession, new_game

log = logging.getLogger(__name__)

PROMPT = "mastermind> "


class Shell:
    def __init__(self, config: GameConfig = DEFAULT_CONFIG, out: TextIO = sys.stdout,
                 solver_guessing: bool = False) -> None:
        self.config = config
        self.out = out
        self.session = self._new_game(solver_guessing)

    def run(self, stdin: TextIO = sys.stdin) -> None:
        while True:
            self.out.write(PROMPT)
            self.out.flush()
            line = stdin.readline()
            if not line:
                # end of input behaves like quit
                break
            if not self.execute(line):
                break

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the user quits."""
        tokens = line.split()
        if not tokens:
            return True
        command = tokens[0].lower()
        args = tokens[1:]

        first = command[0]
        if first == "h":
            self._print(self.help_text())
        elif first == "q":
            return False
        elif first == "s":
            self.session = self._new_game(not self.session.is_solver_guessing())
        elif first == "n":
            self.session = self._new_game(self.session.is_solver_guessing())
        elif first == "m":
            self._human_move(args)
        elif first == "e":
            self._eval(args)
        else:
            self._error(f"Invalid command {command}")
        return True

    # --- Commands ---

    def _new_game(self, solver_guessing: bool) -> GameSession:
        session = new_game(solver_guessing, self.config)
        if solver_guessing:
            self._print(f"machine guess: {session.request_solver_move()}")
        return session

    def _human_move(self, args: List[str]) -> None:
        if self.session.is_over():
            self._game_over()
            return
        if self.session.is_solver_guessing():
            self._wrong_mode()
            return
        pegs = self._numbers(args, self.config.colors - 1)
        if pegs is None:
            return
        if len(pegs) < self.config.slots:
            self._error(f"This command needs {self.config.slots} arguments.")
            return
        try:
            feedback = self.session.submit_guess(Code.parse(pegs, self.config))
        except InvalidArgument as err:
            self._error(str(err))
            return

        if self.session.status == "won":
            self._print(f"Congratulations! You needed {self.session.move_count} moves.")
        elif self.session.status == "exhausted":
            self._print(f"No more moves - solution: {self.session.reveal_secret()}")
        else:
            self._print(str(feedback))

    def _eval(self, args: List[str]) -> None:
        if self.session.is_over():
            self._game_over()
            return
        if not self.session.is_solver_guessing():
            self._wrong_mode()
            return
        if len(args) < 2:
            self._error("This command needs 2 arguments.")
            return
        numbers = self._numbers(args[:2], self.config.slots)
        if numbers is None:
            return
        try:
            feedback = Feedback.parse(numbers[0], numbers[1], self.config)
        except InvalidArgument:
            self._error(f"This is not a valid Rating. black: {numbers[0]} white: {numbers[1]}")
            return

        self.session.submit_feedback_for_solver_move(feedback)
        if self.session.status == "won":
            self._print("Wow! I did it!")
        elif self.session.status == "exhausted":
            self._print("No more moves - I couldn't find solution.")
        elif self.session.status == "cheated":
            self._print("No possibilities left - you have been cheating!")
        else:
            try:
                move = self.session.request_solver_move()
            except Contradiction:
                self._print("No possibilities left - you have been cheating!")
                return
            self._print(f"machine guess: {move}")

    # --- Output ---

    def _numbers(self, args: List[str], highest: int) -> Optional[List[int]]:
        numbers = []
        for arg in args:
            try:
                numbers.append(int(arg))
            except ValueError:
                self._error(f"{arg} is not a number from 0 to {highest}.")
                return None
        return numbers

    def _wrong_mode(self) -> None:
        self._error("Cannot perform the Command in this Mode.\nUse the switch command.")

    def _game_over(self) -> None:
        self._error('Game is over. Please start a new one with "new"')

    def _error(self, message: str) -> None:
        self._print(f"Error! {message}")

    def _print(self, text: str) -> None:
        self.out.write(text + "\n")

    def help_text(self) -> str:
        slots = self.config.slots
        highest = self.config.colors - 1
        return (
            "\n"
            "One black peg means that one coloured peg of the right color is in the\n"
            "right place. One white peg means a right color in the wrong place.\n"
            "\n"
            "quit\n"
            "Quits the application.\n"
            "\n"
            "switch\n"
            "Switches the roles of the player and the computer.\n"
            "Initially the computer is the coder and the player is the guesser.\n"
            "\n"
            "new\n"
            "Creates a new game without changing the roles.\n"
            "\n"
            "move\n"
            "(only if the player is guessing)\n"
            f"Sets the {slots} coloured pegs as a guess.\n"
            f"The command must be followed by {slots} numbers from 0 to {highest}.\n"
            "\n"
            "eval\n"
            "(only if the computer is guessing)\n"
            "Rates the move the computer has taken.\n"
            f"The command must be followed by 2 numbers from 0 to {slots},\n"
            "the number of black pegs and the number of white pegs.\n"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Mastermind on the console, as codebreaker or codemaker.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    defaults = load_config()
    parser.add_argument("--slots", type=int, default=defaults.slots, help="Pegs per code")
    parser.add_argument("--colors", type=int, default=defaults.colors, help="Number of colors")
    parser.add_argument("--max-moves", type=int, default=defaults.max_moves, help="Move budget per game")
    parser.add_argument("--solver-guessing", action="store_true",
                        help="Start with the computer as the codebreaker")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log solver details")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        parser = build_parser()
    except RuntimeError as err:
        # bad MASTERMIND_* values in the environment
        configure_logging(logging.WARNING)
        log.error("%s", err)
        return 2
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        config = GameConfig(slots=args.slots, colors=args.colors, max_moves=args.max_moves).validate()
    except InvalidArgument as err:
        log.error("%s", err)
        return 2
    Shell(config, solver_guessing=args.solver_guessing).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
