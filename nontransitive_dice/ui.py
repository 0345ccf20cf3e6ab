import sys

import click

from .errors import InvalidSelection, UserCancelled

HELP = "?"
EXIT = "x"


def parse_choice(text: str, options: dict[int, str], allow_help: bool = True):
    """Map one line of input to an option key, HELP, or raise InvalidSelection / UserCancelled."""
    choice = text.strip().lower()
    if choice == EXIT:
        raise UserCancelled()
    if choice == HELP and allow_help:
        return HELP
    try:
        key = int(choice)
    except ValueError:
        raise InvalidSelection(f"{text!r} is not a number") from None
    if key not in options:
        raise InvalidSelection(f"{key} is not an available option")
    return key


# ==============================================================================
# Console user interface
# ==============================================================================

class GameUI:
    """
    Menus and messages on top of two line-based primitives, `ask` and
    `display_message`. Subclasses supply the primitives; tests use a scripted
    one.
    """

    def display_message(self, text: str):
        raise NotImplementedError

    def ask(self, prompt: str) -> str:
        """Return one trimmed line, or raise UserCancelled."""
        raise NotImplementedError

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def display_hmac(self, min_value: int, max_value: int, hmac_hex: str):
        self.display_message(f"I selected a random value in the range {min_value}..{max_value} (HMAC={hmac_hex}).")

    def display_key_and_move(self, key_hex: str, move: int):
        self.display_message(f"My number is {move} (KEY={key_hex}).")

    def get_user_choice(self, prompt: str, options: dict[int, str], allow_help: bool = True):
        while True:
            self.display_message(prompt)
            for key, label in options.items():
                self.display_message(f"{key} - {label}")
            self.display_message("X - exit")
            if allow_help:
                self.display_message("? - help")

            answer = self.ask("Your selection: ")
            try:
                return parse_choice(answer, options, allow_help)
            except InvalidSelection:
                help_hint = ", or ? for help" if allow_help else ""
                self.display_message(f"Invalid selection. Please choose one of the listed numbers, X to exit{help_hint}.")


class ConsoleUI(GameUI):
    def __init__(self, stdin=None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._closed = False

    def display_message(self, text: str):
        click.echo(text)

    def ask(self, prompt: str) -> str:
        if self._closed:
            raise UserCancelled()
        click.echo(prompt, nl=False)
        try:
            line = self._stdin.readline()
        except KeyboardInterrupt:
            click.echo()
            raise UserCancelled() from None
        if not line:
            # End of input
            click.echo()
            raise UserCancelled()
        return line.strip()

    def close(self):
        self._closed = True
