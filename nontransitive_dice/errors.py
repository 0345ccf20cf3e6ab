EXAMPLE_DICE = "2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7"


class DiceGameError(Exception):
    """Base class for faults raised by the game."""


class ArgumentError(DiceGameError):
    """
    Raised when the command-line dice are invalid.
    Renders a formatted message including an example of correct usage.
    """
    _program_name = "nontransitive-dice"

    @staticmethod
    def set_program_name(name: str):
        """Sets the command shown in the usage example (e.g. `python -m nontransitive_dice`)."""
        ArgumentError._program_name = name

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        example = f"{ArgumentError._program_name} {EXAMPLE_DICE}"
        return f"\nArgument Error: {self.message}\n\nExample usage:\n{example}\n"

    @classmethod
    def not_enough_dice(cls, count: int, minimum: int) -> "ArgumentError":
        return cls(f"Please specify at least {minimum} dice, got {count}.")

    @classmethod
    def non_integer_value(cls, label: str, token: str) -> "ArgumentError":
        return cls(f"Error in {label}: face value {token!r} is not an integer.")

    @classmethod
    def wrong_face_count(cls, label: str, expected: int, actual: int) -> "ArgumentError":
        return cls(f"Error in {label}: each die must have exactly {expected} faces, got {actual}.")

    @classmethod
    def invalid_face_count(cls, count: int) -> "ArgumentError":
        return cls(f"The number of faces must be positive, got {count}.")


class EntropySourceUnavailable(DiceGameError):
    """The secure random source could not supply bytes. Fatal, never retried."""


class InvalidSelection(DiceGameError):
    """An out-of-range or unparsable menu choice; the menu re-prompts."""


class UserCancelled(Exception):
    """The user chose to exit or interrupted the game. Not an error."""
