"""
Fair value exchange: one round of commit, contribute, reveal, combine.

The computer commits to its number before the user chooses theirs, so the
combined result is uniform over the range whatever strategy the user follows,
and the revealed key lets the user check the commitment afterwards.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .commitment import CommitmentGenerator, verify_commitment
from .logging_config import setup_logger
from .ui import HELP, GameUI

logger = setup_logger(__name__)


@dataclass(frozen=True)
class ExchangeResult:
    value: int
    computer_value: int
    user_value: int
    key: bytes
    hmac: str
    min_value: int
    max_value: int

    @property
    def modulus(self) -> int:
        return self.max_value - self.min_value + 1

    def verify(self) -> bool:
        return verify_commitment(self.key, self.computer_value, self.hmac)


def combine(computer_value: int, user_value: int, min_value: int, max_value: int) -> int:
    width = max_value - min_value + 1
    return (computer_value - min_value + user_value) % width + min_value


class FairInteraction:
    def __init__(self, generator: CommitmentGenerator, ui: GameUI):
        self.generator = generator
        self.ui = ui

    def exchange(self, min_value: int, max_value: int, purpose: str,
                 on_help: Optional[Callable[[], None]] = None) -> ExchangeResult:
        """
        Run one exchange round over [min_value, max_value].

        `on_help` is called when the user asks for help; the user is then
        re-prompted against the same commitment. Raises UserCancelled if the
        user exits before contributing.
        """
        width = max_value - min_value + 1
        self.ui.display_message(f"\nGenerating fair random number for {purpose}:")
        commitment = self.generator.generate(min_value, max_value)
        self.ui.display_hmac(min_value, max_value, commitment.hmac)

        options = {i: str(i) for i in range(width)}
        while True:
            choice = self.ui.get_user_choice(f"Add your number modulo {width}.", options,
                                             allow_help=on_help is not None)
            if choice == HELP:
                on_help()
                continue
            user_value = choice
            break

        self.ui.display_key_and_move(commitment.key_hex, commitment.value)
        result = combine(commitment.value, user_value, min_value, max_value)
        if min_value == 0:
            arithmetic = f"{commitment.value} + {user_value} = {result} (mod {width})"
        else:
            arithmetic = f"({commitment.value} - {min_value} + {user_value}) mod {width} + {min_value} = {result}"
        self.ui.display_message(f"The fair number generation result is {arithmetic}.")
        logger.debug(f"Exchange for {purpose}: computer={commitment.value} user={user_value} result={result}")

        return ExchangeResult(
            value=result,
            computer_value=commitment.value,
            user_value=user_value,
            key=commitment.key,
            hmac=commitment.hmac,
            min_value=min_value,
            max_value=max_value,
        )
