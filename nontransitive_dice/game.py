import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .dice import Die, DiceSet
from .errors import UserCancelled
from .fair_random import FairInteraction
from .logging_config import setup_logger
from .probability import HelpTableGenerator
from .ui import HELP, GameUI

logger = setup_logger(__name__)


class GameState(Enum):
    DETERMINING_FIRST_PLAYER = "determining_first_player"
    SELECTING_DICE = "selecting_dice"
    ROLLING = "rolling"
    ADJUDICATING = "adjudicating"
    EXITED = "exited"
    COMPLETED = "completed"


TERMINAL_STATES = (GameState.EXITED, GameState.COMPLETED)


class Player(Enum):
    COMPUTER = "computer"
    USER = "user"

    @property
    def other(self) -> "Player":
        return Player.USER if self is Player.COMPUTER else Player.COMPUTER

    @property
    def possessive(self) -> str:
        return "my" if self is Player.COMPUTER else "your"


@dataclass
class GameOutcome:
    state: GameState
    first_player: Optional[Player] = None
    computer_die: Optional[Die] = None
    user_die: Optional[Die] = None
    computer_roll: Optional[int] = None
    user_roll: Optional[int] = None
    winner: Optional[Player] = None


# ==============================================================================
# Main game controller
# ==============================================================================

class GameController:
    """
    Runs one game as a finite state machine. Every random decision except the
    computer's choice of die goes through a fair exchange round; cancelling at
    any prompt moves the game to EXITED.
    """

    def __init__(self, dice: DiceSet, ui: GameUI, interaction: FairInteraction,
                 help_gen: HelpTableGenerator = None, chooser: random.Random = None):
        self.dice = dice
        self.ui = ui
        self.interaction = interaction
        self.help_gen = help_gen or HelpTableGenerator()
        # Only picks dice; never used for rolls
        self.chooser = chooser or random.Random()
        self.state = GameState.DETERMINING_FIRST_PLAYER
        self.outcome = GameOutcome(state=self.state)
        self._handlers = {
            GameState.DETERMINING_FIRST_PLAYER: self._determine_first_player,
            GameState.SELECTING_DICE: self._select_dice,
            GameState.ROLLING: self._roll,
            GameState.ADJUDICATING: self._adjudicate,
        }

    def run(self) -> GameOutcome:
        while self.state not in TERMINAL_STATES:
            try:
                next_state = self._handlers[self.state]()
            except UserCancelled:
                self.ui.display_message("Exiting game. Goodbye!")
                next_state = GameState.EXITED
            logger.debug(f"{self.state.name} -> {next_state.name}")
            self.state = next_state
        self.outcome.state = self.state
        return self.outcome

    def show_help(self):
        self.ui.display_message(self.help_gen.generate_table(self.dice))

    def _determine_first_player(self) -> GameState:
        self.ui.display_message("Let's determine who makes the first move.")
        result = self.interaction.exchange(0, 1, "first move determination", on_help=self.show_help)
        self.outcome.first_player = Player.COMPUTER if result.value == 0 else Player.USER
        if self.outcome.first_player is Player.COMPUTER:
            self.ui.display_message("I make the first move.")
        else:
            self.ui.display_message("You make the first move.")
        return GameState.SELECTING_DICE

    def _select_dice(self) -> GameState:
        first = self.outcome.first_player
        first_die = self._pick_die(first, exclude=None)
        second_die = self._pick_die(first.other, exclude=first_die.index)
        dice_by_player = {first: first_die, first.other: second_die}
        self.outcome.computer_die = dice_by_player[Player.COMPUTER]
        self.outcome.user_die = dice_by_player[Player.USER]
        return GameState.ROLLING

    def _pick_die(self, player: Player, exclude: Optional[int]) -> Die:
        available = self.dice.available(exclude)
        if player is Player.COMPUTER:
            die = self.chooser.choice(available)
            logger.debug(f"Computer picked {die.label} from {[d.label for d in available]}")
            self.ui.display_message(f"I choose the [{die}] dice.")
            return die
        return self._get_player_die_choice(available)

    def _get_player_die_choice(self, available: list[Die]) -> Die:
        options = {die.index: str(die) for die in available}
        while True:
            choice = self.ui.get_user_choice("Choose your dice:", options, allow_help=True)
            if choice == HELP:
                self.show_help()
                continue
            die = self.dice[choice]
            self.ui.display_message(f"You choose the [{die}] dice.")
            return die

    def _roll(self) -> GameState:
        first = self.outcome.first_player
        for player in (first, first.other):
            die = self.outcome.computer_die if player is Player.COMPUTER else self.outcome.user_die
            value = self._roll_die(player, die)
            if player is Player.COMPUTER:
                self.outcome.computer_roll = value
            else:
                self.outcome.user_roll = value
        return GameState.ADJUDICATING

    def _roll_die(self, player: Player, die: Die) -> int:
        self.ui.display_message(f"\nIt's time for {player.possessive} roll.")
        result = self.interaction.exchange(0, die.face_count - 1, f"{player.possessive} dice roll",
                                           on_help=self.show_help)
        value = die.face_value(result.value)
        self.ui.display_message(f"{player.possessive.capitalize()} roll result is {value}.")
        return value

    def _adjudicate(self) -> GameState:
        computer_roll = self.outcome.computer_roll
        user_roll = self.outcome.user_roll
        if computer_roll > user_roll:
            self.outcome.winner = Player.COMPUTER
            self.ui.display_message(f"I win ({computer_roll} > {user_roll})!")
        elif user_roll > computer_roll:
            self.outcome.winner = Player.USER
            self.ui.display_message(f"You win ({user_roll} > {computer_roll})!")
        else:
            self.ui.display_message(f"It's a tie ({computer_roll} = {user_roll})!")
        return GameState.COMPLETED
