"""Tests for the game state machine, driven by a scripted console."""

import pytest

from nontransitive_dice.dice import DiceSet
from nontransitive_dice.fair_random import FairInteraction
from nontransitive_dice.game import GameController, GameState, Player
from tests.conftest import FirstChoice, ScriptedUI, StubGenerator

# User moves first (1 + 0 = 1), picks Dice 1, the computer takes Dice 2.
# The user rolls (4 + 1) mod 6 = 5 -> 9, the computer rolls 0 -> 1.
USER_FIRST_VALUES = [1, 4, 0]
USER_FIRST_ANSWERS = ["0", "0", "1", "0"]

# Computer moves first (0 + 0 = 0) and takes Dice 1; the user tries the taken
# die, then picks Dice 3. The computer rolls 5 -> 9, the user rolls 0 -> 3.
COMPUTER_FIRST_VALUES = [0, 5, 0]
COMPUTER_FIRST_ANSWERS = ["0", "0", "2", "0", "0"]


def make_game(dice, values, answers):
    ui = ScriptedUI(answers)
    generator = StubGenerator(values)
    controller = GameController(dice, ui, FairInteraction(generator, ui), chooser=FirstChoice())
    return controller, ui, generator


class TestFullGame:

    def test_user_moves_first_and_wins(self, classic_dice):
        controller, ui, generator = make_game(classic_dice, USER_FIRST_VALUES, USER_FIRST_ANSWERS)
        outcome = controller.run()

        assert outcome.state is GameState.COMPLETED
        assert controller.state is GameState.COMPLETED
        assert outcome.first_player is Player.USER
        assert outcome.user_die is classic_dice[0]
        assert outcome.computer_die is classic_dice[1]
        assert (outcome.user_roll, outcome.computer_roll) == (9, 1)
        assert outcome.winner is Player.USER
        assert "You win (9 > 1)!" in ui.output
        assert generator.calls == [(0, 1), (0, 5), (0, 5)]

    def test_computer_moves_first_and_wins(self, classic_dice):
        controller, ui, _ = make_game(classic_dice, COMPUTER_FIRST_VALUES, COMPUTER_FIRST_ANSWERS)
        outcome = controller.run()

        assert outcome.first_player is Player.COMPUTER
        assert outcome.computer_die is classic_dice[0]
        assert outcome.user_die is classic_dice[2]
        assert (outcome.computer_roll, outcome.user_roll) == (9, 3)
        assert outcome.winner is Player.COMPUTER
        assert "I choose the [2,2,4,4,9,9] dice." in ui.output
        assert "I win (9 > 3)!" in ui.output

    def test_taken_die_is_not_offered(self, classic_dice):
        controller, ui, _ = make_game(classic_dice, COMPUTER_FIRST_VALUES, COMPUTER_FIRST_ANSWERS)
        controller.run()
        assert "0 - 2,2,4,4,9,9" not in ui.output
        assert "1 - 1,1,6,6,8,8" in ui.output
        assert "2 - 3,3,5,5,7,7" in ui.output
        assert "Invalid selection" in ui.text

    def test_first_player_rolls_first(self, classic_dice):
        controller, ui, _ = make_game(classic_dice, COMPUTER_FIRST_VALUES, COMPUTER_FIRST_ANSWERS)
        controller.run()
        assert ui.output.index("\nIt's time for my roll.") < ui.output.index("\nIt's time for your roll.")

    def test_tie(self):
        dice = DiceSet.from_faces([[1, 1, 1], [1, 1, 1], [2, 2, 2]])
        controller, ui, _ = make_game(dice, [1, 0, 0], ["0", "0", "0", "0"])
        outcome = controller.run()
        assert outcome.state is GameState.COMPLETED
        assert outcome.winner is None
        assert "It's a tie (1 = 1)!" in ui.output


class TestHelp:

    def test_help_during_first_move_shows_table(self, classic_dice):
        answers = ["?"] + USER_FIRST_ANSWERS
        controller, ui, generator = make_game(classic_dice, USER_FIRST_VALUES, answers)
        outcome = controller.run()
        assert outcome.state is GameState.COMPLETED
        assert any("Win Probability Table" in text for text in ui.output)
        assert len(generator.calls) == 3

    def test_help_during_dice_selection(self, classic_dice):
        answers = ["0", "?", "0", "1", "0"]
        controller, ui, _ = make_game(classic_dice, USER_FIRST_VALUES, answers)
        outcome = controller.run()
        assert outcome.winner is Player.USER
        assert any("Win Probability Table" in text for text in ui.output)


class TestCancellation:

    @pytest.mark.parametrize("answered", range(len(USER_FIRST_ANSWERS)))
    def test_cancel_at_any_prompt_exits(self, classic_dice, answered):
        answers = USER_FIRST_ANSWERS[:answered] + ["x"]
        controller, ui, _ = make_game(classic_dice, USER_FIRST_VALUES, answers)
        outcome = controller.run()

        assert outcome.state is GameState.EXITED
        assert outcome.winner is None
        assert "Exiting game. Goodbye!" in ui.output
        assert not any("win" in text or "tie" in text for text in ui.output)

    @pytest.mark.parametrize("answered", range(len(COMPUTER_FIRST_ANSWERS)))
    def test_end_of_input_exits(self, classic_dice, answered):
        answers = COMPUTER_FIRST_ANSWERS[:answered]
        controller, ui, _ = make_game(classic_dice, COMPUTER_FIRST_VALUES, answers)
        outcome = controller.run()
        assert outcome.state is GameState.EXITED
        assert not any("win" in text for text in ui.output)
