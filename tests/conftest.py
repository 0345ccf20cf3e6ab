"""Shared fixtures: a scripted console, predictable commitments, and dice sets."""

import pytest

from nontransitive_dice.commitment import SecretCommitment, calculate_hmac
from nontransitive_dice.dice import DiceSet
from nontransitive_dice.errors import UserCancelled
from nontransitive_dice.ui import GameUI

FIXED_KEY = bytes(range(32))


class ScriptedUI(GameUI):
    """Answers prompts from a list and records everything shown."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.events = []
        self.closed = False

    @property
    def output(self) -> list[str]:
        return [text for kind, text in self.events if kind == "display"]

    @property
    def text(self) -> str:
        return "\n".join(self.output)

    def display_message(self, text: str):
        self.events.append(("display", text))

    def ask(self, prompt: str) -> str:
        self.events.append(("ask", prompt))
        if not self.answers:
            raise UserCancelled()
        return self.answers.pop(0).strip()

    def close(self):
        self.closed = True


class StubGenerator:
    """Commits to a predetermined sequence of values with a fixed key."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def generate(self, min_value: int, max_value: int) -> SecretCommitment:
        self.calls.append((min_value, max_value))
        value = self.values.pop(0)
        assert min_value <= value <= max_value
        return SecretCommitment(key=FIXED_KEY, value=value, hmac=calculate_hmac(FIXED_KEY, value))


class ByteFeed:
    """A byte source that hands out prepared chunks in order."""

    def __init__(self, *chunks: bytes):
        self.chunks = list(chunks)
        self.requests = []

    def __call__(self, size: int) -> bytes:
        self.requests.append(size)
        return self.chunks.pop(0)


class FirstChoice:
    """Stands in for random.Random: always picks the first available die."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def classic_dice():
    return DiceSet.from_faces([
        [2, 2, 4, 4, 9, 9],
        [1, 1, 6, 6, 8, 8],
        [3, 3, 5, 5, 7, 7],
    ])


@pytest.fixture
def efron_dice():
    return DiceSet.from_faces([
        [4, 4, 4, 4, 0, 0],
        [3, 3, 3, 3, 3, 3],
        [6, 6, 2, 2, 2, 2],
        [5, 5, 5, 1, 1, 1],
    ])
