from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import ArgumentError
from .logging_config import setup_logger

logger = setup_logger(__name__)

MIN_DICE = 3


@dataclass(frozen=True)
class Die:
    faces: tuple[int, ...]
    index: int = 0

    def __post_init__(self):
        if not self.faces:
            raise ValueError("A die must have at least one face.")
        object.__setattr__(self, "faces", tuple(self.faces))

    @property
    def label(self) -> str:
        return f"Dice {self.index + 1}"

    @property
    def face_count(self) -> int:
        return len(self.faces)

    def face_value(self, face_index: int) -> int:
        return self.faces[face_index]

    def __str__(self) -> str:
        return ",".join(map(str, self.faces))

    def __len__(self) -> int:
        return len(self.faces)


class DiceSet:
    """The dice of one game session. All dice share the same face count."""

    def __init__(self, dice: list[Die]):
        if not dice:
            raise ValueError("A dice set needs at least one die.")
        expected = dice[0].face_count
        for die in dice:
            if die.face_count != expected:
                raise ArgumentError.wrong_face_count(die.label, expected, die.face_count)
        self._dice = tuple(dice)

    @classmethod
    def from_faces(cls, faces_list: list[list[int]]) -> "DiceSet":
        return cls([Die(tuple(faces), i) for i, faces in enumerate(faces_list)])

    @property
    def faces_per_die(self) -> int:
        return self._dice[0].face_count

    def face_value(self, die_index: int, face_index: int) -> int:
        return self._dice[die_index].face_value(face_index)

    def face_count(self, die_index: int) -> int:
        return self._dice[die_index].face_count

    def available(self, exclude: Optional[int] = None) -> list[Die]:
        """Dice a player may still pick: every die except the one already taken."""
        return [die for die in self._dice if die.index != exclude]

    def __getitem__(self, index: int) -> Die:
        return self._dice[index]

    def __iter__(self) -> Iterator[Die]:
        return iter(self._dice)

    def __len__(self) -> int:
        return len(self._dice)


# ==============================================================================
# Command-line argument parser
# ==============================================================================

class DiceParser:
    @staticmethod
    def parse_faces(arg: str, label: str) -> list[int]:
        faces = []
        for token in arg.split(','):
            token = token.strip()
            try:
                faces.append(int(token))
            except ValueError:
                raise ArgumentError.non_integer_value(label, token) from None
        return faces

    @staticmethod
    def parse(args: list[str], face_count: Optional[int] = None) -> DiceSet:
        if len(args) < MIN_DICE:
            raise ArgumentError.not_enough_dice(len(args), MIN_DICE)
        if face_count is not None and face_count < 1:
            raise ArgumentError.invalid_face_count(face_count)

        faces_list = []
        for i, arg in enumerate(args):
            label = f"Dice {i + 1}"
            faces = DiceParser.parse_faces(arg, label)
            # The first die fixes the face count unless one was requested
            if face_count is None:
                face_count = len(faces)
            if len(faces) != face_count:
                raise ArgumentError.wrong_face_count(label, face_count, len(faces))
            faces_list.append(faces)

        logger.debug(f"Parsed {len(faces_list)} dice with {len(faces_list[0])} faces each")
        return DiceSet.from_faces(faces_list)
