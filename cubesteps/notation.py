"""
Cube Notation

This module converts between the color-based representation of a cube and the
letter notation a solving oracle works in.

- `encode`: Project a six-face color state onto the 54-character facelet string.
- `decode`: Parse one move token (e.g. `R`, `U'`, `F2`) into a `MoveToken`.
- `describe`: Human-readable description of a move token.

```python title="Example Usage"
facelets = encode(validate(raw_state))   # 'UUUUUUUUURRRRRRRRR...'
decode("R'")                             # MoveToken(face='R', modifier="'")
decode("R3")                             # None
```
"""

from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidColor
from .utils import FACE_ORDER


class Color(str, Enum):
    """Sticker colors, lowercase."""

    WHITE = "white"
    YELLOW = "yellow"
    RED = "red"
    ORANGE = "orange"
    GREEN = "green"
    BLUE = "blue"


COLORS = [c.value for c in Color]

# Color identity -> facelet letter. Independent of the face being encoded.
COLOR_TO_FACELET = {
    "white": "U",
    "yellow": "D",
    "red": "R",
    "orange": "L",
    "green": "F",
    "blue": "B",
}

MODIFIERS = ("", "'", "2")

DESCRIPTIONS = {
    "R": "Right face",
    "L": "Left face",
    "U": "Up face",
    "D": "Down face",
    "F": "Front face",
    "B": "Back face",
}


@dataclass(frozen=True)
class MoveToken:
    """
    A single face turn in standard notation.

    Attributes:
        face (str): One of `R`, `L`, `U`, `D`, `F`, `B`.
        modifier (str): `""` (clockwise quarter turn), `"'"` (counter-clockwise) or `"2"` (half turn).
    """

    face: str
    modifier: str = ""

    @property
    def counter_clockwise(self):
        return self.modifier == "'"

    @property
    def half_turn(self):
        return self.modifier == "2"

    def __str__(self):
        return self.face + self.modifier


def _color_name(cell):
    if isinstance(cell, Color):
        return cell.value
    if isinstance(cell, str):
        return cell.lower()
    return cell


def encode(state):
    """
    Encode a cube state as a facelet string.

    Args:
        state (CubeState | dict): Validated cube state, or a mapping of face letters to 3x3 color grids.

    Returns:
        str: 54 letters over `URFDLB`, faces in U, R, F, D, L, B order, each face row-major.

    Raises:
        InvalidColor: If a cell has no facelet letter (unvalidated input).
    """
    faces = getattr(state, "faces", state)
    letters = []
    for face in FACE_ORDER:
        for row in faces[face]:
            for cell in row:
                name = _color_name(cell)
                try:
                    letters.append(COLOR_TO_FACELET[name])
                except (KeyError, TypeError):
                    raise InvalidColor(cell, face) from None
    return "".join(letters)


def decode(text):
    """
    Decode a move token.

    Returns `None` for anything outside the grammar (unknown face, unknown
    modifier, more than two characters) so the caller can carry on.

    Args:
        text (str): Token such as `"R"`, `"U'"` or `"F2"`.

    Returns:
        MoveToken | None
    """
    if not isinstance(text, str) or not 1 <= len(text) <= 2:
        return None
    face, modifier = text[0], text[1:]
    if face not in DESCRIPTIONS or modifier not in MODIFIERS:
        return None
    return MoveToken(face, modifier)


def describe(move):
    """Describe a move in words, e.g. `Right face counter-clockwise`."""
    token = move if isinstance(move, MoveToken) else decode(move)
    if token is None:
        return "Unknown move"
    if token.counter_clockwise:
        turn = "counter-clockwise"
    elif token.half_turn:
        turn = "180 degrees"
    else:
        turn = "clockwise"
    return f"{DESCRIPTIONS[token.face]} {turn}"
