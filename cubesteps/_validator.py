"""
Input Validator

This module defines the cube-state validator for cubesteps. `validate` checks a
submitted six-face grid set for structure and values and returns a `CubeState`,
the pydantic model the rest of the package consumes.

Validation Rules:

- Each of the faces `U`, `R`, `F`, `D`, `L`, `B` must be present. Extra keys are ignored.
- Each face must be exactly 3 rows of exactly 3 cells.
- Each cell, lower-cased, must be one of `white`, `yellow`, `red`, `orange`, `green`, `blue`.

```python title="Example Usage"
raw_state = {
    "U": [["white"] * 3] * 3,
    "R": [["Red"] * 3] * 3,
    ...
}
state = validate(raw_state)
state.faces["R"][0][0]  # Color.RED
```

:::note

No whole-cube consistency check is made: a state where a color appears more or
less than nine times passes validation and is left to the solving oracle.

:::
"""

from collections.abc import Mapping
from typing import Dict, List

from pydantic import BaseModel, field_validator

from .exceptions import CubeStateError, InvalidColor, MalformedGrid, MissingFace
from .notation import COLORS, Color
from .utils import FACE_ORDER


class CubeState(BaseModel):
    """
    Six validated face grids, keyed by face letter.
    """

    faces: Dict[str, List[List[Color]]]

    @field_validator("faces")
    @classmethod
    def validate_faces(cls, value):
        """
        Ensure exactly the six known faces, each 3x3.

        Raises:
            ValueError: On a missing or unexpected face, or a grid of the wrong shape.
        """
        if set(value) != set(FACE_ORDER):
            raise ValueError(f"Expected faces {list(FACE_ORDER)}, got {sorted(value)}.")
        for face, grid in value.items():
            if len(grid) != 3 or any(len(row) != 3 for row in grid):
                raise ValueError(f"Face {face} must be a 3x3 grid.")
        return value


def _is_row(value):
    return isinstance(value, (list, tuple)) and len(value) == 3


def validate_grid(face, grid):
    """
    Validate one face grid.

    Args:
        face (str): Face letter, used in error messages.
        grid: The submitted grid.

    Returns:
        list: 3x3 list of `Color`.

    Raises:
        MalformedGrid: If `grid` is not 3 rows of 3 cells.
        InvalidColor: If a cell is not a recognized color name.
    """
    if not _is_row(grid) or not all(_is_row(row) for row in grid):
        raise MalformedGrid(face)
    colors = []
    for row in grid:
        out = []
        for cell in row:
            name = cell.lower() if isinstance(cell, str) else None
            if name not in COLORS:
                raise InvalidColor(cell, face)
            out.append(Color(name))
        colors.append(out)
    return colors


def validate(raw_state):
    """
    Validate a submitted cube state.

    Args:
        raw_state (Mapping): Face letter -> 3x3 grid of color names (any case).

    Returns:
        CubeState: The canonicalized state, colors lower-cased.

    Raises:
        MissingFace: If any of U, R, F, D, L, B is absent.
        MalformedGrid: If a face is not 3 rows of 3 cells.
        InvalidColor: If a cell is not one of the six colors.
    """
    if isinstance(raw_state, CubeState):
        return raw_state
    if not isinstance(raw_state, Mapping):
        raise CubeStateError("Cube state is required")
    for face in FACE_ORDER:
        if raw_state.get(face) is None:
            raise MissingFace(face)
    faces = {face: validate_grid(face, raw_state[face]) for face in FACE_ORDER}
    return CubeState(faces=faces)
