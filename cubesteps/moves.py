"""
Move geometry for animation.

`resolve` maps a move token to the rotation a 3-D view needs to play it: the
axis, the signed direction, the number of quarter turns, and a predicate that
selects the cubies in the turning layer. Cubie positions are expected on the
`{-1, 0, 1}` lattice, with +x right, +y up and +z towards the viewer.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np

from .notation import MoveToken, decode

# Sentinel returned for tokens that cannot be interpreted
UNKNOWN_MOVE = None

# face -> (axis, base direction, layer side)
FACE_AXES = {
    "R": ("x", 1, 1),
    "L": ("x", -1, -1),
    "U": ("y", 1, 1),
    "D": ("y", -1, -1),
    "F": ("z", 1, 1),
    "B": ("z", -1, -1),
}

AXIS_INDEX = {"x": 0, "y": 1, "z": 2}

LAYER_THRESHOLD = 0.5


def layer_selector(axis, side):
    """
    Build the layer-membership predicate for one face.

    The returned function takes a position `(x, y, z)` and returns whether it
    lies in the outer layer on `side` of `axis`. It also accepts an `(N, 3)`
    array and then returns a boolean mask.
    """
    index = AXIS_INDEX[axis]

    def selector(position):
        coord = np.asarray(position, dtype=float)[..., index]
        if side > 0:
            return coord > LAYER_THRESHOLD
        return coord < -LAYER_THRESHOLD

    return selector


@dataclass(frozen=True)
class MoveDetail:
    """
    Geometric metadata for one move.

    Attributes:
        axis (str): `x`, `y` or `z`.
        direction (int): `1` or `-1`.
        turn_count (int): `1` for quarter turns, `2` for half turns.
        selector (Callable): Layer-membership predicate over cubie positions.
    """

    axis: str
    direction: int
    turn_count: int
    selector: Callable = field(repr=False, compare=False)

    @property
    def angle(self):
        """Signed rotation in degrees."""
        return 90 * self.direction * self.turn_count

    def as_dict(self):
        return dict(axis=self.axis, direction=self.direction, turn_count=self.turn_count)


def resolve(move) -> Optional[MoveDetail]:
    """
    Resolve a move into its `MoveDetail`.

    Args:
        move (MoveToken | str): The move to resolve.

    Returns:
        MoveDetail | None: `None` (`UNKNOWN_MOVE`) if the move cannot be interpreted.
    """
    token = move if isinstance(move, MoveToken) else decode(move)
    if token is None or token.face not in FACE_AXES:
        return UNKNOWN_MOVE
    axis, direction, side = FACE_AXES[token.face]
    if token.counter_clockwise:
        direction = -direction
    turn_count = 2 if token.half_turn else 1
    return MoveDetail(axis, direction, turn_count, layer_selector(axis, side))
