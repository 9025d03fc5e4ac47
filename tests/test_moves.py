import numpy as np
import pytest

from cubesteps import MoveToken, resolve
from cubesteps.moves import UNKNOWN_MOVE


@pytest.mark.moves
def test_r_prime():
    detail = resolve("R'")
    assert (detail.axis, detail.direction, detail.turn_count) == ("x", -1, 1)


@pytest.mark.moves
def test_d2():
    detail = resolve("D2")
    assert (detail.axis, detail.direction, detail.turn_count) == ("y", -1, 2)
    assert detail.angle == -180


@pytest.mark.moves
@pytest.mark.parametrize(
    "move, axis, direction",
    [
        ("R", "x", 1),
        ("L", "x", -1),
        ("L'", "x", 1),
        ("U", "y", 1),
        ("D'", "y", 1),
        ("F", "z", 1),
        ("B", "z", -1),
        ("B2", "z", -1),
    ],
)
def test_axis_table(move, axis, direction):
    detail = resolve(MoveToken(move[0], move[1:]))
    assert detail.axis == axis
    assert detail.direction == direction


@pytest.mark.moves
def test_selector_picks_outer_layer():
    right = resolve("R").selector
    left = resolve("L").selector
    assert right((1, 0, 0))
    assert not right((0, 1, 1))
    assert left((-1, 1, -1))
    assert not left((0.5, 0, 0))


@pytest.mark.moves
def test_selector_on_lattice():
    lattice = np.array([(x, y, z) for x in (-1, 0, 1) for y in (-1, 0, 1) for z in (-1, 0, 1)])
    for move in "RLUDFB":
        mask = resolve(move).selector(lattice)
        assert mask.shape == (27,)
        assert mask.sum() == 9


@pytest.mark.moves
@pytest.mark.parametrize("move", ["X", "R3", "", "U''"])
def test_unknown_move(move):
    assert resolve(move) is UNKNOWN_MOVE
