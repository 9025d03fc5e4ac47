import pytest

from cubesteps import Pipeline
from cubesteps.vision import FaceColorAcquirer, RandomFallback


MARKERS = ["validator", "notation", "moves", "phases", "solver", "vision", "core", "cli"]

SOLVED_COLORS = {
    "U": "white",
    "R": "red",
    "F": "green",
    "D": "yellow",
    "L": "orange",
    "B": "blue",
}


def pytest_configure(config):
    for marker in MARKERS:
        config.addinivalue_line("markers", marker)


class FakeSolvingOracle:
    """Records the facelet strings it is given and answers with a fixed solution."""

    def __init__(self, solution="R U R' U'"):
        self.solution = solution
        self.calls = []

    def __call__(self, facelets):
        self.calls.append(facelets)
        if isinstance(self.solution, Exception):
            raise self.solution
        return self.solution


@pytest.fixture
def solved_state():
    """A solved cube, one color per face."""
    return {face: [[color] * 3 for _ in range(3)] for face, color in SOLVED_COLORS.items()}


@pytest.fixture
def solving_oracle():
    return FakeSolvingOracle()


@pytest.fixture
def pipeline(solving_oracle):
    """Pipeline with a fake solver and no vision credential."""
    return Pipeline(
        solving_oracle=solving_oracle,
        acquirer=FaceColorAcquirer(oracle=None, fallback=RandomFallback(seed=7)),
    )
