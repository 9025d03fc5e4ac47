"""
Solving Oracle Adapter

This module hands a facelet string to an external solver and reports the
outcome as a tagged result instead of an exception.

Classes:

- `KociembaOracle`: The default oracle, backed by the `kociemba` two-phase solver.
- `SolveSuccess` / `SolveFailure`: The two result variants.

Example::

    from cubesteps.solver import KociembaOracle, solve
    result = solve("DRLUUBFBRBLURRLRUBLRDDFDLFUFUFFDBRDUBRUFLLFDDBFLUBLRBD", KociembaOracle())
    if result.success:
        print(result.solution)
    else:
        print(result.error)
"""

from dataclasses import dataclass, field
from typing import Callable, List, Union

from rich.markup import escape

from .notation import decode
from .utils import logger, logger_args

# A solving oracle takes a facelet string and returns whitespace-separated moves,
# raising on failure.
SolvingOracle = Callable[[str], str]


class KociembaOracle:
    """
    Solving oracle backed by Herbert Kociemba's two-phase algorithm.

    Args:
        max_depth (int | None): Optional cap on the solution length passed to `kociemba.solve`.
    """

    def __init__(self, max_depth=None):
        self.max_depth = max_depth

    def __call__(self, facelets):
        import kociemba

        if self.max_depth is None:
            return kociemba.solve(facelets)
        return kociemba.solve(facelets, max_depth=self.max_depth)


@dataclass
class SolveSuccess:
    """
    A solved cube.

    Attributes:
        moves (list): The move sequence, as `MoveToken`s (raw text for tokens that do not decode).
        phases (list): `Phase`s, filled in by the pipeline.
    """

    moves: List = field(default_factory=list)
    phases: List = field(default_factory=list)
    success: bool = field(default=True, init=False)

    @property
    def solution(self):
        return " ".join(str(m) for m in self.moves)

    @property
    def moves_count(self):
        return len(self.moves)

    def as_dict(self):
        return dict(
            success=True,
            solution=self.solution,
            moves=[str(m) for m in self.moves],
            moves_count=self.moves_count,
            phases=[p.as_dict() for p in self.phases],
        )


@dataclass
class SolveFailure:
    """An oracle failure, carrying its message."""

    error: str
    success: bool = field(default=False, init=False)

    def as_dict(self):
        return dict(success=False, error=self.error)


SolveResult = Union[SolveSuccess, SolveFailure]


def solve(facelets, oracle) -> SolveResult:
    """
    Ask `oracle` for a solution to `facelets`.

    The facelet string is passed through unchanged and the call is not retried.

    Args:
        facelets (str): 54-character facelet string.
        oracle (SolvingOracle): Callable returning a whitespace-separated move string.

    Returns:
        SolveSuccess | SolveFailure
    """
    try:
        raw = oracle(facelets)
    except Exception as e:
        message = str(e) or type(e).__name__
        logger.error(f"[red]Solving oracle failed:[/red] {escape(message)}", **logger_args)
        return SolveFailure(error=message)

    tokens = str(raw or "").split()
    moves = [decode(t) or t for t in tokens]
    logger.debug(f"Oracle returned {len(moves)} moves: {' '.join(tokens)}")
    return SolveSuccess(moves=moves)
