"""
Split a solution into the four CFOP phases for display.

The split is by position only: a sequence of `n` moves is cut into chunks of
`ceil(n / 4)` moves, the remainder going to the last phase. It does not look at
what the moves do.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from .moves import MoveDetail, resolve
from .notation import MoveToken, decode

PHASES = [
    ("Cross", "Create the white cross on the bottom"),
    ("F2L (First Two Layers)", "Solve the first two layers"),
    ("OLL (Orient Last Layer)", "Orient all pieces on the last layer"),
    ("PLL (Permute Last Layer)", "Permute all pieces on the last layer"),
]


@dataclass
class Phase:
    name: str
    description: str
    moves: List[MoveToken] = field(default_factory=list)
    move_details: List[Optional[MoveDetail]] = field(default_factory=list)

    def as_dict(self):
        return dict(
            name=self.name,
            description=self.description,
            moves=[str(m) for m in self.moves],
            move_details=[d.as_dict() if d is not None else None for d in self.move_details],
        )


def segment(moves):
    """
    Partition a move sequence into phases.

    Args:
        moves (list): `MoveToken`s or move strings, in solving order.

    Returns:
        list[Phase]: Non-empty phases in fixed order, each move paired with its `MoveDetail`.
    """
    tokens = [m if isinstance(m, MoveToken) else decode(m) or m for m in moves]
    if not tokens:
        return []

    phases = [Phase(name, description) for name, description in PHASES]
    per_phase = math.ceil(len(tokens) / len(phases))
    for i, token in enumerate(tokens):
        phases[min(i // per_phase, len(phases) - 1)].moves.append(token)

    kept = [phase for phase in phases if phase.moves]
    for phase in kept:
        phase.move_details = [resolve(m) for m in phase.moves]
    return kept
