"""
`cubesteps` package turns a Rubik's Cube color state into a phased, animatable solution.

High-Level API (recommended for most users):
- `solve(cube_state)`: Solve a six-face color state using the default global pipeline.
- `acquire_face(image, face)`: Read one face's 3x3 colors from a photo using the default global pipeline.

Core Class (for advanced usage):
- `Pipeline`: Holds the solving oracle and face acquirer; build your own to inject them.

Utilities:
- `set_verbose(loglevel)`: Set the verbosity level of the logger.
- `list_faces()`: List the face identifiers in facelet order.
- `Settings`: Configuration read from the environment.
- `cli()`: Command-line utility for solving a Rubik's Cube.
"""

from .core import Pipeline
from .exceptions import (
    CubeStateError,
    InvalidColor,
    MalformedGrid,
    MissingFace,
    UnsupportedFace,
)
from .notation import Color, MoveToken, decode, describe, encode
from .moves import MoveDetail, resolve
from .phases import Phase, segment
from .solver import SolveFailure, SolveSuccess
from .utils import Settings, logger, set_verbose, list_faces
from ._validator import CubeState, validate
from .cli import main as cli


pipeline = Pipeline()

# shortcuts
solve = pipeline.solve
acquire_face = pipeline.acquire_face

__all__ = [
    "Pipeline",
    "pipeline",
    "solve",
    "acquire_face",
    "cli",
    "logger",
    "set_verbose",
    "list_faces",
    "Settings",
    "CubeState",
    "validate",
    "Color",
    "MoveToken",
    "encode",
    "decode",
    "describe",
    "MoveDetail",
    "resolve",
    "Phase",
    "segment",
    "SolveSuccess",
    "SolveFailure",
    "CubeStateError",
    "MissingFace",
    "MalformedGrid",
    "InvalidColor",
    "UnsupportedFace",
]
