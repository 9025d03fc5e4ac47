"""
This module provides the core class `Pipeline`, which turns a six-face color state into a phased solution.

Class:

- `Pipeline`: Validates and encodes a cube state, asks the solving oracle, and splits the result into phases.
  Also acquires face grids from photographs.
"""

from .exceptions import MissingFace
from .notation import encode
from .phases import segment
from .solver import KociembaOracle, SolveSuccess, solve as solve_facelets
from .utils import FACE_ORDER, Settings, logger, logger_args
from .vision import FaceColorAcquirer, GeminiVision, RandomFallback, release
from ._validator import validate


class Pipeline:
    """
    The solve and acquisition entry points, with their collaborators injected.

    Args:
        solving_oracle (Callable | None): `facelets -> moves`; defaults to `KociembaOracle()`.
        acquirer (FaceColorAcquirer | None): Defaults to one built from `settings`.
        settings (Settings | None): Used only to build the default acquirer; read from the environment if omitted.

    Methods:
    - `solve` (or `__call__`): Solve a submitted cube state.
    - `acquire_face`: Read one face's colors from image bytes.
    - `solve_images`: Read all six faces from image files, then solve.
    """

    def __init__(self, solving_oracle=None, acquirer=None, settings=None):
        self.solving_oracle = solving_oracle if solving_oracle is not None else KociembaOracle()
        if acquirer is None:
            acquirer = self.build_acquirer(settings or Settings.from_env())
        self.acquirer = acquirer

    @staticmethod
    def build_acquirer(settings):
        """Build the default `FaceColorAcquirer` for `settings`."""
        oracle = None
        if settings.gemini_api_key:
            oracle = GeminiVision(
                settings.gemini_api_key,
                model=settings.vision_model,
                timeout=settings.vision_timeout,
            )
        return FaceColorAcquirer(oracle, RandomFallback(settings.fallback_seed))

    def solve(self, cube_state):
        """
        Solve a cube state.

        Args:
            cube_state (Mapping): Face letter -> 3x3 grid of color names.

        Returns:
            SolveSuccess | SolveFailure: On success, the moves and their phases.

        Raises:
            CubeStateError: If the state is rejected by validation.
        """
        state = validate(cube_state)
        facelets = encode(state)
        logger.info(f"[grey50]Solving {facelets}", **logger_args)

        result = solve_facelets(facelets, self.solving_oracle)
        if isinstance(result, SolveSuccess):
            result.phases = segment(result.moves)
            logger.info(
                f"[cyan]Solved in {result.moves_count} moves over {len(result.phases)} phases.",
                **logger_args,
            )
        return result

    __call__ = solve

    def acquire_face(self, image, face, filename=None):
        """Read the 3x3 colors of `face` from `image` bytes. See `FaceColorAcquirer.acquire`."""
        return self.acquirer.acquire(image, face, filename=filename)

    def solve_images(self, paths, consume=True):
        """
        Acquire all six faces from image files and solve the assembled state.

        Args:
            paths (Mapping): Face letter -> image path.
            consume (bool): Delete each file once it has been read.

        Returns:
            SolveSuccess | SolveFailure

        Raises:
            MissingFace: If a face has no image; raised before any file is read.

        Paths under other keys are not read; with `consume` they are deleted too.
        """
        for face in FACE_ORDER:
            if face not in paths:
                raise MissingFace(face)
        if consume:
            for key in set(paths) - set(FACE_ORDER):
                logger.warning(f"Ignoring image for unknown face {key!r}")
                release(paths[key])

        faces = {}
        for face in FACE_ORDER:
            if consume:
                faces[face] = self.acquirer.acquire_file(paths[face], face)
            else:
                with open(paths[face], "rb") as f:
                    faces[face] = self.acquire_face(f.read(), face, filename=str(paths[face]))
        return self.solve(faces)
