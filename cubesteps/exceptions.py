"""
Errors raised by cubesteps.

Validation errors (`MissingFace`, `MalformedGrid`, `InvalidColor`) reject a
request outright. `VisionFailure` and `MalformedVisionResponse` never leave
`vision.FaceColorAcquirer`: it answers them with a fallback grid.
"""


class CubeStateError(ValueError):
    """Base class for a rejected cube state."""


class MissingFace(CubeStateError):
    def __init__(self, face):
        self.face = face
        super().__init__(f"Missing face {face} in cube state")


class MalformedGrid(CubeStateError):
    def __init__(self, face):
        self.face = face
        super().__init__(f"Invalid data for face {face}: expected 3 rows of 3 colors")


class InvalidColor(CubeStateError):
    def __init__(self, color, face=None):
        self.color = color
        self.face = face
        where = f" on face {face}" if face is not None else ""
        super().__init__(f"Invalid color detected{where}: {color!r}")


class UnsupportedFace(ValueError):
    def __init__(self, face):
        self.face = face
        super().__init__(f"Invalid face identifier: {face!r}")


class VisionFailure(RuntimeError):
    """The vision oracle could not be reached or answered with an error."""


class MalformedVisionResponse(ValueError):
    """The vision oracle answered, but not with a 3x3 grid of known colors."""
