"""
Utilities for the cubesteps Package.

This module provides common utilities used across the cubesteps package, including:
- A pre-configured `rich` logger for styled console output.
- Utility functions for controlling verbosity (`set_verbose`) and listing the
  face identifiers and colors the package works with.
- `Settings`, the process configuration consumed when building a default pipeline.
"""

import os
import logging
import warnings
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator
from rich.console import Console
from rich.logging import RichHandler

logging.getLogger("urllib3").setLevel(logging.WARNING)

warnings.filterwarnings("once", category=RuntimeWarning)

logging.basicConfig(
    level=20,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=Console(stderr=True), markup=True)],
    force=True,
)
logging.captureWarnings(True)
logger = logging.getLogger("cubesteps")
logger_args = dict(extra={"markup": True})

# Fixed order of faces in a facelet string
FACE_ORDER = ("U", "R", "F", "D", "L", "B")

FACE_NAMES = {
    "U": "Upper (top)",
    "R": "Right",
    "F": "Front",
    "D": "Down (bottom)",
    "L": "Left",
    "B": "Back",
}


# Set up logging level
def set_verbose(loglevel=20):
    """
    Set the verbosity level of the logger.

    Args:
        loglevel (int): Logging level (e.g., `logging.INFO`/`20`, `logging.DEBUG`/`10`) to control the verbosity.

    Returns:
        None
    """
    logger.setLevel(loglevel)


def list_faces():
    """
    List the face identifiers in facelet order.

    Returns:
        list: `["U", "R", "F", "D", "L", "B"]`
    """
    return list(FACE_ORDER)


class Settings(BaseModel):
    """
    Process configuration for the default pipeline.

    Attributes:
        gemini_api_key (str | None): Credential for the vision oracle. Without it,
            faces are always filled by the fallback strategy.
        vision_model (str): Gemini model used to read face colors.
        vision_timeout (float): Seconds to wait for the vision oracle.
        fallback_seed (int | None): Seed for the fallback grid generator.
    """

    gemini_api_key: Optional[str] = None
    vision_model: str = "gemini-1.5-flash"
    vision_timeout: float = 30.0
    fallback_seed: Optional[int] = None

    @field_validator("gemini_api_key")
    @classmethod
    def blank_key_is_none(cls, value):
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("vision_timeout")
    @classmethod
    def validate_timeout(cls, value):
        if value <= 0:
            raise ValueError("Vision timeout must be a positive number of seconds.")
        return value

    @classmethod
    def from_env(cls, environ=None):
        """
        Build settings from environment variables.

        `GEMINI_API_KEY`, `CUBESTEPS_VISION_MODEL`, `CUBESTEPS_VISION_TIMEOUT` and
        `CUBESTEPS_FALLBACK_SEED` are read; unset variables keep their defaults.
        Invalid values are logged and replaced by their defaults.
        """
        environ = os.environ if environ is None else environ
        values = {
            "gemini_api_key": environ.get("GEMINI_API_KEY"),
            "vision_model": environ.get("CUBESTEPS_VISION_MODEL"),
            "vision_timeout": environ.get("CUBESTEPS_VISION_TIMEOUT"),
            "fallback_seed": environ.get("CUBESTEPS_FALLBACK_SEED"),
        }
        values = {k: v for k, v in values.items() if v is not None}
        try:
            return cls(**values)
        except ValidationError as e:
            invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
            for name in sorted(invalid):
                logger.warning(f"Ignoring invalid setting {name}={values.get(name)!r}, using the default")
            return cls(**{k: v for k, v in values.items() if k not in invalid})


set_verbose(loglevel=30)  # default to WARNING
