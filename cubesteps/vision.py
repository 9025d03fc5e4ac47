"""
Face color acquisition.

This module reads the 3x3 colors of one cube face from a photograph.

Classes:
    - `GeminiVision`: Vision oracle asking a Gemini model for the grid over its REST API.
    - `RandomFallback`: Fallback strategy returning a random, well-formed grid.
    - `FaceColorAcquirer`: Asks the oracle and falls back whenever it is missing or unusable.

Acquisition never fails on a bad photo or a flaky oracle: the caller always gets
a 3x3 grid of known colors. Only an unknown face identifier is rejected.
"""

import base64
import json
import os
import re

import numpy as np
import requests
from rich.markup import escape

from .exceptions import MalformedVisionResponse, UnsupportedFace, VisionFailure
from .notation import COLORS, Color
from .utils import FACE_NAMES, FACE_ORDER, logger, logger_args

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}
DEFAULT_MIME_TYPE = "image/jpeg"

PROMPT = """
This is an image of the {name} face ({face}) of a Rubik's cube.
Analyze the image and identify the color of each square in a 3x3 grid.
The possible colors are: white, yellow, red, orange, green, and blue.
Return the result as a 3x3 JSON array of colors, with no additional text.
Format should be exactly: [["color","color","color"],["color","color","color"],["color","color","color"]]
"""

_GRID_PATTERN = re.compile(r"\[\s*\[.*?\]\s*\]", re.DOTALL)


def get_mime_type(filename):
    """MIME type for an image file name; unknown extensions default to JPEG."""
    if not filename:
        return DEFAULT_MIME_TYPE
    ext = os.path.splitext(filename)[1].lower()
    if ext not in MIME_TYPES:
        logger.warning(f"Unknown file extension: {ext!r}, using {DEFAULT_MIME_TYPE}")
    return MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


def build_prompt(face):
    return PROMPT.format(name=FACE_NAMES[face], face=face)


def parse_grid(text):
    """
    Extract a 3x3 color grid from an oracle response.

    The first `[[...]]` substring is parsed as JSON; without one, the whole text is.

    Args:
        text (str): Free-form oracle output.

    Returns:
        list: 3x3 list of `Color`.

    Raises:
        MalformedVisionResponse: If no valid 3x3 grid of known colors can be read.
    """
    match = _GRID_PATTERN.search(text or "")
    try:
        grid = json.loads(match.group(0) if match else text)
    except (TypeError, ValueError) as e:
        raise MalformedVisionResponse(f"Failed to parse color grid: {e}") from e

    if not isinstance(grid, list) or len(grid) != 3:
        raise MalformedVisionResponse(f"Expected 3 rows, got {grid!r}")
    for row in grid:
        if not isinstance(row, list) or len(row) != 3:
            raise MalformedVisionResponse(f"Expected rows of 3 colors, got {row!r}")
        for color in row:
            if not isinstance(color, str) or color.lower() not in COLORS:
                raise MalformedVisionResponse(f"Unexpected color {color!r}")
    return [[Color(c.lower()) for c in row] for row in grid]


class GeminiVision:
    """
    Vision oracle over the Gemini `generateContent` endpoint.

    Args:
        api_key (str): Gemini API key.
        model (str): Model name.
        timeout (float): Request timeout in seconds.
    """

    def __init__(self, api_key, model="gemini-1.5-flash", timeout=30.0):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    def __call__(self, image, mime_type, prompt):
        """
        Send the image and instruction, return the model's text.

        Raises:
            VisionFailure: On transport or HTTP errors, or a response without text.
        """
        payload = {
            "contents": [
                {
                    "parts": [
                        {"text": prompt},
                        {
                            "inline_data": {
                                "mime_type": mime_type,
                                "data": base64.b64encode(image).decode("ascii"),
                            }
                        },
                    ]
                }
            ]
        }
        logger.info(f"[grey50]Sending request to Gemini ({self.model})", **logger_args)
        try:
            r = requests.post(
                GEMINI_URL.format(model=self.model),
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )
            r.raise_for_status()
            body = r.json()
        except (requests.RequestException, ValueError) as e:
            raise VisionFailure(f"Gemini request failed: {e}") from e

        try:
            parts = body["candidates"][0]["content"]["parts"]
            text = "".join(p.get("text", "") for p in parts)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise VisionFailure(f"Gemini returned no candidates: {body!r}") from e
        logger.debug(f"Raw Gemini response: {escape(text)}")
        return text


class RandomFallback:
    """
    Fallback strategy: a 3x3 grid drawn uniformly from the six colors.

    Args:
        seed (int | None): Seed for the underlying `numpy.random.Generator`.
    """

    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)

    def __call__(self, face):
        picks = self.rng.choice(len(COLORS), size=(3, 3))
        return [[Color(COLORS[i]) for i in row] for row in picks.tolist()]


class FaceColorAcquirer:
    """
    Read a face's colors with a vision oracle, falling back when it cannot.

    Args:
        oracle (Callable | None): `(image_bytes, mime_type, prompt) -> str`, raising
            `VisionFailure` on failure; any exception it raises falls back. `None` when no
            credential is configured.
        fallback (Callable): `(face) -> grid`; defaults to `RandomFallback()`.
    """

    def __init__(self, oracle=None, fallback=None):
        self.oracle = oracle
        self.fallback = fallback if fallback is not None else RandomFallback()

    def acquire(self, image, face, filename=None):
        """
        Get the 3x3 color grid of `face` from `image`.

        Args:
            image (bytes): Raw image data.
            face (str): One of `U`, `R`, `F`, `D`, `L`, `B`.
            filename (str | None): Original file name, used for the MIME type.

        Returns:
            list: 3x3 list of `Color`.

        Raises:
            UnsupportedFace: If `face` is not a known face identifier.
        """
        if face not in FACE_ORDER:
            raise UnsupportedFace(face)

        if self.oracle is None:
            logger.warning("No vision credential configured, using fallback colors")
            return self.fallback(face)
        if not image:
            logger.warning(f"Empty image for face {face}, using fallback colors")
            return self.fallback(face)

        mime_type = get_mime_type(filename)
        try:
            text = self.oracle(image, mime_type, build_prompt(face))
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.warning(f"[yellow]Vision oracle failed: {escape(message)}[/yellow] Falling back for face {face}", **logger_args)
            return self.fallback(face)

        try:
            return parse_grid(text)
        except MalformedVisionResponse as e:
            logger.warning(f"[yellow]{escape(str(e))}[/yellow] Falling back for face {face}", **logger_args)
            return self.fallback(face)

    def acquire_file(self, path, face):
        """
        Acquire a face from an image file, then delete the file.

        The file is removed on every exit path, including an `UnsupportedFace` rejection.
        """
        try:
            if face not in FACE_ORDER:
                raise UnsupportedFace(face)
            try:
                with open(path, "rb") as f:
                    image = f.read()
            except OSError as e:
                logger.error(f"Could not read {path}: {e}")
                image = b""
            logger.info(f"[grey50]Processing {path} ({len(image)} bytes)", **logger_args)
            return self.acquire(image, face, filename=os.fspath(path))
        finally:
            release(path)


def release(path):
    """Delete an image file; failures are logged, not raised."""
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error(f"Failed to delete file: {path} ({e})")
    else:
        logger.debug(f"Deleted file: {path}")
