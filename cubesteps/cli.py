"""
Command-Line Interface for cubesteps.

This module provides the entry point for the command-line utility. It takes a
cube state either as JSON or as six face photographs, runs the default pipeline,
and prints the phased solution.
"""
import argparse
import json
import sys

import rich


def parse_image_arg(value):
    """Parse `FACE=PATH` into `(face, path)`."""
    face, sep, path = value.partition("=")
    if not sep or not path:
        raise argparse.ArgumentTypeError(f"Expected FACE=PATH, got {value!r}")
    return face.strip().upper(), path


def main(argv=None):
    """
    Command-line utility for solving a Rubik's Cube with cubesteps.

    ```bash title="Syntax"
    cubesteps [--state STATE] [--image FACE=PATH ...] [--consume-images] [--verbose]
    ```

    Arguments:

    * `--state`/`-s` (str): JSON object mapping each face (`U`, `R`, `F`, `D`, `L`, `B`) to a 3x3 array of color names.
    * `--image`/`-i` (str): `FACE=PATH`, once per face, to read colors from photos instead.
    * `--consume-images`: Delete each photo after it has been read.
    * `--verbose`/`-v`: Enable verbose output for tracking progress.

    Returns:
        int: Exit status; `1` when the state is rejected or the solver fails.

    Example Usages:

    ```bash title="1. Solve a typed-in state"
    cubesteps --state '{"U": [["white","white","white"], ...], "R": ..., ...}'
    ```

    ```bash title="2. Solve from photos (set GEMINI_API_KEY to read colors with Gemini)"
    cubesteps -i U=up.jpg -i R=right.jpg -i F=front.jpg \\
              -i D=down.jpg -i L=left.jpg -i B=back.jpg
    ```
    """
    from . import Pipeline, set_verbose
    from .exceptions import CubeStateError

    parser = argparse.ArgumentParser(
        description="cubesteps -- Rubik's Cube solutions, step by step"
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--state",
        "-s",
        type=str,
        help="JSON object of six 3x3 color grids keyed by face letter",
    )
    group.add_argument(
        "--image",
        "-i",
        type=parse_image_arg,
        action="append",
        metavar="FACE=PATH",
        help="Photo of one face; repeat for all six faces",
    )
    parser.add_argument(
        "--consume-images",
        action="store_true",
        help="Delete each photo once it has been read",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        dest="loglevel",
        action="store_const",
        const=20,
        help="Enable verbose output for tracking progress",
    )
    args = parser.parse_args(argv)

    if args.loglevel:
        set_verbose(args.loglevel)

    pipeline = Pipeline()
    try:
        if args.state is not None:
            try:
                state = json.loads(args.state)
            except ValueError as e:
                parser.error(f"--state is not valid JSON: {e}")
            result = pipeline.solve(state)
        else:
            result = pipeline.solve_images(dict(args.image), consume=args.consume_images)
    except CubeStateError as e:
        rich.print(f"[red]Rejected cube state:[/red] {e}", file=sys.stderr)
        return 1
    except OSError as e:
        rich.print(f"[red]Could not read image:[/red] {e}", file=sys.stderr)
        return 1

    rich.print(result.as_dict())
    return 0 if result.success else 1
