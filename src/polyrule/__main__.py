#!/usr/bin/env python3
## command line front end for polyrule

## Copyright (c) 2026 polyrule contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Render one of the bundled example scenes to a Wavefront OBJ file.

Usage:
    python -m polyrule SCENE [--output FILE] [--depth N] [--seed S]
                             [--precision P] [--groups] [-v]
    python -m polyrule --list

Examples:
    # Recursive tile, four levels deep, written to tile.obj
    python -m polyrule tile --depth 4 --output tile.obj

    # Randomized column, reproducible with a fixed seed, to stdout
    python -m polyrule random --seed 7

The log level defaults to WARNING and can be set with the LOG_LEVEL
environment variable; -v forces DEBUG.
"""

import argparse
import logging
import os
import random
import sys

from polyrule.errors import PolyruleError
from polyrule.io.obj import write_obj
from polyrule.library import SCENES, scene

logger = logging.getLogger("polyrule")


def configure_logging(default_level: str = "WARNING", verbose: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv("LOG_LEVEL", default_level).upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyrule",
        description="Render a polyrule example scene as a Wavefront OBJ file.",
    )
    parser.add_argument("scene", nargs="?", choices=sorted(SCENES),
                        help="scene to render")
    parser.add_argument("-o", "--output",
                        help="output file (default: standard output)")
    parser.add_argument("--depth", type=int, default=3,
                        help="depth budget for recursive scenes (default: 3)")
    parser.add_argument("--seed", type=int,
                        help="seed for randomized scenes")
    parser.add_argument("--precision", type=int,
                        help="fixed number of decimals for coordinates")
    parser.add_argument("--groups", action="store_true",
                        help="write an 'o' record before each mesh")
    parser.add_argument("--list", action="store_true",
                        help="list the available scenes and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.list:
        for name in sorted(SCENES):
            print(name)
        return 0

    if args.scene is None:
        parser.print_usage(sys.stderr)
        print("Error: a scene name is required", file=sys.stderr)
        return 2

    if args.depth < 0:
        print("Error: --depth must not be negative", file=sys.stderr)
        return 2

    rule = scene(args.scene, depth=args.depth, rng=random.Random(args.seed))
    logger.info("rendering scene %s", args.scene)

    try:
        write_obj(rule, args.output if args.output else sys.stdout,
                  precision=args.precision, groups=args.groups)
    except (PolyruleError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        print(f"Wrote {args.scene} to {args.output}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
