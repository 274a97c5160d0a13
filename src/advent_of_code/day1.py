"""Day 1 - Rotation/Dial Problem

The dial shows 0..N_POSITION-1 and starts at INITIAL_POSITION. Part 1 counts
rotations that leave the dial pointing at 0; part 2 counts every click that
passes over or lands on 0.

Crossings are counted on the raw (unwrapped) position using floor division,
so the running position is never wrapped back into the dial range.
"""

import argparse
import sys
from enum import Enum
from typing import Iterable, List, NamedTuple

from loguru import logger

from advent_of_code.errors import MalformedCommandError

INITIAL_POSITION: int = 50
N_POSITION: int = 100

INPUT_FILE: str = "day1_input.txt"


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"


class Rotation(NamedTuple):
    direction: Direction
    magnitude: int

    @property
    def signed(self) -> int:
        return -self.magnitude if self.direction is Direction.LEFT else self.magnitude

    def __str__(self) -> str:
        return f"{self.direction.value}{self.magnitude}"


class DialResult(NamedTuple):
    landing_count: int
    crossing_count: int
    position: int
    modulus: int = N_POSITION

    @property
    def dial(self) -> int:
        """Reading on the dial face for the raw ``position``."""
        return self.position % self.modulus


def parse_rotation(token: str) -> Rotation:
    """Parse ``L68`` / ``R14`` into a Rotation."""
    token = token.strip()
    if not token:
        raise MalformedCommandError("empty rotation")

    try:
        direction = Direction(token[0])
    except ValueError:
        raise MalformedCommandError(
            f"unexpected direction {token[0]!r} in rotation {token!r}"
        ) from None

    digits = token[1:]
    if not digits.isdecimal():
        raise MalformedCommandError(f"invalid magnitude in rotation {token!r}")

    return Rotation(direction, int(digits))


def parse_rotations(text: str) -> List[Rotation]:
    """Parse one rotation per line (any whitespace separates rotations)."""
    return [parse_rotation(token) for token in text.split()]


def load_rotations(filename: str) -> List[Rotation]:
    """Load rotations from file. L prefix = toward lower values, R = higher."""
    with open(filename, "r") as file:
        return parse_rotations(file.read())


def count_crossings(pre: int, post: int, modulus: int = N_POSITION) -> int:
    """Count multiples of ``modulus`` in the half-open interval from ``pre`` to ``post``.

    The starting position is excluded and the end position is included, so a
    rotation that starts on 0 does not count it again and one that stops on 0
    does. ``//`` rounds toward negative infinity, which keeps the count right
    once the raw position goes negative.
    """
    if post >= pre:
        return post // modulus - pre // modulus
    return (pre - 1) // modulus - (post - 1) // modulus


def count_crossings_stepwise(pre: int, post: int, modulus: int = N_POSITION) -> int:
    """Reference implementation: move one click at a time and count zeros."""
    step = 1 if post >= pre else -1
    crossings = 0
    position = pre
    while position != post:
        position += step
        if position % modulus == 0:
            crossings += 1
    return crossings


def process_dial(
    rotations: Iterable[Rotation],
    initial: int = INITIAL_POSITION,
    modulus: int = N_POSITION,
) -> DialResult:
    """Apply rotations in order and count landings on, and passes over, 0."""
    position = initial
    landing_count = 0
    crossing_count = 0

    for rotation in rotations:
        pre = position
        position = pre + rotation.signed

        crossings = count_crossings(pre, position, modulus)
        crossing_count += crossings

        if rotation.magnitude and position % modulus == 0:
            landing_count += 1

        logger.debug(
            f"The dial is rotated {rotation} to point at {position % modulus}"
            f" - passing 0 {crossings} time(s)."
        )

    return DialResult(landing_count, crossing_count, position, modulus)


def main(argv: List[str] | None = None) -> None:
    """Run the dial rotation calculation and print summary information."""
    parser = argparse.ArgumentParser(description="Advent of Code 2025 - Day 1")
    parser.add_argument(
        "input",
        nargs="?",
        default=INPUT_FILE,
        help=f"Puzzle input file (default: {INPUT_FILE})",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="Log every rotation",
    )
    parser.add_argument(
        "--initial",
        type=int,
        default=INITIAL_POSITION,
        help=f"Starting dial position (default: {INITIAL_POSITION})",
    )
    args = parser.parse_args(argv)

    logger.remove()
    logger.enable("advent_of_code")
    logger.add(sys.stderr, level="DEBUG" if args.debug else "INFO")

    rotations = load_rotations(args.input)
    logger.info(f"Loaded {len(rotations)} rotations from {args.input}")

    if rotations:
        signed = [rotation.signed for rotation in rotations]
        print(f"Info - number of rotations: {len(rotations)}")
        print(f"Info - max rotations: {max(signed)}; min rotations: {min(signed)}")

    print(f"The dial starts by pointing at {args.initial}.")
    result = process_dial(rotations, initial=args.initial)

    print(f"The dial ends pointing at {result.dial}.")
    print(f"Password [old]: {result.landing_count} - [new]: {result.crossing_count}")


if __name__ == "__main__":
    main()
