"""Day 2 - Invalid Product IDs

An ID is invalid when its digits are some shorter digit sequence written
several times in a row: 55, 6464, 123123, 1212121212. Part 1 only accepts a
sequence written exactly twice; part 2 accepts two or more copies.
"""

import argparse
import sys
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple

from loguru import logger

from advent_of_code.errors import MalformedRangeError

INPUT_FILE: str = "day2_input.txt"


class RepeatMode(Enum):
    EXACTLY_TWICE = "twice"
    AT_LEAST_TWICE = "at-least-twice"


class IdRange(NamedTuple):
    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


def _period_lengths(length: int, mode: RepeatMode) -> Iterator[int]:
    """Candidate pattern lengths: divisors of ``length`` that allow 2+ copies."""
    if mode is RepeatMode.EXACTLY_TWICE:
        if length % 2 == 0:
            yield length // 2
        return

    for period in range(1, length // 2 + 1):
        if length % period == 0:
            yield period


def _is_tiled_by(digits: str, period: int) -> bool:
    pattern = digits[:period]
    return all(
        digits[offset : offset + period] == pattern
        for offset in range(period, len(digits), period)
    )


def is_repeated(value: int, mode: RepeatMode = RepeatMode.AT_LEAST_TWICE) -> bool:
    """True when ``value`` is a digit pattern repeated with no leftover digits."""
    if value < 0:
        raise ValueError(f"IDs are non-negative, got {value}")

    digits = str(value)
    # single digits yield no candidate period, so they are never repeated
    return any(
        _is_tiled_by(digits, period) for period in _period_lengths(len(digits), mode)
    )


def sum_invalid(
    range_start: int,
    range_end: int,
    mode: RepeatMode = RepeatMode.AT_LEAST_TWICE,
) -> int:
    """Sum every invalid ID in ``[range_start, range_end]`` (both ends included)."""
    if range_start > range_end:
        raise MalformedRangeError(f"range start {range_start} exceeds end {range_end}")

    return sum(
        value for value in range(range_start, range_end + 1) if is_repeated(value, mode)
    )


def sum_invalid_ids(
    ranges: Iterable[IdRange],
    mode: RepeatMode = RepeatMode.AT_LEAST_TWICE,
) -> int:
    total = 0
    for id_range in ranges:
        subtotal = sum_invalid(id_range.start, id_range.end, mode)
        logger.debug(f"Range {id_range}: invalid IDs sum to {subtotal}")
        total += subtotal
    return total


def parse_range(token: str) -> IdRange:
    """Parse ``start-end`` into an IdRange."""
    token = token.strip()
    parts = token.split("-")
    if len(parts) != 2:
        raise MalformedRangeError(f"expected 'start-end', got {token!r}")

    start_text, end_text = (part.strip() for part in parts)
    if not (start_text.isdecimal() and end_text.isdecimal()):
        raise MalformedRangeError(f"non-numeric bound in range {token!r}")

    start, end = int(start_text), int(end_text)
    if start > end:
        raise MalformedRangeError(f"range {token!r} has start > end")
    return IdRange(start, end)


def parse_ranges(text: str) -> List[IdRange]:
    """Parse comma separated ranges; a trailing comma or newline is ignored."""
    return [parse_range(token) for token in text.split(",") if token.strip()]


def load_ranges(filename: str) -> List[IdRange]:
    with open(filename, "r") as file:
        return parse_ranges(file.read())


def main(argv: List[str] | None = None) -> None:
    """Sum invalid IDs for both puzzle parts and print the answers."""
    parser = argparse.ArgumentParser(description="Advent of Code 2025 - Day 2")
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
        help="Log the subtotal of every range",
    )
    args = parser.parse_args(argv)

    logger.remove()
    logger.enable("advent_of_code")
    logger.add(sys.stderr, level="DEBUG" if args.debug else "INFO")

    ranges = load_ranges(args.input)
    logger.info(f"Loaded {len(ranges)} ranges from {args.input}")
    print(f"Info - number of ranges: {len(ranges)}")
    print(f"Info - IDs to check: {sum(r.end - r.start + 1 for r in ranges)}")

    part1 = sum_invalid_ids(ranges, RepeatMode.EXACTLY_TWICE)
    part2 = sum_invalid_ids(ranges, RepeatMode.AT_LEAST_TWICE)

    print(f"Sum of invalid IDs [twice]: {part1} - [at least twice]: {part2}")


if __name__ == "__main__":
    main()
