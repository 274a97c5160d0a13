"""Advent of Code 2025 solutions: day 1 (dial) and day 2 (invalid IDs)."""

from loguru import logger

from advent_of_code.day1 import (
    DialResult,
    Direction,
    Rotation,
    count_crossings,
    parse_rotations,
    process_dial,
)
from advent_of_code.day2 import (
    IdRange,
    RepeatMode,
    is_repeated,
    parse_ranges,
    sum_invalid,
    sum_invalid_ids,
)
from advent_of_code.errors import (
    InputFormatError,
    MalformedCommandError,
    MalformedRangeError,
)

# Silent when imported as a library; the command-line entry points re-enable it.
logger.disable("advent_of_code")

__all__ = [
    "DialResult",
    "Direction",
    "IdRange",
    "InputFormatError",
    "MalformedCommandError",
    "MalformedRangeError",
    "RepeatMode",
    "Rotation",
    "count_crossings",
    "is_repeated",
    "parse_ranges",
    "parse_rotations",
    "process_dial",
    "sum_invalid",
    "sum_invalid_ids",
]
