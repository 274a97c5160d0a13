"""Behavioural tests for the day 2 repeated-digit ID classifier."""

from __future__ import annotations

import pytest

from advent_of_code.day2 import (
    IdRange,
    RepeatMode,
    is_repeated,
    load_ranges,
    main,
    parse_range,
    parse_ranges,
    sum_invalid,
    sum_invalid_ids,
)
from advent_of_code.errors import MalformedRangeError

EXAMPLE_INPUT = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,"
    "1698522-1698528,446443-446449,38593856-38593862,565653-565659,"
    "824824821-824824827,2121212118-2121212124\n"
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (11, True),
        (123123, True),
        (1212121212, True),
        (111, True),
        (824824824, True),
        (1231, False),
        (5, False),
        (0, False),
        (10, False),
        (1001, False),
        (121, False),
    ],
)
def test_is_repeated(value: int, expected: bool) -> None:
    assert is_repeated(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (11, True),
        (6464, True),
        (123123, True),
        (1111, True),
        (111, False),
        (1212121212, False),
        (824824824, False),
        (5, False),
    ],
)
def test_is_repeated_exactly_twice(value: int, expected: bool) -> None:
    assert is_repeated(value, RepeatMode.EXACTLY_TWICE) is expected


def test_odd_length_is_not_skipped() -> None:
    # nine digits: period 3 divides the length
    assert is_repeated(123123123)
    assert not is_repeated(123123124)


def test_negative_value_rejected() -> None:
    with pytest.raises(ValueError):
        is_repeated(-11)


def test_range_includes_both_ends() -> None:
    assert sum_invalid(11, 22) == 33
    assert sum_invalid(22, 22) == 22
    assert sum_invalid(12, 21) == 0


def test_range_start_after_end_is_rejected() -> None:
    with pytest.raises(MalformedRangeError):
        sum_invalid(22, 11)


def test_example_totals() -> None:
    ranges = parse_ranges(EXAMPLE_INPUT)

    assert sum_invalid_ids(ranges, RepeatMode.EXACTLY_TWICE) == 1227775554
    assert sum_invalid_ids(ranges) == 4174379265


def test_total_independent_of_splitting_and_order() -> None:
    whole = [IdRange(95, 115), IdRange(11, 22)]
    split = [IdRange(18, 22), IdRange(100, 115), IdRange(11, 17), IdRange(95, 99)]

    assert sum_invalid_ids(whole) == sum_invalid_ids(split) == 33 + 99 + 111


@pytest.mark.parametrize(
    "token, expected",
    [
        ("11-22", IdRange(11, 22)),
        (" 95-115\n", IdRange(95, 115)),
        ("7-7", IdRange(7, 7)),
    ],
)
def test_parse_range(token: str, expected: IdRange) -> None:
    assert parse_range(token) == expected


@pytest.mark.parametrize("token", ["11", "11-22-33", "a-22", "11-", "-5-10", "22-11"])
def test_parse_range_rejects_malformed(token: str) -> None:
    with pytest.raises(MalformedRangeError):
        parse_range(token)


def test_parse_ranges_ignores_trailing_separator() -> None:
    assert parse_ranges("11-22,95-115,\n") == [IdRange(11, 22), IdRange(95, 115)]


def test_load_ranges(tmp_path) -> None:
    path = tmp_path / "day2_input.txt"
    path.write_text("11-22,998-1012\n")

    assert load_ranges(str(path)) == [IdRange(11, 22), IdRange(998, 1012)]


def test_main_prints_both_sums(tmp_path, capsys) -> None:
    path = tmp_path / "day2_input.txt"
    path.write_text(EXAMPLE_INPUT)

    main([str(path)])

    out = capsys.readouterr().out
    assert "Info - number of ranges: 11" in out
    assert "[twice]: 1227775554 - [at least twice]: 4174379265" in out
