from typing import Iterable

import numpy as np

from advent_of_code.day1 import INITIAL_POSITION, N_POSITION, DialResult, Rotation


def process_dial_np(
    rotations: Iterable[Rotation],
    initial: int = INITIAL_POSITION,
    modulus: int = N_POSITION,
) -> DialResult:
    """Vectorised process_dial: prefix sums give every raw position at once."""
    steps = np.fromiter((rotation.signed for rotation in rotations), dtype=np.int64)
    if steps.size == 0:
        return DialResult(0, 0, initial, modulus)

    posts = initial + np.cumsum(steps)
    pres = np.r_[np.int64(initial), posts[:-1]]

    # np.floor_divide rounds toward -inf for integers, same as //
    crossings = np.where(
        steps >= 0,
        np.floor_divide(posts, modulus) - np.floor_divide(pres, modulus),
        np.floor_divide(pres - 1, modulus) - np.floor_divide(posts - 1, modulus),
    )
    landings = (steps != 0) & (np.mod(posts, modulus) == 0)

    return DialResult(
        int(np.count_nonzero(landings)),
        int(crossings.sum()),
        int(posts[-1]),
        modulus,
    )
