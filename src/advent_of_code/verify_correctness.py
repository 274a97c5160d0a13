#!/usr/bin/env python3
"""
Standalone Dial Implementation Correctness Verification

Runs the same seeded list of rotations through every day 1 implementation
and checks that they report identical landing and crossing counts:

- closed form (floor division on the raw position)
- click-by-click simulation
- NumPy prefix sums

Usage:
    python -m advent_of_code.verify_correctness              # Verify all implementations
    python -m advent_of_code.verify_correctness --verbose    # Show per-rotation mismatches
    python -m advent_of_code.verify_correctness --count 5000 --max-magnitude 1000
"""

import argparse
import random
import sys
from typing import Callable, Dict, List

from loguru import logger

from advent_of_code.day1 import (
    INITIAL_POSITION,
    N_POSITION,
    DialResult,
    Direction,
    Rotation,
    count_crossings,
    count_crossings_stepwise,
    process_dial,
)
from advent_of_code.day1_np import process_dial_np

# Configuration
COUNT = 1000
MAX_MAGNITUDE = 500
SEED = 42


def generate_rotations(count: int, max_magnitude: int, seed: int = SEED) -> List[Rotation]:
    """Generate a deterministic list of rotations, zero magnitudes included."""
    rng = random.Random(seed)
    return [
        Rotation(rng.choice(list(Direction)), rng.randint(0, max_magnitude))
        for _ in range(count)
    ]


def process_dial_stepwise(
    rotations: List[Rotation],
    initial: int = INITIAL_POSITION,
    modulus: int = N_POSITION,
) -> DialResult:
    """process_dial with the closed-form crossing count swapped for simulation."""
    position = initial
    landing_count = 0
    crossing_count = 0
    for rotation in rotations:
        post = position + rotation.signed
        crossing_count += count_crossings_stepwise(position, post, modulus)
        if rotation.magnitude and post % modulus == 0:
            landing_count += 1
        position = post
    return DialResult(landing_count, crossing_count, position, modulus)


IMPLEMENTATIONS: Dict[str, Callable[[List[Rotation]], DialResult]] = {
    "Closed form": process_dial,
    "Stepwise": process_dial_stepwise,
    "NumPy": process_dial_np,
}


class VerificationRunner:
    def __init__(self, rotations: List[Rotation], verbose: bool = False):
        self.rotations = rotations
        self.verbose = verbose
        self.results: Dict[str, DialResult] = {}

    def verify(self, name: str, func: Callable[[List[Rotation]], DialResult]) -> bool:
        """Run and record one implementation."""
        print(f"Testing {name}...", end="", flush=True)
        try:
            self.results[name] = func(self.rotations)
        except Exception as e:
            logger.error(f"{name} failed: {e}")
            print(f" ✗ FAILED: {e}")
            return False

        print(" ✓")
        logger.debug(f"{name}: {self.results[name]}")
        return True

    def first_divergence(self) -> int | None:
        """Index of the first rotation where closed form and stepwise disagree."""
        position = INITIAL_POSITION
        for index, rotation in enumerate(self.rotations):
            post = position + rotation.signed
            if count_crossings(position, post) != count_crossings_stepwise(position, post):
                return index
            position = post
        return None

    def compare_all(self) -> bool:
        """Compare all results against the first implementation."""
        if not self.results:
            print("\n✗ No implementations to compare")
            return False

        print("\n" + "=" * 70)
        print("Correctness Verification Results")
        print("=" * 70)

        ref_name = list(self.results.keys())[0]
        ref = self.results[ref_name]
        print(f"\nReference: {ref_name}")
        print(f"  landings={ref.landing_count} crossings={ref.crossing_count} dial={ref.dial}")

        print("\nComparison:")
        all_match = True
        for name, result in self.results.items():
            if name == ref_name:
                continue
            if result == ref:
                print(f"  ✓ {name:<20} matches reference")
            else:
                print(f"  ✗ {name:<20} MISMATCH! {result}")
                all_match = False

        if not all_match and self.verbose:
            index = self.first_divergence()
            if index is not None:
                print(f"    First crossing difference at rotation {index}: {self.rotations[index]}")

        print("\n" + "=" * 70)
        if all_match:
            print("✓ ALL IMPLEMENTATIONS PRODUCE IDENTICAL RESULTS")
        else:
            print("✗ CORRECTNESS VERIFICATION FAILED")
        print("=" * 70)
        return all_match

    def run(self) -> bool:
        print("Dial Correctness Verification")
        print(f"Rotations: {len(self.rotations)}\n")

        for name, func in IMPLEMENTATIONS.items():
            self.verify(name, func)

        return self.compare_all()


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Verify correctness of dial implementations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logs and the first diverging rotation",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=COUNT,
        help=f"Number of rotations (default: {COUNT})",
    )
    parser.add_argument(
        "--max-magnitude",
        type=int,
        default=MAX_MAGNITUDE,
        help=f"Largest rotation magnitude (default: {MAX_MAGNITUDE})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=SEED,
        help=f"Random seed (default: {SEED})",
    )
    args = parser.parse_args(argv)

    logger.remove()
    logger.enable("advent_of_code")
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    rotations = generate_rotations(args.count, args.max_magnitude, args.seed)
    runner = VerificationRunner(rotations, verbose=args.verbose)
    success = runner.run()

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
