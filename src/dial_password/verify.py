#!/usr/bin/env python3
"""
Solver Correctness Verification

Checks that the click-by-click solver and the NumPy closed-form counters give
the same password for both parts on the same randomly generated rotations.

Usage:
    python -m dial_password.verify              # Verify with default settings
    python -m dial_password.verify --verbose    # Show every rotation input
    python -m dial_password.verify --count 5000 --max-distance 2000
"""

import argparse
import random
import sys

from .dial_np import count_end_zeros, count_step_zeros, to_offsets
from .logging_setup import configure_logging
from .solver import CountingMode, iter_rotations, solve_puzzle

# Configuration
COUNT = 1000
MAX_DISTANCE = 1000
SEED = 42


def generate_rotations(count=COUNT, max_distance=MAX_DISTANCE, seed=SEED):
    """Generate deterministic rotation input text."""
    rng = random.Random(seed)
    lines = [
        f"{rng.choice('LR')}{rng.randint(0, max_distance)}" for _ in range(count)
    ]
    return "\n".join(lines) + "\n"


class VerificationRunner:
    def __init__(self, count=COUNT, max_distance=MAX_DISTANCE, seed=SEED, verbose=False):
        self.count = count
        self.max_distance = max_distance
        self.seed = seed
        self.verbose = verbose
        self.results = {}

    def verify_mode(self, name, mode, input_text):
        """Run both implementations for one counting mode."""
        print(f"Testing {name}...", end="", flush=True)

        offsets = to_offsets(iter_rotations(input_text))
        counter = count_step_zeros if mode is CountingMode.EVERY_STEP else count_end_zeros

        python_result = solve_puzzle(input_text, mode)
        numpy_result = counter(offsets)
        self.results[name] = (python_result, numpy_result)

        if python_result == numpy_result:
            print(f" ✓ {python_result}")
            return True
        print(f" ✗ MISMATCH! Python: {python_result}, NumPy: {numpy_result}")
        return False

    def run(self):
        """Run verification on both counting modes."""
        print("Dial Password Correctness Verification")
        print(f"Rotations: {self.count}")
        print(f"Max distance: {self.max_distance}")
        print(f"Seed: {self.seed}\n")

        input_text = generate_rotations(self.count, self.max_distance, self.seed)
        if self.verbose:
            print(input_text)

        part1 = self.verify_mode("Part 1 (end of rotation)", CountingMode.END_OF_ROTATION, input_text)
        part2 = self.verify_mode("Part 2 (every click)", CountingMode.EVERY_STEP, input_text)
        all_match = part1 and part2

        print("\n" + "=" * 70)
        if all_match:
            print("✓ ALL IMPLEMENTATIONS PRODUCE IDENTICAL RESULTS")
        else:
            print("✗ CORRECTNESS VERIFICATION FAILED")
        print("=" * 70)
        return all_match


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Verify the dial solver against the NumPy closed-form counters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the generated rotations"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=COUNT,
        help=f"Number of rotations (default: {COUNT})"
    )
    parser.add_argument(
        "--max-distance",
        type=int,
        default=MAX_DISTANCE,
        help=f"Largest rotation distance (default: {MAX_DISTANCE})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=SEED,
        help=f"Random seed (default: {SEED})"
    )

    args = parser.parse_args(argv)
    configure_logging("WARNING")

    runner = VerificationRunner(
        count=args.count,
        max_distance=args.max_distance,
        seed=args.seed,
        verbose=args.verbose,
    )
    return 0 if runner.run() else 1


if __name__ == "__main__":
    sys.exit(main())
