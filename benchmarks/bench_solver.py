"""Simple micro-benchmark for the click-by-click solver vs the NumPy counters.

Run with something like:

    uv run benchmarks/bench_solver.py

This is intentionally minimal and not a rigorous benchmark suite.
"""

from __future__ import annotations

import time

from dial_password import CountingMode, iter_rotations, solve_puzzle
from dial_password.dial_np import count_end_zeros, count_step_zeros, to_offsets
from dial_password.logging_setup import configure_logging
from dial_password.verify import generate_rotations


def bench(label: str, fn, *args) -> None:
    start = time.perf_counter()
    result = fn(*args)
    duration = time.perf_counter() - start
    print(f"{label:28s} result={result:8d}  {duration:8.4f}s")


def main() -> None:
    configure_logging("WARNING")  # keep per-rotation debug lines out of the timings
    n = 10_000
    input_text = generate_rotations(count=n, max_distance=1_000)
    offsets = to_offsets(iter_rotations(input_text))

    print(f"{n} rotations")
    bench("Python part 1", solve_puzzle, input_text, CountingMode.END_OF_ROTATION)
    bench("NumPy part 1", count_end_zeros, offsets)
    bench("Python part 2 (per click)", solve_puzzle, input_text, CountingMode.EVERY_STEP)
    bench("NumPy part 2 (closed form)", count_step_zeros, offsets)


if __name__ == "__main__":  # pragma: no cover
    main()
