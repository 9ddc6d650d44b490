#!/usr/bin/env python3
"""Benchmark blob and maze grid generation."""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from wangtiles.generators import BaseWangGenerator, BlobGenerator, MazeGenerator

GRID_SIZES: tuple[tuple[int, int], ...] = (
    (16, 16),
    (32, 32),
    (64, 48),
    (100, 100),
)

GENERATORS = ("blob", "maze", "rooms")


def _make_generator(
    kind: str, width: int, height: int, seed: int
) -> BaseWangGenerator:
    if kind == "blob":
        return BlobGenerator(width, height, seed)
    return MazeGenerator(
        width, height, seed, randomness_percent=25, generate_rooms=kind == "rooms"
    )


class WangBenchmark:
    """Benchmark runner for the Wang grid generators."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        self.results: dict[str, dict[str, float]] = {}

    def _run_case(self, kind: str, width: int, height: int) -> float:
        """Run one benchmark case and return average generation time in ms."""
        elapsed_total = 0.0

        for i in range(self.iterations):
            seed = (width * 1_000_000) + (height * 1_000) + i
            generator = _make_generator(kind, width, height, seed)

            start = time.perf_counter()
            generator.generate()
            elapsed_total += time.perf_counter() - start

        return (elapsed_total / self.iterations) * 1000.0

    def run(self) -> None:
        """Run all configured grid-size benchmarks."""
        print("Wang Grid Benchmark")
        print("=" * 56)
        print(f"Iterations per size: {self.iterations}")
        print()
        header = "".join(f"{kind + ' (ms)':>14}" for kind in GENERATORS)
        print(f"{'Size':>12}{header}")
        print("-" * 56)

        for width, height in GRID_SIZES:
            size_key = f"{width}x{height}"
            timings = {
                f"{kind}_ms": self._run_case(kind, width, height)
                for kind in GENERATORS
            }
            self.results[size_key] = timings

            row = "".join(f"{value:14.2f}" for value in timings.values())
            print(f"{size_key:>12}{row}")

    def save_results(self, filename: str) -> None:
        """Save benchmark output to a JSON file."""
        with Path(filename).open("w") as f:
            json.dump(self.results, f, indent=2)
        print(f"\nSaved benchmark results to {filename}")

    def compare_with_baseline(self, baseline_file: str) -> None:
        """Compare current run with a saved baseline JSON file."""
        try:
            with Path(baseline_file).open() as f:
                baseline: dict[str, dict[str, float]] = json.load(f)
        except FileNotFoundError:
            print(f"\nBaseline file not found: {baseline_file}")
            return

        print(f"\nComparison vs baseline: {baseline_file}")
        print("=" * 72)

        for size_key, current in self.results.items():
            if size_key not in baseline:
                continue

            for metric, new_ms in current.items():
                old_ms = baseline[size_key].get(metric, 0.0)
                if old_ms <= 0:
                    continue

                delta_pct = ((new_ms - old_ms) / old_ms) * 100.0
                speed_ratio = old_ms / new_ms if new_ms > 0 else 0.0
                trend = "faster" if speed_ratio > 1.0 else "slower"

                print(
                    f"{size_key:>12} {metric:>9}: {new_ms:8.2f}ms "
                    f"vs {old_ms:8.2f}ms | {speed_ratio:5.2f}x {trend} "
                    f"({delta_pct:+6.1f}%)"
                )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark Wang grid generation")
    parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Number of runs per grid size (default: 5)",
    )
    parser.add_argument("--save", type=str, help="Save current results to JSON")
    parser.add_argument(
        "--compare",
        type=str,
        help="Compare current results against baseline JSON",
    )
    args = parser.parse_args(argv)

    benchmark = WangBenchmark(iterations=args.iterations)
    benchmark.run()

    if args.save:
        benchmark.save_results(args.save)

    if args.compare:
        benchmark.compare_with_baseline(args.compare)


if __name__ == "__main__":
    main()
