"""Benchmark Riemann-family quadrature latency.

Every rule is O(n) and n is capped at MAX_N, so a single call should stay
well under a frame budget even at the cap. This script measures that across
rules and subdivision counts.
"""

import time

import torch

from torchriemann.presets import lookup_preset
from torchriemann.quadrature import MAX_N, QUADRATURE_RULES, compute_quadrature


def benchmark_compute_quadrature(
    rule: str, n: int, n_iterations: int = 200
) -> float:
    """Benchmark a single rule at a given subdivision count.

    Parameters
    ----------
    rule : str
        Quadrature rule name.
    n : int
        Number of subintervals.
    n_iterations : int
        Number of iterations for timing.

    Returns
    -------
    float
        Average time per call in milliseconds.
    """
    preset = lookup_preset("sine")
    a, b = preset.default_bounds

    # Warmup
    for _ in range(5):
        _ = compute_quadrature(preset.fn, a, b, n, rule)

    # Benchmark
    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = compute_quadrature(preset.fn, a, b, n, rule)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run quadrature benchmarks across rules and subdivision counts."""
    counts = [1, 10, 50, 100, MAX_N]

    print("Riemann-Family Quadrature Benchmark")
    print("=" * 70)
    header = f"{'n':>6}" + "".join(f"{rule:>13}" for rule in QUADRATURE_RULES)
    print(header + "   (ms)")
    print("-" * 70)

    with torch.no_grad():
        for n in counts:
            row = f"{n:>6}"
            for rule in QUADRATURE_RULES:
                row += f"{benchmark_compute_quadrature(rule, n):>13.4f}"
            print(row)

    print("=" * 70)


if __name__ == "__main__":
    main()
