#!/usr/bin/env python3
# Timed Ackermann benchmark - repeats the A(3, 10) driver
# Uses internal timing (excludes startup/import time)

import numpy as np
import time

import ackermann

def time_runs(runs):
    """Run the driver `runs` times, returning (results, elapsed ms per run)"""
    results = []
    elapsed = []
    for _ in range(runs):
        start_time = time.perf_counter()
        results.append(ackermann.main())
        end_time = time.perf_counter()
        elapsed.append((end_time - start_time) * 1000)
    return results, np.array(elapsed, dtype=np.float64)

def main():
    # Configuration
    runs = 10

    results, elapsed_ms = time_runs(runs)

    # Every run must agree, the function is pure
    if len(set(results)) != 1:
        raise RuntimeError(f"non-deterministic results: {sorted(set(results))}")
    result = results[0]

    # Output format for shell script parsing
    print(f"TIME_MS: {np.median(elapsed_ms):.0f}")
    print(f"MIN_MS: {np.min(elapsed_ms):.0f}")
    print(result)
    return result

if __name__ == "__main__":
    main()
