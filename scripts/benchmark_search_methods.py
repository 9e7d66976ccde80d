#!/usr/bin/env python
"""Benchmark linear vs binary signature search on synthetic sightings.

This script:
1. Generates random sightings and query signatures
2. Runs both search methods on identical data
3. Checks that both return the same match count
4. Reports timings (binary includes its sort)

Usage:
    python scripts/benchmark_search_methods.py --n-sightings 10000 --n-queries 1000
"""

import argparse

import numpy as np

from sightingsearch.sightings import SightingCollection
from sightingsearch.search import SearchMethod, run_search, warmup


def generate_data(n_sightings: int, n_queries: int, max_value: int, seed: int):
    """Random sightings and queries drawn over the same signature range."""
    rng = np.random.default_rng(seed)
    speed = rng.integers(0, max_value, size=n_sightings)
    brightness = rng.integers(0, max_value, size=n_sightings)
    max_signature = (max_value * max_value) // 10 + 1
    queries = rng.integers(0, max_signature, size=n_queries)
    return speed, brightness, queries


def main():
    parser = argparse.ArgumentParser(description='Benchmark linear vs binary signature search')
    parser.add_argument('--n-sightings', type=int, default=10_000, help='Number of sightings')
    parser.add_argument('--n-queries', type=int, default=1_000, help='Number of query signatures')
    parser.add_argument('--max-value', type=int, default=1_000, help='Upper bound for speed/brightness')
    parser.add_argument('--seed', type=int, default=42, help='Random seed')
    args = parser.parse_args()

    print("=" * 80)
    print("SightingSearch Method Benchmark")
    print("=" * 80)

    speed, brightness, queries = generate_data(
        args.n_sightings, args.n_queries, args.max_value, args.seed
    )
    print(f"Sightings: {args.n_sightings:,}  Queries: {args.n_queries:,}")

    warmup()

    results = {}
    for method in SearchMethod:
        # Fresh collection per method so binary pays for its own sort
        sightings = SightingCollection(speed, brightness)
        results[method] = run_search(sightings, queries, method)

    print("\n" + "-" * 80)
    for method, result in results.items():
        print(f"  {method.name.lower():8s}: {result.n_matches:8,} matches  {result.elapsed_us:14,.1f} µs")

    linear = results[SearchMethod.LINEAR]
    binary = results[SearchMethod.BINARY]
    if linear.n_matches != binary.n_matches:
        print("\n❌ Methods disagree!")
        return 1

    speedup = linear.elapsed_us / binary.elapsed_us if binary.elapsed_us > 0 else float('inf')
    print(f"\n✅ Match counts agree. Binary speedup: {speedup:.1f}x")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
