#!/usr/bin/env python3
"""
Full verification script.

Running this file checks every library invariant over a range of inputs
and regenerates the summary tables and figures.

Usage:
    python verify_all.py
    python verify_all.py --config config/custom.yaml
"""

import argparse
import time

from primelib.api import PrimeLib
from primelib.config import load_config
from primelib.plotting import plot_prime_counting, plot_goldbach_min_prime
from primelib.verification import run_verification


def main():
    parser = argparse.ArgumentParser(description='Verify primelib invariants')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--no-figures', action='store_true',
                        help='Skip figure generation')
    args = parser.parse_args()

    config = load_config(args.config)
    lib = PrimeLib.from_config(config)

    print("=" * 60)
    print("primelib - Verification Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  limit = {config.verify_limit:,}")
    print(f"  goldbach_limit = {config.goldbach_limit:,}")
    print(f"  pair_samples = {config.pair_samples:,}")
    print(f"  seed = {config.seed}")
    print(f"  max_sieve_limit = {config.max_sieve_limit:,}")
    print()

    output_dir = config.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    print("-" * 60)
    print("1. Property checks")
    print("-" * 60)
    start = time.time()
    results = run_verification(
        lib,
        config.verify_limit,
        config.goldbach_limit,
        config.pair_samples,
        output_dir,
        config.seed
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    if not args.no_figures:
        print("-" * 60)
        print("2. Generating Figures")
        print("-" * 60)

        figures_dir = output_dir / 'figures'
        figures_dir.mkdir(exist_ok=True)

        print("  - Prime counting function...")
        with lib.sieve(config.verify_limit) as primes:
            if primes.ok:
                plot_prime_counting(primes.data, config.verify_limit,
                                    figures_dir / 'prime_counting.png')
            else:
                print(f"    skipped: {primes.error.name}")

        print("  - Minimal Goldbach prime...")
        plot_goldbach_min_prime(results['goldbach'],
                                figures_dir / 'goldbach_min_prime.png')
        print()

    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")

    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)
    print(results['summary'].to_string(index=False))

    failures = int(results['summary']['failures'].sum())
    if failures:
        print(f"\n{failures} invariant violations found")
        return 1
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
