"""
Property checks over ranges of inputs.

Runs the library's invariants at scale and tabulates failures:
sieve vs independent primality, factor products, gcd/lcm identities,
Goldbach minimality. Outputs pandas tables and CSVs.
"""

import math
from pathlib import Path
from typing import Dict, Optional

import numpy as np
import pandas as pd

from .api import PrimeLib
from .batch import batch_is_prime
from .primality import ferma_test, is_prime


def trial_division_flags(limit: int) -> np.ndarray:
    """Primality flags for [0, limit] independent of the sieve and its ceiling."""
    return batch_is_prime(np.arange(limit + 1, dtype=np.int64))


def check_sieve(lib: PrimeLib, limit: int) -> Dict[str, int]:
    """
    Compare sieve output with batch trial division over [0, limit].

    Checks strict ascent, no composites, and completeness.
    Limits above the lib's sieve ceiling are recorded as failures
    carrying the returned error code.
    """
    with lib.sieve(limit) as result:
        if not result.ok:
            return {'property': 'sieve_matches_trial_division',
                    'checked': limit + 1, 'failures': limit + 1,
                    'error': result.error.name}
        primes = result.data.astype(np.int64)

    flags = trial_division_flags(limit)
    expected = np.nonzero(flags)[0]

    failures = 0
    if len(primes) > 1 and not np.all(np.diff(primes) > 0):
        failures += 1
    if not np.array_equal(primes, expected):
        failures += int(np.setxor1d(primes, expected).size) or 1

    count = lib.prime_count(limit)
    if count.value != len(primes):
        failures += 1

    return {'property': 'sieve_matches_trial_division',
            'checked': limit + 1, 'failures': failures, 'error': 'OK'}


def check_factorization(lib: PrimeLib, limit: int) -> Dict[str, int]:
    """Every n in [1, limit] factors into primes whose product is n."""
    flags = trial_division_flags(limit)
    failures = 0
    for n in range(1, limit + 1):
        with lib.prime_factors(n) as result:
            factors = result.tolist()
        if math.prod(factors) != n:
            failures += 1
        elif any(not flags[f] for f in factors):
            failures += 1
        elif factors != sorted(factors):
            failures += 1
    return {'property': 'factor_product_equals_n',
            'checked': limit, 'failures': failures, 'error': 'OK'}


def check_gcd_lcm(lib: PrimeLib, samples: int, seed: Optional[int] = None) -> Dict[str, int]:
    """
    Random pairs: symmetry, divisibility, binary/Euclid agreement and
    lcm * gcd == a * b.
    """
    rng = np.random.default_rng(seed)
    pairs = rng.integers(1, 2**32, size=(samples, 2), dtype=np.int64)

    failures = 0
    for a, b in pairs.tolist():
        g = lib.gcd(a, b).value
        if g != lib.gcd(b, a).value or g != lib.binary_gcd(a, b).value:
            failures += 1
        elif a % g or b % g or g != math.gcd(a, b):
            failures += 1
        elif lib.lcm(a, b).value * g != a * b:
            failures += 1
    return {'property': 'gcd_lcm_identities',
            'checked': samples, 'failures': failures, 'error': 'OK'}


def goldbach_table(lib: PrimeLib, limit: int) -> pd.DataFrame:
    """Minimal Goldbach pair for every even n in [4, limit]."""
    rows = []
    for n in range(4, limit + 1, 2):
        with lib.goldbach(n) as result:
            p, q = result.tolist() if result.ok else (None, None)
        rows.append({'n': n, 'p': p, 'q': q, 'error': result.error.name})
    return pd.DataFrame(rows)


def check_goldbach(df: pd.DataFrame, limit: int) -> Dict[str, int]:
    """Each pair sums to n, both entries prime, p minimal."""
    flags = trial_division_flags(limit)
    failures = 0
    for n, p, q in df[['n', 'p', 'q']].itertuples(index=False):
        if p is None or np.isnan(p):
            failures += 1
            continue
        p, q = int(p), int(q)
        if p + q != n or p > q or not (flags[p] and flags[q]):
            failures += 1
            continue
        smaller = [r for r in range(2, p) if flags[r] and flags[n - r]]
        if smaller:
            failures += 1
    return {'property': 'goldbach_pair_minimal',
            'checked': len(df), 'failures': failures, 'error': 'OK'}


def fermat_pseudoprimes(limit: int) -> pd.DataFrame:
    """
    Composites in [2, limit] that ferma_test reports as probably prime.

    These are expected (Carmichael numbers and other base-{2,3,5,7}
    pseudoprimes); they are reported, not counted as failures.
    """
    rows = [{'n': n} for n in range(2, limit + 1)
            if ferma_test(n) and not is_prime(n)]
    return pd.DataFrame(rows, columns=['n'])


def run_verification(lib: PrimeLib, limit: int, goldbach_limit: int,
                     pair_samples: int, output_dir: Path,
                     seed: int = 123) -> Dict[str, pd.DataFrame]:
    """
    Run every property check and save CSVs.

    Returns
    -------
    dict
        'summary', 'goldbach' and 'pseudoprimes' DataFrames.
    """
    print(f"Running verification with limit={limit:,}")

    rows = [check_sieve(lib, limit)]
    print(f"  sieve: {rows[-1]['failures']} failures")

    rows.append(check_factorization(lib, limit))
    print(f"  factorization: {rows[-1]['failures']} failures")

    rows.append(check_gcd_lcm(lib, pair_samples, seed=seed))
    print(f"  gcd/lcm: {rows[-1]['failures']} failures")

    df_goldbach = goldbach_table(lib, goldbach_limit)
    rows.append(check_goldbach(df_goldbach, goldbach_limit))
    print(f"  goldbach: {rows[-1]['failures']} failures")

    df_pseudo = fermat_pseudoprimes(limit)
    print(f"  fermat pseudoprimes below {limit:,}: {len(df_pseudo)}")

    df_summary = pd.DataFrame(rows)

    output_dir.mkdir(parents=True, exist_ok=True)
    df_summary.to_csv(output_dir / 'verification_summary.csv', index=False)
    df_goldbach.to_csv(output_dir / 'goldbach_pairs.csv', index=False)
    df_pseudo.to_csv(output_dir / 'fermat_pseudoprimes.csv', index=False)

    print(f"  Results saved to {output_dir}")

    return {'summary': df_summary, 'goldbach': df_goldbach,
            'pseudoprimes': df_pseudo}
