"""
Prime generation utilities.

Responsibility: prime generation only. No factorization, no primality
of single numbers.

prime_flags_upto is the one shared sieve routine; sieve, prime_count and
the Goldbach search all build on it.
"""

from math import isqrt

import numpy as np

from .errors import PrimeError, PrimeLibError
from .validation import require_natural


# Largest limit the sieve will allocate for (a 4 GiB flag array).
DEFAULT_MAX_SIEVE_LIMIT = 2**32

# Largest ceiling numpy can index a flag array for.
SIEVE_CEILING_MAX = int(np.iinfo(np.intp).max) - 1


def check_sieve_ceiling(max_limit: int) -> int:
    """Return max_limit, or raise ValueError if no flag array could ever be that long."""
    if isinstance(max_limit, bool) or not isinstance(max_limit, int) or max_limit <= 0:
        raise ValueError(f"max_sieve_limit must be a positive integer, got {max_limit!r}")
    if max_limit > SIEVE_CEILING_MAX:
        raise ValueError(f"max_sieve_limit={max_limit} exceeds {SIEVE_CEILING_MAX}")
    return max_limit


def prime_flags_upto(N: int, max_limit: int = DEFAULT_MAX_SIEVE_LIMIT) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).
    max_limit : int
        Ceiling on N. Larger N is rejected before allocating.

    Returns
    -------
    np.ndarray
        Boolean array of length N+1. For N < 2 no entry is True.

    Raises
    ------
    PrimeLibError
        NUMBER_TOO_LARGE above the ceiling, ALLOCATION_FAILURE if the
        flag array cannot be allocated.
    """
    N = require_natural(N, "limit")
    if N > max_limit:
        raise PrimeLibError(PrimeError.NUMBER_TOO_LARGE,
                            f"limit={N} exceeds sieve ceiling {max_limit}")

    try:
        flags = np.ones(N + 1, dtype=bool)
    except (MemoryError, ValueError, OverflowError) as exc:
        # numpy raises ValueError for dimensions past intp
        raise PrimeLibError(PrimeError.ALLOCATION_FAILURE,
                            f"cannot allocate sieve for limit={N}") from exc

    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def sieve(limit: int, max_limit: int = DEFAULT_MAX_SIEVE_LIMIT) -> np.ndarray:
    """
    Return array of all primes <= limit, ascending.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive). limit < 2 gives an empty array.
    max_limit : int
        Sieve ceiling, see prime_flags_upto.

    Returns
    -------
    np.ndarray
        uint64 array of primes.
    """
    limit = require_natural(limit, "limit")
    if limit < 2:
        return np.empty(0, dtype=np.uint64)

    flags = prime_flags_upto(limit, max_limit)
    try:
        return np.nonzero(flags)[0].astype(np.uint64)
    except MemoryError as exc:
        raise PrimeLibError(PrimeError.ALLOCATION_FAILURE,
                            f"cannot allocate primes up to {limit}") from exc


def prime_count(n: int, max_limit: int = DEFAULT_MAX_SIEVE_LIMIT) -> int:
    """
    Count primes <= n (the prime-counting function pi(n)).

    Equal to len(sieve(n)) but counts the flags directly.
    """
    n = require_natural(n)
    if n < 2:
        return 0
    return int(np.count_nonzero(prime_flags_upto(n, max_limit)))
