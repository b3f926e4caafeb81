"""
Goldbach pair search.

Responsibility: find the decomposition n = p + q (p, q prime) with the
smallest p. The ascending scan order is part of the contract: callers
get the same pair for the same n every time.
"""

from typing import Tuple

from .errors import PrimeError, PrimeLibError
from .primality import is_prime
from .primes import DEFAULT_MAX_SIEVE_LIMIT, sieve
from .validation import require_natural


def goldbach(n: int, max_limit: int = DEFAULT_MAX_SIEVE_LIMIT) -> Tuple[int, int]:
    """
    Return the Goldbach pair (p, n - p) with minimal prime p.

    Parameters
    ----------
    n : int
        Even number > 2.
    max_limit : int
        Sieve ceiling; n above it fails with NUMBER_TOO_LARGE.

    Returns
    -------
    tuple
        (p, q) with p <= q, p + q == n, both prime.

    Raises
    ------
    PrimeLibError
        INVALID_INPUT for n <= 2 or odd n, NO_SOLUTION if no pair exists,
        and any sieve error unchanged.
    """
    n = require_natural(n)
    if n <= 2 or n % 2 != 0:
        raise PrimeLibError(PrimeError.INVALID_INPUT,
                            f"n={n} must be even and greater than 2")

    for p in sieve(n, max_limit):
        p = int(p)
        if is_prime(n - p):
            return p, n - p

    raise PrimeLibError(PrimeError.NO_SOLUTION, f"no Goldbach pair for n={n}")
