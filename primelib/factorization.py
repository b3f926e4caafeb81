"""
Factorization utilities.

Responsibility: prime factors of a single number, cleanly separated.
This file must not know about sieves or Goldbach pairs.
"""

import numpy as np

from .errors import PrimeError, PrimeLibError
from .validation import require_natural


def prime_factors(n: int) -> np.ndarray:
    """
    Prime factorization by trial division, with multiplicity.

    Strips 2s and 3s, then divides by 5, 7, 11, 13, ... (steps alternate
    +2/+4 so multiples of 2 and 3 are never tried) while i*i <= n. A
    leftover n > 1 is the single prime factor beyond the trial bound.

    Parameters
    ----------
    n : int
        Number to factor, 1 <= n <= 2**64 - 1.

    Returns
    -------
    np.ndarray
        uint64 array of prime factors in non-decreasing order whose
        product is n. Empty for n = 1.

    Raises
    ------
    PrimeLibError
        INVALID_INPUT for n = 0.
    """
    n = require_natural(n)
    if n == 0:
        raise PrimeLibError(PrimeError.INVALID_INPUT, "factorization of 0 is undefined")

    factors = []
    for p in (2, 3):
        while n % p == 0:
            factors.append(p)
            n //= p

    i = 5
    w = 2
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += w
        w = 6 - w

    if n > 1:
        factors.append(n)

    return np.array(factors, dtype=np.uint64)
