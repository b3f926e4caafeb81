"""
Vectorized primality over arrays.

Compiles the 6k±1 trial division of primality.is_prime with numba so
large arrays can be classified without a Python-level loop. Used to
cross-check sieve output at scale.

Values are held as int64; the bound 2**62 keeps i*i in the trial loop
from overflowing.
"""

import numpy as np
from numba import njit

from .errors import PrimeError, PrimeLibError


BATCH_LIMIT = 2**62


@njit
def _is_prime_int64(n):
    """Trial division for one int64."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


@njit
def _batch_is_prime_kernel(numbers):
    out = np.zeros(numbers.shape[0], dtype=np.bool_)
    for k in range(numbers.shape[0]):
        out[k] = _is_prime_int64(numbers[k])
    return out


def batch_is_prime(numbers) -> np.ndarray:
    """
    Classify every element of an integer array as prime or not.

    Parameters
    ----------
    numbers : array_like
        Integers in [0, 2**62).

    Returns
    -------
    np.ndarray
        Boolean array, same length as numbers.

    Raises
    ------
    PrimeLibError
        INVALID_INPUT for non-integer arrays, NEGATIVE_INPUT for negative
        entries, NUMBER_TOO_LARGE for entries >= 2**62.
    """
    arr = np.asarray(numbers).ravel()
    if arr.size == 0:
        return np.zeros(0, dtype=bool)
    if not np.issubdtype(arr.dtype, np.integer):
        raise PrimeLibError(PrimeError.INVALID_INPUT,
                            f"expected integer array, got dtype {arr.dtype}")
    if int(arr.min()) < 0:
        raise PrimeLibError(PrimeError.NEGATIVE_INPUT, "negative entry in batch")
    if int(arr.max()) >= BATCH_LIMIT:
        raise PrimeLibError(PrimeError.NUMBER_TOO_LARGE,
                            "batch entries must be < 2**62")

    return _batch_is_prime_kernel(arr.astype(np.int64))
