"""
Host-facing boundary.

Every operation here returns a ScalarResult or an ArrayResult and never
raises PrimeLibError or MemoryError: internal failures become error
codes. Any other exception is a bug and propagates.

Usage:
    >>> from primelib import api
    >>> api.gcd(48, 18)
    ScalarResult(value=6, error=<PrimeError.OK: 0>)
    >>> with api.sieve(10) as primes:
    ...     primes.tolist()
    [2, 3, 5, 7]
"""

from functools import wraps
from typing import Callable

import numpy as np

from . import factorization, gcd as _gcd, goldbach as _goldbach, primality, primes
from .config import PrimeLibConfig
from .errors import PrimeError, PrimeLibError
from .results import ArrayResult, ScalarResult, free_array


def scalar_call(func: Callable) -> Callable:
    """Wrap a scalar-returning operation into the (value, error) contract."""
    @wraps(func)
    def wrapper(*args, **kwargs) -> ScalarResult:
        try:
            return ScalarResult.success(func(*args, **kwargs))
        except PrimeLibError as exc:
            return ScalarResult.failure(exc.code)
        except MemoryError:
            return ScalarResult.failure(PrimeError.ALLOCATION_FAILURE)
    return wrapper


def array_call(func: Callable) -> Callable:
    """Wrap a sequence-returning operation into the (data, error) contract."""
    @wraps(func)
    def wrapper(*args, **kwargs) -> ArrayResult:
        try:
            data = np.asarray(func(*args, **kwargs), dtype=np.uint64)
        except PrimeLibError as exc:
            return ArrayResult(error=exc.code)
        except MemoryError:
            return ArrayResult(error=PrimeError.ALLOCATION_FAILURE)
        return ArrayResult(data)
    return wrapper


class PrimeLib:
    """
    Boundary operations bound to one sieve ceiling.

    Holds no mutable state; instances are safe to share between threads.
    """

    def __init__(self, max_sieve_limit: int = primes.DEFAULT_MAX_SIEVE_LIMIT):
        # Ceilings past what numpy can index are clamped, so oversized limits
        # come back as NUMBER_TOO_LARGE instead of failing inside numpy.
        self.max_sieve_limit = primes.check_sieve_ceiling(
            min(max_sieve_limit, primes.SIEVE_CEILING_MAX))

    @classmethod
    def from_config(cls, config: PrimeLibConfig) -> "PrimeLib":
        return cls(max_sieve_limit=config.max_sieve_limit)

    @scalar_call
    def is_prime(self, n: int) -> bool:
        return primality.is_prime(n)

    @scalar_call
    def ferma_test(self, n: int) -> bool:
        return primality.ferma_test(n)

    @scalar_call
    def gcd(self, a: int, b: int) -> int:
        return _gcd.gcd(a, b)

    @scalar_call
    def binary_gcd(self, a: int, b: int) -> int:
        return _gcd.binary_gcd(a, b)

    @scalar_call
    def lcm(self, a: int, b: int) -> int:
        return _gcd.lcm(a, b)

    @scalar_call
    def prime_count(self, n: int) -> int:
        return primes.prime_count(n, self.max_sieve_limit)

    @array_call
    def sieve(self, limit: int) -> np.ndarray:
        return primes.sieve(limit, self.max_sieve_limit)

    @array_call
    def prime_factors(self, n: int) -> np.ndarray:
        return factorization.prime_factors(n)

    @array_call
    def goldbach(self, n: int):
        return _goldbach.goldbach(n, self.max_sieve_limit)

    @staticmethod
    def free_array(result) -> None:
        free_array(result)


_default = PrimeLib()

is_prime = _default.is_prime
ferma_test = _default.ferma_test
gcd = _default.gcd
binary_gcd = _default.binary_gcd
lcm = _default.lcm
prime_count = _default.prime_count
sieve = _default.sieve
prime_factors = _default.prime_factors
goldbach = _default.goldbach

__all__ = [
    "PrimeLib", "ScalarResult", "ArrayResult", "PrimeError",
    "is_prime", "ferma_test", "gcd", "binary_gcd", "lcm", "prime_count",
    "sieve", "prime_factors", "goldbach", "free_array",
]
