"""
Primality tests.

Responsibility: decide primality of a single number. No sieve logic,
no factorization.

Two tests live here:
- is_prime: deterministic trial division over 6k±1 candidates.
- ferma_test: Fermat heuristic with the fixed witnesses 2, 3, 5, 7.

Known limitation of ferma_test: Carmichael numbers (561, 1105, 1729,
2465, ...) satisfy the congruence for every coprime witness and are
reported as probably prime. This is the documented behavior of a Fermat
test and is deliberately reproduced.
"""

from math import gcd, isqrt

from .validation import require_natural


FERMAT_WITNESSES = (2, 3, 5, 7)


def is_prime(n: int) -> bool:
    """
    Deterministic primality by trial division.

    Candidates are 5, 7, 11, 13, ... (numbers ≡ 1 or 5 mod 6), tested
    up to isqrt(n) inclusive.

    Parameters
    ----------
    n : int
        Number to test, 0 <= n <= 2**64 - 1.

    Returns
    -------
    bool
        True iff n is prime.
    """
    n = require_natural(n)
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    limit = isqrt(n)
    i = 5
    while i <= limit:
        # i = 6k-1 and i + 2 = 6k+1
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Square-and-multiply modular exponentiation."""
    result = 1
    base = base % mod
    while exp > 0:
        if exp & 1:
            result = (result * base) % mod
        exp >>= 1
        base = (base * base) % mod
    return result


def ferma_test(n: int) -> bool:
    """
    Fermat probable-prime test.

    For each witness a in (2, 3, 5, 7) with a < n and gcd(a, n) == 1,
    checks a^(n-1) ≡ 1 (mod n). Witnesses >= n are skipped, not failed,
    and so are witnesses sharing a factor with n, since Fermat's little
    theorem only speaks about coprime bases. If no witness applies to an
    n > 7, n is a multiple of 210 and is reported composite.

    Parameters
    ----------
    n : int
        Number to test, 0 <= n <= 2**64 - 1.

    Returns
    -------
    bool
        False if a witness proves n composite (or n <= 1),
        True if n is probably prime.
    """
    n = require_natural(n)
    if n <= 1:
        return False

    tested = 0
    for a in FERMAT_WITNESSES:
        if a >= n or gcd(a, n) != 1:
            continue
        if mod_pow(a, n - 1, n) != 1:
            return False
        tested += 1

    if tested == 0 and n > FERMAT_WITNESSES[-1]:
        return False
    return True
