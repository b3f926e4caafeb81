"""
Greatest common divisor and least common multiple.

gcd(0, 0) is rejected with INVALID_INPUT; with exactly one zero argument
the usual identity gcd(0, b) = b holds. lcm checks for 64-bit overflow
before multiplying instead of relying on wraparound.
"""

from .errors import PrimeError, PrimeLibError, U64_MAX
from .validation import require_natural


def _validate_pair(a: int, b: int):
    a = require_natural(a, "a")
    b = require_natural(b, "b")
    if a == 0 and b == 0:
        raise PrimeLibError(PrimeError.INVALID_INPUT, "gcd(0, 0) is undefined")
    return a, b


def gcd(a: int, b: int) -> int:
    """
    Euclidean remainder GCD.

    Parameters
    ----------
    a, b : int
        Natural numbers, not both zero.

    Returns
    -------
    int
        Greatest common divisor.
    """
    a, b = _validate_pair(a, b)
    while b != 0:
        a, b = b, a % b
    return a


def binary_gcd(a: int, b: int) -> int:
    """
    Stein's shift-and-subtract GCD.

    Same results and same error behavior as gcd().
    """
    a, b = _validate_pair(a, b)
    if a == 0:
        return b
    if b == 0:
        return a

    # Common factors of two
    shift = 0
    while ((a | b) & 1) == 0:
        a >>= 1
        b >>= 1
        shift += 1

    while (a & 1) == 0:
        a >>= 1

    while b != 0:
        while (b & 1) == 0:
            b >>= 1
        if a > b:
            a, b = b, a
        b -= a

    return a << shift


def lcm(a: int, b: int) -> int:
    """
    Least common multiple as (a / gcd(a, b)) * b.

    Parameters
    ----------
    a, b : int
        Natural numbers. If either is zero the result is 0.

    Returns
    -------
    int
        Least common multiple.

    Raises
    ------
    PrimeLibError
        NUMBER_TOO_LARGE if the result exceeds 2**64 - 1.
    """
    a = require_natural(a, "a")
    b = require_natural(b, "b")
    if a == 0 or b == 0:
        return 0

    q = a // gcd(a, b)
    if q > U64_MAX // b:
        raise PrimeLibError(PrimeError.NUMBER_TOO_LARGE,
                            f"lcm({a}, {b}) overflows 64 bits")
    return q * b
