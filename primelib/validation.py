"""
Argument-domain checks.

Responsibility: decide whether an input may reach an algorithm.
Constraints are checked in a fixed order (type, negativity, range,
zero) and the first violation wins.
"""

import numbers

from .errors import PrimeError, PrimeLibError, U64_MAX


def check_natural(n, nonzero: bool = False, ceiling: int = U64_MAX) -> PrimeError:
    """
    Classify n against the natural-number domain.

    Parameters
    ----------
    n : int
        Candidate argument. Python ints and numpy integer scalars are accepted.
    nonzero : bool
        Reject zero with INVALID_INPUT.
    ceiling : int
        Largest accepted value (inclusive). Never above U64_MAX.

    Returns
    -------
    PrimeError
        OK, or the first violated constraint.
    """
    # bool is an int subclass but never a meaningful argument
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        return PrimeError.INVALID_INPUT
    n = int(n)
    if n < 0:
        return PrimeError.NEGATIVE_INPUT
    if n > min(ceiling, U64_MAX):
        return PrimeError.NUMBER_TOO_LARGE
    if nonzero and n == 0:
        return PrimeError.INVALID_INPUT
    return PrimeError.OK


def require_natural(n, name: str = "n", nonzero: bool = False,
                    ceiling: int = U64_MAX) -> int:
    """Return n as a plain int, or raise PrimeLibError with the check_natural code."""
    code = check_natural(n, nonzero=nonzero, ceiling=ceiling)
    if code != PrimeError.OK:
        raise PrimeLibError(code, f"{name}={n!r} rejected: {code.name}")
    return int(n)
