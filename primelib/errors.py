"""
Error taxonomy shared by every operation.

Responsibility: the closed set of outcome codes and the internal
exception that carries one. Codes are stable integers because they are
handed across the host boundary unchanged.
"""

from enum import IntEnum


# Inputs are bounded to one unsigned 64-bit word.
U64_MAX = 2**64 - 1


class PrimeError(IntEnum):
    """
    Outcome code returned alongside every result.

    Code values:
        0  OK                  result is valid
        1  NEGATIVE_INPUT      argument below zero
        2  INVALID_INPUT       wrong type, zero where undefined, odd/small Goldbach input
        3  NUMBER_TOO_LARGE    argument above the ceiling, or result would overflow
        4  NO_SOLUTION         Goldbach scan found no pair
        5  ALLOCATION_FAILURE  result array could not be allocated
    """

    OK = 0
    NEGATIVE_INPUT = 1
    INVALID_INPUT = 2
    NUMBER_TOO_LARGE = 3
    NO_SOLUTION = 4
    ALLOCATION_FAILURE = 5


class PrimeLibError(Exception):
    """
    Internal failure carrying a PrimeError code.

    Raised by validation and by the algorithms, propagated unchanged
    through composition, and turned back into a code at the boundary.
    """

    def __init__(self, code: PrimeError, message: str = ""):
        self.code = PrimeError(code)
        self.message = message or self.code.name
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"PrimeLibError({self.code.name}, {self.message!r})"
