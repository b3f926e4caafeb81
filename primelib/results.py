"""
Result containers handed across the host boundary.

Ownership contract for ArrayResult:
- data is a freshly allocated uint64 array owned by the caller; the
  library keeps no reference to it.
- release() (or free_array) drops the storage exactly once; the result
  then has no data and length 0.
- An error-bearing result never carries data, so it needs no release.
- Using data after release is the caller's bug and is not detected.
"""

from typing import NamedTuple, Optional, Union

import numpy as np

from .errors import PrimeError


class ScalarResult(NamedTuple):
    """(value, error) pair. value is None whenever error is not OK."""

    value: Optional[Union[bool, int]]
    error: PrimeError

    @property
    def ok(self) -> bool:
        return self.error == PrimeError.OK

    @classmethod
    def success(cls, value) -> "ScalarResult":
        return cls(value, PrimeError.OK)

    @classmethod
    def failure(cls, error: PrimeError) -> "ScalarResult":
        return cls(None, PrimeError(error))


class ArrayResult:
    """
    Owned integer sequence paired with an error code.

    Can be used as a context manager; the array is released on exit.
    """

    def __init__(self, data: Optional[np.ndarray] = None,
                 error: PrimeError = PrimeError.OK):
        self.error = PrimeError(error)
        if self.error != PrimeError.OK:
            data = None
        elif data is None:
            data = np.empty(0, dtype=np.uint64)
        self.data = data
        self.released = False

    @property
    def ok(self) -> bool:
        return self.error == PrimeError.OK

    @property
    def length(self) -> int:
        return 0 if self.data is None else int(self.data.shape[0])

    def __len__(self) -> int:
        return self.length

    def tolist(self) -> list:
        """Plain Python ints; empty for error or released results."""
        return [] if self.data is None else [int(x) for x in self.data]

    def release(self) -> None:
        self.data = None
        self.released = True

    def __enter__(self) -> "ArrayResult":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        if self.data is None:
            return f"ArrayResult(error={self.error.name}, released={self.released})"
        return f"ArrayResult({self.tolist()!r}, error={self.error.name})"


def free_array(result: Optional[ArrayResult]) -> None:
    """Release a sequence result. None is a no-op."""
    if result is not None:
        result.release()
