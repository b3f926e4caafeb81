"""
Tests for the Goldbach pair search.

The pair with the smallest p is returned; the scan order is part of
the contract.
"""

import pytest

from primelib import goldbach as goldbach_module
from primelib.errors import PrimeError, PrimeLibError
from primelib.goldbach import goldbach
from primelib.primality import is_prime


class TestGoldbach:

    def test_known_values(self):
        assert goldbach(28) == (5, 23)
        assert goldbach(4) == (2, 2)
        assert goldbach(6) == (3, 3)
        assert goldbach(10) == (3, 7)
        assert goldbach(100) == (3, 97)

    @pytest.mark.parametrize('n', [0, 1, 2, 3, 9, 27])
    def test_small_or_odd_is_invalid(self, n):
        with pytest.raises(PrimeLibError) as excinfo:
            goldbach(n)
        assert excinfo.value.code == PrimeError.INVALID_INPUT

    def test_negative(self):
        with pytest.raises(PrimeLibError) as excinfo:
            goldbach(-4)
        assert excinfo.value.code == PrimeError.NEGATIVE_INPUT

    def test_pair_is_minimal_over_range(self):
        for n in range(4, 1000, 2):
            p, q = goldbach(n)
            assert p + q == n
            assert p <= q
            assert is_prime(p) and is_prime(q), f"non-prime pair for {n}"
            for r in range(2, p):
                assert not (is_prime(r) and is_prime(n - r)), \
                    f"goldbach({n}) = ({p}, {q}) but {r} is smaller"

    def test_sieve_ceiling_error_propagates(self):
        with pytest.raises(PrimeLibError) as excinfo:
            goldbach(100, max_limit=50)
        assert excinfo.value.code == PrimeError.NUMBER_TOO_LARGE

    def test_no_solution(self, monkeypatch):
        monkeypatch.setattr(goldbach_module, 'is_prime', lambda n: False)
        with pytest.raises(PrimeLibError) as excinfo:
            goldbach(28)
        assert excinfo.value.code == PrimeError.NO_SOLUTION


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
