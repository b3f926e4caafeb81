"""
Tests for gcd / binary_gcd / lcm.

gcd(0, 0) is INVALID_INPUT; lcm with a zero argument is 0; lcm overflow
past 64 bits is NUMBER_TOO_LARGE rather than a wrapped value.
"""

import math

import pytest

from primelib.errors import PrimeError, PrimeLibError, U64_MAX
from primelib.gcd import gcd, binary_gcd, lcm


class TestGcd:

    @pytest.mark.parametrize('func', [gcd, binary_gcd])
    def test_known_values(self, func):
        assert func(48, 18) == 6
        assert func(17, 5) == 1
        assert func(1, 1) == 1
        assert func(2**40, 2**20 * 3) == 2**20

    @pytest.mark.parametrize('func', [gcd, binary_gcd])
    def test_zero_identity(self, func):
        assert func(0, 7) == 7
        assert func(7, 0) == 7

    @pytest.mark.parametrize('func', [gcd, binary_gcd])
    def test_both_zero_is_invalid(self, func):
        with pytest.raises(PrimeLibError) as excinfo:
            func(0, 0)
        assert excinfo.value.code == PrimeError.INVALID_INPUT

    def test_binary_agrees_with_euclid(self):
        for a in range(0, 80):
            for b in range(0, 80):
                if a == 0 and b == 0:
                    continue
                assert gcd(a, b) == binary_gcd(a, b) == math.gcd(a, b), \
                    f"gcd mismatch at ({a}, {b})"

    def test_symmetric_and_divides_both(self):
        for a, b in [(12, 8), (1071, 462), (2**63, 6), (U64_MAX, 3)]:
            g = gcd(a, b)
            assert g == gcd(b, a)
            assert a % g == 0 and b % g == 0

    def test_full_width_inputs(self):
        assert gcd(U64_MAX, U64_MAX) == U64_MAX
        assert binary_gcd(U64_MAX, U64_MAX - 1) == 1

    def test_negative_rejected_first(self):
        with pytest.raises(PrimeLibError) as excinfo:
            gcd(-4, 0)
        assert excinfo.value.code == PrimeError.NEGATIVE_INPUT

    def test_too_large_rejected(self):
        with pytest.raises(PrimeLibError) as excinfo:
            binary_gcd(6, U64_MAX + 1)
        assert excinfo.value.code == PrimeError.NUMBER_TOO_LARGE


class TestLcm:

    def test_known_values(self):
        assert lcm(4, 6) == 12
        assert lcm(21, 6) == 42
        assert lcm(7, 7) == 7
        assert lcm(1, U64_MAX) == U64_MAX

    def test_zero_gives_zero(self):
        assert lcm(0, 5) == 0
        assert lcm(5, 0) == 0
        assert lcm(0, 0) == 0

    def test_lcm_times_gcd_is_product(self):
        for a in range(1, 60):
            for b in range(1, 60):
                assert lcm(a, b) * gcd(a, b) == a * b

    def test_overflow_detected(self):
        with pytest.raises(PrimeLibError) as excinfo:
            lcm(2**63, 3)
        assert excinfo.value.code == PrimeError.NUMBER_TOO_LARGE

    def test_largest_fitting_result(self):
        """2**32 and 2**32 - 1 are coprime; product still fits 64 bits."""
        assert lcm(2**32, 2**32 - 1) == 2**32 * (2**32 - 1)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
