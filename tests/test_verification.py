"""
Smoke tests for the verification report: every property check passes
on a small range and the CSVs and figures are written.
"""

import matplotlib
matplotlib.use('Agg')

import pytest

from primelib.api import PrimeLib
from primelib.plotting import plot_goldbach_min_prime, plot_prime_counting
from primelib.primes import sieve
from primelib.verification import run_verification


@pytest.fixture(scope='module')
def report(tmp_path_factory):
    output_dir = tmp_path_factory.mktemp('results')
    results = run_verification(PrimeLib(), limit=2000, goldbach_limit=300,
                               pair_samples=200, output_dir=output_dir, seed=1)
    return results, output_dir


class TestVerification:

    def test_no_failures(self, report):
        results, _ = report
        summary = results['summary']
        assert len(summary) == 4
        assert summary['failures'].sum() == 0, summary.to_string()
        assert set(summary['error']) == {'OK'}

    def test_csvs_written(self, report):
        _, output_dir = report
        for name in ['verification_summary.csv', 'goldbach_pairs.csv',
                     'fermat_pseudoprimes.csv']:
            assert (output_dir / name).exists(), f"{name} missing"

    def test_goldbach_table(self, report):
        results, _ = report
        df = results['goldbach']
        assert len(df) == len(range(4, 301, 2))
        row = df[df['n'] == 28].iloc[0]
        assert (row['p'], row['q']) == (5, 23)

    def test_limits_above_lib_ceiling_recorded_as_failures(self, tmp_path):
        results = run_verification(PrimeLib(max_sieve_limit=10), limit=100,
                                   goldbach_limit=50, pair_samples=10,
                                   output_dir=tmp_path, seed=1)
        summary = results['summary'].set_index('property')

        sieve_row = summary.loc['sieve_matches_trial_division']
        assert sieve_row['failures'] == 101
        assert sieve_row['error'] == 'NUMBER_TOO_LARGE'

        # Trial-division checks are not bound by the sieve ceiling.
        assert summary.loc['factor_product_equals_n', 'failures'] == 0

        goldbach = results['goldbach']
        too_large = goldbach[goldbach['n'] > 10]
        assert set(too_large['error']) == {'NUMBER_TOO_LARGE'}
        assert summary.loc['goldbach_pair_minimal', 'failures'] == len(too_large)

    def test_carmichael_numbers_listed_as_pseudoprimes(self, report):
        results, _ = report
        found = set(results['pseudoprimes']['n'])
        assert {561, 1105, 1729} <= found


class TestPlotting:

    def test_figures_saved(self, report, tmp_path):
        results, _ = report
        plot_prime_counting(sieve(1000), 1000, tmp_path / 'pi.png')
        plot_goldbach_min_prime(results['goldbach'], tmp_path / 'gb.png')
        assert (tmp_path / 'pi.png').exists()
        assert (tmp_path / 'gb.png').exists()
