"""
Tests for Binomial Distribution Family

This module tests the Binomial family: the Loader mass, the incomplete beta
cumulative distribution function and every regime of the quantile search.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import logging
import math

import numpy as np
import pytest
from scipy.special import gammaln
from scipy.stats import binom

from pysatl_probability.config import numerical_settings
from pysatl_probability.distributions.sampling import Independent
from pysatl_probability.exceptions import ConvergenceError
from pysatl_probability.families.builtins.discrete import Binomial
from pysatl_probability.families.builtins.discrete.binomial import stirlerr
from pysatl_probability.families.configuration import configure_families_register
from pysatl_probability.random import Xorshift128Plus
from pysatl_probability.types import FamilyName

from ..base import BaseDistributionTest

LOGGER = "pysatl_probability.families.builtins.discrete.binomial"

MASS_16_QUARTER = [
    1.002259575761855e-02,
    1.336346101015806e-01,
    2.251990651711821e-01,
    1.100973207503558e-01,
    1.966023584827779e-02,
    1.359226182103156e-03,
    3.432389348745344e-05,
    2.514570951461788e-07,
    2.328306436538698e-10,
]

CDF_16_THREE_QUARTERS = [
    0.0,
    2.328306436538699e-10,
    2.628657966852194e-07,
    3.810715861618527e-05,
    1.644465373829007e-03,
    2.712995628826319e-02,
    1.896545726340262e-01,
    5.950128899421541e-01,
    9.365235602017492e-01,
    1.0,
]


class TestStirlingError:
    @pytest.mark.parametrize("n", [1.0, 2.0, 7.0, 15.0, 16.0, 20.0, 35.0, 36.0, 80.0, 81.0, 150.0])
    def test_matches_log_gamma(self, n):
        expected = gammaln(n + 1.0) - (n + 0.5) * math.log(n) + n - 0.5 * math.log(2.0 * math.pi)
        assert stirlerr(n) == pytest.approx(expected, rel=1e-8)


class TestBinomialFamily(BaseDistributionTest):
    """Test suite for Binomial distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.binomial_family = registry.get(FamilyName.BINOMIAL)
        self.dist = self.binomial_family(n=16, p=0.25)

    def test_family_properties(self):
        assert self.binomial_family is Binomial
        assert self.dist.parameters == {"n": 16, "p": 0.25}
        assert (self.dist.support.min_k, self.dist.support.max_k) == (0, 16)

    @pytest.mark.parametrize("n", [-1, 2.5, True])
    def test_trials_constraint(self, n):
        with pytest.raises(ValueError, match="n is a non-negative integer"):
            Binomial(n=n, p=0.5)

    @pytest.mark.parametrize("p", [0.0, 1.0, 1.5])
    def test_probability_constraint(self, p):
        with pytest.raises(ValueError, match="0 < p < 1"):
            Binomial(n=10, p=p)

    def test_failure_must_complement_success(self):
        with pytest.raises(ValueError, match=r"p \+ q = 1"):
            Binomial(n=10, p=0.3, q=0.5)

    @pytest.mark.parametrize("q", [0.3, 0.1, 1e-24])
    def test_with_failure_is_consistent(self, q):
        d = Binomial.with_failure(10, q)
        assert d.q == q
        assert math.fsum(d.mass(k) for k in range(11)) == pytest.approx(1.0, abs=1e-12)

    def test_mass_table(self):
        for i, expected in enumerate(MASS_16_QUARTER):
            assert self.dist.mass(2 * i) == pytest.approx(expected, rel=1e-13)

    def test_mass_outside_support(self):
        assert self.dist.mass(-1) == 0.0
        assert self.dist.mass(17) == 0.0

    def test_mass_matches_reference(self):
        d = Binomial(n=1000, p=0.3)
        points = np.arange(0, 1001)
        expected = binom.pmf(points, 1000, 0.3)
        actual = np.array([d.mass(int(k)) for k in points])
        np.testing.assert_allclose(actual, expected, rtol=1e-10, atol=1e-300)

    def test_cdf_table(self):
        d = Binomial(n=16, p=0.75)
        points = [-2] + [2 * i for i in range(9)]
        for x, expected in zip(points, CDF_16_THREE_QUARTERS, strict=True):
            assert d.cdf(x) == pytest.approx(expected, rel=1e-12)
            assert d.cdf(x + 0.5) == pytest.approx(expected, rel=1e-12)

    def test_cdf_matches_reference(self):
        d = Binomial(n=200, p=0.05)
        points = np.arange(-1, 202) + 0.25
        self.assert_matches_reference(d.cdf, points, lambda x: binom.cdf(x, 200, 0.05))

    def test_inverse_examples(self):
        d = Binomial(n=250, p=0.55)
        assert d.inverse(0.025) == 122
        assert d.inverse(0.1) == 127

    @pytest.mark.parametrize(
        "n, p, u, expected",
        [(1001, 0.25, 0.5, 250), (1500, 0.15, 0.2, 213)],
    )
    def test_inverse_known_values(self, n, p, u, expected):
        assert Binomial(n=n, p=p).inverse(u) == expected

    @pytest.mark.parametrize(
        "n, p, u",
        [(10**6, 2.5e-5, 0.9995), (10**9, 6.66e-9, 0.8), (30, 0.4, 0.3), (999, 0.55, 1e-4)],
    )
    def test_inverse_matches_reference(self, n, p, u):
        d = Binomial(n=n, p=p)
        assert d.inverse(u) == int(binom.ppf(u, n, p))
        self.assert_discrete_quantile(d, u)

    @pytest.mark.parametrize("n, x", [(2500, 1298), (10**6, 500_321), (10**9, 499_987_654)])
    def test_inverse_of_cdf_is_identity(self, n, x):
        d = Binomial(n=n, p=0.5)
        assert d.inverse(d.cdf(x)) == x

    def test_inverse_regression_near_upper_tail(self):
        d = Binomial(n=3666, p=0.9810204628647335)
        self.assert_discrete_quantile(d, 0.0033333333333332993)

    @pytest.mark.parametrize(
        "n, p",
        [(16, 0.25), (250, 0.55), (999, 0.999), (5000, 0.5), (10**5, 0.001), (10**7, 0.3)],
    )
    def test_inverse_is_smallest_quantile(self, n, p):
        d = Binomial(n=n, p=p)
        for u in self.PROBABILITIES:
            self.assert_discrete_quantile(d, u)

    def test_inverse_boundaries(self):
        assert self.dist.inverse(0.0) == 0
        assert self.dist.inverse(1.0) == 16
        with pytest.raises(ValueError, match="Probability must be in"):
            self.dist.inverse(-0.1)

    def test_zero_trials(self):
        d = Binomial(n=0, p=0.3)
        assert d.mass(0) == 1.0
        assert d.cdf(0) == 1.0
        assert d.inverse(0.5) == 0
        assert (d.mean(), d.variance()) == (0.0, 0.0)
        assert math.isnan(d.skewness())
        assert math.isnan(d.kurtosis())
        assert d.entropy() == 0.0

    @pytest.mark.parametrize(
        "n, p, u, message",
        [
            (100, 0.3, 0.5, "summation regime"),
            (999, 0.55, 1e-4, "first summation term underflows"),
            (5000, 0.5, 0.5, "normal-approximation regime"),
            (10**6, 2.5e-5, 0.5, "Newton regime"),
        ],
    )
    def test_regime_is_logged(self, caplog, n, p, u, message):
        caplog.set_level(logging.DEBUG, logger=LOGGER)
        Binomial(n=n, p=p).inverse(u)
        assert message in caplog.text
        assert "settled at" in caplog.text

    def test_summation_limit_follows_settings(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER)
        with numerical_settings(binomial_summation_limit=0):
            assert Binomial(n=100, p=0.3).inverse(0.5) == int(binom.ppf(0.5, 100, 0.3))
        assert "summation regime" not in caplog.text

    def test_search_budget_exhausted(self):
        d = Binomial(n=100_000, p=0.001)
        with numerical_settings(newton_max_iterations=1):
            with pytest.raises(ConvergenceError, match="Newton did not converge after 1"):
                d.inverse(0.3)

    def test_summaries(self):
        d = self.dist
        assert d.mean() == 4.0
        assert d.variance() == 3.0
        assert Binomial(n=16, p=0.5).deviation() == 2.0
        assert d.skewness() == pytest.approx(0.2886751345948129)
        assert d.kurtosis() == pytest.approx(-0.041666666666666664)

    @pytest.mark.parametrize(
        "n, p, expected", [(16, 0.25, 4.0), (3, 0.5, 1.5), (1000, 0.015, 15.0), (39, 0.1, 4.0)]
    )
    def test_median(self, n, p, expected):
        assert Binomial(n=n, p=p).median() == expected

    @pytest.mark.parametrize("n, p", [(20, 0.45), (7, 0.6), (1234, 0.5)])
    def test_median_is_half_quantile(self, n, p):
        d = Binomial(n=n, p=p)
        assert d.cdf(d.median()) >= 0.5
        assert d.cdf(d.median() - 1.0) <= 0.5

    @pytest.mark.parametrize(
        "n, p, expected",
        [(16, 0.25, [4]), (3, 0.5, [1, 2]), (1000, 0.015, [15]), (39, 0.1, [3, 4])],
    )
    def test_modes(self, n, p, expected):
        assert Binomial(n=n, p=p).modes() == expected

    @pytest.mark.parametrize("n, p", [(16, 0.25), (100, 0.9), (5000, 0.01)])
    def test_entropy_matches_reference(self, n, p):
        assert Binomial(n=n, p=p).entropy() == pytest.approx(binom.entropy(n, p), rel=1e-10)

    def test_entropy_normal_approximation(self):
        assert Binomial(n=10_000_000, p=0.5).entropy() == pytest.approx(8.784839178123887)

    def test_tiny_failure_probability(self):
        d = Binomial.with_failure(10, 1e-24)
        assert d.p == 1.0
        assert d.mass(10) == pytest.approx(1.0)
        assert d.mass(0) < 1e-200
        assert d.modes() == [10]

    def test_sample_mean(self):
        d = Binomial(n=50, p=0.3)
        draws = Independent(d, Xorshift128Plus()).take(5_000).array
        assert np.all((draws >= 0) & (draws <= 50))
        assert np.all(draws == np.floor(draws))
        assert abs(draws.mean() - 15.0) < 0.25
