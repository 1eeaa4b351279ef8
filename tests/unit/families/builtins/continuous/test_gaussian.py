"""
Tests for Gaussian Distribution Family

This module tests the Gaussian family, the standard normal quantile and the
standard normal variate generator.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.stats import norm

from pysatl_probability.distributions.sampling import Independent
from pysatl_probability.distributions.support import ContinuousSupport
from pysatl_probability.families.builtins.continuous import (
    Gaussian,
    sample_standard_gaussian,
    standard_quantile,
)
from pysatl_probability.families.configuration import configure_families_register
from pysatl_probability.random import Xorshift128Plus
from pysatl_probability.types import ContinuousSupportShape1D, FamilyName, UnivariateContinuous

from ..base import BaseDistributionTest


class TestGaussianFamily(BaseDistributionTest):
    """Test suite for Gaussian distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.gaussian_family = registry.get(FamilyName.GAUSSIAN)
        self.dist = self.gaussian_family(mu=-1.0, sigma=0.25)

    def test_family_properties(self):
        assert self.gaussian_family is Gaussian
        assert self.dist.name == FamilyName.GAUSSIAN
        assert self.dist.distribution_type == UnivariateContinuous
        assert self.dist.parameters == {"mu": -1.0, "sigma": 0.25}

    def test_default_parameters(self):
        assert Gaussian() == Gaussian(mu=0.0, sigma=1.0)

    @pytest.mark.parametrize("sigma", [0.0, -1.0])
    def test_sigma_constraint(self, sigma):
        with pytest.raises(ValueError, match="sigma > 0"):
            Gaussian(mu=0.0, sigma=sigma)

    def test_reference_quantile(self):
        assert self.dist.inverse(0.05) == pytest.approx(-1.411213406737868, abs=1e-14)

    def test_density_and_cdf(self):
        points = np.linspace(-3.0, 1.0, 17)
        self.assert_matches_reference(
            self.dist.density, points, lambda x: norm.pdf(x, loc=-1.0, scale=0.25)
        )
        self.assert_matches_reference(
            self.dist.cdf, points, lambda x: norm.cdf(x, loc=-1.0, scale=0.25)
        )

    def test_inverse(self):
        self.assert_matches_reference(
            self.dist.inverse,
            self.PROBABILITIES,
            lambda p: norm.ppf(p, loc=-1.0, scale=0.25),
        )
        self.assert_continuous_round_trip(self.dist)

    def test_inverse_boundaries(self):
        assert self.dist.inverse(0.0) == -math.inf
        assert self.dist.inverse(1.0) == math.inf

    def test_summaries(self):
        d = self.dist
        assert d.mean() == -1.0
        assert d.variance() == 0.0625
        assert d.deviation() == 0.25
        assert d.skewness() == 0.0
        assert d.kurtosis() == 0.0
        assert d.median() == -1.0
        assert d.modes() == [-1.0]
        assert d.entropy() == pytest.approx(norm.entropy(loc=-1.0, scale=0.25))

    def test_support(self):
        support = self.dist.support
        assert isinstance(support, ContinuousSupport)
        assert support.shape == ContinuousSupportShape1D.REAL_LINE

    def test_density_normalized(self):
        self.assert_density_normalized(self.dist)

    def test_sample_moments(self):
        draws = Independent(self.dist, Xorshift128Plus((42, 69))).take(20_000).array
        assert abs(draws.mean() + 1.0) < 0.01
        assert abs(draws.std() - 0.25) < 0.01


class TestStandardQuantile(BaseDistributionTest):
    @pytest.mark.parametrize(
        "p",
        [1e-300, 1e-100, 1e-20, 1e-10, 1e-5, 0.01, 0.075, 0.0749, 0.5, 0.925, 0.99, 1 - 1e-10],
    )
    def test_matches_reference(self, p):
        assert standard_quantile(p) == pytest.approx(norm.ppf(p), rel=1e-14, abs=1e-15)

    def test_symmetry(self):
        for p in (1e-8, 0.01, 0.2, 0.4):
            # Round the pair once so both tails see the same probabilities.
            upper = 1.0 - p
            lower = 1.0 - upper
            assert standard_quantile(lower) == pytest.approx(-standard_quantile(upper), rel=1e-12)

    def test_median(self):
        assert standard_quantile(0.5) == 0.0

    @pytest.mark.parametrize("p, expected", [(0.0, -math.inf), (-1.0, -math.inf), (1.0, math.inf)])
    def test_out_of_range(self, p, expected):
        assert standard_quantile(p) == expected

    def test_monotone(self):
        ps = np.linspace(1e-6, 1.0 - 1e-6, 2001)
        values = [standard_quantile(p) for p in ps]
        assert all(a < b for a, b in zip(values, values[1:], strict=False))


class TestStandardGaussianSampling:
    def test_draws_are_finite_and_reproducible(self):
        first = Xorshift128Plus((3, 5))
        second = Xorshift128Plus((3, 5))
        draws = [sample_standard_gaussian(first) for _ in range(1000)]
        assert all(math.isfinite(x) for x in draws)
        assert draws == [sample_standard_gaussian(second) for _ in range(1000)]
