"""
Tests for PERT Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import beta

from pysatl_probability.distributions.sampling import Independent
from pysatl_probability.families.builtins.continuous import Pert
from pysatl_probability.random import Xorshift128Plus

from ..base import BaseDistributionTest


class TestPertFamily(BaseDistributionTest):
    """Test suite for PERT distribution family."""

    def setup_method(self):
        self.dist = Pert(a=1.0, b=3.0, c=10.0)
        self.reference = beta(17.0 / 9.0, 37.0 / 9.0, loc=1.0, scale=9.0)

    @pytest.mark.parametrize("a, b, c", [(1.0, 1.0, 2.0), (1.0, 2.0, 2.0), (3.0, 2.0, 1.0)])
    def test_ordering_constraint(self, a, b, c):
        with pytest.raises(ValueError, match="a < b < c"):
            Pert(a=a, b=b, c=c)

    def test_beta_shapes(self):
        assert self.dist.alpha == pytest.approx(17.0 / 9.0)
        assert self.dist.beta == pytest.approx(37.0 / 9.0)

    def test_support(self):
        assert self.dist.support.infimum == 1.0
        assert self.dist.support.supremum == 10.0

    def test_density_cdf_and_inverse(self):
        points = np.linspace(0.0, 11.0, 23)
        self.assert_matches_reference(self.dist.density, points, self.reference.pdf)
        self.assert_matches_reference(self.dist.cdf, points, self.reference.cdf)
        self.assert_matches_reference(self.dist.inverse, self.PROBABILITIES, self.reference.ppf)
        self.assert_continuous_round_trip(self.dist)

    def test_summaries(self):
        d = self.dist
        mean, var, skew, kurt = self.reference.stats(moments="mvsk")
        assert d.mean() == pytest.approx(23.0 / 6.0)
        assert d.mean() == pytest.approx(mean)
        assert d.variance() == pytest.approx(var)
        assert d.skewness() == pytest.approx(skew)
        assert d.kurtosis() == pytest.approx(kurt)
        assert d.median() == pytest.approx(self.reference.median())
        assert d.modes() == [3.0]
        assert d.entropy() == pytest.approx(self.reference.entropy())

    def test_samples_within_support(self):
        draws = Independent(self.dist, Xorshift128Plus()).take(5_000).array
        assert np.all((draws >= 1.0) & (draws <= 10.0))
        assert abs(draws.mean() - 23.0 / 6.0) < 0.1
