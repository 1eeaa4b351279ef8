"""
Tests for Categorical Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest

from pysatl_probability.config import numerical_settings
from pysatl_probability.distributions.sampling import Independent
from pysatl_probability.families.builtins.discrete import Categorical
from pysatl_probability.families.configuration import configure_families_register
from pysatl_probability.random import Xorshift128Plus
from pysatl_probability.types import FamilyName

THIRDS = [1.0 / 3.0] * 3
SKEWED = [0.1, 0.2, 0.3, 0.4]


class TestCategoricalFamily:
    """Test suite for Categorical distribution family."""

    def test_registered(self):
        registry = configure_families_register()
        assert registry.get(FamilyName.CATEGORICAL) is Categorical

    def test_probabilities_stored_as_tuple(self):
        d = Categorical(p=[0.5, 0.5])
        assert d.p == (0.5, 0.5)
        assert d.k == 2
        assert (d.support.min_k, d.support.max_k) == (0, 1)

    @pytest.mark.parametrize("p", [[], [0.5, 0.6], [-0.1, 1.1], [0.5, 0.4]])
    def test_probability_vector_constraint(self, p):
        with pytest.raises(ValueError, match="p is a probability vector"):
            Categorical(p=p)

    def test_tolerance_follows_settings(self):
        p = [0.5, 0.5 + 1e-9]
        with pytest.raises(ValueError):
            Categorical(p=p)
        with numerical_settings(categorical_tolerance=1e-6):
            assert Categorical(p=p).k == 2

    def test_mass(self):
        d = Categorical(p=[0.0, 0.75, 0.25, 0.0])
        assert [d.mass(k) for k in range(-1, 5)] == [0.0, 0.0, 0.75, 0.25, 0.0, 0.0]

    def test_cdf(self):
        d = Categorical(p=[0.0, 0.75, 0.25, 0.0])
        assert [d.cdf(x) for x in (-1.0, 0.0, 1.0, 2.0, 3.0)] == [0.0, 0.0, 0.75, 1.0, 1.0]
        assert d.cdf(1.5) == 0.75
        assert d.cdf(100.0) == 1.0

    @pytest.mark.parametrize(
        "p, probabilities, expected",
        [
            ([0.0, 0.75, 0.25, 0.0], [0.0, 0.75, 0.7500001, 1.0], [1, 1, 2, 2]),
            (THIRDS, [0.0, 0.5, 0.75, 1.0], [0, 1, 2, 2]),
        ],
    )
    def test_inverse(self, p, probabilities, expected):
        d = Categorical(p=p)
        assert [d.inverse(u) for u in probabilities] == expected

    def test_inverse_never_returns_impossible_category(self):
        d = Categorical(p=[0.5, 0.5, 0.0])
        assert d.inverse(1.0) == 1

    @pytest.mark.parametrize(
        "p, bounds", [([0.0, 0.75, 0.25, 0.0], (1, 2)), (SKEWED, (0, 3)), ([0.0, 0.0, 1.0], (2, 2))]
    )
    def test_inverse_endpoints_match_support(self, p, bounds):
        d = Categorical(p=p)
        assert (d.support.min_k, d.support.max_k) == bounds
        assert d.inverse(0.0) == d.support.infimum
        assert d.inverse(1.0) == d.support.supremum

    def test_mean(self):
        assert Categorical(p=[0.0, 1.0, 0.0]).mean() == 1.0
        assert Categorical(p=[0.0, 0.5, 0.5]).mean() == 1.5
        assert Categorical(p=SKEWED).mean() == pytest.approx(2.0)

    def test_variance(self):
        assert Categorical(p=THIRDS).variance() == pytest.approx(2.0 / 3.0)
        assert Categorical(p=SKEWED).variance() == pytest.approx(1.0)

    def test_skewness(self):
        assert Categorical(p=[0.5, 0.5]).skewness() == pytest.approx(0.0)
        assert Categorical(p=SKEWED).skewness() == pytest.approx(-0.6)

    def test_kurtosis(self):
        assert Categorical(p=[0.5, 0.5]).kurtosis() == pytest.approx(-2.0)
        assert Categorical(p=SKEWED).kurtosis() == pytest.approx(-0.8)

    @pytest.mark.parametrize(
        "p, expected",
        [
            ([1.0], 0.0),
            ([0.5, 0.5], 0.5),
            (SKEWED, 2.0),
            ([0.25, 0.25, 0.25, 0.25], 1.5),
            ([0.25, 0.25, 0.0, 0.5], 2.0),
        ],
    )
    def test_median(self, p, expected):
        assert Categorical(p=p).median() == expected

    @pytest.mark.parametrize(
        "p, expected", [(SKEWED, [3]), ([0.4, 0.2, 0.4], [0, 2]), ([1.0], [0])]
    )
    def test_modes(self, p, expected):
        assert Categorical(p=p).modes() == expected

    def test_entropy(self):
        assert Categorical(p=[0.5, 0.5]).entropy() == pytest.approx(math.log(2.0))
        assert Categorical(p=SKEWED).entropy() == pytest.approx(1.2798542258336676)
        assert Categorical(p=[0.0, 1.0]).entropy() == 0.0

    def test_sample_values(self):
        draws = Independent(Categorical(p=[0.0, 0.5, 0.5]), Xorshift128Plus()).take(100).array
        assert 100 <= draws.sum() <= 200
        assert set(np.unique(draws)) <= {1, 2}

    def test_sample_skips_impossible_categories(self):
        d = Categorical(p=[0.0, 0.5, 0.0, 0.5])
        draws = Independent(d, Xorshift128Plus()).take(1_000).array
        assert np.all(draws % 2 == 1)
