"""
Lognormal distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING

from pysatl_probability.distributions.capabilities import (
    Continuous,
    Entropy,
    Inverse,
    Kurtosis,
    Mean,
    Median,
    Modes,
    Sample,
    Skewness,
    Variance,
)
from pysatl_probability.distributions.support import ContinuousSupport
from pysatl_probability.families.builtins.continuous.gaussian import Gaussian
from pysatl_probability.families.parametrizations import ParametricFamily, constraint, family
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.random.source import Source


@family(name=FamilyName.LOGNORMAL, distribution_type=UnivariateContinuous)
class Lognormal(
    ParametricFamily,
    Continuous,
    Inverse[float],
    Sample[float],
    Mean,
    Variance,
    Skewness,
    Kurtosis,
    Median,
    Modes[float],
    Entropy,
):
    """
    Lognormal distribution: ``exp(Y)`` for ``Y ~ Gaussian(mu, sigma)``.

    Parameters
    ----------
    mu : float, default 0.0
        Mean of the underlying Gaussian distribution.
    sigma : float, default 1.0
        Standard deviation of the underlying Gaussian distribution.
    """

    mu: float = 0.0
    sigma: float = 1.0
    _gaussian: Gaussian = field(init=False, repr=False, compare=False)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0

    def _precompute(self) -> None:
        self._cache("_gaussian", Gaussian(mu=self.mu, sigma=self.sigma))

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(0.0, math.inf)

    def density(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return self._gaussian.density(math.log(x)) / x

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return self._gaussian.cdf(math.log(x))

    def inverse(self, p: float) -> float:
        return math.exp(self._gaussian.inverse(p))

    def sample(self, source: Source) -> float:
        return math.exp(self._gaussian.sample(source))

    def mean(self) -> float:
        return math.exp(self.mu + 0.5 * self.sigma**2)

    def variance(self) -> float:
        s2 = self.sigma**2
        return math.expm1(s2) * math.exp(2.0 * self.mu + s2)

    def skewness(self) -> float:
        es2 = math.exp(self.sigma**2)
        return math.sqrt(es2 - 1.0) * (2.0 + es2)

    def kurtosis(self) -> float:
        s2 = self.sigma**2
        return math.exp(4.0 * s2) + 2.0 * math.exp(3.0 * s2) + 3.0 * math.exp(2.0 * s2) - 6.0

    def median(self) -> float:
        return math.exp(self.mu)

    def modes(self) -> list[float]:
        return [math.exp(self.mu - self.sigma**2)]

    def entropy(self) -> float:
        return self.mu + 0.5 + math.log(self.sigma * math.sqrt(2.0 * math.pi))


def configure_lognormal_family() -> None:
    """
    Configure and register the Lognormal distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LOGNORMAL):
        return
    ParametricFamilyRegister.register(Lognormal)


__all__ = [
    "Lognormal",
    "configure_lognormal_family",
]
