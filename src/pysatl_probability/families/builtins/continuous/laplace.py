"""
Laplace distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
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
    check_probability,
)
from pysatl_probability.distributions.support import ContinuousSupport
from pysatl_probability.families.parametrizations import ParametricFamily, constraint, family
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.random.source import read_nonzero_float
from pysatl_probability.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.random.source import Source


@family(name=FamilyName.LAPLACE, distribution_type=UnivariateContinuous)
class Laplace(
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
    Laplace (double exponential) distribution.

    Parameters
    ----------
    mu : float
        Location parameter.
    b : float
        Scale parameter.
    """

    mu: float
    b: float

    @constraint(description="b > 0")
    def check_scale_positive(self) -> bool:
        return self.b > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: float) -> float:
        return 0.5 / self.b * math.exp(-abs(x - self.mu) / self.b)

    def cdf(self, x: float) -> float:
        if x <= self.mu:
            return 0.5 * math.exp((x - self.mu) / self.b)
        return 1.0 - 0.5 * math.exp(-(x - self.mu) / self.b)

    def inverse(self, p: float) -> float:
        check_probability(p)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        if p > 0.5:
            return self.mu - self.b * math.log(2.0 - 2.0 * p)
        return self.mu + self.b * math.log(2.0 * p)

    def sample(self, source: Source) -> float:
        return self.inverse(read_nonzero_float(source))

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return 2.0 * self.b**2

    def deviation(self) -> float:
        return math.sqrt(2.0) * self.b

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        return 3.0

    def median(self) -> float:
        return self.mu

    def modes(self) -> list[float]:
        return [self.mu]

    def entropy(self) -> float:
        return math.log(2.0 * math.e * self.b)


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return
    ParametricFamilyRegister.register(Laplace)


__all__ = [
    "Laplace",
    "configure_laplace_family",
]
