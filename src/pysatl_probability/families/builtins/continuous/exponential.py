"""
Exponential distribution family implementation.
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
from pysatl_probability.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.random.source import Source


@family(name=FamilyName.EXPONENTIAL, distribution_type=UnivariateContinuous)
class Exponential(
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
    Exponential distribution.

    Parameters
    ----------
    lambda_ : float
        Rate parameter.

    Notes
    -----
    Probability density function::

        f(x) = λ * exp(-λx),  x ≥ 0
    """

    lambda_: float

    @constraint(description="lambda > 0")
    def check_lambda_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.lambda_ > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(0.0, math.inf)

    def density(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        return self.lambda_ * math.exp(-self.lambda_ * x)

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return -math.expm1(-self.lambda_ * x)

    def inverse(self, p: float) -> float:
        check_probability(p)
        if p == 1.0:
            return math.inf
        return -math.log1p(-p) / self.lambda_

    def sample(self, source: Source) -> float:
        return -math.log1p(-source.read_float()) / self.lambda_

    def mean(self) -> float:
        return 1.0 / self.lambda_

    def variance(self) -> float:
        return self.lambda_**-2

    def skewness(self) -> float:
        return 2.0

    def kurtosis(self) -> float:
        return 6.0

    def median(self) -> float:
        return math.log(2.0) / self.lambda_

    def modes(self) -> list[float]:
        return [0.0]

    def entropy(self) -> float:
        return 1.0 - math.log(self.lambda_)


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return
    ParametricFamilyRegister.register(Exponential)


__all__ = [
    "Exponential",
    "configure_exponential_family",
]
