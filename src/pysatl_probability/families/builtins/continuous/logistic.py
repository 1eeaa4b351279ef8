"""
Logistic distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import expit, logit

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


@family(name=FamilyName.LOGISTIC, distribution_type=UnivariateContinuous)
class Logistic(
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
    Logistic distribution.

    Parameters
    ----------
    mu : float, default 0.0
        Location parameter.
    s : float, default 1.0
        Scale parameter.

    Notes
    -----
    Cumulative distribution function::

        F(x) = 1 / (1 + exp(-(x - μ)/s))
    """

    mu: float = 0.0
    s: float = 1.0

    @constraint(description="s > 0")
    def check_scale_positive(self) -> bool:
        return self.s > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: float) -> float:
        # Symmetric in x - mu; the negative branch cannot overflow.
        e = math.exp(-abs(x - self.mu) / self.s)
        return e / (self.s * (1.0 + e) ** 2)

    def cdf(self, x: float) -> float:
        return float(expit((x - self.mu) / self.s))

    def inverse(self, p: float) -> float:
        check_probability(p)
        return self.mu + self.s * float(logit(p))

    def sample(self, source: Source) -> float:
        return self.inverse(read_nonzero_float(source))

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return (math.pi * self.s) ** 2 / 3.0

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        return 1.2

    def median(self) -> float:
        return self.mu

    def modes(self) -> list[float]:
        return [self.mu]

    def entropy(self) -> float:
        return math.log(self.s) + 2.0


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return
    ParametricFamilyRegister.register(Logistic)


__all__ = [
    "Logistic",
    "configure_logistic_family",
]
