"""
Uniform distribution family implementation.
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


@family(name=FamilyName.UNIFORM, distribution_type=UnivariateContinuous)
class Uniform(
    ParametricFamily,
    Continuous,
    Inverse[float],
    Sample[float],
    Mean,
    Variance,
    Skewness,
    Kurtosis,
    Median,
    Entropy,
):
    """
    Continuous uniform distribution on ``[a, b]``.

    Parameters
    ----------
    a : float, default 0.0
        Lower bound of the support.
    b : float, default 1.0
        Upper bound of the support.

    Notes
    -----
    The distribution has no unique mode, so it does not implement
    :class:`~pysatl_probability.distributions.capabilities.Modes`.
    """

    a: float = 0.0
    b: float = 1.0

    @constraint(description="a < b")
    def check_lower_less_than_upper(self) -> bool:
        return self.a < self.b

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(self.a, self.b)

    def density(self, x: float) -> float:
        if x < self.a or x > self.b:
            return 0.0
        return 1.0 / (self.b - self.a)

    def cdf(self, x: float) -> float:
        if x <= self.a:
            return 0.0
        if x >= self.b:
            return 1.0
        return (x - self.a) / (self.b - self.a)

    def inverse(self, p: float) -> float:
        check_probability(p)
        return self.a + (self.b - self.a) * p

    def sample(self, source: Source) -> float:
        return self.a + (self.b - self.a) * source.read_float()

    def mean(self) -> float:
        return 0.5 * (self.a + self.b)

    def variance(self) -> float:
        return (self.b - self.a) ** 2 / 12.0

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        return -1.2

    def median(self) -> float:
        return self.mean()

    def entropy(self) -> float:
        return math.log(self.b - self.a)


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.UNIFORM):
        return
    ParametricFamilyRegister.register(Uniform)


__all__ = [
    "Uniform",
    "configure_uniform_family",
]
