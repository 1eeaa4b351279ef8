"""
Triangular distribution family implementation.
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


@family(name=FamilyName.TRIANGULAR, distribution_type=UnivariateContinuous)
class Triangular(
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
    Triangular distribution on ``[a, b]`` with mode ``c``.

    Parameters
    ----------
    a : float
        Left endpoint of the support.
    b : float
        Right endpoint of the support.
    c : float
        Mode, ``a <= c <= b``.
    """

    a: float
    b: float
    c: float

    @constraint(description="a < b")
    def check_bounds_ordered(self) -> bool:
        return self.a < self.b

    @constraint(description="a <= c <= b")
    def check_mode_within_bounds(self) -> bool:
        return self.a <= self.c <= self.b

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(self.a, self.b)

    def density(self, x: float) -> float:
        a, b, c = self.a, self.b, self.c
        if x < a or x > b:
            return 0.0
        if x < c:
            return 2.0 * (x - a) / ((b - a) * (c - a))
        if x > c:
            return 2.0 * (b - x) / ((b - a) * (b - c))
        return 2.0 / (b - a)

    def cdf(self, x: float) -> float:
        a, b, c = self.a, self.b, self.c
        if x <= a:
            return 0.0
        if x >= b:
            return 1.0
        if x <= c:
            return (x - a) ** 2 / ((b - a) * (c - a))
        return 1.0 - (b - x) ** 2 / ((b - a) * (b - c))

    def inverse(self, p: float) -> float:
        check_probability(p)
        a, b, c = self.a, self.b, self.c
        if p == 0.0:
            return a
        if p == 1.0:
            return b
        p0 = (c - a) / (b - a)
        if p < p0:
            return a + math.sqrt((b - a) * (c - a) * p)
        if p > p0:
            return b - math.sqrt((b - a) * (b - c) * (1.0 - p))
        return c

    def sample(self, source: Source) -> float:
        return self.inverse(source.read_float())

    def mean(self) -> float:
        return (self.a + self.b + self.c) / 3.0

    def _spread(self) -> float:
        a, b, c = self.a, self.b, self.c
        return a * a + b * b + c * c - a * b - a * c - b * c

    def variance(self) -> float:
        return self._spread() / 18.0

    def skewness(self) -> float:
        a, b, c = self.a, self.b, self.c
        numerator = (a + b - 2.0 * c) * (2.0 * a - b - c) * (a - 2.0 * b + c)
        return math.sqrt(2.0) * numerator / (5.0 * self._spread() ** 1.5)

    def kurtosis(self) -> float:
        return -0.6

    def median(self) -> float:
        a, b, c = self.a, self.b, self.c
        if c >= 0.5 * (a + b):
            return a + math.sqrt((b - a) * (c - a) / 2.0)
        return b - math.sqrt((b - a) * (b - c) / 2.0)

    def modes(self) -> list[float]:
        return [self.c]

    def entropy(self) -> float:
        return 0.5 + math.log(0.5 * (self.b - self.a))


def configure_triangular_family() -> None:
    """
    Configure and register the Triangular distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.TRIANGULAR):
        return
    ParametricFamilyRegister.register(Triangular)


__all__ = [
    "Triangular",
    "configure_triangular_family",
]
