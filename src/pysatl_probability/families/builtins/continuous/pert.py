"""
PERT distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

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
from pysatl_probability.families.builtins.continuous.beta import Beta
from pysatl_probability.families.parametrizations import ParametricFamily, constraint, family
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.random.source import Source


@family(name=FamilyName.PERT, distribution_type=UnivariateContinuous)
class Pert(
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
    PERT distribution with minimum ``a``, mode ``b`` and maximum ``c``.

    Parameters
    ----------
    a : float
        Left endpoint of the support.
    b : float
        Mode.
    c : float
        Right endpoint of the support.

    Notes
    -----
    The distribution is Beta(alpha, beta) rescaled to ``[a, c]`` with
    ``alpha = (4b + c - 5a) / (c - a)`` and ``beta = (5c - a - 4b) / (c - a)``.
    """

    a: float
    b: float
    c: float
    _beta: Beta = field(init=False, repr=False, compare=False)

    @constraint(description="a < b < c")
    def check_parameters_ordered(self) -> bool:
        return self.a < self.b < self.c

    def _precompute(self) -> None:
        width = self.c - self.a
        alpha = (4.0 * self.b + self.c - 5.0 * self.a) / width
        beta = (5.0 * self.c - self.a - 4.0 * self.b) / width
        self._cache("_beta", Beta(alpha=alpha, beta=beta, a=self.a, b=self.c))

    @property
    def alpha(self) -> float:
        """First shape parameter of the underlying Beta distribution."""
        return self._beta.alpha

    @property
    def beta(self) -> float:
        """Second shape parameter of the underlying Beta distribution."""
        return self._beta.beta

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(self.a, self.c)

    def density(self, x: float) -> float:
        return self._beta.density(x)

    def cdf(self, x: float) -> float:
        return self._beta.cdf(x)

    def inverse(self, p: float) -> float:
        return self._beta.inverse(p)

    def sample(self, source: Source) -> float:
        return self._beta.sample(source)

    def mean(self) -> float:
        return (self.a + 4.0 * self.b + self.c) / 6.0

    def variance(self) -> float:
        mean = self.mean()
        return (mean - self.a) * (self.c - mean) / 7.0

    def skewness(self) -> float:
        return self._beta.skewness()

    def kurtosis(self) -> float:
        return self._beta.kurtosis()

    def median(self) -> float:
        return self.inverse(0.5)

    def modes(self) -> list[float]:
        return [self.b]

    def entropy(self) -> float:
        return self._beta.entropy()


def configure_pert_family() -> None:
    """
    Configure and register the PERT distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.PERT):
        return
    ParametricFamilyRegister.register(Pert)


__all__ = [
    "Pert",
    "configure_pert_family",
]
