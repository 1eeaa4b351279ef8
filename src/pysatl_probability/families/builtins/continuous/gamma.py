"""
Gamma distribution family implementation.

The module also provides :func:`sample_standard_gamma`, the Marsaglia–Tsang
generator, and :func:`sample_log_standard_gamma`, its log-scale variant
used by the Beta and PERT samplers.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import digamma, gammainc, gammaln, xlogy

from pysatl_probability.distributions.capabilities import (
    Continuous,
    Entropy,
    Kurtosis,
    Mean,
    Modes,
    Sample,
    Skewness,
    Variance,
)
from pysatl_probability.distributions.support import ContinuousSupport
from pysatl_probability.families.builtins.continuous.gaussian import sample_standard_gaussian
from pysatl_probability.families.parametrizations import ParametricFamily, constraint, family
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.random.source import read_nonzero_float
from pysatl_probability.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.random.source import Source


def sample_standard_gamma(k: float, source: Source) -> float:
    """
    Draw a variate of Gamma(k, 1).

    Parameters
    ----------
    k : float
        Shape parameter, ``k > 0``.
    source : Source
        Source of randomness.

    Notes
    -----
    For ``k >= 1`` the squeeze-and-reject method of Marsaglia and Tsang is
    used; rejection restarts from a fresh normal variate, so the loop
    terminates with probability one. For ``k < 1`` the variate is
    ``Gamma(1 + k) * U**(1/k)``.

    References
    ----------
    .. [1] G. Marsaglia and W. W. Tsang, "A simple method for generating gamma
       variables", ACM Transactions on Mathematical Software, 26(3), 2000.
    """
    if k < 1.0:
        return sample_standard_gamma(1.0 + k, source) * source.read_float() ** (1.0 / k)

    d = k - 1.0 / 3.0
    c = (1.0 / 3.0) / math.sqrt(d)
    while True:
        x = sample_standard_gaussian(source)
        v = 1.0 + c * x
        if v <= 0.0:
            continue
        x2 = x * x
        v = v * v * v

        u = read_nonzero_float(source)
        if u < 1.0 - 0.0331 * x2 * x2:
            return d * v
        if math.log(u) < 0.5 * x2 + d * (1.0 - v + math.log(v)):
            return d * v


def sample_log_standard_gamma(k: float, source: Source) -> float:
    """
    Draw the logarithm of a Gamma(k, 1) variate.

    For ``k < 1`` the factor ``U**(1/k)`` underflows for tiny shapes, so the
    boost is applied as ``log(U) / k`` instead. The result is finite.
    """
    if k < 1.0:
        boosted = sample_standard_gamma(1.0 + k, source)
        return math.log(boosted) + math.log(read_nonzero_float(source)) / k
    return math.log(sample_standard_gamma(k, source))


@family(name=FamilyName.GAMMA, distribution_type=UnivariateContinuous)
class Gamma(
    ParametricFamily,
    Continuous,
    Sample[float],
    Mean,
    Variance,
    Skewness,
    Kurtosis,
    Modes[float],
    Entropy,
):
    """
    Gamma distribution with shape ``k`` and scale ``theta``.

    Parameters
    ----------
    k : float
        Shape parameter.
    theta : float
        Scale parameter.

    Notes
    -----
    The quantile function has no closed form and is not implemented
    analytically; ``query_method(gamma, "ppf")`` fits it numerically from
    the cumulative distribution function.
    """

    k: float
    theta: float
    _ln_norm: float = field(init=False, repr=False, compare=False)

    @constraint(description="k > 0")
    def check_shape_positive(self) -> bool:
        return self.k > 0

    @constraint(description="theta > 0")
    def check_scale_positive(self) -> bool:
        return self.theta > 0

    def _precompute(self) -> None:
        self._cache("_ln_norm", float(gammaln(self.k)) + self.k * math.log(self.theta))

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(0.0, math.inf)

    def density(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        # Infinite at the origin for k < 1.
        return float(np.exp(xlogy(self.k - 1.0, x) - x / self.theta - self._ln_norm))

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return float(gammainc(self.k, x / self.theta))

    def sample(self, source: Source) -> float:
        return self.theta * sample_standard_gamma(self.k, source)

    def mean(self) -> float:
        return self.k * self.theta

    def variance(self) -> float:
        return self.k * self.theta**2

    def skewness(self) -> float:
        return 2.0 / math.sqrt(self.k)

    def kurtosis(self) -> float:
        return 6.0 / self.k

    def modes(self) -> list[float]:
        return [(self.k - 1.0) * self.theta] if self.k >= 1.0 else [0.0]

    def entropy(self) -> float:
        k = self.k
        return k + math.log(self.theta) + float(gammaln(k)) + (1.0 - k) * float(digamma(k))


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return
    ParametricFamilyRegister.register(Gamma)


__all__ = [
    "Gamma",
    "sample_standard_gamma",
    "sample_log_standard_gamma",
    "configure_gamma_family",
]
