"""
Beta distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import betainc, betaincinv, betaln, digamma, expit, xlog1py, xlogy

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
from pysatl_probability.families.builtins.continuous.gamma import sample_log_standard_gamma
from pysatl_probability.families.parametrizations import ParametricFamily, constraint, family
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.random.source import Source


@family(name=FamilyName.BETA, distribution_type=UnivariateContinuous)
class Beta(
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
    Beta distribution with shapes ``alpha``, ``beta`` on the interval ``[a, b]``.

    Parameters
    ----------
    alpha : float
        First shape parameter.
    beta : float
        Second shape parameter.
    a : float, default 0.0
        Left endpoint of the support.
    b : float, default 1.0
        Right endpoint of the support.

    Notes
    -----
    ``X = a + (b - a) * Y`` where ``Y`` follows the standard Beta(alpha, beta)
    distribution on ``[0, 1]``. Variates are drawn as ``G1 / (G1 + G2)`` for
    independent ``G1 ~ Gamma(alpha, 1)``, ``G2 ~ Gamma(beta, 1)``, computed as
    ``expit(log G1 - log G2)``.
    """

    alpha: float
    beta: float
    a: float = 0.0
    b: float = 1.0
    _ln_beta: float = field(init=False, repr=False, compare=False)

    @constraint(description="alpha > 0")
    def check_alpha_positive(self) -> bool:
        return self.alpha > 0

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        return self.beta > 0

    @constraint(description="a < b")
    def check_bounds_ordered(self) -> bool:
        return self.a < self.b

    def _precompute(self) -> None:
        self._cache("_ln_beta", float(betaln(self.alpha, self.beta)))

    @property
    def scale(self) -> float:
        return self.b - self.a

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport(self.a, self.b)

    def density(self, x: float) -> float:
        if x < self.a or x > self.b:
            return 0.0
        t = (x - self.a) / self.scale
        log_kernel = xlogy(self.alpha - 1.0, t) + xlog1py(self.beta - 1.0, -t)
        return float(np.exp(log_kernel - self._ln_beta)) / self.scale

    def cdf(self, x: float) -> float:
        if x <= self.a:
            return 0.0
        if x >= self.b:
            return 1.0
        return float(betainc(self.alpha, self.beta, (x - self.a) / self.scale))

    def inverse(self, p: float) -> float:
        check_probability(p)
        return self.a + self.scale * float(betaincinv(self.alpha, self.beta, p))

    def sample(self, source: Source) -> float:
        # G1 / (G1 + G2) taken in log scale, both variates may underflow.
        log_x = sample_log_standard_gamma(self.alpha, source)
        log_y = sample_log_standard_gamma(self.beta, source)
        return self.a + self.scale * float(expit(log_x - log_y))

    def mean(self) -> float:
        return self.a + self.scale * self.alpha / (self.alpha + self.beta)

    def variance(self) -> float:
        total = self.alpha + self.beta
        return self.scale**2 * self.alpha * self.beta / (total * total * (total + 1.0))

    def skewness(self) -> float:
        total = self.alpha + self.beta
        return (
            2.0
            * (self.beta - self.alpha)
            * math.sqrt(total + 1.0)
            / ((total + 2.0) * math.sqrt(self.alpha * self.beta))
        )

    def kurtosis(self) -> float:
        total = self.alpha + self.beta
        delta = self.alpha - self.beta
        product = self.alpha * self.beta
        return (
            6.0
            * (delta * delta * (total + 1.0) - product * (total + 2.0))
            / (product * (total + 2.0) * (total + 3.0))
        )

    def median(self) -> float:
        """Exact median; the midpoint of the support for a symmetric distribution."""
        if self.alpha == self.beta:
            return 0.5 * (self.a + self.b)
        return self.inverse(0.5)

    def modes(self) -> list[float]:
        """
        Modes of the distribution.

        Returns
        -------
        list[float]
            Empty for the uniform case ``alpha = beta = 1``, both endpoints for
            the U-shaped case ``alpha, beta < 1``, an endpoint when the density
            is monotone, otherwise the interior maximum.
        """
        alpha, beta = self.alpha, self.beta
        if alpha == 1.0 and beta == 1.0:
            return []
        if alpha < 1.0 and beta < 1.0:
            return [self.a, self.b]
        if alpha <= 1.0 and beta >= 1.0:
            return [self.a]
        if alpha >= 1.0 and beta <= 1.0:
            return [self.b]
        return [self.a + self.scale * (alpha - 1.0) / (alpha + beta - 2.0)]

    def entropy(self) -> float:
        total = self.alpha + self.beta
        return (
            math.log(self.scale)
            + self._ln_beta
            - (self.alpha - 1.0) * float(digamma(self.alpha))
            - (self.beta - 1.0) * float(digamma(self.beta))
            + (total - 2.0) * float(digamma(total))
        )


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return
    ParametricFamilyRegister.register(Beta)


__all__ = [
    "Beta",
    "configure_beta_family",
]
