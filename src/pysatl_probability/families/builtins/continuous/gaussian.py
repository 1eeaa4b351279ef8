"""
Gaussian (normal) distribution family.

Besides the family itself, this module provides the standard normal quantile
(Wichura's algorithm AS241) and the standard normal variate generator used by
the other continuous families.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from scipy.special import erfc

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

_CONST1 = 0.180625
_CONST2 = 1.6
_SPLIT1 = 0.425
_SPLIT2 = 5.0

_A = (
    3.3871328727963666080e00,
    1.3314166789178437745e02,
    1.9715909503065514427e03,
    1.3731693765509461125e04,
    4.5921953931549871457e04,
    6.7265770927008700853e04,
    3.3430575583588128105e04,
    2.5090809287301226727e03,
)
_B = (
    1.0,
    4.2313330701600911252e01,
    6.8718700749205790830e02,
    5.3941960214247511077e03,
    2.1213794301586595867e04,
    3.9307895800092710610e04,
    2.8729085735721942674e04,
    5.2264952788528545610e03,
)
_C = (
    1.42343711074968357734e00,
    4.63033784615654529590e00,
    5.76949722146069140550e00,
    3.64784832476320460504e00,
    1.27045825245236838258e00,
    2.41780725177450611770e-01,
    2.27238449892691845833e-02,
    7.74545014278341407640e-04,
)
_D = (
    1.0,
    2.05319162663775882187e00,
    1.67638483018380384940e00,
    6.89767334985100004550e-01,
    1.48103976427480074590e-01,
    1.51986665636164571966e-02,
    5.47593808499534494600e-04,
    1.05075007164441684324e-09,
)
_E = (
    6.65790464350110377720e00,
    5.46378491116411436990e00,
    1.78482653991729133580e00,
    2.96560571828504891230e-01,
    2.65321895265761230930e-02,
    1.24266094738807843860e-03,
    2.71155556874348757815e-05,
    2.01033439929228813265e-07,
)
_F = (
    1.0,
    5.99832206555887937690e-01,
    1.36929880922735805310e-01,
    1.48753612908506148525e-02,
    7.86869131145613259100e-04,
    1.84631831751005468180e-05,
    1.42151175831644588870e-07,
    2.04426310338993978564e-15,
)


def _poly(c: tuple[float, ...], x: float) -> float:
    """Horner evaluation of ``c[0] + c[1] x + ... + c[7] x**7``."""
    result = c[-1]
    for coefficient in reversed(c[:-1]):
        result = coefficient + x * result
    return result


def standard_quantile(p: float) -> float:
    """
    Quantile of the standard normal distribution.

    Parameters
    ----------
    p : float
        Probability; values ``<= 0`` map to ``-inf`` and values ``>= 1`` to
        ``+inf``.

    Returns
    -------
    float
        ``x`` such that ``Phi(x) = p``, accurate to about 1e-16 relative.

    References
    ----------
    .. [1] M. J. Wichura, "Algorithm AS 241: The percentage points of the
       normal distribution", Applied Statistics, 37(3), 1988.
    """
    if p <= 0.0:
        return -math.inf
    if p >= 1.0:
        return math.inf

    q = p - 0.5
    if abs(q) <= _SPLIT1:
        x = _CONST1 - q * q
        return q * _poly(_A, x) / _poly(_B, x)

    r = math.sqrt(-math.log(p if q < 0.0 else 1.0 - p))
    if r <= _SPLIT2:
        r -= _CONST2
        x = _poly(_C, r) / _poly(_D, r)
    else:
        r -= _SPLIT2
        x = _poly(_E, r) / _poly(_F, r)
    return -x if q < 0.0 else x


def sample_standard_gaussian(source: Source) -> float:
    """Draw a standard normal variate by inverting a non-zero uniform variate."""
    return standard_quantile(read_nonzero_float(source))


@family(name=FamilyName.GAUSSIAN, distribution_type=UnivariateContinuous)
class Gaussian(
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
    Gaussian (normal) distribution.

    Parameters
    ----------
    mu : float, default 0.0
        Mean of the distribution.
    sigma : float, default 1.0
        Standard deviation of the distribution.

    Notes
    -----
    Probability density function::

        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
    """

    mu: float = 0.0
    sigma: float = 1.0

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.sigma > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: float) -> float:
        z = (x - self.mu) / self.sigma
        return math.exp(-0.5 * z * z) / (self.sigma * math.sqrt(2.0 * math.pi))

    def cdf(self, x: float) -> float:
        return float(0.5 * erfc(-(x - self.mu) / (self.sigma * math.sqrt(2.0))))

    def inverse(self, p: float) -> float:
        check_probability(p)
        return self.mu + self.sigma * standard_quantile(p)

    def sample(self, source: Source) -> float:
        return self.mu + self.sigma * sample_standard_gaussian(source)

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return self.sigma**2

    def deviation(self) -> float:
        return self.sigma

    def skewness(self) -> float:
        return 0.0

    def kurtosis(self) -> float:
        return 0.0

    def median(self) -> float:
        return self.mu

    def modes(self) -> list[float]:
        return [self.mu]

    def entropy(self) -> float:
        return 0.5 * math.log(2.0 * math.pi * math.e * self.sigma**2)


def configure_gaussian_family() -> None:
    """
    Configure and register the Gaussian distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GAUSSIAN):
        return
    ParametricFamilyRegister.register(Gaussian)


__all__ = [
    "Gaussian",
    "standard_quantile",
    "sample_standard_gaussian",
    "configure_gaussian_family",
]
