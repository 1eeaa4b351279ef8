"""
Bernoulli distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING, Self

from pysatl_probability.distributions.capabilities import (
    Discrete,
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
from pysatl_probability.distributions.support import IntegerSupport
from pysatl_probability.families.parametrizations import ParametricFamily, constraint, family
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_probability.random.source import Source


@family(name=FamilyName.BERNOULLI, distribution_type=UnivariateDiscrete)
class Bernoulli(
    ParametricFamily,
    Discrete,
    Inverse[int],
    Sample[int],
    Mean,
    Variance,
    Skewness,
    Kurtosis,
    Median,
    Modes[int],
    Entropy,
):
    """
    Bernoulli distribution on ``{0, 1}``.

    Parameters
    ----------
    p : float
        Probability of success, ``0 < p < 1``.
    q : float, optional
        Probability of failure, equal to ``1 - p`` up to rounding. Computed
        when omitted; use :meth:`with_failure` to keep a tiny failure
        probability exact.

    Examples
    --------
    >>> Bernoulli(p=0.25).mass(0)
    0.75
    """

    p: float
    q: float = field(  # type: ignore[assignment]
        default=None, kw_only=True, repr=False, compare=False, metadata={"derived": True}
    )

    def __post_init__(self) -> None:
        if self.q is None:
            self._cache("q", 1.0 - self.p)
        ParametricFamily.__post_init__(self)

    @classmethod
    def with_failure(cls, q: float) -> Self:
        """Construct the distribution from its failure probability ``q``."""
        return cls(p=1.0 - q, q=q)

    @constraint(description="0 < p < 1")
    def check_probability_open(self) -> bool:
        return 0.0 < self.p <= 1.0 and 0.0 < self.q < 1.0

    @constraint(description="p + q = 1")
    def check_complementary(self) -> bool:
        return math.isclose(self.p + self.q, 1.0, rel_tol=0.0, abs_tol=1e-15)

    @property
    def support(self) -> IntegerSupport:
        return IntegerSupport(0, 1)

    def mass(self, x: int) -> float:
        if x == 0:
            return self.q
        if x == 1:
            return self.p
        return 0.0

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        if x < 1.0:
            return self.q
        return 1.0

    def inverse(self, p: float) -> int:
        check_probability(p)
        return 0 if p <= self.q else 1

    def sample(self, source: Source) -> int:
        return 0 if source.read_float() < self.q else 1

    def mean(self) -> float:
        return self.p

    def variance(self) -> float:
        return self.p * self.q

    def skewness(self) -> float:
        return (1.0 - 2.0 * self.p) / math.sqrt(self.p * self.q)

    def kurtosis(self) -> float:
        pq = self.p * self.q
        return (1.0 - 6.0 * pq) / pq

    def median(self) -> float:
        if self.p < self.q:
            return 0.0
        if self.p > self.q:
            return 1.0
        return 0.5

    def modes(self) -> list[int]:
        if self.p < self.q:
            return [0]
        if self.p > self.q:
            return [1]
        return [0, 1]

    def entropy(self) -> float:
        return -self.q * math.log(self.q) - self.p * math.log(self.p)


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return
    ParametricFamilyRegister.register(Bernoulli)


__all__ = [
    "Bernoulli",
    "configure_bernoulli_family",
]
