"""
Categorical distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING

import numpy as np

from pysatl_probability.config import get_settings
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
    from numpy.typing import NDArray

    from pysatl_probability.random.source import Source


@family(name=FamilyName.CATEGORICAL, distribution_type=UnivariateDiscrete)
class Categorical(
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
    Categorical distribution on ``{0, ..., k - 1}``.

    Parameters
    ----------
    p : sequence of float
        Probabilities of the categories. Entries lie in ``[0, 1]`` and sum
        to one within ``NumericalSettings.categorical_tolerance``.

    Examples
    --------
    >>> d = Categorical(p=[0.0, 0.75, 0.25, 0.0])
    >>> d.cdf(1.5), d.inverse(0.0), d.support.infimum
    (0.75, 1, 1.0)
    """

    p: tuple[float, ...]
    _cumsum: NDArray[np.float64] = field(init=False, repr=False, compare=False)
    _first: int = field(init=False, repr=False, compare=False)
    _last: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._cache("p", tuple(float(v) for v in self.p))
        ParametricFamily.__post_init__(self)

    @constraint(description="p is a probability vector")
    def check_probability_vector(self) -> bool:
        if not self.p or not all(0.0 <= v <= 1.0 for v in self.p):
            return False
        return abs(math.fsum(self.p) - 1.0) <= get_settings().categorical_tolerance

    def _precompute(self) -> None:
        cumsum = np.cumsum(np.asarray(self.p, dtype=np.float64))
        cumsum[-1] = 1.0
        cumsum.setflags(write=False)
        self._cache("_cumsum", cumsum)
        positive = np.flatnonzero(np.asarray(self.p) > 0.0)
        self._cache("_first", int(positive[0]))
        self._cache("_last", int(positive[-1]))

    @property
    def k(self) -> int:
        """Number of categories."""
        return len(self.p)

    @property
    def support(self) -> IntegerSupport:
        """Categories from the first to the last one with positive probability."""
        return IntegerSupport(self._first, self._last)

    def mass(self, x: int) -> float:
        if 0 <= x < self.k:
            return self.p[x]
        return 0.0

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        i = math.floor(x)
        if i >= self.k:
            return 1.0
        return float(self._cumsum[i])

    def inverse(self, p: float) -> int:
        check_probability(p)
        probabilities = np.asarray(self.p)
        hits = np.flatnonzero((probabilities > 0.0) & (self._cumsum >= p))
        if hits.size:
            return int(hits[0])
        # Rounding left the target above every cumulative sum.
        return self._last

    def sample(self, source: Source) -> int:
        return self.inverse(source.read_float())

    def _central_moment(self, order: int) -> float:
        mean = self.mean()
        return math.fsum((i - mean) ** order * p for i, p in enumerate(self.p))

    def mean(self) -> float:
        return math.fsum(i * p for i, p in enumerate(self.p))

    def variance(self) -> float:
        return self._central_moment(2)

    def skewness(self) -> float:
        variance = self.variance()
        return self._central_moment(3) / (variance * math.sqrt(variance))

    def kurtosis(self) -> float:
        return self._central_moment(4) / self.variance() ** 2 - 3.0

    def median(self) -> float:
        i = int(np.flatnonzero(self._cumsum >= 0.5)[0])
        if self._cumsum[i] == 0.5:
            # Every point between this category and the next one with positive
            # probability is a median, take the midpoint.
            following = [j for j in range(i + 1, self.k) if self.p[j] > 0.0]
            if following:
                return (i + following[0]) / 2.0
        return float(i)

    def modes(self) -> list[int]:
        largest = max(self.p)
        return [i for i, p in enumerate(self.p) if p == largest]

    def entropy(self) -> float:
        return -math.fsum(p * math.log(p) for p in self.p if p > 0.0)


def configure_categorical_family() -> None:
    """
    Configure and register the Categorical distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CATEGORICAL):
        return
    ParametricFamilyRegister.register(Categorical)


__all__ = [
    "Categorical",
    "configure_categorical_family",
]
