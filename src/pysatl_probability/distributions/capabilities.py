"""
Distribution Capabilities
=========================

This module defines the capability protocols a distribution may implement.

- :class:`Distribution` – the mandatory capability: cumulative probability.
- :class:`Continuous` / :class:`Discrete` – density or mass.
- :class:`Inverse` – the quantile function.
- :class:`Sample` – drawing one variate from a :class:`~pysatl_probability.random.Source`.
- :class:`Mean`, :class:`Variance`, :class:`Skewness`, :class:`Kurtosis`,
  :class:`Median`, :class:`Modes`, :class:`Entropy` – scalar summaries.

Notes
-----
- Capabilities are orthogonal. A concrete distribution subclasses exactly the
  protocols its mathematics supports, e.g. a Cauchy distribution implements
  :class:`Median` but neither :class:`Mean` nor :class:`Variance`.
- All protocols are ``runtime_checkable``, so client code may test for a
  capability with :func:`isinstance`.
- Client code should depend on the smallest set of capabilities it needs.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pysatl_probability.distributions.support import Support
    from pysatl_probability.random.source import Source
    from pysatl_probability.types import EuclideanDistributionType


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface: the cumulative distribution function."""

    @property
    def distribution_type(self) -> EuclideanDistributionType: ...

    @property
    def support(self) -> Support: ...

    def cdf(self, x: float) -> float:
        """Compute ``P(X <= x)`` at a real argument ``x``."""
        ...


@runtime_checkable
class Continuous(Distribution, Protocol):
    def density(self, x: float) -> float:
        """Compute the probability density function, zero outside the support."""
        ...


@runtime_checkable
class Discrete(Distribution, Protocol):
    def mass(self, x: int) -> float:
        """Compute the probability mass function, zero outside the support."""
        ...


@runtime_checkable
class Inverse[T](Protocol):
    def inverse(self, p: float) -> T:
        """
        Compute the inverse of the cumulative distribution function.

        Parameters
        ----------
        p : float
            Probability from ``[0, 1]``.

        Returns
        -------
        T
            The smallest outcome whose cumulative probability reaches ``p``.
            ``p = 0`` maps to the support infimum (or ``-inf``) and ``p = 1``
            to the supremum (or ``+inf``).

        Raises
        ------
        ValueError
            If ``p`` is outside ``[0, 1]``.
        """
        ...


@runtime_checkable
class Sample[T](Protocol):
    def sample(self, source: Source) -> T:
        """Draw one variate, advancing ``source`` by one or more reads."""
        ...


@runtime_checkable
class Mean(Protocol):
    def mean(self) -> float: ...


@runtime_checkable
class Variance(Protocol):
    def variance(self) -> float: ...

    def deviation(self) -> float:
        """Compute the standard deviation."""
        return math.sqrt(self.variance())


@runtime_checkable
class Skewness(Protocol):
    def skewness(self) -> float: ...


@runtime_checkable
class Kurtosis(Protocol):
    def kurtosis(self) -> float:
        """Compute the excess kurtosis."""
        ...


@runtime_checkable
class Median(Protocol):
    def median(self) -> float: ...


@runtime_checkable
class Modes[T](Protocol):
    def modes(self) -> list[T]: ...


@runtime_checkable
class Entropy(Protocol):
    def entropy(self) -> float:
        """Compute the entropy in nats (differential for continuous distributions)."""
        ...


def check_probability(p: float) -> None:
    """
    Validate an argument of an inverse cumulative distribution function.

    Raises
    ------
    ValueError
        If ``p`` is outside ``[0, 1]`` or NaN.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError("Probability must be in [0, 1]")


__all__ = [
    "Distribution",
    "Continuous",
    "Discrete",
    "Inverse",
    "Sample",
    "Mean",
    "Variance",
    "Skewness",
    "Kurtosis",
    "Median",
    "Modes",
    "Entropy",
    "check_probability",
]
