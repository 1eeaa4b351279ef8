"""
Core Type Definitions
=====================

Names, kinds and type aliases shared by every subpackage of PySATL Probability.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Whether a distribution has a density or a mass function."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType:
    """
    Kind and dimension of the space a distribution lives on.

    Parameters
    ----------
    kind : Kind
        Continuous or discrete.
    dimension : int
        Number of coordinates of an outcome. All built-in families are
        univariate.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float
NumericArray = NDArray[NumPyNumber]
BoolArray = NDArray[np.bool_]

type Seed = tuple[int, int]
"""The two 64-bit state words of a xorshift128+ source."""

type GenericCharacteristicName = str
ScalarFunc = Callable[[float], float]


class ContinuousSupportShape1D(Enum):
    """
    Topological classification of a real interval.

    ``RAY_LEFT`` is bounded above only, ``RAY_RIGHT`` is bounded below only.
    """

    EMPTY = auto()
    SINGLE_POINT = auto()
    BOUNDED_INTERVAL = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    REAL_LINE = auto()


class CharacteristicName(StrEnum):
    """
    Names of the characteristics a distribution may provide.

    Each value maps to one capability protocol of
    :mod:`pysatl_probability.distributions.capabilities`.
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"
    MEDIAN = "median"
    MODES = "modes"
    ENTROPY = "entropy"


class FamilyName(StrEnum):
    BERNOULLI = "Bernoulli"
    BINOMIAL = "Binomial"
    CATEGORICAL = "Categorical"
    UNIFORM = "Uniform"
    GAUSSIAN = "Gaussian"
    EXPONENTIAL = "Exponential"
    GAMMA = "Gamma"
    BETA = "Beta"
    CAUCHY = "Cauchy"
    LAPLACE = "Laplace"
    LOGISTIC = "Logistic"
    LOGNORMAL = "Lognormal"
    PERT = "Pert"
    TRIANGULAR = "Triangular"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "BoolArray",
    "Seed",
    "GenericCharacteristicName",
    "ScalarFunc",
    "ContinuousSupportShape1D",
    "CharacteristicName",
    "FamilyName",
]
