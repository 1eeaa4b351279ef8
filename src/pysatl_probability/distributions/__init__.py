"""
Distributions subpackage

Interfaces and numerical machinery shared by all distributions of
PySATL Probability:

- capability protocols (:mod:`.capabilities`);
- supports (:mod:`.support`);
- computation primitives and characteristic lookup (:mod:`.computation`,
  :mod:`.characteristics`);
- numerical fitters (:mod:`.fitters`);
- the sampling combinator and array-backed samples (:mod:`.sampling`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .capabilities import (
    Continuous,
    Discrete,
    Distribution,
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
from .characteristics import CDF, PDF, PMF, PPF, GenericCharacteristic, query_method
from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .sampling import ArraySample, Independent
from .support import ContinuousSupport, IntegerSupport, Support

__all__ = [
    # capabilities
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
    # computation primitives
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    # characteristics
    "GenericCharacteristic",
    "query_method",
    "PDF",
    "PMF",
    "CDF",
    "PPF",
    # sampling
    "ArraySample",
    "Independent",
    # supports
    "Support",
    "ContinuousSupport",
    "IntegerSupport",
]
