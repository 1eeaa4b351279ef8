"""
Parametric Families module for working with statistical distribution families.

This package provides the declaration machinery of parametric families, the
global registry of families and the built-in distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import (
    Bernoulli,
    Beta,
    Binomial,
    Categorical,
    Cauchy,
    Exponential,
    Gamma,
    Gaussian,
    Laplace,
    Logistic,
    Lognormal,
    Pert,
    Triangular,
    Uniform,
)
from .configuration import configure_families_register, reset_families_register
from .parametrizations import (
    ParametricFamily,
    ParametrizationConstraint,
    constraint,
    family,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "ParametricFamily",
    "constraint",
    "family",
    "configure_families_register",
    "reset_families_register",
    "Bernoulli",
    "Binomial",
    "Categorical",
    "Beta",
    "Cauchy",
    "Exponential",
    "Gamma",
    "Gaussian",
    "Laplace",
    "Logistic",
    "Lognormal",
    "Pert",
    "Triangular",
    "Uniform",
]
