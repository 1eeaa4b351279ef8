"""
Built-in distribution families for PySATL Probability.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL Probability.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probability.families.builtins.continuous import (
    Beta,
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
    configure_beta_family,
    configure_cauchy_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_gaussian_family,
    configure_laplace_family,
    configure_logistic_family,
    configure_lognormal_family,
    configure_pert_family,
    configure_triangular_family,
    configure_uniform_family,
)
from pysatl_probability.families.builtins.discrete import (
    Bernoulli,
    Binomial,
    Categorical,
    configure_bernoulli_family,
    configure_binomial_family,
    configure_categorical_family,
)

__all__ = [
    # discrete
    "Bernoulli",
    "Binomial",
    "Categorical",
    # continuous
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
    # registration
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_categorical_family",
    "configure_beta_family",
    "configure_cauchy_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_gaussian_family",
    "configure_laplace_family",
    "configure_logistic_family",
    "configure_lognormal_family",
    "configure_pert_family",
    "configure_triangular_family",
    "configure_uniform_family",
]
