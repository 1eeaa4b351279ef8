"""
Built-in Families
=================

This module registers the built-in parametric families in the global
:class:`~pysatl_probability.families.registry.ParametricFamilyRegister`:

- discrete: Bernoulli, Binomial, Categorical;
- continuous: Uniform, Gaussian, Exponential, Gamma, Beta, Cauchy, Laplace,
  Logistic, Lognormal, Pert, Triangular.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_probability.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_binomial_family,
    configure_categorical_family,
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
from pysatl_probability.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register all built-in distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_bernoulli_family()
    configure_binomial_family()
    configure_categorical_family()
    configure_uniform_family()
    configure_gaussian_family()
    configure_exponential_family()
    configure_gamma_family()
    configure_beta_family()
    configure_cauchy_family()
    configure_laplace_family()
    configure_logistic_family()
    configure_lognormal_family()
    configure_pert_family()
    configure_triangular_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """Forget every registration, so the next configure call starts from scratch."""
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()


__all__ = [
    "configure_families_register",
    "reset_families_register",
]
