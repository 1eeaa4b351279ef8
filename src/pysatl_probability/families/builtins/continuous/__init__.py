"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probability.families.builtins.continuous.beta import Beta, configure_beta_family
from pysatl_probability.families.builtins.continuous.cauchy import Cauchy, configure_cauchy_family
from pysatl_probability.families.builtins.continuous.exponential import (
    Exponential,
    configure_exponential_family,
)
from pysatl_probability.families.builtins.continuous.gamma import (
    Gamma,
    configure_gamma_family,
    sample_log_standard_gamma,
    sample_standard_gamma,
)
from pysatl_probability.families.builtins.continuous.gaussian import (
    Gaussian,
    configure_gaussian_family,
    sample_standard_gaussian,
    standard_quantile,
)
from pysatl_probability.families.builtins.continuous.laplace import (
    Laplace,
    configure_laplace_family,
)
from pysatl_probability.families.builtins.continuous.logistic import (
    Logistic,
    configure_logistic_family,
)
from pysatl_probability.families.builtins.continuous.lognormal import (
    Lognormal,
    configure_lognormal_family,
)
from pysatl_probability.families.builtins.continuous.pert import Pert, configure_pert_family
from pysatl_probability.families.builtins.continuous.triangular import (
    Triangular,
    configure_triangular_family,
)
from pysatl_probability.families.builtins.continuous.uniform import (
    Uniform,
    configure_uniform_family,
)

__all__ = [
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
    "standard_quantile",
    "sample_standard_gaussian",
    "sample_log_standard_gamma",
    "sample_standard_gamma",
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
