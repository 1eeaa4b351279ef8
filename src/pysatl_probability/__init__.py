"""
PySATL Probability
==================

Numerical core for univariate probability distributions: capability-based
distribution interfaces, parametric families with validated parameters,
accurate quantile and mass algorithms, and reproducible pseudorandom
sampling.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .exceptions import *
from .exceptions import __all__ as _exceptions_all
from .families import *
from .families import __all__ as _family_all
from .random import *
from .random import __all__ as _random_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-probability")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_exceptions_all,
    *_family_all,
    *_random_all,
    *_types_all,
]

del _config_all
del _distr_all
del _exceptions_all
del _family_all
del _random_all
del _types_all
