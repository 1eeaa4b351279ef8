"""
Cauchy distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
from typing import TYPE_CHECKING

from pysatl_probability.distributions.capabilities import (
    Continuous,
    Entropy,
    Inverse,
    Median,
    Modes,
    Sample,
    check_probability,
)
from pysatl_probability.distributions.support import ContinuousSupport
from pysatl_probability.families.builtins.continuous.gaussian import sample_standard_gaussian
from pysatl_probability.families.parametrizations import ParametricFamily, constraint, family
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.random.source import Source


@family(name=FamilyName.CAUCHY, distribution_type=UnivariateContinuous)
class Cauchy(
    ParametricFamily,
    Continuous,
    Inverse[float],
    Sample[float],
    Median,
    Modes[float],
    Entropy,
):
    """
    Cauchy distribution.

    Parameters
    ----------
    loc : float
        Location parameter.
    gamma : float
        Scale parameter.

    Notes
    -----
    Mean, variance and higher moments are undefined, so the family does not
    implement the corresponding capabilities.
    """

    loc: float
    gamma: float

    @constraint(description="gamma > 0")
    def check_scale_positive(self) -> bool:
        return self.gamma > 0

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    def density(self, x: float) -> float:
        deviation = x - self.loc
        return self.gamma / (math.pi * (self.gamma * self.gamma + deviation * deviation))

    def cdf(self, x: float) -> float:
        return math.atan((x - self.loc) / self.gamma) / math.pi + 0.5

    def inverse(self, p: float) -> float:
        check_probability(p)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        return self.loc + self.gamma * math.tan(math.pi * (p - 0.5))

    def sample(self, source: Source) -> float:
        # The ratio of two independent standard normal variates is standard Cauchy.
        a = sample_standard_gaussian(source)
        b = sample_standard_gaussian(source)
        return self.loc + self.gamma * a / (abs(b) + sys.float_info.epsilon)

    def median(self) -> float:
        return self.loc

    def modes(self) -> list[float]:
        return [self.loc]

    def entropy(self) -> float:
        return math.log(4.0 * math.pi * self.gamma)


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return
    ParametricFamilyRegister.register(Cauchy)


__all__ = [
    "Cauchy",
    "configure_cauchy_family",
]
