"""
Binomial distribution family implementation.

The probability mass uses the saddle-point expansion of Loader, the cumulative
distribution function the regularized incomplete beta function, and the
quantile function picks one of three algorithms depending on the number of
trials and the variance:

1. term-by-term summation for a moderate number of trials;
2. the normal-approximation correction series of Moorhead when the variance
   is large;
3. a Newton search from the mode, safeguarded by bisection, otherwise.

Every result is settled to the smallest ``k`` with ``cdf(k) >= p``.

References
----------
.. [1] C. Loader, "Fast and Accurate Computation of Binomial Probabilities",
   2000.
.. [2] S. Moorhead, "Efficient evaluation of the inverse Binomial cumulative
   distribution function where the number of trials is large", 2013.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import field
from typing import TYPE_CHECKING, Self

from scipy.special import betainc, betaincc

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
from pysatl_probability.exceptions import ConvergenceError
from pysatl_probability.families.builtins.continuous.gaussian import standard_quantile
from pysatl_probability.families.parametrizations import ParametricFamily, constraint, family
from pysatl_probability.families.registry import ParametricFamilyRegister
from pysatl_probability.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_probability.random.source import Source

logger = logging.getLogger(__name__)

_LN_2PI = math.log(2.0 * math.pi)

# stirlerr(n) for n = 0, ..., 15, see Loader (2000), p. 7.
_SFE = (
    0.000000000000000000e00,
    8.106146679532725822e-02,
    4.134069595540929409e-02,
    2.767792568499833915e-02,
    2.079067210376509311e-02,
    1.664469118982119216e-02,
    1.387612882307074800e-02,
    1.189670994589177010e-02,
    1.041126526197209650e-02,
    9.255462182712732918e-03,
    8.330563433362871256e-03,
    7.573675487951840794e-03,
    6.942840107209529866e-03,
    6.408994188004207068e-03,
    5.951370112758847736e-03,
    5.554733551962801371e-03,
)

_S0 = 1.0 / 12.0
_S1 = 1.0 / 360.0
_S2 = 1.0 / 1260.0
_S3 = 1.0 / 1680.0
_S4 = 1.0 / 1188.0

# Entropy: larger trial counts with a large variance use the normal approximation.
_ENTROPY_NORMAL_TRIALS = 10_000
# Masses below this value do not contribute to the entropy sum.
_NEGLIGIBLE_MASS = 1e-300


def stirlerr(n: float) -> float:
    """
    Error of the Stirling approximation, ``ln(n!) - ln(sqrt(2 pi n) (n / e)^n)``.

    Exact table values are used below 16, a Stirling-De Moivre series with a
    decreasing number of terms above.
    """
    if n < 16.0:
        return _SFE[int(n)]
    nn = n * n
    if n > 500.0:
        return (_S0 - _S1 / nn) / n
    if n > 80.0:
        return (_S0 - (_S1 - _S2 / nn) / nn) / n
    if n > 35.0:
        return (_S0 - (_S1 - (_S2 - _S3 / nn) / nn) / nn) / n
    return (_S0 - (_S1 - (_S2 - (_S3 - _S4 / nn) / nn) / nn) / nn) / n


def _ln_d0(x: float, np_: float) -> float:
    """Deviance term ``x ln(x / np) + np - x``."""
    if abs(x - np_) < 0.1 * (x + np_):
        # x / np is close to one, use the series expansion.
        s = (x - np_) ** 2 / (x + np_)
        v = (x - np_) / (x + np_)
        ej = 2.0 * x * v
        j = 1
        while True:
            ej *= v * v
            s1 = s + ej / (2 * j + 1)
            if s1 == s:
                return s1
            s = s1
            j += 1
    return x * math.log(x / np_) + np_ - x


@family(name=FamilyName.BINOMIAL, distribution_type=UnivariateDiscrete)
class Binomial(
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
    Binomial distribution: the number of successes in ``n`` independent trials.

    Parameters
    ----------
    n : int
        Number of trials, ``n >= 0``.
    p : float
        Probability of success, ``0 < p < 1``.
    q : float, optional
        Probability of failure, equal to ``1 - p`` up to rounding. Computed
        when omitted; use :meth:`with_failure` to keep a tiny failure
        probability exact.

    Examples
    --------
    >>> d = Binomial(n=250, p=0.55)
    >>> d.inverse(0.025), d.inverse(0.1)
    (122, 127)
    """

    n: int
    p: float
    q: float = field(  # type: ignore[assignment]
        default=None, kw_only=True, repr=False, compare=False, metadata={"derived": True}
    )
    _np: float = field(init=False, repr=False, compare=False)
    _nq: float = field(init=False, repr=False, compare=False)
    _npq: float = field(init=False, repr=False, compare=False)
    _ln_p: float = field(init=False, repr=False, compare=False)
    _ln_q: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.q is None:
            self._cache("q", 1.0 - self.p)
        ParametricFamily.__post_init__(self)

    @classmethod
    def with_failure(cls, n: int, q: float) -> Self:
        """Construct the distribution from its failure probability ``q``."""
        return cls(n=n, p=1.0 - q, q=q)

    @constraint(description="n is a non-negative integer")
    def check_trials(self) -> bool:
        return isinstance(self.n, int) and not isinstance(self.n, bool) and self.n >= 0

    @constraint(description="0 < p < 1")
    def check_probability_open(self) -> bool:
        return 0.0 < self.p <= 1.0 and 0.0 < self.q < 1.0

    @constraint(description="p + q = 1")
    def check_complementary(self) -> bool:
        return math.isclose(self.p + self.q, 1.0, rel_tol=0.0, abs_tol=1e-15)

    def _precompute(self) -> None:
        self._cache("_np", self.n * self.p)
        self._cache("_nq", self.n * self.q)
        self._cache("_npq", self._np * self.q)
        # Take the logarithm of the smaller probability and log1p of the other.
        if self.p <= self.q:
            self._cache("_ln_p", math.log(self.p))
            self._cache("_ln_q", math.log1p(-self.p))
        else:
            self._cache("_ln_p", math.log1p(-self.q))
            self._cache("_ln_q", math.log(self.q))

    @property
    def support(self) -> IntegerSupport:
        return IntegerSupport(0, self.n)

    def mass(self, x: int) -> float:
        n = self.n
        if x < 0 or x > n:
            return 0.0
        if x == 0:
            return math.exp(n * self._ln_q)
        if x == n:
            return math.exp(n * self._ln_p)
        xf = float(x)
        n_m_x = float(n - x)
        ln_c = (
            stirlerr(n)
            - stirlerr(xf)
            - stirlerr(n_m_x)
            - _ln_d0(xf, self._np)
            - _ln_d0(n_m_x, self._nq)
        )
        return math.exp(ln_c - 0.5 * (_LN_2PI + math.log(xf) + math.log(n_m_x / n)))

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        n = self.n
        if x >= n:
            return 1.0
        k = math.floor(x)
        if self.p <= self.q:
            return float(betaincc(k + 1, n - k, self.p))
        return float(betainc(n - k, k + 1, self.q))

    def inverse(self, p: float) -> int:
        check_probability(p)
        if p == 0.0:
            return 0
        if p == 1.0:
            return self.n

        settings = get_settings()
        if self.n < settings.binomial_summation_limit:
            estimate = self._inverse_by_summation(p)
            if estimate is not None:
                logger.debug("Binomial(n=%d) inverse(%r): summation regime", self.n, p)
                return self._search(p, estimate, settings.newton_max_iterations)
            logger.debug(
                "Binomial(n=%d) inverse(%r): first summation term underflows, "
                "falling back to Newton search",
                self.n,
                p,
            )
        elif self._npq > settings.binomial_normal_variance:
            logger.debug("Binomial(n=%d) inverse(%r): normal-approximation regime", self.n, p)
            estimate = math.floor(self._normal_approximation(p))
            return self._search(p, estimate, settings.newton_max_iterations)
        else:
            logger.debug("Binomial(n=%d) inverse(%r): Newton regime", self.n, p)
        return self._search(p, self.modes()[0], settings.newton_max_iterations)

    def _inverse_by_summation(self, u: float) -> int | None:
        """Sum the masses from the nearer end, ``None`` if the first term underflows."""
        n, p, q = self.n, self.p, self.q
        if u <= self.cdf(n // 2):
            a = math.exp(n * self._ln_q)
            if a == 0.0:
                return None
            ratio = p / q
            total = a - u
            k = 1
            while total < 0.0 and k <= n:
                a *= ratio * (n - k + 1) / k
                total += a
                k += 1
            return k - 1

        a = math.exp(n * self._ln_p)
        if a == 0.0:
            return None
        ratio = q / p
        total = (1.0 - u) - a
        k = 1
        while total >= 0.0 and k <= n:
            a *= ratio * (n - k + 1) / k
            total -= a
            k += 1
        return n - k + 1

    def _normal_approximation(self, u: float) -> float:
        """Cornish-Fisher type expansion of the quantile, see Moorhead (2013), p. 7."""
        p = self.p
        w = standard_quantile(u)
        w2 = w * w
        w3 = w2 * w
        w4 = w3 * w
        w5 = w4 * w
        w6 = w5 * w
        sd = math.sqrt(self._npq)
        sd_em1 = 1.0 / sd
        sd_em2 = 1.0 / self._npq
        sd_em3 = sd_em1 * sd_em2
        sd_em4 = sd_em2 * sd_em2
        p2 = p * p
        p3 = p2 * p
        p4 = p2 * p2

        return (
            self._np
            + sd * w
            + ((p + 1.0) / 3.0 - (2.0 * p - 1.0) * w2 / 6.0)
            + sd_em1
            * (
                w3 * (2.0 * p2 - 2.0 * p - 1.0) / 72.0
                - w * (7.0 * p2 - 7.0 * p + 1.0) / 36.0
            )
            + sd_em2
            * (2.0 * p - 1.0)
            * (p + 1.0)
            * (p - 2.0)
            * (3.0 * w4 + 7.0 * w2 - 16.0)
            / 1620.0
            + sd_em3
            * (
                w5 * (4.0 * p4 - 8.0 * p3 - 48.0 * p2 + 52.0 * p - 23.0) / 17280.0
                + w3 * (256.0 * p4 - 512.0 * p3 - 147.0 * p2 + 403.0 * p - 137.0) / 38880.0
                - w * (433.0 * p4 - 866.0 * p3 - 921.0 * p2 + 1354.0 * p - 671.0) / 38880.0
            )
            + sd_em4
            * (
                w6 * (2.0 * p - 1.0) * (p2 - p + 1.0) * (p2 - p + 19.0) / 34020.0
                + w4
                * (2.0 * p - 1.0)
                * (9.0 * p4 - 18.0 * p3 - 35.0 * p2 + 44.0 * p - 25.0)
                / 15120.0
                + w2
                * (2.0 * p - 1.0)
                * (923.0 * p4 - 1846.0 * p3 + 5271.0 * p2 - 4348.0 * p + 5189.0)
                / 408240.0
                - 4.0
                * (2.0 * p - 1.0)
                * (p + 1.0)
                * (p - 2.0)
                * (23.0 * p2 - 23.0 * p + 2.0)
                / 25515.0
            )
        )

    def _search(self, u: float, start: int, max_iterations: int) -> int:
        """
        Find the smallest ``k`` with ``cdf(k) >= u`` starting from ``start``.

        Newton steps ``(u - cdf(k)) / mass(k)`` are taken while they stay
        inside the bracket ``lo < k <= hi`` known so far; other steps are
        replaced by bisection. Once a step is shorter than one half, the
        search walks to the neighbour on the side of the answer.

        Raises
        ------
        ConvergenceError
            If the bracket does not close within ``max_iterations`` steps.
        """
        lo, hi = -1, self.n
        k = min(max(start, 0), self.n)
        for iteration in range(1, max_iterations + 1):
            c = self.cdf(k)
            if c >= u:
                hi = k
            else:
                lo = k
            if hi - lo <= 1:
                logger.debug(
                    "Binomial(n=%d) inverse(%r) settled at %d after %d iterations",
                    self.n,
                    u,
                    hi,
                    iteration,
                )
                return hi

            mass = self.mass(k)
            step = (u - c) / mass if mass > 0.0 else math.nan
            if not math.isfinite(step):
                candidate = None
            elif abs(step) < 0.5:
                candidate = k - 1 if c >= u else k + 1
            else:
                candidate = k + math.floor(step + 0.5)
            if candidate is None or not lo < candidate < hi:
                candidate = (lo + hi) // 2
            k = candidate

        raise ConvergenceError(
            "Newton", max_iterations, f"Binomial(n={self.n}, p={self.p}) at u={u}"
        )

    def sample(self, source: Source) -> int:
        return self.inverse(source.read_float())

    def mean(self) -> float:
        return self._np

    def variance(self) -> float:
        return self._npq

    def skewness(self) -> float:
        """Skewness; ``nan`` for the degenerate ``n = 0``."""
        if self._npq == 0.0:
            return math.nan
        return (1.0 - 2.0 * self.p) / math.sqrt(self._npq)

    def kurtosis(self) -> float:
        """Excess kurtosis; ``nan`` for the degenerate ``n = 0``."""
        if self._npq == 0.0:
            return math.nan
        return (1.0 - 6.0 * self.p * self.q) / self._npq

    def median(self) -> float:
        np_ = self._np
        if np_.is_integer() or (self.p == 0.5 and self.n % 2 != 0):
            return np_
        rounded = math.floor(np_ + 0.5)
        if (
            self.p <= 1.0 - math.log(2.0)
            or self.p >= math.log(2.0)
            or abs(rounded - np_) <= min(self.p, self.q)
        ):
            return float(rounded)
        settings = get_settings()
        if (
            self.n > settings.binomial_summation_limit
            and self._npq > settings.binomial_normal_variance
        ):
            return float(math.floor(np_))
        return float(self.inverse(0.5))

    def modes(self) -> list[int]:
        if self.p == 1.0:
            return [self.n]
        r = self.p * (self.n + 1)
        if not r.is_integer():
            return [math.floor(r)]
        return [int(r) - 1, int(r)]

    def entropy(self) -> float:
        if self.n > _ENTROPY_NORMAL_TRIALS and self._npq > get_settings().binomial_normal_variance:
            return 0.5 * (math.log(2.0 * math.pi * self._npq) + 1.0)

        # The mass decreases away from the mode, stop once it is negligible.
        mode = self.modes()[0]
        total = 0.0
        for points in (range(mode, self.n + 1), range(mode - 1, -1, -1)):
            for k in points:
                m = self.mass(k)
                if m < _NEGLIGIBLE_MASS:
                    break
                total -= m * math.log(m)
        return total


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return
    ParametricFamilyRegister.register(Binomial)


__all__ = [
    "Binomial",
    "configure_binomial_family",
    "stirlerr",
]
