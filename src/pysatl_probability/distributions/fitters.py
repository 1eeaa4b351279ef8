from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from collections.abc import Callable
from math import isfinite
from typing import TYPE_CHECKING, Any, cast

from mypy_extensions import KwArg
from scipy import optimize as _sp_optimize

from pysatl_probability.config import get_settings
from pysatl_probability.distributions.capabilities import check_probability
from pysatl_probability.distributions.computation import (
    FittedComputationMethod,
    analytical_method,
)
from pysatl_probability.exceptions import ConvergenceError
from pysatl_probability.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_probability.distributions.capabilities import Distribution
    from pysatl_probability.types import GenericCharacteristicName, ScalarFunc

logger = logging.getLogger(__name__)


def _resolve(distribution: Distribution, name: GenericCharacteristicName) -> ScalarFunc:
    """
    Resolve a scalar characteristic the distribution implements analytically.

    Raises
    ------
    RuntimeError
        If the distribution does not implement the characteristic.
    """
    method = analytical_method(distribution, name)
    if method is None:
        raise RuntimeError(
            f"Distribution {type(distribution).__name__} does not provide '{name}' analytically."
        )

    def _wrap(x: float) -> float:
        return float(method(x))

    return _wrap


def _ppf_brentq_from_cdf(
    cdf: ScalarFunc,
    *,
    lower: float = float("-inf"),
    upper: float = float("inf"),
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 60,
    x_tol: float = 1e-12,
    max_iter: int = 200,
) -> ScalarFunc:
    """
    Build a scalar ``ppf`` from a continuous ``cdf`` by bracket expansion and
    Brent's root finder.

    Parameters
    ----------
    cdf : Callable[[float], float]
        Continuous, non-decreasing cumulative distribution function.
    lower, upper : float
        Support bounds. A finite bound is used as a fixed end of the bracket,
        an infinite one is approached by geometric expansion.
    init_step : float, default 1.0
        Initial width of the bracket on the unbounded side(s).
    expand_factor : float, default 2.0
        Growth factor of the bracket width per expansion.
    max_expand : int, default 60
        Maximum number of expansions.
    x_tol : float, default 1e-12
        Absolute tolerance of the root finder.
    max_iter : int, default 200
        Iteration budget of the root finder.

    Returns
    -------
    Callable[[float], float]
        Scalar ``ppf`` such that ``cdf(ppf(q)) ≈ q``. ``q = 0`` maps to
        ``lower`` and ``q = 1`` to ``upper``.

    Raises
    ------
    ValueError
        If ``q`` is outside ``[0, 1]``.
    ConvergenceError
        If the target cannot be bracketed or the root finder does not converge.
    """
    if isfinite(lower) and isfinite(upper):
        x0 = 0.5 * (lower + upper)
    elif isfinite(lower):
        x0 = lower
    elif isfinite(upper):
        x0 = upper
    else:
        x0 = 0.0

    def _bracket(q: float) -> tuple[float, float]:
        step = init_step
        left = lower if isfinite(lower) else x0 - step
        right = upper if isfinite(upper) else x0 + step
        f_left = 0.0 if isfinite(lower) else float(cdf(left))
        f_right = 1.0 if isfinite(upper) else float(cdf(right))

        expansions = 0
        while not (f_left <= q <= f_right):
            if expansions >= max_expand:
                logger.warning(
                    "Could not bracket q=%g within [%g, %g] after %d expansions",
                    q,
                    left,
                    right,
                    expansions,
                )
                raise ConvergenceError("bracket expansion", expansions, f"q={q}")
            step *= expand_factor
            if q < f_left:
                left -= step
                f_left = float(cdf(left))
            if q > f_right:
                right += step
                f_right = float(cdf(right))
            expansions += 1

        logger.debug("Bracketed q=%g in [%g, %g] after %d expansions", q, left, right, expansions)
        return left, right

    def _ppf(q: float) -> float:
        check_probability(q)
        if q == 0.0:
            return lower
        if q == 1.0:
            return upper

        left, right = _bracket(q)
        root, result = _sp_optimize.brentq(
            lambda x: float(cdf(x)) - q,
            left,
            right,
            xtol=x_tol,
            maxiter=max_iter,
            full_output=True,
            disp=False,
        )
        if not result.converged:
            raise ConvergenceError("brentq", result.iterations, result.flag)
        return float(root)

    return _ppf


def fit_cdf_to_ppf_1C(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[float, float]:
    """
    Fit ``ppf`` from the analytical ``cdf`` of a univariate continuous
    distribution.

    Parameters
    ----------
    distribution : Distribution
        Distribution providing ``cdf`` and a continuous ``support``.
    **options
        Overrides of the bracketing parameters (``init_step``,
        ``expand_factor``, ``max_expand``, ``x_tol``, ``max_iter``); the
        defaults come from :func:`~pysatl_probability.config.get_settings`.

    Returns
    -------
    FittedComputationMethod[float, float]
        Fitted ``cdf -> ppf`` conversion.
    """
    settings = get_settings()
    cdf_func = _resolve(distribution, CharacteristicName.CDF)
    support = distribution.support

    ppf_func = _ppf_brentq_from_cdf(
        cdf_func,
        lower=support.infimum,
        upper=support.supremum,
        init_step=float(options.get("init_step", settings.ppf_init_step)),
        expand_factor=float(options.get("expand_factor", settings.ppf_expand_factor)),
        max_expand=int(options.get("max_expand", settings.ppf_max_expand)),
        x_tol=float(options.get("x_tol", settings.ppf_x_tol)),
        max_iter=int(options.get("max_iter", settings.ppf_max_iter)),
    )

    def _ppf(q: float, **kwargs: Any) -> float:
        return ppf_func(q)

    ppf_cast = cast(Callable[[float, KwArg(Any)], float], _ppf)
    return FittedComputationMethod[float, float](
        target=CharacteristicName.PPF, sources=[CharacteristicName.CDF], func=ppf_cast
    )


__all__ = [
    "fit_cdf_to_ppf_1C",
]
