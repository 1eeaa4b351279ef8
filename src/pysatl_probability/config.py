"""
Numerical Settings
==================

Tunable thresholds and iteration budgets of the numerical algorithms.

Settings are confined to the current execution context (see :mod:`contextvars`),
so overriding them inside a thread or an asyncio task does not leak into
other contexts.

Examples
--------
>>> from pysatl_probability.config import get_settings, numerical_settings
>>> get_settings().newton_max_iterations
200
>>> with numerical_settings(newton_max_iterations=10):
...     get_settings().newton_max_iterations
10
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any


@dataclass(frozen=True, slots=True)
class NumericalSettings:
    """
    Thresholds and budgets used by the numerical core.

    Parameters
    ----------
    binomial_summation_limit : int, default 1000
        Binomial inversion sums term by term below this number of trials.
    binomial_normal_variance : float, default 80.0
        Above this ``n * p * q`` (and at or above the summation limit) the
        Binomial inversion uses the normal-approximation correction series.
    newton_max_iterations : int, default 200
        Iteration budget of the safeguarded Newton search.
    categorical_tolerance : float, default 1e-12
        Allowed deviation of the categorical probabilities' sum from one.
    ppf_init_step : float, default 1.0
        Initial half-width of the bracket in the fitted inverse.
    ppf_expand_factor : float, default 2.0
        Growth factor of the bracket in the fitted inverse.
    ppf_max_expand : int, default 60
        Maximum number of bracket expansions in the fitted inverse.
    ppf_x_tol : float, default 1e-12
        Absolute tolerance of the root finder in the fitted inverse.
    ppf_max_iter : int, default 200
        Iteration budget of the root finder in the fitted inverse.
    """

    binomial_summation_limit: int = 1000
    binomial_normal_variance: float = 80.0
    newton_max_iterations: int = 200
    categorical_tolerance: float = 1e-12
    ppf_init_step: float = 1.0
    ppf_expand_factor: float = 2.0
    ppf_max_expand: int = 60
    ppf_x_tol: float = 1e-12
    ppf_max_iter: int = 200

    def __post_init__(self) -> None:
        if self.binomial_summation_limit < 0:
            raise ValueError("binomial_summation_limit must be non-negative")
        if self.newton_max_iterations <= 0:
            raise ValueError("newton_max_iterations must be positive")
        if self.categorical_tolerance < 0:
            raise ValueError("categorical_tolerance must be non-negative")
        if self.ppf_expand_factor <= 1.0:
            raise ValueError("ppf_expand_factor must be greater than 1")


DEFAULT_SETTINGS = NumericalSettings()

_settings: ContextVar[NumericalSettings] = ContextVar("numerical_settings", default=DEFAULT_SETTINGS)


def get_settings() -> NumericalSettings:
    """Return the settings active in the current context."""
    return _settings.get()


@contextmanager
def numerical_settings(**overrides: Any) -> Iterator[NumericalSettings]:
    """
    Temporarily override numerical settings in the current context.

    Parameters
    ----------
    **overrides
        Field values of :class:`NumericalSettings` to replace.

    Yields
    ------
    NumericalSettings
        The settings in effect inside the ``with`` block.

    Raises
    ------
    TypeError
        If an unknown setting name is given.
    """
    known = {f.name for f in fields(NumericalSettings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown numerical settings: {sorted(unknown)}")

    settings = replace(_settings.get(), **overrides)
    token = _settings.set(settings)
    try:
        yield settings
    finally:
        _settings.reset(token)


def reset_settings() -> None:
    """Restore the default settings in the current context."""
    _settings.set(DEFAULT_SETTINGS)


__all__ = [
    "NumericalSettings",
    "DEFAULT_SETTINGS",
    "get_settings",
    "numerical_settings",
    "reset_settings",
]
