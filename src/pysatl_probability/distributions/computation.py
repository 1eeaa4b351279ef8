"""
Computation Primitives
======================

Callables that evaluate a single characteristic of a distribution:

- :class:`AnalyticalComputation` – a capability method the distribution
  implements itself (e.g. ``Gaussian.inverse``).
- :class:`FittedComputationMethod` – a numerical conversion built from other
  characteristics (e.g. ``ppf`` from ``cdf``), ready to be called.
- :class:`ComputationMethod` – a factory that fits a conversion for a given
  distribution.
- :func:`analytical_method` – resolves a characteristic name to the
  capability method a distribution implements.

Notes
-----
Callables are scalar: characteristics taking an argument (``pdf``, ``pmf``,
``cdf``, ``ppf``) receive one value, summaries (``mean``, ``median``, ...)
receive ``None``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, cast, runtime_checkable

from mypy_extensions import KwArg

from pysatl_probability.distributions.capabilities import (
    Continuous,
    Discrete,
    Distribution,
    Entropy,
    Inverse,
    Kurtosis,
    Mean,
    Median,
    Modes,
    Skewness,
    Variance,
)
from pysatl_probability.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_probability.types import GenericCharacteristicName


@runtime_checkable
class Computation[In, Out](Protocol):
    """Callable for a single characteristic named by ``target``."""

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g. ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Bound capability method adapted to the computation signature.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """
    Numerical conversion bound to one distribution.

    Parameters
    ----------
    target : str
        Characteristic the conversion evaluates.
    sources : Sequence[str]
        Characteristics the conversion is computed from.
    func : callable
        Evaluates ``target`` at one point.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class ComputationMethod[In, Out]:
    """
    Recipe that builds a :class:`FittedComputationMethod` for a distribution.

    Parameters
    ----------
    target : str
        Characteristic the fitted conversion evaluates.
    sources : Sequence[str]
        Characteristics the distribution must provide analytically.
    fitter : Callable[[Distribution, KwArg(Any)], FittedComputationMethod]
        Builds the conversion for a concrete distribution.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    fitter: Callable[[Distribution, KwArg(Any)], FittedComputationMethod[In, Out]]

    def fit(self, distribution: Distribution, **options: Any) -> FittedComputationMethod[In, Out]:
        """Build the conversion for ``distribution``."""
        return self.fitter(distribution, **options)


# Characteristic name -> (capability protocol, method name, takes an argument).
_CAPABILITY_METHODS: dict[CharacteristicName, tuple[type, str, bool]] = {
    CharacteristicName.PDF: (Continuous, "density", True),
    CharacteristicName.PMF: (Discrete, "mass", True),
    CharacteristicName.CDF: (Distribution, "cdf", True),
    CharacteristicName.PPF: (Inverse, "inverse", True),
    CharacteristicName.MEAN: (Mean, "mean", False),
    CharacteristicName.VAR: (Variance, "variance", False),
    CharacteristicName.SKEW: (Skewness, "skewness", False),
    CharacteristicName.KURT: (Kurtosis, "kurtosis", False),
    CharacteristicName.MEDIAN: (Median, "median", False),
    CharacteristicName.MODES: (Modes, "modes", False),
    CharacteristicName.ENTROPY: (Entropy, "entropy", False),
}


def analytical_method(
    distribution: Distribution, name: GenericCharacteristicName
) -> AnalyticalComputation[Any, Any] | None:
    """
    Wrap the capability method implementing ``name`` into a computation.

    Parameters
    ----------
    distribution : Distribution
        Distribution to inspect.
    name : str
        Characteristic name, one of :class:`~pysatl_probability.types.CharacteristicName`.

    Returns
    -------
    AnalyticalComputation or None
        ``None`` if the name is unknown or the distribution does not implement
        the corresponding capability.
    """
    try:
        capability, attribute, takes_argument = _CAPABILITY_METHODS[CharacteristicName(name)]
    except ValueError:
        return None
    if not isinstance(distribution, capability):
        return None

    method = getattr(distribution, attribute)
    if takes_argument:

        def _call(data: Any, **options: Any) -> Any:
            return method(data)

    else:

        def _call(data: Any, **options: Any) -> Any:
            return method()

    return AnalyticalComputation[Any, Any](
        target=name, func=cast(Callable[[Any, KwArg(Any)], Any], _call)
    )


__all__ = [
    "Computation",
    "AnalyticalComputation",
    "FittedComputationMethod",
    "ComputationMethod",
    "analytical_method",
]
