"""
Characteristics API
===================

Name-based access to the characteristics of a distribution.

:func:`query_method` resolves a characteristic name (e.g. ``"pdf"``,
``"cdf"``, ``"ppf"``) to the capability method the distribution implements.
When the capability is missing, a numerical conversion from the registered
fallbacks is fitted instead (currently ``cdf -> ppf`` for univariate
continuous distributions). :class:`GenericCharacteristic` is a callable
descriptor over :func:`query_method`.

Notes
-----
- The characteristic name controls *what* to compute.
- ``**options`` control *how* a fallback is fitted (e.g. bracketing
  tolerances); analytical methods ignore them.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from pysatl_probability.distributions.computation import (
    ComputationMethod,
    analytical_method,
)
from pysatl_probability.distributions.fitters import fit_cdf_to_ppf_1C
from pysatl_probability.types import CharacteristicName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_probability.distributions.capabilities import Distribution
    from pysatl_probability.distributions.computation import Computation
    from pysatl_probability.types import EuclideanDistributionType, GenericCharacteristicName


_FALLBACKS: dict[
    tuple[EuclideanDistributionType, GenericCharacteristicName], ComputationMethod[Any, Any]
] = {
    (UnivariateContinuous, CharacteristicName.PPF): ComputationMethod[float, float](
        target=CharacteristicName.PPF,
        sources=[CharacteristicName.CDF],
        fitter=fit_cdf_to_ppf_1C,
    ),
}


def query_method(
    distribution: Distribution, name: GenericCharacteristicName, **options: Any
) -> Computation[Any, Any]:
    """
    Resolve a characteristic of a distribution.

    Parameters
    ----------
    distribution : Distribution
        Distribution to query.
    name : str
        Characteristic name, one of :class:`~pysatl_probability.types.CharacteristicName`.
    **options
        Options passed to the fitter when a fallback conversion is used.

    Returns
    -------
    Computation
        The analytical method if the distribution implements the capability,
        otherwise a fitted conversion.

    Raises
    ------
    RuntimeError
        If the distribution provides neither the capability nor the sources
        of a fallback conversion.
    """
    method = analytical_method(distribution, name)
    if method is not None:
        return method

    fallback = _FALLBACKS.get((distribution.distribution_type, name))
    if fallback is not None and all(
        analytical_method(distribution, source) is not None for source in fallback.sources
    ):
        return fallback.fit(distribution, **options)

    raise RuntimeError(
        f"Characteristic '{name}' is not available for {type(distribution).__name__}."
    )


@dataclass(slots=True, frozen=True)
class GenericCharacteristic[In, Out]:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : str
        Characteristic identifier (e.g. ``"pdf"``, ``"cdf"`` or ``"ppf"``).

    Examples
    --------
    >>> from pysatl_probability.distributions.characteristics import PPF
    >>> from pysatl_probability.families.builtins import Gamma
    >>> round(PPF(Gamma(k=1.0, theta=1.0), 0.5), 8)
    0.69314718
    """

    name: GenericCharacteristicName

    def __call__(self, distribution: Distribution, data: In, **options: Any) -> Out:
        """
        Evaluate the characteristic of ``distribution`` at ``data``.

        Parameters
        ----------
        distribution : Distribution
            Distribution to evaluate.
        data : In
            Argument of the characteristic, ``None`` for scalar summaries.
        **options
            Fitter options, see :func:`query_method`.
        """
        method = query_method(distribution, self.name, **options)
        return cast(Out, method(data))


PDF = GenericCharacteristic[float, float](CharacteristicName.PDF)
PMF = GenericCharacteristic[int, float](CharacteristicName.PMF)
CDF = GenericCharacteristic[float, float](CharacteristicName.CDF)
PPF = GenericCharacteristic[float, float](CharacteristicName.PPF)


__all__ = [
    "query_method",
    "GenericCharacteristic",
    "PDF",
    "PMF",
    "CDF",
    "PPF",
]
