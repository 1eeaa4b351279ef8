"""
Sampling
========

This module defines the sampling combinator and sample containers:

- :class:`Independent` – a lazy, unbounded sequence of independent draws.
- :class:`ArraySample` – an array-backed container of collected draws.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice
from typing import TYPE_CHECKING

import numpy as np

from pysatl_probability.random.source import default_source

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from pysatl_probability.distributions.capabilities import Sample
    from pysatl_probability.random.source import Source


class ArraySample:
    """
    Array-backed sample container.

    Samples are stored as a 2D floating-point array of shape
    ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)


class Independent[T]:
    """
    Unbounded sequence of independent draws from a distribution.

    Each element is produced on demand by exactly one call of
    ``distribution.sample(source)``; nothing is buffered. The sequence borrows
    both the distribution and the source and owns neither, so the source
    advances exactly as far as the consumer iterates.

    Parameters
    ----------
    distribution : Sample
        Distribution implementing the sampling capability.
    source : Source, optional
        Source of randomness. Defaults to the source of the current context,
        see :func:`~pysatl_probability.random.default_source`.

    Examples
    --------
    >>> from pysatl_probability.distributions.sampling import Independent
    >>> from pysatl_probability.families.builtins import Uniform
    >>> from pysatl_probability.random import Xorshift128Plus
    >>> draws = Independent(Uniform(a=0.0, b=1.0), Xorshift128Plus()).take(10)
    >>> draws.shape
    (10, 1)
    """

    __slots__ = ("_distribution", "_source")

    def __init__(self, distribution: Sample[T], source: Source | None = None) -> None:
        self._distribution = distribution
        self._source = default_source() if source is None else source

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self._distribution.sample(self._source)

    def take(self, n: int) -> ArraySample:
        """
        Collect the next ``n`` draws.

        Returns
        -------
        ArraySample
            Container of shape ``(n, 1)``.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError("Number of draws must be non-negative.")
        data = np.fromiter(
            (float(x) for x in islice(self, n)),  # type: ignore[arg-type]
            dtype=float,
            count=n,
        )
        return ArraySample(data.reshape(n, 1))


__all__ = [
    "ArraySample",
    "Independent",
]
