from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf, isinf
from typing import Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_probability.types import BoolArray, ContinuousSupportShape1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    @property
    def infimum(self) -> float: ...

    @property
    def supremum(self) -> float: ...


@dataclass(frozen=True, slots=True)
class ContinuousSupport(Support):
    """
    Real interval between ``left`` and ``right``.

    Parameters
    ----------
    left : float, default -inf
        Lower endpoint.
    right : float, default inf
        Upper endpoint.
    left_closed : bool, default True
        Whether ``left`` belongs to the interval. Infinite endpoints are
        always open.
    right_closed : bool, default True
        Whether ``right`` belongs to the interval.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if isinf(self.left):
            object.__setattr__(self, "left_closed", False)
        if isinf(self.right):
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        above = xf >= self.left if self.left_closed else xf > self.left
        below = xf <= self.right if self.right_closed else xf < self.right
        mask = above & below
        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def infimum(self) -> float:
        return self.left

    @property
    def supremum(self) -> float:
        return self.right

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """Topological shape of the interval."""
        if self.left == self.right:
            if self.left_closed and self.right_closed:
                return ContinuousSupportShape1D.SINGLE_POINT
            return ContinuousSupportShape1D.EMPTY
        if self.left > self.right:
            return ContinuousSupportShape1D.EMPTY
        match isinf(self.left), isinf(self.right):
            case True, True:
                return ContinuousSupportShape1D.REAL_LINE
            case True, False:
                return ContinuousSupportShape1D.RAY_LEFT
            case False, True:
                return ContinuousSupportShape1D.RAY_RIGHT
            case _:
                return ContinuousSupportShape1D.BOUNDED_INTERVAL

@dataclass(frozen=True, slots=True)
class IntegerSupport(Support):
    """
    Consecutive integers ``min_k, min_k + 1, ..., max_k``.

    Parameters
    ----------
    min_k : int, default 0
        Smallest point of the support.
    max_k : int or None, default None
        Largest point of the support, ``None`` for an unbounded support.
    """

    min_k: int = 0
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.max_k is not None and self.max_k < self.min_k:
            raise ValueError("max_k must not be smaller than min_k.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        with np.errstate(invalid="ignore"):
            mask = (xf == np.floor(xf)) & (xf >= self.min_k)
        if self.max_k is not None:
            mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def infimum(self) -> float:
        return float(self.min_k)

    @property
    def supremum(self) -> float:
        return inf if self.max_k is None else float(self.max_k)


__all__ = [
    "Support",
    "ContinuousSupport",
    "IntegerSupport",
]
