"""
Parametrized distribution families and parameter constraints.

A concrete distribution is declared as a class decorated with :func:`family`.
The decorator turns it into a frozen, slotted dataclass whose fields are the
natural parameters, collects the predicates marked with :func:`constraint`
and validates them on construction. Derived constants are computed once
after validation, in the ``_precompute`` hook.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, fields
from inspect import isfunction
from typing import TYPE_CHECKING, dataclass_transform

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_probability.types import EuclideanDistributionType, FamilyName


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values of a family.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class ParametricFamily:
    """
    Base class of parametrized distributions.

    Subclasses are declared with the :func:`family` decorator and hold their
    natural parameters as dataclass fields.
    """

    __slots__ = ()

    # These attributes are set by the @family decorator
    __family_name__: ClassVar[FamilyName]
    __distribution_type__: ClassVar[EuclideanDistributionType]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    def __post_init__(self) -> None:
        self.validate()
        self._precompute()

    def _precompute(self) -> None:
        """Compute derived constants; parameters are already validated here."""

    def _cache(self, name: str, value: Any) -> None:
        """Store a derived constant on the frozen instance."""
        object.__setattr__(self, name, value)

    @property
    def name(self) -> str:
        """Get the name of the family."""
        return self.__class__.__family_name__

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return self.__class__.__distribution_type__

    @property
    def parameters(self) -> dict[str, Any]:
        """
        Get the natural parameters as a dictionary.

        Init fields marked ``metadata={"derived": True}`` are left out.
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if f.init and not f.metadata.get("derived", False)
        }

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints of the family."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints of the family.

        Raises
        ------
        ValueError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ValueError(f'Constraint "{constraint.description}" does not hold')


_CONSTRAINT_MARK = "__constraint_description__"


def constraint[**P](description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark a predicate method of a family as a parameter constraint.

    Parameters
    ----------
    description : str
        Text of the condition, quoted in the error raised when it fails.

    Examples
    --------
    >>> @constraint(description="sigma > 0")
    ... def check_sigma_positive(self) -> bool:
    ...     return self.sigma > 0
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        setattr(func, _CONSTRAINT_MARK, description)
        return func

    return decorator


def _collect_constraints(cls: type[ParametricFamily]) -> list[ParametrizationConstraint]:
    collected = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if hasattr(attr.__func__, _CONSTRAINT_MARK):
                raise TypeError(f"@constraint {attr_name!r} must be an instance method")
        elif isfunction(attr) and hasattr(attr, _CONSTRAINT_MARK):
            collected.append(ParametrizationConstraint(getattr(attr, _CONSTRAINT_MARK), attr))
    return collected


@dataclass_transform(frozen_default=True)
def family[F: ParametricFamily](
    *,
    name: FamilyName,
    distribution_type: EuclideanDistributionType,
) -> Callable[[type[F]], type[F]]:
    """
    Declare a class as a parametrized distribution family.

    Parameters
    ----------
    name : FamilyName
        Name of the family in the registry.
    distribution_type : EuclideanDistributionType
        Kind and dimension of the distributions of the family.

    Returns
    -------
    Callable[[type[F]], type[F]]
        Class decorator.

    Notes
    -----
    The class is converted to a frozen, slotted dataclass and its
    ``@constraint`` methods are collected for validation on construction.
    """

    def decorator(cls: type[F]) -> type[F]:
        cls = dataclass(slots=True, frozen=True)(cls)

        # Attach metadata
        cls.__family_name__ = name
        cls.__distribution_type__ = distribution_type

        cls._constraints = _collect_constraints(cls)
        return cls

    return decorator


__all__ = [
    "ParametrizationConstraint",
    "ParametricFamily",
    "constraint",
    "family",
]
