"""
Process-wide table of the parametric families known by name.

The registry maps family names to the classes declared with
:func:`~pysatl_probability.families.parametrizations.family`, so that
distributions can be constructed by name.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_probability.families.parametrizations import ParametricFamily

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Name-to-class table of parametric families, shared by every instance.

    Examples
    --------
    >>> from pysatl_probability.families import configure_families_register
    >>> from pysatl_probability.types import FamilyName
    >>> Binomial = configure_families_register().get(FamilyName.BINOMIAL)
    >>> Binomial(n=16, p=0.25).mean()
    4.0
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _registered_families: dict[str, type[ParametricFamily]]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._registered_families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def get(cls, name: str) -> type[ParametricFamily]:
        """
        Look up the class registered under ``name``.

        Parameters
        ----------
        name : str
            Family name, usually a :class:`~pysatl_probability.types.FamilyName`.

        Returns
        -------
        type[ParametricFamily]
            Class of the requested family.

        Raises
        ------
        ValueError
            If nothing is registered under ``name``.
        """
        self = cls()
        try:
            return self._registered_families[name]
        except KeyError:
            raise ValueError(f"No family {name} found in register") from None

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._registered_families

    @classmethod
    def register(cls, family: type[ParametricFamily]) -> None:
        """
        Add a family class under its ``__family_name__``.

        Parameters
        ----------
        family : type[ParametricFamily]
            Family class declared with the ``@family`` decorator.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        self = cls()
        name = family.__family_name__
        if name in self._registered_families:
            raise ValueError(f"Family {name} already found in register")
        self._registered_families[name] = family
        logger.debug("Registered family %s", name)

    @classmethod
    def list_registered_families(cls) -> list[str]:
        return list(cls()._registered_families)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance together with all registered families."""
        cls._instance = None


__all__ = [
    "ParametricFamilyRegister",
]
