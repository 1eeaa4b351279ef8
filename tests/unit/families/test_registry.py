"""
Tests for the parametric family registry and its configuration.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import pytest

from pysatl_probability.families import (
    Binomial,
    Gaussian,
    ParametricFamilyRegister,
    configure_families_register,
    reset_families_register,
)
from pysatl_probability.families.builtins import configure_gaussian_family
from pysatl_probability.types import FamilyName


class TestConfiguration:
    """Built-in registration and registry reset."""

    def setup_method(self):
        """Configure a fresh registry."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_cached(self):
        assert configure_families_register() is self.registry

    def test_all_builtin_families_registered(self):
        assert set(self.registry.list_registered_families()) == set(FamilyName)

    def test_reset_families_register(self):
        first = configure_families_register()
        reset_families_register()
        assert ParametricFamilyRegister.list_registered_families() == []
        second = configure_families_register()
        assert first is not second

    def test_configure_is_idempotent(self):
        configure_gaussian_family()
        assert self.registry.get(FamilyName.GAUSSIAN) is Gaussian


class TestParametricFamilyRegister:
    def test_singleton(self):
        assert ParametricFamilyRegister() is ParametricFamilyRegister()

    def test_construct_by_name(self):
        family_cls = configure_families_register().get(FamilyName.BINOMIAL)
        assert family_cls is Binomial
        assert family_cls(n=16, p=0.25).mean() == 4.0

    def test_get_by_plain_string(self):
        configure_families_register()
        assert ParametricFamilyRegister.get("Gaussian") is Gaussian

    def test_unknown_family(self):
        configure_families_register()
        with pytest.raises(ValueError, match="No family Weibull found in register"):
            ParametricFamilyRegister.get("Weibull")

    def test_duplicate_registration(self):
        configure_families_register()
        with pytest.raises(ValueError, match="already found in register"):
            ParametricFamilyRegister.register(Gaussian)

    def test_registration_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pysatl_probability.families.registry"):
            ParametricFamilyRegister.register(Gaussian)
        assert "Registered family Gaussian" in caplog.text
