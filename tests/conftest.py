from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_probability.config import reset_settings
from pysatl_probability.families.configuration import reset_families_register
from pysatl_probability.random.source import seed_default_source

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_state() -> Generator[None, Any, None]:
    reset_families_register()
    reset_settings()
    seed_default_source()
    yield
