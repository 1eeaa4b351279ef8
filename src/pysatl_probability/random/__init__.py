"""
Random subpackage

Pseudorandom sources consumed by the sampling capability of distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .source import (
    DEFAULT_SEED,
    Source,
    Xorshift128Plus,
    default_source,
    read_nonzero_float,
    seed_default_source,
)

__all__ = [
    "Source",
    "Xorshift128Plus",
    "DEFAULT_SEED",
    "default_source",
    "seed_default_source",
    "read_nonzero_float",
]
