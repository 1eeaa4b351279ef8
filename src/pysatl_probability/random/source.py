"""
Sources of Randomness
=====================

This module defines the random source protocol and its default implementation:

- :class:`Source` – protocol of a pseudorandom bit generator.
- :class:`Xorshift128Plus` – the xorshift128+ generator.
- :func:`default_source` / :func:`seed_default_source` – the source confined
  to the current execution context.

Notes
-----
- xorshift128+ has statistical, **not** cryptographic, quality. Never use it
  for secrets, tokens or anything an adversary may try to predict.
- A source is a mutable object. It must be owned by a single caller at a
  time; sharing one between threads without synchronization is unsupported.
- The default source is stored in a :class:`contextvars.ContextVar`. Each
  thread gets its own instance, created on first use with
  :data:`DEFAULT_SEED`, so every thread replays the same stream unless it
  re-seeds. Asyncio tasks inherit the instance of the context they were
  created in; call :func:`seed_default_source` inside a task to give it an
  independent stream.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from contextvars import ContextVar
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pysatl_probability.types import Seed

logger = logging.getLogger(__name__)

MASK64 = 0xFFFF_FFFF_FFFF_FFFF
"""Mask reducing Python integers to 64-bit words."""

DEFAULT_SEED: Seed = (42, 69)
"""Seed of the default source of every execution context."""

_FLOAT_SCALE = 2.0**-53


@runtime_checkable
class Source(Protocol):
    """Protocol for sources of uniformly distributed 64-bit words."""

    def read(self) -> int:
        """Read the next 64-bit word as a non-negative integer."""
        ...

    def read_float(self) -> float:
        """
        Read the next word as a uniform variate on ``[0, 1)``.

        The word is divided by ``2**64`` and truncated to the 53 bits a
        double can represent, so the result never rounds up to ``1.0``.
        """
        return (self.read() >> 11) * _FLOAT_SCALE


class Xorshift128Plus(Source):
    """
    The xorshift128+ pseudorandom generator.

    Parameters
    ----------
    seed : tuple[int, int], default DEFAULT_SEED
        Two 64-bit words of initial state; they must not both be zero.

    Notes
    -----
    The period is ``2**128 - 1``. Each read advances the state with three
    xor-shift steps and returns the sum (modulo ``2**64``) of the new state
    word and the word it replaced.

    References
    ----------
    .. [1] S. Vigna, "Further scramblings of Marsaglia's xorshift generators",
       Journal of Computational and Applied Mathematics, 315, 2017.
    """

    __slots__ = ("_s0", "_s1")

    def __init__(self, seed: Seed = DEFAULT_SEED) -> None:
        self._s0 = 0
        self._s1 = 0
        self.seed(seed)

    def seed(self, seed: Seed) -> Xorshift128Plus:
        """
        Reset the state to ``seed``.

        Returns
        -------
        Xorshift128Plus
            The generator itself, to allow chaining.

        Raises
        ------
        ValueError
            If both seed words are zero (the all-zero state is a fixed point).
        """
        s0, s1 = seed
        s0 &= MASK64
        s1 &= MASK64
        if s0 == 0 and s1 == 0:
            raise ValueError("Seed of Xorshift128Plus must not be all zeros")
        self._s0 = s0
        self._s1 = s1
        return self

    @property
    def state(self) -> Seed:
        """Current two-word state; seeding a new generator with it replays the stream."""
        return self._s0, self._s1

    def read(self) -> int:
        x, y = self._s0, self._s1
        self._s0 = y
        x ^= (x << 23) & MASK64
        x ^= x >> 17
        x ^= y ^ (y >> 26)
        self._s1 = x
        return (x + y) & MASK64

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(state={self.state!r})"


def read_nonzero_float(source: Source) -> float:
    """Read uniform variates from ``source`` until one is non-zero; the result is on ``(0, 1)``."""
    u = source.read_float()
    while u == 0.0:
        u = source.read_float()
    return u


_default_source: ContextVar[Xorshift128Plus] = ContextVar("default_source")


def default_source() -> Xorshift128Plus:
    """
    Return the default source of the current execution context.

    The source is created with :data:`DEFAULT_SEED` the first time it is
    requested in a context.
    """
    try:
        return _default_source.get()
    except LookupError:
        logger.debug("Creating default source with seed %s", DEFAULT_SEED)
        source = Xorshift128Plus(DEFAULT_SEED)
        _default_source.set(source)
        return source


def seed_default_source(seed: Seed = DEFAULT_SEED) -> Xorshift128Plus:
    """
    Replace the default source of the current execution context.

    Parameters
    ----------
    seed : tuple[int, int], default DEFAULT_SEED
        Seed of the new source.

    Returns
    -------
    Xorshift128Plus
        The newly installed source.
    """
    logger.debug("Re-seeding default source with %s", seed)
    source = Xorshift128Plus(seed)
    _default_source.set(source)
    return source


__all__ = [
    "Source",
    "Xorshift128Plus",
    "DEFAULT_SEED",
    "default_source",
    "seed_default_source",
    "read_nonzero_float",
]
