"""
Tests for the pseudorandom sources.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading

import pytest

from pysatl_probability.random import (
    DEFAULT_SEED,
    Source,
    Xorshift128Plus,
    default_source,
    read_nonzero_float,
    seed_default_source,
)


class _ZeroThenHalf(Source):
    """Source returning a zero word once, then words mapping to 0.5."""

    def __init__(self) -> None:
        self.calls = 0

    def read(self) -> int:
        self.calls += 1
        return 0 if self.calls == 1 else 1 << 63


class TestXorshift128Plus:
    def test_first_word(self):
        assert Xorshift128Plus((42, 69)).read() == 352324404

    def test_identical_seeds_give_identical_streams(self):
        first = Xorshift128Plus((42, 69))
        second = Xorshift128Plus((42, 69))
        assert [first.read() for _ in range(1000)] == [second.read() for _ in range(1000)]

    def test_different_seeds_give_different_streams(self):
        first = Xorshift128Plus((42, 69))
        second = Xorshift128Plus((69, 42))
        assert [first.read() for _ in range(10)] != [second.read() for _ in range(10)]

    def test_words_are_64_bit(self):
        source = Xorshift128Plus()
        assert all(0 <= source.read() < 2**64 for _ in range(1000))

    def test_floats_are_in_unit_interval(self):
        source = Xorshift128Plus()
        values = [source.read_float() for _ in range(10_000)]
        assert all(0.0 <= u < 1.0 for u in values)
        assert 0.45 < sum(values) / len(values) < 0.55

    def test_zero_seed_rejected(self):
        with pytest.raises(ValueError, match="must not be all zeros"):
            Xorshift128Plus((0, 0))

    def test_seed_words_are_masked(self):
        assert Xorshift128Plus((2**64 + 42, 69)).state == (42, 69)

    def test_state_replays_stream(self):
        source = Xorshift128Plus()
        for _ in range(17):
            source.read()
        replay = Xorshift128Plus(source.state)
        assert [source.read() for _ in range(100)] == [replay.read() for _ in range(100)]

    def test_reseed_restarts_stream(self):
        source = Xorshift128Plus()
        head = [source.read() for _ in range(5)]
        assert source.seed(DEFAULT_SEED) is source
        assert [source.read() for _ in range(5)] == head

    def test_is_source(self):
        assert isinstance(Xorshift128Plus(), Source)


class TestReadNonzeroFloat:
    def test_skips_zero(self):
        source = _ZeroThenHalf()
        assert read_nonzero_float(source) == 0.5
        assert source.calls == 2


class TestDefaultSource:
    def test_default_source_is_seeded_with_default_seed(self):
        assert default_source().read() == Xorshift128Plus(DEFAULT_SEED).read()

    def test_default_source_is_reused(self):
        assert default_source() is default_source()

    def test_seed_default_source_replaces_source(self):
        previous = default_source()
        source = seed_default_source((1, 2))
        assert source is not previous
        assert default_source() is source
        assert source.state == (1, 2)

    def test_threads_get_their_own_source(self):
        default_source().read()
        results = []

        def worker():
            results.append((default_source(), default_source().read()))

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        (thread_source, first_word), = results
        assert thread_source is not default_source()
        assert first_word == Xorshift128Plus(DEFAULT_SEED).read()
