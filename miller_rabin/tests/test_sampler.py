from collections import Counter

import pytest

from random_source import SeededRandomSource, SystemRandomSource

from ..sampler import bisect_randint, uniform_randint

SAMPLERS = [uniform_randint, bisect_randint]
TRIES = 4000


def test_single_value() -> None:
    for sampler in SAMPLERS:
        assert sampler(5, 5) == 5
        assert sampler(-3, -3) == -3
        assert sampler(1 << 300, 1 << 300) == 1 << 300


def test_in_range() -> None:
    source = SeededRandomSource(2024)
    for sampler in SAMPLERS:
        for low, high in [(0, 1), (2, 10), (-50, 50), (2, 1 << 512)]:
            for _ in range(200):
                assert low <= sampler(low, high, source) <= high


def test_uniform() -> None:
    source = SeededRandomSource(1)
    counts = Counter(uniform_randint(0, 2, source) for _ in range(3 * 1000))
    assert set(counts) == {0, 1, 2}
    for x in range(3):
        assert 800 < counts[x] < 1200


def test_bisect_bias() -> None:
    # [5, 7] is split into [5, 6] and [7, 7], so 7 comes up half of the time
    source = SeededRandomSource(2)
    counts = Counter(bisect_randint(5, 7, source) for _ in range(TRIES))
    assert set(counts) == {5, 6, 7}
    assert counts[7] > 1700
    assert 800 < counts[5] < 1200
    assert 800 < counts[6] < 1200


def test_bisect_power_of_two() -> None:
    source = SeededRandomSource(3)
    counts = Counter(bisect_randint(0, 3, source) for _ in range(TRIES))
    for x in range(4):
        assert 800 < counts[x] < 1200


def test_default_source() -> None:
    for sampler in SAMPLERS:
        assert 2 <= sampler(2, 1000) <= 1000
        assert 2 <= sampler(2, 1000, SystemRandomSource()) <= 1000


def test_bad_range() -> None:
    for sampler in SAMPLERS:
        with pytest.raises(ValueError):  # noqa: PT011
            sampler(10, 9)
