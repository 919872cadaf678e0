import random
from typing import Any

import pytest

from zipfdist import ZipfDistribution, ZipfTableDistribution

REQUESTS = 10000


def draw_many(dist: Any, rng: random.Random) -> None:
    for _ in range(REQUESTS):
        dist(rng)


@pytest.mark.parametrize("n", [30, 300, 1000])
def test_rejection_inversion(benchmark, n):
    def setup():
        return (ZipfDistribution(n, 1.0), random.Random(n)), {}

    benchmark.pedantic(draw_many, setup=setup, rounds=10)


@pytest.mark.parametrize("n", [30, 300, 1000])
def test_table(benchmark, n):
    def setup():
        return (ZipfTableDistribution(n, 1.0), random.Random(n)), {}

    benchmark.pedantic(draw_many, setup=setup, rounds=10)


@pytest.mark.parametrize("n", [1000, 100000])
def test_table_setup(benchmark, n):
    benchmark.pedantic(lambda: ZipfTableDistribution(n, 1.0), rounds=5)


def test_rejection_inversion_unbounded(benchmark):
    def setup():
        return (ZipfDistribution(s=1.001, q=10.0), random.Random(1)), {}

    benchmark.pedantic(draw_many, setup=setup, rounds=10)
