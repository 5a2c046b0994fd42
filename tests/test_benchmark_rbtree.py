import random

import pytest

from bazar.rbtree import RedBlackTree

SIZES = [10_000, 100_000]


def fill(keys):
    tree = RedBlackTree()
    for key in keys:
        tree.add(key)
    return tree


def drain(tree, keys):
    for key in keys:
        tree.remove(key)


@pytest.mark.benchmark
@pytest.mark.parametrize("size", SIZES)
def test_insert(benchmark, size):
    keys = random.Random(size).sample(range(size * 10), size)
    benchmark(fill, keys)


@pytest.mark.benchmark
@pytest.mark.parametrize("size", SIZES)
def test_remove(benchmark, size):
    keys = random.Random(size).sample(range(size * 10), size)
    benchmark.pedantic(drain, setup=lambda: ((fill(keys), keys), {}), rounds=3)


@pytest.mark.benchmark
@pytest.mark.parametrize("size", SIZES)
def test_iterate(benchmark, size):
    tree = fill(range(size))
    benchmark(list, tree)
