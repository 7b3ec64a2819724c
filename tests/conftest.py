import numpy as np
import pytest

from pairheap.heap import Heap


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def bulk_heap():
    # elements 101..104 stand in for A..D
    return Heap.from_arrays([5, 3, 8, 1], [101, 102, 103, 104], 4, 2)
