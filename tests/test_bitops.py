import random
from itertools import product

import pytest

from A5Registers.BitOps import parity, majority


def test_parity_known_words():
    assert parity(0) == 0
    assert parity(1) == 1
    assert parity(0b1011) == 1
    assert parity(0x7FFFFF) == 1     # 23 ones
    assert parity(0x3FFFFF) == 0     # 22 ones
    assert parity(0x80000000) == 1


def test_parity_is_linear():
    rng = random.Random(0x134)
    for _ in range(500):
        a = rng.getrandbits(32)
        b = rng.getrandbits(32)
        assert parity(a ^ b) == parity(a) ^ parity(b)


def test_parity_matches_popcount():
    rng = random.Random(7)
    for _ in range(200):
        w = rng.getrandbits(23)
        assert parity(w) == bin(w).count("1") % 2


@pytest.mark.parametrize("a, b, c", list(product([0, 1], repeat=3)))
def test_majority_exhaustive(a, b, c):
    assert majority(a, b, c) == int(a + b + c >= 2)


def test_majority_counts_nonzero_words_not_low_bits():
    assert majority(0x400, 0x8, 0) == 1
    assert majority(0x400, 0, 0) == 0
    assert majority(0x2000, 0x10000, 0x40000) == 1
