"""Shared fixtures and instance builders for the solver tests."""

import random

import pytest

from knapsack01.business_objects.problem import Problem


def random_problem(seed, max_items=10, max_value=60, max_weight=30):
    """Small random instance; capacity is roughly half the total weight."""
    rng = random.Random(seed)
    n = rng.randint(0, max_items)
    pairs = [(rng.randint(0, max_value), rng.randint(1, max_weight)) for _ in range(n)]
    total = sum(w for _, w in pairs)
    capacity = rng.randint(0, max(1, total // 2 + 5))
    return Problem.from_pairs(pairs, capacity)


@pytest.fixture
def four_items():
    """Optimum 44 (items 0 and 3)."""
    return Problem.from_pairs([(16, 2), (19, 3), (23, 4), (28, 5)], capacity=7)


@pytest.fixture
def three_items():
    """Optimum 11 (items 0 and 1, weight 9)."""
    return Problem.from_pairs([(5, 4), (6, 5), (3, 2)], capacity=9)


@pytest.fixture
def nineteen_items():
    """A larger instance for cross-checking the exact solvers."""
    pairs = [
        (1945, 4990), (321, 1142), (2945, 7390), (4136, 10372), (1107, 3114),
        (1022, 2744), (1101, 3102), (2890, 7280), (962, 2624), (1060, 3020),
        (805, 2310), (689, 2078), (1513, 3926), (3878, 9656), (13504, 32708),
        (1865, 4830), (667, 2034), (1833, 4766), (16553, 40006),
    ]
    return Problem.from_pairs(pairs, capacity=31181)
