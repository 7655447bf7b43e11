import math

import pytest

from dsakit.recursion import (
    factorial,
    fibonacci,
    fibonacci_series,
    head_recursion,
    indirect_recursion,
    nested_recursion,
    power,
    sum_of_naturals,
    tail_recursion,
    taylor_e,
    tower_of_hanoi,
    tree_recursion,
)


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_series_agrees_with_fibonacci():
    assert fibonacci_series(12) == [fibonacci(i) for i in range(13)]


@pytest.mark.parametrize("n", [0, 1])
def test_fibonacci_series_minimum(n):
    assert fibonacci_series(n) == [0, 1]


def test_indirect_recursion_sequence():
    assert indirect_recursion(20) == [20, 19, 9, 8, 4, 3, 1]


def test_indirect_recursion_nonpositive():
    assert indirect_recursion(0) == []
    assert indirect_recursion(-5) == []


@pytest.mark.parametrize("m", [-3, 2, 7])
def test_power_exponent_law(m):
    for a in range(5):
        for b in range(5):
            assert power(m, a + b) == power(m, a) * power(m, b)


def test_power_zero_and_one():
    assert power(9, 0) == 1
    assert power(9, 1) == 9


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


def test_sum_of_naturals_base():
    assert sum_of_naturals(1) == 1


@pytest.mark.parametrize("n", range(2, 40))
def test_sum_of_naturals_step(n):
    assert sum_of_naturals(n) - sum_of_naturals(n - 1) == n


def test_sum_of_naturals_invalid():
    with pytest.raises(ValueError):
        sum_of_naturals(0)


@pytest.mark.parametrize("x", [0, 1, 2, -1, 0.5])
def test_taylor_e_converges(x):
    assert taylor_e(x, 40) == pytest.approx(math.exp(x))


def test_taylor_e_zero_terms():
    assert taylor_e(5, 0) == 1


def test_taylor_e_negative_terms():
    with pytest.raises(ValueError):
        taylor_e(1, -1)


def test_hanoi_single_disc():
    assert tower_of_hanoi(1, "A", "B", "C") == [("A", "C")]


def test_hanoi_no_discs():
    assert tower_of_hanoi(0, "A", "B", "C") == []


@pytest.mark.parametrize("n", range(1, 9))
def test_hanoi_moves_are_legal_and_complete(n):
    moves = tower_of_hanoi(n, "A", "B", "C")
    assert len(moves) == 2**n - 1
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for src, dst in moves:
        disc = pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disc
        pegs[dst].append(disc)
    assert pegs["C"] == list(range(n, 0, -1))


def test_tail_and_head_recursion():
    assert tail_recursion(6) == list(range(6, 0, -1))
    assert head_recursion(6) == list(reversed(tail_recursion(6)))
    assert tail_recursion(0) == []


@pytest.mark.parametrize("n", range(1, 8))
def test_tree_recursion_shape(n):
    values = tree_recursion(n)
    assert len(values) == 2**n - 1
    assert values[0] == n
    assert values.count(1) == 2 ** (n - 1)


def test_nested_recursion_known_value():
    assert nested_recursion(95) == 91


@pytest.mark.parametrize("n", [-50, 0, 50, 100])
def test_nested_recursion_constant_below_threshold(n):
    assert nested_recursion(n) == nested_recursion(95)


@pytest.mark.parametrize("n", [101, 150, 1000])
def test_nested_recursion_above_threshold(n):
    assert nested_recursion(n) == n - 10