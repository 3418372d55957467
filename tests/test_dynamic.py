import pytest

from interviewkit.dynamic import fib_bottom_up, fib_memo, fib_recursive, max_score


def test_max_score_single_pair():
    assert max_score([1, 2]) == 1


def test_max_score_four_numbers():
    assert max_score([3, 4, 6, 8]) == 11


def test_max_score_six_numbers():
    assert max_score([1, 2, 3, 4, 5, 6]) == 14


def test_max_score_empty():
    assert max_score([]) == 0


def test_max_score_equal_pair():
    assert max_score([5, 5]) == 5


def test_max_score_independent_of_order():
    assert max_score([8, 6, 4, 3]) == max_score([3, 4, 6, 8])


def test_max_score_at_least_any_fixed_pairing():
    nums = [3, 4, 6, 8]
    # Pairing (3,4) first and (6,8) second scores 1*1 + 2*2.
    assert max_score(nums) >= 1 * 1 + 2 * 2


@pytest.mark.parametrize("func", [fib_recursive, fib_memo, fib_bottom_up])
def test_fib_first_two_are_one(func):
    assert func(1) == 1
    assert func(2) == 1


def test_fib_methods_agree():
    for n in range(1, 22):
        assert fib_recursive(n) == fib_memo(n) == fib_bottom_up(n)


def test_fib_recurrence_holds():
    for n in range(3, 200):
        assert fib_bottom_up(n) == fib_bottom_up(n - 1) + fib_bottom_up(n - 2)


def test_fib_memo_handles_large_positions():
    assert fib_memo(10000) == fib_bottom_up(10000)


@pytest.mark.parametrize("func", [fib_recursive, fib_memo, fib_bottom_up])
@pytest.mark.parametrize("n", [0, -3])
def test_fib_rejects_non_positive(func, n):
    with pytest.raises(ValueError):
        func(n)