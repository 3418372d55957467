import random
import statistics

import pytest

from interviewkit.median import MedianFinder


def test_source_example():
    finder = MedianFinder()
    finder.add_num(1)
    finder.add_num(2)
    assert finder.find_median() == 1.5
    finder.add_num(3)
    assert finder.find_median() == 2.0


def test_single_value():
    finder = MedianFinder()
    finder.add_num(7)
    assert finder.find_median() == 7.0


def test_empty_raises():
    with pytest.raises(ValueError):
        MedianFinder().find_median()


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_matches_statistics_median(seed):
    rng = random.Random(seed)
    finder = MedianFinder()
    seen = []
    for _ in range(50):
        value = rng.randint(-100, 100)
        finder.add_num(value)
        seen.append(value)
        assert finder.find_median() == pytest.approx(statistics.median(seen))


def test_descending_input():
    finder = MedianFinder()
    values = [9, 7, 5, 3]
    for value in values:
        finder.add_num(value)
    assert finder.find_median() == statistics.median(values)