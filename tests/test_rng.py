import pytest

from aiapawn import rng


def test_values_stay_in_range():
    rng.seed(1)
    values = [rng.random_int(0, 3) for _ in range(500)]
    assert min(values) >= 0
    assert max(values) <= 3
    assert set(values) == {0, 1, 2, 3}


def test_single_value_range():
    assert rng.random_int(5, 5) == 5


def test_seed_makes_sequence_repeatable():
    rng.seed(42)
    first = [rng.random_int(0, 100) for _ in range(20)]
    rng.seed(42)
    second = [rng.random_int(0, 100) for _ in range(20)]
    assert first == second


def test_empty_range_raises():
    with pytest.raises(ValueError):
        rng.random_int(3, 2)