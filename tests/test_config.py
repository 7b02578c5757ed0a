import pytest

from parbench.config import Settings, load_settings


def test_load_settings_overrides_skip_none():
    s = load_settings(mode="thread", workers=None)
    assert s.mode == "thread"
    assert s.workers == Settings().workers


def test_invalid_mode_and_workers():
    with pytest.raises(ValueError):
        Settings(mode="gpu")
    with pytest.raises(ValueError):
        Settings(workers=0)


def test_scaled():
    s = Settings(filter_sort_count=1000, min_max_count=2000, text_lines=10, sum_length=100, math_count=30)
    half = s.scaled(0.5)
    assert half.filter_sort_count == 500
    assert half.min_max_count == 1000
    assert half.text_lines == 5
    assert half.sum_length == 50
    assert half.math_count == 15
    assert half.sum_arrays == s.sum_arrays
    assert half.factorial_max == 20
    with pytest.raises(ValueError):
        s.scaled(-1)


def test_scaled_rejects_zero_and_empty_min_max():
    s = Settings(min_max_count=1000)
    with pytest.raises(ValueError):
        s.scaled(0)
    # 1000 * 0.0001 rounds down to an empty min/max dataset.
    with pytest.raises(ValueError):
        s.scaled(0.0001)
    assert s.scaled(0.001).min_max_count == 1


def test_min_max_count_must_be_positive():
    with pytest.raises(ValueError):
        Settings(min_max_count=0)
