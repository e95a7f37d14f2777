# tests/test_validators.py
import pytest

from config.settings import config
from utils.exceptions import ValidationError
from utils.validators import (
    validate_cycle_count,
    validate_intersection_name,
    validate_lane_count,
    validate_lane_counts,
    validate_seed,
)


@pytest.mark.parametrize("raw, expected", [("3", 3), (" 12 ", 12), (0, 0), (-4, 0), ("-1", 0), (2.0, 2)])
def test_lane_count_parsing(raw, expected):
    assert validate_lane_count(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", None, "1.5", 2.5, True])
def test_lane_count_rejects_non_integers(raw):
    with pytest.raises(ValidationError):
        validate_lane_count(raw)


def test_lane_counts_requires_configured_lane_count():
    assert validate_lane_counts(["1", 2, -3, "4"], config.lane_count) == [1, 2, 0, 4]
    with pytest.raises(ValidationError):
        validate_lane_counts([1, 2, 3, 4, 5], config.lane_count)
    with pytest.raises(ValidationError):
        validate_lane_counts(None, config.lane_count)
    with pytest.raises(ValidationError):
        validate_lane_counts("1234", config.lane_count)


def test_lane_counts_follow_given_lane_count():
    assert validate_lane_counts([1, 2], 2) == [1, 2]
    with pytest.raises(ValidationError, match="Expected 2 lane counts, got 4"):
        validate_lane_counts([1, 2, 3, 4], 2)


@pytest.mark.parametrize("raw", ["0", 0, "-2", "x", "", None])
def test_cycle_count_rejects(raw):
    with pytest.raises(ValidationError):
        validate_cycle_count(raw)


def test_cycle_count_accepts_and_limits():
    assert validate_cycle_count("5") == 5
    assert validate_cycle_count(10, maximum=10) == 10
    with pytest.raises(ValidationError):
        validate_cycle_count(11, maximum=10)


def test_intersection_name():
    assert validate_intersection_name("Main_1", config.max_name_length) == "Main_1"
    assert len(validate_intersection_name("a" * 80, config.max_name_length)) == 63
    assert validate_intersection_name("abcdef", 3) == "abc"
    with pytest.raises(ValidationError):
        validate_intersection_name("", config.max_name_length)


def test_seed():
    assert validate_seed(None) is None
    assert validate_seed("") is None
    assert validate_seed("42") == 42
    with pytest.raises(ValidationError):
        validate_seed("-5")
