import pytest

from services.segments.formulas import (
    convert_pace_to_400,
    make_distance,
    make_duration,
    make_pace,
)


def test_make_duration():
    assert make_duration({"distance": 10, "pace": "05:00"}) == "00:50:00"
    assert make_duration({"distance": 12.93, "pace": "05:10"}) == "01:06:48"
    assert make_duration({"distance": "10", "pace": "05:10"}) == "00:51:40"


def test_make_duration_missing_inputs_is_zero():
    assert make_duration({"pace": "05:00"}) == "00:00:00"
    assert make_duration({"distance": 10}) == "00:00:00"


def test_make_pace():
    assert make_pace({"distance": 9, "duration": "00:45:00"}) == "05:00"
    # 1000 / 3 = 333.33 -> 05:33
    assert make_pace({"distance": 3, "duration": "00:16:40"}) == "05:33"


def test_make_pace_zero_distance_is_zero_pace():
    assert make_pace({"distance": 0, "duration": "00:45:00"}) == "00:00"
    assert make_pace({"duration": "00:45:00"}) == "00:00"


def test_make_distance():
    assert make_distance({"duration": "00:50:00", "pace": "05:00"}) == pytest.approx(10.0)
    assert make_distance({"duration": "00:30:00", "pace": "04:45"}) == pytest.approx(6.316)


def test_make_distance_zero_divisor():
    assert make_distance({"duration": "00:50:00", "pace": "00:00"}) == 0
    assert make_distance({"duration": "00:00:00", "pace": "05:00"}) == 0
    assert make_distance({}) == 0


def test_convert_pace_to_400():
    assert convert_pace_to_400("05:00") == "02:00"
    assert convert_pace_to_400("03:30") == "01:24"
    # 245 s * 0.4 = 98 s
    assert convert_pace_to_400("04:05") == "01:38"
    assert convert_pace_to_400(None) == "00:00"
