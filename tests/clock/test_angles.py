"""Tests for hand angle computation."""

from datetime import datetime

import pytest

from svg_clock.clock.angles import WallClockTime, hand_angles, scale_factor


def test_example_time():
    angles = hand_angles(WallClockTime(3, 15, 30))

    assert angles.hour == 97.5
    assert angles.minute == 93.0
    assert angles.second == 180.0


def test_hour_angle_all_hours_and_minutes():
    for hour in range(24):
        for minute in range(60):
            angle = hand_angles(WallClockTime(hour, minute, 0)).hour
            assert angle == (hour % 12) * 30 + minute / 2.0
            assert 0 <= angle < 360


def test_afternoon_matches_morning():
    assert hand_angles(WallClockTime(15, 40, 0)) == hand_angles(WallClockTime(3, 40, 0))


def test_minute_angle_creeps_with_seconds():
    for minute in range(60):
        for second in range(60):
            angle = hand_angles(WallClockTime(0, minute, second)).minute
            assert angle == minute * 6 + second / 10.0
            assert 0 <= angle < 360


def test_second_angle_is_discrete():
    angles = {hand_angles(WallClockTime(0, 0, second)).second for second in range(60)}
    assert angles == {float(step) for step in range(0, 360, 6)}


def test_hour_hand_ignores_seconds():
    assert hand_angles(WallClockTime(7, 20, 0)).hour == hand_angles(WallClockTime(7, 20, 59)).hour


@pytest.mark.parametrize("size,expected", [(250, 2.5), (100, 1.0), (50, 0.5), (1, 0.01)])
def test_scale_factor(size, expected):
    assert scale_factor(size) == expected


def test_from_datetime():
    time = WallClockTime.from_datetime(datetime(2024, 5, 6, 23, 4, 5, 999999))

    assert time == WallClockTime(23, 4, 5)
    assert str(time) == "23:04:05"
