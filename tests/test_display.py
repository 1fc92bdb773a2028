"""Tests for time formatting."""

import re

import pytest

from redflash.timer.display import format_time


@pytest.mark.parametrize("seconds, text", [
    (300, "5:00"),
    (61, "1:01"),
    (60, "1:00"),
    (59, "0:59"),
    (0, "0:00"),
    (600, "10:00"),
    (36000, "600:00"),
])
def test_format_time(seconds, text):
    assert format_time(seconds) == text


def test_negative_clamps_to_zero():
    assert format_time(-12) == "0:00"


def test_minutes_unpadded_seconds_two_digits():
    pattern = re.compile(r"^(0|[1-9]\d*):[0-5]\d$")
    for s in range(0, 36001, 7):
        text = format_time(s)
        assert pattern.match(text), text
        minutes, secs = text.split(":")
        assert int(minutes) * 60 + int(secs) == s
