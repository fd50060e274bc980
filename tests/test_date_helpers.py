from datetime import date, datetime

import pytest

from utils.date_helpers import parse_date, start_of_month, start_of_week


def test_parse_date():
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date(" 2024/01/15 ") == date(2024, 1, 15)
    assert parse_date("2024-01-15T10:30:00") == date(2024, 1, 15)
    assert parse_date("2024-01-15 10:30") == date(2024, 1, 15)
    assert parse_date("2024-02-30") is None
    assert parse_date("") is None
    assert parse_date(None) is None


@pytest.mark.parametrize("raw", [
    "2024-01-15junk",
    "2024-01-150",
    "2024-01-15 junk",
    "2024-01-15Tnoon",
])
def test_parse_date_rejects_trailing_text(raw):
    assert parse_date(raw) is None


def test_start_of_week():
    assert start_of_week(date(2024, 1, 17)) == date(2024, 1, 15)
    assert start_of_week(date(2024, 1, 15)) == date(2024, 1, 15)
    assert start_of_week(date(2024, 1, 21)) == date(2024, 1, 15)
    # crosses a month boundary
    assert start_of_week(datetime(2024, 3, 2, 8, 0)) == date(2024, 2, 26)


def test_start_of_month():
    assert start_of_month(date(2024, 1, 17)) == date(2024, 1, 1)
    assert start_of_month(datetime(2024, 2, 29, 23, 0)) == date(2024, 2, 1)
